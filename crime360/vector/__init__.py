"""
Facial similarity search over person records.
"""

from .similarity import cosine_similarity
from .index import FaceIndex
from .features import IFaceFeatureExtractor, DeterministicHashFaceEncoder, decode_image

__all__ = [
    'cosine_similarity',
    'FaceIndex',
    'IFaceFeatureExtractor',
    'DeterministicHashFaceEncoder',
    'decode_image'
]
