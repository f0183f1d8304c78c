"""
Face feature extraction for image-based similarity search.
Deterministic stand-in for a real face encoder; not face recognition.
"""

from abc import ABC, abstractmethod
import base64
import binascii
import hashlib
from typing import List


class IFaceFeatureExtractor(ABC):
    """Abstract interface for face feature extractors."""

    @abstractmethod
    def extract(self, image: bytes) -> List[float]:
        """Generate a feature vector for the given image bytes."""
        pass

    @abstractmethod
    def get_dimension(self) -> int:
        """Get the dimension of the feature vectors."""
        pass


class DeterministicHashFaceEncoder(IFaceFeatureExtractor):
    """Deterministic hash-based feature extractor.

    Expands a SHA-256 digest of the image bytes into ``dimension`` values in
    [-1, 1], so the same image always maps to the same vector. Useful for the
    demo and for tests without a face recognition model.
    """

    def __init__(self, dimension: int = 128):
        if dimension < 1:
            raise ValueError("dimension must be >= 1")
        self.dimension = dimension

    def extract(self, image: bytes) -> List[float]:
        """Generate a deterministic feature vector from image bytes."""
        seed = hashlib.sha256(image).digest()

        vector: List[float] = []
        counter = 0
        while len(vector) < self.dimension:
            block = hashlib.sha256(seed + counter.to_bytes(4, "big")).digest()
            for i in range(0, len(block), 4):
                if len(vector) >= self.dimension:
                    break
                value = int.from_bytes(block[i:i + 4], "big")
                # Normalize to [0, 1] and then map to [-1, 1]
                vector.append((value / (2**32 - 1)) * 2 - 1)
            counter += 1

        return vector

    def extract_base64(self, encoded: str) -> List[float]:
        """Extract features from a base64 image, accepting data-URL prefixes."""
        return self.extract(decode_image(encoded))

    def get_dimension(self) -> int:
        """Get the dimension of the feature vectors."""
        return self.dimension


def decode_image(encoded: str) -> bytes:
    """Decode a base64 image payload (``data:image/...;base64,`` prefix optional)."""
    if encoded.startswith("data:") and "," in encoded:
        encoded = encoded.split(",", 1)[1]
    try:
        data = base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValueError(f"Invalid base64 image data: {e}")
    if not data:
        raise ValueError("Image data is empty")
    return data
