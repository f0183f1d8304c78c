"""
Cosine similarity between facial feature vectors.
"""

from typing import Sequence, Union

import numpy as np

VectorLike = Union[Sequence[float], np.ndarray]


def cosine_similarity(a: VectorLike, b: VectorLike) -> float:
    """
    Cosine similarity of two feature vectors, in [-1, 1].

    Vectors of different length, empty vectors and zero-magnitude vectors
    all score 0.0 instead of raising.
    """
    va = np.asarray(a, dtype=np.float64).ravel()
    vb = np.asarray(b, dtype=np.float64).ravel()
    if va.size == 0 or va.shape != vb.shape:
        return 0.0

    norm_a = np.linalg.norm(va)
    norm_b = np.linalg.norm(vb)
    if norm_a == 0 or norm_b == 0:
        return 0.0

    similarity = float(np.dot(va, vb) / (norm_a * norm_b))
    if not np.isfinite(similarity):
        return 0.0
    return float(np.clip(similarity, -1.0, 1.0))
