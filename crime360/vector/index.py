"""
Face similarity index over person records.
Ranks persons of interest by cosine similarity to a query feature vector.
"""

import time
from typing import Iterable, List, Optional, Tuple

import numpy as np

from ..core.results import SearchHit, SearchResponse
from ..core.schema import PersonRecord
from ..util.logging import logger
from .similarity import VectorLike, cosine_similarity


class FaceIndex:
    """In-memory face index using cosine similarity.

    Feature vectors are converted to numpy arrays once at construction; the
    person records themselves are never copied or mutated.
    """

    def __init__(self, persons: Iterable[PersonRecord]):
        self._entries: Tuple[Tuple[PersonRecord, np.ndarray], ...] = tuple(
            (person, np.asarray(person.features, dtype=np.float64))
            for person in persons
        )

    def __len__(self) -> int:
        return len(self._entries)

    def score_all(self, query_vector: VectorLike) -> List[Tuple[PersonRecord, float]]:
        """Similarity of the query with every person, in index order."""
        query = np.asarray(query_vector, dtype=np.float64)
        return [(person, cosine_similarity(query, vector)) for person, vector in self._entries]

    def search(self, query_vector: VectorLike, threshold: float, top_k: Optional[int] = None) -> SearchResponse[PersonRecord]:
        """
        Rank persons whose similarity to ``query_vector`` is at least ``threshold``.

        Args:
            query_vector: Facial feature vector to match
            threshold: Minimum similarity, a fraction in [0, 1]
            top_k: Optional cap on returned hits; ``total`` still counts all matches

        Returns:
            SearchResponse ordered by descending similarity, ties in index order
        """
        start_time = time.perf_counter()

        scored = [(person, score) for person, score in self.score_all(query_vector) if score >= threshold]
        # sorted() is stable, so equal scores keep index order
        ranked = sorted(scored, key=lambda item: item[1], reverse=True)
        returned = ranked if top_k is None else ranked[:max(0, top_k)]

        hits = [SearchHit(id=person.qualified_id, source=person, score=score) for person, score in returned]

        took_ms = round((time.perf_counter() - start_time) * 1000, 3)
        logger.log_search("faces", took_ms, len(ranked), len(hits), {
            "threshold": threshold,
            "dimension": int(np.asarray(query_vector).size),
        })

        return SearchResponse(total=len(ranked), hits=hits, took_ms=took_ms)
