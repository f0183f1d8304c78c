"""
Engine facade used by the API and the CLI.
Stateless apart from the immutable record store it is given.
"""

from typing import Optional

from .aggregation import frequency, heatmap, snapshot
from .config import get_face_match_threshold
from .fields import IncidentField
from .geo import BoundingBox
from .query import DateRange, QuerySpec
from .results import AnalyticsSnapshot, FrequencyTable, HeatmapData, SearchResponse
from .schema import IncidentRecord, PersonRecord
from .search_service import search_incidents
from .store import RecordStore, load_store
from ..util.logging import logger
from ..vector.index import FaceIndex
from ..vector.similarity import VectorLike


class OperationFailedError(Exception):
    """Generic failure signal surfaced to callers of the engine."""
    pass


class Crime360Engine:
    """Search, face matching and analytics over one record store."""

    def __init__(self, store: RecordStore):
        self.store = store
        self.face_index = FaceIndex(store.persons)

    def search(self, query: Optional[QuerySpec] = None) -> SearchResponse[IncidentRecord]:
        """Full-text and filtered incident search."""
        try:
            return search_incidents(self.store.incidents, query or QuerySpec())
        except Exception as e:
            logger.log_failure("search.incidents", e)
            raise OperationFailedError("Incident search failed") from e

    def search_by_similarity(self, query_vector: VectorLike, threshold: Optional[float] = None,
                             top_k: Optional[int] = None) -> SearchResponse[PersonRecord]:
        """Rank persons of interest by facial similarity."""
        if threshold is None:
            threshold = get_face_match_threshold()
        try:
            return self.face_index.search(query_vector, threshold, top_k)
        except Exception as e:
            logger.log_failure("search.faces", e)
            raise OperationFailedError("Face search failed") from e

    def aggregate_by(self, field: IncidentField) -> FrequencyTable:
        """Frequency table of one incident field over the whole store."""
        try:
            table = frequency(self.store.incidents, field)
        except Exception as e:
            logger.log_failure("aggregation.frequency", e, {"field": str(field)})
            raise OperationFailedError("Aggregation failed") from e
        logger.log_aggregation("frequency", len(self.store.incidents), {"field": table.field})
        return table

    def aggregate_snapshot(self, date_range: Optional[DateRange] = None) -> AnalyticsSnapshot:
        """Composite dashboard summary, optionally limited to a filing-date range."""
        try:
            return snapshot(self.store.incidents, date_range)
        except Exception as e:
            logger.log_failure("aggregation.snapshot", e)
            raise OperationFailedError("Analytics snapshot failed") from e

    def heatmap(self, bounds: Optional[BoundingBox] = None) -> HeatmapData:
        try:
            return heatmap(self.store.incidents, bounds)
        except Exception as e:
            logger.log_failure("aggregation.heatmap", e)
            raise OperationFailedError("Heatmap aggregation failed") from e

    def get_incident(self, qualified_id: str) -> Optional[IncidentRecord]:
        return self.store.get_incident(qualified_id)

    def get_person(self, qualified_id: str) -> Optional[PersonRecord]:
        return self.store.get_person(qualified_id)


def create_engine(seed_path: Optional[str] = None) -> Crime360Engine:
    """Build an engine over the configured seed data."""
    return Crime360Engine(load_store(seed_path))
