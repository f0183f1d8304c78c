"""
Tagged result records returned by the search and aggregation engines.
"""

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Generic, List, Optional, Tuple, TypeVar

T = TypeVar("T")


@dataclass
class SearchHit(Generic[T]):
    """Represents one ranked hit."""

    id: str
    """Qualified identifier of the matched record"""

    source: T
    """The matched record itself"""

    score: float
    """Relevance score (rank decay for incidents, similarity for faces)"""

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "score": self.score, "source": self.source.to_dict()}


@dataclass
class SearchResponse(Generic[T]):
    """Hits for one page plus the total number of matches."""

    total: int
    hits: List[SearchHit[T]]
    took_ms: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total": self.total,
            "took_ms": self.took_ms,
            "hits": [hit.to_dict() for hit in self.hits],
        }


@dataclass(frozen=True)
class Bucket:
    key: str
    count: int


@dataclass(frozen=True)
class FrequencyTable:
    """Document counts per distinct field value, in first-seen order."""

    field: str
    buckets: Tuple[Bucket, ...]

    @property
    def total(self) -> int:
        return sum(b.count for b in self.buckets)

    def as_dict(self) -> Dict[str, int]:
        return {b.key: b.count for b in self.buckets}


@dataclass(frozen=True)
class TimePoint:
    date: date
    count: int


@dataclass(frozen=True)
class TimeSeries:
    """Daily incident counts in ascending date order."""

    points: Tuple[TimePoint, ...]


@dataclass(frozen=True)
class KeywordCount:
    keyword: str
    count: int


@dataclass(frozen=True)
class TopKeywords:
    entries: Tuple[KeywordCount, ...]


@dataclass(frozen=True)
class ResolutionTimeStat:
    """
    Mean days from filing to resolution.

    ``average_days`` is None when no resolved case records a resolution
    date; the metric is then unavailable rather than estimated.
    """

    average_days: Optional[float]
    resolved_count: int
    measured_count: int


@dataclass(frozen=True)
class AnalyticsSnapshot:
    total_count: int
    by_type: FrequencyTable
    by_status: FrequencyTable
    by_priority: FrequencyTable
    by_location: FrequencyTable
    daily_counts: TimeSeries
    top_keywords: TopKeywords
    resolution: ResolutionTimeStat


@dataclass(frozen=True)
class HeatmapPoint:
    lat: float
    lon: float
    weight: int
    type: str
    count: int = 1


@dataclass(frozen=True)
class HeatmapData:
    points: Tuple[HeatmapPoint, ...]
    total: int
    by_type: FrequencyTable
    by_priority: FrequencyTable
    by_status: FrequencyTable
