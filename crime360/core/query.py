"""
Query values built per call by engine callers.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional, Tuple

from .fields import IncidentField
from .schema import GeoPoint, parse_date


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class DateRange:
    """Inclusive range of filing dates; either bound may be open."""

    start: Optional[date] = None
    end: Optional[date] = None

    def __post_init__(self):
        # Timestamps are truncated to their day
        if self.start is not None:
            object.__setattr__(self, "start", parse_date(self.start))
        if self.end is not None:
            object.__setattr__(self, "end", parse_date(self.end))

    def contains(self, day: date) -> bool:
        if self.start is not None and day < self.start:
            return False
        if self.end is not None and day > self.end:
            return False
        return True


@dataclass(frozen=True)
class GeoRadius:
    center: GeoPoint
    radius_km: float


@dataclass(frozen=True)
class IncidentFilters:
    statuses: Tuple[str, ...] = ()
    types: Tuple[str, ...] = ()
    priorities: Tuple[str, ...] = ()
    date_range: Optional[DateRange] = None
    geo: Optional[GeoRadius] = None

    def is_empty(self) -> bool:
        return not (self.statuses or self.types or self.priorities or self.date_range or self.geo)


@dataclass(frozen=True)
class SortSpec:
    field: IncidentField
    order: SortOrder = SortOrder.ASC


@dataclass(frozen=True)
class QuerySpec:
    """
    One incident search request.

    ``size`` of None or 0 means the configured default page size.
    """

    text: Optional[str] = None
    filters: IncidentFilters = field(default_factory=IncidentFilters)
    sort: Tuple[SortSpec, ...] = ()
    offset: int = 0
    size: Optional[int] = None
