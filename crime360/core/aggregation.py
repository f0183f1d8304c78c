"""
Aggregations behind the dashboards: frequency tables, daily time series,
top keywords, resolution time, the analytics snapshot and the crime heatmap.
"""

from collections import Counter
from typing import Dict, Optional, Sequence

from .fields import IncidentField, bucket_key, resolve
from .geo import BoundingBox
from .query import DateRange
from .results import (
    AnalyticsSnapshot,
    Bucket,
    FrequencyTable,
    HeatmapData,
    HeatmapPoint,
    KeywordCount,
    ResolutionTimeStat,
    TimePoint,
    TimeSeries,
    TopKeywords,
)
from .schema import IncidentRecord, IncidentStatus
from ..util.logging import logger

TOP_KEYWORDS_LIMIT = 10


def frequency(records: Sequence[IncidentRecord], field: IncidentField) -> FrequencyTable:
    """Count records per distinct value of ``field``, in first-seen order."""
    field = IncidentField(field)
    counts: Dict[str, int] = {}
    for record in records:
        key = bucket_key(resolve(record, field))
        counts[key] = counts.get(key, 0) + 1
    return FrequencyTable(
        field=field.value,
        buckets=tuple(Bucket(key=k, count=c) for k, c in counts.items()),
    )


def time_series(records: Sequence[IncidentRecord]) -> TimeSeries:
    """Incident counts per filing date, ascending."""
    counts = Counter(record.date for record in records)
    return TimeSeries(points=tuple(TimePoint(date=d, count=counts[d]) for d in sorted(counts)))


def top_keywords(records: Sequence[IncidentRecord], limit: int = TOP_KEYWORDS_LIMIT) -> TopKeywords:
    """Most frequent keyword tags; equal counts keep first-seen order."""
    counts: Dict[str, int] = {}
    for record in records:
        for keyword in record.keywords:
            counts[keyword] = counts.get(keyword, 0) + 1
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return TopKeywords(entries=tuple(KeywordCount(keyword=k, count=c) for k, c in ranked[:max(0, limit)]))


def resolution_time(records: Sequence[IncidentRecord]) -> ResolutionTimeStat:
    """Mean days from filing to resolution over resolved cases with a resolution date."""
    resolved = [r for r in records if r.status == IncidentStatus.RESOLVED]
    durations = [
        (r.resolved_date - r.date).days
        for r in resolved
        if r.resolved_date is not None
    ]
    average = round(sum(durations) / len(durations), 2) if durations else None
    return ResolutionTimeStat(
        average_days=average,
        resolved_count=len(resolved),
        measured_count=len(durations),
    )


def snapshot(records: Sequence[IncidentRecord], date_range: Optional[DateRange] = None) -> AnalyticsSnapshot:
    """Composite dashboard summary over the records filed inside ``date_range``."""
    data = [r for r in records if date_range is None or date_range.contains(r.date)]

    result = AnalyticsSnapshot(
        total_count=len(data),
        by_type=frequency(data, IncidentField.TYPE),
        by_status=frequency(data, IncidentField.STATUS),
        by_priority=frequency(data, IncidentField.PRIORITY),
        by_location=frequency(data, IncidentField.LOCATION_AREA),
        daily_counts=time_series(data),
        top_keywords=top_keywords(data),
        resolution=resolution_time(data),
    )

    logger.log_aggregation("snapshot", len(data), {
        "date_from": date_range.start.isoformat() if date_range and date_range.start else None,
        "date_to": date_range.end.isoformat() if date_range and date_range.end else None,
    })
    return result


def heatmap(records: Sequence[IncidentRecord], bounds: Optional[BoundingBox] = None) -> HeatmapData:
    """One weighted point per incident inside ``bounds`` plus per-field breakdowns."""
    data = [r for r in records if bounds is None or bounds.contains(r.location.coordinates)]

    points = tuple(
        HeatmapPoint(
            lat=r.location.coordinates.lat,
            lon=r.location.coordinates.lon,
            weight=r.priority.weight,
            type=r.type,
        )
        for r in data
    )

    logger.log_aggregation("heatmap", len(data), {"bounded": bounds is not None})
    return HeatmapData(
        points=points,
        total=len(data),
        by_type=frequency(data, IncidentField.TYPE),
        by_priority=frequency(data, IncidentField.PRIORITY),
        by_status=frequency(data, IncidentField.STATUS),
    )
