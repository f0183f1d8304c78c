"""
Incident query engine: full-text match, AND-combined filters, stable multi-key sort and paging.
"""

import time
from typing import Iterable, List, Sequence

from .config import get_default_page_size
from .fields import IncidentField, resolve, sort_value
from .geo import point_distance_km
from .query import IncidentFilters, QuerySpec, SortOrder, SortSpec
from .results import SearchHit, SearchResponse
from .schema import IncidentRecord
from ..util.logging import logger, summarize_query

SCORE_STEP = 0.1


def matches_text(record: IncidentRecord, term: str) -> bool:
    """Case-insensitive substring match; ``term`` must already be lowercased."""
    haystacks = (
        record.case_number,
        record.complainant.name,
        record.accused.name,
        record.description,
        record.location.area,
    )
    if any(term in h.lower() for h in haystacks):
        return True
    return any(term in keyword.lower() for keyword in record.keywords)


def _value_set(values: Iterable) -> set:
    # Filter values arrive as enum members or plain strings
    return {getattr(v, "value", v) for v in values}


def matches_filters(record: IncidentRecord, filters: IncidentFilters) -> bool:
    """True when the record satisfies every non-empty filter dimension."""
    if filters.statuses and record.status.value not in _value_set(filters.statuses):
        return False
    if filters.types and record.type not in _value_set(filters.types):
        return False
    if filters.priorities and record.priority.value not in _value_set(filters.priorities):
        return False
    if filters.date_range and not filters.date_range.contains(record.date):
        return False
    if filters.geo:
        distance = point_distance_km(filters.geo.center, record.location.coordinates)
        # NaN radius or distance never matches
        if not distance <= filters.geo.radius_km:
            return False
    return True


def sort_records(records: Sequence[IncidentRecord], sort: Sequence[SortSpec]) -> List[IncidentRecord]:
    """
    Stable multi-key sort.

    Keys are applied from least to most significant so that each pass keeps
    the order produced by the previous one; records tying on every key keep
    their original relative order. Missing values go last.
    """
    ordered = list(records)
    for spec in reversed(sort):
        field = IncidentField(spec.field)
        descending = SortOrder(spec.order) == SortOrder.DESC

        def key(record, field=field, descending=descending):
            value = resolve(record, field)
            # Missing values sort last in both directions
            return ((value is None) != descending, sort_value(value))

        ordered.sort(key=key, reverse=descending)
    return ordered


def rank_scores(count: int) -> List[float]:
    """Synthetic rank decay: 1.0 for the first hit, 0.1 less for each next one."""
    return [max(0.0, round(1.0 - i * SCORE_STEP, 10)) for i in range(count)]


def search_incidents(records: Sequence[IncidentRecord], query: QuerySpec) -> SearchResponse[IncidentRecord]:
    """
    Run one incident search over ``records``.

    Args:
        records: The incident snapshot to search
        query: Text, filters, sort keys and paging for this call

    Returns:
        SearchResponse with the total number of matches, the requested page
        of hits and the elapsed wall-clock time in milliseconds
    """
    start_time = time.perf_counter()

    results = list(records)

    term = (query.text or "").strip().lower()
    if term:
        results = [r for r in results if matches_text(r, term)]

    if not query.filters.is_empty():
        results = [r for r in results if matches_filters(r, query.filters)]

    if query.sort:
        results = sort_records(results, query.sort)

    offset = max(0, query.offset or 0)
    # 0 falls back to the default page size
    size = get_default_page_size() if not query.size else max(0, query.size)
    page = results[offset:offset + size]

    hits = [
        SearchHit(id=record.qualified_id, source=record, score=score)
        for record, score in zip(page, rank_scores(len(page)))
    ]

    took_ms = round((time.perf_counter() - start_time) * 1000, 3)
    filters = query.filters
    logger.log_search("incidents", took_ms, len(results), len(hits), summarize_query(
        query.text,
        {
            "statuses": sorted(_value_set(filters.statuses)),
            "types": list(filters.types),
            "priorities": sorted(_value_set(filters.priorities)),
            "date_range": bool(filters.date_range),
            "geo": bool(filters.geo),
            "offset": offset,
            "size": size,
        },
    ))

    return SearchResponse(total=len(results), hits=hits, took_ms=took_ms)
