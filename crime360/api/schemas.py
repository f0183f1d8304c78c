"""
Request/response models for the Crime 360 HTTP API.
Requests are validated here and converted into engine query values.
"""

from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Optional, List, Dict, Any, Union
from datetime import date, datetime

from ..core.fields import IncidentField
from ..core.geo import BoundingBox, parse_distance_km
from ..core.query import DateRange, GeoRadius, IncidentFilters, QuerySpec, SortOrder, SortSpec
from ..core.schema import GeoPoint
from ..core.results import (
    AnalyticsSnapshot,
    FrequencyTable,
    HeatmapData,
    SearchResponse as EngineSearchResponse,
)


class Coordinates(BaseModel):
    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)

    def to_point(self) -> GeoPoint:
        return GeoPoint(lat=self.lat, lon=self.lon)


class DateRangeModel(BaseModel):
    # Accepts plain dates or full ISO timestamps, as the dashboards send both
    date_from: Optional[Union[date, datetime]] = Field(default=None, alias="from")
    date_to: Optional[Union[date, datetime]] = Field(default=None, alias="to")

    model_config = {"populate_by_name": True}

    @model_validator(mode="after")
    def range_must_be_ordered(self):
        start = _as_date(self.date_from)
        end = _as_date(self.date_to)
        if start and end and start > end:
            raise ValueError('date range "from" must not be after "to"')
        return self

    def to_range(self) -> DateRange:
        return DateRange(start=_as_date(self.date_from), end=_as_date(self.date_to))


class GeoFilterModel(BaseModel):
    center: Coordinates
    radius: Union[float, str]

    @field_validator('radius')
    @classmethod
    def radius_must_be_distance(cls, v):
        # Raises ValueError for malformed values such as "five km"
        parse_distance_km(v)
        return v

    def to_geo(self) -> GeoRadius:
        return GeoRadius(center=self.center.to_point(), radius_km=parse_distance_km(self.radius))


class SearchFiltersModel(BaseModel):
    status: List[str] = []
    type: List[str] = []
    priority: List[str] = []
    date_range: Optional[DateRangeModel] = Field(default=None, alias="dateRange")
    location: Optional[GeoFilterModel] = None

    model_config = {"populate_by_name": True}

    def to_filters(self) -> IncidentFilters:
        return IncidentFilters(
            statuses=tuple(self.status),
            types=tuple(self.type),
            priorities=tuple(self.priority),
            date_range=self.date_range.to_range() if self.date_range else None,
            geo=self.location.to_geo() if self.location else None,
        )


class SortModel(BaseModel):
    field: IncidentField
    order: SortOrder = SortOrder.ASC


class IncidentSearchRequest(BaseModel):
    query: Optional[str] = None
    filters: SearchFiltersModel = SearchFiltersModel()
    sort: List[SortModel] = []
    size: Optional[int] = Field(default=None, ge=0)
    offset: int = Field(default=0, ge=0, alias="from")

    model_config = {"populate_by_name": True}

    @field_validator('size')
    @classmethod
    def size_must_fit_page_limit(cls, v):
        from ..core.config import MAX_PAGE_SIZE
        if v is not None and v > MAX_PAGE_SIZE:
            raise ValueError(f'size must be <= {MAX_PAGE_SIZE}')
        return v

    def to_query(self) -> QuerySpec:
        return QuerySpec(
            text=self.query,
            filters=self.filters.to_filters(),
            sort=tuple(SortSpec(field=s.field, order=s.order) for s in self.sort),
            offset=self.offset,
            size=self.size,
        )


class FaceSearchRequest(BaseModel):
    features: List[float]
    threshold: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    top_k: Optional[int] = Field(default=None, ge=1)

    @field_validator('features')
    @classmethod
    def features_must_not_be_empty(cls, v):
        if not v:
            raise ValueError('features cannot be empty')
        return v


class FaceImageSearchRequest(BaseModel):
    image_base64: str
    threshold: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    top_k: Optional[int] = Field(default=None, ge=1)

    @field_validator('image_base64')
    @classmethod
    def image_must_not_be_empty(cls, v):
        if not v.strip():
            raise ValueError('image_base64 cannot be empty')
        return v


class SearchHitModel(BaseModel):
    id: str
    score: float
    source: Dict[str, Any]


class SearchResponseModel(BaseModel):
    total: int
    took_ms: float
    hits: List[SearchHitModel]

    @classmethod
    def from_engine(cls, response: EngineSearchResponse) -> 'SearchResponseModel':
        return cls(**response.to_dict())


class FaceSearchResponseModel(SearchResponseModel):
    query_dimension: int


class BucketModel(BaseModel):
    key: str
    doc_count: int


def _buckets(table: FrequencyTable) -> List[BucketModel]:
    return [BucketModel(key=b.key, doc_count=b.count) for b in table.buckets]


class FrequencyResponse(BaseModel):
    field: str
    total: int
    buckets: List[BucketModel]

    @classmethod
    def from_table(cls, table: FrequencyTable) -> 'FrequencyResponse':
        return cls(field=table.field, total=table.total, buckets=_buckets(table))


class TimePointModel(BaseModel):
    date: date
    count: int


class KeywordCountModel(BaseModel):
    keyword: str
    count: int


class ResolutionTimeModel(BaseModel):
    average_days: Optional[float]
    resolved_count: int
    measured_count: int


class AnalyticsSnapshotResponse(BaseModel):
    total_count: int
    by_type: List[BucketModel]
    by_status: List[BucketModel]
    by_priority: List[BucketModel]
    by_location: List[BucketModel]
    daily_counts: List[TimePointModel]
    top_keywords: List[KeywordCountModel]
    resolution: ResolutionTimeModel

    @classmethod
    def from_snapshot(cls, snapshot: AnalyticsSnapshot) -> 'AnalyticsSnapshotResponse':
        return cls(
            total_count=snapshot.total_count,
            by_type=_buckets(snapshot.by_type),
            by_status=_buckets(snapshot.by_status),
            by_priority=_buckets(snapshot.by_priority),
            by_location=_buckets(snapshot.by_location),
            daily_counts=[TimePointModel(date=p.date, count=p.count) for p in snapshot.daily_counts.points],
            top_keywords=[KeywordCountModel(keyword=k.keyword, count=k.count) for k in snapshot.top_keywords.entries],
            resolution=ResolutionTimeModel(
                average_days=snapshot.resolution.average_days,
                resolved_count=snapshot.resolution.resolved_count,
                measured_count=snapshot.resolution.measured_count,
            ),
        )


class HeatmapPointModel(BaseModel):
    lat: float
    lon: float
    weight: int
    type: str
    count: int


class HeatmapResponse(BaseModel):
    total: int
    points: List[HeatmapPointModel]
    by_type: List[BucketModel]
    by_priority: List[BucketModel]
    by_status: List[BucketModel]

    @classmethod
    def from_heatmap(cls, data: HeatmapData) -> 'HeatmapResponse':
        return cls(
            total=data.total,
            points=[
                HeatmapPointModel(lat=p.lat, lon=p.lon, weight=p.weight, type=p.type, count=p.count)
                for p in data.points
            ],
            by_type=_buckets(data.by_type),
            by_priority=_buckets(data.by_priority),
            by_status=_buckets(data.by_status),
        )


class HealthResponse(BaseModel):
    status: str
    version: str
    datasets: List[str]
    incident_count: int
    person_count: int
    config_issues: List[str] = []


def _as_date(value: Optional[Union[date, datetime]]) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    return value


def bounds_from_params(top_left_lat: Optional[float], top_left_lon: Optional[float],
                       bottom_right_lat: Optional[float], bottom_right_lon: Optional[float]) -> Optional[BoundingBox]:
    """Build heatmap bounds from query parameters; all four or none must be given."""
    values = [top_left_lat, top_left_lon, bottom_right_lat, bottom_right_lon]
    if all(v is None for v in values):
        return None
    if any(v is None for v in values):
        raise ValueError("Heatmap bounds need all of top_left_lat, top_left_lon, bottom_right_lat, bottom_right_lon")
    return BoundingBox(
        top_left=GeoPoint(lat=top_left_lat, lon=top_left_lon),
        bottom_right=GeoPoint(lat=bottom_right_lat, lon=bottom_right_lon),
    )
