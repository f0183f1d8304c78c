"""
Enumerated incident fields used for sorting and grouping.
Each field maps to an explicit accessor instead of a dotted-path lookup.
"""

from datetime import date, datetime
from enum import Enum
from typing import Any, Callable, Dict

from .schema import IncidentRecord


class IncidentField(str, Enum):
    ID = "id"
    CASE_NUMBER = "case_number"
    TYPE = "type"
    STATUS = "status"
    PRIORITY = "priority"
    DATE = "date"
    TIMESTAMP = "timestamp"
    OFFICER = "officer"
    DATASET = "dataset"
    LOCATION_AREA = "location.area"
    COMPLAINANT_NAME = "complainant.name"
    COMPLAINANT_AGE = "complainant.age"
    ACCUSED_NAME = "accused.name"
    ACCUSED_AGE = "accused.age"


_ACCESSORS: Dict[IncidentField, Callable[[IncidentRecord], Any]] = {
    IncidentField.ID: lambda r: r.id,
    IncidentField.CASE_NUMBER: lambda r: r.case_number,
    IncidentField.TYPE: lambda r: r.type,
    IncidentField.STATUS: lambda r: r.status,
    IncidentField.PRIORITY: lambda r: r.priority,
    IncidentField.DATE: lambda r: r.date,
    IncidentField.TIMESTAMP: lambda r: r.timestamp,
    IncidentField.OFFICER: lambda r: r.officer,
    IncidentField.DATASET: lambda r: r.dataset,
    IncidentField.LOCATION_AREA: lambda r: r.location.area,
    IncidentField.COMPLAINANT_NAME: lambda r: r.complainant.name,
    IncidentField.COMPLAINANT_AGE: lambda r: r.complainant.age,
    IncidentField.ACCUSED_NAME: lambda r: r.accused.name,
    IncidentField.ACCUSED_AGE: lambda r: r.accused.age,
}

UNKNOWN_KEY = "unknown"


def resolve(record: IncidentRecord, field: IncidentField) -> Any:
    """Return the value of ``field`` on ``record`` (None when absent)."""
    return _ACCESSORS[IncidentField(field)](record)


def sort_value(value: Any) -> Any:
    """Comparable form of a field value; enums order by declaration."""
    if isinstance(value, Enum):
        return list(type(value)).index(value)
    return value


def bucket_key(value: Any) -> str:
    """String key used by frequency aggregations."""
    if value is None:
        return UNKNOWN_KEY
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return str(value)
