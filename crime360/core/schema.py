"""
Typed, immutable records held by the Crime 360 record store.
Incident and person records are seeded once and never mutated afterwards.
"""

from dataclasses import asdict, dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class SeedDataError(Exception):
    """Custom exception for malformed seed data."""
    pass


class DuplicateRecordError(SeedDataError):
    """Raised when a dataset reuses a record identifier."""
    pass


class IncidentStatus(str, Enum):
    PENDING = "Pending"
    UNDER_INVESTIGATION = "Under Investigation"
    RESOLVED = "Resolved"
    CLOSED = "Closed"


class Priority(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"

    @property
    def weight(self) -> int:
        """Heatmap weight: Low 1 up to Critical 4."""
        return list(Priority).index(self) + 1


class PersonStatus(str, Enum):
    WANTED = "Wanted"
    CONVICTED = "Convicted"
    RELEASED = "Released"
    UNDER_INVESTIGATION = "Under Investigation"


class RiskLevel(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


def _enum(enum_cls, value, field_name: str):
    try:
        return enum_cls(value)
    except ValueError:
        allowed = [m.value for m in enum_cls]
        raise SeedDataError(f"{field_name} must be one of {allowed}, got {value!r}")


def parse_date(value) -> date:
    """Parse an ISO date (or the date part of an ISO timestamp)."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def parse_datetime(value) -> datetime:
    """Parse an ISO timestamp, accepting a trailing 'Z' for UTC."""
    if isinstance(value, datetime):
        return value
    text = str(value)
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def _jsonable(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    if isinstance(value, tuple):
        return [_jsonable(v) for v in value]
    return value


def _json_dict_factory(items) -> Dict[str, Any]:
    return {k: _jsonable(v) for k, v in items}


@dataclass(frozen=True)
class GeoPoint:
    lat: float
    lon: float

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GeoPoint':
        return cls(lat=float(data["lat"]), lon=float(data["lon"]))


@dataclass(frozen=True)
class Complainant:
    name: str
    age: int
    address: str
    phone: str


@dataclass(frozen=True)
class Accused:
    name: str
    description: str
    age: Optional[int] = None
    known_aliases: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Location:
    area: str
    coordinates: GeoPoint
    address: str


@dataclass(frozen=True)
class IncidentRecord:
    """One filed complaint (FIR)."""

    id: str
    case_number: str
    type: str
    complainant: Complainant
    accused: Accused
    status: IncidentStatus
    priority: Priority
    date: date
    location: Location
    officer: str
    description: str
    evidence: Tuple[str, ...]
    keywords: Tuple[str, ...]
    timestamp: datetime
    dataset: str = "default"
    resolved_date: Optional[date] = None

    @property
    def qualified_id(self) -> str:
        """Dataset-scoped identifier, unique across the whole store."""
        return f"{self.dataset}:{self.id}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert record to a JSON-ready dictionary."""
        data = asdict(self, dict_factory=_json_dict_factory)
        data["qualified_id"] = self.qualified_id
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any], dataset: str = "default") -> 'IncidentRecord':
        """Create a record from seed data, validating the closed enumerations."""
        try:
            complainant = data["complainant"]
            accused = data["accused"]
            location = data["location"]
            resolved = data.get("resolved_date")
            return cls(
                id=str(data["id"]),
                case_number=data["case_number"],
                type=data["type"],
                complainant=Complainant(
                    name=complainant["name"],
                    age=int(complainant["age"]),
                    address=complainant["address"],
                    phone=complainant["phone"],
                ),
                accused=Accused(
                    name=accused["name"],
                    description=accused["description"],
                    age=accused.get("age"),
                    known_aliases=tuple(accused.get("known_aliases") or ()),
                ),
                status=_enum(IncidentStatus, data["status"], "status"),
                priority=_enum(Priority, data["priority"], "priority"),
                date=parse_date(data["date"]),
                location=Location(
                    area=location["area"],
                    coordinates=GeoPoint.from_dict(location["coordinates"]),
                    address=location["address"],
                ),
                officer=data["officer"],
                description=data["description"],
                evidence=tuple(data.get("evidence") or ()),
                keywords=tuple(data.get("keywords") or ()),
                timestamp=parse_datetime(data["timestamp"]),
                dataset=dataset,
                resolved_date=parse_date(resolved) if resolved else None,
            )
        except KeyError as e:
            raise SeedDataError(f"Incident record missing field {e} (dataset {dataset})")
        except (TypeError, ValueError) as e:
            raise SeedDataError(f"Invalid incident record in dataset {dataset}: {e}")


@dataclass(frozen=True)
class Sighting:
    area: str
    coordinates: GeoPoint
    timestamp: datetime


@dataclass(frozen=True)
class PhysicalMetadata:
    height: Optional[str] = None
    weight: Optional[str] = None
    marks: Tuple[str, ...] = ()
    tattoos: Tuple[str, ...] = ()


@dataclass(frozen=True)
class PersonRecord:
    """A person of interest with a facial feature vector."""

    id: str
    person_id: str
    name: str
    aliases: Tuple[str, ...]
    features: Tuple[float, ...]
    mugshots: Tuple[str, ...]
    last_seen: date
    status: PersonStatus
    charges: Tuple[str, ...]
    locations: Tuple[Sighting, ...]
    risk_level: RiskLevel
    metadata: PhysicalMetadata = field(default_factory=PhysicalMetadata)
    dataset: str = "default"

    @property
    def qualified_id(self) -> str:
        return f"{self.dataset}:{self.id}"

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self, dict_factory=_json_dict_factory)
        data["qualified_id"] = self.qualified_id
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any], dataset: str = "default") -> 'PersonRecord':
        try:
            metadata = data.get("metadata") or {}
            return cls(
                id=str(data["id"]),
                person_id=data["person_id"],
                name=data["name"],
                aliases=tuple(data.get("aliases") or ()),
                features=tuple(float(x) for x in data["features"]),
                mugshots=tuple(data.get("mugshots") or ()),
                last_seen=parse_date(data["last_seen"]),
                status=_enum(PersonStatus, data["status"], "status"),
                charges=tuple(data.get("charges") or ()),
                locations=tuple(
                    Sighting(
                        area=loc["area"],
                        coordinates=GeoPoint.from_dict(loc["coordinates"]),
                        timestamp=parse_datetime(loc["timestamp"]),
                    )
                    for loc in data.get("locations") or ()
                ),
                risk_level=_enum(RiskLevel, data["risk_level"], "risk_level"),
                metadata=PhysicalMetadata(
                    height=metadata.get("height"),
                    weight=metadata.get("weight"),
                    marks=tuple(metadata.get("marks") or ()),
                    tattoos=tuple(metadata.get("tattoos") or ()),
                ),
                dataset=dataset,
            )
        except KeyError as e:
            raise SeedDataError(f"Person record missing field {e} (dataset {dataset})")
        except (TypeError, ValueError) as e:
            raise SeedDataError(f"Invalid person record in dataset {dataset}: {e}")
