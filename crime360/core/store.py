"""
Immutable record store: the snapshot every engine reads from.
Seeded once from the built-in datasets or a JSON file, validated at load time.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from .config import get_seed_data_path
from .schema import (
    DuplicateRecordError,
    IncidentRecord,
    PersonRecord,
    SeedDataError,
)
from .seed import SEED_DATASETS
from ..util.logging import logger


class RecordStore:
    """Read-only snapshot of incident and person records.

    Identifiers are namespaced per dataset: an id may repeat across datasets
    but never inside one. Records are addressed by their qualified id
    (``"<dataset>:<id>"``).
    """

    def __init__(self, incidents: Iterable[IncidentRecord] = (), persons: Iterable[PersonRecord] = ()):
        self._incidents: Tuple[IncidentRecord, ...] = tuple(incidents)
        self._persons: Tuple[PersonRecord, ...] = tuple(persons)
        self._incident_index = self._build_index(self._incidents, "incident")
        self._person_index = self._build_index(self._persons, "person")

    @staticmethod
    def _build_index(records, kind: str) -> Dict[str, Any]:
        index = {}
        for record in records:
            key = record.qualified_id
            if key in index:
                raise DuplicateRecordError(
                    f"Duplicate {kind} id {record.id!r} in dataset {record.dataset!r}"
                )
            index[key] = record
        return index

    @property
    def incidents(self) -> Tuple[IncidentRecord, ...]:
        return self._incidents

    @property
    def persons(self) -> Tuple[PersonRecord, ...]:
        return self._persons

    @property
    def datasets(self) -> Tuple[str, ...]:
        """Dataset names in first-seen order."""
        seen = {}
        for record in self._incidents + self._persons:
            seen.setdefault(record.dataset, None)
        return tuple(seen)

    def get_incident(self, qualified_id: str) -> Optional[IncidentRecord]:
        return self._incident_index.get(qualified_id)

    def get_person(self, qualified_id: str) -> Optional[PersonRecord]:
        return self._person_index.get(qualified_id)

    def __len__(self) -> int:
        return len(self._incidents)

    @classmethod
    def from_datasets(cls, datasets: Mapping[str, Mapping[str, Any]], source: str = "builtin") -> 'RecordStore':
        """Build a store from ``{dataset: {"incidents": [...], "persons": [...]}}``."""
        if not isinstance(datasets, Mapping):
            raise SeedDataError("Seed data must map dataset names to collections")

        incidents = []
        persons = []
        for name, collections in datasets.items():
            if not isinstance(collections, Mapping):
                raise SeedDataError(f"Dataset {name!r} must be an object with incidents/persons")
            dataset_incidents = [
                IncidentRecord.from_dict(item, dataset=name)
                for item in collections.get("incidents", [])
            ]
            dataset_persons = [
                PersonRecord.from_dict(item, dataset=name)
                for item in collections.get("persons", [])
            ]
            logger.log_store_load(name, len(dataset_incidents), len(dataset_persons), source)
            incidents.extend(dataset_incidents)
            persons.extend(dataset_persons)

        return cls(incidents, persons)

    @classmethod
    def from_json_file(cls, path) -> 'RecordStore':
        """Load a store from a JSON seed file with the built-in seed shape."""
        seed_path = Path(path)
        try:
            with seed_path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            raise SeedDataError(f"Seed file not found: {seed_path}")
        except json.JSONDecodeError as e:
            raise SeedDataError(f"Invalid seed file format: {e}")

        return cls.from_datasets(data, source=str(seed_path))


def load_store(path: Optional[str] = None) -> RecordStore:
    """Load the configured store: an explicit path, SEED_DATA_PATH, or the built-in seeds."""
    seed_path = path or get_seed_data_path()
    if seed_path:
        return RecordStore.from_json_file(seed_path)
    return RecordStore.from_datasets(SEED_DATASETS)
