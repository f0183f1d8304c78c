"""
Builders for hand-made incident and person records used across the tests.
"""

from crime360.core.schema import IncidentRecord, PersonRecord


def incident_data(id="1", **overrides):
    """Seed-shaped incident dict with sensible defaults."""
    data = {
        "id": id,
        "case_number": f"FIRT{int(id):06d}" if str(id).isdigit() else f"FIRT-{id}",
        "type": "Theft",
        "complainant": {"name": "Test Complainant", "age": 30, "address": "Test Street", "phone": "+91-0000000000"},
        "accused": {"name": "Test Accused", "description": "Unknown", "known_aliases": []},
        "status": "Pending",
        "priority": "Medium",
        "date": "2025-01-01",
        "location": {"area": "Test Area", "coordinates": {"lat": 12.97, "lon": 77.59}, "address": "Test Address"},
        "officer": "Inspector Test",
        "description": "Test incident",
        "evidence": [],
        "keywords": [],
        "timestamp": "2025-01-01T10:00:00Z",
    }
    data.update(overrides)
    return data


def person_data(id="face_1", features=(0.1, 0.2, 0.3), **overrides):
    data = {
        "id": id,
        "person_id": f"P-{id}",
        "name": f"Person {id}",
        "aliases": [],
        "features": list(features),
        "mugshots": [],
        "last_seen": "2025-01-01",
        "status": "Wanted",
        "charges": [],
        "locations": [],
        "risk_level": "Low",
    }
    data.update(overrides)
    return data


def make_incident(id="1", dataset="test", **overrides) -> IncidentRecord:
    return IncidentRecord.from_dict(incident_data(id, **overrides), dataset=dataset)


def make_person(id="face_1", features=(0.1, 0.2, 0.3), dataset="test", **overrides) -> PersonRecord:
    return PersonRecord.from_dict(person_data(id, features, **overrides), dataset=dataset)


