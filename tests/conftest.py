"""
Shared fixtures: the built-in seed store and a small hand-built store.
"""

import pytest

from crime360.core.engine import Crime360Engine
from crime360.core.seed import SEED_DATASETS
from crime360.core.store import RecordStore
from factories import make_incident


@pytest.fixture
def seed_store():
    """Store built from the built-in seed datasets."""
    return RecordStore.from_datasets(SEED_DATASETS)


@pytest.fixture
def seed_engine(seed_store):
    return Crime360Engine(seed_store)


@pytest.fixture
def five_record_store():
    """Five incidents in one dataset, no persons."""
    return RecordStore([make_incident(str(i)) for i in range(1, 6)])
