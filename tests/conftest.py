# -*- coding: utf-8 -*-
"""
Shared fixtures for the ATHENA test suite.
"""

import itertools
import os
from datetime import datetime, timezone

import pytest

# Run Qt headless so the suite works without a display server.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from athena.repositories.local_storage import LocalStorage
from athena.repositories.log_store import EntryLogStore
from athena.services.translation_manager import set_language

FIXED_NOW = datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def french_language():
    """Every test starts (and ends) with the French interface."""
    set_language("fr")
    yield
    set_language("fr")


@pytest.fixture
def storage(tmp_path):
    """Local storage rooted in a temporary directory."""
    return LocalStorage(tmp_path)


@pytest.fixture
def store(storage):
    """Empty, loaded entry log."""
    log_store = EntryLogStore(storage)
    log_store.load()
    return log_store


@pytest.fixture
def clock():
    return lambda: FIXED_NOW


@pytest.fixture
def id_factory():
    """Deterministic identifiers: id-1, id-2, ..."""
    counter = itertools.count(1)
    return lambda: f"id-{next(counter)}"


@pytest.fixture
def fixed_now():
    return FIXED_NOW
