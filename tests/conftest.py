"""Shared test fixtures."""

from itertools import count

import pytest

from chef_menu.models import Course, EntryCandidate
from chef_menu.store import MenuStore


def candidate(name: str, price_text: str, course: Course | str = Course.MAIN, description: str = "") -> EntryCandidate:
    return EntryCandidate(name=name, description=description, course=course, price_text=price_text)


@pytest.fixture
def store() -> MenuStore:
    return MenuStore()


@pytest.fixture
def counter_store() -> MenuStore:
    """Store whose ids are predictable: entry-1, entry-2, ..."""
    ids = count(1)
    return MenuStore(id_factory=lambda: f"entry-{next(ids)}")


@pytest.fixture
def sample_store(store: MenuStore) -> MenuStore:
    store.add(candidate("Steak", "100", Course.MAIN))
    store.add(candidate("Starter Soup", "20", Course.STARTER))
    store.add(candidate("Fish", "50", Course.MAIN))
    return store
