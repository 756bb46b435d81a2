"""Pytest configuration and fixtures."""

import random

import pytest
from fastapi.testclient import TestClient

from lunch.config import Settings
from lunch.main import create_app
from lunch.services.restaurant_store import RestaurantStore


@pytest.fixture
def store():
    """Create an isolated in-memory store for each test."""
    store = RestaurantStore.in_memory(rng=random.Random(1234))
    yield store
    store.close()


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a throwaway data directory."""
    return Settings(_env_file=None, data_dir=tmp_path / "data", environment="test")


@pytest.fixture
def client(store, settings):
    """Create a test client bound to the test store."""
    app = create_app(store=store, settings=settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def stocked_store(store):
    """A store with two cheap and two normal restaurants."""
    store.add("Taco Town", "cheap")
    store.add("Noodle Bar", "Cheap")
    store.add("Bistro Nine", "normal")
    store.add("Pasta Place", "Normal")
    return store
