"""
Test configuration and fixtures for the Storefront backend test suite.

Provides:
- A small CSV catalog on disk
- FastAPI TestClient fixtures with the facet engine state reset per test
"""
import csv

import pytest
from fastapi.testclient import TestClient

from backend.api.routers import facets as facets_router
from backend.core.config import settings


CATALOG_ROWS = [
    ("Red - Small", "Red", "Small"),
    ("Black - Medium", "Black", "Medium"),
    ("Blue - Large", "Blue", "Large"),
    ("White - Large", "White", "Large"),
    ("Yellow - Medium", "Yellow", "Medium"),
    ("Yellow - Small", "Yellow", "Small"),
]


@pytest.fixture()
def catalog_file(tmp_path):
    """Write the six-shirt catalog to a CSV file."""
    path = tmp_path / "shirts.csv"
    with open(path, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["name", "color", "size"])
        writer.writerows(CATALOG_ROWS)
    return path


@pytest.fixture()
def reset_state(monkeypatch):
    """Forget any engine built by an earlier test."""
    monkeypatch.setitem(facets_router._facets_state, "engine", None)
    monkeypatch.setitem(facets_router._facets_state, "initialized", False)
    monkeypatch.setattr(settings, "CONFIG_PATH", "")
    yield facets_router._facets_state


def _make_client():
    from backend.api.main import app
    return TestClient(app)


@pytest.fixture()
def client(reset_state, monkeypatch, catalog_file):
    """TestClient serving the six-shirt catalog."""
    monkeypatch.setattr(settings, "CATALOG_PATH", str(catalog_file))
    with _make_client() as c:
        yield c


@pytest.fixture()
def sample_client(reset_state, monkeypatch):
    """TestClient serving a generated sample catalog."""
    monkeypatch.setattr(settings, "CATALOG_PATH", "")
    monkeypatch.setattr(settings, "SAMPLE_SIZE", 300)
    monkeypatch.setattr(settings, "SAMPLE_SEED", 11)
    with _make_client() as c:
        yield c


@pytest.fixture()
def broken_client(reset_state, monkeypatch, tmp_path):
    """TestClient whose catalog path does not exist."""
    monkeypatch.setattr(settings, "CATALOG_PATH", str(tmp_path / "missing.csv"))
    with _make_client() as c:
        yield c
