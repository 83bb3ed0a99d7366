"""Shared fixtures: every test gets its own app, catalog and contact store."""
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from api.main import create_app
from nibert_site.config import Settings
from nibert_site.contacts import InMemoryContactStore
from nibert_site.portfolio import PortfolioCatalog


@pytest.fixture
def catalog():
    return PortfolioCatalog()


@pytest.fixture
def store():
    return InMemoryContactStore()


@pytest.fixture
def settings():
    return Settings(environment="development")


@pytest.fixture
def app(settings, catalog, store):
    return create_app(settings, catalog=catalog, contact_store=store)


@pytest.fixture
def client(app):
    return TestClient(app, raise_server_exceptions=False)
