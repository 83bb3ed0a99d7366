"""Shared dependencies for API routers.

The catalog, contact store and settings live on ``app.state`` so each app
instance (and each test) owns its own copies.

Usage in routers:
    from api.dependencies import get_catalog, get_contact_store
"""
from __future__ import annotations

from functools import lru_cache

from fastapi import Request

from nibert_site.config import Settings, load_settings
from nibert_site.contacts import ContactStore
from nibert_site.portfolio import PortfolioCatalog


@lru_cache
def get_settings() -> Settings:
    """Get application settings from the environment (cached)."""
    return load_settings()


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_catalog(request: Request) -> PortfolioCatalog:
    return request.app.state.catalog


def get_contact_store(request: Request) -> ContactStore:
    return request.app.state.contact_store
