"""Pytest configuration and shared fixtures for jsonlinediff tests."""

from __future__ import annotations

from typing import Any

import pytest


@pytest.fixture
def person_left() -> dict[str, Any]:
    """Return the left side of the person scenario."""
    return {"firstName": "Jason", "lastName": "Derulo"}


@pytest.fixture
def person_right() -> dict[str, Any]:
    """Return the right side of the person scenario."""
    return {"firstName": "Jason", "lastName": "Statham"}


@pytest.fixture
def nested_left() -> dict[str, Any]:
    """Return a nested document with unique key names."""
    return {
        "name": "service",
        "config": {
            "timeout": 30,
            "retries": 3,
            "endpoints": {"primary": "https://a.example", "backup": None},
        },
        "tags": ["alpha", "beta"],
        "owner": {"team": "core", "email": "core@example.com"},
    }


@pytest.fixture
def nested_right() -> dict[str, Any]:
    """Return a modified version of nested_left."""
    return {
        "name": "service",
        "config": {
            "timeout": 60,
            "endpoints": {"primary": "https://a.example", "backup": "https://b.example"},
            "verbose": True,
        },
        "tags": ["beta", "alpha"],
        "owner": None,
    }
