"""Shared fixtures for boxgrid tests."""

from __future__ import annotations

from typing import Any

import pytest


@pytest.fixture
def single_record() -> list[dict[str, Any]]:
    """One record with one column."""
    return [{"name": "Foo"}]


@pytest.fixture
def numeric_records() -> list[dict[str, Any]]:
    """Two uniform records mixing text and numbers."""
    return [
        {"name": "Foo", "age": 12},
        {"name": "Bar", "age": 15},
    ]


@pytest.fixture
def heterogeneous_records() -> list[dict[str, Any]]:
    """Records that don't share all keys."""
    return [
        {"name": "Foo"},
        {"name": "Bar", "age": 15},
    ]
