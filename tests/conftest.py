"""Shared fixtures for modelshelf tests."""

from __future__ import annotations

from typing import Any

import pytest

from modelshelf.models._types import ModelFamily, ModelRecord


def make_record(name: str, **fields: Any) -> ModelRecord:
    """Build a ModelRecord with test defaults for the required fields."""
    fields.setdefault("display_name", name)
    fields.setdefault("family", ModelFamily.LLAMA)
    return ModelRecord(name=name, **fields)


@pytest.fixture
def record_factory():
    return make_record
