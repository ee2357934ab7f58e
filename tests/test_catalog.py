"""Tests for modelshelf.models.catalog — static catalog, families, custom model table."""

from __future__ import annotations

import pytest

from modelshelf.errors import InvalidRecordError, ModelShelfError
from modelshelf.models._types import ModelFamily, ModelRecord
from modelshelf.models.catalog import (
    DEFAULT_MODELS,
    MODEL_FAMILIES,
    available_model_names,
    build_family_lookup,
    collect_model_table,
    collect_models,
    get_family_details,
    get_model,
    list_models,
)
from modelshelf.models.parser import base_model_name

from .conftest import make_record


class TestDefaultCatalog:
    def test_names_are_unique(self):
        names = list_models()
        assert len(names) == len(set(names))

    def test_every_family_has_details(self):
        for record in DEFAULT_MODELS:
            assert record.family in MODEL_FAMILIES, record.name

    def test_display_names_shared_by_variants(self):
        by_base: dict[str, set[str]] = {}
        for record in DEFAULT_MODELS:
            by_base.setdefault(base_model_name(record.name), set()).add(record.display_name)
        for base, names in by_base.items():
            assert len(names) == 1, base

    def test_get_model(self):
        record = get_model("Qwen3-4B-q4f16_1-MLC")
        assert record is not None
        assert record.family is ModelFamily.QWEN
        assert get_model("qwen3-4b-q4f16_1-mlc") is None

    def test_records_are_not_enriched(self):
        assert all(record.size_category is None for record in DEFAULT_MODELS)


class TestFamilyTable:
    def test_is_read_only(self):
        with pytest.raises(TypeError):
            MODEL_FAMILIES[ModelFamily.LLAMA] = None  # type: ignore[index]

    def test_details(self):
        details = get_family_details(ModelFamily.SMOL_LM)
        assert details is not None
        assert details.name == "SmolLM"


class TestFamilyLookup:
    def test_known_and_unknown_names(self):
        lookup = build_family_lookup(
            [make_record("a", family=ModelFamily.QWEN), make_record("b", family=ModelFamily.PHI)]
        )
        assert lookup("a") is ModelFamily.QWEN
        assert lookup("b") is ModelFamily.PHI
        assert lookup("missing") is None


# ---------------------------------------------------------------------------
# Custom model table
# ---------------------------------------------------------------------------


def _defaults() -> list[ModelRecord]:
    return [
        make_record("alpha-MLC", provider="Meta"),
        make_record("beta-MLC", provider=None),
    ]


class TestCollectModelTable:
    def test_defaults_use_id_as_display_name(self):
        table = collect_model_table(_defaults(), "")
        assert list(table) == ["alpha-MLC", "beta-MLC"]
        assert table["alpha-MLC"].display_name == "alpha-MLC"
        assert table["alpha-MLC"].provider == "Meta"
        assert table["alpha-MLC"].available

    def test_custom_entry_with_display_name(self):
        table = collect_model_table(_defaults(), "gamma=Gamma Chat")
        assert table["gamma"].display_name == "Gamma Chat"
        assert table["gamma"].provider == ""

    def test_plus_and_minus_prefixes(self):
        table = collect_model_table(_defaults(), "+gamma,-alpha-MLC")
        assert table["gamma"].available
        assert not table["alpha-MLC"].available

    def test_override_keeps_provider_and_position(self):
        table = collect_model_table(_defaults(), "alpha-MLC=Alpha")
        assert list(table) == ["alpha-MLC", "beta-MLC"]
        assert table["alpha-MLC"].display_name == "Alpha"
        assert table["alpha-MLC"].provider == "Meta"

    def test_empty_items_ignored(self):
        table = collect_model_table(_defaults(), ",,gamma,")
        assert list(table) == ["alpha-MLC", "beta-MLC", "gamma"]

    def test_collect_models_and_available_names(self):
        entries = collect_models(_defaults(), "-beta-MLC,delta")
        assert [e.name for e in entries] == ["alpha-MLC", "beta-MLC", "delta"]
        assert available_model_names(_defaults(), "-beta-MLC,delta") == ["alpha-MLC", "delta"]


# ---------------------------------------------------------------------------
# ModelRecord.from_dict
# ---------------------------------------------------------------------------


class TestModelRecordFromDict:
    def test_missing_and_null_fields_become_none(self):
        record = ModelRecord.from_dict(
            {"name": "m-MLC", "family": "qwen", "benchmark_score": None}
        )
        assert record.display_name == "m-MLC"
        assert record.family is ModelFamily.QWEN
        assert record.benchmark_score is None
        assert record.vram_required_MB is None
        assert record.context_window_size is None

    def test_malformed_numbers_become_none(self):
        record = ModelRecord.from_dict(
            {
                "name": "m",
                "family": "phi",
                "parameter": "n/a",
                "vram_required_MB": float("nan"),
                "context_window_size": True,
            }
        )
        assert record.parameter is None
        assert record.vram_required_MB is None
        assert record.context_window_size is None

    def test_numeric_strings_are_parsed(self):
        record = ModelRecord.from_dict(
            {
                "name": "m",
                "family": "gemma",
                "parameter": "2.6",
                "context_window_size": 4096.0,
                "size_category": "Small (<3B)",
            }
        )
        assert record.parameter == 2.6
        assert record.context_window_size == 4096
        assert record.to_dict()["size_category"] == "Small (<3B)"

    def test_unknown_family_raises(self):
        with pytest.raises(InvalidRecordError, match="falcon"):
            ModelRecord.from_dict({"name": "m", "family": "falcon"})

    def test_missing_family_raises(self):
        with pytest.raises(InvalidRecordError):
            ModelRecord.from_dict({"name": "m"})

    def test_unknown_size_category_raises(self):
        with pytest.raises(InvalidRecordError, match="Tiny"):
            ModelRecord.from_dict({"name": "m", "family": "phi", "size_category": "Tiny"})

    def test_invalid_record_error_hierarchy(self):
        with pytest.raises(ModelShelfError):
            ModelRecord.from_dict({"name": "m", "family": "falcon"})
        with pytest.raises(ValueError):
            ModelRecord.from_dict({"name": "m", "family": "falcon"})
