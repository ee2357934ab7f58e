"""Tests for modelshelf.filters — search, family and size-category stages."""

from __future__ import annotations

from modelshelf.filters import FilterState, filter_models, matches_search
from modelshelf.models._types import ModelFamily, SizeCategory
from modelshelf.models.catalog import build_family_lookup

from .conftest import make_record

_RECORDS = [
    make_record(
        "Llama-3.2-1B-Instruct-q4f16_1-MLC",
        display_name="Llama 3.2 1B Instruct",
        family=ModelFamily.LLAMA,
        size_category=SizeCategory.SMALL,
    ),
    make_record(
        "Qwen3-8B-q4f16_1-MLC",
        display_name="Qwen3 8B",
        family=ModelFamily.QWEN,
        size_category=SizeCategory.MEDIUM,
    ),
    make_record(
        "Phi-3.5-mini-instruct-q4f16_1-MLC",
        display_name="Phi 3.5 Mini Instruct",
        family=ModelFamily.PHI,
        size_category=SizeCategory.STANDARD,
    ),
    make_record(
        "mystery-MLC",
        display_name="Mystery",
        family=ModelFamily.GEMMA,
    ),
]

_LOOKUP = build_family_lookup(_RECORDS[:3])


def _names(records) -> list[str]:
    return [r.name for r in records]


class TestFilterModels:
    def test_empty_state_returns_everything(self):
        assert filter_models(_RECORDS, FilterState(), _LOOKUP) == _RECORDS

    def test_search_only_when_selections_empty(self):
        result = filter_models(_RECORDS, FilterState(search="INSTRUCT"), _LOOKUP)
        assert _names(result) == [
            "Llama-3.2-1B-Instruct-q4f16_1-MLC",
            "Phi-3.5-mini-instruct-q4f16_1-MLC",
        ]

    def test_search_matches_id_or_display_name(self):
        by_id = filter_models(_RECORDS, FilterState(search="q4f16"), _LOOKUP)
        assert len(by_id) == 3
        by_display = filter_models(_RECORDS, FilterState(search="mini instruct"), _LOOKUP)
        assert _names(by_display) == ["Phi-3.5-mini-instruct-q4f16_1-MLC"]

    def test_family_filter_uses_lookup(self):
        state = FilterState(families=frozenset({ModelFamily.QWEN, ModelFamily.PHI}))
        result = filter_models(_RECORDS, state, _LOOKUP)
        assert _names(result) == ["Qwen3-8B-q4f16_1-MLC", "Phi-3.5-mini-instruct-q4f16_1-MLC"]

    def test_family_lookup_miss_excluded_without_error(self):
        state = FilterState(families=frozenset({ModelFamily.GEMMA}))
        assert filter_models(_RECORDS, state, _LOOKUP) == []

    def test_size_filter(self):
        state = FilterState(size_categories=frozenset({SizeCategory.SMALL, SizeCategory.MEDIUM}))
        result = filter_models(_RECORDS, state, _LOOKUP)
        assert _names(result) == ["Llama-3.2-1B-Instruct-q4f16_1-MLC", "Qwen3-8B-q4f16_1-MLC"]

    def test_stages_intersect(self):
        state = FilterState(
            search="instruct",
            families=frozenset({ModelFamily.LLAMA, ModelFamily.PHI}),
            size_categories=frozenset({SizeCategory.STANDARD}),
        )
        result = filter_models(_RECORDS, state, _LOOKUP)
        assert _names(result) == ["Phi-3.5-mini-instruct-q4f16_1-MLC"]

    def test_does_not_mutate_input(self):
        records = list(_RECORDS)
        filter_models(records, FilterState(search="qwen"), _LOOKUP)
        assert records == _RECORDS


class TestFilterState:
    def test_toggle_family(self):
        state = FilterState().toggle_family(ModelFamily.QWEN)
        assert state.families == {ModelFamily.QWEN}
        assert state.toggle_family(ModelFamily.QWEN).families == frozenset()

    def test_toggle_size_category_keeps_other_fields(self):
        state = FilterState(search="x").toggle_size_category(SizeCategory.LARGE)
        assert state.search == "x"
        assert state.size_categories == {SizeCategory.LARGE}

    def test_is_empty(self):
        assert FilterState().is_empty
        assert not FilterState().with_search("a").is_empty

    def test_matches_search_empty_term(self):
        assert matches_search(_RECORDS[0], "")
