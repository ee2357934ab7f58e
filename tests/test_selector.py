"""Tests for modelshelf.selector — the enrich/filter/group/sort pipeline."""

from __future__ import annotations

import pytest

from modelshelf.errors import UnknownVariantError
from modelshelf.filters import FilterState
from modelshelf.models._types import ModelFamily, SizeCategory
from modelshelf.models.catalog import DEFAULT_MODELS, MODEL_FAMILIES
from modelshelf.ranking import SortKey
from modelshelf.runtime import RuntimeOverride, RuntimeOverrides
from modelshelf.selector import ModelSelector

from .conftest import make_record

_SCENARIO = [
    make_record("A-q4f16_1-MLC", display_name="A", parameter=2, benchmark_score=80),
    make_record("A-q4f32_1-MLC", display_name="A", parameter=2, benchmark_score=80),
    make_record(
        "B-MLC", display_name="B", family=ModelFamily.QWEN, parameter=9, benchmark_score=90
    ),
]


def _selector(**kwargs) -> ModelSelector:
    kwargs.setdefault("overrides", RuntimeOverrides.empty())
    return ModelSelector(_SCENARIO, **kwargs)


class TestEndToEnd:
    def test_sort_by_score(self):
        groups = _selector().compute(FilterState(), SortKey.SCORE)
        assert [g.base_name for g in groups] == ["B", "A"]
        assert [m.name for m in groups[1].models] == ["A-q4f16_1-MLC", "A-q4f32_1-MLC"]

    def test_sort_by_parameter(self):
        groups = _selector().compute(FilterState(), SortKey.PARAMETER)
        assert [g.base_name for g in groups] == ["B", "A"]

    def test_sort_by_name(self):
        groups = _selector().compute(FilterState(), "name")
        assert [g.base_name for g in groups] == ["A", "B"]

    def test_groups_are_enriched(self):
        groups = _selector().compute()
        assert groups[0].size_category is SizeCategory.MEDIUM
        assert groups[1].size_category is SizeCategory.SMALL

    def test_overrides_applied(self):
        overrides = RuntimeOverrides({"A-q4f32_1-MLC": RuntimeOverride(1500, 4096)})
        groups = _selector(overrides=overrides).compute(sort_key=SortKey.VRAM)
        assert [g.base_name for g in groups] == ["A", "B"]
        assert groups[0].models[1].vram_required_MB == 1500

    def test_filters_before_grouping(self):
        state = FilterState(search="q4f32")
        groups = _selector().compute(state)
        assert len(groups) == 1
        assert [m.name for m in groups[0].models] == ["A-q4f32_1-MLC"]

    def test_family_filter(self):
        state = FilterState(families=frozenset({ModelFamily.QWEN}))
        assert [g.base_name for g in _selector().compute(state)] == ["B"]

    def test_no_matches_is_empty_list(self):
        assert _selector().compute(FilterState(search="zzz")) == []

    def test_available_restricts_and_skips_unknown(self):
        groups = _selector().compute(available=["B-MLC", "not-in-catalog"])
        assert [g.base_name for g in groups] == ["B"]

    def test_repeatable(self):
        selector = _selector()
        first = selector.compute(FilterState(search="a"), SortKey.CONTEXT)
        second = selector.compute(FilterState(search="a"), SortKey.CONTEXT)
        assert first == second


class TestSelection:
    def test_single_variant_group_selects_directly(self):
        picked: list[str] = []
        selector = _selector(on_select=picked.append)
        groups = selector.compute()
        assert selector.select_group(groups[0]) is True
        assert picked == ["B-MLC"]

    def test_multi_variant_group_needs_expansion(self):
        picked: list[str] = []
        selector = _selector(on_select=picked.append)
        group_a = selector.compute()[1]
        assert selector.select_group(group_a) is False
        assert picked == []
        selector.select_variant(group_a, "A-q4f32_1-MLC")
        assert picked == ["A-q4f32_1-MLC"]

    def test_variant_outside_group(self):
        selector = _selector(on_select=lambda name: None)
        group_b = selector.compute()[0]
        with pytest.raises(UnknownVariantError, match="not a variant of B"):
            selector.select_variant(group_b, "A-q4f16_1-MLC")

    def test_no_sink_is_fine(self):
        selector = _selector()
        assert selector.select_group(selector.compute()[0]) is True


class TestFamilyDetails:
    def test_resolves_from_family_table(self):
        selector = _selector()
        details = selector.family_details("B-MLC")
        assert details is MODEL_FAMILIES[ModelFamily.QWEN]

    def test_unknown_name(self):
        assert _selector().family_details("nope") is None


class TestDefaultCatalog:
    def test_bundled_catalog_groups_variants(self):
        selector = ModelSelector()
        groups = selector.compute(sort_key=SortKey.SCORE)
        by_base = {g.base_name: g for g in groups}
        llama_1b = by_base["Llama-3.2-1B-Instruct"]
        assert llama_1b.variant_count == 3
        assert sum(g.variant_count for g in groups) == len(DEFAULT_MODELS)

    def test_canonical_context_window_kept(self):
        selector = ModelSelector()
        (record,) = selector.enriched(["RedPajama-INCITE-Chat-3B-v1-q4f16_1-MLC-1k"])
        assert record.context_window_size == 1024
        assert record.vram_required_MB == pytest.approx(2041.09)

    def test_unscored_groups_rank_last(self):
        groups = ModelSelector().compute(sort_key=SortKey.SCORE)
        scores = [g.benchmark_score for g in groups]
        first_missing = scores.index(None)
        assert all(s is None for s in scores[first_missing:])
