"""Record filtering applied before grouping.

Stages run in a fixed order, each narrowing the previous result:
free-text search, family membership, size category. An empty family or
size selection means "no filter" for that stage.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional

from .models._types import ModelFamily, ModelRecord, SizeCategory

FamilyLookup = Callable[[str], Optional[ModelFamily]]


def _toggle(selection: frozenset, item: object) -> frozenset:
    if item in selection:
        return selection - {item}
    return selection | {item}


@dataclass(frozen=True)
class FilterState:
    """Caller-owned filter selections, passed in on every recomputation."""

    search: str = ""
    families: frozenset[ModelFamily] = field(default_factory=frozenset)
    size_categories: frozenset[SizeCategory] = field(default_factory=frozenset)

    def with_search(self, search: str) -> "FilterState":
        return FilterState(search, self.families, self.size_categories)

    def toggle_family(self, family: ModelFamily) -> "FilterState":
        return FilterState(self.search, _toggle(self.families, family), self.size_categories)

    def toggle_size_category(self, category: SizeCategory) -> "FilterState":
        return FilterState(self.search, self.families, _toggle(self.size_categories, category))

    @property
    def is_empty(self) -> bool:
        return not self.search and not self.families and not self.size_categories


def matches_search(model: ModelRecord, search: str) -> bool:
    """Case-insensitive substring match against display name or id."""
    if not search:
        return True
    needle = search.lower()
    return needle in (model.display_name or "").lower() or needle in model.name.lower()


def filter_models(
    models: Iterable[ModelRecord],
    state: FilterState,
    family_lookup: FamilyLookup,
) -> list[ModelRecord]:
    """Apply *state* to *models*, preserving input order.

    Family membership is resolved through *family_lookup*; ids it does not
    know are excluded only while a family filter is active.
    """
    filtered = list(models)

    if state.search:
        filtered = [m for m in filtered if matches_search(m, state.search)]

    if state.families:
        filtered = [m for m in filtered if family_lookup(m.name) in state.families]

    if state.size_categories:
        filtered = [m for m in filtered if m.size_category in state.size_categories]

    return filtered
