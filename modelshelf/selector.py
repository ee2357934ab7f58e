"""Model selector — the recomputation pipeline behind the model picker.

Usage::

    from modelshelf.selector import ModelSelector

    selector = ModelSelector(on_select=store.set_model)
    groups = selector.compute(FilterState(search="llama"), SortKey.VRAM)
    if not selector.select_group(groups[0]):
        ...  # several variants: expand and let the user pick one

The selector keeps only what it is constructed with (catalog, overrides,
family lookup, selection callback). Filter state and sort key are passed on
every call, so recomputing after any input change is just another call.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Mapping, Optional, Sequence, Union

from .enrich import enrich_model
from .errors import UnknownVariantError
from .filters import FamilyLookup, FilterState, filter_models
from .grouping import group_models_by_base_name
from .models._types import GroupedModel, ModelFamily, ModelRecord
from .models.catalog import (
    DEFAULT_MODELS,
    MODEL_FAMILIES,
    FamilyDetails,
    build_family_lookup,
)
from .ranking import SortKey, sort_groups
from .runtime.overrides import RuntimeOverride, default_overrides

logger = logging.getLogger(__name__)

SelectionSink = Callable[[str], None]


class ModelSelector:
    """Filter, group and rank catalog records for display and selection."""

    def __init__(
        self,
        models: Sequence[ModelRecord] = DEFAULT_MODELS,
        overrides: Optional[Mapping[str, RuntimeOverride]] = None,
        family_lookup: Optional[FamilyLookup] = None,
        on_select: Optional[SelectionSink] = None,
        families: Mapping[ModelFamily, FamilyDetails] = MODEL_FAMILIES,
    ) -> None:
        self._models = tuple(models)
        self._families = families
        self._by_name = {model.name: model for model in self._models}
        self._overrides = overrides if overrides is not None else default_overrides()
        self._family_lookup = family_lookup or build_family_lookup(self._models)
        self._on_select = on_select

    @property
    def models(self) -> tuple[ModelRecord, ...]:
        return self._models

    def family_details(self, name: str) -> Optional[FamilyDetails]:
        """Display metadata (name, icon) for the family of model *name*."""
        family = self._family_lookup(name)
        if family is None:
            return None
        return self._families.get(family)

    def enriched(self, available: Optional[Iterable[str]] = None) -> list[ModelRecord]:
        """Enriched records for *available* ids (default: the whole catalog).

        Ids with no catalog record are dropped.
        """
        if available is None:
            records: Iterable[ModelRecord] = self._models
        else:
            records = []
            for name in available:
                record = self._by_name.get(name)
                if record is None:
                    logger.debug("Skipping %s: not in catalog", name)
                    continue
                records.append(record)
        return [enrich_model(record, self._overrides) for record in records]

    def compute(
        self,
        state: Optional[FilterState] = None,
        sort_key: Union[SortKey, str] = SortKey.SCORE,
        available: Optional[Iterable[str]] = None,
    ) -> list[GroupedModel]:
        """Enrich, filter, group and sort. An empty list is a valid result."""
        records = self.enriched(available)
        filtered = filter_models(records, state or FilterState(), self._family_lookup)
        groups = group_models_by_base_name(filtered)
        ranked = sort_groups(groups, sort_key)
        logger.debug(
            "%d records -> %d after filters -> %d groups",
            len(records),
            len(filtered),
            len(ranked),
        )
        return ranked

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def _commit(self, name: str) -> None:
        if self._on_select is not None:
            self._on_select(name)

    def select_group(self, group: GroupedModel) -> bool:
        """Select a group directly when it has a single variant.

        Returns False for multi-variant groups; the caller should expand
        the group and use :meth:`select_variant`.
        """
        if len(group.models) != 1:
            return False
        self._commit(group.models[0].name)
        return True

    def select_variant(self, group: GroupedModel, name: str) -> None:
        """Commit an explicit variant pick from *group*."""
        if not group.contains(name):
            raise UnknownVariantError(f"{name} is not a variant of {group.base_name}")
        self._commit(name)
