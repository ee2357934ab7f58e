"""Read-only per-model overrides taken from a runtime's prebuilt app config."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterator, Optional

from ..models._types import _optional_float, _optional_int

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuntimeOverride:
    """Fields a runtime config may contribute to a catalog record."""

    vram_required_MB: Optional[float] = None
    context_window_size: Optional[int] = None


class RuntimeOverrides(Mapping):
    """Immutable ``model_id -> RuntimeOverride`` mapping.

    Lookups are by exact model id only.
    """

    def __init__(self, entries: Optional[Mapping[str, RuntimeOverride]] = None) -> None:
        self._entries: Mapping[str, RuntimeOverride] = MappingProxyType(dict(entries or {}))

    def __getitem__(self, model_id: str) -> RuntimeOverride:
        return self._entries[model_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"RuntimeOverrides({len(self._entries)} models)"

    @classmethod
    def empty(cls) -> "RuntimeOverrides":
        return cls()

    @classmethod
    def from_app_config(cls, config: Mapping[str, Any]) -> "RuntimeOverrides":
        """Build overrides from a prebuilt app config (``{"model_list": [...]}``).

        Entries without a string ``model_id`` are skipped with a warning.
        When an id repeats, the first entry wins, as a linear search would.
        """
        model_list = config.get("model_list") or []
        if not isinstance(model_list, list):
            logger.warning("Ignoring app config: model_list is %s, not a list", type(model_list).__name__)
            return cls()

        entries: dict[str, RuntimeOverride] = {}
        for index, item in enumerate(model_list):
            if not isinstance(item, Mapping) or not isinstance(item.get("model_id"), str):
                logger.warning("Ignoring app config entry %d: no model_id", index)
                continue
            model_id = item["model_id"]
            if model_id in entries:
                continue
            overrides = item.get("overrides")
            if not isinstance(overrides, Mapping):
                overrides = {}
            entries[model_id] = RuntimeOverride(
                vram_required_MB=_optional_float(item.get("vram_required_MB")),
                context_window_size=_optional_int(overrides.get("context_window_size")),
            )
        logger.debug("Loaded runtime overrides for %d models", len(entries))
        return cls(entries)


def default_overrides() -> RuntimeOverrides:
    """Overrides from the bundled prebuilt app config."""
    from .prebuilt import PREBUILT_APP_CONFIG

    return RuntimeOverrides.from_app_config(PREBUILT_APP_CONFIG)
