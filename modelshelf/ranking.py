"""Rank grouped models by a selectable key.

Every numeric key follows the same missing-value policy: a group without a
value sorts after every group with one, whichever direction the key sorts
in, and two groups without values fall through to the tie-break. The final
tie-break is the display name (case-insensitive, collated with the
process LC_COLLATE locale; the CLI sets it from the environment), then the
base name, so the order is total.
"""

from __future__ import annotations

import locale
import math
from enum import Enum
from typing import Any, Callable, Iterable, Optional, Union

from .errors import InvalidSortKeyError
from .models._types import GroupedModel
from .models.sizing import parse_parameter_size


class SortKey(str, Enum):
    SCORE = "score"
    NAME = "name"
    PARAMETER = "parameter"
    VRAM = "vram"
    CONTEXT = "context"

    @classmethod
    def parse(cls, value: Union[str, "SortKey"]) -> "SortKey":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            valid = ", ".join(k.value for k in cls)
            raise InvalidSortKeyError(
                f"unknown sort key {value!r} (expected one of: {valid})"
            ) from None


def _defined(value: Optional[float]) -> bool:
    return value is not None and not (isinstance(value, float) and math.isnan(value))


# ---------------------------------------------------------------------------
# Per-group scalars
# ---------------------------------------------------------------------------


def group_score(group: GroupedModel) -> Optional[float]:
    return group.benchmark_score if _defined(group.benchmark_score) else None


def group_parameter_size(group: GroupedModel) -> Optional[float]:
    """Parameter size of the first member that has one."""
    for model in group.models:
        value = parse_parameter_size(model.parameter, model.size)
        if value is not None:
            return value
    return None


def group_min_vram(group: GroupedModel) -> Optional[float]:
    """VRAM of the cheapest variant."""
    values = [m.vram_required_MB for m in group.models if _defined(m.vram_required_MB)]
    return min(values) if values else None


def group_max_context(group: GroupedModel) -> Optional[int]:
    values = [m.context_window_size for m in group.models if _defined(m.context_window_size)]
    return max(values) if values else None


# key -> (scalar, descending)
_NUMERIC_KEYS: dict[SortKey, tuple[Callable[[GroupedModel], Optional[float]], bool]] = {
    SortKey.SCORE: (group_score, True),
    SortKey.PARAMETER: (group_parameter_size, True),
    SortKey.VRAM: (group_min_vram, False),
    SortKey.CONTEXT: (group_max_context, True),
}


def _numeric_sort_key(value: Optional[float], descending: bool) -> tuple[int, float]:
    if value is None:
        return (1, 0.0)
    return (0, -value if descending else value)


def _name_sort_key(group: GroupedModel) -> tuple[str, str, str]:
    # strxfrm rejects NUL characters
    folded = group.display_name.casefold().replace("\x00", "")
    return (locale.strxfrm(folded), group.display_name, group.base_name)


def sort_groups(
    groups: Iterable[GroupedModel],
    key: Union[SortKey, str] = SortKey.SCORE,
) -> list[GroupedModel]:
    """Return *groups* ordered by *key*; the input is left untouched.

    ``score``, ``parameter`` and ``context`` sort descending, ``vram``
    ascending (cheapest first); ``name`` uses only the display-name
    tie-break.
    """
    sort_key = SortKey.parse(key)
    numeric = _NUMERIC_KEYS.get(sort_key)

    if numeric is None:
        return sorted(groups, key=_name_sort_key)

    scalar, descending = numeric

    def composite(group: GroupedModel) -> tuple[Any, ...]:
        return (_numeric_sort_key(scalar(group), descending), *_name_sort_key(group))

    return sorted(groups, key=composite)
