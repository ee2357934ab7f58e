"""Data classes for catalog records, grouped model families, and enums."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Optional

from ..errors import InvalidRecordError


class SizeCategory(str, Enum):
    """Ordinal parameter-count buckets, smallest first."""

    SMALL = "Small (<3B)"
    STANDARD = "Standard (3-7B)"
    MEDIUM = "Medium (7-30B)"
    LARGE = "Large (30B+)"

    @classmethod
    def parse(cls, value: str) -> "SizeCategory":
        """Accept the label (``"Small (<3B)"``) or the member name (``small``)."""
        for member in cls:
            if value == member.value or value.upper() == member.name:
                return member
        raise ValueError(f"unknown size category: {value!r}")


class ModelFamily(str, Enum):
    LLAMA = "llama"
    QWEN = "qwen"
    GEMMA = "gemma"
    PHI = "phi"
    MISTRAL = "mistral"
    SMOL_LM = "smollm"
    STABLE_LM = "stablelm"
    REDPAJAMA = "redpajama"
    DEEPSEEK = "deepseek"
    HERMES = "hermes"
    WIZARD_MATH = "wizardmath"


def _optional_float(value: Any) -> Optional[float]:
    """Coerce a payload value to float, mapping anything unusable to None."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number):
        return None
    return number


def _optional_int(value: Any) -> Optional[int]:
    number = _optional_float(value)
    if number is None or math.isinf(number):
        return None
    return int(number)


def _optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


@dataclass(frozen=True)
class ModelRecord:
    """A catalog entry keyed by its raw model id (``name``).

    Every optional field uses ``None`` as its only absence marker.
    """

    name: str
    display_name: str
    family: ModelFamily
    provider: Optional[str] = None
    parameter: Optional[float] = None  # billions of parameters
    size: Optional[str] = None  # human-readable, e.g. "7B", "500K"
    size_category: Optional[SizeCategory] = None
    benchmark_score: Optional[float] = None
    file_size: Optional[str] = None
    vram_required_MB: Optional[float] = None
    context_window_size: Optional[int] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ModelRecord":
        """Build a record from a loosely-typed payload.

        Missing keys, ``null`` and non-numeric numbers all become ``None``.
        An unknown ``family`` or ``size_category`` raises
        :class:`~modelshelf.errors.InvalidRecordError`.
        """
        name = str(data["name"])
        try:
            family = ModelFamily(data["family"])
        except (KeyError, ValueError):
            raise InvalidRecordError(
                f"{name}: unknown family {data.get('family')!r}"
            ) from None
        category = data.get("size_category")
        try:
            size_category = SizeCategory(category) if category else None
        except ValueError:
            raise InvalidRecordError(f"{name}: unknown size_category {category!r}") from None
        return cls(
            name=name,
            display_name=str(data.get("display_name") or name),
            family=family,
            provider=_optional_str(data.get("provider")),
            parameter=_optional_float(data.get("parameter")),
            size=_optional_str(data.get("size")),
            size_category=size_category,
            benchmark_score=_optional_float(data.get("benchmark_score")),
            file_size=_optional_str(data.get("file_size")),
            vram_required_MB=_optional_float(data.get("vram_required_MB")),
            context_window_size=_optional_int(data.get("context_window_size")),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class GroupedModel:
    """Variants sharing a base name.

    The descriptive fields are copied from ``models[0]``; they are
    representative of the family, not aggregated over its members.
    """

    base_name: str
    display_name: str
    family: ModelFamily
    models: tuple[ModelRecord, ...]
    benchmark_score: Optional[float] = None
    size_category: Optional[SizeCategory] = None
    file_size: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.models:
            raise ValueError(f"group {self.base_name!r} has no models")

    @property
    def variant_count(self) -> int:
        return len(self.models)

    @property
    def has_variants(self) -> bool:
        return len(self.models) > 1

    def contains(self, name: str) -> bool:
        return any(m.name == name for m in self.models)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
