"""
modelshelf — model catalog normalization and ranking.

Turns raw WebLLM model ids and catalog records into deduplicated,
filterable, ranked model families with variant drill-down.
"""

from __future__ import annotations

__version__ = "1.0.0"

from .enrich import enrich_model, enrich_models
from .errors import (
    InvalidRecordError,
    InvalidSortKeyError,
    ModelShelfError,
    RuntimeConfigError,
    UnknownVariantError,
)
from .filters import FilterState, filter_models
from .grouping import group_models_by_base_name
from .models import (
    GroupedModel,
    ModelFamily,
    ModelRecord,
    SizeCategory,
    base_model_name,
    classify_size,
    format_model_name,
    get_quantization,
    variant_label,
)
from .ranking import SortKey, sort_groups
from .runtime import RuntimeOverride, RuntimeOverrides
from .selector import ModelSelector

__all__ = [
    "GroupedModel",
    "InvalidRecordError",
    "InvalidSortKeyError",
    "ModelFamily",
    "ModelRecord",
    "ModelSelector",
    "ModelShelfError",
    "RuntimeConfigError",
    "RuntimeOverride",
    "RuntimeOverrides",
    "SizeCategory",
    "SortKey",
    "UnknownVariantError",
    "FilterState",
    "base_model_name",
    "classify_size",
    "enrich_model",
    "enrich_models",
    "filter_models",
    "format_model_name",
    "get_quantization",
    "group_models_by_base_name",
    "sort_groups",
    "variant_label",
]
