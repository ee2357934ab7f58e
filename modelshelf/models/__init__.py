"""Catalog data model, id parsing and size classification."""

from ._types import GroupedModel, ModelFamily, ModelRecord, SizeCategory
from .catalog import (
    DEFAULT_MODELS,
    MODEL_FAMILIES,
    FamilyDetails,
    ModelTableEntry,
    available_model_names,
    build_family_lookup,
    collect_model_table,
    collect_models,
    get_family_details,
    get_model,
    list_models,
)
from .parser import (
    ParsedModelId,
    base_model_name,
    format_model_name,
    get_context_suffix,
    get_quantization,
    parse,
    variant_label,
)
from .sizing import classify_size, parse_parameter_size

__all__ = [
    "DEFAULT_MODELS",
    "MODEL_FAMILIES",
    "FamilyDetails",
    "GroupedModel",
    "ModelFamily",
    "ModelRecord",
    "ModelTableEntry",
    "ParsedModelId",
    "SizeCategory",
    "available_model_names",
    "base_model_name",
    "build_family_lookup",
    "classify_size",
    "collect_model_table",
    "collect_models",
    "format_model_name",
    "get_context_suffix",
    "get_family_details",
    "get_model",
    "get_quantization",
    "list_models",
    "parse",
    "parse_parameter_size",
    "variant_label",
]
