"""Static model catalog — the configured WebLLM models and their families.

Each record is keyed by its raw MLC model id. Variants of the same model
(different quantization or context window) are separate records; the
grouping engine collapses them by base name.

The family table is an immutable mapping built once here and passed to
whatever needs it; nothing mutates it after import.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Iterable, Mapping, Optional

from ._types import ModelFamily, ModelRecord
from .parser import base_model_name, format_model_name


@dataclass(frozen=True)
class FamilyDetails:
    """Display metadata for a model family."""

    family: ModelFamily
    name: str
    icon: Optional[str] = None  # asset name, resolved by the UI


@dataclass(frozen=True)
class ModelTableEntry:
    """An entry of the merged default + custom model table."""

    name: str
    display_name: str
    provider: Optional[str] = None
    available: bool = True


def _record(
    name: str,
    family: ModelFamily,
    provider: str,
    *,
    parameter: Optional[float] = None,
    size: Optional[str] = None,
    benchmark_score: Optional[float] = None,
    file_size: Optional[str] = None,
    vram_required_MB: Optional[float] = None,
    context_window_size: Optional[int] = None,
) -> ModelRecord:
    return ModelRecord(
        name=name,
        display_name=format_model_name(base_model_name(name)),
        family=family,
        provider=provider,
        parameter=parameter,
        size=size,
        benchmark_score=benchmark_score,
        file_size=file_size,
        vram_required_MB=vram_required_MB,
        context_window_size=context_window_size,
    )


# ---------------------------------------------------------------------------
# Family table
# ---------------------------------------------------------------------------

MODEL_FAMILIES: Mapping[ModelFamily, FamilyDetails] = MappingProxyType(
    {
        details.family: details
        for details in (
            FamilyDetails(ModelFamily.LLAMA, "Llama", "meta"),
            FamilyDetails(ModelFamily.QWEN, "Qwen", "qwen"),
            FamilyDetails(ModelFamily.GEMMA, "Gemma", "google"),
            FamilyDetails(ModelFamily.PHI, "Phi", "microsoft"),
            FamilyDetails(ModelFamily.MISTRAL, "Mistral", "mistral"),
            FamilyDetails(ModelFamily.SMOL_LM, "SmolLM", "smollm"),
            FamilyDetails(ModelFamily.STABLE_LM, "StableLM", "stablelm"),
            FamilyDetails(ModelFamily.REDPAJAMA, "RedPajama", "shirt"),
            FamilyDetails(ModelFamily.DEEPSEEK, "DeepSeek", "deepseek"),
            FamilyDetails(ModelFamily.HERMES, "Hermes", None),
            FamilyDetails(ModelFamily.WIZARD_MATH, "Wizard Math", None),
        )
    }
)


# ---------------------------------------------------------------------------
# The catalog
# ---------------------------------------------------------------------------

DEFAULT_MODELS: tuple[ModelRecord, ...] = (
    # -------------------------------------------------------------------
    # Meta Llama
    # -------------------------------------------------------------------
    _record(
        "Llama-3.2-1B-Instruct-q4f16_1-MLC",
        ModelFamily.LLAMA,
        "Meta",
        parameter=1.24,
        benchmark_score=49.3,
        file_size="0.9 GB",
    ),
    _record(
        "Llama-3.2-1B-Instruct-q4f32_1-MLC",
        ModelFamily.LLAMA,
        "Meta",
        parameter=1.24,
        benchmark_score=49.3,
        file_size="1.1 GB",
    ),
    _record(
        "Llama-3.2-1B-Instruct-q0f16-MLC",
        ModelFamily.LLAMA,
        "Meta",
        parameter=1.24,
        benchmark_score=49.3,
        file_size="2.5 GB",
    ),
    _record(
        "Llama-3.2-3B-Instruct-q4f16_1-MLC",
        ModelFamily.LLAMA,
        "Meta",
        parameter=3.21,
        benchmark_score=63.4,
        file_size="1.8 GB",
    ),
    _record(
        "Llama-3.2-3B-Instruct-q4f32_1-MLC",
        ModelFamily.LLAMA,
        "Meta",
        parameter=3.21,
        benchmark_score=63.4,
        file_size="2.2 GB",
    ),
    _record(
        "Llama-3.1-8B-Instruct-q4f16_1-MLC",
        ModelFamily.LLAMA,
        "Meta",
        parameter=8,
        benchmark_score=69.4,
        file_size="4.6 GB",
    ),
    _record(
        "Llama-3.1-8B-Instruct-q4f16_1-MLC-1k",
        ModelFamily.LLAMA,
        "Meta",
        parameter=8,
        benchmark_score=69.4,
        file_size="4.6 GB",
    ),
    _record(
        "Llama-3.1-8B-Instruct-q4f32_1-MLC",
        ModelFamily.LLAMA,
        "Meta",
        parameter=8,
        benchmark_score=69.4,
        file_size="5.3 GB",
    ),
    # -------------------------------------------------------------------
    # Alibaba Qwen
    # -------------------------------------------------------------------
    _record(
        "Qwen3-0.6B-q4f16_1-MLC",
        ModelFamily.QWEN,
        "Alibaba",
        size="0.6B",
        benchmark_score=44.9,
        file_size="0.5 GB",
    ),
    _record(
        "Qwen3-1.7B-q4f16_1-MLC",
        ModelFamily.QWEN,
        "Alibaba",
        size="1.7B",
        benchmark_score=55.4,
        file_size="1.1 GB",
    ),
    _record(
        "Qwen3-4B-q4f16_1-MLC",
        ModelFamily.QWEN,
        "Alibaba",
        size="4B",
        benchmark_score=67.6,
        file_size="2.4 GB",
    ),
    _record(
        "Qwen3-4B-q4f32_1-MLC",
        ModelFamily.QWEN,
        "Alibaba",
        size="4B",
        benchmark_score=67.6,
        file_size="3.1 GB",
    ),
    _record(
        "Qwen3-8B-q4f16_1-MLC",
        ModelFamily.QWEN,
        "Alibaba",
        size="8B",
        benchmark_score=74.2,
        file_size="4.8 GB",
    ),
    _record(
        "Qwen2.5-Coder-7B-Instruct-q4f16_1-MLC",
        ModelFamily.QWEN,
        "Alibaba",
        size="7B",
        file_size="4.4 GB",
    ),
    # -------------------------------------------------------------------
    # Google Gemma
    # -------------------------------------------------------------------
    _record(
        "gemma-2-2b-it-q4f16_1-MLC",
        ModelFamily.GEMMA,
        "Google",
        parameter=2.6,
        benchmark_score=56.1,
        file_size="1.5 GB",
    ),
    _record(
        "gemma-2-2b-it-q4f32_1-MLC",
        ModelFamily.GEMMA,
        "Google",
        parameter=2.6,
        benchmark_score=56.1,
        file_size="1.9 GB",
    ),
    _record(
        "gemma-2-9b-it-q4f16_1-MLC",
        ModelFamily.GEMMA,
        "Google",
        parameter=9.2,
        benchmark_score=71.3,
        file_size="5.4 GB",
    ),
    # -------------------------------------------------------------------
    # Microsoft Phi
    # -------------------------------------------------------------------
    _record(
        "Phi-3.5-mini-instruct-q4f16_1-MLC",
        ModelFamily.PHI,
        "Microsoft",
        parameter=3.8,
        benchmark_score=69.0,
        file_size="2.2 GB",
    ),
    _record(
        "Phi-3.5-mini-instruct-q4f32_1-MLC",
        ModelFamily.PHI,
        "Microsoft",
        parameter=3.8,
        benchmark_score=69.0,
        file_size="2.6 GB",
    ),
    _record(
        "Phi-3.5-mini-instruct-q4f16_1-MLC-1k",
        ModelFamily.PHI,
        "Microsoft",
        parameter=3.8,
        benchmark_score=69.0,
        file_size="2.2 GB",
        vram_required_MB=2520.07,
        context_window_size=1024,
    ),
    # -------------------------------------------------------------------
    # Mistral AI
    # -------------------------------------------------------------------
    _record(
        "Mistral-7B-Instruct-v0.3-q4f16_1-MLC",
        ModelFamily.MISTRAL,
        "Mistral AI",
        parameter=7.25,
        benchmark_score=62.5,
        file_size="4.1 GB",
    ),
    # -------------------------------------------------------------------
    # Hugging Face SmolLM
    # -------------------------------------------------------------------
    _record(
        "SmolLM2-360M-Instruct-q0f16-MLC",
        ModelFamily.SMOL_LM,
        "Hugging Face",
        parameter=0.36,
        benchmark_score=35.1,
        file_size="0.7 GB",
    ),
    _record(
        "SmolLM2-1.7B-Instruct-q4f16_1-MLC",
        ModelFamily.SMOL_LM,
        "Hugging Face",
        parameter=1.7,
        benchmark_score=48.2,
        file_size="1.0 GB",
    ),
    # -------------------------------------------------------------------
    # Stability AI
    # -------------------------------------------------------------------
    _record(
        "stablelm-2-zephyr-1_6b-q4f16_1-MLC",
        ModelFamily.STABLE_LM,
        "Stability AI",
        parameter=1.6,
        file_size="1.0 GB",
    ),
    # -------------------------------------------------------------------
    # Together RedPajama
    # -------------------------------------------------------------------
    _record(
        "RedPajama-INCITE-Chat-3B-v1-q4f16_1-MLC",
        ModelFamily.REDPAJAMA,
        "Together",
        size="3B",
        file_size="1.6 GB",
    ),
    _record(
        "RedPajama-INCITE-Chat-3B-v1-q4f16_1-MLC-1k",
        ModelFamily.REDPAJAMA,
        "Together",
        size="3B",
        file_size="1.6 GB",
        context_window_size=1024,
    ),
    # -------------------------------------------------------------------
    # DeepSeek
    # -------------------------------------------------------------------
    _record(
        "DeepSeek-R1-Distill-Qwen-7B-q4f16_1-MLC",
        ModelFamily.DEEPSEEK,
        "DeepSeek",
        parameter=7.6,
        benchmark_score=61.8,
        file_size="4.3 GB",
    ),
    # -------------------------------------------------------------------
    # Nous Hermes
    # -------------------------------------------------------------------
    _record(
        "Hermes-3-Llama-3.1-8B-q4f16_1-MLC",
        ModelFamily.HERMES,
        "Nous Research",
        parameter=8,
        benchmark_score=66.0,
        file_size="4.6 GB",
    ),
    # -------------------------------------------------------------------
    # WizardMath
    # -------------------------------------------------------------------
    _record(
        "WizardMath-7B-V1.1-q4f16_1-MLC",
        ModelFamily.WIZARD_MATH,
        "WizardLM",
        size="7B",
        file_size="4.1 GB",
    ),
)


_BY_NAME: Mapping[str, ModelRecord] = MappingProxyType(
    {record.name: record for record in DEFAULT_MODELS}
)


def list_models() -> list[str]:
    """Return the ids of all configured models, in catalog order."""
    return [record.name for record in DEFAULT_MODELS]


def get_model(name: str) -> Optional[ModelRecord]:
    """Look up a configured model by exact id."""
    return _BY_NAME.get(name)


def get_family_details(family: ModelFamily) -> Optional[FamilyDetails]:
    return MODEL_FAMILIES.get(family)


def build_family_lookup(
    records: Iterable[ModelRecord],
) -> Callable[[str], Optional[ModelFamily]]:
    """Return a ``name -> family`` lookup over *records*.

    Unknown names resolve to None; the lookup never raises.
    """
    families = {record.name: record.family for record in records}

    def lookup(name: str) -> Optional[ModelFamily]:
        return families.get(name)

    return lookup


# ---------------------------------------------------------------------------
# Custom model table
# ---------------------------------------------------------------------------


def collect_model_table(
    models: Iterable[ModelRecord],
    custom_models: str = "",
) -> dict[str, ModelTableEntry]:
    """Merge configured models with a comma-separated custom model list.

    Custom entries look like ``name``, ``+name``, ``-name`` or
    ``name=Display Name``. A leading ``-`` marks the model unavailable.
    A custom entry replaces a default one of the same name but keeps its
    provider.
    """
    table: dict[str, ModelTableEntry] = {}

    for model in models:
        table[model.name] = ModelTableEntry(
            name=model.name,
            display_name=model.name,
            provider=model.provider,
        )

    for item in custom_models.split(","):
        if not item:
            continue
        available = not item.startswith("-")
        name_config = item[1:] if item.startswith(("+", "-")) else item
        name, _, display_name = name_config.partition("=")
        if not name:
            continue
        existing = table.get(name)
        table[name] = ModelTableEntry(
            name=name,
            display_name=display_name or name,
            provider=existing.provider if existing and existing.provider else "",
            available=available,
        )

    return table


def collect_models(
    models: Iterable[ModelRecord],
    custom_models: str = "",
) -> list[ModelTableEntry]:
    """Generate the full model table as a list, defaults first."""
    return list(collect_model_table(models, custom_models).values())


def available_model_names(
    models: Iterable[ModelRecord],
    custom_models: str = "",
) -> list[str]:
    """Ids from the merged table that are not marked unavailable."""
    return [
        entry.name
        for entry in collect_models(models, custom_models)
        if entry.available
    ]
