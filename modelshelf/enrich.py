"""Metadata enrichment — derive size category and fill gaps from runtime overrides."""

from __future__ import annotations

import dataclasses
import logging
from typing import Iterable, Mapping, Optional

from .models._types import ModelRecord
from .models.sizing import classify_size
from .runtime.overrides import RuntimeOverride

logger = logging.getLogger(__name__)


def enrich_model(
    model: ModelRecord,
    overrides: Optional[Mapping[str, RuntimeOverride]] = None,
) -> ModelRecord:
    """Return a copy of *model* with ``size_category`` and runtime metadata.

    ``vram_required_MB`` and ``context_window_size`` come from the runtime
    entry with the same id only when the record leaves them unset; a value
    already on the record is never replaced.
    """
    override = overrides.get(model.name) if overrides is not None else None

    vram = model.vram_required_MB
    context = model.context_window_size
    if override is not None:
        if vram is None and override.vram_required_MB is not None:
            vram = override.vram_required_MB
            logger.debug("%s: vram_required_MB=%s from runtime config", model.name, vram)
        if context is None and override.context_window_size is not None:
            context = override.context_window_size
            logger.debug("%s: context_window_size=%s from runtime config", model.name, context)

    return dataclasses.replace(
        model,
        size_category=classify_size(model.parameter, model.size),
        vram_required_MB=vram,
        context_window_size=context,
    )


def enrich_models(
    models: Iterable[ModelRecord],
    overrides: Optional[Mapping[str, RuntimeOverride]] = None,
) -> list[ModelRecord]:
    return [enrich_model(model, overrides) for model in models]
