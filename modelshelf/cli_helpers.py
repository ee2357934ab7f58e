"""Shared helpers for CLI commands."""

from __future__ import annotations

import sys
from typing import NoReturn, Optional

import click

from .config import load_settings
from .errors import ModelShelfError
from .models.catalog import DEFAULT_MODELS, available_model_names
from .runtime import load_overrides
from .selector import ModelSelector

WELCOME_MESSAGE = """\
modelshelf — browse the in-browser model catalog

  Useful commands:
    modelshelf list                          ranked model families
    modelshelf list --sort vram --expand     cheapest first, with variants
    modelshelf list --family qwen --size small
    modelshelf show <model-id>               decomposition and metadata
    modelshelf families                      known model families

  Run modelshelf <command> --help for details.
"""


def _fail(message: str) -> NoReturn:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def _resolve_options(
    runtime_config: Optional[str],
    custom_models: Optional[str],
    sort: Optional[str] = None,
) -> tuple[Optional[str], str, str]:
    """CLI options win over env vars and the config file."""
    settings = load_settings()
    return (
        runtime_config or settings.runtime_config,
        custom_models if custom_models is not None else settings.custom_models,
        sort or settings.sort,
    )


def _build_selector(runtime_config: Optional[str]) -> ModelSelector:
    try:
        overrides = load_overrides(runtime_config)
    except ModelShelfError as exc:
        _fail(str(exc))
    return ModelSelector(DEFAULT_MODELS, overrides=overrides)


def _available_names(custom_models: str) -> list[str]:
    return available_model_names(DEFAULT_MODELS, custom_models)


def _complete_model_name(ctx, param, incomplete):
    """Shell completion callback for model id arguments."""
    from click.shell_completion import CompletionItem

    return [
        CompletionItem(record.name)
        for record in DEFAULT_MODELS
        if record.name.lower().startswith(incomplete.lower())
    ]
