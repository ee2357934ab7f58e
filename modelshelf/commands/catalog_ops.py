"""Catalog commands — list, show, families."""

from __future__ import annotations

import sys
from typing import Optional

import click

from modelshelf.cli_helpers import (
    _available_names,
    _build_selector,
    _complete_model_name,
    _fail,
    _resolve_options,
)
from modelshelf.errors import InvalidSortKeyError
from modelshelf.filters import FilterState
from modelshelf.formatting import (
    format_benchmark_score,
    format_context_window,
    format_parameter_size,
    format_vram,
)
from modelshelf.models._types import GroupedModel, ModelFamily, SizeCategory
from modelshelf.models.parser import format_model_name, parse, variant_label
from modelshelf.ranking import SortKey

_SIZE_CHOICES = [category.name.lower() for category in SizeCategory]


def register(cli: click.Group) -> None:
    cli.add_command(list_cmd)
    cli.add_command(show)
    cli.add_command(families)


def _echo_group(group: GroupedModel, expand: bool) -> None:
    first = group.models[0]
    score = format_benchmark_score(group.benchmark_score) or "-"
    params = format_parameter_size(first.parameter, first.size) or "-"
    variants = f"{len(group.models)} variants" if group.has_variants else ""
    click.echo(
        f"  {score:>5s}  {format_model_name(group.base_name):<34s} "
        f"{group.file_size or '-':<8s} {params:<14s} {variants}"
    )
    if not expand or not group.has_variants:
        return
    for model in group.models:
        quant = parse(model.name).quantization or "-"
        label = variant_label(model.name, model.context_window_size)
        vram = format_vram(model.vram_required_MB) or "-"
        context = format_context_window(model.context_window_size) or "-"
        click.echo(
            f"         - {model.name:<42s} {quant:<9s} {label:<15s} "
            f"{vram:>7s}  ctx {context}"
        )


@click.command("list")
@click.option("--search", "-s", default="", help="Case-insensitive substring of name or id.")
@click.option(
    "--family",
    "-f",
    "family_values",
    multiple=True,
    type=click.Choice([family.value for family in ModelFamily], case_sensitive=False),
    help="Only show these families (repeatable).",
)
@click.option(
    "--size",
    "size_values",
    multiple=True,
    type=click.Choice(_SIZE_CHOICES, case_sensitive=False),
    help="Only show these size categories (repeatable).",
)
@click.option(
    "--sort",
    default=None,
    help="Sort key: score, name, parameter, vram, context (default: score).",
)
@click.option(
    "--runtime-config",
    default=None,
    help="Prebuilt app config JSON (path or URL). Defaults to the bundled one.",
)
@click.option(
    "--custom-models",
    default=None,
    help="Comma-separated custom models (+id, -id, id=Display Name).",
)
@click.option("--expand", "-e", is_flag=True, help="List the variants of each family.")
def list_cmd(
    search: str,
    family_values: tuple[str, ...],
    size_values: tuple[str, ...],
    sort: Optional[str],
    runtime_config: Optional[str],
    custom_models: Optional[str],
    expand: bool,
) -> None:
    """List model families, ranked.

    \b
    Examples:
        modelshelf list
        modelshelf list --sort vram --expand
        modelshelf list --family llama --family qwen --size small
        modelshelf list --search coder
    """
    runtime_config, custom_models, sort = _resolve_options(
        runtime_config, custom_models, sort
    )
    try:
        sort_key = SortKey.parse(sort)
    except InvalidSortKeyError as exc:
        _fail(str(exc))

    state = FilterState(
        search=search,
        families=frozenset(ModelFamily(value.lower()) for value in family_values),
        size_categories=frozenset(SizeCategory.parse(value) for value in size_values),
    )
    selector = _build_selector(runtime_config)
    groups = selector.compute(state, sort_key, available=_available_names(custom_models))

    if not groups:
        click.echo("No models match.")
        return

    click.echo(f"  {'Score':>5s}  {'Model':<34s} {'File':<8s} {'Params':<14s} Variants")
    click.echo("-" * 76)
    for group in groups:
        _echo_group(group, expand)
    total = sum(len(group.models) for group in groups)
    click.echo(f"\n{len(groups)} model families, {total} models (sorted by {sort_key.value}).")


@click.command()
@click.argument("model_id", shell_complete=_complete_model_name)
@click.option(
    "--runtime-config",
    default=None,
    help="Prebuilt app config JSON (path or URL). Defaults to the bundled one.",
)
def show(model_id: str, runtime_config: Optional[str]) -> None:
    """Show how MODEL_ID decomposes and its enriched metadata."""
    runtime_config, _, _ = _resolve_options(runtime_config, None)
    selector = _build_selector(runtime_config)

    enriched = selector.enriched([model_id])
    if not enriched:
        import difflib

        names = [record.name for record in selector.models]
        suggestions = difflib.get_close_matches(model_id, names, n=3, cutoff=0.4)
        click.echo(f"Unknown model: {model_id}", err=True)
        if suggestions:
            click.echo(f"Did you mean: {', '.join(suggestions)}?", err=True)
        sys.exit(1)

    model = enriched[0]
    parsed = parse(model.name)
    details = selector.family_details(model.name)
    rows = [
        ("Display name", model.display_name),
        ("Base name", parsed.base_name),
        ("Quantization", parsed.quantization),
        ("Context suffix", parsed.context_suffix),
        ("Variant", variant_label(model.name, model.context_window_size)),
        ("Family", details.name if details else model.family.value),
        ("Provider", model.provider),
        ("Size category", model.size_category.value if model.size_category else None),
        ("Parameters", format_parameter_size(model.parameter, model.size)),
        ("Benchmark", format_benchmark_score(model.benchmark_score)),
        ("File size", model.file_size),
        ("VRAM", format_vram(model.vram_required_MB)),
        ("Context window", format_context_window(model.context_window_size)),
    ]
    click.echo(model.name)
    for label, value in rows:
        click.echo(f"  {label + ':':<16s}{value if value else '-'}")


@click.command()
def families() -> None:
    """List known model families."""
    from modelshelf.models.catalog import DEFAULT_MODELS, MODEL_FAMILIES

    click.echo(f"{'Family':<12s} {'Name':<14s} {'Models'}")
    click.echo("-" * 36)
    for family, details in MODEL_FAMILIES.items():
        count = sum(1 for record in DEFAULT_MODELS if record.family == family)
        click.echo(f"{family.value:<12s} {details.name:<14s} {count}")
