"""
modelshelf command-line interface.

Usage::

    modelshelf list
    modelshelf list --sort vram --expand
    modelshelf list --family llama --size small --search instruct
    modelshelf list --runtime-config ./prebuilt.json
    modelshelf show Llama-3.2-1B-Instruct-q4f16_1-MLC
    modelshelf families
"""

from __future__ import annotations

import locale
import logging

import click

from modelshelf import __version__
from modelshelf.cli_helpers import WELCOME_MESSAGE

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="modelshelf")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """modelshelf — model catalog normalization and ranking."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error:
        logger.debug("Unsupported LC_COLLATE locale, using C collation")
    if ctx.invoked_subcommand is None:
        click.echo(WELCOME_MESSAGE)


# ---------------------------------------------------------------------------
# Register command modules
# ---------------------------------------------------------------------------

from modelshelf.commands import catalog_ops  # noqa: E402

for _mod in [catalog_ops]:
    _mod.register(main)
