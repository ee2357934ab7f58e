"""Human-readable labels for catalog fields."""

from __future__ import annotations

from typing import Optional


def _format_parameter_number(parameter: float) -> str:
    if float(parameter).is_integer():
        return f"{int(parameter)}B"
    formatted = f"{parameter:.1f}"
    if formatted.endswith(".0"):
        formatted = formatted[:-2]
    return f"{formatted}B"


def format_parameter_size(
    parameter: Optional[float] = None,
    size: Optional[str] = None,
) -> Optional[str]:
    """``3.21`` -> ``"3.2B params"``; falls back to the size string."""
    if parameter is not None:
        return f"{_format_parameter_number(parameter)} params"

    if not size:
        return None

    normalized = size.strip()
    if not normalized:
        return None
    return f"{normalized.upper()} params"


def format_vram(vram_mb: Optional[float]) -> Optional[str]:
    """``4096`` -> ``"4.0 GB"``. Zero and None give None."""
    if not vram_mb:
        return None
    return f"{vram_mb / 1024:.1f} GB"


def format_context_window(context_size: Optional[int]) -> Optional[str]:
    """``4096`` -> ``"4K"``; values below 1024 are printed as-is."""
    if not context_size:
        return None
    if context_size >= 1024:
        return f"{context_size / 1024:.0f}K"
    return str(context_size)


def format_benchmark_score(score: Optional[float]) -> Optional[str]:
    if score is None:
        return None
    return f"{score:.1f}"
