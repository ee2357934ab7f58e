"""Runtime override provider — VRAM and context window from a prebuilt config."""

from .loader import load_app_config, load_overrides
from .overrides import RuntimeOverride, RuntimeOverrides, default_overrides

__all__ = [
    "RuntimeOverride",
    "RuntimeOverrides",
    "default_overrides",
    "load_app_config",
    "load_overrides",
]
