"""Model id parser — splits MLC model ids into structured components.

WebLLM model ids carry a quantization tag and a vendor suffix, optionally
followed by a context-window suffix::

    Llama-3.2-1B-Instruct-q4f16_1-MLC      -> base=Llama-3.2-1B-Instruct, quant=q4f16_1
    Phi-3.5-mini-instruct-q4f32_1-MLC-1k   -> base=Phi-3.5-mini-instruct, quant=q4f32_1, ctx=1k
    Qwen3-4B-MLC                           -> base=Qwen3-4B, quant=None
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

# -q4f16_1, -q4f32_1, -q0f16, ...
_QUANT_PATTERN = re.compile(r"-(q\d+f\d+(?:_\d+)?)", re.IGNORECASE)
# -MLC, -MLC-1k; only ever at the end of the id
_VENDOR_SUFFIX_PATTERN = re.compile(r"-MLC(?:-(\d+k))?$", re.IGNORECASE)

_VERSION_TOKEN = re.compile(r"^\d+(\.\d+)?$")
_QUANT_TOKEN = re.compile(r"^q\d+f\d+(_\d+)?$", re.IGNORECASE)
_SIZE_TOKEN = re.compile(r"^\d+[BK]$", re.IGNORECASE)
_TRAILING_REVISION = re.compile(r"_\d+$")

# Ids built for a 1K context window carry this marker.
LOW_RESOURCE_MARKER = "-1k"
LOW_RESOURCE_CONTEXT_WINDOW = 1024

VARIANT_LOW_RESOURCE = "Low Resource"
VARIANT_HIGH_PRECISION = "High Precision"
VARIANT_STANDARD = "Standard"


@dataclass(frozen=True)
class ParsedModelId:
    """Result of decomposing a raw model id."""

    raw: str
    base_name: str
    quantization: Optional[str]
    context_suffix: Optional[str]

    @property
    def is_base(self) -> bool:
        return self.raw == self.base_name


def _strip_once(model_id: str) -> str:
    return _VENDOR_SUFFIX_PATTERN.sub("", _QUANT_PATTERN.sub("", model_id, count=1))


def base_model_name(model_id: str) -> str:
    """Return the id without its quantization tag and vendor/context suffix.

    Stripping is repeated until nothing changes, so
    ``base_model_name(base_model_name(x)) == base_model_name(x)``.
    """
    current = model_id
    while True:
        stripped = _strip_once(current)
        if stripped == current:
            return stripped
        current = stripped


def get_quantization(model_id: str) -> Optional[str]:
    """Return the quantization tag (``q4f16_1``) or None."""
    match = _QUANT_PATTERN.search(model_id)
    return match.group(1) if match else None


def get_context_suffix(model_id: str) -> Optional[str]:
    """Return the context-window suffix after ``-MLC`` (``1k``) or None."""
    match = _VENDOR_SUFFIX_PATTERN.search(model_id)
    if match is None:
        return None
    return match.group(1)


def parse(model_id: str) -> ParsedModelId:
    """Decompose *model_id* into base name, quantization and context suffix."""
    return ParsedModelId(
        raw=model_id,
        base_name=base_model_name(model_id),
        quantization=get_quantization(model_id),
        context_suffix=get_context_suffix(model_id),
    )


def _format_token(token: str) -> str:
    if _VERSION_TOKEN.match(token):
        return token
    if _QUANT_TOKEN.match(token):
        return _TRAILING_REVISION.sub("", token)
    if _SIZE_TOKEN.match(token):
        return token.upper()
    return token[:1].upper() + token[1:].lower()


def format_model_name(model_id: str) -> str:
    """Human-readable name for a model id.

    ``Llama-3.2-1B-Instruct-q4f16_1-MLC`` -> ``Llama 3.2 1B Instruct q4f16``
    """
    trimmed = _VENDOR_SUFFIX_PATTERN.sub("", model_id)
    return " ".join(_format_token(token) for token in trimmed.split("-"))


def variant_label(model_id: str, context_window: Optional[int] = None) -> str:
    """Friendly label for a variant, checked in fixed priority order."""
    if LOW_RESOURCE_MARKER in model_id or context_window == LOW_RESOURCE_CONTEXT_WINDOW:
        return VARIANT_LOW_RESOURCE

    quant = get_quantization(model_id)
    if quant is not None and "f32" in quant:
        return VARIANT_HIGH_PRECISION

    return VARIANT_STANDARD
