"""Parameter-size parsing and size-category classification."""

from __future__ import annotations

import math
import re
from typing import Optional

from ._types import SizeCategory

# Leading numeric portion of a size string, as JavaScript's parseFloat reads it.
_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")


def _parse_leading_number(text: str) -> Optional[float]:
    match = _LEADING_NUMBER.match(text)
    if match is None:
        return None
    return float(match.group(1))


def parse_parameter_size(
    parameter: Optional[float] = None,
    size: Optional[str] = None,
) -> Optional[float]:
    """Return the parameter count in billions, or None if neither input is usable.

    An explicit *parameter* wins. Otherwise the leading number of *size* is
    used; a trailing ``K`` means thousands of millions and is divided by 1000.
    """
    if parameter is not None and not math.isnan(parameter):
        return parameter

    if not size:
        return None

    number = _parse_leading_number(size)
    if number is None:
        return None

    if size[-1].upper() == "K":
        return number / 1000
    return number


def _category_for(billions: float) -> SizeCategory:
    if billions < 3:
        return SizeCategory.SMALL
    if billions < 7:
        return SizeCategory.STANDARD
    if billions < 30:
        return SizeCategory.MEDIUM
    return SizeCategory.LARGE


def classify_size(
    parameter: Optional[float] = None,
    size: Optional[str] = None,
) -> Optional[SizeCategory]:
    """Bucket a model into a size category.

    Returns None when neither *parameter* nor a parsable *size* is given;
    absence is never mapped to a default bucket.
    """
    billions = parse_parameter_size(parameter, size)
    if billions is None:
        return None
    return _category_for(billions)
