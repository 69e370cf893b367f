# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
from typing import Any, Dict, Optional

from typeguard import typechecked

# dump and fsck_pass are stored as signed 8-bit integers by the tools that read them
SMALL_INT_MIN = -128
SMALL_INT_MAX = 127


@typechecked
def ensure_dict(x: Any) -> Dict[str, Any]:
    return x


def maybe_int(x: Any) -> Optional[int]:
    try:
        return int(x)
    except (TypeError, ValueError):
        return None


def _is_decimal_literal(s: str) -> bool:
    digits = s[1:] if s[:1] in ("+", "-") else s
    return digits.isascii() and digits.isdigit()


def parse_small_int(s: str, default: int = 0) -> int:
    """Parse a signed 8-bit decimal integer, falling back to `default`.

    Only an optional sign followed by ASCII digits is accepted, so strings such as
    "1_0" or "٣" that `int` would take are treated as invalid.

    Examples:
    >>> parse_small_int("2")
    2
    >>> parse_small_int("+7")
    7
    >>> parse_small_int("128")
    0
    >>> parse_small_int("x", default=-1)
    -1
    """
    if not _is_decimal_literal(s):
        return default
    x = maybe_int(s)
    if x is None or not SMALL_INT_MIN <= x <= SMALL_INT_MAX:
        return default
    return x
