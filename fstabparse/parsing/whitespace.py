# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
"""Field separators of a filesystem table line.

Separators are the Unicode White_Space characters. `str.isspace` (and therefore
`str.split`, `str.strip` and `\\s`) also accepts the information separators
U+001C..U+001F, which are not White_Space and are kept inside fields here.
"""

import re
from typing import List

WHITESPACE_RUN = re.compile(r"[^\S\x1c-\x1f]+")
LEADING_WHITESPACE = re.compile(r"\A[^\S\x1c-\x1f]+")


def split_fields(line: str) -> List[str]:
    """Split `line` on runs of whitespace, dropping empty fields.

    Examples:
    >>> split_fields("  proc\\t/proc  proc ")
    ['proc', '/proc', 'proc']
    >>> split_fields("a\\x1cb c")
    ['a\\x1cb', 'c']
    >>> split_fields(" ")
    []
    """
    return [field for field in WHITESPACE_RUN.split(line) if field]


def strip_leading(line: str) -> str:
    """Remove leading whitespace from `line`."""
    return LEADING_WHITESPACE.sub("", line, count=1)
