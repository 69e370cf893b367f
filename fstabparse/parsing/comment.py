# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
from fstabparse.parsing.whitespace import strip_leading

COMMENT_CHAR = "#"


def is_comment(line: str) -> bool:
    """Return whether `line` is a comment, i.e. its first non-whitespace character
    is '#'. Whatever follows the '#' is irrelevant.

    Examples:
    >>> is_comment("# Filesystems.")
    True
    >>> is_comment("   #")
    True
    >>> is_comment("proc /proc proc defaults 0 0 # not a comment line")
    False
    >>> is_comment("\\x1c# U+001C is not whitespace")
    False
    >>> is_comment("")
    False
    """
    return strip_leading(line).startswith(COMMENT_CHAR)
