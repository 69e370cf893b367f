# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
"""Parser for filesystem tables (fstab(5))."""

from fstabparse._version import __version__
from fstabparse.loader import load_fstab
from fstabparse.parsing.comment import is_comment
from fstabparse.parsing.table import parse_fstab, parse_fstab_concurrently
from fstabparse.parsing.tokenizer import parse_fstab_line
from fstabparse.schemas.entry import FstabEntry, FstabTable

__all__ = [
    "__version__",
    "FstabEntry",
    "FstabTable",
    "is_comment",
    "load_fstab",
    "parse_fstab",
    "parse_fstab_concurrently",
    "parse_fstab_line",
]
