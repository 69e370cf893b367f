# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
"""Line sources for the parser and per-line bookkeeping for callers that need to
know which lines were dropped.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from fstabparse.parsing.comment import is_comment
from fstabparse.parsing.table import parse_fstab
from fstabparse.parsing.tokenizer import parse_fstab_line
from fstabparse.parsing.whitespace import split_fields
from fstabparse.schemas.entry import FstabEntry, FstabTable

logger = logging.getLogger(__name__)

DEFAULT_FSTAB_PATH = Path("/etc/fstab")


class LineOutcome(Enum):
    BLANK = "blank"
    COMMENT = "comment"
    INVALID = "invalid"
    VALID = "valid"


def split_lines(text: str) -> List[str]:
    return text.splitlines()


def read_fstab_lines(path: Union[str, Path] = DEFAULT_FSTAB_PATH) -> List[str]:
    """Read a filesystem table from disk. Errors from opening or decoding the file
    are propagated.
    """
    with open(path, "r", encoding="utf-8") as f:
        return split_lines(f.read())


def load_fstab(path: Union[str, Path] = DEFAULT_FSTAB_PATH) -> FstabTable:
    return parse_fstab(read_fstab_lines(path))


def classify_lines(
    lines: Iterable[str],
) -> Iterator[Tuple[int, LineOutcome, Optional[FstabEntry]]]:
    """Yield (line number, outcome, entry) for every line. Line numbers start at 1
    and entry is None unless the outcome is VALID.

    Blank lines are reported separately from other invalid lines. Both are dropped
    by `parse_fstab`.
    """
    for lineno, line in enumerate(lines, start=1):
        if not split_fields(line):
            yield lineno, LineOutcome.BLANK, None
        elif is_comment(line):
            yield lineno, LineOutcome.COMMENT, None
        elif (entry := parse_fstab_line(line)) is None:
            logger.debug(f"Dropping invalid line {lineno}: {line!r}")
            yield lineno, LineOutcome.INVALID, None
        else:
            yield lineno, LineOutcome.VALID, entry
