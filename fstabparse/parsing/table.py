# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
"""Assemble filesystem tables from sequences of lines.

Lines must already be split and have their terminators removed. Each line is
parsed on its own; lines which are comments or fail to parse are dropped.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional

from fstabparse.itertools import chunk_by_size
from fstabparse.parsing.tokenizer import parse_fstab_line
from fstabparse.schemas.entry import FstabEntry, FstabTable

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 1000


def parse_entries(lines: Iterable[str]) -> List[FstabEntry]:
    entries = []
    for line in lines:
        entry = parse_fstab_line(line)
        if entry is not None:
            entries.append(entry)
    return entries


def parse_fstab(lines: Iterable[str]) -> FstabTable:
    """Parse a filesystem table, keeping the valid records in input order."""
    return FstabTable(entries=tuple(parse_entries(lines)))


def parse_fstab_concurrently(
    lines: Iterable[str],
    max_workers: Optional[int] = None,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> FstabTable:
    """Same as `parse_fstab`, but lines are parsed in chunks of `chunk_size` on a
    thread pool. Chunks are reassembled in input order, so the result is identical
    to `parse_fstab(lines)`.

    Raises:
        ValueError: If chunk_size is not a positive integer.
    """
    chunks = list(chunk_by_size(lines, chunk_size))
    logger.debug(
        f"Parsing {len(chunks)} chunk(s) of at most {chunk_size} lines with max_workers={max_workers}"
    )
    entries: List[FstabEntry] = []
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        # map yields results in submission order
        for chunk_entries in executor.map(parse_entries, chunks):
            entries.extend(chunk_entries)
    return FstabTable(entries=tuple(entries))
