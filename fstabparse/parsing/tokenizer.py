# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
from typing import Optional

from fstabparse.coerce import parse_small_int
from fstabparse.parsing.comment import is_comment
from fstabparse.parsing.whitespace import split_fields
from fstabparse.schemas.entry import FstabEntry

MIN_FIELDS = 3
MAX_FIELDS = 6


def parse_fstab_line(line: str) -> Optional[FstabEntry]:
    """Parse one line of a filesystem table.

    Fields are separated by runs of whitespace. `spec`, `file` and `fs_type` are
    required; `options` defaults to "" and `dump`/`fsck_pass` default to 0 when
    missing or not a signed 8-bit integer.

    Returns None for comments, for lines with fewer than 3 fields and for lines
    with more than 6 fields. The latter includes records followed by an inline
    comment, which fstab(5) does not allow.
    """
    if is_comment(line):
        return None

    parts = split_fields(line)
    if not MIN_FIELDS <= len(parts) <= MAX_FIELDS:
        return None

    # "options" is required by fstab(5), but util-linux accepts lines without it
    # (see libmount/src/tab_parse.c)
    options = parts[3] if len(parts) > 3 else ""
    dump = parse_small_int(parts[4]) if len(parts) > 4 else 0
    fsck_pass = parse_small_int(parts[5]) if len(parts) > 5 else 0
    return FstabEntry(
        spec=parts[0],
        file=parts[1],
        fs_type=parts[2],
        options=options,
        dump=dump,
        fsck_pass=fsck_pass,
    )
