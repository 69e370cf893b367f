# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
import json
from dataclasses import asdict
from itertools import islice
from typing import Generator, Iterable, List, TypeVar

TItem = TypeVar("TItem")

json_dumps_dataclass_list = lambda data: json.dumps(  # noqa: E731
    [asdict(d) for d in data], separators=(",", ":")
)


def chunk_by_size(
    items: Iterable[TItem], size: int
) -> Generator[List[TItem], None, None]:
    """Split an iterable into consecutive lists of `size` items. The last chunk may
    be shorter.

    Raises:
        ValueError: If size is not a positive integer.

    Examples:
    >>> list(chunk_by_size("abcde", 2))
    [['a', 'b'], ['c', 'd'], ['e']]
    """
    if size <= 0:
        raise ValueError(f"Chunk size must be a positive integer, but got {size}")

    it = iter(items)
    while chunk := list(islice(it, size)):
        yield chunk
