# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
from dataclasses import dataclass, field
from typing import Iterator, List, Tuple


@dataclass(frozen=True)
class FstabEntry:
    """A single record of a filesystem table.

    https://man7.org/linux/man-pages/man5/fstab.5.html
    """

    spec: str
    file: str
    fs_type: str
    options: str = ""
    dump: int = 0
    fsck_pass: int = 0

    @property
    def option_list(self) -> List[str]:
        """The raw options string split on commas. Empty options are dropped."""
        return [opt for opt in self.options.split(",") if opt]


@dataclass(frozen=True)
class FstabTable:
    entries: Tuple[FstabEntry, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[FstabEntry]:
        return iter(self.entries)

    def __getitem__(self, idx: int) -> FstabEntry:
        return self.entries[idx]
