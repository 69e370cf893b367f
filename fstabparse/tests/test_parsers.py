# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
"""Tests for parsers"""

import unittest
from dataclasses import FrozenInstanceError
from typing import List, Optional

import pytest

from fstabparse.coerce import maybe_int, parse_small_int
from fstabparse.parsing.comment import is_comment
from fstabparse.parsing.tokenizer import parse_fstab_line
from fstabparse.parsing.whitespace import split_fields, strip_leading
from fstabparse.schemas.entry import FstabEntry
from typeguard import typechecked

ROOT_UUID = "/dev/disk/by-uuid/3aa72460-7d05-4bd4-861f-6ef8b82082dc"
SWAP_UUID = "/dev/disk/by-uuid/102799bd-d9d2-4ef6-936f-6ba9b59f168e"


class TestIsComment(unittest.TestCase):
    def test_comments(self) -> None:
        self.assertTrue(is_comment("# This is a generated file.  Do not edit!"))
        self.assertTrue(is_comment("       # This is a generated file.  Do not edit!"))
        self.assertTrue(is_comment("\t#"))
        self.assertTrue(is_comment("#"))
        self.assertTrue(is_comment("#/dev/sda1 / ext4 defaults 0 1"))
        self.assertTrue(is_comment("\u3000\u00a0#"))

    def test_not_comments(self) -> None:
        self.assertFalse(is_comment(""))
        self.assertFalse(is_comment("   "))
        self.assertFalse(is_comment("/dev/sda1 / ext4 defaults 0 1 # trailing"))
        self.assertFalse(is_comment("a#b c d"))
        self.assertFalse(is_comment("\x1c#"))
        self.assertFalse(is_comment("\x1e # b c"))


@pytest.mark.parametrize(
    "line, expected",
    [
        ("", []),
        (" \t\n\r\x0b\x0c", []),
        ("\x85a\u2028b\u2029", ["a", "b"]),
        ("a\x1c \x1d\x1eb \x1f", ["a\x1c", "\x1d\x1eb", "\x1f"]),
    ],
)
def test_split_fields(line: str, expected: List[str]) -> None:
    assert split_fields(line) == expected


def test_strip_leading() -> None:
    assert strip_leading(" \t a b ") == "a b "
    assert strip_leading("\x1c a") == "\x1c a"


@pytest.mark.parametrize(
    "value, expected",
    [
        ("0", 0),
        ("1", 1),
        ("2", 2),
        ("-1", -1),
        ("+5", 5),
        ("007", 7),
        ("127", 127),
        ("-128", -128),
        ("128", 0),
        ("-129", 0),
        ("999999", 0),
        ("", 0),
        ("-", 0),
        ("+", 0),
        ("x", 0),
        ("1.0", 0),
        ("1_0", 0),
        ("0x1", 0),
        ("٣", 0),
        ("²", 0),
    ],
)
@typechecked
def test_parse_small_int(value: str, expected: int) -> None:
    assert parse_small_int(value) == expected


def test_parse_small_int_custom_default() -> None:
    assert parse_small_int("nope", default=-1) == -1
    assert parse_small_int("3", default=-1) == 3


@pytest.mark.parametrize(
    "value, expected",
    [("12", 12), ("-3", -3), ("abc", None), (None, None), (4.7, 4)],
)
def test_maybe_int(value: object, expected: Optional[int]) -> None:
    assert maybe_int(value) == expected


@pytest.mark.parametrize(
    "line, expected",
    [
        (
            f"{ROOT_UUID} / ext4 defaults 0 1",
            FstabEntry(ROOT_UUID, "/", "ext4", "defaults", 0, 1),
        ),
        (
            "/dev/sda1 / ext4 defaults 0 1",
            FstabEntry(
                spec="/dev/sda1",
                file="/",
                fs_type="ext4",
                options="defaults",
                dump=0,
                fsck_pass=1,
            ),
        ),
        # options present, numeric fields omitted
        (
            f"{ROOT_UUID} / ext4 defaults",
            FstabEntry(ROOT_UUID, "/", "ext4", "defaults", 0, 0),
        ),
        # only dump present
        (
            "/dev/mapper/foo\t\t/home/foo  ext4\tnoatime,defaults 1",
            FstabEntry("/dev/mapper/foo", "/home/foo", "ext4", "noatime,defaults", 1, 0),
        ),
        # options omitted entirely
        (
            f"{SWAP_UUID} none swap",
            FstabEntry(SWAP_UUID, "none", "swap", "", 0, 0),
        ),
        ("none swap swap", FstabEntry("none", "swap", "swap")),
        # leading and trailing whitespace is not a field
        (
            "   tmpfs /dev/shm tmpfs defaults 0 0   ",
            FstabEntry("tmpfs", "/dev/shm", "tmpfs", "defaults", 0, 0),
        ),
        # unparseable numbers fall back to 0 without rejecting the line
        ("a b c d 999999 1", FstabEntry("a", "b", "c", "d", 0, 1)),
        ("a b c d x y", FstabEntry("a", "b", "c", "d", 0, 0)),
        ("a b c d -1 -128", FstabEntry("a", "b", "c", "d", -1, -128)),
        # '#' in the middle of a field is not a comment
        ("a#1 b c", FstabEntry("a#1", "b", "c")),
        # information separators are not whitespace
        ("a\x1cb c d", FstabEntry("a\x1cb", "c", "d")),
        ("\x1f a b", FstabEntry("\x1f", "a", "b")),
        ("\x1d# b c", FstabEntry("\x1d#", "b", "c")),
        # other Unicode whitespace separates fields
        ("a\u3000b\u00a0c", FstabEntry("a", "b", "c")),
    ],
)
@typechecked
def test_parse_fstab_line_valid(line: str, expected: FstabEntry) -> None:
    assert parse_fstab_line(line) == expected


@pytest.mark.parametrize(
    "line",
    [
        "",
        "   ",
        "\t",
        "bug",
        "a b",
        "\x1c",
        "\x1c b",
        "# This is a generated file.  Do not edit!",
        "       # This is a generated file.  Do not edit!",
        "   #",
        f"{ROOT_UUID} / ext4 defaults 0 1 # foo # bar",
        "/dev/sda1 / ext4 defaults 0 1 # trailing comment",
        "/dev/sda1 / ext4 defaults 0 1 extra",
        "this is broken line with unexpected number of fields",
    ],
)
@typechecked
def test_parse_fstab_line_invalid(line: str) -> None:
    assert parse_fstab_line(line) is None


def test_entry_is_immutable() -> None:
    entry = FstabEntry("proc", "/proc", "proc", "defaults")
    with pytest.raises(FrozenInstanceError):
        entry.dump = 1  # type: ignore[misc]


@pytest.mark.parametrize(
    "options, expected",
    [
        ("", []),
        ("defaults", ["defaults"]),
        ("user=SRGROUP/baby,noauto", ["user=SRGROUP/baby", "noauto"]),
        ("rw,,noatime,", ["rw", "noatime"]),
    ],
)
def test_option_list(options: str, expected: list) -> None:
    entry = FstabEntry("a", "b", "c", options)
    assert entry.option_list == expected
    assert entry.options == options
