# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
"""Parse a filesystem table and print the records it contains."""

import logging
from typing import List, Literal, Optional, Sequence

import click

from fstabparse._version import __version__
from fstabparse.click import (
    chunk_size_option,
    log_folder_option,
    log_level_option,
    stdout_option,
    toml_config_option,
    workers_option,
)
from fstabparse.itertools import json_dumps_dataclass_list
from fstabparse.loader import (
    classify_lines,
    DEFAULT_FSTAB_PATH,
    LineOutcome,
    split_lines,
)
from fstabparse.parsing.table import parse_fstab, parse_fstab_concurrently
from fstabparse.schemas.entry import FstabEntry, FstabTable
from fstabparse.utils.logs import init_logger
from typeguard import typechecked

LOGGER_NAME = "fstabparse"

TABLE_HEADER = ("SPEC", "FILE", "TYPE", "OPTIONS", "DUMP", "PASS")


def format_table(entries: Sequence[FstabEntry]) -> str:
    """Render entries as whitespace aligned columns with a header row.

    Examples:
    >>> print(format_table([FstabEntry("proc", "/proc", "proc", "defaults")]))
    SPEC  FILE   TYPE  OPTIONS   DUMP  PASS
    proc  /proc  proc  defaults  0     0
    """
    rows: List[Sequence[str]] = [TABLE_HEADER]
    rows.extend(
        (e.spec, e.file, e.fs_type, e.options, str(e.dump), str(e.fsck_pass))
        for e in entries
    )
    widths = [max(len(row[i]) for row in rows) for i in range(len(TABLE_HEADER))]
    return "\n".join(
        "  ".join(col.ljust(w) for col, w in zip(row, widths)).rstrip() for row in rows
    )


def read_lines(path: str) -> List[str]:
    try:
        with click.open_file(path, encoding="utf-8") as f:
            return split_lines(f.read())
    except (OSError, UnicodeDecodeError) as e:
        raise click.FileError(path, hint=str(e)) from e


@click.command(epilog=f"fstabparse version: {__version__}")
@toml_config_option("fstabparse")
@click.argument(
    "fstab",
    type=click.Path(dir_okay=False, allow_dash=True),
    default=str(DEFAULT_FSTAB_PATH),
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "table"]),
    default="json",
    show_default=True,
    help="How to print the parsed records.",
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help=(
        "Exit with an error if any non-blank, non-comment line could not be parsed. "
        "Lines are then parsed sequentially and --workers is ignored."
    ),
)
@workers_option
@chunk_size_option
@log_level_option
@log_folder_option
@stdout_option
@click.version_option(__version__)
@typechecked
def main(
    fstab: str,
    output_format: Literal["json", "table"],
    strict: bool,
    workers: int,
    chunk_size: int,
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
    log_folder: Optional[str],
    stdout: bool,
) -> None:
    """Parse FSTAB (default: /etc/fstab, '-' for stdin) and print its records.

    Comments, blank lines and malformed lines are skipped.
    """
    if stdout and output_format == "json":
        raise click.UsageError("--stdout cannot be combined with --format json.")
    logger, _ = init_logger(
        logger_name=LOGGER_NAME,
        log_dir=log_folder,
        log_level=getattr(logging, log_level),
        log_stdout=stdout,
    )

    lines = read_lines(fstab)
    table: FstabTable
    invalid: List[int] = []
    if strict:
        entries: List[FstabEntry] = []
        for lineno, outcome, entry in classify_lines(lines):
            if entry is not None:
                entries.append(entry)
            elif outcome is LineOutcome.INVALID:
                invalid.append(lineno)
        table = FstabTable(entries=tuple(entries))
    elif workers > 1:
        if chunk_size <= 0:
            raise click.BadParameter(
                "must be a positive integer", param_hint="'--chunk-size'"
            )
        table = parse_fstab_concurrently(
            lines, max_workers=workers, chunk_size=chunk_size
        )
    else:
        table = parse_fstab(lines)
    logger.info(f"Parsed {len(table)} record(s) from {len(lines)} line(s) of {fstab}")

    if output_format == "json":
        click.echo(json_dumps_dataclass_list(table))
    else:
        click.echo(format_table(table.entries))

    if invalid:
        raise click.ClickException(
            f"{len(invalid)} invalid line(s) in {fstab}: {', '.join(map(str, invalid))}"
        )


if __name__ == "__main__":
    main()
