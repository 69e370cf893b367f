# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
import logging
from pathlib import Path
from typing import Callable, Optional, TypeVar, Union

import click

import tomli
from fstabparse.coerce import ensure_dict
from fstabparse.parsing.table import DEFAULT_CHUNK_SIZE
from typeguard import typechecked
from typing_extensions import ParamSpec

logger = logging.getLogger(__name__)


class IntWithSISymbol(click.ParamType):
    name = "integer_si"
    _symbol_map = {"k": 1000, "M": 1_000_000}

    def convert(
        self,
        value: Union[str, int],
        param: Optional[click.Parameter],
        ctx: Optional[click.Context],
    ) -> int:
        if isinstance(value, int):
            return value
        multiplier = 1
        extracted_value = value
        if value and not value[-1].isdigit():
            if any(value.endswith(s) for s in self._symbol_map):
                multiplier = self._symbol_map[value[-1]]
                extracted_value = value[:-1]
            else:
                allowed = ", ".join(self._symbol_map.keys())
                self.fail(
                    f"Unrecognized SI symbol '{value[-1]}'. Allowed symbols are: {allowed}",
                    param,
                    ctx,
                )
        try:
            return int(extracted_value) * multiplier
        except TypeError:
            self.fail(
                f"Expected string, but got {value!r} of type {type(value).__name__}",
                param,
                ctx,
            )
        except ValueError:
            self.fail(f"{value!r} is not a valid integer", param, ctx)


log_level_option = click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    default="WARNING",
    show_default=True,
    help="Logging verbosity level.",
)

log_folder_option = click.option(
    "--log-folder",
    type=click.Path(file_okay=False),
    default=None,
    help="The directory where logs will be stored. Logs go to stderr if omitted.",
)

stdout_option = click.option(
    "--stdout",
    is_flag=True,
    default=False,
    help="Whether to display logs to stdout. Only allowed with --format table.",
)

workers_option = click.option(
    "--workers",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Number of threads used for parsing. 1 parses sequentially.",
)

chunk_size_option = click.option(
    "--chunk-size",
    type=IntWithSISymbol(),
    default=DEFAULT_CHUNK_SIZE,
    show_default=True,
    help=(
        "The number of lines handed to each thread when --workers is greater than 1. "
        "Recognizes a subset of SI symbols for multiples for shorthand, e.g. 1k for "
        "1000, 1M for 1,000,000."
    ),
)


_Tv = TypeVar("_Tv")
_ClickCallback = Callable[[click.Context, click.Parameter, _Tv], None]


def _set_default_map(name: str) -> _ClickCallback[Path]:
    @typechecked
    def cb(ctx: click.Context, param: click.Parameter, path: Path) -> None:
        if not path.exists() or path == Path("/dev/null"):
            return

        logger.info(f"Reading config from {path}...")
        with path.open("rb") as f:
            try:
                conf = tomli.load(f)
            except tomli.TOMLDecodeError as e:
                raise click.BadParameter(
                    f"{path} does not contain valid TOML.",
                    ctx=ctx,
                    param=param,
                ) from e
        try:
            default_map = ensure_dict(conf[name])
        except KeyError as e:
            raise click.BadParameter(
                f"'{name}' is not a top-level table name in {path}. Valid names: {list(conf.keys())}",
                ctx=ctx,
                param=param,
            ) from e
        logger.info(f"Loaded table '{name}'.")

        ctx.default_map = {**(ctx.default_map or {}), **default_map}

    return cb


_P = ParamSpec("_P")
_R = TypeVar("_R")


def toml_config_option(
    name: str,
    *,
    default_config_path: Union[str, Path] = "/etc/fstabparse/config.toml",
) -> Callable[[Callable[_P, _R]], Callable[_P, _R]]:
    """Shared decorator for loading default option values from a TOML config file.
    Adds a `--config` option to the given command which takes a path. A non-existent
    path or `/dev/null` is treated as an empty dictionary.

    Precedence (lowest to highest):
    * `default` argument to `click.option`
    * the context's `default_map` setting
    * the value in the config file
    * value passed at the command line

    The option is eager so that the config file is read before any other option
    is processed.

    Parameters:
        name: The top-level table name in the config file containing the default values
            to use.
        default_config_path: The path from which to load the config if the option is
            omitted at the command line.
    """

    def decorator(f: Callable[_P, _R]) -> Callable[_P, _R]:
        return click.option(
            "--config",
            type=click.Path(dir_okay=False, path_type=Path),
            callback=_set_default_map(name),
            default=default_config_path,
            show_default=True,
            is_eager=True,
            expose_value=False,
            help=(
                f"Load option values from table '{name}' in the given TOML config file. "
                "A non-existent path or '/dev/null' are ignored and treated as empty tables."
            ),
        )(f)

    return decorator
