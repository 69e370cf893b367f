# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
import logging
from importlib import resources
from typing import Callable, Iterator, List

import pytest

from fstabparse.cli.fstab import LOGGER_NAME
from fstabparse.tests import data


def read_data_lines(name: str) -> List[str]:
    return resources.files(data).joinpath(name).read_text().splitlines()


@pytest.fixture
def data_lines() -> Callable[[str], List[str]]:
    """Lines of a fixture file under fstabparse/tests/data."""
    return read_data_lines


@pytest.fixture(autouse=True)
def _reset_cli_logger() -> Iterator[None]:
    """Drop handlers added by `init_logger` so they do not outlive the CliRunner
    streams they were bound to.
    """
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


def pytest_configure(config: "pytest.Config") -> None:
    config.addinivalue_line("markers", "slow: the test takes some time to run")
