from __future__ import annotations
import logging
from collections.abc import Iterator

import pytest


@pytest.fixture(autouse=True)
def reset_cssmix_logger() -> Iterator[None]:
    """Drop handlers the CLI installs so they don't outlive the runner's streams."""
    yield
    logger = logging.getLogger("cssmix")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
