from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest


@pytest.fixture(autouse=True)
def _reset_pmdscan_logger() -> Iterator[None]:
    """Drop handlers `main()` installs so they don't outlive the captured streams."""
    yield
    logger = logging.getLogger("pmdscan")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
