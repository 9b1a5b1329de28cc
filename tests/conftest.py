import logging
from typing import Iterator

import pytest


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    yield
    logger = logging.getLogger("arithcalc")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
