import logging

import numpy as np
import pytest

from gravsim import Body


@pytest.fixture(autouse=True)
def _reset_package_logger():
    yield
    logger = logging.getLogger("gravsim")
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def earth_moon():
    return [
        Body(6e24, (0.0, 0.0, 0.0), (0.0, 0.0, 50.0)),
        Body(3e23, (3.75e8, 0.0, 0.0), (0.0, 250.0, 0.0)),
    ]


@pytest.fixture
def three_bodies():
    return [
        Body(6e24, (0.0, 0.0, 0.0), (0.0, 0.0, 50.0)),
        Body(3e23, (3.75e8, 0.0, 0.0), (0.0, 250.0, 0.0)),
        Body(5e22, (2.0e8, -4.0e7, 1.5e7), (100.0, 0.0, 0.0)),
    ]
