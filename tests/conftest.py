import logging

import numpy as np
import pytest

from georand.random_source import NumpyRandomSource
from georand.utils.logging import ENV_LEVEL, logger


@pytest.fixture
def rng(): return np.random.default_rng(0)


@pytest.fixture(autouse=True)
def _reset_georand_logger(monkeypatch):
    monkeypatch.delenv(ENV_LEVEL, raising=False)
    yield
    logger.handlers.clear()
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.NOTSET)


class CountingSource:
    """RandomSource that counts draws."""

    def __init__(self, seed=0):
        self.inner = NumpyRandomSource(np.random.default_rng(seed))
        self.reals = 0
        self.ints = 0

    def uniform_real(self, lo, hi):
        self.reals += 1
        return self.inner.uniform_real(lo, hi)

    def uniform_int(self, lo, hi):
        self.ints += 1
        return self.inner.uniform_int(lo, hi)


@pytest.fixture
def counting_source():
    return CountingSource
