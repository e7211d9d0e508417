"""Randomness port consumed by the generators.

The generators never seed or own entropy.  They draw from an object exposing
two methods:

``uniform_real(lo, hi)``
    a float in ``[lo, hi)``
``uniform_int(lo, hi)``
    an int in ``[lo, hi]`` (both ends inclusive)

``numpy.random.Generator`` and ``random.Random`` are wrapped automatically by
:func:`as_random_source`.
"""
from __future__ import annotations

import random
from typing import Protocol, Union, runtime_checkable

import numpy as np

__all__ = [
    "RandomSource",
    "NumpyRandomSource",
    "PythonRandomSource",
    "RandomLike",
    "as_random_source",
]


@runtime_checkable
class RandomSource(Protocol):
    def uniform_real(self, lo: float, hi: float) -> float: ...

    def uniform_int(self, lo: int, hi: int) -> int: ...


class NumpyRandomSource:
    """Adapter over ``numpy.random.Generator``."""

    def __init__(self, generator: np.random.Generator):
        self._gen = generator

    @property
    def generator(self) -> np.random.Generator:
        return self._gen

    def uniform_real(self, lo: float, hi: float) -> float:
        return float(self._gen.uniform(lo, hi))

    def uniform_int(self, lo: int, hi: int) -> int:
        return int(self._gen.integers(lo, hi, endpoint=True))

    def __repr__(self) -> str:
        return f"<NumpyRandomSource {type(self._gen.bit_generator).__name__}>"


class PythonRandomSource:
    """Adapter over the standard library ``random.Random``."""

    def __init__(self, rnd: random.Random):
        self._rnd = rnd

    def uniform_real(self, lo: float, hi: float) -> float:
        if hi <= lo:
            return float(lo)
        # random.uniform may return hi through rounding
        x = lo + (hi - lo) * self._rnd.random()
        return float(x if x < hi else lo)

    def uniform_int(self, lo: int, hi: int) -> int:
        return self._rnd.randint(int(lo), int(hi))

    def __repr__(self) -> str:
        return "<PythonRandomSource>"


RandomLike = Union[RandomSource, np.random.Generator, random.Random]


def as_random_source(rng: RandomLike) -> RandomSource:
    """Return ``rng`` as a :class:`RandomSource`, wrapping known generators."""
    if isinstance(rng, np.random.Generator):
        return NumpyRandomSource(rng)
    if isinstance(rng, random.Random):
        return PythonRandomSource(rng)
    if isinstance(rng, RandomSource):
        return rng
    raise TypeError(
        f"unsupported random source {type(rng).__name__!r}; expected a "
        "numpy Generator, random.Random or an object with uniform_real/uniform_int"
    )
