"""
Supports
========

Support objects cached on distribution instances and used to short-circuit
evaluation outside the domain:

- :class:`ContinuousSupport` — an interval of the real line;
- :class:`IntegerSupport` — a range of consecutive integers, possibly
  unbounded on the right.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from math import floor, inf
from typing import TYPE_CHECKING, Protocol, cast, overload, runtime_checkable

import numpy as np

from pysatl_probdist.types import BoolArray, Interval1D, Number, NumericArray

if TYPE_CHECKING:
    from collections.abc import Iterator


@runtime_checkable
class Support(Protocol):
    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    @property
    def lower(self) -> float: ...
    @property
    def upper(self) -> float: ...


class ContinuousSupport(Interval1D):
    @property
    def lower(self) -> float:
        """Left endpoint (``supportA``)."""
        return self.left

    @property
    def upper(self) -> float:
        """Right endpoint (``supportB``)."""
        return self.right


@runtime_checkable
class DiscreteSupport(Support, Protocol):
    def first(self) -> int | None: ...

    def next(self, current: int) -> int | None: ...

    def prev(self, x: Number) -> int | None: ...


@dataclass(frozen=True, slots=True)
class IntegerSupport(DiscreteSupport):
    """
    Consecutive integers ``min_k, min_k + 1, ..., max_k``.

    Parameters
    ----------
    min_k : int or None
        Smallest point, ``None`` for no lower bound.
    max_k : int or None, default None
        Largest point, ``None`` for no upper bound.
    """

    min_k: int | None
    max_k: int | None = None

    def __post_init__(self) -> None:
        if self.min_k is not None and self.max_k is not None and self.max_k < self.min_k:
            raise ValueError("max_k must not be less than min_k.")

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        xf = np.asarray(x, dtype=float)
        mask = np.isfinite(xf) & (xf == np.floor(xf))
        if self.min_k is not None:
            mask &= xf >= self.min_k
        if self.max_k is not None:
            mask &= xf <= self.max_k

        if np.ndim(xf) == 0:
            return bool(mask)
        return cast(BoolArray, mask)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    @property
    def lower(self) -> float:
        return -inf if self.min_k is None else float(self.min_k)

    @property
    def upper(self) -> float:
        return inf if self.max_k is None else float(self.max_k)

    @property
    def is_left_bounded(self) -> bool:
        return self.min_k is not None

    @property
    def is_right_bounded(self) -> bool:
        return self.max_k is not None

    def first(self) -> int | None:
        return self.min_k

    def last(self) -> int | None:
        return self.max_k

    def next(self, current: int) -> int | None:
        nxt = current + 1
        if self.max_k is not None and nxt > self.max_k:
            return None
        if self.min_k is not None and nxt < self.min_k:
            return self.min_k
        return nxt

    def prev(self, x: Number) -> int | None:
        """Greatest support point strictly less than ``x``."""
        target = int(floor(float(x)))
        if target == float(x):
            target -= 1
        if self.max_k is not None and target > self.max_k:
            target = self.max_k
        if self.min_k is not None and target < self.min_k:
            return None
        return target

    def iter_points(self) -> Iterator[int]:
        if self.min_k is None:
            raise RuntimeError(
                "Cannot iterate points of a left-unbounded IntegerSupport. "
                "Provide min_k to enable enumeration."
            )

        def _gen() -> Iterator[int]:
            current = cast(int, self.min_k)
            while self.max_k is None or current <= self.max_k:
                yield current
                current += 1

        return _gen()

    __iter__ = iter_points


__all__ = [
    "Support",
    "ContinuousSupport",
    "DiscreteSupport",
    "IntegerSupport",
]
