"""
Argument checks and sample handling shared by the built-in families.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from numbers import Integral, Real
from typing import TYPE_CHECKING

import numpy as np

from pysatl_probdist.errors import UnsupportedPreconditionError

if TYPE_CHECKING:
    from typing import Any

    from numpy.typing import NDArray

    from pysatl_probdist.types import SampleLike


def is_integral(value: Any) -> bool:
    """Whether ``value`` is an integer, or a real number with an integral value."""
    if isinstance(value, bool):
        return False
    if isinstance(value, Integral):
        return True
    return isinstance(value, Real) and math.isfinite(value) and float(value).is_integer()


def check_integer(name: str, value: Any, minimum: int | None = None) -> int:
    """
    Return ``value`` as ``int``.

    Raises
    ------
    ValueError
        If ``value`` is not integral or below ``minimum``.
    """
    if not is_integral(value):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    result = int(value)
    if minimum is not None and result < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {result}")
    return result


def round_half_up(value: float) -> int:
    """Nearest integer, halves rounded towards ``+inf`` (``round`` rounds them to even)."""
    return math.floor(value + 0.5)


def check_positive(name: str, value: float) -> None:
    """Raise ``ValueError`` unless ``value > 0``."""
    if not value > 0.0:
        raise ValueError(f"{name} must be > 0, got {value!r}")


def check_unit(u: float) -> None:
    """Raise ``ValueError`` unless ``u`` is a probability."""
    if not 0.0 <= u <= 1.0:
        raise ValueError(f"u not in [0, 1], got {u!r}")


def as_sample(
    sample: SampleLike, n: int | None = None, *, minimum: int = 1
) -> NDArray[np.float64]:
    """
    Read the first ``n`` observations as a float array.

    The input is copied, never modified.

    Raises
    ------
    ValueError
        If ``n`` is negative or exceeds the sample length.
    UnsupportedPreconditionError
        If fewer than ``minimum`` observations are used.
    """
    data = np.array(sample, dtype=np.float64).ravel()
    if n is not None:
        if n < 0 or n > data.size:
            raise ValueError(f"n must be in [0, {data.size}], got {n}")
        data = data[:n]
    if data.size < minimum:
        raise UnsupportedPreconditionError(
            f"at least {minimum} observation(s) required, got {data.size}"
        )
    return data


def check_integer_sample(data: NDArray[np.float64], minimum: int | None = None) -> None:
    """
    Raise ``ValueError`` if an observation is not an integer or below ``minimum``.
    """
    if not np.all(np.isfinite(data)) or not np.all(data == np.floor(data)):
        raise ValueError("sample must contain integer observations only")
    if minimum is not None and data.min() < minimum:
        raise ValueError(f"sample contains observations below {minimum}")


def above(x: float) -> float:
    """Smallest integer strictly greater than ``x``; infinities pass through."""
    if math.isinf(x):
        return x
    return float(math.floor(x) + 1)
