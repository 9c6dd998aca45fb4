"""
Student t distribution with fast approximate distribution function and quantile.

For ``n <= 2`` every evaluator is the exact Student one. Otherwise:

- :func:`cdf` switches on ``n`` and ``|x|`` between Cornish's recursion
  (``n <= 20``, ``|x| <= 8.01``), an asymptotic normal expansion
  (``n > 20``, ``|x| < 8.01``) and a density-started series in the tails;
- :func:`inverse_f` is Hill's algorithm 396, accurate to at least five
  decimal digits.

Density, moments and estimation are the exact Student ones.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from pysatl_probdist.distributions.support import ContinuousSupport
from pysatl_probdist.families.builtins.common import check_integer, check_unit, is_integral
from pysatl_probdist.families.builtins.continuous import student
from pysatl_probdist.families.parametric_family import ParametricFamily
from pysatl_probdist.families.parametrizations import (
    Parametrization,
    constraint,
    derived,
    parametrization,
)
from pysatl_probdist.families.registry import ParametricFamilyRegister
from pysatl_probdist.numerics.series import sum_series
from pysatl_probdist.numerics.special import bar_f01, gamma_ratio_half, inverse_f01
from pysatl_probdist.types import CharacteristicName, FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping
    from typing import Any

N1 = 20
X1 = 8.01
KMAX = 200
EPS = 0.5e-16

density = student.density
mean = student.mean
variance = student.variance
standard_deviation = student.standard_deviation
mle = student.mle


def _tail_terms(n: int, b: float, y: float) -> Iterator[float]:
    k = 2
    while True:
        y *= (k - 1) / (k * b)
        yield y / (n + k)
        k += 2


def _cdf(n: int, x: float, strict: bool = False) -> float:
    if n <= 2:
        return student._cdf(n, x)
    if x == -math.inf:
        return 0.0
    if x == math.inf:
        return 1.0

    ax = abs(x)

    if n <= N1 and ax <= X1:
        b = 1.0 + x * x / n
        y = x / math.sqrt(n)
        z = 1.0
        for k in range(n - 2, 1, -2):
            z = 1.0 + z * (k - 1) / (k * b)
        if n % 2 == 0:
            v = (1.0 + z * y / math.sqrt(b)) / 2.0
        elif y > -1.0:
            v = 0.5 + (math.atan(y) + z * y / b) / math.pi
        else:
            v = (math.atan(-1.0 / y) + z * y / b) / math.pi
        return v if v > 1.0e-18 else 0.0

    if ax < X1:
        a = n - 0.5
        b = 48.0 * a * a
        z2 = a * math.log1p(x * x / n)
        z = math.sqrt(z2)
        y = (
            (((((64.0 * z2 + 788.0) * z2 + 9801.0) * z2 + 89775.0) * z2 + 543375.0) * z2 + 1788885.0)
            * z
            / (210.0 * b * b * b)
        )
        y -= (((4.0 * z2 + 33.0) * z2 + 240.0) * z2 + 855.0) * z / (10.0 * b * b)
        y += z + (z2 + 3.0) * z / b
        return bar_f01(-y) if x >= 0.0 else bar_f01(y)

    b = 1.0 + x * x / n
    y = gamma_ratio_half(n / 2.0) / (math.sqrt(math.pi * n) * b ** ((n + 1) / 2.0))
    y *= 2.0 * math.sqrt(n * b)
    z = sum_series(
        _tail_terms(n, b, y),
        start=y / n,
        eps=EPS,
        max_terms=(KMAX - 2) // 2,
        strict=strict,
        label="StudentQuick.cdf",
    )
    return 1.0 - z / 2.0 if x >= 0.0 else z / 2.0


def _inverse_f(n: int, u: float) -> float:
    check_unit(u)
    if n <= 2:
        return student._inverse_f(n, u)
    if u == 0.0:
        return -math.inf
    if u == 1.0:
        return math.inf

    e = float(n)
    p = 2.0 * (1.0 - u) if u > 0.5 else 2.0 * u

    a = 1.0 / (e - 0.5)
    b = 48.0 / (a * a)
    c = ((20700.0 / b * a - 98.0) * a - 16.0) * a + 96.36
    d = e * math.sqrt(a * math.pi / 2.0) * ((94.5 / (b + c) - 3.0) / b + 1.0)
    y = (d * p) ** (2.0 / e)
    if y > a + 0.05:
        x = 0.0 if p == 1.0 else inverse_f01(p * 0.5)
        y = x * x
        if n < 5:
            c += 0.3 * (e - 4.5) * (x + 0.6)
        c = (((0.05 * d * x - 5.0) * x - 7.0) * x - 2.0) * x + b + c
        y = (((((0.4 * y + 6.3) * y + 36.0) * y + 94.5) / c - y - 3.0) / b + 1.0) * x
        y = math.expm1(a * y * y)
    else:
        y = (
            (1.0 / (((e + 6.0) / (e * y) - 0.089 * d - 0.822) * (e + 2.0) * 3.0) + 0.5 / (e + 4.0))
            * y
            - 1.0
        ) * (e + 1.0) / (e + 2.0) + 1.0 / y

    t = math.sqrt(e * y)
    return -t if u < 0.5 else t


def cdf(n: int, x: float, *, strict: bool = False) -> float:
    """
    Approximate Student distribution function.

    Parameters
    ----------
    n : int
        Degrees of freedom, ``n >= 1``.
    x : float
        Evaluation point.
    strict : bool, default False
        Raise :class:`~pysatl_probdist.errors.ConvergenceError` instead of
        warning when the tail series reaches its term cap.

    Warns
    -----
    PrecisionWarning
        If the tail series stops at its cap; the partial sum is returned.
    """
    return _cdf(check_integer("n", n, 1), x, strict)


def bar_f(n: int, x: float, *, strict: bool = False) -> float:
    """``cdf(n, -x)``, exact Student for ``n <= 2``."""
    n = check_integer("n", n, 1)
    if n <= 2:
        return student._bar_f(n, x)
    return _cdf(n, -x, strict)


def inverse_f(n: int, u: float) -> float:
    """
    Approximate Student quantile (Hill, algorithm 396).

    Returns ``-inf`` for ``u = 0`` and ``inf`` for ``u = 1``.
    """
    return _inverse_f(check_integer("n", n, 1), u)


def configure_student_quick_family() -> None:
    """
    Configure and register the StudentQuick distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.STUDENT_QUICK):
        return

    def pdf(parameters: Parametrization, x: float, **_: Any) -> float:
        p = cast(_Dof, parameters)
        return student._density(p.n, p.log_norm, x)

    def cdf_func(parameters: Parametrization, x: float, strict: bool = False, **_: Any) -> float:
        return _cdf(int(cast(_Dof, parameters).n), x, strict)

    def sf_func(parameters: Parametrization, x: float, strict: bool = False, **_: Any) -> float:
        n = int(cast(_Dof, parameters).n)
        if n <= 2:
            return student._bar_f(n, x)
        return _cdf(n, -x, strict)

    def ppf(parameters: Parametrization, u: float, **_: Any) -> float:
        return _inverse_f(int(cast(_Dof, parameters).n), u)

    def mean_func(parameters: Parametrization, _: Any = None, **__: Any) -> float:
        return student._mean(cast(_Dof, parameters).n)

    def var_func(parameters: Parametrization, _: Any = None, **__: Any) -> float:
        return student._variance(cast(_Dof, parameters).n)

    def std_func(parameters: Parametrization, _: Any = None, **__: Any) -> float:
        return math.sqrt(student._variance(cast(_Dof, parameters).n))

    StudentQuick = ParametricFamily(
        name=FamilyName.STUDENT_QUICK,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["dof"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf_func,
            CharacteristicName.SF: sf_func,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.STD: std_func,
        },
        support_by_parametrization=lambda _: ContinuousSupport(),
        estimator=mle,
    )
    StudentQuick.__doc__ = __doc__

    @parametrization(family=StudentQuick, name="dof")
    class _Dof(Parametrization):
        """
        Parameters
        ----------
        n : int
            Degrees of freedom
        """

        n: int
        log_norm: float = derived()

        @constraint(description="n is an integer >= 1")
        def check_n(self) -> bool:
            return is_integral(self.n) and self.n >= 1

        def derive(self) -> Mapping[str, Any]:
            return {"log_norm": student._log_norm(self.n)}

    ParametricFamilyRegister.register(StudentQuick)
