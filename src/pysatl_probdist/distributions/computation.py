"""
Computation Primitives
======================

Building blocks used to evaluate distribution characteristics:

- :class:`AnalyticalComputation` — a characteristic implemented directly by a
  family (closed form, delegation or regime-switching approximation).
- :class:`FittedComputationMethod` — a numerical conversion (e.g. ``pdf`` to
  ``mean``) bound to one distribution and ready to be called.
- :class:`ComputationMethod` — a factory that *fits* a conversion for a given
  distribution and returns a :class:`FittedComputationMethod`.

Notes
-----
All callables are scalar in the univariate case. ``**options`` are forwarded
untouched, which lets evaluators accept flags such as ``strict``.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from mypy_extensions import KwArg

from pysatl_probdist.types import GenericCharacteristicName

if TYPE_CHECKING:
    from pysatl_probdist.distributions.distribution import Distribution


@dataclass(frozen=True, slots=True)
class AnalyticalComputation[In, Out]:
    """Characteristic provided directly by the distribution family.

    Parameters
    ----------
    target : str
        Characteristic name (e.g., ``"cdf"``).
    func : Callable[[In, KwArg(Any)], Out]
        Callable bound to the distribution parameters.
    """

    target: GenericCharacteristicName
    func: Callable[[In, KwArg(Any)], Out]

    def __call__(self, data: In, **options: Any) -> Out:
        """Evaluate the analytical function."""
        return self.func(data, **options)


@dataclass(frozen=True, slots=True)
class FittedComputationMethod[In, Out]:
    """Fitted conversion method (ready-to-use).

    Parameters
    ----------
    target : str
        Destination characteristic name.
    sources : Sequence[str]
        Source characteristic names (unary conversions use length 1).
    func : Callable[[In, KwArg(Any)], Out]
        Callable implementing the fitted conversion.
    """

    target: GenericCharacteristicName
    sources: Sequence[GenericCharacteristicName]
    func: Callable[[In, KwArg(Any)], Out]

    def __call__(self, data: In, **options: Any) -> Out:
        """Evaluate the fitted conversion."""
        return self.func(data, **options)


@dataclass(frozen=True, slots=True)
class ComputationMethod[In, Out]:
    """Conversion method factory (to be fitted).

    Parameters
    ----------
    target : str
        Destination characteristic name.
    sources : Sequence[str]
        Source characteristic names (exactly one for registry edges).
    fitter : Callable[[Distribution, KwArg(Any)], FittedComputationMethod]
        Prepares a callable conversion for the given distribution.
    """

    target: GenericCharacteristicName
    sources: Sequence[GenericCharacteristicName]
    fitter: Callable[["Distribution", KwArg(Any)], FittedComputationMethod[In, Out]]

    def fit(self, distribution: "Distribution", **options: Any) -> FittedComputationMethod[In, Out]:
        """Fit and return a :class:`FittedComputationMethod`."""
        return self.fitter(distribution, **options)
