"""
Computation Strategies
======================

This module defines the pluggable strategy interface and its default
implementation:

- :class:`ComputationStrategy` — resolves characteristic methods.
- :class:`DefaultComputationStrategy` — resolves analyticals, caches fitted
  conversions (optional), and walks the characteristic graph on demand.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any, Protocol
from weakref import WeakKeyDictionary

from pysatl_probdist.distributions.computation import (
    AnalyticalComputation,
    FittedComputationMethod,
)
from pysatl_probdist.types import GenericCharacteristicName

from .registry import distribution_type_register

if TYPE_CHECKING:
    from .distribution import Distribution

type Method[In, Out] = AnalyticalComputation[In, Out] | FittedComputationMethod[In, Out]


class ComputationStrategy[In, Out](Protocol):
    """Protocol for characteristic resolution strategies."""

    enable_caching: bool

    def query_method(
        self, state: GenericCharacteristicName, distr: "Distribution", **options: Any
    ) -> Method[In, Out]: ...

    def clear_cache(self, distr: "Distribution | None" = None) -> None: ...


class DefaultComputationStrategy[In, Out]:
    """
    Default characteristic resolver.

    Resolution order
    ----------------
    1. If the distribution provides an analytical implementation, return it.
    2. Else, if caching is enabled and the method is cached, return it.
    3. Else:
       a) get the graph for the distribution type,
       b) try each analytical characteristic as a source,
       c) find a path from the source to the target,
       d) fit the edges along the path (the fitter may recursively resolve
          dependencies via the strategy).

    Parameters
    ----------
    enable_caching : bool, default False
        If ``True``, cache fitted conversions per distribution and target
        characteristic. Distributions are held weakly, so an entry disappears
        together with its distribution.

    Raises
    ------
    RuntimeError
        If the distribution has no analytical base, or no conversion path exists,
        or a cycle is detected during resolution.
    """

    def __init__(self, enable_caching: bool = False) -> None:
        self.enable_caching = enable_caching
        self._cache: WeakKeyDictionary[
            Distribution, dict[GenericCharacteristicName, FittedComputationMethod[In, Out]]
        ] = WeakKeyDictionary()
        self._resolving: dict[int, set[GenericCharacteristicName]] = {}

    def clear_cache(self, distr: "Distribution | None" = None) -> None:
        """Drop the fitted conversions cached for ``distr``, or all of them."""
        if distr is None:
            self._cache.clear()
        else:
            self._cache.pop(distr, None)

    def _push_guard(self, distr: "Distribution", state: GenericCharacteristicName) -> None:
        seen = self._resolving.setdefault(id(distr), set())
        if state in seen:
            raise RuntimeError(
                f"Cycle detected while resolving '{state}'. "
                "Provide at least one analytical base characteristic in the distribution."
            )
        seen.add(state)

    def _pop_guard(self, distr: "Distribution", state: GenericCharacteristicName) -> None:
        key = id(distr)
        seen = self._resolving.get(key)
        if seen is not None:
            seen.discard(state)
            if not seen:
                self._resolving.pop(key, None)

    def query_method(
        self, state: GenericCharacteristicName, distr: "Distribution", **options: Any
    ) -> Method[In, Out]:
        """
        Resolve an analytical or fitted method for ``state``.

        Parameters
        ----------
        state : str
            Target characteristic name to resolve.
        distr : Distribution
            The distribution providing the analytical base and type.
        **options
            Passed to the fitter(s) when conversions are required.

        Returns
        -------
        Method
            Analytical or fitted callable implementing ``state``.
        """
        analytical = distr.analytical_computations
        if state in analytical:
            return analytical[state]

        if self.enable_caching:
            cached = self._cache.get(distr, {}).get(state)
            if cached is not None:
                return cached

        if not analytical:
            raise RuntimeError(
                "Distribution provides no analytical computations to ground conversions."
            )

        reg = distribution_type_register().get(distr.distribution_type)

        self._push_guard(distr, state)
        try:
            for src in analytical:
                path = reg.find_path(src, state)
                if not path:
                    continue

                last_fitted: FittedComputationMethod[In, Out] | None = None
                for edge in path:
                    fitted = edge.fit(distr, **options)
                    if self.enable_caching:
                        self._cache.setdefault(distr, {})[edge.target] = fitted
                    last_fitted = fitted

                if last_fitted is None:
                    raise RuntimeError(f"Empty path when resolving '{state}' from '{src}'.")
                return last_fitted

            raise RuntimeError(
                f"No conversion path from any analytical characteristic to '{state}'."
            )
        finally:
            self._pop_guard(distr, state)
