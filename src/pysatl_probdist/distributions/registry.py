"""
Characteristic Graph Registry
=============================

A directed graph over characteristic names for a fixed
:class:`~pysatl_probdist.types.DistributionType`.

- Nodes: ``GenericCharacteristicName``.
- Edges: unary :class:`~pysatl_probdist.distributions.computation.ComputationMethod`
  (``1 source -> 1 target``).

The graph is kept **acyclic**: every conversion derives a characteristic from
one that is strictly more primitive (``cdf -> ppf``, ``pdf -> mean -> var -> std``).
Adding an edge that closes a cycle raises :class:`GraphInvariantError`.

The module also exposes a singleton-like :class:`DistributionTypeRegister`
configured for the univariate continuous and discrete cases.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections import deque
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, ClassVar, Self

from pysatl_probdist.distributions.computation import ComputationMethod
from pysatl_probdist.distributions.fitters import (
    fit_cdf_to_ppf_1D,
    fit_mean_to_var_1C,
    fit_pdf_to_mean_1C,
    fit_var_to_std,
)
from pysatl_probdist.types import (
    CharacteristicName,
    DistributionType,
    GenericCharacteristicName,
    UnivariateContinuous,
    UnivariateDiscrete,
)

DEFAULT_COMPUTATION_KEY: str = "PySATL_default_computation"


class GraphInvariantError(RuntimeError):
    """Raised when the characteristic graph invariants are violated."""


@dataclass(slots=True, frozen=True)
class GenericCharacteristicRegister:
    """
    Directed characteristic graph for a fixed :class:`DistributionType`.

    Notes
    -----
    Edges are stored as nested mappings:
    ``adjacency[src][dst] = dict[method_name, ComputationMethod]``
    with a reserved key :data:`DEFAULT_COMPUTATION_KEY` for the default method.
    """

    distribution_type: DistributionType

    _adj: dict[
        GenericCharacteristicName,
        dict[GenericCharacteristicName, dict[str, ComputationMethod[Any, Any]]],
    ] = field(default_factory=dict, repr=False)

    def _pick_method(
        self, methods: dict[str, ComputationMethod[Any, Any]]
    ) -> ComputationMethod[Any, Any]:
        """Pick a deterministic method for an edge (prefer default key)."""
        if DEFAULT_COMPUTATION_KEY in methods:
            return methods[DEFAULT_COMPUTATION_KEY]
        return methods[min(methods)]

    def add_conversion(
        self, method: ComputationMethod[Any, Any], *, name: str = DEFAULT_COMPUTATION_KEY
    ) -> None:
        """
        Add a unary conversion ``source -> target``.

        Parameters
        ----------
        method : ComputationMethod
            Unary conversion method (exactly one source).
        name : str, default DEFAULT_COMPUTATION_KEY
            Edge label.

        Raises
        ------
        GraphInvariantError
            If the method is not unary or the edge would close a cycle.
        """
        if len(method.sources) != 1:
            raise GraphInvariantError(
                "Only unary methods are supported for edges (1 source -> 1 target)."
            )
        src = method.sources[0]
        dst = method.target
        if src == dst or src in self.reachable_from(dst):
            raise GraphInvariantError(
                f"Conversion '{src}' -> '{dst}' would create a cycle in the characteristic graph."
            )
        self._adj.setdefault(src, {}).setdefault(dst, {})[name] = method
        self._adj.setdefault(dst, {})

    def all_nodes(self) -> frozenset[GenericCharacteristicName]:
        """Return the set of all graph nodes."""
        return frozenset(self._adj)

    def reachable_from(self, start: GenericCharacteristicName) -> set[GenericCharacteristicName]:
        """Return all nodes reachable from ``start`` (``start`` included)."""
        seen: set[GenericCharacteristicName] = {start}
        q: deque[GenericCharacteristicName] = deque([start])
        while q:
            v = q.popleft()
            for w in self._adj.get(v, {}):
                if w not in seen:
                    seen.add(w)
                    q.append(w)
        return seen

    def find_path(
        self,
        src: GenericCharacteristicName,
        dst: GenericCharacteristicName,
    ) -> list[ComputationMethod[Any, Any]] | None:
        """
        Find the shortest conversion chain ``src -> ... -> dst`` using BFS.

        Returns
        -------
        list[ComputationMethod] or None
            Conversions to apply in order, ``[]`` when ``src == dst``, or
            ``None`` if ``dst`` is unreachable.
        """
        if src == dst:
            return []

        parent: dict[
            GenericCharacteristicName, tuple[GenericCharacteristicName, ComputationMethod[Any, Any]]
        ] = {}
        visited: set[GenericCharacteristicName] = {src}
        q: deque[GenericCharacteristicName] = deque([src])

        while q:
            v = q.popleft()
            for w, methods in self._adj.get(v, {}).items():
                if w in visited or not methods:
                    continue
                visited.add(w)
                parent[w] = (v, self._pick_method(methods))
                if w == dst:
                    path: list[ComputationMethod[Any, Any]] = []
                    cur = dst
                    while cur != src:
                        pv, m = parent[cur]
                        path.append(m)
                        cur = pv
                    path.reverse()
                    return path
                q.append(w)
        return None


class DistributionTypeRegister:
    """Singleton-like registry that maps :class:`DistributionType` to its graph."""

    _instance: ClassVar[Self | None] = None
    _register_kinds: dict[DistributionType, GenericCharacteristicRegister]

    def __new__(cls) -> Self:
        if cls._instance is None:
            self = super().__new__(cls)
            self._register_kinds = {}
            cls._instance = self
        return cls._instance

    def get(self, distribution_type: DistributionType) -> GenericCharacteristicRegister:
        """Get (or create) the graph for a distribution type."""
        reg = self._register_kinds.get(distribution_type)
        if reg is None:
            reg = GenericCharacteristicRegister(distribution_type=distribution_type)
            self._register_kinds[distribution_type] = reg
        return reg

    __call__ = get


def _configure(reg: DistributionTypeRegister) -> None:
    """
    Default conversions.

    Continuous: ``pdf -> mean -> var -> std``.
    Discrete: ``cdf -> ppf`` and ``var -> std``.
    """
    var_to_std = ComputationMethod[Any, float](
        target=CharacteristicName.STD, sources=[CharacteristicName.VAR], fitter=fit_var_to_std
    )

    reg1C = reg.get(UnivariateContinuous)
    reg1C.add_conversion(
        ComputationMethod[Any, float](
            target=CharacteristicName.MEAN,
            sources=[CharacteristicName.PDF],
            fitter=fit_pdf_to_mean_1C,
        )
    )
    reg1C.add_conversion(
        ComputationMethod[Any, float](
            target=CharacteristicName.VAR,
            sources=[CharacteristicName.MEAN],
            fitter=fit_mean_to_var_1C,
        )
    )
    reg1C.add_conversion(var_to_std)

    reg1D = reg.get(UnivariateDiscrete)
    reg1D.add_conversion(
        ComputationMethod[float, float](
            target=CharacteristicName.PPF,
            sources=[CharacteristicName.CDF],
            fitter=fit_cdf_to_ppf_1D,
        )
    )
    reg1D.add_conversion(var_to_std)


@lru_cache(maxsize=1)
def distribution_type_register() -> DistributionTypeRegister:
    """Return a cached :class:`DistributionTypeRegister` configured with defaults."""
    reg = DistributionTypeRegister()
    _configure(reg)
    return reg


def _reset_distribution_type_register_for_tests() -> None:
    """Reset the cached distribution type register (test helper)."""
    DistributionTypeRegister._instance = None
    distribution_type_register.cache_clear()
