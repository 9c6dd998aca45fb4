"""
Concrete distribution instances with specific parameter values.

This module provides the implementation for individual distribution instances
created from parametric families.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from dataclasses import dataclass
from typing import TYPE_CHECKING

from pysatl_probdist.distributions.distribution import Distribution

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from pysatl_probdist.distributions.computation import AnalyticalComputation
    from pysatl_probdist.distributions.strategies import ComputationStrategy
    from pysatl_probdist.distributions.support import Support
    from pysatl_probdist.families.parametric_family import ParametricFamily
    from pysatl_probdist.families.parametrizations import Parametrization
    from pysatl_probdist.types import DistributionType, GenericCharacteristicName


@dataclass(frozen=True, slots=True)
class _DistributionState:
    """Everything that depends on the parameter values, built in one go."""

    parameters: Parametrization
    distribution_type: DistributionType
    support: Support | None
    analytical_computations: Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]


class ParametricFamilyDistribution(Distribution):
    """
    A specific distribution instance from a parametric family.

    Represents a concrete distribution with specific parameter values. The
    parameters, their derived constants, the support and the bound analytical
    characteristics form one immutable snapshot; :meth:`set_parameters`
    replaces the snapshot as a whole.

    Parameters
    ----------
    family : ParametricFamily
        Family the distribution belongs to.
    parameters : Parametrization
        Validated parameter record.
    """

    __slots__ = ("_family", "_state")

    def __init__(self, family: ParametricFamily, parameters: Parametrization) -> None:
        self._family = family
        self._state = self._build_state(parameters)

    def _build_state(self, parameters: Parametrization) -> _DistributionState:
        family = self._family
        return _DistributionState(
            parameters=parameters,
            distribution_type=family.distribution_type_of(parameters),
            support=family.support_resolver(parameters),
            analytical_computations=family._build_analytical_computations(parameters),
        )

    @property
    def family(self) -> ParametricFamily:
        """Get the parametric family this distribution belongs to."""
        return self._family

    @property
    def family_name(self) -> str:
        """Name of the family."""
        return self._family.name

    @property
    def parameters(self) -> Parametrization:
        """Current parameter record."""
        return self._state.parameters

    @property
    def parametrization_name(self) -> str:
        """Name of the parametrization the parameters are expressed in."""
        return self._state.parameters.name

    @property
    def distribution_type(self) -> DistributionType:
        """Get the distribution type."""
        return self._state.distribution_type

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """Analytical computations bound to the current parameters."""
        return self._state.analytical_computations

    @property
    def computation_strategy(self) -> ComputationStrategy[Any, Any]:
        """Get the computation strategy for this distribution."""
        return self._family.computation_strategy

    @property
    def support(self) -> Support | None:
        """Get the support of this distribution."""
        return self._state.support

    def set_parameters(self, parametrization_name: str | None = None, **values: Any) -> None:
        """
        Replace the parameters of this distribution.

        The new record is validated before anything changes; on failure the
        distribution keeps its previous parameters.

        Parameters
        ----------
        parametrization_name : str, optional
            Parametrization of ``values`` (defaults to the current one).
        **values
            Parameter values. Parameters not given keep their current value
            when the parametrization is unchanged.

        Raises
        ------
        ValueError
            If the new parameters don't satisfy the constraints.
        """
        current = self._state.parameters
        if parametrization_name is None or parametrization_name == current.name:
            merged = {**current.parameters, **values}
            parameters = self._family.make_parameters(current.name, **merged)
        else:
            parameters = self._family.make_parameters(parametrization_name, **values)
        self._state = self._build_state(parameters)
        self._family.computation_strategy.clear_cache(self)

    def __repr__(self) -> str:
        params = ", ".join(f"{k}={v!r}" for k, v in self.parameters.parameters.items())
        return f"{type(self).__name__}({self.family_name}: {params})"
