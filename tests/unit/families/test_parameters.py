from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import dataclasses
import math
from typing import Any

import pytest

from pysatl_probdist.families import (
    ParametricFamily,
    Parametrization,
    ParametrizationConstraint,
    constraint,
    parametrization,
)
from pysatl_probdist.types import UnivariateContinuous
from tests.unit.families.test_basic import TestBaseFamily


class TestParametrizationAPI(TestBaseFamily):
    def test_constraint_is_a_simple_holder(self) -> None:
        def is_positive(obj: object) -> bool:
            return getattr(obj, "value", 0) > 0

        c = ParametrizationConstraint(description="Value must be positive", check=is_positive)
        assert c.description == "Value must be positive"
        assert c.check is is_positive

    def test_constraint_decorator_marks_function(self) -> None:
        @constraint("Value must be positive")
        def check_positive(self: Any) -> bool:
            return getattr(self, "value", 0) > 0

        assert getattr(check_positive, "__is_constraint", False) is True
        assert getattr(check_positive, "__constraint_description", None) == "Value must be positive"

    def test_free_function_parametrization_decorator(self) -> None:
        family = ParametricFamily(
            name="FreeDecoratorFamily",
            distr_type=UnivariateContinuous,
            distr_parametrizations=["kind"],
            distr_characteristics={},
        )

        @parametrization(family=family, name="kind")
        class Kind(Parametrization):
            value: float

        obj = Kind(value=1.25)  # type: ignore[call-arg]
        assert obj.name == "kind"
        assert obj.parameters == {"value": 1.25}
        assert Kind.__family__ is family
        assert Kind.__param_name__ == "kind"
        assert dataclasses.is_dataclass(Kind)
        assert family.base is Kind

    def test_static_constraint_is_rejected(self) -> None:
        family = ParametricFamily(
            name="StaticConstraint",
            distr_type=UnivariateContinuous,
            distr_parametrizations=["base"],
            distr_characteristics={},
        )

        with pytest.raises(TypeError, match="instance method"):

            @parametrization(family=family, name="base")
            class Base(Parametrization):
                value: float

                @staticmethod
                @constraint(description="never")
                def check() -> bool:
                    return False

    def test_duplicate_parametrization_name(self) -> None:
        family = self.make_default_family()

        with pytest.raises(ValueError, match="already registered"):

            @family.parametrization(name="rate")
            class Again(Parametrization):
                lam: float


class TestParametrizationRecords(TestBaseFamily):
    def test_constraints_are_checked_on_construction(self) -> None:
        family = self.make_default_family()
        Rate = family.parametrizations["rate"]

        with pytest.raises(ValueError, match="lam > 0"):
            Rate(lam=-1.0)  # type: ignore[call-arg]
        with pytest.raises(ValueError, match="lam > 0"):
            family.make_parameters(lam=0.0)
        assert [c.description for c in Rate(lam=1.0).constraints] == ["lam > 0"]  # type: ignore[call-arg]

    def test_derived_constants(self) -> None:
        family = self.make_default_family()
        params = family.make_parameters(lam=2.0)

        assert params.log_lam == pytest.approx(math.log(2.0))  # type: ignore[attr-defined]
        assert params.parameters == {"lam": 2.0}
        assert "log_lam" not in repr(params)

    def test_records_are_frozen(self) -> None:
        family = self.make_default_family()
        params = family.make_parameters(lam=2.0)

        with pytest.raises(dataclasses.FrozenInstanceError):
            params.lam = 3.0  # type: ignore[misc]

    def test_equality_ignores_derived_fields(self) -> None:
        family = self.make_default_family()
        assert family.make_parameters(lam=2.0) == family.make_parameters(lam=2.0)
        assert family.make_parameters(lam=2.0) != family.make_parameters(lam=3.0)

    def test_to_base_uses_family_logic(self) -> None:
        family = self.make_default_family()

        rate = family.make_parameters("rate", lam=5.0)
        assert family.to_base(rate) is rate

        base_from_scale = family.to_base(family.make_parameters("scale", beta=4.0))
        assert base_from_scale.name == "rate"
        assert base_from_scale.lam == pytest.approx(0.25)  # type: ignore[attr-defined]
        assert base_from_scale.log_lam == pytest.approx(math.log(0.25))  # type: ignore[attr-defined]

    def test_unknown_parametrization(self) -> None:
        family = self.make_default_family()
        with pytest.raises(KeyError):
            family.make_parameters("shape", k=1.0)
