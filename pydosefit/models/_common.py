"""Shared types for the dose-response model catalog."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

import numpy as np
from numpy.typing import NDArray


class UnknownVariantError(KeyError, ValueError):
    """Requested model variant is not registered."""

    def __init__(self, variant: object, valid: tuple[str, ...] = ()) -> None:
        self.variant = variant
        self.valid = valid
        super().__init__(variant)

    def __str__(self) -> str:
        if self.valid:
            return f"model must be one of {self.valid}, got {self.variant!r}"
        return f"unknown model {self.variant!r}"


@dataclass(frozen=True)
class ParameterSpec:
    """Schema of one adjustable model parameter.

    Bounds and step configure the input control only; the store accepts
    any float.
    """

    label: str
    min: float
    max: float
    step: float
    default: float

    def __post_init__(self) -> None:
        if self.step <= 0:
            raise ValueError(f"step must be > 0, got {self.step}")
        if not self.min <= self.default <= self.max:
            raise ValueError(
                f"default must lie in [{self.min}, {self.max}], got {self.default}"
            )


@dataclass(frozen=True)
class ModelVariant:
    """One dose-response model: parameter schema, evaluator and formatter.

    ``func`` takes the dose array plus one keyword argument per parameter;
    ``formatter`` takes the full parameter mapping and returns the display
    equation.
    """

    name: str
    params: Mapping[str, ParameterSpec]
    func: Callable[..., NDArray[np.floating]] = field(repr=False)
    formatter: Callable[[Mapping[str, float]], str] = field(repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    @property
    def param_names(self) -> tuple[str, ...]:
        return tuple(self.params)

    def defaults(self) -> dict[str, float]:
        """Default value of every parameter, in schema order."""
        return {name: spec.default for name, spec in self.params.items()}

    def _kwargs(self, params: Mapping[str, float]) -> dict[str, float]:
        missing = [name for name in self.params if name not in params]
        if missing:
            raise ValueError(f"{self.name} model is missing parameters {missing}")
        return {name: float(params[name]) for name in self.params}

    def evaluate(
        self,
        dose: float | NDArray[np.floating],
        params: Mapping[str, float],
    ) -> float | NDArray[np.floating]:
        """Raw (unclamped) model response at *dose*.

        Returns a float for scalar input, an array otherwise.
        """
        result = self.func(dose, **self._kwargs(params))
        if np.ndim(result) == 0:
            return float(result)
        return result

    def describe(self, params: Mapping[str, float]) -> str:
        """Human-readable equation with the current values substituted."""
        return self.formatter(self._kwargs(params))
