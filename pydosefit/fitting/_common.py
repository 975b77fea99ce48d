"""Shared configuration and result types for curve evaluation."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray


def _readonly(values) -> NDArray[np.float64]:
    arr = np.array(values, dtype=np.float64)
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True)
class SamplingGrid:
    """Dose grid used to draw the model curve.

    Doses run uniformly over ``[0, dose_max]``, both ends included.
    """

    dose_max: float = 3.2
    n_points: int = 321

    def __post_init__(self) -> None:
        if not self.dose_max > 0:
            raise ValueError(f"dose_max must be > 0, got {self.dose_max}")
        if self.n_points < 2:
            raise ValueError(f"n_points must be >= 2, got {self.n_points}")

    @property
    def spacing(self) -> float:
        return self.dose_max / (self.n_points - 1)


DEFAULT_GRID = SamplingGrid(dose_max=3.2, n_points=321)
WIDE_GRID = SamplingGrid(dose_max=5.0, n_points=501)


@dataclass(frozen=True)
class Curve:
    """Densely sampled model curve, responses clamped for display."""

    dose: NDArray[np.floating]
    response: NDArray[np.floating]
    model: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "dose", _readonly(self.dose))
        object.__setattr__(self, "response", _readonly(self.response))

    def __len__(self) -> int:
        return self.dose.shape[0]

    def points(self) -> list[tuple[float, float]]:
        """(dose, response) pairs in dose order."""
        return list(zip(self.dose.tolist(), self.response.tolist()))


@dataclass(frozen=True)
class ObservedData:
    """Observed (dose, response) points that a curve is compared against."""

    dose: NDArray[np.floating]
    response: NDArray[np.floating]
    description: str = ""

    def __post_init__(self) -> None:
        dose = _readonly(self.dose)
        response = _readonly(self.response)
        if dose.ndim != 1 or response.ndim != 1:
            raise ValueError("dose and response must be 1-D arrays")
        if dose.shape != response.shape:
            raise ValueError(
                f"dose and response must have same shape, got {dose.shape} and {response.shape}"
            )
        if np.any(dose < 0):
            raise ValueError("dose values must be non-negative")
        object.__setattr__(self, "dose", dose)
        object.__setattr__(self, "response", response)

    def __len__(self) -> int:
        return self.dose.shape[0]

    def points(self) -> list[tuple[float, float]]:
        return list(zip(self.dose.tolist(), self.response.tolist()))


@dataclass(frozen=True)
class FitEvaluation:
    """Everything a front end redraws after one parameter change."""

    model: str
    params: dict[str, float]
    equation: str
    curve: Curve
    observed: ObservedData
    predicted: NDArray[np.floating]  # raw model values at observed doses
    rss: float
    grid: SamplingGrid = field(default=DEFAULT_GRID)

    @property
    def residuals(self) -> NDArray[np.floating]:
        """Observed minus predicted at each observed dose."""
        n = min(len(self.observed), self.predicted.shape[0])
        return self.observed.response[:n] - self.predicted[:n]

    def rss_label(self, digits: int = 1) -> str:
        """RSS readout as shown next to the chart."""
        return f"RSS = {self.rss:.{digits}f}"

    def summary(self) -> str:
        """Human-readable fit report."""
        lines = [
            f"Dose-response model: {self.model}",
            f"  {self.equation}",
            "",
            "Parameters:",
        ]
        for name, value in self.params.items():
            lines.append(f"  {name:>8s} = {value:>12.6f}")

        lines.append("")
        lines.append(f"  {'dose':>8s}  {'observed':>10s}  {'predicted':>10s}  {'residual':>10s}")
        for d, y, yhat, r in zip(
            self.observed.dose, self.observed.response, self.predicted, self.residuals
        ):
            lines.append(f"  {d:>8.3f}  {y:>10.4f}  {yhat:>10.4f}  {r:>10.4f}")

        lines.append("")
        lines.append(f"  RSS = {self.rss:.6f}")
        lines.append(f"  n   = {len(self.observed)}")
        return "\n".join(lines)
