"""Curve sampling, prediction and goodness-of-fit.

All functions are pure: the same model, parameters and doses always give
bit-identical results.

Two evaluation paths share one model function:

- the plotted curve is clamped to ``[RESPONSE_MIN, RESPONSE_MAX]`` so an
  extreme slope cannot stretch the chart;
- predictions at observed doses are **not** clamped, so the RSS measures
  the model itself rather than what is drawn.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

import numpy as np
from numpy.typing import NDArray

from pydosefit._logging import get_logger
from pydosefit.fitting._common import (
    DEFAULT_GRID,
    Curve,
    FitEvaluation,
    ObservedData,
    SamplingGrid,
)
from pydosefit.models._models import get_spec

logger = get_logger(__name__)

RESPONSE_MIN = 0.0
RESPONSE_MAX = 120.0


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _check_doses(dose: NDArray[np.floating]) -> None:
    if np.any(dose < 0):
        raise ValueError(f"dose values must be non-negative, got min {dose.min()}")


def clamp_response(y: float | NDArray[np.floating]) -> float | NDArray[np.floating]:
    """Bound responses to the plottable % range ``[0, 120]``.

    Returns a float for scalar input, an array otherwise.
    """
    clamped = np.clip(np.asarray(y, dtype=np.float64), RESPONSE_MIN, RESPONSE_MAX)
    if clamped.ndim == 0:
        return float(clamped)
    return clamped


def dose_grid(dose_max: float, n_points: int) -> NDArray[np.float64]:
    """*n_points* evenly spaced doses over ``[0, dose_max]`` inclusive."""
    grid = SamplingGrid(dose_max=dose_max, n_points=n_points)
    return np.linspace(0.0, grid.dose_max, grid.n_points)


# ---------------------------------------------------------------------------
# Evaluation
# ---------------------------------------------------------------------------

def sample_curve(
    variant: str,
    params: Mapping[str, float],
    dose_max: float = DEFAULT_GRID.dose_max,
    n_points: int = DEFAULT_GRID.n_points,
) -> Curve:
    """Evaluate *variant* on a uniform dose grid for plotting.

    Parameters
    ----------
    variant : str
        Registered model name.
    params : mapping
        Current parameter values.
    dose_max : float
        Upper end of the dose range; the range always starts at 0.
    n_points : int
        Number of samples, both ends included.

    Returns
    -------
    Curve
        Doses and clamped responses.
    """
    spec = get_spec(variant)
    dose = dose_grid(dose_max, n_points)
    response = clamp_response(np.asarray(spec.evaluate(dose, params)))
    return Curve(dose=dose, response=response, model=spec.name)


def predict(
    variant: str,
    params: Mapping[str, float],
    doses: Sequence[float] | NDArray[np.floating],
    clamp: bool = False,
) -> NDArray[np.floating]:
    """Model response at each of *doses*.

    Raw model values by default; pass ``clamp=True`` to get the values as
    they appear on the chart.
    """
    spec = get_spec(variant)
    dose = np.asarray(doses, dtype=np.float64).ravel()
    _check_doses(dose)
    pred = np.asarray(spec.evaluate(dose, params), dtype=np.float64)
    if clamp:
        pred = clamp_response(pred)
    return pred


def compute_rss(
    observed: Sequence[float] | NDArray[np.floating],
    predicted: Sequence[float] | NDArray[np.floating],
) -> float:
    """Residual sum of squares ``sum((observed - predicted)^2)``.

    The sum runs over *observed*.  If *predicted* is shorter, each missing
    prediction counts as 0; surplus predictions are ignored.  A length
    mismatch is logged rather than raised so the readout always renders.
    """
    obs = np.asarray(observed, dtype=np.float64).ravel()
    pred = np.asarray(predicted, dtype=np.float64).ravel()

    if obs.shape[0] != pred.shape[0]:
        logger.warning(
            "RSS length mismatch: %d observed vs %d predicted; "
            "missing predictions count as 0",
            obs.shape[0],
            pred.shape[0],
        )
        padded = np.zeros_like(obs)
        n = min(obs.shape[0], pred.shape[0])
        padded[:n] = pred[:n]
        pred = padded

    return float(np.sum((obs - pred) ** 2))


def evaluate(
    variant: str,
    params: Mapping[str, float],
    observed: ObservedData,
    grid: SamplingGrid = DEFAULT_GRID,
) -> FitEvaluation:
    """Recompute curve, predictions and RSS for one parameter state."""
    spec = get_spec(variant)
    values = {name: float(params[name]) for name in spec.param_names if name in params}
    curve = sample_curve(variant, values, grid.dose_max, grid.n_points)
    predicted = predict(variant, values, observed.dose)
    predicted.setflags(write=False)
    rss = compute_rss(observed.response, predicted)
    return FitEvaluation(
        model=spec.name,
        params=values,
        equation=spec.describe(values),
        curve=curve,
        observed=observed,
        predicted=predicted,
        rss=rss,
        grid=grid,
    )
