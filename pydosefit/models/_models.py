"""Dose-response model functions and the model registry.

Each function computes the mean response at given dose levels for one
parametric model.  Responses are expressed as % of signal remaining, so
the models describe knockdown: 100 at dose 0, falling with dose.

Dose = 0 is handled explicitly: the log-linear model adds a fixed offset
before the logarithm, and the Emax model treats a zero denominator
(``ED50 == 0`` and ``x == 0``) as zero inhibition.
"""

from __future__ import annotations

from collections.abc import Mapping

import numpy as np
from numpy.typing import NDArray

from pydosefit.models._common import ModelVariant, ParameterSpec, UnknownVariantError

LOG_OFFSET = 1e-3
DISPLAY_DIGITS = 2


def _fmt(value: float, digits: int = DISPLAY_DIGITS) -> str:
    return f"{value:.{digits}f}"


# ---------------------------------------------------------------------------
# Model functions
# ---------------------------------------------------------------------------

def linear(
    dose: NDArray[np.floating],
    a: float,
    b: float,
) -> NDArray[np.floating]:
    """Linear model ``y = a + b * x``.

    Parameters
    ----------
    dose : array
        Dose values.
    a : float
        Intercept (response at dose 0).
    b : float
        Slope.  Negative for a decreasing response.

    Returns
    -------
    NDArray
    """
    dose = np.asarray(dose, dtype=np.float64)
    return a + b * dose


def log_linear(
    dose: NDArray[np.floating],
    a: float,
    b: float,
) -> NDArray[np.floating]:
    """Log-linear model ``y = a + b * log10(x + LOG_OFFSET)``.

    The offset keeps the model finite at dose 0, where it evaluates to
    ``a + b * log10(LOG_OFFSET) = a - 3 b``.
    """
    dose = np.asarray(dose, dtype=np.float64)
    return a + b * np.log10(dose + LOG_OFFSET)


def emax(
    dose: NDArray[np.floating],
    E0: float,
    Emax: float,
    ED50: float,
    h: float,
) -> NDArray[np.floating]:
    """Sigmoidal inhibitory Emax model.

    .. math::
        f(x) = E_0 - \\frac{E_{max} x^h}{ED_{50}^h + x^h}

    Parameters
    ----------
    dose : array
        Dose values, non-negative.
    E0 : float
        Baseline response at dose 0.
    Emax : float
        Maximum drop from baseline.
    ED50 : float
        Dose producing half of the maximum drop.
    h : float
        Hill (sigmoidicity) coefficient.

    Returns
    -------
    NDArray
        Predicted response.  Where the denominator is zero the inhibition
        term is taken as 0, so the response is ``E0``.
    """
    dose = np.asarray(dose, dtype=np.float64)
    with np.errstate(divide="ignore", invalid="ignore"):
        num = Emax * np.power(dose, h)
        den = np.power(ED50, h) + np.power(dose, h)
        inhibition = np.where(den > 0, num / np.where(den > 0, den, 1.0), 0.0)
    return E0 - inhibition


# ---------------------------------------------------------------------------
# Equation formatters
# ---------------------------------------------------------------------------

def _describe_linear(p: Mapping[str, float]) -> str:
    return f"y = a + b·x  (a={_fmt(p['a'])}, b={_fmt(p['b'])})"


def _describe_log_linear(p: Mapping[str, float]) -> str:
    return (
        f"y = a + b·log10(x + {LOG_OFFSET:g})  "
        f"(a={_fmt(p['a'])}, b={_fmt(p['b'])})"
    )


def _describe_emax(p: Mapping[str, float]) -> str:
    return (
        "y = E0 − (Emax·x^h)/(ED50^h + x^h)  "
        f"(E0={_fmt(p['E0'])}, Emax={_fmt(p['Emax'])}, "
        f"ED50={_fmt(p['ED50'])}, h={_fmt(p['h'])})"
    )


# ---------------------------------------------------------------------------
# Model registry: model name -> variant definition
# ---------------------------------------------------------------------------

_INTERCEPT = ParameterSpec("Intercept a", min=0.0, max=120.0, step=0.5, default=100.0)

_MODEL_MAP: dict[str, ModelVariant] = {
    "Linear": ModelVariant(
        name="Linear",
        params={
            "a": _INTERCEPT,
            "b": ParameterSpec("Slope b", min=-200.0, max=50.0, step=0.5, default=-30.0),
        },
        func=linear,
        formatter=_describe_linear,
    ),
    "Log-linear": ModelVariant(
        name="Log-linear",
        params={
            "a": _INTERCEPT,
            "b": ParameterSpec("Slope b", min=-200.0, max=50.0, step=0.5, default=-60.0),
        },
        func=log_linear,
        formatter=_describe_log_linear,
    ),
    "Emax": ModelVariant(
        name="Emax",
        params={
            "E0": ParameterSpec("Baseline E0", min=50.0, max=120.0, step=0.5, default=100.0),
            "Emax": ParameterSpec("Max drop Emax", min=0.0, max=100.0, step=0.5, default=60.0),
            "ED50": ParameterSpec("ED50", min=0.001, max=3.0, step=0.001, default=0.5),
            "h": ParameterSpec("Hill h", min=0.2, max=4.0, step=0.05, default=1.0),
        },
        func=emax,
        formatter=_describe_emax,
    ),
}

VALID_MODELS = tuple(_MODEL_MAP.keys())


def list_variants() -> tuple[str, ...]:
    """Registered model names, in display order."""
    return VALID_MODELS


def get_spec(variant: str) -> ModelVariant:
    """Look up a model variant by name.

    Raises
    ------
    UnknownVariantError
        If *variant* is not registered.
    """
    try:
        return _MODEL_MAP[variant]
    except (KeyError, TypeError):
        raise UnknownVariantError(variant, VALID_MODELS) from None


def default_params(variant: str) -> dict[str, float]:
    """Default parameter values of *variant*."""
    return get_spec(variant).defaults()
