"""Synthetic reference data the user fits by eye.

Four knockdown measurements generated from an inhibitory Emax model with
a very small ED50, so every observed dose sits near full effect.  The
generating parameters stay module-private; front ends only see the
points.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

import numpy as np

from pydosefit.fitting._common import ObservedData
from pydosefit.models._models import emax

_REFERENCE_PARAMS: dict[str, float] = {"E0": 100.0, "Emax": 80.0, "ED50": 0.01, "h": 1.0}
REFERENCE_DOSES: tuple[float, ...] = (0.5, 1.0, 2.0, 3.0)


def make_reference_data(
    doses: Sequence[float] = REFERENCE_DOSES,
    params: Mapping[str, float] | None = None,
) -> ObservedData:
    """Generate noise-free Emax observations at *doses*.

    Parameters
    ----------
    doses : sequence of float
        Non-negative doses.
    params : mapping, optional
        ``E0``, ``Emax``, ``ED50``, ``h``.  Defaults to the hidden
        reference parameterisation.

    Returns
    -------
    ObservedData
    """
    truth = dict(_REFERENCE_PARAMS if params is None else params)
    dose = np.asarray(doses, dtype=np.float64)
    if np.any(dose < 0):
        raise ValueError("dose values must be non-negative")
    response = emax(dose, **truth)
    return ObservedData(
        dose=dose,
        response=response,
        description="synthetic Emax at doses "
        + ", ".join(f"{d:g}" for d in dose)
        + " mg/kg; y is % remaining",
    )


REFERENCE_DATA = make_reference_data()
