"""
Curve evaluation against observed knockdown data.

Samples the selected model over a dose grid for plotting, predicts the
response at the observed doses, and scores the fit by the residual sum
of squares.  There is no optimiser: parameters are searched by eye.
"""

from pydosefit.fitting._common import (
    DEFAULT_GRID,
    WIDE_GRID,
    Curve,
    FitEvaluation,
    ObservedData,
    SamplingGrid,
)
from pydosefit.fitting._engine import (
    RESPONSE_MAX,
    RESPONSE_MIN,
    clamp_response,
    compute_rss,
    dose_grid,
    evaluate,
    predict,
    sample_curve,
)
from pydosefit.fitting._reference import (
    REFERENCE_DATA,
    REFERENCE_DOSES,
    make_reference_data,
)

__all__ = [
    "SamplingGrid",
    "DEFAULT_GRID",
    "WIDE_GRID",
    "Curve",
    "ObservedData",
    "FitEvaluation",
    "RESPONSE_MIN",
    "RESPONSE_MAX",
    "clamp_response",
    "dose_grid",
    "sample_curve",
    "predict",
    "compute_rss",
    "evaluate",
    "REFERENCE_DATA",
    "REFERENCE_DOSES",
    "make_reference_data",
]
