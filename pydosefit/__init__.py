"""
PyDoseFit: interactive dose-response curve fitting by eye.

Pick a knockdown model (Linear, Log-linear or inhibitory Emax), move its
parameters, and watch the curve and the residual sum of squares against
a fixed set of observed points update live.

Usage:
    from pydosefit import models, fitting, session, viz
"""

__version__ = "0.1.0"

from pydosefit import models
from pydosefit import fitting
from pydosefit import session
from pydosefit import viz

__all__ = [
    "__version__",
    "models",
    "fitting",
    "session",
    "viz",
]
