"""
Interactive session state.

Holds parameter values for every model at once, so the user can switch
models without losing slider positions, and ties them to the observed
data and curve grid for live re-evaluation.
"""

from pydosefit.session._session import FitSession
from pydosefit.session._store import ParameterStore

__all__ = [
    "ParameterStore",
    "FitSession",
]
