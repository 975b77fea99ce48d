"""
Dose-response model catalog.

Three closed-form knockdown models, each with a parameter schema that
drives the slider controls and an equation formatter for display:
Linear, Log-linear and the sigmoidal inhibitory Emax model.
"""

from pydosefit.models._common import (
    ModelVariant,
    ParameterSpec,
    UnknownVariantError,
)
from pydosefit.models._models import (
    LOG_OFFSET,
    VALID_MODELS,
    default_params,
    emax,
    get_spec,
    linear,
    list_variants,
    log_linear,
)

__all__ = [
    "ModelVariant",
    "ParameterSpec",
    "UnknownVariantError",
    "LOG_OFFSET",
    "VALID_MODELS",
    "linear",
    "log_linear",
    "emax",
    "list_variants",
    "get_spec",
    "default_params",
]
