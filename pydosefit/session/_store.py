"""Per-model parameter state.

Every registered model keeps its own parameter values for the lifetime of
the store, so switching models never discards edits.  Updates are
copy-on-write: each one builds a new mapping for the touched model and
leaves every earlier snapshot intact.
"""

from __future__ import annotations

from pydosefit._logging import get_logger
from pydosefit.models._models import get_spec, list_variants

logger = get_logger(__name__)


class ParameterStore:
    """Current parameter values, keyed by model then parameter name.

    Parameter bounds are not enforced here; they only configure the input
    controls.
    """

    def __init__(self) -> None:
        self._state: dict[str, dict[str, float]] = {
            variant: get_spec(variant).defaults() for variant in list_variants()
        }

    def __contains__(self, variant: object) -> bool:
        return variant in self._state

    def get(self, variant: str) -> dict[str, float]:
        """Copy of the current values of *variant*."""
        get_spec(variant)
        return dict(self._state[variant])

    def update(self, variant: str, name: str, value: float) -> dict[str, float]:
        """Set one parameter of one model; return the model's new state."""
        spec = get_spec(variant)
        if name not in spec.params:
            raise ValueError(
                f"{spec.name} model has no parameter {name!r}; "
                f"expected one of {spec.param_names}"
            )
        value = float(value)
        new_state = {**self._state[variant], name: value}
        self._state = {**self._state, variant: new_state}
        logger.debug("%s.%s = %r", variant, name, value)
        return dict(new_state)

    def reset(self, variant: str) -> dict[str, float]:
        """Restore the defaults of *variant* only."""
        defaults = get_spec(variant).defaults()
        self._state = {**self._state, variant: defaults}
        logger.debug("%s reset to defaults", variant)
        return dict(defaults)

    def snapshot(self) -> dict[str, dict[str, float]]:
        """Deep copy of every model's state."""
        return {variant: dict(values) for variant, values in self._state.items()}
