"""Interactive fitting session driven by a front end."""

from __future__ import annotations

from pydosefit._logging import get_logger
from pydosefit.fitting._common import DEFAULT_GRID, FitEvaluation, ObservedData, SamplingGrid
from pydosefit.fitting._engine import evaluate
from pydosefit.fitting._reference import REFERENCE_DATA
from pydosefit.models._common import ModelVariant
from pydosefit.models._models import get_spec, list_variants
from pydosefit.session._store import ParameterStore

logger = get_logger(__name__)


class FitSession:
    """Active model, its parameter store, and the data being fitted.

    Parameters
    ----------
    model : str
        Model selected at start.
    observed : ObservedData
        Points the curve is compared against.
    grid : SamplingGrid
        Dose range and sample count of the plotted curve.
    """

    def __init__(
        self,
        model: str = "Emax",
        observed: ObservedData = REFERENCE_DATA,
        grid: SamplingGrid = DEFAULT_GRID,
    ) -> None:
        get_spec(model)
        self._model = model
        self.observed = observed
        self.grid = grid
        self.store = ParameterStore()

    @property
    def model(self) -> str:
        return self._model

    @property
    def spec(self) -> ModelVariant:
        return get_spec(self._model)

    @property
    def params(self) -> dict[str, float]:
        return self.store.get(self._model)

    @staticmethod
    def variants() -> tuple[str, ...]:
        return list_variants()

    def select(self, model: str) -> dict[str, float]:
        """Switch the active model, keeping its previously held values."""
        get_spec(model)
        if model != self._model:
            logger.info("model %s -> %s", self._model, model)
        self._model = model
        return self.params

    def update(self, name: str, value: float) -> dict[str, float]:
        return self.store.update(self._model, name, value)

    def reset(self) -> dict[str, float]:
        """Restore defaults of the active model only."""
        return self.store.reset(self._model)

    def evaluate(self) -> FitEvaluation:
        """Curve, predictions and RSS for the current state."""
        return evaluate(self._model, self.params, self.observed, self.grid)
