"""Slider-driven explorer window built on matplotlib widgets.

Layout: chart on the right; model selector, one slider per parameter,
notes and a Reset button on the left.  Every slider movement updates the
session and redraws synchronously.
"""

from __future__ import annotations

from typing import Any

from pydosefit._logging import get_logger
from pydosefit.models._models import LOG_OFFSET
from pydosefit.session._session import FitSession
from pydosefit.viz._plot import plot_fit

logger = get_logger(__name__)

_PANEL_LEFT = 0.04
_PANEL_WIDTH = 0.26
_SLIDER_HEIGHT = 0.035
_SLIDER_GAP = 0.075
_SLIDER_TOP = 0.60

NOTES = (
    "Notes",
    "• Data points are % remaining (100% at dose 0).",
    f"• Log-linear uses a fixed offset of {LOG_OFFSET:g} for numerical stability.",
    "• RSS is Σ (yᵢ − ŷᵢ)² at the observed doses.",
)


class FitExplorer:
    """Interactive fitting window for one :class:`FitSession`.

    Slider ranges follow the parameter schema but widen to include a held
    value outside it, so a slider always shows the value the chart uses.

    Parameters
    ----------
    session : FitSession, optional
        Session to drive.  A new Emax session when omitted.
    figsize : tuple of float
        Figure size in inches.

    Examples
    --------
    >>> explorer = FitExplorer(FitSession("Emax"))
    >>> explorer.show()
    """

    def __init__(
        self,
        session: FitSession | None = None,
        figsize: tuple[float, float] = (13, 6),
    ) -> None:
        import matplotlib.pyplot as plt
        from matplotlib.widgets import Button, RadioButtons

        self.session = session if session is not None else FitSession()
        self.figure = plt.figure(figsize=figsize)
        self.ax = self.figure.add_axes([0.40, 0.26, 0.56, 0.64])

        variants = list(self.session.variants())
        selector_ax = self.figure.add_axes([_PANEL_LEFT, 0.70, _PANEL_WIDTH, 0.22])
        selector_ax.set_title("Model", loc="left", fontsize=10)
        self.selector = RadioButtons(
            selector_ax, variants, active=variants.index(self.session.model)
        )
        self.selector.on_clicked(self.select)

        self.figure.text(
            _PANEL_LEFT,
            0.31,
            "\n".join(NOTES),
            ha="left",
            va="top",
            fontsize=8,
            color="#4B5563",
            gid="notes",
        )

        reset_ax = self.figure.add_axes([_PANEL_LEFT, 0.05, 0.10, 0.06])
        self.reset_button = Button(reset_ax, "Reset")
        self.reset_button.on_clicked(self.reset)

        self.sliders: dict[str, Any] = {}
        self._slider_axes: list[Any] = []
        self._build_sliders()
        self.redraw()

    # ------------------------------------------------------------------
    # Widgets
    # ------------------------------------------------------------------

    def _build_sliders(self) -> None:
        from matplotlib.widgets import Slider

        for ax in self._slider_axes:
            ax.remove()
        self._slider_axes = []
        self.sliders = {}

        values = self.session.params
        for i, (name, spec) in enumerate(self.session.spec.params.items()):
            value = values[name]
            bottom = _SLIDER_TOP - i * _SLIDER_GAP
            ax = self.figure.add_axes([_PANEL_LEFT + 0.07, bottom, _PANEL_WIDTH - 0.07, _SLIDER_HEIGHT])
            slider = Slider(
                ax,
                spec.label,
                valmin=min(spec.min, value),
                valmax=max(spec.max, value),
                valinit=value,
                valstep=spec.step,
                valfmt="%.2f",
            )
            # valinit is snapped to the step grid; show the held value as is
            slider.eventson = False
            slider.set_val(value)
            slider.eventson = True
            slider.on_changed(self._make_callback(name))
            self._slider_axes.append(ax)
            self.sliders[name] = slider

    def _make_callback(self, name: str):
        def _on_change(value: float) -> None:
            self.session.update(name, value)
            self.redraw()

        return _on_change

    def select(self, label: str) -> None:
        self.session.select(label)
        self._build_sliders()
        self.redraw()

    def reset(self, _event: Any = None) -> None:
        """Restore defaults of the active model and rebuild its sliders."""
        self.session.reset()
        self._build_sliders()
        self.redraw()

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------

    def redraw(self) -> None:
        evaluation = self.session.evaluate()
        self.ax.clear()
        plot_fit(evaluation, ax=self.ax)
        logger.debug("%s: %s", evaluation.model, evaluation.rss_label())
        self.figure.canvas.draw_idle()

    def show(self) -> None:
        import matplotlib.pyplot as plt

        plt.show()
