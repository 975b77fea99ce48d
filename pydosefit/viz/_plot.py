"""Static rendering of one fit evaluation."""

from __future__ import annotations

from matplotlib.axes import Axes
from matplotlib.figure import Figure

from pydosefit.fitting._common import FitEvaluation
from pydosefit.fitting._engine import RESPONSE_MAX, RESPONSE_MIN

BASELINE_RESPONSE = 100.0
Y_TICKS = (0, 20, 40, 60, 80, 100, 120)

CURVE_COLOR = "#4F46E5"
DATA_COLOR = "#111827"
BASELINE_COLOR = "#9CA3AF"
CAPTION_COLOR = "#6B7280"


def plot_fit(
    evaluation: FitEvaluation,
    ax: Axes | None = None,
    title: str | None = "Interactive Dose–Response Fitting",
    xlabel: str = "Dose (mg/kg)",
    ylabel: str = "% remaining",
    figsize: tuple[float, float] = (9, 5),
    show_equation: bool = True,
    show_caption: bool = True,
) -> tuple[Figure, Axes]:
    """Draw the model curve over the observed points.

    Layers, bottom to top: grid, dashed "no effect" line at 100 %, the
    clamped model curve, observed data markers, and the RSS readout in
    the upper right corner.  The equation and a data caption go under
    the axes.

    Parameters
    ----------
    evaluation : FitEvaluation
        Result of ``FitSession.evaluate()`` or ``fitting.evaluate()``.
    ax : Axes, optional
        Axes to draw on.  A new figure is created when omitted.
    title : str, optional
        Axes title; ``None`` for no title.
    xlabel, ylabel : str
        Axis labels.
    figsize : tuple of float
        Size of a newly created figure.
    show_equation : bool
        Print the equation string under the axes.
    show_caption : bool
        Print the observed data description under the axes.

    Returns
    -------
    (Figure, Axes)

    Examples
    --------
    >>> session = FitSession("Emax")
    >>> fig, ax = plot_fit(session.evaluate())
    >>> fig.savefig("fit.png", dpi=150)
    """
    if ax is None:
        import matplotlib.pyplot as plt

        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    curve = evaluation.curve
    observed = evaluation.observed

    ax.grid(True, linestyle="--", alpha=0.4)
    ax.axhline(
        BASELINE_RESPONSE,
        color=BASELINE_COLOR,
        linestyle=(0, (4, 4)),
        linewidth=1,
        label="_baseline",
        gid="baseline",
    )
    ax.plot(
        curve.dose,
        curve.response,
        color=CURVE_COLOR,
        linewidth=3,
        label=f"{evaluation.model} model",
        gid="curve",
    )
    ax.scatter(
        observed.dose,
        observed.response,
        color=DATA_COLOR,
        s=50,
        zorder=3,
        label="Data",
        gid="data",
    )

    ax.set_xlim(0, evaluation.grid.dose_max)
    ax.set_ylim(RESPONSE_MIN, RESPONSE_MAX)
    ax.set_yticks(Y_TICKS)
    ax.set_xlabel(xlabel)
    ax.set_ylabel(ylabel)
    if title:
        ax.set_title(title)
    ax.legend(loc="upper center", ncol=2, frameon=False)

    ax.text(
        0.98,
        0.97,
        evaluation.rss_label(),
        transform=ax.transAxes,
        ha="right",
        va="top",
        fontweight="bold",
        gid="rss",
    )
    if show_equation:
        ax.text(
            0.0,
            -0.16,
            evaluation.equation,
            transform=ax.transAxes,
            ha="left",
            va="top",
            family="monospace",
            fontsize=8,
            gid="equation",
        )
    if show_caption and evaluation.observed.description:
        ax.text(
            0.0,
            -0.23,
            f"Data: {evaluation.observed.description}. Move sliders to see RSS update.",
            transform=ax.transAxes,
            ha="left",
            va="top",
            fontsize=8,
            color=CAPTION_COLOR,
            gid="caption",
        )

    return fig, ax
