"""
Chart rendering and the interactive explorer.

plot_fit draws one evaluation onto matplotlib axes; FitExplorer wraps a
FitSession in a window with a model selector, parameter sliders and a
Reset button.
"""

from pydosefit.viz._explorer import FitExplorer
from pydosefit.viz._plot import plot_fit

__all__ = [
    "plot_fit",
    "FitExplorer",
]
