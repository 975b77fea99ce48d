"""Tests for chart rendering and the slider explorer."""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
import pytest  # noqa: E402

from pydosefit.session import FitSession  # noqa: E402
from pydosefit.viz import FitExplorer, plot_fit  # noqa: E402


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


def _by_gid(artists, gid):
    return [a for a in artists if a.get_gid() == gid]


class TestPlotFit:
    """Layers drawn for one evaluation."""

    def test_creates_figure(self):
        fig, ax = plot_fit(FitSession().evaluate())
        assert fig is ax.figure

    def test_draws_on_given_axes(self):
        fig, ax = plt.subplots()
        out_fig, out_ax = plot_fit(FitSession().evaluate(), ax=ax)
        assert out_ax is ax
        assert out_fig is fig

    def test_layers(self):
        result = FitSession().evaluate()
        _, ax = plot_fit(result)

        (curve,) = _by_gid(ax.lines, "curve")
        np.testing.assert_array_equal(curve.get_xdata(), result.curve.dose)
        np.testing.assert_array_equal(curve.get_ydata(), result.curve.response)
        assert curve.get_label() == "Emax model"

        (baseline,) = _by_gid(ax.lines, "baseline")
        assert list(baseline.get_ydata()) == [100.0, 100.0]

        (data,) = _by_gid(ax.collections, "data")
        np.testing.assert_allclose(np.asarray(data.get_offsets()), np.column_stack(
            [result.observed.dose, result.observed.response]
        ))

        (rss,) = _by_gid(ax.texts, "rss")
        assert rss.get_text() == "RSS = 5682.8"

    def test_axes_ranges(self):
        _, ax = plot_fit(FitSession().evaluate())
        assert ax.get_xlim() == pytest.approx((0.0, 3.2))
        assert ax.get_ylim() == pytest.approx((0.0, 120.0))
        assert list(ax.get_yticks()) == [0, 20, 40, 60, 80, 100, 120]
        assert ax.get_xlabel() == "Dose (mg/kg)"
        assert ax.get_ylabel() == "% remaining"

    def test_caption(self):
        result = FitSession().evaluate()
        _, ax = plot_fit(result)
        (caption,) = _by_gid(ax.texts, "caption")
        assert caption.get_text().startswith("Data: synthetic Emax at doses 0.5, 1, 2, 3 mg/kg")

    def test_caption_optional(self):
        _, ax = plot_fit(FitSession().evaluate(), show_caption=False)
        assert _by_gid(ax.texts, "caption") == []

    def test_equation_optional(self):
        _, ax = plot_fit(FitSession().evaluate(), show_equation=False)
        assert _by_gid(ax.texts, "equation") == []


class TestFitExplorer:
    """Widget callbacks drive the session."""

    def test_one_slider_per_parameter(self):
        explorer = FitExplorer()
        assert list(explorer.sliders) == ["E0", "Emax", "ED50", "h"]
        assert explorer.sliders["ED50"].valmin == pytest.approx(0.001)
        assert explorer.sliders["ED50"].val == pytest.approx(0.5)

    def test_slider_updates_session_and_chart(self):
        explorer = FitExplorer()
        explorer.sliders["Emax"].set_val(80.0)
        assert explorer.session.params["Emax"] == 80.0
        (rss,) = _by_gid(explorer.ax.texts, "rss")
        assert rss.get_text() == explorer.session.evaluate().rss_label()

    def test_model_switch_rebuilds_sliders(self):
        explorer = FitExplorer()
        explorer.sliders["h"].set_val(2.0)
        explorer.selector.set_active(0)
        assert explorer.session.model == "Linear"
        assert list(explorer.sliders) == ["a", "b"]
        (curve,) = _by_gid(explorer.ax.lines, "curve")
        assert curve.get_label() == "Linear model"

        explorer.selector.set_active(2)
        assert explorer.sliders["h"].val == pytest.approx(2.0)

    def test_reset(self):
        explorer = FitExplorer()
        explorer.sliders["E0"].set_val(110.0)
        explorer.reset()
        assert explorer.session.params["E0"] == 100.0
        assert explorer.sliders["E0"].val == pytest.approx(100.0)

    def test_slider_shows_out_of_range_value(self):
        """A held value beyond the schema bounds widens the slider instead of being clipped."""
        session = FitSession()
        session.update("E0", 150.0)
        session.update("h", 0.1)
        explorer = FitExplorer(session)

        e0 = explorer.sliders["E0"]
        assert e0.val == 150.0
        assert e0.valmax == 150.0
        assert e0.valmin == 50.0
        h = explorer.sliders["h"]
        assert h.val == 0.1
        assert h.valmin == 0.1
        assert explorer.session.params["E0"] == 150.0

    def test_slider_keeps_off_step_value(self):
        session = FitSession()
        session.update("ED50", 0.12345)
        explorer = FitExplorer(session)
        assert explorer.sliders["ED50"].val == 0.12345

    def test_reset_restores_schema_range(self):
        session = FitSession()
        session.update("E0", 150.0)
        explorer = FitExplorer(session)
        explorer.reset()
        assert explorer.sliders["E0"].val == pytest.approx(100.0)
        assert explorer.sliders["E0"].valmax == 120.0

    def test_notes_panel(self):
        explorer = FitExplorer()
        (notes,) = _by_gid(explorer.figure.texts, "notes")
        text = notes.get_text()
        assert "% remaining" in text
        assert "offset of 0.001" in text
        assert "RSS" in text

    def test_caption_shown(self):
        explorer = FitExplorer()
        (caption,) = _by_gid(explorer.ax.texts, "caption")
        assert "synthetic Emax" in caption.get_text()
