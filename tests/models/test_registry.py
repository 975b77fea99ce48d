"""Tests for the model registry, parameter schemas and equation strings."""

import numpy as np
import pytest

from pydosefit.models import (
    ModelVariant,
    ParameterSpec,
    UnknownVariantError,
    default_params,
    get_spec,
    list_variants,
)


class TestRegistry:
    """Lookup of model variants."""

    def test_list_variants_order(self):
        assert list_variants() == ("Linear", "Log-linear", "Emax")

    def test_get_spec_returns_variant(self):
        for name in list_variants():
            spec = get_spec(name)
            assert isinstance(spec, ModelVariant)
            assert spec.name == name

    def test_unknown_variant(self):
        with pytest.raises(UnknownVariantError, match="Quadratic"):
            get_spec("Quadratic")

    def test_unknown_variant_is_key_and_value_error(self):
        with pytest.raises(KeyError):
            get_spec("LL.4")
        with pytest.raises(ValueError):
            get_spec("LL.4")

    def test_unhashable_variant(self):
        with pytest.raises(UnknownVariantError):
            get_spec(["Emax"])

    def test_parameter_names(self):
        assert get_spec("Linear").param_names == ("a", "b")
        assert get_spec("Log-linear").param_names == ("a", "b")
        assert get_spec("Emax").param_names == ("E0", "Emax", "ED50", "h")

    def test_defaults(self):
        assert default_params("Linear") == {"a": 100.0, "b": -30.0}
        assert default_params("Log-linear") == {"a": 100.0, "b": -60.0}
        assert default_params("Emax") == {"E0": 100.0, "Emax": 60.0, "ED50": 0.5, "h": 1.0}

    def test_schema_is_read_only(self):
        spec = get_spec("Emax")
        with pytest.raises(TypeError):
            spec.params["E0"] = ParameterSpec("x", 0.0, 1.0, 0.1, 0.5)

    def test_schema_invariants(self):
        """min <= default <= max and step > 0 for every registered parameter."""
        for name in list_variants():
            for p in get_spec(name).params.values():
                assert p.min <= p.default <= p.max
                assert p.step > 0


class TestParameterSpec:
    """Construction checks on parameter schemas."""

    def test_default_out_of_bounds(self):
        with pytest.raises(ValueError, match="default"):
            ParameterSpec("a", min=0.0, max=1.0, step=0.1, default=2.0)

    def test_non_positive_step(self):
        with pytest.raises(ValueError, match="step"):
            ParameterSpec("a", min=0.0, max=1.0, step=0.0, default=0.5)


class TestEvaluate:
    """ModelVariant.evaluate on default parameters."""

    def test_baseline_at_zero_dose(self):
        """At x=0 with defaults: Linear -> a, Log-linear -> a - 3b, Emax -> E0."""
        assert get_spec("Linear").evaluate(0.0, default_params("Linear")) == pytest.approx(100.0)
        assert get_spec("Log-linear").evaluate(0.0, default_params("Log-linear")) == pytest.approx(
            100.0 - 60.0 * np.log10(1e-3)
        )
        assert get_spec("Emax").evaluate(0.0, default_params("Emax")) == pytest.approx(100.0)

    def test_scalar_returns_float(self):
        result = get_spec("Emax").evaluate(0.5, default_params("Emax"))
        assert isinstance(result, float)
        assert result == pytest.approx(70.0)

    def test_array_returns_array(self):
        result = get_spec("Linear").evaluate(np.array([0.0, 1.0]), {"a": 100.0, "b": -30.0})
        np.testing.assert_allclose(result, [100.0, 70.0])

    def test_missing_parameter(self):
        with pytest.raises(ValueError, match="ED50"):
            get_spec("Emax").evaluate(0.5, {"E0": 100.0, "Emax": 60.0, "h": 1.0})

    def test_extra_parameters_ignored(self):
        result = get_spec("Linear").evaluate(1.0, {"a": 100.0, "b": -30.0, "E0": 5.0})
        assert result == pytest.approx(70.0)


class TestDescribe:
    """Equation strings."""

    def test_linear(self):
        text = get_spec("Linear").describe({"a": 100.0, "b": -30.0})
        assert text == "y = a + b·x  (a=100.00, b=-30.00)"

    def test_log_linear_shows_offset(self):
        text = get_spec("Log-linear").describe({"a": 100.0, "b": -60.0})
        assert text == "y = a + b·log10(x + 0.001)  (a=100.00, b=-60.00)"

    def test_emax(self):
        text = get_spec("Emax").describe(default_params("Emax"))
        assert text.startswith("y = E0 − (Emax·x^h)/(ED50^h + x^h)")
        assert "(E0=100.00, Emax=60.00, ED50=0.50, h=1.00)" in text

    def test_rounds_for_display_only(self):
        params = {"E0": 99.999, "Emax": 60.0, "ED50": 0.123456, "h": 1.0}
        spec = get_spec("Emax")
        assert "ED50=0.12" in spec.describe(params)
        assert spec.evaluate(0.123456, params) == pytest.approx(99.999 - 30.0)
