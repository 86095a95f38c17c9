"""Tests for the built-in target densities."""

import pytest
import numpy as np
from scipy.integrate import quad
from metropolis1d import ShiftedSquare, Sinus, TargetFunction, TargetType, get_target


class TestShiftedSquare:
    """Tests for ShiftedSquare target."""

    def test_values(self):
        """Test density at known points."""
        target = ShiftedSquare()
        assert target(0.0) == np.float32(0.25)
        assert target(0.5) == np.float32(0.0)
        assert target(1.0) == np.float32(0.25)
        assert np.isclose(float(target(0.75)), 0.0625)

    def test_single_precision(self):
        """Test that densities are float32."""
        assert isinstance(ShiftedSquare()(np.float32(0.3)), np.float32)

    def test_outside_support(self):
        """Test density is zero outside [0, 1]."""
        target = ShiftedSquare()
        assert target(-0.01) == 0.0
        assert target(1.01) == 0.0
        assert target(5.0) == 0.0

    def test_vectorized(self):
        """Test evaluation on arrays."""
        x = np.array([-1.0, 0.0, 0.5, 1.0, 2.0], dtype=np.float32)
        expected = np.array([0.0, 0.25, 0.0, 0.25, 0.0], dtype=np.float32)
        np.testing.assert_array_equal(ShiftedSquare()(x), expected)

    def test_norm_matches_integral(self):
        """Test normalization constant is the inverse integral of the density."""
        target = ShiftedSquare()
        integral, _ = quad(target.reference, 0.0, 1.0)
        assert target.norm == np.float32(12.0)
        assert np.isclose(float(target.norm), 1.0 / integral, rtol=1e-6)


class TestSinus:
    """Tests for Sinus target."""

    def test_values(self):
        """Test density at known points."""
        target = Sinus()
        assert target(0.0) == 0.0
        assert np.isclose(float(target(np.pi / 20)), 1.0, atol=1e-6)
        assert np.isclose(float(target(0.4)), abs(np.sin(4.0)), rtol=1e-6)

    def test_outside_support(self):
        """Test density is zero outside [0, 1]."""
        target = Sinus()
        assert target(-0.1) == 0.0
        assert target(1.2) == 0.0

    def test_norm_matches_integral(self):
        """Test normalization constant is the inverse integral of the density."""
        target = Sinus()
        integral, _ = quad(target.reference, 0.0, 1.0, limit=200)
        assert target.norm == np.float32(1.0) / np.float32(0.616)
        assert np.isclose(float(target.norm), 1.0 / integral, rtol=1e-3)

    def test_density_rounded_once(self):
        """Test the single precision density is the double precision sine rounded once."""
        x = np.linspace(0.0, 1.0, 257, dtype=np.float32)
        scaled = (np.float32(10.0) * x).astype(np.float64)
        expected = np.abs(np.sin(scaled)).astype(np.float32)
        np.testing.assert_array_equal(Sinus()(x), expected)

    def test_reference_double_precision(self):
        """Test reference density on arrays."""
        x = np.linspace(-0.5, 1.5, 9)
        ref = Sinus().reference(x)
        assert ref.dtype == np.float64
        assert np.all(ref[(x < 0) | (x > 1)] == 0.0)
        inside = (x >= 0) & (x <= 1)
        np.testing.assert_allclose(ref[inside], np.abs(np.sin(10 * x[inside])))


class TestTargetSelection:
    """Tests for target selection."""

    def test_from_enum(self):
        """Test resolving enum members."""
        assert isinstance(get_target(TargetType.SHIFTED_SQUARE), ShiftedSquare)
        assert isinstance(get_target(TargetType.SINUS), Sinus)

    @pytest.mark.parametrize("name", ["sinus", "SINUS", " Sinus "])
    def test_from_name(self, name):
        """Test resolving names."""
        assert isinstance(get_target(name), Sinus)

    @pytest.mark.parametrize("name", ["shifted_square", "Shifted Square", "shifted-square"])
    def test_from_name_with_separators(self, name):
        """Test resolving names with different separators."""
        assert isinstance(get_target(name), ShiftedSquare)

    def test_instance_passthrough(self):
        """Test that target instances are returned unchanged."""
        target = Sinus()
        assert get_target(target) is target

    @pytest.mark.parametrize("bad", ["gaussian", 3, None])
    def test_unknown_target(self, bad):
        """Test that unknown targets are rejected."""
        with pytest.raises(ValueError):
            get_target(bad)

    def test_immutable(self):
        """Test that targets cannot be modified."""
        target = ShiftedSquare()
        with pytest.raises(AttributeError):
            target.norm = 1.0

    def test_equality(self):
        """Test that targets compare by type."""
        assert ShiftedSquare() == ShiftedSquare()
        assert ShiftedSquare() != Sinus()

    def test_base_class_abstract(self):
        """Test that the base class requires a density."""
        with pytest.raises(NotImplementedError):
            TargetFunction()(0.5)
