"""
Unit tests for color_filters module.

Tests the color adjust, monochrome and temperature/tint primitives.
"""

import numpy as np
import pytest

from MO_Libs.ImageEditingLib.color_filters import (
    adaptation_matrix,
    apply_color_adjust,
    apply_monochrome,
    apply_temperature_tint,
    compute_luma,
    white_point_to_xy,
)
from MO_Libs.ImageEditingLib.image_models import PixelBuffer, WhitePoint
from MO_Libs.ImageEditingLib.transform_kinds import ColorAdjust, Monochrome, TemperatureTint


def _single_pixel(r, g, b, a=1.0):
    return PixelBuffer.solid(1, 1, (r, g, b, a))


class TestColorAdjust:
    """Tests for apply_color_adjust."""

    def test_neutral_parameters_keep_samples(self, gradient_image):
        result = apply_color_adjust(gradient_image, ColorAdjust())

        assert np.allclose(result.pixels, gradient_image.pixels, atol=1e-6)

    def test_saturation_then_contrast_then_brightness(self):
        image = _single_pixel(0.8, 0.2, 0.4)
        params = ColorAdjust(brightness=0.1, contrast=2.0, saturation=0.5)

        rgb = np.array([0.8, 0.2, 0.4])
        luma = 0.2126 * 0.8 + 0.7152 * 0.2 + 0.0722 * 0.4
        expected = luma + 0.5 * (rgb - luma)
        expected = (expected - 0.5) * 2.0 + 0.5
        expected = expected + 0.1

        result = apply_color_adjust(image, params)

        assert np.allclose(result.rgb[0, 0], expected, atol=1e-5)

    def test_zero_saturation_is_grayscale(self, gradient_image):
        result = apply_color_adjust(gradient_image, ColorAdjust(saturation=0.0))

        assert np.allclose(result.rgb[..., 0], result.rgb[..., 1], atol=1e-6)
        assert np.allclose(result.rgb[..., 1], result.rgb[..., 2], atol=1e-6)

    def test_contrast_pivots_on_mid_gray(self):
        result = apply_color_adjust(_single_pixel(0.5, 0.5, 0.5), ColorAdjust(contrast=3.0))

        assert np.allclose(result.rgb, 0.5, atol=1e-6)

    def test_does_not_clamp_intermediate_values(self):
        result = apply_color_adjust(_single_pixel(0.9, 0.9, 0.9), ColorAdjust(brightness=0.5))

        assert result.rgb[0, 0, 0] == pytest.approx(1.4, abs=1e-6)

    def test_alpha_preserved_and_input_untouched(self, gradient_image):
        before = gradient_image.pixels.copy()

        result = apply_color_adjust(gradient_image, ColorAdjust(brightness=-0.3, contrast=1.5))

        assert np.array_equal(result.alpha, gradient_image.alpha)
        assert np.array_equal(gradient_image.pixels, before)
        assert result is not gradient_image


class TestMonochrome:
    """Tests for apply_monochrome."""

    def test_zero_intensity_returns_original_samples(self, gradient_image):
        result = apply_monochrome(gradient_image, Monochrome(tint_color=(0.0, 0.0, 1.0), intensity=0.0))

        assert np.array_equal(result.pixels, gradient_image.pixels)

    def test_full_intensity_is_tinted_grayscale(self, gradient_image):
        tint = (1.0, 0.2, 0.3)
        result = apply_monochrome(gradient_image, Monochrome(tint_color=tint, intensity=1.0))

        luma = compute_luma(gradient_image.rgb)
        expected = luma[..., None] * np.array(tint, dtype=np.float32)
        assert np.allclose(result.rgb, expected, atol=1e-6)

    def test_partial_intensity_blends_linearly(self):
        image = _single_pixel(0.2, 0.6, 0.4)
        result = apply_monochrome(image, Monochrome(tint_color=(0.0, 0.0, 1.0), intensity=0.3))

        luma = 0.2126 * 0.2 + 0.7152 * 0.6 + 0.0722 * 0.4
        expected = 0.3 * np.array([0.0, 0.0, luma]) + 0.7 * np.array([0.2, 0.6, 0.4])
        assert np.allclose(result.rgb[0, 0], expected, atol=1e-6)


class TestTemperatureTint:
    """Tests for white point math and apply_temperature_tint."""

    def test_d65_like_white_point(self):
        x, y = white_point_to_xy(WhitePoint(6500.0))

        assert x == pytest.approx(0.3135, abs=1e-3)
        assert y == pytest.approx(0.3237, abs=1e-3)

    def test_equal_white_points_give_identity_matrix(self):
        point = WhitePoint(5000.0, 10.0)

        assert np.allclose(adaptation_matrix(point, point), np.eye(3), atol=1e-9)

    def test_equal_white_points_keep_samples(self, gradient_image):
        params = TemperatureTint(WhitePoint(6500.0), WhitePoint(6500.0))

        result = apply_temperature_tint(gradient_image, params)

        assert np.array_equal(result.pixels, gradient_image.pixels)

    def test_higher_target_warms_image(self):
        gray = _single_pixel(0.5, 0.5, 0.5)
        params = TemperatureTint(WhitePoint(6500.0), WhitePoint(8000.0))

        r, g, b = apply_temperature_tint(gray, params).rgb[0, 0]

        assert r > 0.5
        assert b < 0.5

    def test_lower_target_cools_image(self):
        gray = _single_pixel(0.5, 0.5, 0.5)
        params = TemperatureTint(WhitePoint(6500.0), WhitePoint(5000.0))

        r, g, b = apply_temperature_tint(gray, params).rgb[0, 0]

        assert b > r

    def test_shift_is_monotonic_in_target_temperature(self):
        gray = _single_pixel(0.5, 0.5, 0.5)
        reds = [
            apply_temperature_tint(gray, TemperatureTint(WhitePoint(6500.0), WhitePoint(t))).rgb[0, 0, 0]
            for t in (6600.0, 7000.0, 8000.0, 10000.0)
        ]

        assert reds == sorted(reds)

    def test_alpha_preserved(self, gradient_image):
        params = TemperatureTint(WhitePoint(6500.0), WhitePoint(8000.0))

        result = apply_temperature_tint(gradient_image, params)

        assert np.array_equal(result.alpha, gradient_image.alpha)
        assert result.size == gradient_image.size
