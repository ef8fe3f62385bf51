"""
Unit tests for tone_filters module.

Tests the vignette and highlight/shadow primitives.
"""

import numpy as np
import pytest

from MO_Libs.ImageEditingLib.image_models import PixelBuffer
from MO_Libs.ImageEditingLib.tone_filters import (
    apply_highlight_shadow,
    apply_vignette,
    normalized_radius_map,
    smoothstep,
    tone_weights,
    vignette_factor,
)
from MO_Libs.ImageEditingLib.transform_kinds import HighlightShadow, Vignette


class TestVignette:
    """Tests for vignette_factor and apply_vignette."""

    @pytest.mark.parametrize("intensity", [0.0, 0.3, 0.6, 1.0])
    @pytest.mark.parametrize("radius", [0.05, 0.5, 1.0, 2.0])
    def test_factor_is_one_at_center(self, intensity, radius):
        assert vignette_factor(0.0, intensity, radius) == 1.0

    def test_factor_decreases_outward(self):
        distances = np.linspace(0.0, 1.5, 16)
        factors = vignette_factor(distances, 0.6, 2.0)

        assert np.all(np.diff(factors) <= 0)
        assert factors[-1] < 1.0

    def test_factor_bottoms_out_at_radius(self):
        assert vignette_factor(3.0, 0.6, 1.0) == pytest.approx(0.4)

    def test_radius_map_center_and_corners(self):
        distances = normalized_radius_map(5, 5)

        assert distances[2, 2] == 0.0
        assert distances[0, 0] == pytest.approx(distances[4, 4])
        assert distances[0, 0] > distances[0, 2]

    def test_center_pixel_unchanged_and_corners_darker(self, odd_gray_image):
        result = apply_vignette(odd_gray_image, Vignette(intensity=0.6, radius=2.0))

        assert np.array_equal(result.pixels[2, 2], odd_gray_image.pixels[2, 2])
        assert np.all(result.rgb[0, 0] < odd_gray_image.rgb[0, 0])

    def test_zero_intensity_keeps_samples(self, gradient_image):
        result = apply_vignette(gradient_image, Vignette(intensity=0.0, radius=1.0))

        assert np.array_equal(result.pixels, gradient_image.pixels)

    def test_alpha_untouched(self, gradient_image):
        result = apply_vignette(gradient_image, Vignette(intensity=1.0, radius=0.5))

        assert np.array_equal(result.alpha, gradient_image.alpha)


class TestHighlightShadow:
    """Tests for apply_highlight_shadow."""

    def test_weights_are_smooth_and_bounded(self):
        luma = np.linspace(0.0, 1.0, 101)
        shadow_weight, highlight_weight = tone_weights(luma)

        assert shadow_weight[0] == 1.0 and shadow_weight[-1] == 0.0
        assert highlight_weight[0] == 0.0 and highlight_weight[-1] == 1.0
        # No hard threshold: neighbouring steps never jump
        assert np.max(np.abs(np.diff(shadow_weight))) < 0.05
        assert np.max(np.abs(np.diff(highlight_weight))) < 0.05

    def test_smoothstep_edges(self):
        assert smoothstep(0.0, 1.0, -1.0) == 0.0
        assert smoothstep(0.0, 1.0, 0.5) == pytest.approx(0.5)
        assert smoothstep(0.0, 1.0, 2.0) == 1.0

    def test_shadow_amount_lifts_dark_pixels(self):
        dark = PixelBuffer.solid(2, 2, (0.1, 0.1, 0.1, 1.0))

        result = apply_highlight_shadow(dark, HighlightShadow(shadow_amount=0.5))

        assert np.all(result.rgb > 0.1)

    def test_negative_highlight_amount_recovers_bright_pixels(self):
        bright = PixelBuffer.solid(2, 2, (0.9, 0.9, 0.9, 1.0))

        result = apply_highlight_shadow(bright, HighlightShadow(highlight_amount=-0.5))

        assert np.all(result.rgb < 0.9)

    def test_shadow_lift_barely_touches_highlights(self):
        bright = PixelBuffer.solid(2, 2, (0.95, 0.95, 0.95, 1.0))

        result = apply_highlight_shadow(bright, HighlightShadow(shadow_amount=1.0))

        assert np.allclose(result.rgb, 0.95, atol=1e-6)

    def test_zero_amounts_keep_samples(self, gradient_image):
        result = apply_highlight_shadow(gradient_image, HighlightShadow())

        assert np.array_equal(result.pixels, gradient_image.pixels)

    def test_tone_ramp_stays_monotonic(self):
        ramp = np.zeros((1, 256, 4), dtype=np.float32)
        ramp[..., :3] = np.linspace(0.0, 1.0, 256)[None, :, None]
        ramp[..., 3] = 1.0

        result = apply_highlight_shadow(
            PixelBuffer(ramp), HighlightShadow(shadow_amount=0.3, highlight_amount=-0.3)
        )

        assert np.all(np.diff(result.rgb[0, :, 0]) > 0)

    def test_local_luma_radius_on_flat_image_matches_pixel_luma(self, odd_gray_image):
        params = HighlightShadow(shadow_amount=0.4, highlight_amount=-0.4)

        pixel_result = apply_highlight_shadow(odd_gray_image, params)
        local_result = apply_highlight_shadow(
            odd_gray_image, HighlightShadow(shadow_amount=0.4, highlight_amount=-0.4, radius=6.0)
        )

        assert np.allclose(pixel_result.pixels, local_result.pixels, atol=1e-5)

    def test_size_and_alpha_preserved(self, gradient_image):
        result = apply_highlight_shadow(gradient_image, HighlightShadow(0.3, -0.3, radius=3.0))

        assert result.size == gradient_image.size
        assert np.array_equal(result.alpha, gradient_image.alpha)
