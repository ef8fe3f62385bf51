"""
Pytest configuration and shared fixtures for Momento tests.

This module provides shared test images and encoded image bytes used
across multiple test modules.
"""

from io import BytesIO

import numpy as np
import pytest

from MO_Libs.ImageEditingLib.image_models import PixelBuffer


@pytest.fixture
def gray_image():
    """
    Provide a 4x4 solid mid-gray, fully opaque image.

    Returns:
        PixelBuffer with every RGB sample at 0.5
    """
    return PixelBuffer.solid(4, 4, (0.5, 0.5, 0.5, 1.0))


@pytest.fixture
def odd_gray_image():
    """5x5 solid gray image; the middle pixel sits exactly on the image center."""
    return PixelBuffer.solid(5, 5, (0.6, 0.6, 0.6, 1.0))


@pytest.fixture
def gradient_image():
    """
    Provide an 8x6 image with red rising left to right and green top to bottom.

    Returns:
        PixelBuffer with varied colors and a half-transparent bottom row
    """
    height, width = 6, 8
    pixels = np.zeros((height, width, 4), dtype=np.float32)
    pixels[..., 0] = np.linspace(0.0, 1.0, width)[None, :]
    pixels[..., 1] = np.linspace(0.0, 1.0, height)[:, None]
    pixels[..., 2] = 0.3
    pixels[..., 3] = 1.0
    pixels[-1, :, 3] = 0.5
    return PixelBuffer(pixels)


@pytest.fixture
def gradient_png_bytes(gradient_image):
    """PNG encoding of gradient_image."""
    output = BytesIO()
    gradient_image.to_pil().save(output, format="PNG")
    return output.getvalue()


@pytest.fixture
def pixel_difference():
    """Provide a comparison returning the largest absolute sample difference."""

    def compare(first, second):
        assert first.size == second.size, f"{first.size} vs {second.size}"
        return float(np.max(np.abs(first.pixels - second.pixels)))

    return compare
