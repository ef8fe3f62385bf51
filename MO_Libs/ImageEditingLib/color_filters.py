"""
Color Filter Operations.

Provides the per-pixel color primitives of the filter pipeline:
- Color adjust: saturation, contrast and brightness controls
- Monochrome: tinted grayscale blended with the original
- Temperature/tint: chromatic adaptation between two white points

All functions take a PixelBuffer and a descriptor and return a new
PixelBuffer of the same size. Alpha passes through unchanged and samples
are not clamped; the chain runner clamps once at the end.

Example:
    >>> from MO_Libs.ImageEditingLib.transform_kinds import ColorAdjust
    >>> punchy = apply_color_adjust(image, ColorAdjust(contrast=1.4, saturation=1.8))
"""

from functools import lru_cache
from typing import Tuple

import numpy as np

from MO_Libs.ImageEditingLib.image_models import PixelBuffer, WhitePoint, WORKING_DTYPE
from MO_Libs.ImageEditingLib.transform_kinds import ColorAdjust, Monochrome, TemperatureTint
from MO_Libs.constants import CONTRAST_PIVOT, LUMA_WEIGHTS


_LUMA = np.asarray(LUMA_WEIGHTS, dtype=WORKING_DTYPE)

# Linear sRGB (D65) to CIE XYZ
_RGB_TO_XYZ = np.array(
    [
        [0.4124564, 0.3575761, 0.1804375],
        [0.2126729, 0.7151522, 0.0721750],
        [0.0193339, 0.1191920, 0.9503041],
    ]
)
_XYZ_TO_RGB = np.linalg.inv(_RGB_TO_XYZ)

# Bradford cone response
_BRADFORD = np.array(
    [
        [0.8951, 0.2664, -0.1614],
        [-0.7502, 1.7135, 0.0367],
        [0.0389, -0.0685, 1.0296],
    ]
)
_BRADFORD_INV = np.linalg.inv(_BRADFORD)

# Chromaticity shift per unit of tint (positive tint moves toward magenta)
_TINT_Y_SCALE = 1.0 / 3000.0

_SRGB_GAMMA = 2.2


def compute_luma(rgb: np.ndarray) -> np.ndarray:
    """Rec.709 luma of an (..., 3) array."""
    return rgb @ _LUMA


# ============================================================================
# Color Adjust
# ============================================================================

def apply_color_adjust(image: PixelBuffer, params: ColorAdjust) -> PixelBuffer:
    """
    Apply saturation, contrast and brightness, in that order.

    Args:
        image: Source buffer
        params: ColorAdjust descriptor (brightness offset, contrast and
                saturation multipliers; 0/1/1 is a no-op)

    Returns:
        New PixelBuffer with adjusted RGB
    """
    rgb = image.rgb
    luma = compute_luma(rgb)[..., None]

    rgb = luma + params.saturation * (rgb - luma)
    rgb = (rgb - CONTRAST_PIVOT) * params.contrast + CONTRAST_PIVOT
    rgb = rgb + params.brightness

    return image.with_rgb(rgb)


# ============================================================================
# Monochrome
# ============================================================================

def apply_monochrome(image: PixelBuffer, params: Monochrome) -> PixelBuffer:
    """
    Blend a tinted grayscale version of the image with the original.

    output = intensity * (luma * tint) + (1 - intensity) * original

    Args:
        image: Source buffer
        params: Monochrome descriptor

    Returns:
        New PixelBuffer; equal to the input samples when intensity is 0
    """
    rgb = image.rgb
    if params.intensity == 0.0:
        return image.with_rgb(rgb.copy())

    tint = np.asarray(params.tint_color, dtype=WORKING_DTYPE)
    tinted = compute_luma(rgb)[..., None] * tint

    if params.intensity == 1.0:
        return image.with_rgb(tinted)

    intensity = WORKING_DTYPE(params.intensity)
    return image.with_rgb(intensity * tinted + (1 - intensity) * rgb)


# ============================================================================
# Temperature / Tint
# ============================================================================

def white_point_to_xy(point: WhitePoint) -> Tuple[float, float]:
    """
    CIE xy chromaticity of a white point.

    Uses the Kim et al. cubic spline fit of the Planckian locus
    (valid 1667K-25000K); tint offsets y, positive tint toward magenta.
    """
    t = float(point.temperature)

    if t <= 4000.0:
        x = -0.2661239e9 / t ** 3 - 0.2343589e6 / t ** 2 + 0.8776956e3 / t + 0.179910
    else:
        x = -3.0258469e9 / t ** 3 + 2.1070379e6 / t ** 2 + 0.2226347e3 / t + 0.240390

    if t <= 2222.0:
        y = -1.1063814 * x ** 3 - 1.34811020 * x ** 2 + 2.18555832 * x - 0.20219683
    elif t <= 4000.0:
        y = -0.9549476 * x ** 3 - 1.37418593 * x ** 2 + 2.09137015 * x - 0.16748867
    else:
        y = 3.0817580 * x ** 3 - 5.87338670 * x ** 2 + 3.75112997 * x - 0.37001483

    y -= float(point.tint) * _TINT_Y_SCALE
    return x, y


def _xy_to_xyz(xy: Tuple[float, float]) -> np.ndarray:
    x, y = xy
    return np.array([x / y, 1.0, (1.0 - x - y) / y])


@lru_cache(maxsize=32)
def adaptation_matrix(source: WhitePoint, target: WhitePoint) -> np.ndarray:
    """
    3x3 linear-RGB matrix adapting the target white onto the source white.

    A neutral surface lit by the target illuminant maps to neutral under
    the source; relative to the source rendering, this shifts colors away
    from the target's cast. Identity when both white points are equal.
    """
    cone_from = _BRADFORD @ _xy_to_xyz(white_point_to_xy(target))
    cone_to = _BRADFORD @ _xy_to_xyz(white_point_to_xy(source))
    scale = np.diag(cone_to / cone_from)
    xyz_adapt = _BRADFORD_INV @ scale @ _BRADFORD
    matrix = _XYZ_TO_RGB @ xyz_adapt @ _RGB_TO_XYZ
    matrix.setflags(write=False)
    return matrix


def apply_temperature_tint(image: PixelBuffer, params: TemperatureTint) -> PixelBuffer:
    """
    Shift color balance from one white point to another.

    The adaptation runs in linear light: samples are decoded with a
    sign-preserving 2.2 gamma, multiplied by the adaptation matrix and
    re-encoded, so out-of-range intermediates survive the round trip.

    Args:
        image: Source buffer
        params: TemperatureTint descriptor

    Returns:
        New PixelBuffer with adapted RGB
    """
    if params.source_white_point == params.target_white_point:
        return image.with_rgb(image.rgb.copy())

    matrix = adaptation_matrix(params.source_white_point, params.target_white_point)

    rgb = image.rgb
    linear = np.sign(rgb) * np.power(np.abs(rgb), _SRGB_GAMMA)
    adapted = linear @ matrix.T.astype(WORKING_DTYPE)
    encoded = np.sign(adapted) * np.power(np.abs(adapted), 1.0 / _SRGB_GAMMA)

    return image.with_rgb(encoded.astype(WORKING_DTYPE))
