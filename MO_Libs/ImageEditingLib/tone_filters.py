"""
Tone Filter Operations.

Provides the luminance-shaping primitives of the filter pipeline:
- Vignette: radial darkening from the image center
- Highlight/shadow: smooth tone-range selective brightness remap

Example:
    >>> from MO_Libs.ImageEditingLib.transform_kinds import Vignette
    >>> framed = apply_vignette(image, Vignette(intensity=0.6, radius=2.0))
"""

from typing import Tuple

import numpy as np
from scipy import ndimage

from MO_Libs.ImageEditingLib.color_filters import compute_luma
from MO_Libs.ImageEditingLib.image_models import PixelBuffer, WORKING_DTYPE
from MO_Libs.ImageEditingLib.transform_kinds import HighlightShadow, Vignette
from MO_Libs.constants import HIGHLIGHT_WEIGHT_EDGES, SHADOW_WEIGHT_EDGES, TONE_ADJUST_SCALE


def smoothstep(edge0: float, edge1: float, value):
    """Hermite interpolation between two edges, 0 below edge0 and 1 above edge1."""
    t = np.clip((value - edge0) / (edge1 - edge0), 0.0, 1.0)
    return t * t * (3.0 - 2.0 * t)


# ============================================================================
# Vignette
# ============================================================================

def normalized_radius_map(width: int, height: int) -> np.ndarray:
    """
    Distance of each pixel center from the image center.

    Each axis is normalized by its half-extent, so edge midpoints sit at
    1.0 and corners at about 1.41 regardless of aspect ratio. For odd
    dimensions the middle pixel is exactly 0.0.
    """
    half_w = width / 2.0
    half_h = height / 2.0
    xs = (np.arange(width, dtype=WORKING_DTYPE) + 0.5 - half_w) / half_w
    ys = (np.arange(height, dtype=WORKING_DTYPE) + 0.5 - half_h) / half_h
    return np.sqrt(ys[:, None] ** 2 + xs[None, :] ** 2)


def vignette_factor(distance, intensity: float, radius: float):
    """
    Brightness multiplier at a normalized distance from center.

    factor = 1 - intensity * smoothstep(0, radius, distance)

    Always 1.0 at distance 0; decreases monotonically outward and reaches
    1 - intensity at distance >= radius.
    """
    return 1.0 - intensity * smoothstep(0.0, radius, distance)


def apply_vignette(image: PixelBuffer, params: Vignette) -> PixelBuffer:
    """
    Darken the image radially from the center.

    Args:
        image: Source buffer
        params: Vignette descriptor (intensity 0-1 is the darkening at and
                beyond radius; radius is in normalized distance units)

    Returns:
        New PixelBuffer with RGB scaled by the vignette factor
    """
    distance = normalized_radius_map(image.width, image.height)
    factor = vignette_factor(distance, params.intensity, params.radius).astype(WORKING_DTYPE)
    return image.with_rgb(image.rgb * factor[..., None])


# ============================================================================
# Highlight / Shadow
# ============================================================================

def tone_weights(luma: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Smooth shadow and highlight membership weights for a luma map.

    Returns:
        Tuple of (shadow_weight, highlight_weight), each in [0, 1]
    """
    shadow_weight = 1.0 - smoothstep(SHADOW_WEIGHT_EDGES[0], SHADOW_WEIGHT_EDGES[1], luma)
    highlight_weight = smoothstep(HIGHLIGHT_WEIGHT_EDGES[0], HIGHLIGHT_WEIGHT_EDGES[1], luma)
    return shadow_weight, highlight_weight


def local_luma(image: PixelBuffer, radius: float) -> np.ndarray:
    """Pixel luma, or its Gaussian blur when radius > 0."""
    luma = compute_luma(image.rgb)
    if radius <= 0:
        return luma
    sigma = radius / 3.0
    return ndimage.gaussian_filter(luma, sigma=sigma, mode="nearest")


def apply_highlight_shadow(image: PixelBuffer, params: HighlightShadow) -> PixelBuffer:
    """
    Lift shadows and recover (or boost) highlights.

    The shadow term pushes dark tones toward white by a fraction of their
    headroom; the highlight term scales bright tones by a fraction of their
    value. Membership is weighted smoothly by local luma so there is no
    visible band at a threshold.

    Args:
        image: Source buffer
        params: HighlightShadow descriptor

    Returns:
        New PixelBuffer with the luma delta added to every RGB channel
    """
    if params.shadow_amount == 0.0 and params.highlight_amount == 0.0:
        return image.with_rgb(image.rgb.copy())

    weight_luma = np.clip(local_luma(image, params.radius), 0.0, 1.0)
    shadow_weight, highlight_weight = tone_weights(weight_luma)

    delta = (
        params.shadow_amount * shadow_weight * (1.0 - weight_luma)
        + params.highlight_amount * highlight_weight * weight_luma
    ) * TONE_ADJUST_SCALE

    return image.with_rgb(image.rgb + delta.astype(WORKING_DTYPE)[..., None])
