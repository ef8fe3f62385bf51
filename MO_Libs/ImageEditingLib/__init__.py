"""
ImageEditingLib - Core image model and transform primitives

This module provides the PixelBuffer image model, the codec, the error
taxonomy, transform descriptors and the primitive color/tone operations
for the Momento filter pipeline.
"""

from MO_Libs.ImageEditingLib.errors import (
    MomentoPipelineError,
    DecodeError,
    EncodeError,
    UnsupportedParameter,
    TransformStageError,
    EnhancementFailure,
)
from MO_Libs.ImageEditingLib.image_models import PixelBuffer, RgbColor, WhitePoint
from MO_Libs.ImageEditingLib.transform_kinds import (
    TransformKind,
    Identity,
    ColorAdjust,
    Monochrome,
    TemperatureTint,
    Vignette,
    HighlightShadow,
)
from MO_Libs.ImageEditingLib.color_filters import (
    apply_color_adjust,
    apply_monochrome,
    apply_temperature_tint,
)
from MO_Libs.ImageEditingLib.tone_filters import (
    apply_vignette,
    apply_highlight_shadow,
    vignette_factor,
)
from MO_Libs.ImageEditingLib.image_codec import decode_image, encode_image

__all__ = [
    "MomentoPipelineError",
    "DecodeError",
    "EncodeError",
    "UnsupportedParameter",
    "TransformStageError",
    "EnhancementFailure",
    "PixelBuffer",
    "RgbColor",
    "WhitePoint",
    "TransformKind",
    "Identity",
    "ColorAdjust",
    "Monochrome",
    "TemperatureTint",
    "Vignette",
    "HighlightShadow",
    "apply_color_adjust",
    "apply_monochrome",
    "apply_temperature_tint",
    "apply_vignette",
    "apply_highlight_shadow",
    "vignette_factor",
    "decode_image",
    "encode_image",
]
