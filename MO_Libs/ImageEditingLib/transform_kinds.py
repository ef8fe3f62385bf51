"""
Transform descriptors for the filter pipeline.

Each descriptor is an immutable tagged variant carrying the typed parameters
of one primitive image operation. Chains of descriptors are plain data; the
chain runner looks up the primitive for each descriptor by its `kind` tag.

Classes:
    Identity, ColorAdjust, Monochrome, TemperatureTint, Vignette, HighlightShadow

Type Aliases:
    TransformKind: Union of all descriptor classes
"""

from dataclasses import dataclass, field, replace
from typing import ClassVar, Tuple, Union
import logging

from MO_Libs.ImageEditingLib.image_models import RgbColor, WhitePoint
from MO_Libs.constants import (
    BRIGHTNESS_RANGE,
    COLOR_CHANNEL_RANGE,
    CONTRAST_RANGE,
    HIGHLIGHT_AMOUNT_RANGE,
    KIND_COLOR_ADJUST,
    KIND_HIGHLIGHT_SHADOW,
    KIND_IDENTITY,
    KIND_MONOCHROME,
    KIND_TEMPERATURE_TINT,
    KIND_VIGNETTE,
    LOCAL_LUMA_RADIUS_RANGE,
    MONOCHROME_INTENSITY_RANGE,
    SATURATION_RANGE,
    SHADOW_AMOUNT_RANGE,
    TEMPERATURE_RANGE,
    TINT_RANGE,
    VIGNETTE_INTENSITY_RANGE,
    VIGNETTE_RADIUS_RANGE,
)

logger = logging.getLogger(__name__)


def clamp_parameter(name: str, value: float, bounds: Tuple[float, float]) -> float:
    """
    Clamp a numeric parameter into its documented domain.

    Out-of-range values are not an error; they are pulled to the nearest
    bound and noted at debug level.
    """
    low, high = bounds
    value = float(value)
    if value != value:  # NaN
        logger.debug(f"Parameter {name} is NaN, using {low}")
        return low
    clamped = max(low, min(high, value))
    if clamped != value:
        logger.debug(f"Parameter {name}={value} outside [{low}, {high}], clamped to {clamped}")
    return clamped


@dataclass(frozen=True)
class Identity:
    kind: ClassVar[str] = KIND_IDENTITY

    def clamped(self) -> "Identity":
        return self


@dataclass(frozen=True)
class ColorAdjust:
    """Saturation, then contrast around mid-gray, then brightness offset."""

    brightness: float = 0.0
    contrast: float = 1.0
    saturation: float = 1.0
    kind: ClassVar[str] = KIND_COLOR_ADJUST

    def clamped(self) -> "ColorAdjust":
        return replace(
            self,
            brightness=clamp_parameter("brightness", self.brightness, BRIGHTNESS_RANGE),
            contrast=clamp_parameter("contrast", self.contrast, CONTRAST_RANGE),
            saturation=clamp_parameter("saturation", self.saturation, SATURATION_RANGE),
        )


@dataclass(frozen=True)
class Monochrome:
    """Blend of the original with its luma multiplied by a tint color."""

    tint_color: RgbColor = (0.6, 0.45, 0.3)
    intensity: float = 1.0
    kind: ClassVar[str] = KIND_MONOCHROME

    def clamped(self) -> "Monochrome":
        r, g, b = self.tint_color
        return replace(
            self,
            tint_color=(
                clamp_parameter("tint_color.r", r, COLOR_CHANNEL_RANGE),
                clamp_parameter("tint_color.g", g, COLOR_CHANNEL_RANGE),
                clamp_parameter("tint_color.b", b, COLOR_CHANNEL_RANGE),
            ),
            intensity=clamp_parameter("intensity", self.intensity, MONOCHROME_INTENSITY_RANGE),
        )


@dataclass(frozen=True)
class TemperatureTint:
    """
    White balance shift between two white points.

    source_white_point is the white the image was rendered for;
    target_white_point is the white it should be rendered for. A target
    temperature above the source warms the image, like raising a camera's
    white balance setting.
    """

    source_white_point: WhitePoint = field(default_factory=lambda: WhitePoint(6500.0))
    target_white_point: WhitePoint = field(default_factory=lambda: WhitePoint(6500.0))
    kind: ClassVar[str] = KIND_TEMPERATURE_TINT

    def clamped(self) -> "TemperatureTint":
        return replace(
            self,
            source_white_point=_clamp_white_point("source", self.source_white_point),
            target_white_point=_clamp_white_point("target", self.target_white_point),
        )


def _clamp_white_point(label: str, point: WhitePoint) -> WhitePoint:
    return WhitePoint(
        temperature=clamp_parameter(f"{label}.temperature", point.temperature, TEMPERATURE_RANGE),
        tint=clamp_parameter(f"{label}.tint", point.tint, TINT_RANGE),
    )


@dataclass(frozen=True)
class Vignette:
    intensity: float = 0.0
    radius: float = 1.0
    kind: ClassVar[str] = KIND_VIGNETTE

    def clamped(self) -> "Vignette":
        return replace(
            self,
            intensity=clamp_parameter("intensity", self.intensity, VIGNETTE_INTENSITY_RANGE),
            radius=clamp_parameter("radius", self.radius, VIGNETTE_RADIUS_RANGE),
        )


@dataclass(frozen=True)
class HighlightShadow:
    """
    Tone-range selective brightness remap.

    Positive shadow_amount lifts dark tones; negative highlight_amount
    pulls bright tones down. radius > 0 weights by a blurred (local) luma
    instead of the pixel's own luma.
    """

    shadow_amount: float = 0.0
    highlight_amount: float = 0.0
    radius: float = 0.0
    kind: ClassVar[str] = KIND_HIGHLIGHT_SHADOW

    def clamped(self) -> "HighlightShadow":
        return replace(
            self,
            shadow_amount=clamp_parameter("shadow_amount", self.shadow_amount, SHADOW_AMOUNT_RANGE),
            highlight_amount=clamp_parameter(
                "highlight_amount", self.highlight_amount, HIGHLIGHT_AMOUNT_RANGE
            ),
            radius=clamp_parameter("radius", self.radius, LOCAL_LUMA_RADIUS_RANGE),
        )


TransformKind = Union[Identity, ColorAdjust, Monochrome, TemperatureTint, Vignette, HighlightShadow]
