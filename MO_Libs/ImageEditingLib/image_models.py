"""
Image data models for Momento.

This module defines the core data structures used throughout the filter
pipeline.

Classes:
    PixelBuffer: Normalized floating-point RGBA image plus codec metadata
    WhitePoint: Color temperature (Kelvin) and green/magenta tint pair

Type Aliases:
    RgbColor: A tuple of 3 floats representing RGB color values (0.0-1.0)
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

import numpy as np

from MO_Libs.ImageEditingLib.errors import DecodeError
from MO_Libs.pillow_compat import Image

RgbColor = Tuple[float, float, float]

WORKING_DTYPE = np.float32
CHANNELS = 4

# Single-channel PIL modes read directly, with the sample value of full intensity
HIGH_DEPTH_MODE_MAXIMUMS = {
    "I;16": 65535.0,
    "I;16L": 65535.0,
    "I;16B": 65535.0,
    "I;16N": 65535.0,
    "I": 65535.0,
    "F": 1.0,
}


@dataclass(frozen=True)
class WhitePoint:
    temperature: float
    tint: float = 0.0


@dataclass(frozen=True, eq=False)
class PixelBuffer:
    """
    An RGBA image held as an (height, width, 4) float32 array.

    Samples are normalized so 0.0 is black and 1.0 is full intensity.
    Intermediate chain stages may leave samples outside [0, 1]; call
    clamped() before handing a buffer to display or encoding.

    Buffers compare and hash by identity; compare samples with
    np.array_equal(a.pixels, b.pixels).

    Attributes:
        pixels: The sample array, shape (height, width, 4)
        source_format: Pillow format name the buffer was decoded from, if any
        info: Encoder metadata carried through the pipeline (exif, icc_profile)
    """

    pixels: np.ndarray
    source_format: Optional[str] = None
    info: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        pixels = self.pixels
        if not isinstance(pixels, np.ndarray):
            raise DecodeError(f"Expected numpy array for pixels, got {type(pixels)}")
        if pixels.ndim != 3 or pixels.shape[2] != CHANNELS:
            raise DecodeError(f"Expected (height, width, 4) pixel array, got shape {pixels.shape}")
        if pixels.shape[0] == 0 or pixels.shape[1] == 0:
            raise DecodeError(f"Image has no pixels: shape {pixels.shape}")
        if pixels.dtype != WORKING_DTYPE:
            object.__setattr__(self, "pixels", pixels.astype(WORKING_DTYPE))

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def size(self) -> Tuple[int, int]:
        """(width, height), matching Pillow's convention."""
        return self.width, self.height

    @property
    def rgb(self) -> np.ndarray:
        return self.pixels[..., :3]

    @property
    def alpha(self) -> np.ndarray:
        return self.pixels[..., 3]

    def copy(self) -> "PixelBuffer":
        return PixelBuffer(self.pixels.copy(), self.source_format, dict(self.info))

    def with_pixels(self, pixels: np.ndarray) -> "PixelBuffer":
        """Return a new buffer with the given samples and this buffer's metadata."""
        return PixelBuffer(pixels, self.source_format, dict(self.info))

    def with_rgb(self, rgb: np.ndarray) -> "PixelBuffer":
        """Return a new buffer with replaced RGB samples and the original alpha."""
        pixels = np.empty_like(self.pixels)
        pixels[..., :3] = rgb
        pixels[..., 3] = self.pixels[..., 3]
        return self.with_pixels(pixels)

    def clamped(self) -> "PixelBuffer":
        return self.with_pixels(np.clip(self.pixels, 0.0, 1.0))

    @classmethod
    def from_pil(cls, image: Any, source_format: Optional[str] = None) -> "PixelBuffer":
        """
        Build a buffer from a PIL Image.

        16-bit and 32-bit single-channel modes are read at full depth and
        replicated to gray RGB with opaque alpha; Pillow's RGBA conversion
        would clip them to 8 bits.

        Args:
            image: PIL Image in any mode (converted to RGBA)
            source_format: Optional format name to remember for re-encoding

        Returns:
            A new PixelBuffer with samples scaled to 0.0-1.0
        """
        if not hasattr(image, "convert"):
            raise DecodeError(f"Expected PIL Image, got {type(image)}")

        source_format = source_format or getattr(image, "format", None)

        if image.mode in HIGH_DEPTH_MODE_MAXIMUMS:
            gray = np.asarray(image).astype(np.float64) / HIGH_DEPTH_MODE_MAXIMUMS[image.mode]
            array = np.empty(gray.shape + (CHANNELS,), dtype=WORKING_DTYPE)
            array[..., :3] = gray[..., None]
            array[..., 3] = 1.0
            return cls(array, source_format)

        rgba = image.convert("RGBA") if image.mode != "RGBA" else image
        array = np.asarray(rgba, dtype=WORKING_DTYPE) / 255.0
        return cls(array, source_format)

    def to_pil(self) -> Any:
        """Quantize to 8-bit and return an RGBA PIL Image."""
        array = np.clip(self.pixels, 0.0, 1.0) * 255.0
        return Image.fromarray(np.rint(array).astype(np.uint8))

    @classmethod
    def solid(cls, width: int, height: int, color: Tuple[float, float, float, float]) -> "PixelBuffer":
        """Create a buffer filled with one RGBA color (0.0-1.0 components)."""
        pixels = np.empty((height, width, CHANNELS), dtype=WORKING_DTYPE)
        pixels[...] = np.asarray(color, dtype=WORKING_DTYPE)
        return cls(pixels)
