"""
Image codec for the filter pipeline.

This module converts between encoded image bytes (HEIC from the camera,
plus the usual lossy and lossless formats) and the PixelBuffer working
representation.

Functions:
    decode_image: Decode bytes, file objects or PIL Images into a PixelBuffer
    encode_image: Encode a PixelBuffer to bytes
    normalize_format: Map format aliases onto Pillow format names
    get_supported_formats: List decodable file extensions
    is_supported_format: Check a path's extension against the supported set
"""

from io import BytesIO
from pathlib import Path
from typing import Any, List, Optional

from MO_Libs.ImageEditingLib.errors import DecodeError, EncodeError
from MO_Libs.ImageEditingLib.image_models import PixelBuffer
from MO_Libs.pillow_compat import Image, ImageOps, UnidentifiedImageError
from MO_Libs.constants import (
    DEFAULT_OUTPUT_FORMAT,
    DEFAULT_QUALITY,
    FORMAT_ALIASES,
    FORMATS_WITHOUT_ALPHA,
    LOSSY_FORMATS,
    QUALITY_RANGE,
    SUPPORTED_STANDARD_IMAGES,
)

# Metadata keys carried from decode to encode
_CARRIED_INFO_KEYS = ("exif", "icc_profile")


def get_supported_formats() -> List[str]:
    """
    Get list of supported image file extensions.

    Returns:
        Sorted list of extensions (e.g., ['.bmp', '.heic', ...])
    """
    return sorted(SUPPORTED_STANDARD_IMAGES)


def is_supported_format(file_path: Path) -> bool:
    return Path(file_path).suffix.lower() in SUPPORTED_STANDARD_IMAGES


def normalize_format(output_format: Optional[str]) -> Optional[str]:
    """
    Normalize a format name to the name Pillow registers.

    Args:
        output_format: Format name such as 'jpg', 'HEIC' or 'png'

    Returns:
        Upper-case Pillow format name, or None when output_format is empty
    """
    if not output_format:
        return None
    name = str(output_format).strip().upper().lstrip(".")
    return FORMAT_ALIASES.get(name, name)


def decode_image(source: Any) -> PixelBuffer:
    """
    Decode an image into a PixelBuffer.

    EXIF orientation is applied so the buffer is upright, and EXIF/ICC
    metadata is kept in the buffer's info for re-encoding.

    Args:
        source: Encoded bytes, a binary file object, a PIL Image, or a
                PixelBuffer (returned as-is)

    Returns:
        Decoded PixelBuffer

    Raises:
        DecodeError: If the input is empty, not an image, or unsupported
    """
    if isinstance(source, PixelBuffer):
        return source

    if hasattr(source, "convert") and hasattr(source, "mode"):
        return _buffer_from_pil(source, getattr(source, "format", None))

    if isinstance(source, (bytes, bytearray, memoryview)):
        if len(source) == 0:
            raise DecodeError("Cannot decode empty image data")
        stream = BytesIO(bytes(source))
    elif hasattr(source, "read"):
        stream = source
    else:
        raise DecodeError(f"Unsupported image source type: {type(source)}")

    try:
        with Image.open(stream) as img:
            img.load()
            return _buffer_from_pil(img, img.format)
    except UnidentifiedImageError as e:
        raise DecodeError(f"Unrecognized image data: {e}") from e
    except (OSError, ValueError, SyntaxError, Image.DecompressionBombError) as e:
        raise DecodeError(f"Failed to decode image: {e}") from e


def _buffer_from_pil(img: Any, source_format: Optional[str]) -> PixelBuffer:
    # exif_transpose drops the orientation tag from the upright copy's EXIF
    upright = ImageOps.exif_transpose(img)
    info = {key: upright.info[key] for key in _CARRIED_INFO_KEYS if upright.info.get(key)}
    buffer = PixelBuffer.from_pil(upright, normalize_format(source_format))
    if info:
        buffer = PixelBuffer(buffer.pixels, buffer.source_format, info)
    return buffer


def encode_image(
    image: PixelBuffer,
    output_format: Optional[str] = None,
    quality: Optional[int] = None,
) -> bytes:
    """
    Encode a PixelBuffer to bytes.

    Samples are clamped and quantized to 8 bits. Alpha is dropped for
    formats that cannot store it.

    Args:
        image: Buffer to encode
        output_format: Pillow format name; defaults to the buffer's source
                       format, then DEFAULT_OUTPUT_FORMAT
        quality: 1-100 for lossy formats (default DEFAULT_QUALITY)

    Returns:
        Encoded image bytes

    Raises:
        EncodeError: If the format is unknown or the encoder fails
    """
    fmt = normalize_format(output_format) or image.source_format or DEFAULT_OUTPUT_FORMAT

    pil_image = image.to_pil()
    if fmt in FORMATS_WITHOUT_ALPHA:
        pil_image = pil_image.convert("RGB")

    save_kwargs = {key: value for key, value in image.info.items() if value}
    if fmt in LOSSY_FORMATS:
        q = DEFAULT_QUALITY if quality is None else int(quality)
        save_kwargs["quality"] = int(max(QUALITY_RANGE[0], min(QUALITY_RANGE[1], q)))

    output = BytesIO()
    try:
        pil_image.save(output, format=fmt, **save_kwargs)
    except KeyError as e:
        raise EncodeError(f"Unsupported output format: {fmt}") from e
    except (OSError, ValueError) as e:
        raise EncodeError(f"Failed to encode image as {fmt}: {e}") from e
    return output.getvalue()

