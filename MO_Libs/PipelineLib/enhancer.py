"""
Enhancer: post-capture auto-enhancement.

Runs the fixed enhancement recipe (color boost, then shadow lift and
highlight recovery) on a freshly captured photo. Enhancement is best
effort: any failure is logged and the original image is returned, so a
capture always completes with some image.

Classes:
    Enhancer: Apply the enhancement recipe without ever raising

Functions:
    process_capture: Caller-facing entry point gated by the post-processing flag
    process_capture_with_settings: Same, reading the flag from PipelineSettings
"""

from typing import Any, Optional, Sequence
import logging
import threading

from MO_Libs.ImageEditingLib.errors import EnhancementFailure
from MO_Libs.ImageEditingLib.image_codec import decode_image, encode_image
from MO_Libs.ImageEditingLib.image_models import PixelBuffer
from MO_Libs.ImageEditingLib.transform_kinds import TransformKind
from MO_Libs.PipelineLib.chain_runner import run_chain
from MO_Libs.PipelineLib.filter_catalog import ENHANCEMENT_RECIPE
from MO_Libs.PipelineLib.pipeline_settings import PipelineSettings
from MO_Libs.PipelineLib.transform_registry import TransformRegistry

logger = logging.getLogger(__name__)


class Enhancer:
    """
    Apply the post-capture enhancement recipe.

    Attributes:
        last_failure: The most recent EnhancementFailure this instance
                      recorded on the calling thread, or None.
                      Informational only; each thread sees its own.
    """

    def __init__(
        self,
        registry: Optional[TransformRegistry] = None,
        recipe: Sequence[TransformKind] = ENHANCEMENT_RECIPE,
    ):
        self._registry = registry
        self._recipe = tuple(recipe)
        self._local = threading.local()

    @property
    def recipe(self):
        return self._recipe

    @property
    def last_failure(self) -> Optional[EnhancementFailure]:
        return getattr(self._local, "failure", None)

    def _record_failure(self, message: str, cause: Exception) -> None:
        failure = EnhancementFailure(f"{message}: {cause}")
        failure.__cause__ = cause
        self._local.failure = failure
        logger.exception(f"Enhancement failed, keeping original image. {failure}")

    def apply(self, image: PixelBuffer) -> PixelBuffer:
        """
        Enhance a decoded image. Never raises.

        Args:
            image: Decoded capture

        Returns:
            The enhanced buffer, or the original buffer unchanged if any
            stage fails
        """
        try:
            return run_chain(image, self._recipe, registry=self._registry)
        except Exception as e:
            self._record_failure("Enhancement stage failed", e)
            return image

    def apply_bytes(
        self,
        data: bytes,
        output_format: Optional[str] = None,
        quality: Optional[int] = None,
    ) -> bytes:
        """
        Enhance encoded capture bytes. Never raises.

        Args:
            data: Encoded capture (typically HEIC)
            output_format: Encode format (default: the capture's own format)
            quality: Lossy encode quality (1-100)

        Returns:
            Encoded enhanced image, or the original bytes if decoding,
            enhancement or encoding fails
        """
        try:
            image = decode_image(data)
        except Exception as e:
            self._record_failure("Could not decode capture", e)
            return data

        enhanced = self.apply(image)
        if enhanced is image:
            return data

        try:
            return encode_image(enhanced, output_format=output_format, quality=quality)
        except Exception as e:
            self._record_failure("Could not encode enhanced capture", e)
            return data


def process_capture(
    data: bytes,
    post_processing: bool,
    enhancer: Optional[Enhancer] = None,
    output_format: Optional[str] = None,
    quality: Optional[int] = None,
) -> bytes:
    """
    Prepare captured bytes for persistence.

    Args:
        data: Encoded capture from the camera
        post_processing: Whether the user enabled enhancement
        enhancer: Enhancer to use (default: a new Enhancer)
        output_format: Encode format for enhanced output
        quality: Lossy encode quality (1-100)

    Returns:
        Bytes to persist; data itself when post_processing is off or
        enhancement fails
    """
    if not post_processing:
        return data

    enhancer = enhancer or Enhancer()
    return enhancer.apply_bytes(data, output_format=output_format, quality=quality)


def process_capture_with_settings(
    data: bytes,
    settings: PipelineSettings,
    enhancer: Optional[Enhancer] = None,
) -> bytes:
    """Prepare captured bytes using the capture screen's current settings."""
    return process_capture(
        data,
        settings.post_processing,
        enhancer=enhancer,
        output_format=settings.output_format,
        quality=settings.quality,
    )
