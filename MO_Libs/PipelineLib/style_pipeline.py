"""
StylePipeline: gallery filters for stored photos.

Applies one named recipe from the filter catalog to an image for preview or
export. The pipeline is stateless between calls; one instance may be shared
by any number of threads.

Classes:
    StylePipeline: Apply catalog filters to buffers or encoded bytes
"""

from collections import OrderedDict
from typing import Any, Dict, Iterable, Optional, Union
import concurrent.futures
import logging

from MO_Libs.ImageEditingLib.image_codec import decode_image, encode_image
from MO_Libs.ImageEditingLib.image_models import PixelBuffer
from MO_Libs.PipelineLib.chain_runner import run_chain
from MO_Libs.PipelineLib.filter_catalog import FilterName, get_recipe, list_filters
from MO_Libs.PipelineLib.pipeline_settings import PipelineSettings
from MO_Libs.PipelineLib.transform_registry import TransformRegistry

logger = logging.getLogger(__name__)

FilterSelection = Union[str, FilterName, None]


class StylePipeline:
    """
    Apply catalog filters to images.

    Example:
        >>> pipeline = StylePipeline()
        >>> preview = pipeline.apply(decode_image(data), "bayDays")
        >>> exported = pipeline.apply_bytes(data, "summerSky", output_format="JPEG")
    """

    def __init__(self, registry: Optional[TransformRegistry] = None, strict: bool = False):
        """
        Args:
            registry: Transform registry (default: the global default registry)
            strict: Raise UnsupportedParameter for unknown filter names instead
                    of falling back to 'none'
        """
        self._registry = registry
        self._strict = strict

    def apply(self, image: Any, filter_name: FilterSelection) -> PixelBuffer:
        """
        Apply a filter and return the filtered buffer.

        The input is never mutated. The 'none' filter returns the input
        buffer itself.

        Args:
            image: PixelBuffer, PIL Image or encoded bytes
            filter_name: Catalog filter name

        Returns:
            Filtered PixelBuffer with the input's dimensions

        Raises:
            DecodeError: If the image cannot be decoded
            TransformStageError: If a filter stage fails
        """
        buffer = decode_image(image)
        recipe = get_recipe(filter_name, strict=self._strict)

        if recipe.is_passthrough:
            return buffer

        logger.debug(f"Applying filter '{recipe.name}' to {buffer.width}x{buffer.height} image")
        return run_chain(buffer, recipe.transforms, registry=self._registry)

    def apply_bytes(
        self,
        data: bytes,
        filter_name: FilterSelection,
        output_format: Optional[str] = None,
        quality: Optional[int] = None,
    ) -> bytes:
        """
        Decode, filter and re-encode an image.

        The 'none' filter returns the input bytes unchanged.

        Args:
            data: Encoded image bytes
            filter_name: Catalog filter name
            output_format: Encode format (default: the input's format)
            quality: Lossy encode quality (1-100)

        Returns:
            Encoded filtered image

        Raises:
            DecodeError: If data is not a supported image
            EncodeError: If the output format cannot be written
        """
        recipe = get_recipe(filter_name, strict=self._strict)
        buffer = decode_image(data)

        if recipe.is_passthrough:
            return data

        filtered = run_chain(buffer, recipe.transforms, registry=self._registry)
        return encode_image(filtered, output_format=output_format, quality=quality)

    def export(self, data: bytes, settings: PipelineSettings) -> bytes:
        """Filter encoded bytes using the gallery's current settings."""
        return self.apply_bytes(
            data,
            settings.filter_name,
            output_format=settings.output_format,
            quality=settings.quality,
        )

    def render_previews(
        self,
        image: Any,
        filter_names: Optional[Iterable[FilterSelection]] = None,
        max_workers: Optional[int] = None,
    ) -> Dict[str, PixelBuffer]:
        """
        Render several filters of one image in parallel.

        Each filter runs as an independent invocation on a worker thread;
        the shared input is only read.

        Args:
            image: PixelBuffer, PIL Image or encoded bytes (decoded once)
            filter_names: Filters to render (default: the whole catalog)
            max_workers: Maximum number of threads (default: None = CPU count)

        Returns:
            Ordered dict mapping resolved filter name -> filtered buffer,
            in request order
        """
        buffer = decode_image(image)
        names = list(filter_names) if filter_names is not None else list_filters()
        recipes = [get_recipe(name, strict=self._strict) for name in names]

        results: Dict[str, PixelBuffer] = {}
        with concurrent.futures.ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures: Dict[concurrent.futures.Future, str] = {}
            for recipe in recipes:
                if recipe.name in futures.values():
                    continue
                future = executor.submit(self.apply, buffer, recipe.name)
                futures[future] = recipe.name

            for future in concurrent.futures.as_completed(futures):
                results[futures[future]] = future.result()

        ordered: Dict[str, PixelBuffer] = OrderedDict()
        for recipe in recipes:
            ordered[recipe.name] = results[recipe.name]
        return ordered
