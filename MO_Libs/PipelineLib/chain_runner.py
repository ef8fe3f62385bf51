"""
Chain Runner for Transform Recipes

This module executes an ordered chain of transform descriptors against an
image. Each stage's output feeds the next stage's input; every stage must
preserve the image size. Samples are clamped once, after the last stage,
so no precision is lost mid-chain.
"""

from dataclasses import fields, is_dataclass
from typing import Optional, Sequence
import logging

from MO_Libs.ImageEditingLib.errors import DecodeError, TransformStageError
from MO_Libs.ImageEditingLib.image_models import PixelBuffer
from MO_Libs.ImageEditingLib.transform_kinds import Identity, TransformKind
from MO_Libs.PipelineLib.transform_registry import TransformRegistry, get_default_registry

logger = logging.getLogger(__name__)


def is_passthrough_chain(transforms: Sequence[TransformKind]) -> bool:
    """True when the chain is empty or made only of Identity stages."""
    return all(isinstance(transform, Identity) for transform in transforms)


def run_chain(
    image: PixelBuffer,
    transforms: Sequence[TransformKind],
    registry: Optional[TransformRegistry] = None,
    clamp_output: bool = True,
) -> PixelBuffer:
    """
    Execute transforms strictly left to right.

    Pass-through chains return the input object itself.

    Args:
        image: Input buffer (never mutated)
        transforms: Ordered transform descriptors
        registry: Registry resolving kind tags to primitives
                  (default: the global default registry)
        clamp_output: Clamp the final samples to [0, 1] (default True)

    Returns:
        The final PixelBuffer, same size as the input

    Raises:
        DecodeError: If the input is not a usable image
        TransformStageError: If a stage fails or changes the image size
    """
    if not isinstance(image, PixelBuffer):
        raise DecodeError(f"Expected PixelBuffer, got {type(image)}")

    if is_passthrough_chain(transforms):
        return image

    registry = registry or get_default_registry()
    expected_size = image.size
    current = image

    for index, transform in enumerate(transforms):
        kind = getattr(transform, "kind", type(transform).__name__)
        if isinstance(transform, Identity):
            continue

        logger.debug(f"Stage {index}: {kind} on {current.width}x{current.height}")

        try:
            params = transform.clamped()
            output = registry.execute(kind, current, params)
        except DecodeError:
            raise
        except Exception as e:
            # Re-raise with stage context
            raise TransformStageError(
                f"Error executing stage {index} ({kind}): {str(e)}",
                stage_index=index,
                kind=kind,
            ) from e

        if not isinstance(output, PixelBuffer) or output.size != expected_size:
            got = output.size if isinstance(output, PixelBuffer) else type(output)
            raise TransformStageError(
                f"Stage {index} ({kind}) produced {got}, expected size {expected_size}",
                stage_index=index,
                kind=kind,
            )

        current = output

    return current.clamped() if clamp_output else current


def get_chain_summary(transforms: Sequence[TransformKind]) -> str:
    """
    Generate a human-readable summary of a transform chain.

    Example:
        >>> print(get_chain_summary([ColorAdjust(contrast=1.4), Vignette(0.6, 2.0)]))
        Chain Summary:
          Total Stages: 2
        Stage 0: color_adjust (brightness=0.0, contrast=1.4, saturation=1.0)
        Stage 1: vignette (intensity=0.6, radius=2.0)
    """
    lines = [
        "Chain Summary:",
        f"  Total Stages: {len(transforms)}",
    ]

    for index, transform in enumerate(transforms):
        kind = getattr(transform, "kind", type(transform).__name__)
        names = [f.name for f in fields(transform)] if is_dataclass(transform) else []
        params = ", ".join(f"{name}={getattr(transform, name)}" for name in names)
        lines.append(f"Stage {index}: {kind} ({params})" if params else f"Stage {index}: {kind}")

    return "\n".join(lines)
