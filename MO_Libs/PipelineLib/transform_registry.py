"""
Transform Executor Registry.

This module maps transform kind tags to the primitive functions that
execute them. The chain runner resolves every descriptor in a recipe
through a registry, so recipes stay pure data. The set of kinds is closed;
a registry is built once and only read afterwards.

Classes:
    TransformRegistry: Kind tag -> executor lookup

Functions:
    default_executors: The built-in primitive for every transform kind
    get_default_registry: Get the global default registry (singleton)
"""

from typing import Any, Callable, Dict, List, Mapping, Optional
import logging

from MO_Libs.ImageEditingLib.image_models import PixelBuffer

logger = logging.getLogger(__name__)

# Type alias for executor function
TransformExecutor = Callable[[PixelBuffer, Any], PixelBuffer]


class TransformRegistry:
    """
    Read-only mapping from transform kind to executor.

    Example:
        >>> registry = get_default_registry()
        >>> result = registry.execute("color_adjust", image, ColorAdjust(contrast=1.2))
        >>> patched = registry.with_override("vignette", my_vignette)
    """

    def __init__(self, executors: Optional[Mapping[str, TransformExecutor]] = None):
        """
        Args:
            executors: Kind tag -> callable accepting (image, descriptor)

        Raises:
            ValueError: If a kind is empty or an executor is not callable
        """
        self._executors: Dict[str, TransformExecutor] = {}

        for kind, executor in (executors or {}).items():
            kind = str(kind).strip()
            if not kind:
                raise ValueError("kind cannot be empty")
            if not callable(executor):
                raise ValueError(f"executor for '{kind}' must be callable, got {type(executor)}")
            self._executors[kind] = executor

    def with_override(self, kind: str, executor: TransformExecutor) -> "TransformRegistry":
        """Return a new registry with one kind's executor replaced."""
        executors = dict(self._executors)
        executors[kind] = executor
        return TransformRegistry(executors)

    def get_executor(self, kind: str) -> TransformExecutor:
        """
        Get the executor for a transform kind.

        Raises:
            KeyError: If kind is not registered
        """
        kind = str(kind).strip()

        if kind not in self._executors:
            available = ", ".join(self.list_kinds())
            raise KeyError(
                f"No executor registered for transform kind '{kind}'. "
                f"Available kinds: {available}"
            )

        return self._executors[kind]

    def has_executor(self, kind: str) -> bool:
        return str(kind).strip() in self._executors

    def execute(self, kind: str, image: PixelBuffer, params: Any) -> PixelBuffer:
        """
        Execute a transform by looking up its executor.

        Raises:
            KeyError: If kind is not registered
            Exception: Any exception raised by the executor
        """
        executor = self.get_executor(kind)
        return executor(image, params)

    def list_kinds(self) -> List[str]:
        """Sorted list of registered transform kinds."""
        return sorted(self._executors.keys())


def _execute_identity(image: PixelBuffer, params: Any) -> PixelBuffer:
    return image


def default_executors() -> Dict[str, TransformExecutor]:
    """The built-in primitive for every transform kind."""
    from MO_Libs.ImageEditingLib.color_filters import (
        apply_color_adjust,
        apply_monochrome,
        apply_temperature_tint,
    )
    from MO_Libs.ImageEditingLib.tone_filters import apply_highlight_shadow, apply_vignette
    from MO_Libs.ImageEditingLib.transform_kinds import (
        ColorAdjust,
        HighlightShadow,
        Identity,
        Monochrome,
        TemperatureTint,
        Vignette,
    )

    return {
        Identity.kind: _execute_identity,
        ColorAdjust.kind: apply_color_adjust,
        Monochrome.kind: apply_monochrome,
        TemperatureTint.kind: apply_temperature_tint,
        Vignette.kind: apply_vignette,
        HighlightShadow.kind: apply_highlight_shadow,
    }


# Global singleton registry
_default_registry: Optional[TransformRegistry] = None


def get_default_registry() -> TransformRegistry:
    """
    Get the global default registry (singleton).

    Creates the registry on first call. It is never modified afterwards,
    so it is safe to share between threads.
    """
    global _default_registry

    if _default_registry is None:
        _default_registry = TransformRegistry(default_executors())
        logger.info("Registered default transform executors")

    return _default_registry
