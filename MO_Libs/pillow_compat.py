"""
Compatibility wrapper to import Pillow (which provides the `PIL` namespace)
together with the HEIF/HEIC plugin from pillow-heif.

This module loads the Pillow-provided modules via importlib and re-exports the
commonly-used symbols: `Image` and `ImageOps`. Importing from `pillow_compat`
also registers the HEIF opener exactly once, so HEIC captures decode and
encode through the normal `Image.open` / `Image.save` calls.
"""
from importlib import import_module
from types import ModuleType
from typing import Optional


def _import(name: str) -> Optional[ModuleType]:
    try:
        return import_module(name)
    except ImportError:
        return None


_pil_image = _import("PIL.Image")
_pil_imageops = _import("PIL.ImageOps")
_pillow_heif = _import("pillow_heif")

if _pil_image is None or _pil_imageops is None:
    raise ImportError("pillow (PIL) is required: install with 'pip install Pillow'")

if _pillow_heif is None:
    raise ImportError("pillow-heif is required: install with 'pip install pillow-heif'")

Image = _pil_image
ImageOps = _pil_imageops

# HEIF/HEIC is the capture format of the camera app
_pillow_heif.register_heif_opener()

UnidentifiedImageError = getattr(_pil_image, "UnidentifiedImageError")
