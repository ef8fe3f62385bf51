"""
Filter Catalog for the gallery.

The catalog is a fixed table of named recipes. Each recipe is an immutable,
ordered tuple of transform descriptors; there is no per-call tuning.

Classes:
    FilterName: Enumeration of catalog filter names
    FilterRecipe: Named, ordered transform chain

Functions:
    list_filters: Catalog names in picker order
    get_display_name: Human-readable name for a filter
    get_recipe: Look up a recipe, falling back to 'none' for unknown names
    build_enhancement_recipe: The fixed post-capture enhancement chain
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple, Union
import logging

from MO_Libs.ImageEditingLib.errors import UnsupportedParameter
from MO_Libs.ImageEditingLib.image_models import WhitePoint
from MO_Libs.ImageEditingLib.transform_kinds import (
    ColorAdjust,
    HighlightShadow,
    Identity,
    Monochrome,
    TemperatureTint,
    TransformKind,
    Vignette,
)
from MO_Libs.constants import (
    ENHANCE_CONTRAST,
    ENHANCE_HIGHLIGHT_AMOUNT,
    ENHANCE_SATURATION,
    ENHANCE_SHADOW_AMOUNT,
    FILTER_BAY_DAYS,
    FILTER_DISPLAY_NAMES,
    FILTER_NOIR,
    FILTER_NONE,
    FILTER_SUBURBIA,
    FILTER_SUMMER_SKY,
    NEUTRAL_TEMPERATURE,
    NOIR_CONTRAST,
    SUMMER_TARGET_TEMPERATURE,
)

logger = logging.getLogger(__name__)


class FilterName(str, Enum):
    NONE = FILTER_NONE
    NOIR = FILTER_NOIR
    SUBURBIA = FILTER_SUBURBIA
    SUMMER_SKY = FILTER_SUMMER_SKY
    BAY_DAYS = FILTER_BAY_DAYS


@dataclass(frozen=True)
class FilterRecipe:
    """
    A named, ordered chain of transforms.

    Attributes:
        name: Catalog key (e.g., 'bayDays')
        display_name: Name shown in the gallery picker (e.g., 'Bay Days')
        transforms: Transform descriptors applied left to right
    """

    name: str
    display_name: str
    transforms: Tuple[TransformKind, ...]

    @property
    def is_passthrough(self) -> bool:
        return all(isinstance(transform, Identity) for transform in self.transforms)


def _recipe(name: str, *transforms: TransformKind) -> FilterRecipe:
    return FilterRecipe(name=name, display_name=FILTER_DISPLAY_NAMES[name], transforms=tuple(transforms))


FILTER_RECIPES: Dict[str, FilterRecipe] = {
    FILTER_NONE: _recipe(FILTER_NONE, Identity()),
    # Platform noir has an undocumented tone curve; full desaturation plus a
    # mild contrast lift approximates it.
    FILTER_NOIR: _recipe(
        FILTER_NOIR,
        ColorAdjust(brightness=0.0, contrast=NOIR_CONTRAST, saturation=0.0),
    ),
    FILTER_SUBURBIA: _recipe(
        FILTER_SUBURBIA,
        ColorAdjust(brightness=-0.1, contrast=1.6, saturation=1.4),
        Monochrome(tint_color=(1.0, 0.2, 0.3), intensity=0.4),
        Vignette(intensity=0.6, radius=2.0),
    ),
    FILTER_SUMMER_SKY: _recipe(
        FILTER_SUMMER_SKY,
        ColorAdjust(brightness=0.2, contrast=1.4, saturation=1.8),
        TemperatureTint(
            source_white_point=WhitePoint(NEUTRAL_TEMPERATURE, 0.0),
            target_white_point=WhitePoint(SUMMER_TARGET_TEMPERATURE, 0.0),
        ),
    ),
    FILTER_BAY_DAYS: _recipe(
        FILTER_BAY_DAYS,
        ColorAdjust(brightness=-0.2, contrast=1.8, saturation=0.8),
        Monochrome(tint_color=(0.0, 0.0, 1.0), intensity=0.3),
    ),
}


def list_filters() -> List[str]:
    return list(FILTER_RECIPES.keys())


def _resolve_name(filter_name: Union[str, FilterName, None]) -> Union[str, None]:
    if filter_name is None:
        return FILTER_NONE
    if isinstance(filter_name, FilterName):
        return filter_name.value

    name = str(filter_name).strip()
    if name in FILTER_RECIPES:
        return name

    lowered = name.lower()
    for key in FILTER_RECIPES:
        if key.lower() == lowered:
            return key
    return None


def get_recipe(filter_name: Union[str, FilterName, None], strict: bool = False) -> FilterRecipe:
    """
    Look up a filter recipe by name.

    Names match exactly first, then case-insensitively. An unknown name is a
    caller error: by default it falls back to the 'none' recipe with a
    warning; with strict=True it raises.

    Args:
        filter_name: Catalog name, FilterName member, or None for 'none'
        strict: Raise instead of falling back

    Returns:
        The matching FilterRecipe

    Raises:
        UnsupportedParameter: If strict and the name is not in the catalog
    """
    key = _resolve_name(filter_name)
    if key is None:
        if strict:
            available = ", ".join(list_filters())
            raise UnsupportedParameter(
                f"Unknown filter '{filter_name}'. Available filters: {available}"
            )
        logger.warning(f"Unknown filter '{filter_name}', falling back to '{FILTER_NONE}'")
        key = FILTER_NONE
    return FILTER_RECIPES[key]


def get_display_name(filter_name: Union[str, FilterName, None]) -> str:
    return get_recipe(filter_name).display_name


def build_enhancement_recipe() -> Tuple[TransformKind, ...]:
    """The post-capture chain: color boost, then shadow lift and highlight recovery."""
    return (
        ColorAdjust(brightness=0.0, contrast=ENHANCE_CONTRAST, saturation=ENHANCE_SATURATION),
        HighlightShadow(
            shadow_amount=ENHANCE_SHADOW_AMOUNT,
            highlight_amount=ENHANCE_HIGHLIGHT_AMOUNT,
        ),
    )


ENHANCEMENT_RECIPE: Tuple[TransformKind, ...] = build_enhancement_recipe()
