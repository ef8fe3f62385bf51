"""
PipelineLib - Filter chains, gallery filters and post-capture enhancement

This module provides the transform registry, the chain runner, the fixed
filter catalog, the StylePipeline and the Enhancer.
"""

from MO_Libs.PipelineLib.transform_registry import (
    TransformRegistry,
    get_default_registry,
    default_executors,
)
from MO_Libs.PipelineLib.chain_runner import run_chain, get_chain_summary
from MO_Libs.PipelineLib.filter_catalog import (
    FilterName,
    FilterRecipe,
    FILTER_RECIPES,
    ENHANCEMENT_RECIPE,
    list_filters,
    get_display_name,
    get_recipe,
)
from MO_Libs.PipelineLib.pipeline_settings import PipelineSettings
from MO_Libs.PipelineLib.style_pipeline import StylePipeline
from MO_Libs.PipelineLib.enhancer import (
    Enhancer,
    process_capture,
    process_capture_with_settings,
)

__all__ = [
    "TransformRegistry",
    "get_default_registry",
    "default_executors",
    "run_chain",
    "get_chain_summary",
    "FilterName",
    "FilterRecipe",
    "FILTER_RECIPES",
    "ENHANCEMENT_RECIPE",
    "list_filters",
    "get_display_name",
    "get_recipe",
    "PipelineSettings",
    "StylePipeline",
    "Enhancer",
    "process_capture",
    "process_capture_with_settings",
]
