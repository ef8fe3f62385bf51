"""
MO_Libs - Momento Library Modules

This package contains the photo filter pipeline for the Momento camera app,
organized into specialized sub-packages:

- ImageEditingLib: Image model, codec, error types and transform primitives
- PipelineLib: Transform registry, chain runner, filter catalog, StylePipeline
  and Enhancer
"""

__version__ = "0.1.0"
