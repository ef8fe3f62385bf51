"""
Error taxonomy for the Momento filter pipeline.

Classes:
    MomentoPipelineError: Base class for every pipeline error
    DecodeError: Input is not a valid or supported image
    EncodeError: Output format cannot be written
    UnsupportedParameter: Unknown filter name under strict lookup
    TransformStageError: A stage of a transform chain failed
    EnhancementFailure: A post-capture enhancement stage failed
"""

from typing import Optional


class MomentoPipelineError(Exception):
    """Base class for all filter pipeline errors."""


class DecodeError(MomentoPipelineError):
    """Raised when input bytes or buffers cannot be decoded into an image."""


class EncodeError(MomentoPipelineError):
    """Raised when an image cannot be encoded to the requested format."""


class UnsupportedParameter(MomentoPipelineError, ValueError):
    """Raised by strict lookups when a value is outside its documented domain."""


class TransformStageError(MomentoPipelineError):
    """
    Raised when one stage of a transform chain fails.

    Attributes:
        stage_index: Zero-based position of the failing stage in the chain
        kind: Transform kind tag of the failing stage
    """

    def __init__(self, message: str, stage_index: int = -1, kind: Optional[str] = None):
        super().__init__(message)
        self.stage_index = stage_index
        self.kind = kind


class EnhancementFailure(MomentoPipelineError):
    """Recorded (never raised to callers) when the Enhancer falls back to the original."""
