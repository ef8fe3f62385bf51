"""
Per-call selection settings for the filter pipeline.

The capture and gallery screens own and persist these values; the pipeline
only reads them for the call they are passed to.

Classes:
    PipelineSettings: Post-processing flag, filter selection and encode options
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from MO_Libs.constants import DEFAULT_QUALITY, FILTER_NONE, QUALITY_RANGE


@dataclass
class PipelineSettings:
    """Selection and encoding options read per call.

    Attributes:
        post_processing: Run the Enhancer on freshly captured photos
        filter_name: Gallery filter to apply (catalog name)
        output_format: Encode format; None keeps the source format
        quality: Lossy encode quality (1-100)
    """
    post_processing: bool = False
    filter_name: str = FILTER_NONE
    output_format: Optional[str] = None
    quality: int = DEFAULT_QUALITY

    def __post_init__(self):
        self.post_processing = bool(self.post_processing)
        self.filter_name = str(getattr(self.filter_name, "value", self.filter_name) or FILTER_NONE)
        self.quality = int(max(QUALITY_RANGE[0], min(QUALITY_RANGE[1], int(self.quality))))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PipelineSettings":
        """Create from dictionary, ignoring unknown keys."""
        normalized = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**normalized)
