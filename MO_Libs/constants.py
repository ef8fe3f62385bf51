"""
Constants and configuration values for Momento.

This module centralizes the filter catalog names, recipe parameters,
parameter domains and codec settings used throughout the pipeline.
"""

# Filter names (catalog order matches the gallery picker)
FILTER_NONE = "none"
FILTER_NOIR = "noir"
FILTER_SUBURBIA = "suburbia"
FILTER_SUMMER_SKY = "summerSky"
FILTER_BAY_DAYS = "bayDays"

FILTER_DISPLAY_NAMES = {
    FILTER_NONE: "None",
    FILTER_NOIR: "Noir",
    FILTER_SUBURBIA: "Suburbia",
    FILTER_SUMMER_SKY: "Summer Sky",
    FILTER_BAY_DAYS: "Bay Days",
}

# Transform kind tags
KIND_IDENTITY = "identity"
KIND_COLOR_ADJUST = "color_adjust"
KIND_MONOCHROME = "monochrome"
KIND_TEMPERATURE_TINT = "temperature_tint"
KIND_VIGNETTE = "vignette"
KIND_HIGHLIGHT_SHADOW = "highlight_shadow"

# Rec.709 luma weights
LUMA_WEIGHTS = (0.2126, 0.7152, 0.0722)

# Mid-gray pivot for contrast
CONTRAST_PIVOT = 0.5

# Parameter domains (min, max); out-of-range values are clamped
BRIGHTNESS_RANGE = (-1.0, 1.0)
CONTRAST_RANGE = (0.25, 4.0)
SATURATION_RANGE = (0.0, 2.0)
MONOCHROME_INTENSITY_RANGE = (0.0, 1.0)
COLOR_CHANNEL_RANGE = (0.0, 1.0)
TEMPERATURE_RANGE = (1667.0, 25000.0)
TINT_RANGE = (-150.0, 150.0)
VIGNETTE_INTENSITY_RANGE = (0.0, 1.0)
VIGNETTE_RADIUS_RANGE = (0.05, 2.0)
SHADOW_AMOUNT_RANGE = (-1.0, 1.0)
HIGHLIGHT_AMOUNT_RANGE = (-1.0, 1.0)
LOCAL_LUMA_RADIUS_RANGE = (0.0, 100.0)

# Tone-range weighting for highlight/shadow (smoothstep edges on luma)
SHADOW_WEIGHT_EDGES = (0.0, 0.6)
HIGHLIGHT_WEIGHT_EDGES = (0.4, 1.0)
TONE_ADJUST_SCALE = 0.5

# Neutral white point used by the warm summer filter
NEUTRAL_TEMPERATURE = 6500.0
SUMMER_TARGET_TEMPERATURE = 8000.0

# Post-capture enhancement recipe
ENHANCE_SATURATION = 1.1
ENHANCE_CONTRAST = 1.05
ENHANCE_SHADOW_AMOUNT = 0.3
ENHANCE_HIGHLIGHT_AMOUNT = -0.3

# Noir approximation: full desaturation with a mild contrast lift
NOIR_CONTRAST = 1.15

# Codec
DEFAULT_OUTPUT_FORMAT = "HEIF"
DEFAULT_QUALITY = 90
QUALITY_RANGE = (1, 100)
FORMAT_ALIASES = {
    "JPG": "JPEG",
    "MPO": "JPEG",
    "HEIC": "HEIF",
    "TIF": "TIFF",
}
FORMATS_WITHOUT_ALPHA = {"JPEG", "HEIF", "BMP"}
LOSSY_FORMATS = {"JPEG", "HEIF", "WEBP"}

# Supported file formats
SUPPORTED_STANDARD_IMAGES = {".png", ".jpg", ".jpeg", ".heic", ".heif", ".bmp", ".tiff", ".webp"}
