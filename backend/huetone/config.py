"""
HueTone Configuration
Manages environment variables and defaults for the color services and API.
"""
import math
import os


class Config:
    """Configuration class for HueTone services."""

    # Logging
    LOG_LEVEL: str = os.environ.get("HUETONE_LOG_LEVEL", "INFO")

    # Scheme defaults
    DEFAULT_VARIANT: str = os.environ.get("HUETONE_DEFAULT_VARIANT", "tonal_spot")
    DEFAULT_PLATFORM: str = os.environ.get("HUETONE_DEFAULT_PLATFORM", "phone")
    DEFAULT_SPEC_VERSION: str = os.environ.get("HUETONE_DEFAULT_SPEC_VERSION", "2021")
    DEFAULT_CONTRAST_LEVEL: float = float(os.environ.get("HUETONE_DEFAULT_CONTRAST_LEVEL", "0.0"))

    # Quantizer and scorer
    QUANTIZER_MAX_COLORS: int = int(os.environ.get("HUETONE_QUANTIZER_MAX_COLORS", "128"))
    SCORE_DESIRED: int = int(os.environ.get("HUETONE_SCORE_DESIRED", "4"))
    SCORE_FALLBACK_COLOR: int = int(os.environ.get("HUETONE_SCORE_FALLBACK_COLOR", "0xff4285f4"), 16)

    # Request limits
    MAX_PIXELS: int = int(os.environ.get("HUETONE_MAX_PIXELS", "1048576"))

    # Service metadata
    SERVICE_NAME: str = os.environ.get("HUETONE_SERVICE_NAME", "huetone")

    @classmethod
    def validate_contrast_level(cls, contrast_level: float) -> bool:
        """Validate contrast level: finite and within [-1, 1]."""
        return math.isfinite(contrast_level) and -1.0 <= contrast_level <= 1.0

    @classmethod
    def validate_max_colors(cls, k: int) -> bool:
        """Validate the quantizer cluster count."""
        return k > 0

    @classmethod
    def validate_top_n(cls, top_n: int) -> bool:
        """Validate the number of scored colors requested."""
        return top_n > 0

    @classmethod
    def validate_pixel_count(cls, count: int) -> bool:
        """Validate the size of a pixel payload."""
        return 0 <= count <= cls.MAX_PIXELS

    @classmethod
    def validate_argb(cls, argb: int) -> bool:
        """Validate a packed 32-bit color."""
        return 0 <= argb <= 0xFFFFFFFF


# Global config instance
config = Config()
