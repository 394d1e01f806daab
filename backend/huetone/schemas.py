"""
HueTone API Schemas
Pydantic models for scheme, quantization and color conversion request/response validation.
"""
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field


class HctInput(BaseModel):
    """Explicit HCT color."""
    hue: float = Field(..., description="Hue in degrees [0, 360]")
    chroma: float = Field(..., description="Requested chroma (>= 0); reduced to fit the sRGB gamut")
    tone: float = Field(..., description="Tone (L*) [0, 100]")


class SchemeRequest(BaseModel):
    """Request body for resolving a dynamic color scheme."""
    seed: Union[int, str, HctInput] = Field(
        ...,
        description="Seed color as packed ARGB integer, hex string (#rrggbb) or explicit HCT"
    )
    variant: Optional[str] = Field(None, description="Scheme variant, e.g. 'tonal_spot'")
    contrast_level: Optional[float] = Field(None, description="Contrast level in [-1, 1]")
    is_dark: bool = Field(False, description="Resolve the dark theme")
    platform: Optional[str] = Field(None, description="Target platform ('phone' or 'watch')")
    spec_version: Optional[str] = Field(None, description="Color system version ('2021' or '2025')")


class SchemeResponse(BaseModel):
    """Resolved dynamic color scheme."""
    source_argb: int = Field(..., description="Seed color actually used, packed ARGB")
    source_hex: str = Field(..., pattern=r"^#[0-9a-f]{6}$", description="Seed color as #rrggbb")
    variant: str = Field(..., description="Scheme variant used")
    is_dark: bool = Field(..., description="Whether the dark theme was resolved")
    contrast_level: float = Field(..., description="Contrast level used")
    platform: str = Field(..., description="Platform used")
    spec_version: str = Field(..., description="Color system version used")
    roles: Dict[str, str] = Field(..., description="Role name to #rrggbb, in canonical order")
    argb: Dict[str, int] = Field(..., description="Role name to packed ARGB, opacity included")


class QuantizeRequest(BaseModel):
    """Request body for quantizing pixels and scoring seed colors."""
    pixels: List[int] = Field(..., description="Packed ARGB pixels; non-opaque pixels are ignored")
    k: Optional[int] = Field(None, description="Maximum number of clusters")
    top_n: Optional[int] = Field(None, description="Maximum number of ranked colors returned")


class ScoredColorEntry(BaseModel):
    """One ranked seed color."""
    argb: int = Field(..., description="Packed ARGB color")
    hex: str = Field(..., pattern=r"^#[0-9a-f]{6}$", description="Color as #rrggbb")
    score: float = Field(..., description="Suitability score; higher is better")


class QuantizeResponse(BaseModel):
    """Ranked seed colors for a pixel payload."""
    request_id: str = Field(..., description="Request identifier for tracing")
    pixel_count: int = Field(..., description="Number of pixels received")
    colors: List[ScoredColorEntry] = Field(..., description="Ranked colors, best first")


class HctSolveRequest(BaseModel):
    """Request body for solving an HCT color into sRGB."""
    hue: float = Field(..., description="Hue in degrees; wrapped to [0, 360)")
    chroma: float = Field(..., description="Requested chroma; negative counts as 0")
    tone: float = Field(..., description="Tone; clamped to [0, 100]")


class HctResponse(BaseModel):
    """A color with its HCT coordinates."""
    argb: int = Field(..., description="Packed ARGB color")
    hex: str = Field(..., pattern=r"^#[0-9a-f]{6}$", description="Color as #rrggbb")
    hue: float = Field(..., ge=0.0, lt=360.0, description="Hue in degrees")
    chroma: float = Field(..., ge=0.0, description="Chroma")
    tone: float = Field(..., ge=0.0, le=100.0, description="Tone (L*)")


class ContrastResponse(BaseModel):
    """Contrast ratio between two tones."""
    tone_a: float = Field(..., description="First tone")
    tone_b: float = Field(..., description="Second tone")
    ratio: float = Field(..., ge=1.0, description="WCAG contrast ratio")


class PaletteToneResponse(BaseModel):
    """One tone of a tonal palette."""
    hue: float = Field(..., description="Palette hue")
    chroma: float = Field(..., description="Palette chroma")
    tone: float = Field(..., description="Requested tone")
    argb: int = Field(..., description="Packed ARGB color")
    hex: str = Field(..., pattern=r"^#[0-9a-f]{6}$", description="Color as #rrggbb")


class HealthResponse(BaseModel):
    """Health check response."""
    ok: bool = Field(True, description="Service health status")
    version: str = Field(..., description="Service version")
    service: str = Field("huetone", description="Service name")


class ErrorResponse(BaseModel):
    """Error response."""
    detail: str = Field(..., description="Error message")
