"""
SkinTone Styler API Schemas
Pydantic models for palette, image and eyedropper request/response validation.
"""
from typing import List
from pydantic import BaseModel, Field


HEX_PATTERN = r"^#[0-9A-Fa-f]{6}$"


class HealthResponse(BaseModel):
    """Health check response."""
    ok: bool = Field(True, description="Service health status")
    version: str = Field(..., description="Service version")
    service: str = Field("skintone-styler", description="Service name")


class ErrorResponse(BaseModel):
    """Error response."""
    detail: str = Field(..., description="Error message")


# ============================================================================
# PALETTE SCHEMAS
# ============================================================================

class PaletteRequest(BaseModel):
    """Direct mode: generate a palette from a typed skin tone."""
    base_hex: str = Field(
        ...,
        pattern=HEX_PATTERN,
        description="Skin tone color in format #RRGGBB (any case)"
    )


class HSLInfo(BaseModel):
    """HSL breakdown of the base color."""
    hue: float = Field(..., ge=0.0, lt=360.0, description="Hue in degrees")
    saturation: float = Field(..., ge=0.0, le=100.0, description="Saturation in percent")
    lightness: float = Field(..., ge=0.0, le=100.0, description="Lightness in percent")


class PaletteResponse(BaseModel):
    """Clothing suggestions for a skin tone."""
    request_id: str = Field(..., description="Request id for tracing")
    base_hex: str = Field(..., pattern=HEX_PATTERN, description="Normalized base color (lowercase)")
    hsl: HSLInfo = Field(..., description="Base color in HSL")
    top: List[str] = Field(
        ...,
        min_length=3,
        max_length=3,
        description="Suggested top colors: complementary, triadic +120°, triadic +240°"
    )
    bottom: List[str] = Field(
        ...,
        min_length=3,
        max_length=3,
        description="Suggested bottom colors: +30°, +210°, +330° muted variants"
    )


# ============================================================================
# IMAGE SCHEMAS
# ============================================================================

class ImageResponse(BaseModel):
    """Uploaded photo ready for display."""
    data_uri: str = Field(..., description="data:<mime>;base64,<payload>")
    width: int = Field(..., ge=1, description="Image width in pixels")
    height: int = Field(..., ge=1, description="Image height in pixels")
