"""
SkinTone Styler v1 API Routes
Implements /v1/palette, /v1/image and /v1/eyedropper.

StylerError subclasses raised here are turned into responses by the handler in
main.py, using each error's status_code.
"""
import time
from typing import Optional

from fastapi import APIRouter, File, Form, HTTPException, Path, UploadFile

from app.schemas import ErrorResponse, HSLInfo, ImageResponse, PaletteRequest, PaletteResponse
from app.services.colors import Palette, generate_palette, hex_to_hsl, normalize_hex
from app.services.imaging import decode_image, get_image_dimensions, to_data_uri
from app.services.sampling import ImagePointSampler
from app.services.styler import StylerSession
from app.utils.ids import generate_request_id
from app.utils.logging import get_logger

router = APIRouter(prefix="/v1", tags=["Palette"])

UPLOAD_ERRORS = {
    400: {"model": ErrorResponse, "description": "Corrupt or unreadable image"},
    413: {"model": ErrorResponse, "description": "File or image dimensions too large"},
    415: {"model": ErrorResponse, "description": "Unsupported media type"},
}


def build_palette_response(
    base_hex: str,
    request_id: str,
    palette: Optional[Palette] = None
) -> PaletteResponse:
    """
    Run the palette pipeline for a base color.

    Args:
        base_hex: Base color in format #RRGGBB
        request_id: Request id for tracing
        palette: Palette already generated for base_hex, if any

    Returns:
        PaletteResponse with normalized base color, HSL and suggestions

    Raises:
        InvalidColorFormatError: If base_hex is not #RRGGBB
    """
    start_time = time.time()
    normalized = normalize_hex(base_hex)
    hsl = hex_to_hsl(normalized)
    if palette is None:
        palette = generate_palette(normalized)

    get_logger(request_id).bind(
        base_hex=normalized,
        total_time_ms=round((time.time() - start_time) * 1000, 2)
    ).info("Palette request completed")

    return PaletteResponse(
        request_id=request_id,
        base_hex=normalized,
        hsl=HSLInfo(hue=hsl.hue, saturation=hsl.saturation, lightness=hsl.lightness),
        top=list(palette.top),
        bottom=list(palette.bottom)
    )


@router.post("/palette",
             response_model=PaletteResponse,
             summary="Clothing palette from a skin tone",
             description="Generate top and bottom garment colors from a #RRGGBB skin tone")
async def create_palette(request: PaletteRequest) -> PaletteResponse:
    """Direct mode: the base color is validated by the request schema."""
    return build_palette_response(request.base_hex, generate_request_id())


@router.get("/palette/{hex_digits}",
            response_model=PaletteResponse,
            responses={422: {"model": ErrorResponse, "description": "Not a hex color"}},
            summary="Clothing palette lookup",
            description="Same as POST /v1/palette with the color given as RRGGBB in the path")
async def get_palette(
    hex_digits: str = Path(..., description="Color as six hex digits without '#'")
) -> PaletteResponse:
    return build_palette_response(f"#{hex_digits}", generate_request_id())


@router.post("/image",
             response_model=ImageResponse,
             responses=UPLOAD_ERRORS,
             summary="Load a photo",
             description="Validate an uploaded photo and return it as a displayable data URI")
async def upload_image(
    file: UploadFile = File(..., description="Photo to display and sample from")
) -> ImageResponse:
    log = get_logger(generate_request_id()).bind(filename=file.filename)

    file_bytes = await file.read()
    data_uri = to_data_uri(file_bytes, file.content_type)
    width, height = get_image_dimensions(decode_image(file_bytes))

    log.bind(width=width, height=height).info("Image upload accepted")
    return ImageResponse(data_uri=data_uri, width=width, height=height)


@router.post("/eyedropper",
             response_model=PaletteResponse,
             responses={
                 **UPLOAD_ERRORS,
                 422: {"model": ErrorResponse, "description": "Point could not be sampled"},
                 501: {"model": ErrorResponse, "description": "Eyedropper unavailable"},
             },
             summary="Eyedropper palette",
             description="Sample the photo pixel at (x, y) and generate a palette from it")
async def eyedropper_palette(
    file: UploadFile = File(..., description="Photo to sample from"),
    x: int = Form(..., ge=0, description="Pixel column"),
    y: int = Form(..., ge=0, description="Pixel row")
) -> PaletteResponse:
    request_id = generate_request_id()
    file_bytes = await file.read()

    session = StylerSession(request_id)
    sampler = ImagePointSampler(decode_image(file_bytes), x, y)
    if not await session.use_eyedropper(sampler):
        raise HTTPException(status_code=422, detail=f"Could not sample a color at ({x}, {y})")

    state = session.state
    return build_palette_response(state.skin_tone, request_id, state.suggestions)
