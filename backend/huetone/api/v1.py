"""
HueTone v1 API Routes
Implements scheme resolution, quantization and color conversion endpoints.
"""
import time

from fastapi import APIRouter, HTTPException, Query

from huetone.config import config
from huetone.schemas import (
    ContrastResponse,
    ErrorResponse,
    HctInput,
    HctResponse,
    HctSolveRequest,
    PaletteToneResponse,
    QuantizeRequest,
    QuantizeResponse,
    SchemeRequest,
    SchemeResponse,
    ScoredColorEntry,
)
from huetone.services.colors import theme_api
from huetone.services.colors.dynamiccolor import Platform, SpecVersion, Variant
from huetone.services.colors.errors import ColorValidationError
from huetone.services.colors.hct import Hct
from huetone.services.colors.utils.string_utils import hex_from_argb
from huetone.utils.ids import generate_request_id
from huetone.utils.logging import get_logger

router = APIRouter(prefix="/v1", tags=["Color Schemes"])
logger = get_logger()

BAD_REQUEST_RESPONSES = {400: {"model": ErrorResponse, "description": "Invalid color input"}}


def _bad_request(request_id: str, error: ColorValidationError) -> HTTPException:
    logger.warning(
        f"Rejected request: {error}",
        extra={"request_id": request_id, "field": error.field},
    )
    return HTTPException(status_code=400, detail=str(error))


def _hct_response(hct: Hct) -> HctResponse:
    return HctResponse(
        argb=hct.to_int(),
        hex=hex_from_argb(hct.to_int()),
        hue=hct.hue,
        chroma=hct.chroma,
        tone=hct.tone,
    )


@router.post("/scheme",
             response_model=SchemeResponse,
             responses=BAD_REQUEST_RESPONSES,
             summary="Resolve Color Scheme",
             description="Derive every dynamic color role from a seed color")
def resolve_scheme(request: SchemeRequest) -> SchemeResponse:
    """
    Resolve a full dynamic color scheme.

    Omitted variant, contrast level, platform and color system version fall back to
    the configured defaults.
    """
    request_id = generate_request_id("scheme")
    start_time = time.time()
    seed = request.seed.model_dump() if isinstance(request.seed, HctInput) else request.seed

    try:
        source = theme_api.parse_seed(seed)
        variant = theme_api.parse_enum(Variant, request.variant or config.DEFAULT_VARIANT, "variant")
        platform = theme_api.parse_enum(Platform, request.platform or config.DEFAULT_PLATFORM, "platform")
        spec_version = theme_api.parse_enum(
            SpecVersion, request.spec_version or config.DEFAULT_SPEC_VERSION, "spec_version"
        )
        contrast_level = theme_api.validate_contrast_level(
            config.DEFAULT_CONTRAST_LEVEL if request.contrast_level is None else request.contrast_level
        )
        roles = theme_api.resolve_scheme(
            source,
            variant=variant,
            contrast_level=contrast_level,
            is_dark=request.is_dark,
            platform=platform,
            spec_version=spec_version,
        )
    except ColorValidationError as e:
        raise _bad_request(request_id, e)

    processing_time = (time.time() - start_time) * 1000
    logger.info(
        f"Resolved {len(roles)} roles",
        extra={
            "request_id": request_id,
            "variant": variant.value,
            "is_dark": request.is_dark,
            "spec_version": spec_version.value,
            "processing_time_ms": round(processing_time, 2),
        },
    )
    return SchemeResponse(
        source_argb=source.to_int(),
        source_hex=hex_from_argb(source.to_int()),
        variant=variant.value,
        is_dark=request.is_dark,
        contrast_level=contrast_level,
        platform=platform.value,
        spec_version=spec_version.value,
        roles={name: hex_from_argb(argb) for name, argb in roles.items()},
        argb=roles,
    )


@router.post("/quantize",
             response_model=QuantizeResponse,
             responses=BAD_REQUEST_RESPONSES,
             summary="Quantize And Score",
             description="Cluster pixel colors and rank the clusters as theme seed colors")
def quantize_and_score(request: QuantizeRequest) -> QuantizeResponse:
    """Quantize a pixel payload and return the best seed colors."""
    request_id = generate_request_id("quant")
    start_time = time.time()

    try:
        ranked = theme_api.quantize_and_score(request.pixels, k=request.k, top_n=request.top_n)
    except ColorValidationError as e:
        raise _bad_request(request_id, e)

    processing_time = (time.time() - start_time) * 1000
    logger.info(
        f"Ranked {len(ranked)} seed colors",
        extra={
            "request_id": request_id,
            "pixel_count": len(request.pixels),
            "processing_time_ms": round(processing_time, 2),
        },
    )
    return QuantizeResponse(
        request_id=request_id,
        pixel_count=len(request.pixels),
        colors=[
            ScoredColorEntry(argb=entry.argb, hex=hex_from_argb(entry.argb), score=entry.score)
            for entry in ranked
        ],
    )


@router.get("/hct/{argb}",
            response_model=HctResponse,
            responses=BAD_REQUEST_RESPONSES,
            summary="ARGB To HCT",
            description="Hue, chroma and tone of a packed ARGB color")
def argb_to_hct(argb: int) -> HctResponse:
    try:
        hct = theme_api.argb_to_hct(argb)
    except ColorValidationError as e:
        raise _bad_request(generate_request_id("hct"), e)
    return _hct_response(hct)


@router.post("/hct/solve",
             response_model=HctResponse,
             responses=BAD_REQUEST_RESPONSES,
             summary="HCT To ARGB",
             description="Closest displayable color to a hue, chroma and tone request")
def solve_hct(request: HctSolveRequest) -> HctResponse:
    try:
        argb = theme_api.hct_to_argb(request.hue, request.chroma, request.tone)
    except ColorValidationError as e:
        raise _bad_request(generate_request_id("hct"), e)
    return _hct_response(Hct.from_int(argb))


@router.get("/contrast",
            response_model=ContrastResponse,
            responses=BAD_REQUEST_RESPONSES,
            summary="Contrast Ratio",
            description="WCAG contrast ratio between two tones")
def contrast_ratio(
    tone_a: float = Query(..., description="First tone"),
    tone_b: float = Query(..., description="Second tone"),
) -> ContrastResponse:
    try:
        ratio = theme_api.contrast_ratio(tone_a, tone_b)
    except ColorValidationError as e:
        raise _bad_request(generate_request_id("contrast"), e)
    return ContrastResponse(tone_a=tone_a, tone_b=tone_b, ratio=ratio)


@router.get("/palette/tone",
            response_model=PaletteToneResponse,
            responses=BAD_REQUEST_RESPONSES,
            summary="Tonal Palette Color",
            description="Color of a hue and chroma palette at one tone")
def palette_tone(
    hue: float = Query(..., description="Palette hue in degrees"),
    chroma: float = Query(..., description="Palette chroma"),
    tone: float = Query(..., description="Tone [0, 100]"),
) -> PaletteToneResponse:
    try:
        argb = theme_api.tonal_palette_color_at(hue, chroma, tone)
    except ColorValidationError as e:
        raise _bad_request(generate_request_id("palette"), e)
    return PaletteToneResponse(hue=hue, chroma=chroma, tone=tone, argb=argb, hex=hex_from_argb(argb))
