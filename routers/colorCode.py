"""
Color code endpoints.

Thin HTTP/MCP surface over the colorcode engine: parse a CSS3 color code,
format components into a style, convert between styles and look up keywords.
"""

import logging
from typing import List

from fastapi import APIRouter, HTTPException

from colorcode import (
    ColorCodeStyle,
    InvalidFormatError,
    convert,
    format_color_code,
    lookup_by_name,
    parse,
    stylesheet_colors,
)
from schemas.requests import (
    ColorConvertRequest,
    FormatColorCodeRequest,
    ParseColorCodeRequest,
)
from schemas.responses import (
    ConvertResponse,
    ErrorResponse,
    KeywordResponse,
    ParseResponse,
    SuccessResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()

INVALID_RESPONSE = {400: {"model": ErrorResponse, "description": "Invalid color code"}}
NO_KEYWORD_RESPONSE = {404: {"model": ErrorResponse, "description": "No CSS keyword matches the color"}}


def _parse_or_400(code: str):
    try:
        return parse(code)
    except InvalidFormatError as e:
        logger.info("Rejected color code %r: %s", code, e.reason)
        raise HTTPException(status_code=400, detail=str(e)) from e


def _format_or_404(components, style: ColorCodeStyle) -> str:
    message = format_color_code(components, style)
    if message is None:
        raise HTTPException(status_code=404, detail="No CSS keyword matches this color")
    return message


@router.post("/parse_color_code", response_model=ParseResponse, operation_id="parse_color_code", description="Detect the style of a CSS3 color code and return its normalized components", responses=INVALID_RESPONSE)
async def parse_color_code(request: ParseColorCodeRequest):
    """Parse a color code into components."""
    components, style = _parse_or_400(request.code)
    if request.model is not None:
        components = convert(components, request.model)
    return ParseResponse(style=style, components=components)


@router.post("/format_color_code", response_model=SuccessResponse, operation_id="format_color_code", description="Render normalized color components as a CSS3 color code", responses=NO_KEYWORD_RESPONSE)
async def format_components(request: FormatColorCodeRequest):
    """Format components into the requested style."""
    return SuccessResponse(success=True, message=_format_or_404(request.components, request.style))


@router.post("/convert_color_code", response_model=ConvertResponse, operation_id="convert_color_code", description="Convert a CSS3 color code to a target style", responses={**INVALID_RESPONSE, **NO_KEYWORD_RESPONSE})
async def parse_and_convert(request: ColorConvertRequest):
    """Parse a color code and re-render it in the target style."""
    components, style = _parse_or_400(request.code)
    message = _format_or_404(components, request.target)
    return ConvertResponse(success=True, message=message, detected_style=style)


@router.get("/keywords", response_model=List[KeywordResponse], operation_id="list_color_keywords", description="List all CSS3 color keywords")
async def list_keywords():
    """All 147 keywords in table order."""
    return [KeywordResponse(keyword=keyword, value=f"#{value:06x}") for keyword, value in stylesheet_colors()]


@router.get("/keywords/{name}", response_model=KeywordResponse, operation_id="get_color_keyword", description="Look up a CSS3 color keyword", responses={404: {"model": ErrorResponse}})
async def get_keyword(name: str):
    """Look up one keyword, ignoring case."""
    value = lookup_by_name(name)
    if value is None:
        raise HTTPException(status_code=404, detail=f"Unknown CSS keyword: {name}")
    return KeywordResponse(keyword=name.lower(), value=f"#{value:06x}")
