from pydantic import BaseModel, Field
from typing import Optional

from colorcode import ColorCodeStyle, ColorComponents


class SuccessResponse(BaseModel):
    success: bool = Field(..., description="Whether the operation succeeded")
    message: Optional[str] = Field(None, description="The resulting color code")


class ConvertResponse(SuccessResponse):
    detected_style: ColorCodeStyle = Field(..., description="The style the input code was written in")


class ParseResponse(BaseModel):
    success: bool = True
    style: ColorCodeStyle = Field(..., description="The detected color code style")
    components: ColorComponents = Field(..., description="The parsed color components")


class KeywordResponse(BaseModel):
    keyword: str = Field(..., description="Lowercase CSS3 keyword")
    value: str = Field(..., description="The keyword's color as #rrggbb")


class ErrorResponse(BaseModel):
    detail: str = Field(..., description="Why the request was rejected")
