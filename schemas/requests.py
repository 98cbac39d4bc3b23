from pydantic import BaseModel, Field
from typing import Optional

from colorcode import ColorCodeStyle, ColorComponents, ColorModel


class ParseColorCodeRequest(BaseModel):
    code: str = Field(..., description="The CSS3 color code to parse")
    model: Optional[ColorModel] = Field(None, description="Color model to return the components in; defaults to the parsed model")


class FormatColorCodeRequest(BaseModel):
    components: ColorComponents = Field(..., description="Normalized color components, tagged by 'model'")
    style: ColorCodeStyle = Field(..., description="The color code style to render")


class ColorConvertRequest(BaseModel):
    code: str = Field(..., description="The CSS3 color code to convert")
    target: ColorCodeStyle = Field(..., description="The target color code style to convert to")
