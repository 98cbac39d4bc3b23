"""
Color code conversion between CSS3 color strings and normalized components.

Example::

    components, style = parse("hsla(0,0%,100%,0.5)")
    format_color_code(components, ColorCodeStyle.HEX)  # '#ffffff'
"""

from .components import (
    BaseComponents,
    ColorComponents,
    ColorModel,
    HSBComponents,
    HSLComponents,
    RGBComponents,
    components_from_hex,
    convert,
    finite,
)
from .errors import ColorCodeError, InvalidFormatError
from .formatter import format_color_code
from .keywords import KEYWORD_COLORS, lookup_by_name, lookup_by_value, stylesheet_colors
from .parser import parse, parse_color_code
from .styles import ColorCodeStyle

__all__ = [
    "BaseComponents",
    "ColorCodeError",
    "ColorCodeStyle",
    "ColorComponents",
    "ColorModel",
    "HSBComponents",
    "HSLComponents",
    "InvalidFormatError",
    "KEYWORD_COLORS",
    "RGBComponents",
    "components_from_hex",
    "convert",
    "finite",
    "format_color_code",
    "lookup_by_name",
    "lookup_by_value",
    "parse",
    "parse_color_code",
    "stylesheet_colors",
]
