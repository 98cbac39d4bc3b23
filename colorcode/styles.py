"""Textual color code styles."""

from enum import Enum


class ColorCodeStyle(str, Enum):
    """The CSS3 notations a color code can be written in."""

    HEX = "hex"  # #ff0000
    SHORT_HEX = "shortHex"  # #f00
    CSS_RGB = "cssRGB"  # rgb(255,0,0)
    CSS_RGBA = "cssRGBa"  # rgba(255,0,0,1)
    CSS_HSL = "cssHSL"  # hsl(0,100%,50%)
    CSS_HSLA = "cssHSLa"  # hsla(0,100%,50%,1)
    CSS_KEYWORD = "cssKeyword"  # red
