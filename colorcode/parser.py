"""
CSS3 color code detection and parsing.

Supported: hex (#rrggbb), short hex (#rgb), rgb(), rgba(), hsl(), hsla() and
the 147 CSS3 keywords. The leading '#' is optional on hex codes; hex digits,
function names and keywords are case insensitive.
Excludes: alpha-in-hex, space separated syntax, calc() and CSS4 functions.
"""

import logging
import math
import re
import string
from typing import Optional, Tuple

from .components import BaseComponents, HSLComponents, RGBComponents, components_from_hex
from .errors import InvalidFormatError
from .keywords import lookup_by_name
from .styles import ColorCodeStyle

logger = logging.getLogger(__name__)

# Regular expression patterns, ASCII only
ws = r"\s*"
num = r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:e[+-]?\d+)?"
comma = f"{ws},{ws}"
perc = f"({num}){ws}%"

FLAGS = re.IGNORECASE | re.ASCII


def _function_re(name: str, *args: str) -> "re.Pattern[str]":
    """Compile ``name( arg , arg , ... )`` with optional whitespace inside the parentheses."""
    body = comma.join(args)
    return re.compile(f"^{name}\\({ws}{body}{ws}\\)$", FLAGS)


HEX_RE = re.compile(r"^#?([0-9a-f]{6})$", FLAGS)
SHORT_HEX_RE = re.compile(r"^#?([0-9a-f]{3})$", FLAGS)
RGB_RE = _function_re("rgb", f"({num})", f"({num})", f"({num})")
RGBA_RE = _function_re("rgba", f"({num})", f"({num})", f"({num})", f"({num})")
HSL_RE = _function_re("hsl", f"({num})", perc, perc)
HSLA_RE = _function_re("hsla", f"({num})", perc, perc, f"({num})")

# Only the hue may carry a sign
UINT_RE = re.compile(r"^\d+$", re.ASCII)
INT_RE = re.compile(r"^[+-]?\d+$", re.ASCII)


# Field helpers --------------------------------------------------

def _int(code: str, token: str, lo: Optional[int] = None, hi: Optional[int] = None, signed: bool = False) -> int:
    """Parse an integer field and check it against its closed range."""
    if signed and not INT_RE.match(token):
        raise InvalidFormatError(code, f"{token!r} is not an integer")
    if not signed and not UINT_RE.match(token):
        raise InvalidFormatError(code, f"{token!r} is not an unsigned integer")
    value = int(token)
    if (lo is not None and value < lo) or (hi is not None and value > hi):
        raise InvalidFormatError(code, f"{value} is outside {lo}-{hi}")
    return value


def _alpha(code: str, token: str) -> float:
    """Parse an alpha field. The value is not clamped but must be finite."""
    try:
        value = float(token)
    except ValueError:
        raise InvalidFormatError(code, f"{token!r} is not a number") from None
    if not math.isfinite(value):
        raise InvalidFormatError(code, f"{token!r} is not a finite number")
    return value


def _channel(code: str, token: str) -> float:
    return _int(code, token, 0, 255) / 255


def _percent(code: str, token: str) -> float:
    return _int(code, token, 0, 100) / 100


def _hue(code: str, token: str) -> float:
    return (_int(code, token, signed=True) % 360) / 360

# Parsers per style ----------------------------------------------

def parse_hex(code: str) -> Optional[BaseComponents]:
    """Parse a 6-digit hex code."""
    m = HEX_RE.match(code)
    if not m:
        return None
    return components_from_hex(int(m.group(1), 16))


def parse_short_hex(code: str) -> Optional[BaseComponents]:
    """Parse a 3-digit hex code, expanding each digit d to d*16+d."""
    m = SHORT_HEX_RE.match(code)
    if not m:
        return None
    r, g, b = (int(digit, 16) * 17 for digit in m.group(1))
    return RGBComponents(red=r / 255, green=g / 255, blue=b / 255)


def parse_rgb(code: str) -> Optional[BaseComponents]:
    """Parse rgb(r,g,b)."""
    m = RGB_RE.match(code)
    if not m:
        return None
    r, g, b = (_channel(code, token) for token in m.groups())
    return RGBComponents(red=r, green=g, blue=b)


def parse_rgba(code: str) -> Optional[BaseComponents]:
    """Parse rgba(r,g,b,a)."""
    m = RGBA_RE.match(code)
    if not m:
        return None
    r_val, g_val, b_val, a_val = m.groups()
    return RGBComponents(
        red=_channel(code, r_val),
        green=_channel(code, g_val),
        blue=_channel(code, b_val),
        alpha=_alpha(code, a_val),
    )


def parse_hsl(code: str) -> Optional[BaseComponents]:
    """Parse hsl(h,s%,l%)."""
    m = HSL_RE.match(code)
    if not m:
        return None
    h_val, s_val, l_val = m.groups()
    return HSLComponents(
        hue=_hue(code, h_val),
        saturation=_percent(code, s_val),
        lightness=_percent(code, l_val),
    )


def parse_hsla(code: str) -> Optional[BaseComponents]:
    """Parse hsla(h,s%,l%,a)."""
    m = HSLA_RE.match(code)
    if not m:
        return None
    h_val, s_val, l_val, a_val = m.groups()
    return HSLComponents(
        hue=_hue(code, h_val),
        saturation=_percent(code, s_val),
        lightness=_percent(code, l_val),
        alpha=_alpha(code, a_val),
    )


def parse_keyword(code: str) -> Optional[BaseComponents]:
    """Parse a CSS3 keyword such as 'cornflowerblue'."""
    value = lookup_by_name(code)
    if value is None:
        return None
    return components_from_hex(value)


# Detection order matters: six hex digits are tried before three.
PARSERS = (
    (ColorCodeStyle.HEX, parse_hex),
    (ColorCodeStyle.SHORT_HEX, parse_short_hex),
    (ColorCodeStyle.CSS_RGB, parse_rgb),
    (ColorCodeStyle.CSS_RGBA, parse_rgba),
    (ColorCodeStyle.CSS_HSL, parse_hsl),
    (ColorCodeStyle.CSS_HSLA, parse_hsla),
    (ColorCodeStyle.CSS_KEYWORD, parse_keyword),
)


# Top-level parse ------------------------------------------------

def parse(code: str) -> Tuple[BaseComponents, ColorCodeStyle]:
    """Parse a CSS3 color code.

    Args:
        code: The color code. Surrounding whitespace is ignored.

    Returns:
        The normalized components and the style the code was written in.

    Raises:
        InvalidFormatError: The code matches no style, or one of its fields
            is not an integer where one is required or is out of range.
    """
    s = code.strip(string.whitespace)
    for style, parse_style in PARSERS:
        components = parse_style(s)
        if components is not None:
            logger.debug("Detected %s color code %r", style.value, s)
            return components, style

    logger.debug("Rejected color code %r", code)
    raise InvalidFormatError(code)


def parse_color_code(code: str) -> BaseComponents:
    """Parse a CSS3 color code, discarding the detected style."""
    components, _ = parse(code)
    return components
