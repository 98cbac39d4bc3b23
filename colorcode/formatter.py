"""
Rendering normalized components as CSS3 color codes.

Output is canonical: lowercase hex digits, no whitespace, integers without
leading zeros and alpha in compact %g notation.
"""

import math
from typing import Optional, Tuple

from .components import BaseComponents
from .keywords import lookup_by_value
from .styles import ColorCodeStyle


def round_half_away(x: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    return int(math.copysign(math.floor(abs(x) + 0.5), x))


def format_alpha(alpha: float) -> str:
    """Alpha in compact general notation: 0.5, 1, 0.333333."""
    return f"{alpha:g}"


def _rgb_255(components: BaseComponents) -> Tuple[int, int, int]:
    rgb = components.to_rgb()
    return (
        round_half_away(255 * rgb.red),
        round_half_away(255 * rgb.green),
        round_half_away(255 * rgb.blue),
    )


def _hsl_ints(components: BaseComponents) -> Tuple[int, int, int]:
    hsl = components.to_hsl()
    h = round_half_away(360 * hsl.hue) if hsl.saturation > 0 else 0
    s = round_half_away(100 * hsl.saturation)
    l = round_half_away(100 * hsl.lightness)
    return h, s, l


def format_color_code(components: BaseComponents, style: ColorCodeStyle) -> Optional[str]:
    """Render components in the requested style.

    Non-finite channels are treated as 0. Returns None only for
    ``ColorCodeStyle.CSS_KEYWORD`` when no keyword has exactly this color.
    """
    components = components.guarded()
    style = ColorCodeStyle(style)

    if style in (ColorCodeStyle.CSS_HSL, ColorCodeStyle.CSS_HSLA):
        h, s, l = _hsl_ints(components)
        if style == ColorCodeStyle.CSS_HSLA:
            return f"hsla({h},{s}%,{l}%,{format_alpha(components.alpha)})"
        return f"hsl({h},{s}%,{l}%)"

    r, g, b = _rgb_255(components)
    if style == ColorCodeStyle.HEX:
        return f"#{r:02x}{g:02x}{b:02x}"
    elif style == ColorCodeStyle.SHORT_HEX:
        return f"#{r // 16:x}{g // 16:x}{b // 16:x}"
    elif style == ColorCodeStyle.CSS_RGB:
        return f"rgb({r},{g},{b})"
    elif style == ColorCodeStyle.CSS_RGBA:
        return f"rgba({r},{g},{b},{format_alpha(components.alpha)})"
    elif style == ColorCodeStyle.CSS_KEYWORD:
        return lookup_by_value((r & 0xFF) << 16 | (g & 0xFF) << 8 | (b & 0xFF))
    else:
        raise ValueError(f"Unknown color code style: {style!r}")
