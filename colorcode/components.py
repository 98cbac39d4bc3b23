"""
Normalized color components.

A color is held in exactly one of three models, each carrying alpha:

RGB:
    red, green, blue in [0, 1]
HSL:
    hue in [0, 1) (fraction of a full turn), saturation, lightness in [0, 1]
HSB:
    hue in [0, 1), saturation, brightness in [0, 1]

Any variant can be viewed in the other two models with ``to_rgb()``,
``to_hsl()`` and ``to_hsb()``.
"""

import math
from typing import Annotated, ClassVar, Literal, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .errors import InvalidFormatError


def finite(value: float) -> float:
    """Return value, or 0.0 if it is NaN or infinite."""
    return value if math.isfinite(value) else 0.0


def _unit(value: float) -> float:
    """Clamp a converted channel back into [0, 1] after float error."""
    return min(max(value, 0.0), 1.0)


# Model conversions ----------------------------------------------

def _hue(r: float, g: float, b: float, max_val: float, d: float) -> float:
    """Hue as a fraction of a turn from RGB, max channel and chroma."""
    if d == 0:
        return 0.0
    if max_val == r:
        h = 60 * (((g - b) / d) % 6)
    elif max_val == g:
        h = 60 * ((b - r) / d + 2)
    else:
        h = 60 * ((r - g) / d + 4)
    if h < 0:
        h += 360
    if h >= 360:
        h -= 360
    return h / 360


def _hue_to_rgb(h: float, c: float, m: float) -> Tuple[float, float, float]:
    """Channels from hue (turn fraction), chroma and the lightness offset."""
    hp = (h % 1.0) * 6
    x = c * (1 - abs((hp % 2) - 1))

    if 0 <= hp < 1:
        r1, g1, b1 = c, x, 0.0
    elif 1 <= hp < 2:
        r1, g1, b1 = x, c, 0.0
    elif 2 <= hp < 3:
        r1, g1, b1 = 0.0, c, x
    elif 3 <= hp < 4:
        r1, g1, b1 = 0.0, x, c
    elif 4 <= hp < 5:
        r1, g1, b1 = x, 0.0, c
    else:
        r1, g1, b1 = c, 0.0, x

    return _unit(r1 + m), _unit(g1 + m), _unit(b1 + m)


def rgb_to_hsl(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Convert RGB to HSL."""
    max_val = max(r, g, b)
    min_val = min(r, g, b)
    d = max_val - min_val
    l = (max_val + min_val) / 2
    # denom underflows to 0 when l rounds to exactly 0 or 1 with d > 0
    denom = 1 - abs(2 * l - 1)
    s = 0.0 if d == 0 or denom == 0 else d / denom
    return _hue(r, g, b, max_val, d), _unit(s), l


def rgb_to_hsb(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Convert RGB to HSB."""
    max_val = max(r, g, b)
    d = max_val - min(r, g, b)
    s = 0.0 if max_val == 0 else d / max_val
    return _hue(r, g, b, max_val, d), s, max_val


def hsl_to_rgb(h: float, s: float, l: float) -> Tuple[float, float, float]:
    """Convert HSL to RGB."""
    c = (1 - abs(2 * l - 1)) * s
    return _hue_to_rgb(h, c, l - c / 2)


def hsb_to_rgb(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """Convert HSB to RGB."""
    c = v * s
    return _hue_to_rgb(h, c, v - c)


def hsb_to_hsl(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """Convert HSB to HSL, keeping the hue."""
    l = v * (1 - s / 2)
    sl = (v - l) / min(l, 1 - l) if 0 < l < 1 else 0.0
    return h, _unit(sl), l


def hsl_to_hsb(h: float, s: float, l: float) -> Tuple[float, float, float]:
    """Convert HSL to HSB, keeping the hue."""
    v = l + s * min(l, 1 - l)
    sb = 0.0 if v == 0 else 2 * (1 - l / v)
    return h, _unit(sb), _unit(v)


# Component models -----------------------------------------------

class BaseComponents(BaseModel):
    """Four scalar channels of one color model. Immutable."""

    model_config = ConfigDict(frozen=True)

    channels: ClassVar[Tuple[str, ...]] = ()

    alpha: float = Field(default=1.0, description="Opacity, 0 transparent to 1 opaque")

    @model_validator(mode="after")
    def check_channels(self) -> "BaseComponents":
        """Finite channels must lie in [0, 1]. Alpha is not checked."""
        for name in self.channels:
            value = getattr(self, name)
            if math.isfinite(value) and not 0 <= value <= 1:
                raise ValueError(f"{name} must be within 0-1, got {value}")
        return self

    def guarded(self) -> "BaseComponents":
        """Copy with every non-finite channel replaced by 0."""
        names = self.channels + ("alpha",)
        return self.model_copy(update={name: finite(getattr(self, name)) for name in names})

    def values(self) -> Tuple[float, float, float, float]:
        """The three channels followed by alpha."""
        first, second, third = (getattr(self, name) for name in self.channels)
        return first, second, third, self.alpha


class RGBComponents(BaseComponents):
    model: Literal["rgb"] = "rgb"
    channels: ClassVar[Tuple[str, ...]] = ("red", "green", "blue")

    red: float
    green: float
    blue: float

    def to_rgb(self) -> "RGBComponents":
        return self

    def to_hsl(self) -> "HSLComponents":
        h, s, l = rgb_to_hsl(self.red, self.green, self.blue)
        return HSLComponents(hue=h, saturation=s, lightness=l, alpha=self.alpha)

    def to_hsb(self) -> "HSBComponents":
        h, s, v = rgb_to_hsb(self.red, self.green, self.blue)
        return HSBComponents(hue=h, saturation=s, brightness=v, alpha=self.alpha)


class HSLComponents(BaseComponents):
    model: Literal["hsl"] = "hsl"
    channels: ClassVar[Tuple[str, ...]] = ("hue", "saturation", "lightness")

    hue: float
    saturation: float
    lightness: float

    def to_rgb(self) -> RGBComponents:
        r, g, b = hsl_to_rgb(self.hue, self.saturation, self.lightness)
        return RGBComponents(red=r, green=g, blue=b, alpha=self.alpha)

    def to_hsl(self) -> "HSLComponents":
        return self

    def to_hsb(self) -> "HSBComponents":
        h, s, v = hsl_to_hsb(self.hue, self.saturation, self.lightness)
        return HSBComponents(hue=h, saturation=s, brightness=v, alpha=self.alpha)


class HSBComponents(BaseComponents):
    model: Literal["hsb"] = "hsb"
    channels: ClassVar[Tuple[str, ...]] = ("hue", "saturation", "brightness")

    hue: float
    saturation: float
    brightness: float

    def to_rgb(self) -> RGBComponents:
        r, g, b = hsb_to_rgb(self.hue, self.saturation, self.brightness)
        return RGBComponents(red=r, green=g, blue=b, alpha=self.alpha)

    def to_hsl(self) -> HSLComponents:
        h, s, l = hsb_to_hsl(self.hue, self.saturation, self.brightness)
        return HSLComponents(hue=h, saturation=s, lightness=l, alpha=self.alpha)

    def to_hsb(self) -> "HSBComponents":
        return self


ColorComponents = Annotated[
    Union[RGBComponents, HSLComponents, HSBComponents],
    Field(discriminator="model"),
]

ColorModel = Literal["rgb", "hsl", "hsb"]


def convert(components: BaseComponents, model: ColorModel) -> BaseComponents:
    """View components in the requested color model."""
    if model == "rgb":
        return components.to_rgb()
    elif model == "hsl":
        return components.to_hsl()
    elif model == "hsb":
        return components.to_hsb()
    else:
        raise ValueError(f"Unknown color model: {model!r}")


def components_from_hex(value: int) -> RGBComponents:
    """Build opaque RGB components from a 24-bit integer such as 0xFF0000."""
    if not 0 <= value <= 0xFFFFFF:
        raise InvalidFormatError(hex(value), "hex value must be within 0x000000-0xffffff")
    return RGBComponents(
        red=((value >> 16) & 0xFF) / 255,
        green=((value >> 8) & 0xFF) / 255,
        blue=(value & 0xFF) / 255,
    )
