"""Tests for rendering components as color codes."""

import math

import pytest

from colorcode import (
    ColorCodeStyle,
    HSBComponents,
    HSLComponents,
    RGBComponents,
    format_color_code,
    parse,
)
from colorcode.formatter import format_alpha, round_half_away

RED = RGBComponents(red=1, green=0, blue=0)


class TestRGBStyles:
    @pytest.mark.parametrize(
        "style, expected",
        [
            (ColorCodeStyle.HEX, "#ff0000"),
            (ColorCodeStyle.SHORT_HEX, "#f00"),
            (ColorCodeStyle.CSS_RGB, "rgb(255,0,0)"),
            (ColorCodeStyle.CSS_RGBA, "rgba(255,0,0,1)"),
            (ColorCodeStyle.CSS_HSL, "hsl(0,100%,50%)"),
            (ColorCodeStyle.CSS_HSLA, "hsla(0,100%,50%,1)"),
            (ColorCodeStyle.CSS_KEYWORD, "red"),
        ],
    )
    def test_red(self, style, expected):
        assert format_color_code(RED, style) == expected

    def test_style_as_string(self):
        assert format_color_code(RED, "hex") == "#ff0000"

    def test_short_hex_truncates(self):
        color = RGBComponents(red=0x1F / 255, green=0xF0 / 255, blue=0x0F / 255)
        assert format_color_code(color, ColorCodeStyle.SHORT_HEX) == "#1f0"

    def test_alpha_compact(self):
        color = RGBComponents(red=0, green=0, blue=0, alpha=1 / 3)
        assert format_color_code(color, ColorCodeStyle.CSS_RGBA) == "rgba(0,0,0,0.333333)"


class TestHSLStyles:
    def test_white(self):
        color = HSLComponents(hue=0, saturation=0, lightness=1)
        assert format_color_code(color, ColorCodeStyle.CSS_HSL) == "hsl(0,0%,100%)"

    def test_zero_saturation_forces_hue_zero(self):
        color = HSLComponents(hue=0.5, saturation=0, lightness=0.4)
        assert format_color_code(color, ColorCodeStyle.CSS_HSL) == "hsl(0,0%,40%)"

    def test_hsla(self):
        color = HSLComponents(hue=0.5, saturation=0.5, lightness=0.25, alpha=0.5)
        assert format_color_code(color, ColorCodeStyle.CSS_HSLA) == "hsla(180,50%,25%,0.5)"

    def test_from_hsb(self):
        color = HSBComponents(hue=1 / 3, saturation=1, brightness=1)
        assert format_color_code(color, ColorCodeStyle.CSS_HSL) == "hsl(120,100%,50%)"
        assert format_color_code(color, ColorCodeStyle.HEX) == "#00ff00"


class TestKeywordStyle:
    def test_shared_value_uses_smallest_keyword(self):
        components, _ = parse("cyan")
        assert format_color_code(components, ColorCodeStyle.CSS_KEYWORD) == "aqua"

    def test_no_keyword(self):
        color = RGBComponents(red=0x12 / 255, green=0x34 / 255, blue=0x56 / 255)
        assert format_color_code(color, ColorCodeStyle.CSS_KEYWORD) is None


class TestFiniteGuard:
    def test_nan_channel_is_zero(self):
        color = RGBComponents(red=math.nan, green=1, blue=math.inf)
        assert format_color_code(color, ColorCodeStyle.HEX) == "#00ff00"

    def test_nan_alpha_is_zero(self):
        color = RGBComponents(red=0, green=0, blue=0, alpha=math.nan)
        assert format_color_code(color, ColorCodeStyle.CSS_RGBA) == "rgba(0,0,0,0)"


class TestRounding:
    @pytest.mark.parametrize("value, expected", [(0.5, 1), (2.5, 3), (-2.5, -3), (2.4, 2), (127.5, 128)])
    def test_half_away_from_zero(self, value, expected):
        assert round_half_away(value) == expected

    def test_channel_rounds_not_truncates(self):
        color = RGBComponents(red=0.999, green=0.5, blue=0.001)
        assert format_color_code(color, ColorCodeStyle.CSS_RGB) == "rgb(255,128,0)"

    @pytest.mark.parametrize("alpha, expected", [(0.5, "0.5"), (1.0, "1"), (0.0, "0"), (0.25, "0.25")])
    def test_format_alpha(self, alpha, expected):
        assert format_alpha(alpha) == expected


class TestScenarios:
    def test_hsla_white_to_hex(self):
        components, style = parse("hsla(0,0%,100%,0.5)")
        assert style == ColorCodeStyle.CSS_HSLA
        assert components.alpha == 0.5
        assert format_color_code(components, ColorCodeStyle.HEX) == "#ffffff"

    def test_hex_to_keyword(self):
        components, style = parse("#FF0000")
        assert style == ColorCodeStyle.HEX
        assert format_color_code(components, ColorCodeStyle.CSS_KEYWORD) == "red"

    def test_black_to_short_hex(self):
        components, _ = parse("rgb(0,0,0)")
        assert format_color_code(components, ColorCodeStyle.SHORT_HEX) == "#000"


class TestRoundTrip:
    @pytest.mark.parametrize(
        "code",
        [
            "#6495ed",
            "#abc",
            "rgb(12,200,99)",
            "rgba(1,2,3,0.75)",
            "hsl(200,50%,40%)",
            "hsla(300,20%,90%,0.1)",
            "cornflowerblue",
            "cyan",
        ],
    )
    def test_detected_style_is_stable(self, code):
        components, style = parse(code)
        reparsed, restyled = parse(format_color_code(components, style))
        assert restyled == style
        assert reparsed.to_rgb().values() == pytest.approx(components.to_rgb().values(), abs=1 / 255)

    @pytest.mark.parametrize("rgb", [(0, 0, 0), (255, 255, 255), (17, 128, 240), (1, 254, 77)])
    def test_hex_is_exact(self, rgb):
        color = RGBComponents(red=rgb[0] / 255, green=rgb[1] / 255, blue=rgb[2] / 255)
        assert parse(format_color_code(color, ColorCodeStyle.HEX))[0].values() == pytest.approx(color.values())

    def test_short_hex_to_one_fifteenth(self):
        color = RGBComponents(red=0.3, green=0.6, blue=0.9)
        reparsed, _ = parse(format_color_code(color, ColorCodeStyle.SHORT_HEX))
        assert reparsed.values() == pytest.approx(color.values(), abs=1 / 15)


class TestLightnessAtLimits:
    """Saturation stays defined when lightness rounds to exactly 0 or 1."""

    def test_near_white(self):
        color = RGBComponents(red=1, green=1, blue=1 - 2**-53)
        assert format_color_code(color, ColorCodeStyle.CSS_HSL) == "hsl(0,0%,100%)"

    def test_near_black(self):
        color = RGBComponents(red=5e-324, green=0, blue=0)
        assert format_color_code(color, ColorCodeStyle.CSS_HSL) == "hsl(0,0%,0%)"
