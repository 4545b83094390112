"""Conversions between hex, RGB, HSL and HSV.

Every public ``from_*`` function validates its input, converts it and returns
a fully populated :class:`Color`. The input representation is kept verbatim,
the other three are derived from it.
"""
import math
import re

from ladle.internal.color_models import Color, HSL, HSV, RGB
from ladle.internal.errors import FormatError


HEX_DIGITS = re.compile(r"[0-9a-fA-F]{6}")

MAX_CHANNEL = 255
MAX_HUE = 360
MAX_PERCENT = 100


def round_half_up(x: float) -> int:
    return int(math.copysign(math.floor(abs(x) + 0.5), x))


def _check_int(name: str, value, low: int, high: int, high_inclusive: bool = True) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise FormatError(f"{name} must be an integer, got {value!r}")

    too_high = value > high if high_inclusive else value >= high
    if value < low or too_high:
        bracket = "]" if high_inclusive else ")"
        raise FormatError(f"{name} must be in [{low},{high}{bracket}, got {value}")
    return value


def _sector_to_rgb(h: int, c: float, m: float) -> RGB:
    x = c * (1 - abs((h / 60) % 2 - 1))

    if 0 <= h < 60:
        r, g, b = c, x, 0.0
    elif 60 <= h < 120:
        r, g, b = x, c, 0.0
    elif 120 <= h < 180:
        r, g, b = 0.0, c, x
    elif 180 <= h < 240:
        r, g, b = 0.0, x, c
    elif 240 <= h < 300:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return RGB(
        r=round_half_up((r + m) * MAX_CHANNEL),
        g=round_half_up((g + m) * MAX_CHANNEL),
        b=round_half_up((b + m) * MAX_CHANNEL),
    )


def hsv_to_rgb(h: int, s: int, v: int) -> RGB:
    s /= MAX_PERCENT
    v /= MAX_PERCENT
    c = v * s
    return _sector_to_rgb(h, c, v - c)


def hsl_to_rgb(h: int, s: int, l: int) -> RGB:
    s /= MAX_PERCENT
    l /= MAX_PERCENT
    c = (1 - abs(2 * l - 1)) * s
    return _sector_to_rgb(h, c, l - c / 2)


def _hue_and_extremes(rgb: RGB) -> tuple[float, float, float]:
    r, g, b = rgb.r / MAX_CHANNEL, rgb.g / MAX_CHANNEL, rgb.b / MAX_CHANNEL
    high = max(r, g, b)
    low = min(r, g, b)
    delta = high - low

    # achromatic: hue is undefined, report 0
    if delta == 0:
        return 0.0, high, low

    if high == r:
        hue = 60 * ((g - b) / delta) + 360
    elif high == g:
        hue = 60 * ((b - r) / delta) + 120
    else:
        hue = 60 * ((r - g) / delta) + 240
    return hue % 360, high, low


def _round_hue(hue: float) -> int:
    return round_half_up(hue) % MAX_HUE


def rgb_to_hsv(rgb: RGB) -> HSV:
    hue, high, low = _hue_and_extremes(rgb)
    delta = high - low
    saturation = 0.0 if high == 0 else delta / high
    return HSV(
        h=_round_hue(hue),
        s=round_half_up(saturation * MAX_PERCENT),
        v=round_half_up(high * MAX_PERCENT),
    )


def rgb_to_hsl(rgb: RGB) -> HSL:
    hue, high, low = _hue_and_extremes(rgb)
    delta = high - low
    lightness = (high + low) / 2

    if delta == 0:
        saturation = 0.0
    elif lightness > 0.5:
        saturation = delta / (2 - high - low)
    else:
        saturation = delta / (high + low)

    return HSL(
        h=_round_hue(hue),
        s=round_half_up(saturation * MAX_PERCENT),
        l=round_half_up(lightness * MAX_PERCENT),
    )


def rgb_to_hex(rgb: RGB) -> str:
    return f"#{rgb.r:02x}{rgb.g:02x}{rgb.b:02x}"


def hex_to_rgb(s: str) -> RGB:
    if not isinstance(s, str):
        raise FormatError(f"Hex color must be a string, got {s!r}")

    digits = s[1:] if s.startswith("#") else s
    if len(digits) != 6:
        raise FormatError(f"Hex color must have exactly 6 digits, got '{s}'")
    if not HEX_DIGITS.fullmatch(digits):
        raise FormatError(f"Hex color contains non-hex digits: '{s}'")

    return RGB(
        r=int(digits[0:2], 16),
        g=int(digits[2:4], 16),
        b=int(digits[4:6], 16),
    )


def _from_validated_rgb(rgb: RGB) -> Color:
    return Color(hex=rgb_to_hex(rgb), rgb=rgb, hsl=rgb_to_hsl(rgb), hsv=rgb_to_hsv(rgb))


def from_hex(s: str) -> Color:
    return _from_validated_rgb(hex_to_rgb(s))


def from_rgb(r: int, g: int, b: int) -> Color:
    rgb = RGB(
        r=_check_int("Red", r, 0, MAX_CHANNEL),
        g=_check_int("Green", g, 0, MAX_CHANNEL),
        b=_check_int("Blue", b, 0, MAX_CHANNEL),
    )
    return _from_validated_rgb(rgb)


def from_hsl(h: int, s: int, l: int) -> Color:
    hsl = HSL(
        h=_check_int("Hue", h, 0, MAX_HUE, high_inclusive=False),
        s=_check_int("Saturation", s, 0, MAX_PERCENT),
        l=_check_int("Lightness", l, 0, MAX_PERCENT),
    )
    rgb = hsl_to_rgb(hsl.h, hsl.s, hsl.l)
    return Color(hex=rgb_to_hex(rgb), rgb=rgb, hsl=hsl, hsv=rgb_to_hsv(rgb))


def from_hsv(h: int, s: int, v: int) -> Color:
    hsv = HSV(
        h=_check_int("Hue", h, 0, MAX_HUE, high_inclusive=False),
        s=_check_int("Saturation", s, 0, MAX_PERCENT),
        v=_check_int("Value", v, 0, MAX_PERCENT),
    )
    rgb = hsv_to_rgb(hsv.h, hsv.s, hsv.v)
    return Color(hex=rgb_to_hex(rgb), rgb=rgb, hsl=rgb_to_hsl(rgb), hsv=hsv)
