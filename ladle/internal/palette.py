"""Palette generation from a base color.

All palettes are derived from the base color's HSV. Hue based palettes keep
saturation and value, monochromatic keeps hue and saturation.
"""
from enum import Enum

from ladle.internal.color_models import Color
from ladle.internal.converter import from_hsv, round_half_up, MAX_HUE
from ladle.internal.errors import ValidationError


class PaletteKind(Enum):
    COMPLEMENTARY = "complementary"
    ANALOGOUS = "analogous"
    TRIADIC = "triadic"
    MONOCHROMATIC = "monochromatic"

    @classmethod
    def parse(cls, name: "str | PaletteKind | None") -> "PaletteKind":
        """Resolve a palette name, falling back to ANALOGOUS for unknown names."""
        if isinstance(name, PaletteKind):
            return name
        if not isinstance(name, str):
            return cls.ANALOGOUS

        key = name.strip().lower()
        if key == "monochrome":
            return cls.MONOCHROMATIC
        try:
            return cls(key)
        except ValueError:
            return cls.ANALOGOUS


MIN_MONO_VALUE = 20
MONO_VALUE_SPAN = 80


def _with_hue(base: Color, hue: float) -> Color:
    return from_hsv(round_half_up(hue) % MAX_HUE, base.hsv.s, base.hsv.v)


def complementary(base: Color, count: int) -> list[Color]:
    if count == 1:
        return [base]
    return [_with_hue(base, base.hsv.h + 180 * i / (count - 1)) for i in range(count)]


def analogous(base: Color, count: int) -> list[Color]:
    half = count // 2
    return [_with_hue(base, base.hsv.h + 60 * (i - half) / count) for i in range(count)]


def triadic(base: Color, count: int) -> list[Color]:
    return [_with_hue(base, base.hsv.h + 120 * i) for i in range(count)]


def monochromatic(base: Color, count: int) -> list[Color]:
    if count == 1:
        return [base]

    palette: list[Color] = []
    for i in range(count):
        value = round_half_up(MIN_MONO_VALUE + MONO_VALUE_SPAN * i / (count - 1))
        palette.append(from_hsv(base.hsv.h, base.hsv.s, value))
    return palette


_BUILDERS = {
    PaletteKind.COMPLEMENTARY: complementary,
    PaletteKind.ANALOGOUS: analogous,
    PaletteKind.TRIADIC: triadic,
    PaletteKind.MONOCHROMATIC: monochromatic,
}


def generate_palette(base: Color, kind: "str | PaletteKind | None", count: int) -> list[Color]:
    """Build ``count`` colors related to ``base``.

    Unknown ``kind`` values produce an analogous palette. Raises
    ValidationError when ``count`` is not a positive integer.
    """
    if isinstance(count, bool) or not isinstance(count, int):
        raise ValidationError(f"Palette size must be an integer, got {count!r}")
    if count < 1:
        raise ValidationError(f"Palette size must be at least 1, got {count}")

    return _BUILDERS[PaletteKind.parse(kind)](base, count)
