from dataclasses import dataclass


@dataclass(frozen=True)
class RGB:
    r: int
    g: int
    b: int


@dataclass(frozen=True)
class HSL:
    h: int
    s: int
    l: int


@dataclass(frozen=True)
class HSV:
    h: int
    s: int
    v: int


@dataclass(frozen=True)
class Color:
    hex: str
    rgb: RGB
    hsl: HSL
    hsv: HSV

    def __str__(self):
        return f"Color({self.hex}, hsv:{self.hsv.h}/{self.hsv.s}/{self.hsv.v})"
