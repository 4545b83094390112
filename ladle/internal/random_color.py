from random import Random
from secrets import SystemRandom

from ladle.internal.color_models import Color
from ladle.internal.converter import from_hsv


MIN_SATURATION = 50
MIN_VALUE = 50


class RandomColorGenerator:
    """Random colors kept away from very dark or washed-out tones."""

    def __init__(self, rng: Random | None = None):
        self._rng: Random = rng if rng is not None else SystemRandom()

    def generate(self) -> Color:
        hue = self._rng.randint(0, 359)
        saturation = self._rng.randint(MIN_SATURATION, 100)
        value = self._rng.randint(MIN_VALUE, 100)
        return from_hsv(hue, saturation, value)
