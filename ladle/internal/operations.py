from dataclasses import dataclass
from random import Random
from typing import Callable

from ladle.internal import converter, palette
from ladle.internal.color_models import Color
from ladle.internal.random_color import RandomColorGenerator


@dataclass(frozen=True)
class ColorOperations:
    from_hex: Callable[[str], Color]
    from_rgb: Callable[[int, int, int], Color]
    from_hsl: Callable[[int, int, int], Color]
    from_hsv: Callable[[int, int, int], Color]
    palette: Callable[[Color, str, int], list[Color]]
    random_color: Callable[[], Color]


def default_operations(rng: Random | None = None) -> ColorOperations:
    return ColorOperations(
        from_hex=converter.from_hex,
        from_rgb=converter.from_rgb,
        from_hsl=converter.from_hsl,
        from_hsv=converter.from_hsv,
        palette=palette.generate_palette,
        random_color=RandomColorGenerator(rng).generate,
    )
