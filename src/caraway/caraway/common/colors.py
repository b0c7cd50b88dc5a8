from __future__ import annotations

import colorsys
import random
from typing import Optional


def happy_color(rng: Optional[random.Random] = None) -> str:
    """Random saturated, mid-bright color as ``#rrggbb``.

    Hue is uniform, saturation stays in [0.5, 0.8) and value in [0.6, 0.9)
    so series never come out washed-out or muddy.
    """

    rng = rng or random
    h = rng.random()
    s = 0.5 + rng.random() * 0.3
    v = 0.6 + rng.random() * 0.3
    r, g, b = colorsys.hsv_to_rgb(h, s, v)
    return "#{:02x}{:02x}{:02x}".format(round(r * 255), round(g * 255), round(b * 255))
