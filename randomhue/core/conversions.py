#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: randomhue/core/conversions.py

import math
from typing import List, Tuple

from . import config as c
from .errors import ConversionError
from randomhue.shared.sanitizer import expand_hex, is_hex_color


def hsb_to_rgb(h: float, s: float, v: float) -> Tuple[int, int, int]:
    """Convert HSB (degrees, percent, percent) to floored 8-bit RGB."""
    # The sextant formula misbehaves exactly on the 0/360 seam
    if h == 0:
        h = 1
    if h == c.HUE_MAX:
        h = c.HUE_MAX - 1
    if not 0 <= h < c.HUE_MAX:
        h = h % c.HUE_MAX

    h = h / c.HUE_MAX
    s = s / c.PERCENT_MAX
    v = v / c.PERCENT_MAX

    h_i = math.floor(h * c.HUE_SECTORS)
    f = h * c.HUE_SECTORS - h_i
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)

    if h_i == 0:
        r, g, b = v, t, p
    elif h_i == 1:
        r, g, b = q, v, p
    elif h_i == 2:
        r, g, b = p, v, t
    elif h_i == 3:
        r, g, b = p, q, v
    elif h_i == 4:
        r, g, b = t, p, v
    else:
        r, g, b = v, p, q

    return (
        math.floor(r * c.RGB_MAX),
        math.floor(g * c.RGB_MAX),
        math.floor(b * c.RGB_MAX),
    )


def hsb_to_hsl(h: float, s: float, v: float) -> List[float]:
    """Convert HSB to HSL, both with percent saturation and lightness."""
    s = s / c.PERCENT_MAX
    v = v / c.PERCENT_MAX
    k = (2 - s) * v
    denom = k if k < 1 else 2 - k
    if denom == 0:
        # Black and white carry no saturation
        saturation = 0
    else:
        # Half-up rounding, not Python's banker's rounding
        saturation = math.floor((s * v) / denom * c.HSL_SATURATION_PRECISION + 0.5) / 100
    return [h, saturation, k / 2 * c.PERCENT_MAX]


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Convert 8-bit RGB components to a lowercase '#rrggbb' string."""
    return f"#{int(r):02x}{int(g):02x}{int(b):02x}"


def hsb_to_hex(h: float, s: float, v: float) -> str:
    return rgb_to_hex(*hsb_to_rgb(h, s, v))


def hex_to_rgb(hex_code: str) -> Tuple[int, int, int]:
    """Convert a 3- or 6-digit hex string (with or without '#') to RGB."""
    if not is_hex_color(hex_code):
        raise ConversionError(f"invalid hex color: '{hex_code}'")
    h = expand_hex(hex_code)
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


def hex_to_hsb(hex_code: str) -> Tuple[float, float, float]:
    """
    Convert a hex string to HSB.

    Hue is in degrees, saturation and brightness are fractions in [0, 1].
    """
    r, g, b = (channel / c.RGB_MAX for channel in hex_to_rgb(hex_code))

    cmax = max(r, g, b)
    delta = cmax - min(r, g, b)
    saturation = delta / cmax if cmax else 0

    if delta == 0:
        return 0, saturation, cmax
    if cmax == r:
        return 60 * (((g - b) / delta) % 6), saturation, cmax
    if cmax == g:
        return 60 * ((b - r) / delta + 2), saturation, cmax
    if cmax == b:
        return 60 * ((r - g) / delta + 4), saturation, cmax

    raise ConversionError(f"could not resolve the dominant channel of '{hex_code}'")
