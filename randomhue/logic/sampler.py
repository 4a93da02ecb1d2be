#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: randomhue/logic/sampler.py

import math
from typing import Any, List, NamedTuple, Optional, Tuple

from randomhue.core import config as c
from randomhue.core.bounds import ColorBoundsTable, DEFAULT_TABLE
from randomhue.core.rng import RandomSource


class ColorOptions(NamedTuple):
    hue: Any = None
    luminosity: Optional[str] = None
    count: Optional[int] = None
    seed: Any = None
    format: Any = None
    alpha: Optional[float] = None


def _normalize_hue(hue: float) -> float:
    if hue < 0:
        hue += c.HUE_MAX
    if hue >= c.HUE_MAX:
        hue -= c.HUE_MAX
    return hue


class HSBSampler:
    """Picks hue, then saturation, then brightness inside the table's bounds."""

    def __init__(self, table: ColorBoundsTable = None, rng: RandomSource = None):
        self.table = table if table is not None else DEFAULT_TABLE
        self.rng = rng if rng is not None else RandomSource()

    def pick(self, state, options: ColorOptions, occupancy: List[bool] = None) -> Tuple[float, int, int]:
        hue = self.pick_hue(state, options, occupancy)
        saturation = self.pick_saturation(state, hue, options)
        brightness = self.pick_brightness(state, hue, saturation, options)
        return hue, saturation, brightness

    def pick_hue(self, state, options: ColorOptions, occupancy: List[bool] = None) -> float:
        """
        Draw a hue for the options.

        While a batch is in progress ``occupancy`` holds one flag per color.
        The hue range is split into that many equal steps and each color
        claims one; a collision moves two steps on instead of searching.
        The redraw spans one step starting at the candidate, its ends
        wrapped at 359 degrees.
        """
        if occupancy:
            low, high = self.table.resolve_bucket_range(options.hue)
            slots = len(occupancy)
            step = (high - low) / slots

            candidate = self.rng.within(state, low, high)
            q = (candidate - low) / step if step else 0
            j = min(max(math.floor(q), 0), slots - 1)

            if occupancy[j]:
                q = (q + 2) % slots
            else:
                occupancy[j] = True

            # fmod keeps the sign, so red's negative degrees survive the wrap
            sub_low = math.fmod(low + q * step, c.SUB_RANGE_WRAP)
            sub_high = math.fmod(low + (q + 1) * step, c.SUB_RANGE_WRAP)
            hue = self.rng.within(state, sub_low, sub_high)
        else:
            low, high = self.table.resolve_hue_range(options.hue)
            hue = self.rng.within(state, low, high)

        return _normalize_hue(hue)

    def pick_saturation(self, state, hue: float, options: ColorOptions) -> int:
        if options.hue == c.MONOCHROME:
            return 0

        if options.luminosity == "random":
            return self.rng.within(state, 0, c.PERCENT_MAX)

        s_min, s_max = self.table.lookup_by_hue(hue).saturation_range

        if options.luminosity == "bright":
            s_min = c.BRIGHT_MIN_SATURATION
        elif options.luminosity == "dark":
            s_min = s_max - c.DARK_SATURATION_SPAN
        elif options.luminosity == "light":
            s_max = c.LIGHT_MAX_SATURATION

        return self.rng.within(state, s_min, s_max)

    def pick_brightness(self, state, hue: float, saturation: float, options: ColorOptions) -> int:
        b_min = self.table.minimum_brightness(hue, saturation)
        b_max = c.PERCENT_MAX

        if options.luminosity == "dark":
            b_max = b_min + c.DARK_BRIGHTNESS_SPAN
        elif options.luminosity == "light":
            b_min = (b_max + b_min) / 2
        elif options.luminosity == "random":
            b_min = 0
            b_max = c.PERCENT_MAX

        return self.rng.within(state, b_min, b_max)
