#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: randomhue/core/bounds.py

from typing import Dict, Iterator, NamedTuple, Optional, Sequence, Tuple

from . import config as c
from .conversions import hex_to_hsb
from .errors import ColorLookupError
from randomhue.shared.sanitizer import is_hex_color, leading_int

HueRange = Tuple[float, float]


class ColorDefinition(NamedTuple):
    name: str
    hue_range: Optional[HueRange]
    lower_bounds: Tuple[Tuple[int, int], ...]
    saturation_range: Tuple[int, int]
    brightness_range: Tuple[int, int]


# Minimum brightness per saturation, hand tuned per hue bucket.
# Red uses negative degrees so its range stays contiguous across 0.
COLOR_BOUNDS = (
    ("monochrome", None, [[0, 0], [100, 0]]),
    ("red", (-26, 18), [
        [20, 100], [30, 92], [40, 89], [50, 85], [60, 78],
        [70, 70], [80, 60], [90, 55], [100, 50],
    ]),
    ("orange", (18, 46), [
        [20, 100], [30, 93], [40, 88], [50, 86], [60, 85],
        [70, 70], [100, 70],
    ]),
    ("yellow", (46, 62), [
        [25, 100], [40, 94], [50, 89], [60, 86], [70, 84],
        [80, 82], [90, 80], [100, 75],
    ]),
    ("green", (62, 178), [
        [30, 100], [40, 90], [50, 85], [60, 81], [70, 74],
        [80, 64], [90, 50], [100, 40],
    ]),
    ("blue", (178, 257), [
        [20, 100], [30, 86], [40, 80], [50, 74], [60, 60],
        [70, 52], [80, 44], [90, 39], [100, 35],
    ]),
    ("purple", (257, 282), [
        [20, 100], [30, 87], [40, 79], [50, 70], [60, 65],
        [70, 59], [80, 52], [90, 45], [100, 42],
    ]),
    ("pink", (282, 334), [
        [20, 100], [30, 90], [40, 86], [60, 84], [80, 80],
        [90, 75], [100, 73],
    ]),
)


class ColorBoundsTable:
    """Named hue buckets with their saturation ranges and brightness curves."""

    def __init__(self, definitions: Sequence = ()):
        self._colors: Dict[str, ColorDefinition] = {}
        for name, hue_range, lower_bounds in definitions:
            self.define(name, hue_range, lower_bounds)

    def __iter__(self) -> Iterator[ColorDefinition]:
        return iter(self._colors.values())

    def __len__(self) -> int:
        return len(self._colors)

    def __contains__(self, name) -> bool:
        return name in self._colors

    def define(self, name: str, hue_range: Optional[HueRange], lower_bounds) -> ColorDefinition:
        """Register a bucket; lower_bounds must be sorted by saturation."""
        points = tuple((s, v) for s, v in lower_bounds)
        if not points:
            raise ValueError(f"color '{name}' needs at least one lower bound")

        s_min, b_max = points[0]
        s_max, b_min = points[-1]
        if s_min > s_max:
            raise ValueError(f"lower bounds of '{name}' are not sorted by saturation")

        definition = ColorDefinition(
            name=name,
            hue_range=tuple(hue_range) if hue_range is not None else None,
            lower_bounds=points,
            saturation_range=(s_min, s_max),
            brightness_range=(b_min, b_max),
        )
        self._colors[name] = definition
        return definition

    def lookup_by_name(self, name) -> Optional[ColorDefinition]:
        if not isinstance(name, str):
            return None
        return self._colors.get(name)

    def lookup_by_hue(self, hue: float) -> ColorDefinition:
        """Return the first bucket whose hue range contains the hue."""
        if c.RED_WRAP_START <= hue <= c.HUE_MAX:
            hue -= c.HUE_MAX

        for color in self._colors.values():
            if color.hue_range is None:
                continue
            low, high = color.hue_range
            if low <= hue <= high:
                return color

        raise ColorLookupError(hue)

    def minimum_brightness(self, hue: float, saturation: float) -> float:
        """Evaluate the bucket's lower-bound curve at the given saturation."""
        points = self.lookup_by_hue(hue).lower_bounds

        for (s1, v1), (s2, v2) in zip(points, points[1:]):
            if s1 <= saturation <= s2:
                m = (v2 - v1) / (s2 - s1)
                b = v1 - m * s1
                return m * saturation + b

        return 0

    def resolve_hue_range(self, value) -> HueRange:
        """
        Turn a hue option into a (min, max) range.

        Degrees strictly inside (0, 360) pin the hue, names give their bucket,
        hex colors pin the hue of that color. Anything else spans the circle.
        """
        if value is None or value == "":
            return c.FULL_HUE_RANGE

        number = leading_int(value)
        if number is not None and c.HUE_MIN_EXCLUSIVE < number < c.HUE_MAX:
            return (number, number)

        color = self.lookup_by_name(value)
        if color is not None:
            if color.hue_range is not None:
                return color.hue_range
        elif is_hex_color(value):
            hue = hex_to_hsb(value)[0]
            return (hue, hue)

        return c.FULL_HUE_RANGE

    def resolve_bucket_range(self, value) -> HueRange:
        """Like resolve_hue_range, but widens a single hue to its whole bucket."""
        if value is None or value == "":
            return c.FULL_HUE_RANGE

        number = leading_int(value)
        if number is not None and c.HUE_MIN_EXCLUSIVE < number < c.HUE_MAX:
            return self.lookup_by_hue(number).hue_range

        color = self.lookup_by_name(value)
        if color is not None:
            if color.hue_range is not None:
                return color.hue_range
        elif is_hex_color(value):
            return self.lookup_by_hue(hex_to_hsb(value)[0]).hue_range

        return c.FULL_HUE_RANGE


DEFAULT_TABLE = ColorBoundsTable(COLOR_BOUNDS)
