#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: randomhue/logic/formats.py

from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence, Union

from randomhue.core import config as c
from randomhue.core import conversions as conv

ColorValue = Union[str, List[float]]


class ColorFormat(Enum):
    HEX = "hex"
    RGB = "rgb"
    RGBA = "rgba"
    RGB_ARRAY = "rgbArray"
    HSL = "hsl"
    HSLA = "hsla"
    HSL_ARRAY = "hslArray"
    HSV_ARRAY = "hsvArray"

    @classmethod
    def parse(cls, value) -> "ColorFormat":
        """Resolve a format name or alias; unknown or empty names mean hex."""
        if isinstance(value, cls):
            return value
        if not value:
            return cls.HEX
        key = str(value).replace("-", "_").lower()
        return cls(c.FORMAT_ALIASES.get(key, cls.HEX.value))

    @property
    def needs_alpha(self) -> bool:
        return self in (ColorFormat.RGBA, ColorFormat.HSLA)


def format_number(value: float) -> str:
    """Print integral floats without the trailing '.0'."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _join(values: Sequence[float]) -> str:
    return ", ".join(format_number(v) for v in values)


def _hex(hsb, alpha) -> str:
    return conv.hsb_to_hex(*hsb)


def _rgb(hsb, alpha) -> str:
    return f"rgb({_join(conv.hsb_to_rgb(*hsb))})"


def _rgba(hsb, alpha) -> str:
    return f"rgba({_join(conv.hsb_to_rgb(*hsb))}, {format_number(alpha)})"


def _rgb_array(hsb, alpha) -> List[int]:
    return list(conv.hsb_to_rgb(*hsb))


def _hsl(hsb, alpha) -> str:
    h, s, l = conv.hsb_to_hsl(*hsb)
    return f"hsl({format_number(h)}, {format_number(s)}%, {format_number(l)}%)"


def _hsla(hsb, alpha) -> str:
    h, s, l = conv.hsb_to_hsl(*hsb)
    return f"hsla({format_number(h)}, {format_number(s)}%, {format_number(l)}%, {format_number(alpha)})"


def _hsl_array(hsb, alpha) -> List[float]:
    return conv.hsb_to_hsl(*hsb)


def _hsv_array(hsb, alpha) -> List[float]:
    return list(hsb)


FORMATTERS: Dict[ColorFormat, Callable] = {
    ColorFormat.HEX: _hex,
    ColorFormat.RGB: _rgb,
    ColorFormat.RGBA: _rgba,
    ColorFormat.RGB_ARRAY: _rgb_array,
    ColorFormat.HSL: _hsl,
    ColorFormat.HSLA: _hsla,
    ColorFormat.HSL_ARRAY: _hsl_array,
    ColorFormat.HSV_ARRAY: _hsv_array,
}


def format_color(hsb, fmt: ColorFormat, alpha: Optional[float] = None) -> ColorValue:
    """Render an HSB triple in the requested format."""
    if fmt.needs_alpha and alpha is None:
        raise ValueError(f"format '{fmt.value}' needs an alpha value")
    return FORMATTERS[fmt](hsb, alpha)
