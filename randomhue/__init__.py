#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: randomhue/__init__.py

__version__ = "v0.1.0"

from randomhue.core.bounds import DEFAULT_TABLE, ColorBoundsTable, ColorDefinition
from randomhue.core.errors import ColorLookupError, ConversionError, RandomHueError
from randomhue.logic.formats import ColorFormat
from randomhue.logic.generator import RandomColorGenerator, random_color

__all__ = [
    "ColorBoundsTable",
    "ColorDefinition",
    "ColorFormat",
    "ColorLookupError",
    "ConversionError",
    "DEFAULT_TABLE",
    "RandomColorGenerator",
    "RandomHueError",
    "random_color",
]
