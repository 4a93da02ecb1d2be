#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: randomhue/core/errors.py


class RandomHueError(Exception):
    """Base class for errors raised by randomhue."""


class ColorLookupError(RandomHueError):
    """A hue matched no bucket of the bounds table."""

    def __init__(self, hue):
        super().__init__(f"no color bucket contains hue {hue}")
        self.hue = hue


class ConversionError(RandomHueError):
    """A color value could not be converted."""
