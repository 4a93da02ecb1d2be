#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: randomhue/logic/generator.py

from typing import List, Optional, Tuple, Union

from randomhue.core import config as c
from randomhue.core.bounds import ColorBoundsTable
from randomhue.core.rng import RandomSource
from randomhue.shared.logger import NullSink
from randomhue.shared.sanitizer import parse_seed
from .formats import ColorFormat, ColorValue, format_color
from .sampler import ColorOptions, HSBSampler


class GeneratorState:
    """Mutable state of one generator; the random source advances ``seed``."""

    def __init__(self, seed: Optional[int] = None, verbose: bool = False):
        self.seed = seed
        self.verbose = verbose
        self.history: List[ColorValue] = []


class RandomColorGenerator:
    """
    Generates pleasant random colors.

    Example::

        generator = RandomColorGenerator()
        generator.generate(hue="blue", luminosity="bright", count=3)
        generator.set_seed(1234)
        generator.generate(format="rgb")

    ``sink`` receives trace entries while verbose mode is on; it only needs a
    ``debug(message, *context)`` method. ``rand`` replaces the ``random``
    module as the source of unseeded draws.
    """

    def __init__(self, sink=None, rand=None, table: ColorBoundsTable = None):
        self._state = GeneratorState()
        self._sink = sink if sink is not None else NullSink()
        self._rng = RandomSource(rand)
        self._sampler = HSBSampler(table, self._rng)

    @property
    def seed(self) -> Optional[int]:
        return self._state.seed

    @property
    def verbose(self) -> bool:
        return self._state.verbose

    @property
    def history(self) -> Tuple[ColorValue, ...]:
        return tuple(self._state.history)

    def set_seed(self, value) -> None:
        result = parse_seed(value)
        if result.ok:
            self._state.seed = result.seed
        else:
            self._trace(f"{result.reason}. Seed is not updated.")

    def set_verbose(self, verbose: bool) -> None:
        self._state.verbose = bool(verbose)

    def _trace(self, message: str, *context) -> None:
        if self._state.verbose:
            self._sink.debug(f"{c.TRACE_TAG} {message}", *context)

    def _apply_seed(self, options: ColorOptions) -> None:
        if options.seed is None:
            return
        result = parse_seed(options.seed)
        if result.ok:
            self._state.seed = result.seed
        else:
            self._trace(f"{result.reason}. Seed is reset.")
            self._state.seed = None

    def generate(self, **options) -> Union[ColorValue, List[ColorValue]]:
        """
        Generate one color, or ``count`` colors.

        Keyword options: ``hue`` (bucket name, degrees or hex color),
        ``luminosity`` (bright, dark, light, random), ``count``, ``seed``,
        ``format`` (see ColorFormat) and ``alpha`` for rgba/hsla.
        A batch of one returns the bare value, larger batches a list.
        """
        opts = ColorOptions(**options)
        self._apply_seed(opts)

        count = opts.count
        if count is None:
            return self._new_color(opts)

        if count < 1:
            self._trace(f"Count must be at least 1, got {count}. Generating a single color.")
            return self._new_color(opts)

        self._trace(f"Generating {count} color{'s' if count > 1 else ''}")
        occupancy = [False] * count
        colors = [self._new_color(opts, occupancy) for _ in range(count)]
        self._trace("Completed generation of colors")
        self._trace("--- New colors ---", colors)
        self._trace("--- History ---", self.history)
        return colors if count > 1 else colors[0]

    def _new_color(self, options: ColorOptions, occupancy: List[bool] = None) -> ColorValue:
        hsb = self._sampler.pick(self._state, options, occupancy)

        fmt = ColorFormat.parse(options.format)
        self._trace(f"Returning {fmt.value}")

        alpha = options.alpha
        if fmt.needs_alpha and alpha is None:
            alpha = self._rng.alpha()

        color = format_color(hsb, fmt, alpha)
        self._trace("Color generated", color)
        self._state.history.append(color)
        return color


def random_color(**options) -> Union[ColorValue, List[ColorValue]]:
    """One-shot helper using a fresh generator."""
    return RandomColorGenerator().generate(**options)
