#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: randomhue/core/rng.py

import math
import random

from . import config as c


class RandomSource:
    """
    Draws integers within a range, in one of two modes.

    Every call takes the generator state; its ``seed`` attribute selects the
    mode. With no seed the draw comes from ``random`` stepped by the golden
    ratio conjugate. With a seed the draw comes from a linear congruential
    generator and the advanced seed is written back to the state, so a given
    seed always replays the same sequence.
    """

    def __init__(self, rand=None):
        # Anything with a random() method; the module itself by default
        self._rand = rand if rand is not None else random

    def _next_seeded(self, state) -> float:
        state.seed = (state.seed * c.LCG_MULTIPLIER + c.LCG_INCREMENT) % c.LCG_MODULUS
        return state.seed / c.LCG_MODULUS

    def within(self, state, low: float, high: float) -> int:
        if state.seed is None:
            r = (self._rand.random() + c.GOLDEN_RATIO_CONJUGATE) % 1
            return math.floor(low + r * (high + 1 - low))

        high = high or 1
        low = low or 0
        r = self._next_seeded(state)
        return math.floor(low + r * (high - low))

    def alpha(self) -> float:
        """An unseeded float in [0, 1); never advances a seeded sequence."""
        return self._rand.random()
