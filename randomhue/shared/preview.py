#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: randomhue/shared/preview.py

import os
import sys

from randomhue.core import config as c
from randomhue.core.conversions import hex_to_rgb


def ensure_truecolor() -> None:
    """Ensure the COLORTERM environment variable is set to truecolor."""
    if sys.platform == "win32":
        return
    if os.environ.get("COLORTERM") != "truecolor":
        os.environ["COLORTERM"] = "truecolor"


def print_swatch(hex_code: str, label: str, end: str = "\n") -> None:
    """Print a 16-column truecolor block followed by the color's label."""
    r, g, b = hex_to_rgb(hex_code)
    print(f"\033[48;2;{r};{g};{b}m                {c.RESET}  {c.BOLD_WHITE}{label}{c.RESET}", end=end)
