#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: randomhue/core/config.py

# ==========================================
# Hue Circle & Scaling Constants
# ==========================================

HUE_MAX = 360                      # Full circle degrees
HUE_MIN_EXCLUSIVE = 0              # Numeric hue inputs must be strictly above this
PERCENT_MAX = 100                  # Upper bound for saturation and brightness
RGB_MAX = 255                      # 8-bit color depth limit
HUE_SECTORS = 6                    # Sextants of the HSV hexcone

# Red straddles 0 degrees; hues at or above this are shifted by -HUE_MAX
RED_WRAP_START = 334

# Batch redraw bounds are wrapped at this many degrees
SUB_RANGE_WRAP = 359

# Full-circle range used when no hue constraint applies
FULL_HUE_RANGE = (0, 360)

# ==========================================
# Random Source Constants
# ==========================================

# Golden ratio conjugate, steps unseeded draws apart on the circle
GOLDEN_RATIO_CONJUGATE = 0.618033988749895

# Linear congruential generator (Source: indiegamr "repeatable random numbers")
LCG_MULTIPLIER = 9301
LCG_INCREMENT = 49297
LCG_MODULUS = 233280

# ==========================================
# Luminosity Clamps
# ==========================================

BRIGHT_MIN_SATURATION = 55         # Saturation floor for "bright"
DARK_SATURATION_SPAN = 10          # "dark" keeps the top 10 points of saturation
LIGHT_MAX_SATURATION = 55          # Saturation ceiling for "light"
DARK_BRIGHTNESS_SPAN = 20          # "dark" brightness ceiling above the curve

LUMINOSITIES = ("bright", "dark", "light", "random")

HUE_NAMES = ("red", "orange", "yellow", "green", "blue", "purple", "pink", "monochrome")

MONOCHROME = "monochrome"

# ==========================================
# Application Limits
# ==========================================

MAX_COUNT = 500                    # Colors allowed in one CLI batch
HSL_SATURATION_PRECISION = 10000   # Rounds HSL saturation to 2 decimals of a percent

# Diagnostic tag prepended to every trace entry
TRACE_TAG = "[RandomColor]"

# Output format aliases accepted by ColorFormat.parse
FORMAT_ALIASES = {
    'hex': 'hex',
    'rgb': 'rgb',
    'rgba': 'rgba',
    'rgbarray': 'rgbArray',
    'rgb_array': 'rgbArray',
    'hsl': 'hsl',
    'hsla': 'hsla',
    'hslarray': 'hslArray',
    'hsl_array': 'hslArray',
    'hsvarray': 'hsvArray',
    'hsv_array': 'hsvArray',
    'hsbarray': 'hsvArray',
    'hsb_array': 'hsvArray',
}

# ==========================================
# CLI UI
# ==========================================

MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
    "debug": "\033[1;2;37m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
    "debug": "\033[2;37m",
}

RESET = "\033[0m"
BOLD_WHITE = "\033[1;37m"
