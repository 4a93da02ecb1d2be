#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: randomhue/shared/sanitizer.py

import argparse
import re
from typing import NamedTuple, Optional

from randomhue.core import config as c

# 3- or 6-digit hex color, optional leading '#'
HEX_PATTERN = re.compile(r"^#?([0-9a-f]{3}|[0-9a-f]{6})$", re.IGNORECASE)

# Leading integer of a string, the way a lenient integer prefix parse reads it
LEADING_INT_PATTERN = re.compile(r"^\s*([+-]?\d+)")

STRICT_INT_PATTERN = re.compile(r"^\s*[+-]?\d+\s*$")


def _sanitize_for_log(value) -> str:
    """
    Cleans up the input value for safe terminal logging by removing
    excessive whitespace and newlines.
    """
    if value is None:
        return ""
    return " ".join(str(value).split())


def is_hex_color(value) -> bool:
    return isinstance(value, str) and HEX_PATTERN.match(value) is not None


def expand_hex(value: str) -> str:
    """
    Strips the '#' and expands CSS shorthand, e.g. 'F0A' -> 'FF00AA'.
    The caller is expected to have checked the value with is_hex_color.
    """
    h = value.lstrip("#")
    if len(h) == 3:
        return "".join([ch * 2 for ch in h])
    return h


def leading_int(value) -> Optional[int]:
    """
    Reads a hue number from an int, a float, or the leading digits of a string.
    Returns None when the value carries no number at all.
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        if value != value:
            return None
        return int(value)
    m = LEADING_INT_PATTERN.match(str(value))
    if not m:
        return None
    return int(m.group(1))


class SeedResult(NamedTuple):
    seed: Optional[int]
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.reason is None


def parse_seed(value) -> SeedResult:
    """
    Validates a seed option. Integers and integral floats are accepted as is,
    strings must hold a whole integer. Everything else is rejected with a reason.
    """
    if isinstance(value, bool):
        return SeedResult(None, f"seed must be an integer, got boolean {value}")
    if isinstance(value, int):
        return SeedResult(value)
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return SeedResult(None, f"seed must be a finite number, got {value}")
        if not value.is_integer():
            return SeedResult(None, f"seed must be an integer, got {value}")
        return SeedResult(int(value))
    if isinstance(value, str) and STRICT_INT_PATTERN.match(value):
        return SeedResult(int(value))
    return SeedResult(None, f"seed must be an integer, got '{_sanitize_for_log(value)}'")


def _extract_alpha_only(value: str) -> str:
    """Lowercased letters and underscores only; cleans up names and identifiers."""
    if value is None:
        return ""
    s = str(value).replace(" ", "").lower()
    return "".join(re.findall(r"[a-z_]", s))


def _extract_signed_float(value: str) -> Optional[float]:
    """
    Extracts a floating-point number from a string, preserving the sign and
    keeping only the first decimal point encountered.
    """
    if value is None:
        return None

    s = str(value)
    is_negative = s.strip().startswith("-")

    raw_chars = re.findall(r"[0-9\.]", s)
    if not raw_chars:
        return None

    clean_str = ""
    dot_seen = False
    for char in raw_chars:
        if char == '.':
            if not dot_seen:
                clean_str += char
                dot_seen = True
        else:
            clean_str += char

    if not clean_str or clean_str == '.':
        return None

    val = float(clean_str)
    return -val if is_negative else val


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================

def handle_hue(v: str) -> str:
    """Validator for hue inputs: a bucket name, a degree value or a hex color."""
    raw = _sanitize_for_log(v)
    if is_hex_color(raw):
        return raw
    if leading_int(raw) is not None:
        return raw
    cleaned = _extract_alpha_only(raw)
    if cleaned in c.HUE_NAMES:
        return cleaned
    raise argparse.ArgumentTypeError(
        f"invalid hue: '{raw}' (use a name, a degree value or a hex color)"
    )


def handle_string_clean(v: str) -> str:
    """Validator for pure alphabetical string options (e.g., luminosity names)."""
    cleaned = _extract_alpha_only(v)
    if not cleaned:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid string value: '{raw}'")
    return cleaned


def handle_format(v: str) -> str:
    """Validator for output format names; resolves aliases to canonical names."""
    cleaned = _extract_alpha_only(v)
    if cleaned not in c.FORMAT_ALIASES:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid format: '{raw}'")
    return c.FORMAT_ALIASES[cleaned]


def handle_seed(v: str) -> int:
    """Validator for seeds; rejects anything that is not a whole integer."""
    result = parse_seed(_sanitize_for_log(v))
    if not result.ok:
        raise argparse.ArgumentTypeError(result.reason)
    return result.seed


def handle_int_range(min_v: int, max_v: int):
    """
    Factory function returning a validator that ensures an integer
    is clamped within a specific [min_v, max_v] range.
    """
    def validator(v: str) -> int:
        val = leading_int(v)

        if val is None:
            raw = _sanitize_for_log(v)
            raise argparse.ArgumentTypeError(f"invalid integer value: '{raw}'")

        if val < min_v:
            val = min_v
        elif val > max_v:
            val = max_v
        return val
    return validator


def handle_float_range(min_v: float, max_v: float):
    """
    Factory function returning a validator that ensures a float
    is clamped within a specific [min_v, max_v] range.
    """
    def validator(v: str) -> float:
        val = _extract_signed_float(v)

        if val is None:
            raw = _sanitize_for_log(v)
            raise argparse.ArgumentTypeError(f"invalid float value: '{raw}'")

        if val < min_v:
            val = min_v
        elif val > max_v:
            val = max_v
        return val
    return validator


# Maps CLI argument types to their parsing functions
INPUT_HANDLERS = {
    "hue": handle_hue,
    "luminosity": handle_string_clean,
    "list_format": handle_string_clean,
    "format": handle_format,
    "seed": handle_seed,
    "count": handle_int_range(1, c.MAX_COUNT),
    "alpha": handle_float_range(0.0, 1.0),
}
