import argparse

import pytest

from randomhue.shared.sanitizer import (
    INPUT_HANDLERS,
    expand_hex,
    is_hex_color,
    leading_int,
    parse_seed,
)


@pytest.mark.parametrize(
    "value, seed",
    [
        (1234, 1234),
        ("1234", 1234),
        (" -7 ", -7),
        (12.0, 12),
    ],
)
def test_parse_seed_accepts_integers(value, seed):
    result = parse_seed(value)
    assert result.ok
    assert result.seed == seed


@pytest.mark.parametrize("value", ["abc", "12.5", 12.5, True, None, float("nan"), [1]])
def test_parse_seed_rejects_with_reason(value):
    result = parse_seed(value)
    assert not result.ok
    assert result.seed is None
    assert "seed must be" in result.reason


def test_leading_int():
    assert leading_int("120deg") == 120
    assert leading_int(45.9) == 45
    assert leading_int("red") is None
    assert leading_int(None) is None
    assert leading_int(False) is None


def test_hex_helpers():
    assert is_hex_color("#abc")
    assert is_hex_color("A0B1C2")
    assert not is_hex_color("#abcd")
    assert not is_hex_color(123)
    assert expand_hex("#f0a") == "ff00aa"
    assert expand_hex("a0b1c2") == "a0b1c2"


def test_hue_handler():
    handle = INPUT_HANDLERS["hue"]
    assert handle(" Blue ") == "blue"
    assert handle("#abc") == "#abc"
    assert handle("200") == "200"
    with pytest.raises(argparse.ArgumentTypeError):
        handle("zzz")


def test_format_handler_resolves_aliases():
    handle = INPUT_HANDLERS["format"]
    assert handle("rgb-array") == "rgbArray"
    assert handle("HSLA") == "hsla"
    with pytest.raises(argparse.ArgumentTypeError):
        handle("cmyk")


def test_count_and_alpha_are_clamped():
    assert INPUT_HANDLERS["count"]("0") == 1
    assert INPUT_HANDLERS["count"]("9999") == 500
    assert INPUT_HANDLERS["alpha"]("1.5") == 1.0
    assert INPUT_HANDLERS["alpha"]("0.3") == 0.3
