import pytest

from randomhue.core.bounds import DEFAULT_TABLE, ColorBoundsTable
from randomhue.core.errors import ColorLookupError


CHROMATIC = ["red", "orange", "yellow", "green", "blue", "purple", "pink"]


def test_table_has_seven_buckets_plus_monochrome():
    names = [color.name for color in DEFAULT_TABLE]
    assert sorted(names) == sorted(CHROMATIC + ["monochrome"])
    assert DEFAULT_TABLE.lookup_by_name("monochrome").hue_range is None


def test_chromatic_buckets_cover_the_circle_without_gaps():
    ranges = sorted(DEFAULT_TABLE.lookup_by_name(n).hue_range for n in CHROMATIC)
    assert ranges[0][0] == -26
    assert ranges[-1][1] == 334
    for (_, prev_high), (low, _) in zip(ranges, ranges[1:]):
        assert low == prev_high
    assert ranges[-1][1] - ranges[0][0] == 360


def test_saturation_ranges_are_ordered():
    for color in DEFAULT_TABLE:
        assert color.saturation_range[0] <= color.saturation_range[1]


def test_derived_ranges():
    red = DEFAULT_TABLE.lookup_by_name("red")
    assert red.saturation_range == (20, 100)
    assert red.brightness_range == (50, 100)
    assert DEFAULT_TABLE.lookup_by_name("yellow").saturation_range == (25, 100)
    assert DEFAULT_TABLE.lookup_by_name("monochrome").brightness_range == (0, 0)


@pytest.mark.parametrize(
    "hue, name",
    [
        (0, "red"),
        (18, "red"),
        (19, "orange"),
        (50, "yellow"),
        (100, "green"),
        (200, "blue"),
        (270, "purple"),
        (333, "pink"),
        (334, "red"),
        (340, "red"),
        (360, "red"),
    ],
)
def test_lookup_by_hue(hue, name):
    assert DEFAULT_TABLE.lookup_by_hue(hue).name == name


def test_lookup_by_hue_outside_table_raises():
    with pytest.raises(ColorLookupError):
        DEFAULT_TABLE.lookup_by_hue(400)


def test_lookup_by_name_missing():
    assert DEFAULT_TABLE.lookup_by_name("teal") is None
    assert DEFAULT_TABLE.lookup_by_name(None) is None


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, (0, 360)),
        ("", (0, 360)),
        (120, (120, 120)),
        ("120", (120, 120)),
        (0, (0, 360)),
        (360, (0, 360)),
        ("red", (-26, 18)),
        ("monochrome", (0, 360)),
        ("#00ff00", (120, 120)),
        ("0f0", (120, 120)),
        ("#ff0000", (0, 0)),
        ("garbage", (0, 360)),
    ],
)
def test_resolve_hue_range(value, expected):
    assert DEFAULT_TABLE.resolve_hue_range(value) == expected


def test_resolve_hue_range_stays_within_domain():
    for name in CHROMATIC + ["monochrome"]:
        low, high = DEFAULT_TABLE.resolve_hue_range(name)
        assert -26 <= low <= high <= 360


def test_resolve_bucket_range_widens_single_hues():
    assert DEFAULT_TABLE.resolve_bucket_range(100) == (62, 178)
    assert DEFAULT_TABLE.resolve_bucket_range("#0000ff") == (178, 257)
    assert DEFAULT_TABLE.resolve_bucket_range("pink") == (282, 334)
    assert DEFAULT_TABLE.resolve_bucket_range(None) == (0, 360)


def test_minimum_brightness_interpolates():
    assert DEFAULT_TABLE.minimum_brightness(79, 46) == 87
    assert DEFAULT_TABLE.minimum_brightness(0, 50) == pytest.approx(85)
    assert DEFAULT_TABLE.minimum_brightness(340, 45) == pytest.approx(87)
    # green's curve starts at saturation 30
    assert DEFAULT_TABLE.minimum_brightness(120, 10) == 0


def test_define_custom_table():
    table = ColorBoundsTable()
    table.define("teal", (150, 200), [[10, 90], [100, 40]])
    teal = table.lookup_by_hue(170)
    assert teal.name == "teal"
    assert teal.saturation_range == (10, 100)
    assert teal.brightness_range == (40, 90)
    assert len(table) == 1
    assert "teal" in table


def test_define_rejects_unsorted_bounds():
    table = ColorBoundsTable()
    with pytest.raises(ValueError):
        table.define("bad", (0, 10), [[80, 50], [20, 90]])
