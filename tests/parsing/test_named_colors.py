import pytest

from vibrant.named_colors import CSS_NAMED_COLORS, lookup
from vibrant.parsing import parse_rgba

samples_name_hex = {
    "aliceblue": "#f0f8ff",
    "black": "#000000",
    "cornflowerblue": "#6495ed",
    "darkslategrey": "#2f4f4f",
    "gold": "#ffd700",
    "goldenrod": "#daa520",
    "lightgoldenrodyellow": "#fafad2",
    "mediumspringgreen": "#00fa9a",
    "rebeccapurple": "#663399",
    "red": "#ff0000",
    "tan": "#d2b48c",
    "transparent": "#00000000",
    "white": "#ffffff",
    "yellowgreen": "#9acd32",
}


def test_table_size():
    # 148 CSS Color 4 keywords plus transparent
    assert len(CSS_NAMED_COLORS) == 149


def test_keywords_are_lowercase():
    assert all(name == name.lower() for name in CSS_NAMED_COLORS)


@pytest.mark.parametrize("name,hex_value", samples_name_hex.items())
def test_name_matches_hex(name, hex_value):
    expected = parse_rgba(hex_value)
    assert parse_rgba(name) == expected
    assert parse_rgba(name.upper()) == expected
    assert lookup(name.capitalize()) == expected


@pytest.mark.parametrize("name", ["RED", "red", "ReD", b"rEd"])
def test_lookup_case_insensitive(name):
    assert lookup(name) == (255, 0, 0, 255)


@pytest.mark.parametrize("name", ["", "re", "redd", "unknown", "lightgoldenrodyellowx", "réd", b"\xff\xfe\xfd"])
def test_lookup_miss(name):
    assert lookup(name) is None


def test_table_is_read_only():
    with pytest.raises(TypeError):
        CSS_NAMED_COLORS["red"] = (0, 0, 0, 0)
