import pytest

from vibrant.errors import VibrantError
from vibrant.parsing.cursor import Cursor
from vibrant.parsing.function import (
    FunctionKind,
    match_function_name,
    parse_arguments,
    parse_css_function,
)
from vibrant.parsing.values import (
    CssValue,
    Unit,
    consume_css_value,
    to_hue,
    to_lab_ab,
    to_lch_chroma,
    to_ok_lightness,
    to_oklab_ab,
    to_percent,
    to_u8,
    to_unit,
)
from vibrant.receiver import recv_init


def num(value):
    return CssValue(value, Unit.NUMBER)


def pct(value):
    return CssValue(value, Unit.PERCENT)


@pytest.mark.parametrize("text,kind,pos", [
    (b"rgb(", FunctionKind.RGB, 3),
    (b"rgba(", FunctionKind.RGB, 3),
    (b"hsl(", FunctionKind.HSL, 3),
    (b"hwb(", FunctionKind.HWB, 3),
    (b"lab(", FunctionKind.LAB, 3),
    (b"lch(", FunctionKind.LCH, 3),
    (b"oklab(", FunctionKind.OKLAB, 5),
    (b"oklch(", FunctionKind.OKLCH, 5),
])
def test_match_function_name(text, kind, pos):
    cursor = Cursor(text)
    assert match_function_name(cursor) is kind
    assert cursor.pos == pos


@pytest.mark.parametrize("text", [b"RGB(", b"rbg(", b"xxx(", b"red", b"ok("])
def test_match_function_name_miss(text):
    cursor = Cursor(text)
    assert match_function_name(cursor) is None
    assert cursor.pos == 0


def test_consume_css_value_units():
    cursor = Cursor(b"50% 7")
    assert consume_css_value(cursor) == pct(50)
    cursor.consume_whitespace()
    assert consume_css_value(cursor) == num(7)
    assert consume_css_value(cursor) is None


def test_parse_arguments_default_alpha():
    args = parse_arguments(Cursor(b"(1, 2%, 3)"), alpha_variant=False)
    assert args == [num(1), pct(2), num(3), num(1)]


def test_parse_arguments_slash_alpha():
    args = parse_arguments(Cursor(b"( 1 2 3 / 40% )  "), alpha_variant=False)
    assert args == [num(1), num(2), num(3), pct(40)]


def test_parse_arguments_alpha_variant():
    args = parse_arguments(Cursor(b"(1 2 3 0.5)"), alpha_variant=True)
    assert args[3] == num(0.5)


@pytest.mark.parametrize("text,alpha_variant", [
    (b"(1, 2 3)", False),
    (b"(1 2, 3)", False),
    (b"(1, 2, 3 / 1", False),
    (b"(1, 2, 3) x", False),
    (b"(1, 2, 3, 1)", False),
    (b"(1, 2, 3 / 1)", True),
    (b"(1, 2, 3)", True),
    (b"1, 2, 3)", False),
])
def test_parse_arguments_errors(text, alpha_variant):
    with pytest.raises(VibrantError):
        parse_arguments(Cursor(text), alpha_variant)


def test_whitespace_before_paren():
    receiver = parse_css_function(b"rgb (1, 2, 3)", recv_init())
    assert tuple(int(c) for c in receiver.value) == (1, 2, 3, 255)


def test_short_input_is_not_a_function():
    assert parse_css_function(b"rgb(0,0,0", recv_init()) is None


def test_unknown_name_is_not_a_function():
    assert parse_css_function(b"xxx(0, 0, 0)", recv_init()) is None


def test_percent_hue_rejected():
    with pytest.raises(VibrantError):
        parse_css_function(b"hsl(50%, 50%, 50%)", recv_init())
    with pytest.raises(VibrantError):
        parse_css_function(b"oklch(0.5 0.1 10%)", recv_init())


@pytest.mark.parametrize("value,expected", [
    (num(0), 0),
    (num(127.4), 127),
    (num(127.5), 128),
    (num(300), 255),
    (num(-20), 0),
    (pct(50), 128),
    (pct(100), 255),
    (pct(150), 255),
    (pct(-5), 0),
])
def test_to_u8(value, expected):
    assert to_u8(value) == expected


@pytest.mark.parametrize("value,expected", [
    (num(0.25), 0.25),
    (num(2), 1.0),
    (num(-1), 0.0),
    (pct(25), 0.25),
    (pct(250), 1.0),
])
def test_to_unit(value, expected):
    assert float(to_unit(value)) == pytest.approx(expected)
    assert float(to_ok_lightness(value)) == pytest.approx(expected)


def test_to_percent_ignores_unit():
    assert float(to_percent(num(40))) == 40
    assert float(to_percent(pct(40))) == 40
    assert float(to_percent(num(140))) == 100
    assert float(to_percent(pct(-1))) == 0


def test_scaled_percent_fields():
    assert float(to_lab_ab(pct(100))) == pytest.approx(125)
    assert float(to_lab_ab(pct(-200))) == pytest.approx(-125)
    assert to_lab_ab(num(-300)) == -300
    assert float(to_lch_chroma(pct(100))) == pytest.approx(150)
    assert float(to_lch_chroma(pct(-10))) == 0
    assert to_lch_chroma(num(230)) == 230
    assert float(to_oklab_ab(pct(100))) == pytest.approx(0.4)
    assert float(to_oklab_ab(pct(-50))) == pytest.approx(-0.2)
    assert to_oklab_ab(num(0.5)) == 0.5


def test_to_hue():
    assert to_hue(num(-30)) == -30
    with pytest.raises(VibrantError):
        to_hue(pct(10))
