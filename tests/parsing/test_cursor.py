import pytest

from vibrant.parsing.cursor import Cursor


def test_peek_and_end():
    cursor = Cursor(b"ab")
    assert cursor.peek() == ord("a")
    cursor.advance_to(2)
    assert cursor.peek() is None
    assert cursor.at_end()


def test_consume_if_is_exact():
    cursor = Cursor(b"oklab(")
    assert not cursor.consume_if(b"oklch")
    assert cursor.pos == 0
    assert cursor.consume_if(b"oklab")
    assert cursor.peek() == ord("(")


def test_consume_if_respects_end():
    cursor = Cursor(b"rgb(", end=2)
    assert not cursor.consume_if(b"rgb")


def test_consume_whitespace_counts_spaces_and_tabs():
    cursor = Cursor(b" \t \n")
    assert cursor.consume_whitespace() == 3
    assert cursor.peek() == ord("\n")


@pytest.mark.parametrize("pos", [0, 5])
def test_advance_to_rejects_backwards_or_past_end(pos):
    cursor = Cursor(b"1234")
    cursor.advance_to(1)
    with pytest.raises(ValueError):
        cursor.advance_to(pos)
