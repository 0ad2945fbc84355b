from varcalc.cursor import EOF, Cursor


def test_peek_does_not_consume() -> None:
    cursor = Cursor("ab")
    assert cursor.peek() == "a"
    assert cursor.peek() == "a"
    assert cursor.position == 0


def test_advance_is_idempotent_at_end() -> None:
    cursor = Cursor("ab")
    assert cursor.advance() == "a"
    assert cursor.advance() == "b"
    assert cursor.at_end
    assert cursor.advance() == EOF
    assert cursor.advance() == EOF
    assert cursor.peek() == EOF
    assert cursor.position == 2


def test_empty_input() -> None:
    cursor = Cursor("")
    assert cursor.at_end
    assert cursor.peek() == EOF
    assert cursor.skip_whitespace() == 0


def test_skip_whitespace() -> None:
    cursor = Cursor(" \t\n x ")
    assert cursor.skip_whitespace() == 4
    assert cursor.peek() == "x"
    assert cursor.skip_whitespace() == 0
    cursor.advance()
    assert cursor.skip_whitespace() == 1
    assert cursor.at_end
