EOF = ""


class Cursor:
    """Position over a code string with one character of lookahead"""

    def __init__(self, code: str) -> None:
        self.code = code
        self._pos = 0

    @property
    def position(self) -> int:
        return self._pos

    @property
    def at_end(self) -> bool:
        return self._pos >= len(self.code)

    def peek(self) -> str:
        if self.at_end:
            return EOF
        return self.code[self._pos]

    def advance(self) -> str:
        char = self.peek()
        if char != EOF:
            self._pos += 1
        return char

    def skip_whitespace(self) -> int:
        start = self._pos
        while not self.at_end and self.code[self._pos].isspace():
            self._pos += 1
        return self._pos - start
