import string
from typing import Mapping

from varcalc.cursor import EOF, Cursor
from varcalc.errors import ErrorKind, ParserError
from varcalc.value import INT_MAX, Integer, Text, Value, fits_int32

SIGNS = frozenset("+-")
OPERATORS = frozenset("+-*")
DIGITS = frozenset(string.digits)
IDENTIFIER_START = frozenset(string.ascii_letters + "_")
IDENTIFIER_CHARS = IDENTIFIER_START | DIGITS

OPERATOR_NAMES = {
    "+": "addition",
    "-": "subtraction",
    "*": "multiplication",
}

# each level costs up to five frames: factor, signed factor, parenthesized, expression, term
MAX_NESTING = 100


def evaluate(code: str, variables: Mapping[str, Value]) -> Value:
    """Evaluates a single right-hand side: a string literal or an integer expression.

    Variables are only read, never modified. Raises ParserError on the first problem found.
    """
    return ExpressionParser(code, variables).parse()


class ExpressionParser:
    """Recursive descent over the raw characters, evaluating while parsing.

    Grammar, lowest precedence first:
        expression := term (("+" | "-") term)*
        term       := factor ("*" factor)*
        factor     := "(" expression ")" | ("+" | "-") factor | integer | identifier
    """

    def __init__(self, code: str, variables: Mapping[str, Value]) -> None:
        self._cursor = Cursor(code)
        self._variables = variables
        # an operator was consumed and its right operand has not been parsed yet
        self._expecting_operand = False
        self._depth = 0
        self._after_binary_operator = False

    def parse(self) -> Value:
        self._cursor.skip_whitespace()
        value: Value
        if self._cursor.peek() == '"':
            value = self._string_literal()
        else:
            value = Integer(self._expression())

        self._cursor.skip_whitespace()
        if not self._cursor.at_end:
            raise self._error(ErrorKind.TRAILING_INPUT, "Unexpected characters at end of input")
        return value

    def _error(self, kind: ErrorKind, errmsg: str, at: int | None = None) -> ParserError:
        return ParserError(
            kind=kind,
            errmsg=errmsg,
            code=self._cursor.code,
            error_char_idx=self._cursor.position if at is None else at,
        )

    def _checked(self, n: int, at: int) -> int:
        if not fits_int32(n):
            raise self._error(ErrorKind.NUMBER_OVERFLOW, f"Result {n} does not fit into 32-bit integer", at=at)
        return n

    def _binary_operator(self, op: str) -> None:
        errmsg = f"Not allowed to have consecutive {OPERATOR_NAMES[op]} ({op}) operators"
        if self._expecting_operand:
            raise self._error(ErrorKind.CONSECUTIVE_OPERATOR, errmsg)
        self._cursor.advance()
        if self._cursor.peek() in OPERATORS:
            raise self._error(ErrorKind.CONSECUTIVE_OPERATOR, errmsg)
        self._expecting_operand = True
        self._after_binary_operator = True

    def _expression(self) -> int:
        value = self._term()
        while True:
            self._cursor.skip_whitespace()
            op = self._cursor.peek()
            if op not in SIGNS:
                return value
            op_idx = self._cursor.position
            self._binary_operator(op)
            right = self._term()
            value = self._checked(value + right if op == "+" else value - right, at=op_idx)
            self._expecting_operand = False

    def _term(self) -> int:
        value = self._factor()
        while True:
            self._cursor.skip_whitespace()
            op = self._cursor.peek()
            if op != "*":
                return value
            op_idx = self._cursor.position
            self._binary_operator(op)
            value = self._checked(value * self._factor(), at=op_idx)
            self._expecting_operand = False

    def _factor(self, after_sign: bool = False) -> int:
        self._cursor.skip_whitespace()
        char = self._cursor.peek()
        after_binary_operator = self._after_binary_operator
        self._after_binary_operator = False

        if char == "(":
            return self._parenthesized()
        elif char in SIGNS:
            if after_sign:
                raise self._error(ErrorKind.REPEATED_UNARY_OPERATOR, f"Multiple unary ({char}) operators not allowed")
            sign_idx = self._cursor.position
            self._cursor.advance()
            self._expecting_operand = True
            operand = self._factor(after_sign=True)
            return self._checked(-operand, at=sign_idx) if char == "-" else operand
        elif char in DIGITS:
            value = self._integer_literal()
        elif char in IDENTIFIER_START:
            value = self._identifier()
        elif char == "*" and after_binary_operator:
            raise self._error(ErrorKind.CONSECUTIVE_OPERATOR, "Operand expected, found multiplication (*) operator")
        elif char == EOF:
            raise self._error(ErrorKind.INVALID_TOKEN, "Invalid token in expression: unexpected end of input")
        else:
            raise self._error(ErrorKind.INVALID_TOKEN, f"Invalid token in expression: {char!r}")

        self._expecting_operand = False
        return value

    def _parenthesized(self) -> int:
        if self._depth >= MAX_NESTING:
            raise self._error(ErrorKind.NESTING_TOO_DEEP, f"Parentheses nested deeper than {MAX_NESTING} levels")
        self._cursor.advance()
        self._expecting_operand = True
        self._depth += 1
        value = self._expression()
        self._depth -= 1

        self._cursor.skip_whitespace()
        if self._cursor.peek() != ")":
            raise self._error(ErrorKind.UNMATCHED_PARENTHESIS, "Expected ')' is missing")
        self._cursor.advance()
        self._expecting_operand = False
        return value

    def _string_literal(self) -> Text:
        open_idx = self._cursor.position
        self._cursor.advance()
        chars: list[str] = []
        while not self._cursor.at_end:
            char = self._cursor.advance()
            if char == '"':
                return Text("".join(chars))
            chars.append(char)
        raise self._error(ErrorKind.UNTERMINATED_STRING, "Unterminated string literal", at=open_idx)

    def _integer_literal(self) -> int:
        start = self._cursor.position
        while self._cursor.peek() in DIGITS:
            self._cursor.advance()
        digits = self._cursor.code[start : self._cursor.position]

        if len(digits) > 1 and digits.startswith("0"):
            raise self._error(ErrorKind.LEADING_ZERO, f"Invalid number {digits}: leading zeros are not allowed", at=start)
        n = int(digits)
        if n > INT_MAX:
            raise self._error(ErrorKind.NUMBER_OVERFLOW, f"Number {digits} does not fit into 32-bit integer", at=start)
        return n

    def _identifier(self) -> int:
        start = self._cursor.position
        while self._cursor.peek() in IDENTIFIER_CHARS:
            self._cursor.advance()
        name = self._cursor.code[start : self._cursor.position]

        value = self._variables.get(name)
        if value is None:
            raise self._error(ErrorKind.UNDEFINED_VARIABLE, f"Variable {name!r} not defined", at=start)
        elif isinstance(value, Integer):
            return value.v
        elif isinstance(value, Text):
            raise self._error(
                ErrorKind.TYPE_MISMATCH, f"Cannot use string variable {name!r} in arithmetic", at=start
            )
        else:
            raise TypeError(f"Unexpected value type for {name!r}: {type(value)}")
