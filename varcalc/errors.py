import enum
from dataclasses import dataclass


class ErrorKind(enum.Enum):
    # expression evaluation
    TRAILING_INPUT = enum.auto()
    CONSECUTIVE_OPERATOR = enum.auto()
    REPEATED_UNARY_OPERATOR = enum.auto()
    UNMATCHED_PARENTHESIS = enum.auto()
    INVALID_TOKEN = enum.auto()
    UNTERMINATED_STRING = enum.auto()
    LEADING_ZERO = enum.auto()
    NUMBER_OVERFLOW = enum.auto()
    UNDEFINED_VARIABLE = enum.auto()
    TYPE_MISMATCH = enum.auto()
    NESTING_TOO_DEEP = enum.auto()

    # statement handling
    MISSING_SEMICOLON = enum.auto()
    INVALID_ASSIGNMENT = enum.auto()
    INVALID_IDENTIFIER = enum.auto()

    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


@dataclass
class VarcalcError(Exception):
    kind: ErrorKind
    errmsg: str

    def __str__(self) -> str:
        return self.errmsg


@dataclass
class ParserError(VarcalcError):
    code: str
    error_char_idx: int

    def __str__(self) -> str:
        return f"{self.errmsg} (at column {self.error_char_idx + 1} of {self.code!r})"


@dataclass
class StatementError(VarcalcError):
    statement: str
