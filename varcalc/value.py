import abc
from dataclasses import dataclass

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def fits_int32(n: int) -> bool:
    return INT_MIN <= n <= INT_MAX


class Value(abc.ABC):
    @classmethod
    @abc.abstractmethod
    def type_name(cls) -> str:
        ...

    @abc.abstractmethod
    def render(self) -> str:
        """Console form of the value"""


@dataclass(frozen=True)
class Integer(Value):
    v: int

    @classmethod
    def type_name(cls) -> str:
        return "Integer"

    def render(self) -> str:
        return str(self.v)


@dataclass(frozen=True)
class Text(Value):
    v: str

    @classmethod
    def type_name(cls) -> str:
        return "Text"

    def render(self) -> str:
        return f'"{self.v}"'
