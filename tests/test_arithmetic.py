from types import MappingProxyType

import pytest

from varcalc.parser import evaluate
from varcalc.value import Integer, Text, Value


@pytest.mark.parametrize(
    "code, expected_ret_val",
    [
        pytest.param("0", Integer(0)),
        pytest.param("1", Integer(1)),
        pytest.param("-1", Integer(-1)),
        pytest.param("+5", Integer(5)),
        pytest.param("  42  ", Integer(42)),
        pytest.param("1+2", Integer(3)),
        pytest.param("(1+2)", Integer(3)),
        pytest.param("-(1+2)", Integer(-3)),
        pytest.param("(((1)))", Integer(1)),
        pytest.param("(1+2)*3", Integer(9)),
        pytest.param("1 * 4 + 5", Integer(9)),
        pytest.param("1 + 4 * 5", Integer(21)),
        pytest.param("10 - 4 - 3", Integer(3)),
        pytest.param("2 * 3 * 4", Integer(24)),
        pytest.param("10 + 2 * (5 + 3 - 1)", Integer(24)),
        pytest.param("2 * (3 + 4) - -1", Integer(15)),
        # unary signs after a binary operator
        pytest.param("1 - -2", Integer(3)),
        pytest.param("-1 + -2", Integer(-3)),
        pytest.param("3 * -2", Integer(-6)),
        pytest.param("-(-(1))", Integer(1)),
        # 32-bit boundaries
        pytest.param("2147483647", Integer(2147483647)),
        pytest.param("-2147483647 - 1", Integer(-2147483648)),
        pytest.param("65535 * 32768 + 32767", Integer(2147483647)),
    ],
)
def test_eval_arithmetic(code: str, expected_ret_val: Value) -> None:
    assert evaluate(code, variables={}) == expected_ret_val


@pytest.mark.parametrize(
    "code, expected_ret_val",
    [
        pytest.param('"hello"', Text("hello")),
        pytest.param('""', Text("")),
        pytest.param('  "spaced out"  ', Text("spaced out")),
        pytest.param('"a + b * (c"', Text("a + b * (c")),
        pytest.param('"\\n"', Text("\\n")),
    ],
)
def test_eval_string_literal(code: str, expected_ret_val: Value) -> None:
    assert evaluate(code, variables={"a": Integer(1)}) == expected_ret_val


@pytest.mark.parametrize(
    "code, expected_ret_val",
    [
        pytest.param("a*b+1", Integer(7)),
        pytest.param("a * (b + 1)", Integer(8)),
        pytest.param("-a", Integer(-2)),
        pytest.param("_private + x_1", Integer(110)),
        pytest.param("B - b", Integer(97)),
    ],
)
def test_eval_variables(code: str, expected_ret_val: Value) -> None:
    variables = {
        "a": Integer(2),
        "b": Integer(3),
        "B": Integer(100),
        "_private": Integer(10),
        "x_1": Integer(100),
        "s": Text("hi"),
    }
    assert evaluate(code, variables) == expected_ret_val


def test_evaluate_is_pure() -> None:
    variables = MappingProxyType({"a": Integer(2), "s": Text("hi")})
    first = evaluate("a * a - 1", variables)
    second = evaluate("a * a - 1", variables)
    assert first == second == Integer(3)
    assert dict(variables) == {"a": Integer(2), "s": Text("hi")}
