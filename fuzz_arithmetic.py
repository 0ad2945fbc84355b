import random
import re
import string
import warnings

from varcalc.errors import ErrorKind, ParserError
from varcalc.parser import evaluate
from varcalc.value import Integer

warnings.filterwarnings("ignore")


def eval_py(code: str) -> int | str:
    try:
        return eval(code)
    except Exception as e:
        return str(e)


def eval_my(code: str) -> int | ParserError:
    try:
        res = evaluate(code, variables={})
    except ParserError as e:
        return e
    assert isinstance(res, Integer)
    return res.v


if __name__ == "__main__":
    alphabet = string.digits + "()+-* "

    def generate(length: int) -> str:
        return "".join(random.choices(alphabet, k=length))

    while True:
        code = generate(10)

        if re.findall(r"\*\s*\*", code):
            continue  # avoid generating powers (10**4)

        if re.findall(r"[+\-*]\s*[+\-*]", code):
            continue  # operator chains are rejected here but accepted by python

        res_py = eval_py(code)
        res_my = eval_my(code)
        if isinstance(res_py, int) and isinstance(res_my, int) and res_py == res_my:
            continue
        if isinstance(res_py, str) and isinstance(res_my, ParserError):
            continue
        if isinstance(res_py, int) and isinstance(res_my, ParserError):
            if res_my.kind is ErrorKind.LEADING_ZERO and re.search(r"\b00+\b", code):
                continue  # python accepts "00" as zero
            if res_my.kind is ErrorKind.NUMBER_OVERFLOW:
                continue  # python ints are unbounded
        print(f"{code!r}\npy: {res_py}\nmy: {res_my}\n\n")
