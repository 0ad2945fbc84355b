from varcalc.parser import evaluate
from varcalc.session import Session

session = Session()
for line in [
    "a = 5;",
    "b = -1;",
    "c = a + b * 3;",
    "d = (a + b) * 3;",
    "e = 1 - -2;",
    'greeting = "hello world";',
    "f = greeting + 1;",
    "g = 1++1;",
    "h = --1;",
    "i = 007;",
    "j = (1 + 2;",
    "k = 2147483648;",
    "x = 1; y = x * 10; z = undefined;",
    "no semicolon",
    "1abc = 2;",
]:
    print("=" * 10)
    print(f"line: {line!r}")
    for error in session.execute(line):
        print(f"error: [{error.kind}] {error}")
    print("variables:")
    for variable_line in session.format_variables():
        print(f"  {variable_line}")

print("=" * 10)
print(f"evaluate('a*b+1', ...) = {evaluate('a*b+1', session.variables)}")
