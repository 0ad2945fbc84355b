import logging

from varcalc.errors import ErrorKind, ParserError, StatementError, VarcalcError
from varcalc.parser import IDENTIFIER_CHARS, IDENTIFIER_START, evaluate
from varcalc.value import Value

logger = logging.getLogger(__name__)


def is_valid_identifier(name: str) -> bool:
    return bool(name) and name[0] in IDENTIFIER_START and all(c in IDENTIFIER_CHARS for c in name[1:])


class Session:
    """Variable table shared by all lines entered during one interactive session"""

    def __init__(self) -> None:
        self.variables: dict[str, Value] = dict()

    def execute(self, line: str) -> list[VarcalcError]:
        """Runs every `name = expression` statement on a line ending with ';'.

        A failed statement does not stop the rest of the line; its error is returned
        and the variable it targets keeps its previous value.
        """
        line = line.strip()
        if not line.endswith(";"):
            logger.debug("Rejected line without trailing semicolon: %r", line)
            return [
                StatementError(
                    kind=ErrorKind.MISSING_SEMICOLON,
                    errmsg="program must end with a semicolon ;",
                    statement=line,
                )
            ]

        errors: list[VarcalcError] = []
        for statement in (s.strip() for s in line.split(";")):
            if not statement:
                continue
            try:
                self.execute_statement(statement)
            except (StatementError, ParserError) as e:
                logger.debug("Statement %r failed: %s", statement, e.kind)
                errors.append(e)
        return errors

    def execute_statement(self, statement: str) -> Value:
        parts = [part.strip() for part in statement.split("=", 1)]
        if len(parts) != 2:
            raise StatementError(
                kind=ErrorKind.INVALID_ASSIGNMENT,
                errmsg="invalid assignment format. Use the following format `name = value;`",
                statement=statement,
            )

        name, code = parts
        if not is_valid_identifier(name):
            raise StatementError(
                kind=ErrorKind.INVALID_IDENTIFIER,
                errmsg=f"invalid identifier {name!r}",
                statement=statement,
            )

        value = evaluate(code, self.variables)
        self.variables[name] = value
        logger.debug("Assigned %s = %s", name, value.render())
        return value

    def format_variables(self) -> list[str]:
        return [f"{name} = {value.render()}" for name, value in self.variables.items()]
