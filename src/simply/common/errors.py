from enum import Enum


class SimplyError(Exception):
    line: int | None

    def __init__(self, message: str, line: int | None = None):
        super().__init__(message)
        self.message = message
        self.line = line

    def at(self, line: int):
        if self.line is None:
            self.line = line

        return self

    def __str__(self) -> str:
        if self.line is None:
            return self.message

        return f'line {self.line}: {self.message}'


class ParseErrorKind(Enum):
    UNKNOWN_COMMAND = 'unknown command'
    INVALID_OPERAND = 'invalid operand'
    WRONG_ARITY = 'wrong number of operands'


class ParseError(SimplyError):
    kind: ParseErrorKind
    token: str

    def __init__(self, kind: ParseErrorKind, token: str, line: int | None = None):
        super().__init__(f"{kind.value} '{token}'", line)
        self.kind = kind
        self.token = token


class ExecError(SimplyError):
    pass


class UndefinedRegisterError(ExecError):
    name: str

    def __init__(self, name: str, line: int | None = None):
        super().__init__(f"register '{name}' is uninitialized", line)
        self.name = name


class NegativeExecutionPointer(ExecError):
    target: int

    def __init__(self, target: int, line: int | None = None):
        super().__init__(f'execution pointer {target} is less than 1', line)
        self.target = target


class StepLimitExceeded(ExecError):
    limit: int

    def __init__(self, limit: int, line: int | None = None):
        super().__init__(f'step limit of {limit} exceeded', line)
        self.limit = limit
