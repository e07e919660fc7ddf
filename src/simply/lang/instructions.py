from typing import TypeAlias
from dataclasses import dataclass


@dataclass(frozen=True)
class Literal:
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class RegisterRef:
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class InvalidToken:
    ''' Operand text that is neither a literal nor a register name '''
    text: str

    def __str__(self) -> str:
        return self.text


Operand: TypeAlias = Literal | RegisterRef


@dataclass(frozen=True)
class Instruction:
    op: str
    operands: tuple[Operand, ...]
    line: int | None = None

    def __str__(self) -> str:
        return ' '.join([self.op, *(str(o) for o in self.operands)])
