import sys
import logging as lg
from enum import Enum
from typing import Callable, TypeAlias

import simply.common.ops as ops
from simply.common.errors import ExecError, NegativeExecutionPointer, StepLimitExceeded
from simply.common.limits import INVALID_CHAR
from simply.lang.instructions import Instruction, Literal, Operand
from simply.lang.program import Program
from simply.runtime.registers import Registers


class Halt(Exception):
    pass


class State(Enum):
    RUNNING = 'running'
    HALTED = 'halted'
    FAILED = 'failed'


Output: TypeAlias = Callable[[str], None]


def stdout_write(text: str):
    sys.stdout.write(text)


class CPU():
    pc: int  # Program counter, 1-based source line
    steps: int  # Instructions executed so far
    state: State
    current: Instruction

    def __init__(
        self,
        program: Program,
        output: Output | None = None,
        max_steps: int | None = None
    ):
        self.program = program      # Ref. to the decoded script
        self.output = output if output is not None else stdout_write
        self.max_steps = max_steps  # None means unbounded

        self.registers = Registers()
        self.pc = 1
        self.steps = 0
        self.state = State.RUNNING

    # - Helpers - #

    def debug_dump(self):
        state = [f'PC:{self.pc}']
        state.extend(f'{k}:{v}' for k, v in self.registers.snapshot().items())
        lg.debug(' '.join(state))

    def value(self, operand: Operand) -> int:
        if isinstance(operand, Literal):
            return operand.value

        return self.registers.read(operand.name)

    def operand(self, index: int) -> int:
        return self.value(self.current.operands[index])

    def target(self, index: int) -> str:
        return str(self.current.operands[index])

    def advance(self):
        self.pc += 1

    def jump(self, addr: int):
        if addr < 1:
            raise NegativeExecutionPointer(addr)

        self.pc = addr

    def jump_if(self, test: Callable[[int], bool]):
        if test(self.operand(0)):
            self.jump(self.operand(1))
        else:
            self.advance()

    def compare(self, test: Callable[[int, int], bool]):
        a = self.operand(0)
        b = self.operand(1)
        self.registers.write(self.target(1), 1 if test(a, b) else -1)
        self.advance()

    # - Operations - #

    def set(self):
        self.registers.write(self.target(0), self.operand(1))
        self.advance()

    def cpy(self):
        self.registers.write(self.target(1), self.operand(0))
        self.advance()

    def add(self):
        a = self.operand(0)
        b = self.operand(1)
        self.registers.write(self.target(1), b + a)
        self.advance()

    def sub(self):
        a = self.operand(0)
        b = self.operand(1)
        self.registers.write(self.target(1), b - a)
        self.advance()

    def jmp(self):
        self.jump(self.operand(0))

    def jwz(self):
        self.jump_if(lambda v: v == 0)

    def jwn(self):
        self.jump_if(lambda v: v < 0)

    def jwp(self):
        self.jump_if(lambda v: v > 0)

    def jnz(self):
        self.jump_if(lambda v: v != 0)

    def gth(self):
        self.compare(lambda a, b: a > b)

    def lth(self):
        self.compare(lambda a, b: a < b)

    def out(self):
        self.output(f'{self.operand(0)}\n')
        self.advance()

    def char(self):
        code = self.operand(0)

        if code < 0 or code > sys.maxunicode or 0xD800 <= code <= 0xDFFF:
            self.output(INVALID_CHAR)
        else:
            self.output(chr(code))

        self.advance()

    HANDLERS = {
        ops.SET: set,
        ops.CPY: cpy,
        ops.ADD: add,
        ops.SUB: sub,
        ops.JMP: jmp,
        ops.JWZ: jwz,
        ops.JWN: jwn,
        ops.JWP: jwp,
        ops.JNZ: jnz,
        ops.GTH: gth,
        ops.LTH: lth,
        ops.OUT: out,
        ops.CHR: char,
    }

    # -- Implementation -- #

    def fail(self, error: ExecError):
        self.state = State.FAILED
        lg.debug(f'Failed: {error}')
        self.debug_dump()
        raise error.at(self.pc)

    def exec_next(self):
        if self.pc > len(self.program):
            self.state = State.HALTED
            lg.info(f'Halted at PC {self.pc} after {self.steps} steps')
            raise Halt()

        instruction = self.program.fetch(self.pc)

        if instruction is None:
            # Blank line
            self.advance()
            return

        if self.max_steps is not None and self.steps >= self.max_steps:
            self.fail(StepLimitExceeded(self.max_steps))

        self.current = instruction
        self.steps += 1

        lg.debug(f'{self.pc}: {instruction}')

        handler = self.HANDLERS[instruction.op]

        try:
            handler(self)
        except ExecError as e:
            self.fail(e)

    def run(self) -> State:
        try:
            while True:
                self.exec_next()
        except Halt:
            return self.state
