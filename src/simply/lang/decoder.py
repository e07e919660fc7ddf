import logging as lg

import pyparsing as pp

import simply.common.ops as ops
import simply.lang.grammar as grammar
from simply.common.errors import ParseError, ParseErrorKind
from simply.common.limits import INT_MIN, INT_MAX
from simply.lang.instructions import Instruction, Literal, RegisterRef, InvalidToken


def check_operand(kind: str, operand: object, line: int | None):
    if isinstance(operand, InvalidToken):
        raise ParseError(ParseErrorKind.INVALID_OPERAND, operand.text, line)

    if kind == ops.REG and not isinstance(operand, RegisterRef):
        raise ParseError(ParseErrorKind.INVALID_OPERAND, str(operand), line)

    if isinstance(operand, Literal) and not INT_MIN <= operand.value <= INT_MAX:
        raise ParseError(ParseErrorKind.INVALID_OPERAND, str(operand), line)


def decode(text: str, line: int | None = None) -> Instruction:
    '''
    Decodes one source line into an instruction.

    Decoding is purely syntactic: operands are classified as literals or
    register names, and checked against the shape of the opcode. Registers
    are never looked up here.
    '''

    text = text.strip()

    try:
        tokens = grammar.line.parse_string(text, parse_all=True)
    except pp.ParseException:
        words = text.split()

        if words and words[0] in ops.SHAPES:
            raise ParseError(ParseErrorKind.INVALID_OPERAND, ' '.join(words[1:]), line) from None

        raise ParseError(ParseErrorKind.UNKNOWN_COMMAND, text, line) from None

    op = tokens[0]
    operands = list(tokens[1])

    if op not in ops.SHAPES:
        raise ParseError(ParseErrorKind.UNKNOWN_COMMAND, op, line)

    shape = ops.SHAPES[op]

    if len(operands) != len(shape):
        raise ParseError(ParseErrorKind.WRONG_ARITY, text, line)

    for kind, operand in zip(shape, operands):
        check_operand(kind, operand, line)

    instruction = Instruction(op, tuple(operands), line)
    lg.debug(f'Decoded {instruction}')
    return instruction
