''' Line grammar '''

import string

import pyparsing as pp

from simply.lang.instructions import Literal, RegisterRef, InvalidToken


# Same separators as str.split()
WHITESPACE = string.whitespace


def g_word(pattern: str):
    return pp.Regex(pattern).set_whitespace_chars(WHITESPACE)


def g_token(pattern: str, action):
    # A token must span the whole whitespace-separated word
    return g_word(pattern + r'(?!\S)').set_parse_action(lambda r: action(r[0]))


literal = g_token(r'-?[0-9]+', lambda s: Literal(int(s)))
register = g_token(r'[A-Za-z][A-Za-z0-9_]*', RegisterRef)
invalid = g_word(r'\S+').set_parse_action(lambda r: InvalidToken(r[0]))

operand = literal | register | invalid

command = g_word(r'\S+')

line = command + pp.Group(pp.ZeroOrMore(operand)) + pp.StringEnd()
