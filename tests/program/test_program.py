import pytest

import simply.common.ops as ops
from simply.common.errors import ParseError, ParseErrorKind
from simply.lang.program import assemble, assemble_string, load_file

import unit_utils


def test_blank_lines_keep_numbering():
    program = assemble(['set a 1', '', '   ', 'out a'])
    assert len(program) == 4
    assert program.fetch(2) is None
    assert program.fetch(3) is None
    assert program.fetch(4).op == ops.OUT
    assert program.fetch(4).line == 4


def test_iteration_skips_blank_lines():
    program = assemble_string('set a 1\n\nout a\n')
    assert [(n, i.op) for n, i in program] == [(1, ops.SET), (3, ops.OUT)]


def test_trailing_newline_adds_no_line():
    assert len(assemble_string('set a 1\nout a\n')) == 2


def test_empty_source():
    assert len(assemble_string('')) == 0


def test_parse_error_reports_line():
    with pytest.raises(ParseError) as info:
        assemble_string('set a 1\n\nset b 2\nmov a b\n')

    assert info.value.line == 4
    assert info.value.kind == ParseErrorKind.UNKNOWN_COMMAND
    assert str(info.value).startswith('line 4: ')


def test_load_file():
    program = load_file(unit_utils.find_file('testdata/compare.simply'))
    assert len(program) == 10
    assert program.fetch(10).op == ops.OUT


def test_load_file_not_utf8(tmp_path):
    source = tmp_path / 'binary.simply'
    source.write_bytes(b'set a 1\n\xff\n')

    with pytest.raises(UnicodeDecodeError):
        load_file(source)
