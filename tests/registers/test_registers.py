import pytest

from simply.common.errors import UndefinedRegisterError
from simply.runtime.registers import Registers, wrap32


def test_write_then_read():
    regs = Registers()
    regs.write('a', 10)
    assert regs.read('a') == 10


def test_overwrite():
    regs = Registers()
    regs.write('a', 10)
    regs.write('a', -3)
    assert regs.read('a') == -3
    assert len(regs) == 1


def test_read_unwritten():
    regs = Registers()

    with pytest.raises(UndefinedRegisterError) as info:
        regs.read('ghost')

    assert info.value.name == 'ghost'
    assert 'ghost' not in regs


@pytest.mark.parametrize('value, wrapped', [
    (0, 0),
    (2147483647, 2147483647),
    (2147483648, -2147483648),
    (-2147483649, 2147483647),
    (4294967296, 0),
    (4294967295, -1),
])
def test_wrap32(value, wrapped):
    assert wrap32(value) == wrapped


def test_write_wraps():
    regs = Registers()
    regs.write('a', 2147483647 + 1)
    assert regs.read('a') == -2147483648


def test_snapshot_is_a_copy():
    regs = Registers()
    regs.write('a', 1)
    snapshot = regs.snapshot()
    snapshot['a'] = 2
    assert regs.read('a') == 1
