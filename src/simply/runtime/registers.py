from simply.common.errors import UndefinedRegisterError
from simply.common.limits import WORD_MASK, INT_MIN


def wrap32(value: int) -> int:
    ''' Two's complement wraparound into the signed 32-bit range '''
    return ((value - INT_MIN) & WORD_MASK) + INT_MIN


class Registers:
    ''' Named signed words, created on first write '''

    def __init__(self):
        self.values: dict[str, int] = {}

    def write(self, name: str, value: int):
        self.values[name] = wrap32(value)

    def read(self, name: str) -> int:
        try:
            return self.values[name]
        except KeyError:
            raise UndefinedRegisterError(name) from None

    def snapshot(self) -> dict[str, int]:
        return dict(self.values)

    def __contains__(self, name: str) -> bool:
        return name in self.values

    def __len__(self) -> int:
        return len(self.values)
