import logging as lg
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

from simply.lang.decoder import decode
from simply.lang.instructions import Instruction


@dataclass(frozen=True)
class Program:
    '''
    Decoded script, addressed by 1-based physical line number.

    Every physical line occupies one slot, so blank lines keep their line
    number and jump targets match what the author sees in an editor.
    Blank slots hold None.
    '''

    lines: tuple[Instruction | None, ...]

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[tuple[int, Instruction]]:
        for index, instruction in enumerate(self.lines, start=1):
            if instruction is not None:
                yield index, instruction

    def fetch(self, pc: int) -> Instruction | None:
        return self.lines[pc - 1]


def assemble(lines: Iterable[str]) -> Program:
    decoded: list[Instruction | None] = []

    for number, text in enumerate(lines, start=1):
        if not text.strip():
            decoded.append(None)
            continue

        decoded.append(decode(text, number))

    lg.debug(f'Assembled {len(decoded)} lines')
    return Program(tuple(decoded))


def assemble_string(source: str) -> Program:
    return assemble(source.splitlines())


def load_file(filepath: str | Path) -> Program:
    if isinstance(filepath, str):
        filepath = Path(filepath)

    lg.debug(f'Loading script {filepath}')
    return assemble_string(filepath.read_text(encoding='utf-8'))
