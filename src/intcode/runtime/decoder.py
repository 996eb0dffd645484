''' Instruction decoder '''

from dataclasses import dataclass
from enum import IntEnum
from typing import TypeAlias

import intcode.common.ops as ops
from intcode.common.errors import InvalidOpCode, InvalidParameterMode


class Mode(IntEnum):
    REFERENCE = ops.REFERENCE
    IMMEDIATE = ops.IMMEDIATE


Modes: TypeAlias = tuple[Mode, ...]


@dataclass(frozen=True)
class Instruction:
    op: int
    modes: Modes

    @property
    def mnemonic(self) -> str:
        flags = ''.join('i' if m == Mode.IMMEDIATE else 'r' for m in self.modes)

        if not flags:
            return ops.MNEMONICS[self.op]

        return f'{ops.MNEMONICS[self.op]}.{flags}'

    def size(self) -> int:
        ''' Cells taken by the opcode and its parameters '''
        return 1 + len(self.modes)


def decode_mode(digit: int) -> Mode:
    try:
        return Mode(digit)
    except ValueError:
        raise InvalidParameterMode(digit) from None


def decode(value: int) -> Instruction:
    # Python's modulo would turn e.g. -1 into 99 (halt)
    if value < 0:
        raise InvalidOpCode(value)

    modes, op = divmod(value, ops.MODE_BASE)
    arity = ops.ARITY.get(op)

    if arity is None:
        raise InvalidOpCode(value)

    decoded: list[Mode] = []

    for _ in range(arity):
        modes, digit = divmod(modes, 10)
        decoded.append(decode_mode(digit))

    return Instruction(op, tuple(decoded))
