import logging as lg
from collections import deque
from enum import Enum, auto
from typing import Callable, Iterable, Sequence

import intcode.common.ops as ops
from intcode.common.errors import (
    InvalidAddress,
    ImmediateModeOutput,
    IntCodeError,
    UnexpectedEndOfFile,
    MachineFinished,
    MachineFailed
)
from intcode.runtime.decoder import Instruction, Mode, Modes, decode
from intcode.runtime.machine import Machine, Values


class State(Enum):
    RUNNING = auto()
    AWAITING_INPUT = auto()
    FINISHED = auto()
    FAILED = auto()


class IntCodeMachine(Machine):
    cells: list[int]        # Memory, owned by this machine only
    ip: int                 # Instruction pointer
    start: int              # Address of the instruction being executed
    state: State
    trace: bool

    inputs: deque[int]      # Pending input of the current call
    outputs: Values         # Output of the current call

    def __init__(self, memory: Iterable[int], trace: bool = False):
        self.cells = list(memory)
        self.ip = 0
        self.start = 0
        self.state = State.AWAITING_INPUT     # Idle until the first call
        self.trace = trace

        self.inputs = deque()
        self.outputs = []

    # - Helpers - #

    def debug_dump(self, instruction: Instruction):
        state = [f'{k}:{v}' for k, v in {
            'IP': self.start,
            'STATE': self.state.name,
            'OP': instruction.mnemonic
        }.items()]

        params = self.cells[self.ip:self.start + instruction.size()]
        state.extend(str(p) for p in params)

        lg.debug(' '.join(state))

    def next(self) -> int:
        if self.ip >= len(self.cells):
            raise UnexpectedEndOfFile()

        value = self.cells[self.ip]
        self.ip += 1
        return value

    def check_address(self, address: int) -> int:
        if address < 0 or address >= len(self.cells):
            raise InvalidAddress(address)

        return address

    def read_parameter(self, mode: Mode) -> int:
        raw = self.next()

        if mode == Mode.IMMEDIATE:
            return raw

        return self.cells[self.check_address(raw)]

    def read_address(self, mode: Mode) -> int:
        raw = self.next()

        if mode == Mode.IMMEDIATE:
            raise ImmediateModeOutput()

        return self.check_address(raw)

    def arithm_pair(self, modes: Modes, op: Callable[[int, int], int]):
        a = self.read_parameter(modes[0])
        b = self.read_parameter(modes[1])
        addr = self.read_address(modes[2])
        self.cells[addr] = op(a, b)

    def jump_if(self, modes: Modes, test: Callable[[int], bool]):
        cond = self.read_parameter(modes[0])
        target = self.read_parameter(modes[1])

        if test(cond):
            if target < 0:
                raise InvalidAddress(target)

            self.ip = target

    # - Operations - #

    def add(self, modes: Modes):
        self.arithm_pair(modes, lambda a, b: a + b)

    def mul(self, modes: Modes):
        self.arithm_pair(modes, lambda a, b: a * b)

    def inp(self, modes: Modes):
        if not self.inputs:
            # Re-attempted on the next call
            self.ip = self.start
            self.state = State.AWAITING_INPUT
            lg.debug(f'Awaiting input at {self.start}')
            return

        addr = self.read_address(modes[0])
        self.cells[addr] = self.inputs.popleft()

    def out(self, modes: Modes):
        self.outputs.append(self.read_parameter(modes[0]))

    def jnz(self, modes: Modes):
        self.jump_if(modes, lambda v: v != 0)

    def jze(self, modes: Modes):
        self.jump_if(modes, lambda v: v == 0)

    def lth(self, modes: Modes):
        self.arithm_pair(modes, lambda a, b: 1 if a < b else 0)

    def eql(self, modes: Modes):
        self.arithm_pair(modes, lambda a, b: 1 if a == b else 0)

    def hlt(self, modes: Modes):
        self.state = State.FINISHED
        lg.debug(f'Halted at {self.start}')

    HANDLERS = {
        ops.ADD: add,
        ops.MUL: mul,
        ops.INP: inp,
        ops.OUT: out,
        ops.JNZ: jnz,
        ops.JZE: jze,
        ops.LTH: lth,
        ops.EQL: eql,
        ops.HLT: hlt,
    }

    # -- Implementation -- #

    def exec_next(self):
        self.start = self.ip
        instruction = decode(self.next())

        if self.trace:
            self.debug_dump(instruction)

        handler = self.HANDLERS[instruction.op]
        handler(self, instruction.modes)

    def execute(self, inputs: Sequence[int]) -> Values:
        if self.state == State.FINISHED:
            raise MachineFinished()

        if self.state == State.FAILED:
            raise MachineFailed()

        self.inputs = deque(inputs)
        self.outputs = []
        self.state = State.RUNNING

        try:
            while self.state == State.RUNNING:
                self.exec_next()

        except IntCodeError as e:
            # Left pointing at the failed instruction
            self.ip = self.start
            self.state = State.FAILED
            lg.debug(f'Failed at {self.start}: {e}')
            raise

        if self.inputs:
            lg.debug(f'Dropping unread input {list(self.inputs)}')
            self.inputs.clear()

        outputs = self.outputs
        self.outputs = []
        return outputs

    @property
    def instruction_pointer(self) -> int:
        return self.ip

    def finished(self) -> bool:
        return self.state == State.FINISHED

    def memory(self) -> tuple[int, ...]:
        return tuple(self.cells)

    def clone(self) -> 'IntCodeMachine':
        copy = IntCodeMachine(self.cells, self.trace)
        copy.ip = self.ip
        copy.start = self.start
        copy.state = self.state
        return copy
