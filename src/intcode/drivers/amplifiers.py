''' Amplifier networks built out of piped machines '''

import logging as lg
from itertools import permutations
from typing import Sequence

from intcode.common.conf import INITIAL_SIGNAL
from intcode.runtime.cpu import IntCodeMachine
from intcode.runtime.machine import Machine, Values, chain


def build_chain(memory: Sequence[int], phases: Sequence[int], trace: bool = False) -> Machine:
    amplifiers: list[Machine] = []

    for phase in phases:
        amplifier = IntCodeMachine(memory, trace)
        amplifier.execute([phase])
        amplifiers.append(amplifier)

    return chain(*amplifiers)


def run_to_completion(machine: Machine, seed: int = INITIAL_SIGNAL) -> Values:
    ''' Loops the chain output back to its input until the chain halts '''
    out = machine.execute([seed])

    while not machine.finished():
        if not out:
            raise ValueError('Chain is waiting for input but produced no output')

        out = machine.execute(out)

    return out


def max_signal(memory: Sequence[int], phases: Sequence[int], trace: bool = False) -> int:
    if not phases:
        raise ValueError('No phases given')

    best: int | None = None

    for permutation in permutations(phases):
        signals = run_to_completion(build_chain(memory, permutation, trace))

        if not signals:
            raise ValueError(f'No signal for phases {permutation}')

        signal = signals[0]
        lg.debug(f'Phases {permutation} -> {signal}')

        if best is None or signal > best:
            best = signal

    assert best is not None
    return best
