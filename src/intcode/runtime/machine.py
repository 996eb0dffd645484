''' Executable units and their composition '''

import logging as lg
from functools import reduce
from typing import Sequence, TypeAlias


Values: TypeAlias = list[int]


class Machine:
    def execute(self, inputs: Sequence[int]) -> Values:
        raise NotImplementedError()

    def finished(self) -> bool:
        raise NotImplementedError()

    def clone(self) -> 'Machine':
        raise NotImplementedError()

    def pipe(self, other: 'Machine') -> 'Pipe':
        return Pipe(self, other)


class Pipe(Machine):
    ''' Output of the first unit becomes the input of the second one.

    The pipe reports itself finished as soon as either member halts, so in
    a feedback loop the chain stops with the first halting unit.
    '''

    first: Machine
    second: Machine

    def __init__(self, first: Machine, second: Machine):
        self.first = first
        self.second = second

    def execute(self, inputs: Sequence[int]) -> Values:
        relay = self.first.execute(inputs)
        lg.debug(f'Pipe relays {relay}')
        return self.second.execute(list(relay))

    def finished(self) -> bool:
        return self.first.finished() or self.second.finished()

    def clone(self) -> 'Pipe':
        return Pipe(self.first.clone(), self.second.clone())


def chain(*machines: Machine) -> Machine:
    if not machines:
        raise ValueError('Cannot chain an empty list of machines')

    return reduce(Pipe, machines)
