import logging as lg
import tomllib
from pathlib import Path
from typing import Sequence, Mapping


class RunSettings:
    verbose: bool
    trace: bool
    dump: bool
    inputs: list[int]
    patches: dict[int, int]

    def __init__(self):
        self.verbose = False
        self.trace = False
        self.dump = False
        self.inputs = []
        self.patches = {}

    def update(
        self,
        verbose: bool | None = None,
        trace: bool | None = None,
        dump: bool | None = None,
        inputs: Sequence[int] | None = None,
        patches: Mapping[int, int] | None = None
    ):
        if verbose is not None:
            self.verbose = verbose

        if trace is not None:
            self.trace = trace

        if dump is not None:
            self.dump = dump

        if inputs is not None:
            self.inputs = list(inputs)

        if patches is not None:
            self.patches.update(patches)

        return self


def parse_patch(text: str) -> tuple[int, int]:
    address, sep, value = text.partition('=')

    if not sep:
        raise UserWarning(f'Expected ADDRESS=VALUE, got {text}')

    try:
        return (int(address), int(value))
    except ValueError:
        raise UserWarning(f'Non-integer patch {text}') from None


def expect(value, kind: type, name: str):
    # bool is an int subclass and is never a valid cell value
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise ValueError(f'[run] {name} must be of type {kind.__name__}, got {value!r}')

    return value


def load_settings(filepath: Path) -> RunSettings:
    lg.debug(f'Reading settings from {filepath}')
    config = tomllib.loads(filepath.read_text(encoding='utf-8'))
    run = expect(config.get('run', {}), dict, 'table')

    inputs = [expect(v, int, 'inputs') for v in expect(run.get('inputs', []), list, 'inputs')]

    patches: dict[int, int] = {}

    for k, v in expect(run.get('patches', {}), dict, 'patches').items():
        try:
            address = int(k)
        except ValueError:
            raise ValueError(f'[run.patches] address {k!r} is not an integer') from None

        patches[address] = expect(v, int, 'patches')

    for flag in ('trace', 'dump'):
        if flag in run:
            expect(run[flag], bool, flag)

    return RunSettings().update(
        trace=run.get('trace'),
        dump=run.get('dump'),
        inputs=inputs,
        patches=patches
    )
