import logging as lg
from pathlib import Path
from typing import Mapping, Sequence, TextIO

import pyparsing as pp

import intcode.loader.grammar as grammar


class ProgramLoadError(Exception):
    pass


def load(text: str) -> list[int]:
    source = text.strip()

    if not source:
        raise ProgramLoadError('Empty program')

    try:
        parsed = grammar.program.parse_string(source, parse_all=True)
    except pp.ParseException as e:
        raise ProgramLoadError(f'Malformed program at column {e.col}: {e.msg}') from e

    memory = list(parsed)
    lg.debug(f'Loaded {len(memory)} cells')
    return memory


def load_stream(stream: TextIO) -> list[int]:
    return load(stream.readline())


def load_file(filepath: str | Path) -> list[int]:
    if isinstance(filepath, str):
        filepath = Path(filepath)

    lg.debug(f'Loading program {filepath}')

    try:
        with filepath.open(encoding='utf-8') as stream:
            return load_stream(stream)
    except UnicodeDecodeError as e:
        raise ProgramLoadError(f'{filepath.name} is not a text file: {e.reason}') from e


def patch(memory: Sequence[int], patches: Mapping[int, int]) -> list[int]:
    patched = list(memory)

    for address, value in patches.items():
        if address < 0 or address >= len(patched):
            raise ProgramLoadError(f'Patch address {address} out of range')

        lg.debug(f'Patching [{address}] = {value}')
        patched[address] = value

    return patched
