import sys
import logging as lg
from pathlib import Path
from typing import Tuple

import click

from intcode.common.conf import (
    SERIAL_PHASES,
    FEEDBACK_PHASES,
    EXIT_LOAD_ERROR,
    EXIT_KEYBOARD,
    EXIT_AWAITING_INPUT,
    EXIT_EXEC_ERROR
)
from intcode.common.errors import IntCodeError
from intcode.loader.loader import ProgramLoadError, load, load_file, patch
from intcode.runtime.cpu import IntCodeMachine
import intcode.drivers.amplifiers as amplifiers
import intcode.tools.settings as s


def read_program(program: Path, patches: dict[int, int]) -> list[int]:
    try:
        return patch(load_file(program), patches)
    except ProgramLoadError as e:
        lg.error(f'Cannot load {program.name}: {e}')
        sys.exit(EXIT_LOAD_ERROR)


def parse_patches(ctx: click.Context, param: click.Parameter, values: Tuple[str, ...]):
    try:
        return dict(s.parse_patch(v) for v in values)
    except UserWarning as e:
        raise click.BadParameter(str(e)) from None


def parse_phases(ctx: click.Context, param: click.Parameter, value: str | None):
    if value is None:
        return None

    try:
        return load(value)
    except ProgramLoadError as e:
        raise click.BadParameter(str(e)) from None


@click.group()
def cli():
    ''' Intcode virtual machine '''


@cli.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('--trace', is_flag=True, help='Log every executed instruction')
@click.option('--dump', is_flag=True, help='Print memory after the run')
@click.option('-c', '--config', type=click.Path(exists=True, path_type=Path),
              help='TOML file with a [run] table')
@click.option('-i', '--input', 'inputs', type=int, multiple=True, help='Input value')
@click.option('-s', '--set', 'patches', multiple=True, callback=parse_patches,
              help='Memory override ADDRESS=VALUE')
@click.argument('program', type=click.Path(exists=True, dir_okay=False, path_type=Path))
def run(
    verbose: bool,
    trace: bool,
    dump: bool,
    config: Path | None,
    inputs: Tuple[int, ...],
    patches: dict[int, int],
    program: Path
):
    try:
        settings = s.load_settings(config) if config else s.RunSettings()
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint='--config') from None

    settings.update(
        verbose=verbose or settings.verbose,
        trace=trace or settings.trace,
        dump=dump or settings.dump,
        inputs=inputs if inputs else None,
        patches=patches
    )

    lg.basicConfig(level=lg.DEBUG if settings.verbose or settings.trace else lg.INFO)
    lg.info(f'Running {program.name}')

    machine = IntCodeMachine(read_program(program, settings.patches), settings.trace)

    try:
        outputs = machine.execute(settings.inputs)

    except IntCodeError as e:
        lg.error(f'Execution halted on error: {e}')
        sys.exit(EXIT_EXEC_ERROR)

    except KeyboardInterrupt:
        lg.info('Execution halted by the user')
        sys.exit(EXIT_KEYBOARD)

    for value in outputs:
        click.echo(value)

    if settings.dump:
        click.echo(','.join(str(v) for v in machine.memory()))

    if not machine.finished():
        lg.warning(f'Program is awaiting input at {machine.ip}')
        sys.exit(EXIT_AWAITING_INPUT)


@cli.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('--trace', is_flag=True, help='Log every executed instruction')
@click.option('--feedback', is_flag=True, help='Default to the feedback loop phases')
@click.option('--phases', callback=parse_phases, help='Comma separated phase settings')
@click.argument('program', type=click.Path(exists=True, dir_okay=False, path_type=Path))
def amplify(verbose: bool, trace: bool, feedback: bool, phases: list[int] | None, program: Path):
    lg.basicConfig(level=lg.DEBUG if verbose or trace else lg.INFO)

    if phases is None:
        phases = list(FEEDBACK_PHASES if feedback else SERIAL_PHASES)

    lg.info(f'Amplifying {program.name} with phases {phases}')
    memory = read_program(program, {})

    try:
        signal = amplifiers.max_signal(memory, phases, trace)

    except (IntCodeError, ValueError) as e:
        lg.error(f'Execution halted on error: {e}')
        sys.exit(EXIT_EXEC_ERROR)

    except KeyboardInterrupt:
        lg.info('Execution halted by the user')
        sys.exit(EXIT_KEYBOARD)

    click.echo(signal)


if __name__ == '__main__':
    cli()
