from click.testing import CliRunner

from intcode.common.conf import (
    EXIT_OK,
    EXIT_LOAD_ERROR,
    EXIT_AWAITING_INPUT,
    EXIT_EXEC_ERROR
)
from intcode.tools.cli import cli

import unit_utils


def program(name: str) -> str:
    return str(unit_utils.find_file(f'testdata/programs/{name}.ic'))


def config(name: str) -> str:
    return str(unit_utils.find_file(f'testdata/config/{name}.toml'))


def invoke(*args: str):
    return CliRunner().invoke(cli, list(args))


def lines(result) -> list[str]:
    return result.output.splitlines()


def test_run_echo():
    result = invoke('run', '-i', '7', program('echo'))
    assert result.exit_code == EXIT_OK
    assert '7' in lines(result)


def test_run_several_inputs():
    result = invoke('run', '--input', '8', '-i', '3', program('compare8'))
    assert result.exit_code == EXIT_OK
    assert '1000' in lines(result)


def test_run_dump():
    result = invoke('run', '--dump', program('gravity'))
    assert result.exit_code == EXIT_OK
    assert '3500,9,10,70,2,3,11,0,99,30,40,50' in lines(result)


def test_run_patch():
    result = invoke('run', '-s', '10=7', '-i', '7', program('equal8'))
    assert result.exit_code == EXIT_OK
    assert '1' in lines(result)


def test_run_config():
    result = invoke('run', '-c', config('run'), program('equal8'))
    assert result.exit_code == EXIT_OK
    assert '1' in lines(result)
    assert '3,9,8,9,10,9,4,9,99,1,7' in lines(result)


def test_run_config_overridden_by_options():
    result = invoke('run', '-c', config('run'), '-i', '8', program('equal8'))
    assert result.exit_code == EXIT_OK
    assert '0' in lines(result)


def test_run_bad_config():
    result = invoke('run', '-c', config('bad'), program('equal8'))
    assert result.exit_code == 2


def test_run_bad_patch():
    result = invoke('run', '-s', 'nonsense', program('echo'))
    assert result.exit_code == 2


def test_run_patch_out_of_range():
    result = invoke('run', '-s', '99=1', program('echo'))
    assert result.exit_code == EXIT_LOAD_ERROR


def test_run_malformed():
    result = invoke('run', program('malformed'))
    assert result.exit_code == EXIT_LOAD_ERROR


def test_run_awaiting_input():
    result = invoke('run', program('echo'))
    assert result.exit_code == EXIT_AWAITING_INPUT


def test_run_execution_error():
    result = invoke('run', program('bad_opcode'))
    assert result.exit_code == EXIT_EXEC_ERROR


def test_run_missing_file():
    result = invoke('run', program('does_not_exist'))
    assert result.exit_code == 2


def test_amplify_serial():
    result = invoke('amplify', program('amp_serial'))
    assert result.exit_code == EXIT_OK
    assert '43210' in lines(result)


def test_amplify_feedback():
    result = invoke('amplify', '--feedback', program('amp_feedback'))
    assert result.exit_code == EXIT_OK
    assert '139629729' in lines(result)


def test_amplify_explicit_phases():
    result = invoke('amplify', '--phases', '9,8,7,6,5', program('amp_feedback'))
    assert result.exit_code == EXIT_OK
    assert '139629729' in lines(result)


def test_amplify_bad_phases():
    result = invoke('amplify', '--phases', 'one,two', program('amp_serial'))
    assert result.exit_code == 2


def test_amplify_execution_error():
    result = invoke('amplify', program('bad_opcode'))
    assert result.exit_code == EXIT_EXEC_ERROR


def test_run_binary_program(tmp_path):
    path = tmp_path / 'binary.ic'
    path.write_bytes(b'1,\xff')

    result = invoke('run', str(path))
    assert result.exit_code == EXIT_LOAD_ERROR


def test_run_config_wrong_shape(tmp_path):
    path = tmp_path / 'run.toml'
    path.write_text('[run]\ninputs = 1\n')

    result = invoke('run', '-c', str(path), program('echo'))
    assert result.exit_code == 2
