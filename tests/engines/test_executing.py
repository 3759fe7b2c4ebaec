import logging

import pytest

from kubefix._cogs.configs.configuration import FixtureSettings, ToolSettings
from kubefix._core.engines.executing import ExecutionError, ExecutionResult, run_command, run_shell


def test_success_returns_stdout():
    result = run_shell('echo hello')
    assert result == ("hello\n", None)
    assert result.output == "hello\n"
    assert result.error is None
    assert result.succeeded


def test_failure_returns_stderr():
    output, error = run_shell('echo boom >&2; exit 1')
    assert output == "boom\n"
    assert isinstance(error, ExecutionError)
    assert error.returncode == 1
    assert error.stderr == "boom\n"
    assert error.command == 'echo boom >&2; exit 1'


def test_stdout_is_never_returned_on_failure():
    result = run_shell('echo out; echo err >&2; exit 3')
    assert result.output == "err\n"
    assert not result.succeeded
    assert result.error.returncode == 3


def test_stderr_is_never_returned_on_success():
    result = run_shell('echo out; echo err >&2')
    assert result == ("out\n", None)


def test_failure_with_empty_stderr():
    result = run_shell('echo out; exit 2')
    assert result.output == ""
    assert result.error.returncode == 2


def test_shell_features_are_available():
    assert run_shell('echo a b c | tr " " "\\n" | wc -l | tr -d " "').output == "3\n"
    assert run_shell('cat <<EOF\nfrom heredoc\nEOF').output == "from heredoc\n"


def test_input_is_fed_to_stdin():
    assert run_shell('cat', input='from stdin').output == 'from stdin'


def test_custom_shell(settings):
    settings.tools.shell = 'sh'
    assert run_shell('echo $0', settings=settings).output == "sh\n"


def test_failure_is_logged(caplog):
    caplog.set_level(logging.DEBUG)
    run_shell('echo boom >&2; exit 1')
    errors = [record for record in caplog.records if record.levelno == logging.ERROR]
    assert len(errors) == 1
    assert errors[0].name == 'kubefix._core.engines.executing'
    assert errors[0].getMessage() == "Exited with status 1: boom\n"
    assert errors[0].command == 'echo boom >&2; exit 1'


def test_success_is_not_logged_as_error(caplog):
    caplog.set_level(logging.DEBUG)
    run_shell('echo hello')
    assert not [record for record in caplog.records if record.levelno >= logging.WARNING]
    assert any('echo hello' in message for message in caplog.messages)


def test_command_without_shell():
    result = run_command(['echo', '$HOME', '`id`', ';', 'exit 1'])
    assert result == ("$HOME `id` ; exit 1\n", None)


def test_command_with_input():
    assert run_command(['cat'], input='payload\n') == ('payload\n', None)


def test_command_failure():
    result = run_command(['sh', '-c', 'echo nope >&2; exit 4'])
    assert result.output == "nope\n"
    assert result.error.returncode == 4
    assert result.error.command == "sh -c 'echo nope >&2; exit 4'"


def test_launch_failure(tmp_path, caplog):
    absent = str(tmp_path / 'no-such-binary')
    result = run_command([absent, 'apply'])
    assert result.output == ""
    assert isinstance(result.error, ExecutionError)
    assert result.error.returncode is None
    assert 'Failed to launch' in str(result.error)
    assert any(record.levelno == logging.ERROR for record in caplog.records)


def test_launch_failure_of_the_shell():
    settings = FixtureSettings(tools=ToolSettings(shell='/no/such/shell'))
    result = run_shell('echo hello', settings=settings)
    assert result.output == ""
    assert not result.succeeded


def test_timeout_imposed_by_the_caller():
    result = run_command(['sleep', '10'], timeout=0.2)
    assert result.output == ""
    assert isinstance(result.error, ExecutionError)
    assert result.error.returncode is None
    assert 'Timed out' in str(result.error)


def test_undecodable_output_is_replaced():
    result = run_shell("printf 'ok \\377\\n'")
    assert result.succeeded
    assert result.output.startswith('ok ')
    assert "\ufffd" in result.output


def test_result_is_a_tuple():
    result = ExecutionResult("out", None)
    output, error = result
    assert (output, error) == ("out", None)
    assert isinstance(result, tuple)


def test_shell_settings_are_read_from_the_environment(mocker):
    from_env = mocker.spy(FixtureSettings, 'from_env')
    assert run_shell('echo hello') == ("hello\n", None)
    assert from_env.call_count == 1


def test_explicit_shell_settings_ignore_the_environment(mocker, settings):
    from_env = mocker.spy(FixtureSettings, 'from_env')
    assert run_shell('echo hello', settings=settings) == ("hello\n", None)
    assert not from_env.called
