"""
Running the external processes with their output captured.

The stdout & stderr are captured separately. Which of them is returned
depends on the outcome: stdout if the process has succeeded, stderr if it
has failed (non-zero exit, failed launch, or the caller's timeout expired).
The failures are not raised: they are returned as values, so that the tests
can assert on them or tolerate them. They are also always logged.

There is no internal timeout: a hung process blocks the caller.
The callers who need bounded latency must pass their own ``timeout``.
"""
import logging
import shlex
import subprocess
from typing import NamedTuple, Optional, Sequence

from kubefix._cogs.configs import configuration

logger = logging.getLogger(__name__)


class ExecutionError(Exception):
    """ A failed process: its exit status (if any) and its captured stderr. """

    def __init__(
            self,
            message: str,
            *,
            command: str,
            returncode: Optional[int] = None,
            stderr: str = '',
    ) -> None:
        super().__init__(message)
        self.command = command
        self.returncode = returncode
        self.stderr = stderr


class ExecutionResult(NamedTuple):
    """
    The outcome of a process: ``output, error = run_shell(...)``.

    The meaning of the output depends on the error: it is the stdout
    if there is no error, and it is the stderr if there is an error.
    """
    output: str
    error: Optional[ExecutionError]

    @property
    def succeeded(self) -> bool:
        return self.error is None


def run_shell(
        command: str,
        *,
        input: Optional[str] = None,
        timeout: Optional[float] = None,
        settings: Optional[configuration.FixtureSettings] = None,
) -> ExecutionResult:
    """
    Run a command line via the shell, so that pipes, redirects, heredocs work.
    """
    settings = settings if settings is not None else configuration.FixtureSettings.from_env()
    return _execute([settings.tools.shell, '-c', command], command=command,
                    input=input, timeout=timeout)


def run_command(
        args: Sequence[str],
        *,
        input: Optional[str] = None,
        timeout: Optional[float] = None,
) -> ExecutionResult:
    """
    Run a command as an argument vector, with no shell involved.

    The payloads (e.g. manifests) must be passed via ``input`` (stdin),
    never interpolated into the arguments.
    """
    return _execute(list(args), command=shlex.join(args),
                    input=input, timeout=timeout)


def _execute(
        args: Sequence[str],
        *,
        command: str,
        input: Optional[str],
        timeout: Optional[float],
) -> ExecutionResult:
    logger.debug(f"Running: {command}", extra=dict(command=command))
    try:
        completed = subprocess.run(
            args,
            input=input,
            timeout=timeout,
            capture_output=True,
            encoding='utf-8',
            errors='replace',
            check=False,
        )
    except OSError as e:
        stderr = ''
        error = ExecutionError(f"Failed to launch: {e}", command=command)
    except subprocess.TimeoutExpired as e:
        stderr = _decode(e.stderr)
        error = ExecutionError(f"Timed out after {timeout}s", command=command, stderr=stderr)
    else:
        if completed.returncode == 0:
            return ExecutionResult(completed.stdout, None)
        stderr = completed.stderr
        error = ExecutionError(f"Exited with status {completed.returncode}", command=command,
                               returncode=completed.returncode, stderr=stderr)

    logger.error(f"{error}: {stderr}", extra=dict(command=command))
    return ExecutionResult(stderr, error)


def _decode(data: Optional[str | bytes]) -> str:
    # TimeoutExpired carries the partial output as bytes even in the text mode.
    if isinstance(data, bytes):
        return data.decode('utf-8', errors='replace')
    return data or ''
