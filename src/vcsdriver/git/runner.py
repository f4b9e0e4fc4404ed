"""Execution of git steps through GitPython.

:class:`GitCommandRunner` turns a :class:`~vcsdriver.git.steps.GitStep` into
a :class:`~vcsdriver.git.steps.StepResult`. Non-zero exits are reported in
the result rather than raised; :meth:`GitCommandRunner.run_steps` is the
short-circuiting pipeline that converts the first failure into a
:class:`~vcsdriver.exceptions.ProcessError`.
"""

from __future__ import annotations

import errno
import time
from collections.abc import Iterable

from git import Git
from git.exc import GitCommandNotFound
from tenacity import (
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from vcsdriver.constants import DEFAULT_GIT_EXECUTABLE
from vcsdriver.exceptions import OutputReadError, ProcessError
from vcsdriver.git.steps import GitStep, StepResult
from vcsdriver.logging import get_logger

logger = get_logger(__name__)

__all__ = ["GitCommandRunner", "is_network_failure"]

#: errno values from Popen that mean the executable could not be launched
LAUNCH_ERRNOS: frozenset[int] = frozenset(
    {errno.ENOENT, errno.EACCES, errno.EPERM, errno.ENOTDIR, errno.ENOEXEC}
)

#: Output fragments that mark a transient transfer failure
NETWORK_ERROR_PATTERNS: tuple[str, ...] = (
    "could not resolve host",
    "connection refused",
    "connection timed out",
    "connection reset",
    "network unreachable",
    "temporary failure",
    "unable to access",
    "early eof",
    "the remote end hung up unexpectedly",
)


def is_network_failure(output: str) -> bool:
    """Check if command output indicates a retryable network error."""
    output_lower = output.lower()
    return any(pattern in output_lower for pattern in NETWORK_ERROR_PATTERNS)


def _as_text(value: str | bytes | None) -> str:
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return value


class _RetryableStepError(Exception):
    """Signals tenacity to re-run a network step."""

    def __init__(self, result: StepResult) -> None:
        super().__init__(f"{result.step.name} failed, retrying")
        self.result = result


class GitCommandRunner:
    """Execute git steps synchronously, one process at a time.

    Holds only immutable settings, so one runner can be shared by threads
    working on different directories.

    Attributes:
        executable: Git executable placed at argv[0].
        timeout: Seconds before a command is killed (None for no timeout).
        network_retries: Extra attempts for network steps.

    Example:
        ```python
        runner = GitCommandRunner()
        result = runner.run(resolve_head(Path("/srv/repos/app")))
        if result.success:
            print(result.stdout)
        ```
    """

    def __init__(
        self,
        executable: str = DEFAULT_GIT_EXECUTABLE,
        timeout: float | None = None,
        network_retries: int = 0,
    ) -> None:
        self._executable = executable
        self._timeout = timeout
        self._network_retries = network_retries

    @property
    def executable(self) -> str:
        return self._executable

    @property
    def timeout(self) -> float | None:
        return self._timeout

    @property
    def network_retries(self) -> int:
        return self._network_retries

    def command_for(self, step: GitStep) -> tuple[str, ...]:
        """Return the full argv for *step*."""
        return (self._executable, *step.args)

    def run(self, step: GitStep) -> StepResult:
        """Execute *step*, retrying network failures if configured.

        Args:
            step: Step to execute.

        Returns:
            StepResult; ``exit_code`` is None if the process could not start.

        Raises:
            OutputReadError: If the command's output could not be read.
        """
        if not step.network or self._network_retries == 0:
            return self._execute_once(step)

        retrying = Retrying(
            retry=retry_if_exception_type(_RetryableStepError),
            stop=stop_after_attempt(self._network_retries + 1),
            wait=wait_exponential(multiplier=1, min=1, max=10),
            before_sleep=lambda state: logger.info(
                "git_step_retrying", step=step.name, attempt=state.attempt_number
            ),
            reraise=True,
        )
        try:
            return retrying(self._attempt_network_step, step)
        except _RetryableStepError as e:
            return e.result

    def _attempt_network_step(self, step: GitStep) -> StepResult:
        result = self._execute_once(step)
        if result.success or not is_network_failure(result.output):
            return result
        raise _RetryableStepError(result)

    def _execute_once(self, step: GitStep) -> StepResult:
        command = self.command_for(step)
        logger.debug(
            "git_step_started", step=step.name, command=command, cwd=str(step.cwd)
        )

        # GitPython silently falls back to the process cwd when the
        # directory is not accessible.
        if not step.cwd.is_dir():
            return StepResult(
                step=step,
                command=command,
                exit_code=None,
                stderr=f"Working directory does not exist: {step.cwd}",
            )

        start_time = time.monotonic()
        try:
            status, stdout, stderr = Git(str(step.cwd)).execute(
                list(command),
                with_extended_output=True,
                with_exceptions=False,
                kill_after_timeout=self._timeout,
            )
        except GitCommandNotFound as e:
            return StepResult(
                step=step,
                command=command,
                exit_code=None,
                stderr=f"Could not start {command[0]}: {e}",
            )
        except OSError as e:
            # GitPython only maps ENOENT to GitCommandNotFound; other exec
            # failures (mode 0644, path through a file) surface raw.
            if e.filename == command[0] or e.errno in LAUNCH_ERRNOS:
                return StepResult(
                    step=step,
                    command=command,
                    exit_code=None,
                    stderr=f"Could not start {command[0]}: {e}",
                )
            logger.warning(
                "git_step_output_unreadable",
                step=step.name,
                command=command,
                cwd=str(step.cwd),
                error=str(e),
            )
            raise OutputReadError(
                f"Failed reading output of {step.name}: {e}", step=step.name
            ) from e

        return StepResult(
            step=step,
            command=command,
            exit_code=status,
            stdout=_as_text(stdout),
            stderr=_as_text(stderr),
            duration_ms=int((time.monotonic() - start_time) * 1000),
        )

    def check(self, step: GitStep) -> StepResult:
        """Execute *step* and raise if it did not succeed.

        Raises:
            ProcessError: If the step could not start or exited non-zero.
            OutputReadError: If the command's output could not be read.
        """
        result = self.run(step)
        if not result.success:
            raise _failure(result)
        return result

    def run_steps(self, steps: Iterable[GitStep]) -> list[StepResult]:
        """Run *steps* in order, stopping at the first failure.

        *steps* may be a generator; the next step is only requested after the
        previous one has succeeded.

        Returns:
            Results of every step, all successful.

        Raises:
            ProcessError: For the first step that fails.
        """
        return [self.check(step) for step in steps]


def _failure(result: StepResult) -> ProcessError:
    """Log a failed step with its output and build the matching error."""
    step = result.step
    logger.warning(
        "git_step_failed",
        step=step.name,
        command=result.command,
        cwd=str(step.cwd),
        exit_code=result.exit_code,
        output=result.output,
    )
    if result.exit_code is None:
        message = f"git {step.name} could not be started in {step.cwd}"
    else:
        message = f"git {step.name} failed in {step.cwd} (exit {result.exit_code})"
    return ProcessError(
        message,
        step=step.name,
        command=result.command,
        exit_code=result.exit_code,
        output=result.output,
    )
