from __future__ import annotations

from collections.abc import Sequence

from vcsdriver.exceptions.base import VcsDriverError


class ProcessError(VcsDriverError):
    """Exception raised when an external VCS command fails.

    Covers both a command that could not be launched (``exit_code`` is None)
    and one that exited with a non-zero status.

    Attributes:
        message: Human-readable error message.
        step: Name of the pipeline step that failed (e.g. "ref-fetch").
        command: Full argv of the failing command.
        exit_code: Process exit code, or None if it never started.
        output: Combined stdout and stderr of the failing command.
    """

    def __init__(
        self,
        message: str,
        step: str | None = None,
        command: Sequence[str] = (),
        exit_code: int | None = None,
        output: str = "",
    ) -> None:
        """Initialize the ProcessError.

        Args:
            message: Human-readable error message.
            step: Name of the failing step.
            command: Argv of the failing command.
            exit_code: Process exit code.
            output: Combined command output.
        """
        self.step = step
        self.command = tuple(command)
        self.exit_code = exit_code
        self.output = output
        super().__init__(message)

    @property
    def started(self) -> bool:
        """Whether the process was launched at all."""
        return self.exit_code is not None


class OutputReadError(VcsDriverError):
    """Exception raised when a command's output stream cannot be read.

    Attributes:
        message: Human-readable error message.
        step: Name of the step whose output could not be drained.
    """

    def __init__(self, message: str, step: str | None = None) -> None:
        self.step = step
        super().__init__(message)


class RevisionMismatchError(VcsDriverError):
    """Exception raised when a checkout does not land on the pinned revision.

    Only raised when pinned-revision verification is enabled.

    Attributes:
        message: Human-readable error message.
        expected: The requested 40-hex revision.
        actual: The revision reported by the working copy.
    """

    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Working copy is at {actual} but revision {expected} was requested"
        )
