"""Discrete git invocations used by the driver pipelines.

Each builder returns a :class:`GitStep` describing one external command:
its argv (without the executable) and the directory it runs in. The argv
produced here is the driver's entire command surface.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from vcsdriver.constants import DEFAULT_REMOTE

__all__ = [
    "GitStep",
    "StepResult",
    "full_clone",
    "full_fetch",
    "ref_fetch",
    "reset_to_ref",
    "reset_to_rev",
    "resolve_head",
    "set_remote",
    "shallow_clone",
    "unshallow_fetch",
]


@dataclass(frozen=True, slots=True)
class GitStep:
    """A single git command to execute.

    Attributes:
        name: Short step identifier used in logs and errors.
        args: Arguments following the git executable.
        cwd: Directory the command runs in.
        network: True if the step transfers data from a remote.
    """

    name: str
    args: tuple[str, ...]
    cwd: Path
    network: bool = False


@dataclass(frozen=True, slots=True)
class StepResult:
    """Outcome of executing a :class:`GitStep`.

    Attributes:
        step: The step that ran.
        command: Full argv including the executable.
        exit_code: Process exit status, or None if it could not be started.
        stdout: Captured standard output.
        stderr: Captured standard error.
        duration_ms: Wall-clock execution time.
    """

    step: GitStep
    command: tuple[str, ...]
    exit_code: int | None
    stdout: str = ""
    stderr: str = ""
    duration_ms: int = 0

    @property
    def success(self) -> bool:
        return self.exit_code == 0

    @property
    def output(self) -> str:
        """Combined stdout and stderr."""
        if self.stdout and self.stderr:
            return f"{self.stdout}\n{self.stderr}"
        return self.stdout or self.stderr


def resolve_head(working_dir: Path) -> GitStep:
    return GitStep("resolve-head", ("rev-parse", "HEAD"), working_dir)


def set_remote(working_dir: Path, url: str) -> GitStep:
    return GitStep(
        "set-remote", ("remote", "set-url", DEFAULT_REMOTE, url), working_dir
    )


def unshallow_fetch(working_dir: Path) -> GitStep:
    return GitStep(
        "unshallow-fetch",
        ("fetch", "--unshallow", DEFAULT_REMOTE),
        working_dir,
        network=True,
    )


def full_fetch(working_dir: Path) -> GitStep:
    return GitStep("full-fetch", ("fetch", DEFAULT_REMOTE), working_dir, network=True)


def reset_to_rev(working_dir: Path, ref: str) -> GitStep:
    return GitStep("reset-to-rev", ("reset", "--hard", ref), working_dir)


def ref_fetch(working_dir: Path, ref: str) -> GitStep:
    """Fetch only *ref* at depth 1 into its remote-tracking ref."""
    return GitStep(
        "ref-fetch",
        (
            "fetch",
            "--prune",
            "--no-tags",
            "--depth",
            "1",
            DEFAULT_REMOTE,
            f"+{ref}:remotes/{DEFAULT_REMOTE}/{ref}",
        ),
        working_dir,
        network=True,
    )


def reset_to_ref(working_dir: Path, ref: str) -> GitStep:
    return GitStep(
        "reset-to-ref", ("reset", "--hard", f"{DEFAULT_REMOTE}/{ref}"), working_dir
    )


def full_clone(working_dir: Path, url: str) -> GitStep:
    """Clone complete history; runs in the parent of *working_dir*."""
    return GitStep("full-clone", ("clone", url, working_dir.name), working_dir.parent)


def shallow_clone(working_dir: Path, url: str, ref: str) -> GitStep:
    """Clone only *ref* at depth 1; runs in the parent of *working_dir*."""
    return GitStep(
        "shallow-clone",
        ("clone", "--depth", "1", "--branch", ref, url, working_dir.name),
        working_dir.parent,
    )
