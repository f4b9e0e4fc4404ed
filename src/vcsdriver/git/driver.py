"""Git backend for the VCS driver layer.

The driver decides which git commands to run for a requested reference and
delegates every transfer and checkout to the git executable:

- Symbolic references (branches, tags) are cloned or fetched at depth 1.
- Pinned revisions need history that a shallow copy may lack, so they use a
  full clone, or an unshallowing fetch on an existing shallow copy.

Example:
    ```python
    from vcsdriver.git import GitDriver

    driver = GitDriver()
    rev = driver.clone("/srv/repos/app", "https://example.com/app.git", "main")
    rev = driver.pull("/srv/repos/app", "https://example.com/app.git", "main")
    ```
"""

from __future__ import annotations

import asyncio
import os
from collections.abc import Iterator
from pathlib import Path

from vcsdriver.config import GitDriverConfig, parse_git_driver_payload
from vcsdriver.constants import GIT_METADATA_DIR, GIT_SHALLOW_MARKER
from vcsdriver.exceptions import RevisionMismatchError
from vcsdriver.git import steps
from vcsdriver.git.refs import RefKind, classify_reference, pinned_sha
from vcsdriver.git.runner import GitCommandRunner
from vcsdriver.git.steps import GitStep
from vcsdriver.logging import get_logger

logger = get_logger(__name__)

__all__ = [
    "AsyncGitDriver",
    "GitDriver",
    "SPECIAL_FILES",
    "is_shallow",
    "new_git_driver",
]

#: Entries in a working copy that belong to git itself.
SPECIAL_FILES: tuple[str, ...] = (GIT_METADATA_DIR,)

PathArg = str | os.PathLike[str]


def is_shallow(working_dir: Path) -> bool:
    """Return True if *working_dir* is a shallow clone."""
    return (working_dir / GIT_METADATA_DIR / GIT_SHALLOW_MARKER).exists()


class GitDriver:
    """Materialize and update git working copies.

    Thread-safe: only stores immutable configuration and a stateless runner.
    Concurrent calls against the same working directory must be serialized
    by the caller.

    Args:
        config: Git backend settings. Defaults to GitDriverConfig().
        runner: Command runner; built from *config* when omitted.
    """

    def __init__(
        self,
        config: GitDriverConfig | None = None,
        runner: GitCommandRunner | None = None,
    ) -> None:
        self._config = config or GitDriverConfig()
        self._runner = runner or GitCommandRunner(
            executable=self._config.executable,
            timeout=self._config.command_timeout,
            network_retries=self._config.network_retries,
        )

    @property
    def config(self) -> GitDriverConfig:
        return self._config

    @property
    def runner(self) -> GitCommandRunner:
        return self._runner

    def head_rev(self, working_dir: PathArg) -> str:
        """Return the full commit id checked out in *working_dir*.

        Raises:
            ProcessError: If ``git rev-parse HEAD`` cannot run or fails.
            OutputReadError: If its output cannot be read.
        """
        result = self._runner.check(steps.resolve_head(Path(working_dir)))
        return result.stdout.strip()

    def pull(self, working_dir: PathArg, remote_url: str, reference: str) -> str:
        """Update an existing working copy to *reference* from *remote_url*.

        The origin remote is repointed to *remote_url* first, so the remote
        may have moved since the working copy was cloned.

        Args:
            working_dir: Existing working copy.
            remote_url: URL to fetch from.
            reference: Branch, tag, or 40-hex commit id.

        Returns:
            The commit id now checked out.

        Raises:
            ProcessError: If any git step fails; later steps are not run and
                the working copy is left as the last successful step left it.
            RevisionMismatchError: If pinned verification is enabled and
                HEAD does not match the pinned revision.
        """
        path = Path(working_dir)
        self._runner.run_steps(self._pull_steps(path, remote_url, reference))
        revision = self._finish(path, reference)
        logger.info(
            "pull_completed", working_dir=str(path), ref=reference, revision=revision
        )
        return revision

    def clone(self, working_dir: PathArg, remote_url: str, reference: str) -> str:
        """Create a working copy of *remote_url* at *reference*.

        *working_dir* must not exist yet; its parent must.

        Args:
            working_dir: Directory to create.
            remote_url: URL to clone.
            reference: Branch, tag, or 40-hex commit id.

        Returns:
            The commit id now checked out.

        Raises:
            ProcessError: If any git step fails.
            RevisionMismatchError: If pinned verification is enabled and
                HEAD does not match the pinned revision.
        """
        path = Path(working_dir)
        self._runner.run_steps(self._clone_steps(path, remote_url, reference))
        revision = self._finish(path, reference)
        logger.info(
            "clone_completed", working_dir=str(path), ref=reference, revision=revision
        )
        return revision

    def special_files(self) -> tuple[str, ...]:
        """Names of git's own bookkeeping entries inside a working copy."""
        return SPECIAL_FILES

    # -------------------------------------------------------------------------
    # Pipelines
    # -------------------------------------------------------------------------

    def _pull_steps(
        self, path: Path, remote_url: str, reference: str
    ) -> Iterator[GitStep]:
        yield steps.set_remote(path, remote_url)

        if classify_reference(reference) is RefKind.PINNED:
            # Checked lazily, after the remote has been repointed.
            if is_shallow(path):
                yield steps.unshallow_fetch(path)
            else:
                yield steps.full_fetch(path)
            yield steps.reset_to_rev(path, reference)
        else:
            yield steps.ref_fetch(path, reference)
            yield steps.reset_to_ref(path, reference)

    def _clone_steps(
        self, path: Path, remote_url: str, reference: str
    ) -> Iterator[GitStep]:
        if classify_reference(reference) is RefKind.PINNED:
            yield steps.full_clone(path, remote_url)
            yield steps.reset_to_rev(path, reference)
        else:
            yield steps.shallow_clone(path, remote_url, reference)

    def _finish(self, path: Path, reference: str) -> str:
        revision = self.head_rev(path)
        expected = pinned_sha(reference)
        if (
            self._config.verify_pinned_revision
            and expected is not None
            and revision != expected
        ):
            logger.warning(
                "pinned_revision_mismatch",
                working_dir=str(path),
                expected=expected,
                actual=revision,
            )
            raise RevisionMismatchError(expected=expected, actual=revision)
        return revision


class AsyncGitDriver:
    """Async wrapper around :class:`GitDriver`.

    Each operation runs in a worker thread via ``asyncio.to_thread``. Wrap a
    call in ``asyncio.wait_for`` to bound how long the caller waits; the git
    process itself is only bounded by ``command_timeout``.
    """

    def __init__(self, driver: GitDriver | None = None) -> None:
        self._driver = driver or GitDriver()

    @property
    def driver(self) -> GitDriver:
        return self._driver

    async def head_rev(self, working_dir: PathArg) -> str:
        return await asyncio.to_thread(self._driver.head_rev, working_dir)

    async def pull(self, working_dir: PathArg, remote_url: str, reference: str) -> str:
        return await asyncio.to_thread(
            self._driver.pull, working_dir, remote_url, reference
        )

    async def clone(
        self, working_dir: PathArg, remote_url: str, reference: str
    ) -> str:
        return await asyncio.to_thread(
            self._driver.clone, working_dir, remote_url, reference
        )

    def special_files(self) -> tuple[str, ...]:
        return self._driver.special_files()


def new_git_driver(config: bytes) -> GitDriver:
    """Driver factory registered under the name ``git``.

    Args:
        config: Opaque driver payload; empty for defaults, otherwise a YAML
            or JSON mapping of GitDriverConfig fields.

    Raises:
        DriverConfigError: If the payload cannot be parsed.
    """
    return GitDriver(parse_git_driver_payload(config))
