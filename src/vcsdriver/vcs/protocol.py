"""VcsDriver protocol definition.

A driver materializes a working copy of a remote repository at a requested
reference and reports the revision it checked out. :class:`GitDriver
<vcsdriver.git.driver.GitDriver>` satisfies the protocol via structural
typing; no explicit inheritance is required.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from typing import Protocol, runtime_checkable

__all__ = ["DriverFactory", "VcsDriver"]


@runtime_checkable
class VcsDriver(Protocol):
    """Backend-independent working copy operations."""

    def head_rev(self, working_dir: str | os.PathLike[str]) -> str:
        """Return the full revision id checked out in *working_dir*."""
        ...

    def pull(
        self, working_dir: str | os.PathLike[str], remote_url: str, reference: str
    ) -> str:
        """Update an existing working copy; return the new revision id."""
        ...

    def clone(
        self, working_dir: str | os.PathLike[str], remote_url: str, reference: str
    ) -> str:
        """Create a new working copy; return the checked out revision id."""
        ...

    def special_files(self) -> tuple[str, ...]:
        """Return names of the backend's bookkeeping entries in a working copy."""
        ...


#: Builds a driver from an opaque configuration payload.
DriverFactory = Callable[[bytes], VcsDriver]
