"""Git backend.

Usage:
    ```python
    from vcsdriver.git import GitDriver

    driver = GitDriver()
    revision = driver.clone(path, url, "main")
    ```
"""

from __future__ import annotations

from vcsdriver.git.driver import (
    SPECIAL_FILES,
    AsyncGitDriver,
    GitDriver,
    is_shallow,
    new_git_driver,
)
from vcsdriver.git.refs import (
    RefKind,
    classify_reference,
    is_pinned_revision,
    pinned_sha,
)
from vcsdriver.git.runner import GitCommandRunner
from vcsdriver.git.steps import GitStep, StepResult

__all__ = [
    "SPECIAL_FILES",
    "AsyncGitDriver",
    "GitCommandRunner",
    "GitDriver",
    "GitStep",
    "RefKind",
    "StepResult",
    "classify_reference",
    "is_pinned_revision",
    "is_shallow",
    "new_git_driver",
    "pinned_sha",
]
