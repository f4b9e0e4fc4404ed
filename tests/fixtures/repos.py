"""Git repository fixtures.

Upstream repositories are ordinary (non-bare) repos built with GitPython.
Drivers reach them through ``file://`` URLs so that ``--depth`` is honoured.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import pytest
from git import Repo


@dataclass
class Upstream:
    """A local repository acting as the remote."""

    path: Path
    repo: Repo
    commits: list[str] = field(default_factory=list)

    @property
    def url(self) -> str:
        return self.path.as_uri()

    @property
    def tip(self) -> str:
        return self.repo.head.commit.hexsha

    def commit(self, filename: str, content: str, message: str) -> str:
        (self.path / filename).write_text(content)
        self.repo.index.add([filename])
        sha = self.repo.index.commit(message).hexsha
        self.commits.append(sha)
        return sha


def make_upstream(path: Path, n_commits: int = 3) -> Upstream:
    """Create a repo at *path* with *n_commits* commits on ``main``."""
    path.mkdir(parents=True)
    repo = Repo.init(path)
    repo.config_writer().set_value("user", "email", "test@example.com").release()
    repo.config_writer().set_value("user", "name", "Test User").release()

    upstream = Upstream(path=path, repo=repo)
    for i in range(n_commits):
        upstream.commit("README.md", f"revision {i}\n", f"Commit {i}")
    repo.git.branch("-M", "main")
    return upstream


@pytest.fixture
def upstream(tmp_path: Path) -> Upstream:
    """Upstream repository with three commits on ``main``."""
    return make_upstream(tmp_path / "upstream")


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Existing parent directory for working copies."""
    path = tmp_path / "work"
    path.mkdir()
    return path
