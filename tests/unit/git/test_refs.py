"""Tests for reference classification."""

from __future__ import annotations

import pytest

from vcsdriver.git.refs import (
    RefKind,
    classify_reference,
    is_pinned_revision,
    pinned_sha,
)

SHA = "0123456789abcdef0123456789abcdef01234567"


class TestClassifyReference:
    @pytest.mark.parametrize(
        "ref",
        [
            SHA,
            "f" * 40,
            f"refs/heads/{SHA}",
            f"x{SHA}",
        ],
    )
    def test_trailing_sha_is_pinned(self, ref: str) -> None:
        assert classify_reference(ref) is RefKind.PINNED
        assert is_pinned_revision(ref) is True

    @pytest.mark.parametrize(
        "ref",
        [
            "main",
            "v1.2.3",
            "release/2024",
            "",
            SHA[:39],
            SHA.upper(),
            f"{SHA}-hotfix",
            SHA[:20] + "g" + SHA[21:],
        ],
    )
    def test_everything_else_is_symbolic(self, ref: str) -> None:
        assert classify_reference(ref) is RefKind.SYMBOLIC
        assert is_pinned_revision(ref) is False

    def test_longer_hex_run_still_pinned(self) -> None:
        """Only the trailing 40 characters are examined."""
        assert is_pinned_revision("a" + SHA) is True


class TestPinnedSha:
    def test_returns_trailing_sha(self) -> None:
        assert pinned_sha(f"refs/tags/{SHA}") == SHA

    def test_symbolic_returns_none(self) -> None:
        assert pinned_sha("main") is None
