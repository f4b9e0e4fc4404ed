"""Unit tests for the exception hierarchy."""

from __future__ import annotations

import pytest

from vcsdriver.exceptions import (
    ConfigError,
    DriverConfigError,
    OutputReadError,
    ProcessError,
    RegistryError,
    RevisionMismatchError,
    UnknownDriverError,
    VcsDriverError,
)


class TestProcessError:
    def test_carries_step_context(self) -> None:
        error = ProcessError(
            "git ref-fetch failed",
            step="ref-fetch",
            command=["git", "fetch", "origin"],
            exit_code=128,
            output="fatal: couldn't find remote ref",
        )

        assert error.message == "git ref-fetch failed"
        assert str(error) == "git ref-fetch failed"
        assert error.step == "ref-fetch"
        assert error.command == ("git", "fetch", "origin")
        assert error.exit_code == 128
        assert error.started is True

    def test_defaults(self) -> None:
        error = ProcessError("boom")

        assert error.step is None
        assert error.command == ()
        assert error.exit_code is None
        assert error.output == ""
        assert error.started is False


class TestOtherErrors:
    def test_revision_mismatch(self) -> None:
        error = RevisionMismatchError(expected="a" * 40, actual="b" * 40)
        assert "a" * 40 in error.message
        assert "b" * 40 in error.message

    def test_unknown_driver(self) -> None:
        error = UnknownDriverError("hg")
        assert error.name == "hg"
        assert error.message == "Unknown VCS driver: 'hg'"

    def test_driver_config_error(self) -> None:
        error = DriverConfigError("bad", driver="git", field="executable", value=1)
        assert error.driver == "git"
        assert error.field == "executable"
        assert error.value == 1

    def test_output_read_error(self) -> None:
        assert OutputReadError("eof", step="resolve-head").step == "resolve-head"


@pytest.mark.parametrize(
    ("error", "parents"),
    [
        (ProcessError("x"), (VcsDriverError,)),
        (OutputReadError("x"), (VcsDriverError,)),
        (RevisionMismatchError("a", "b"), (VcsDriverError,)),
        (UnknownDriverError("x"), (RegistryError, VcsDriverError)),
        (DriverConfigError("x", driver="git"), (ConfigError, VcsDriverError)),
    ],
)
def test_hierarchy(error: VcsDriverError, parents: tuple[type, ...]) -> None:
    for parent in parents:
        assert isinstance(error, parent)
