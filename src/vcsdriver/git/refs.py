"""Reference classification.

A reference is either a pinned revision (ends with a full 40-character
lowercase hex commit id) or a symbolic name such as a branch or tag.
"""

from __future__ import annotations

import re
from enum import Enum

__all__ = ["RefKind", "classify_reference", "is_pinned_revision", "pinned_sha"]

#: Searched, not fully matched: only the trailing 40 characters matter.
_SHA_PATTERN = re.compile(r"[0-9a-f]{40}$")


class RefKind(str, Enum):
    """How a reference is resolved."""

    PINNED = "pinned"
    SYMBOLIC = "symbolic"


def is_pinned_revision(ref: str) -> bool:
    """Return True if *ref* ends with a 40-character lowercase hex id."""
    return _SHA_PATTERN.search(ref) is not None


def classify_reference(ref: str) -> RefKind:
    """Classify *ref* as a pinned revision or a symbolic reference."""
    return RefKind.PINNED if is_pinned_revision(ref) else RefKind.SYMBOLIC


def pinned_sha(ref: str) -> str | None:
    """Return the trailing 40-hex commit id of *ref*, or None if symbolic."""
    match = _SHA_PATTERN.search(ref)
    return match.group(0) if match else None
