"""Data models for ref classification and tag derivation results."""

from dataclasses import dataclass, field
from typing import List, Optional
from enum import Enum


class SemverMode(Enum):
    """How git tag refs are interpreted as semantic versions."""
    OFF = "off"    # Use the tag value literally
    ON = "on"      # Any other truthy value: expand, ignore non-semver tags
    SKIP = "skip"  # Expand, silently skip non-semver tags
    FAIL = "fail"  # Expand, raise ValidationError on non-semver tags


class PrereleaseMode(Enum):
    """How prerelease identifiers are rendered."""
    CUT = "cut"      # 1.2.3-beta.1 -> 1.2.3
    SHORT = "short"  # 1.2.3-beta.1 -> 1.2.3-beta
    FULL = "full"    # 1.2.3-beta.1 -> 1.2.3-beta.1


class RefType(Enum):
    """Kinds of git refs a build can be triggered by."""
    DEFAULT_BRANCH = "default_branch"
    TAG = "tag"
    PULL_REQUEST = "pull_request"
    BRANCH = "branch"


_DISABLED_SEMVER_VALUES = {"", "off", "false", "no", "0"}


def parse_semver_mode(value: Optional[str]) -> SemverMode:
    """Map a raw TAG_SEMVER value to a SemverMode.

    Known mode names map to themselves, falsy spellings to OFF and
    anything else to ON.
    """
    normalized = (value or "").strip().lower()
    if normalized in _DISABLED_SEMVER_VALUES:
        return SemverMode.OFF
    try:
        return SemverMode(normalized)
    except ValueError:
        return SemverMode.ON


@dataclass(frozen=True)
class RefInfo:
    """Raw ref and commit sha of the build event."""
    ref: str
    sha: str


@dataclass(frozen=True)
class ClassifiedRef:
    """A ref classified into exactly one RefType."""
    ref_type: RefType
    value: str


@dataclass(frozen=True)
class SemverResult:
    """Tags produced from a semantic version tag."""
    tags: List[str] = field(default_factory=list)
    semantic: Optional[str] = None


@dataclass(frozen=True)
class DeriveResult:
    """Result of a tag derivation."""
    tags: List[str]
    version: Optional[str] = None
