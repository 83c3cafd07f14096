"""
Configuration Module for Image Tag Deriver

This module contains configuration settings and data structures used throughout the application.
It defines constants and the tagging policy record that control
how image tags are derived from a git ref.

Constants:
    DEFAULT_BRANCH: Branch name that is published as the "latest" tag
    LATEST_TAG: Tag used for builds of the default branch
    BRANCH_REF_PREFIX: Prefix of branch refs
    TAG_REF_PREFIX: Prefix of git tag refs
    PULL_REQUEST_REF_PREFIX: Prefix of pull request refs
    SNAPSHOT_SHA_LENGTH: Number of sha characters used in snapshot tags
    SNAPSHOT_TIME_FORMAT: strftime format of the snapshot timestamp

Classes:
    TagConfig: Tagging policy for a single derivation
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .exceptions import ConfigurationError
from .models import PrereleaseMode, SemverMode

# Constants
DEFAULT_BRANCH = "master"
LATEST_TAG = "latest"
BRANCH_REF_PREFIX = "refs/heads/"
TAG_REF_PREFIX = "refs/tags/"
PULL_REQUEST_REF_PREFIX = "refs/pull/"
SNAPSHOT_SHA_LENGTH = 6
SNAPSHOT_TIME_FORMAT = "%Y%m%d-%H%M%S"
DEFAULT_CONFIG_FILE = ".image-tags.yaml"


@dataclass(frozen=True)
class TagConfig:
    """Tagging policy for a single derivation."""

    image: str
    registry: Optional[str] = None
    tag_semver: SemverMode = SemverMode.OFF
    semver_prerelease: Optional[PrereleaseMode] = None
    semver_higher: bool = False
    tag_separator: Optional[str] = None
    tag_extra: Tuple[str, ...] = ()
    snapshot: bool = False

    def __post_init__(self):
        if not self.image:
            raise ConfigurationError("image is required")
        # Lists coming from YAML or env parsing are frozen into a tuple
        if not isinstance(self.tag_extra, tuple):
            object.__setattr__(self, "tag_extra", tuple(self.tag_extra or ()))
