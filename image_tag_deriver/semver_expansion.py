"""
Semver Expansion Module

Pure functions for turning a semantic version tag into image tags,
including the "higher" floating tags (1.2.3 -> 1.2 -> 1).
"""

import logging
from typing import List, Optional, Tuple

import semver

from .config import TagConfig
from .exceptions import ValidationError
from .models import PrereleaseMode, SemverMode, SemverResult

logger = logging.getLogger(__name__)


def parse_version(tag: str) -> Optional[semver.Version]:
    """
    Parse a tag as a semantic version.

    Surrounding whitespace and a single leading "v" are accepted
    (v1.2.3 parses as 1.2.3).

    Args:
        tag: Tag value, e.g. "v1.2.3-beta.1"

    Returns:
        Parsed Version or None if the tag is not a valid semver
    """
    candidate = tag.strip()
    if candidate.startswith("v"):
        candidate = candidate[1:]
    try:
        return semver.Version.parse(candidate)
    except ValueError:
        return None


def prerelease_ids(version: semver.Version) -> Tuple[str, ...]:
    if not version.prerelease:
        return ()
    return tuple(version.prerelease.split("."))


def render_core(version: semver.Version) -> str:
    return f"{version.major}.{version.minor}.{version.patch}"


def render_primary(version: semver.Version, mode: Optional[PrereleaseMode]) -> str:
    """Render the primary tag of a version according to the prerelease mode."""
    if mode == PrereleaseMode.SHORT:
        ids = prerelease_ids(version)
        pre = f"-{ids[0]}" if ids else ""
        return render_core(version) + pre
    if mode == PrereleaseMode.FULL:
        return str(version)
    return render_core(version)


def create_semver(config: TagConfig, tag: str) -> SemverResult:
    """
    Expand a git tag into semver image tags.

    Args:
        config: Tagging policy
        tag: Tag value without ref prefix and project name

    Returns:
        SemverResult with the primary tag first and the semantic version,
        or an empty result if the tag is not a semver

    Raises:
        ValidationError: If the tag is not a semver and tag_semver is FAIL
    """
    version = parse_version(tag)

    if version is None:
        if config.tag_semver == SemverMode.FAIL:
            raise ValidationError(tag)
        logger.debug(f"Tag '{tag}' is not a semver, skipping semver tags")
        return SemverResult()

    semantic = render_primary(version, config.semver_prerelease)
    tags = [semantic]

    if config.semver_higher:
        tags.extend(create_higher(config, version))

    return SemverResult(tags=tags, semantic=semantic)


def create_higher(config: TagConfig, version: semver.Version) -> List[str]:
    """
    Create progressively less specific tags for a version.

    With prerelease ids [beta, 1] this yields
    1.2.3-beta.1, 1.2.3-beta, 1.2.3, 1.2, 1.

    Args:
        config: Tagging policy, only semver_prerelease is used
        version: Parsed version

    Returns:
        List of tags, most specific first
    """
    ids = prerelease_ids(version)

    if config.semver_prerelease == PrereleaseMode.CUT:
        ids = ()
    elif config.semver_prerelease == PrereleaseMode.SHORT:
        ids = ids[:1]

    core = render_core(version)
    tags = [f"{core}-{'.'.join(ids[:end])}" for end in range(len(ids), 0, -1)]
    tags.extend([
        core,
        f"{version.major}.{version.minor}",
        f"{version.major}",
    ])
    return tags
