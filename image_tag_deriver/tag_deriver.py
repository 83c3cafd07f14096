"""
Tag Derivation Module

The functional core: derives fully qualified image tags from a git ref,
a commit sha and a tagging policy. No I/O happens here apart from
reading the clock for snapshot tags, which can be injected.
"""

import logging
from datetime import datetime
from typing import Callable, List, Optional

from .config import LATEST_TAG, TagConfig
from .models import DeriveResult, RefInfo, RefType, SemverMode
from .ref_classification import classify_ref, split_separated_tag
from .semver_expansion import create_semver
from .snapshot import create_snapshot, utc_now

logger = logging.getLogger(__name__)


def create_full_name(image: str, registry: Optional[str]) -> str:
    """Prefix the image with the registry unless it already contains it."""
    if registry and registry not in image:
        return f"{registry}/{image}"
    return image


def derive_tags(
    config: TagConfig,
    ref_info: RefInfo,
    clock: Callable[[], datetime] = utc_now,
) -> DeriveResult:
    """
    Derive the image tags for a build event.

    Args:
        config: Tagging policy
        ref_info: Git ref and commit sha of the build
        clock: Returns the current time, used for snapshot tags

    Returns:
        DeriveResult with unique tags qualified as <image>:<tag> and the
        semantic version (None unless a semver tag was parsed)

    Raises:
        ValidationError: If the ref is a non-semver tag and tag_semver is FAIL
    """
    image_name = create_full_name(config.image, config.registry)
    tags: List[str] = []
    version = None

    classified = classify_ref(ref_info.ref)
    logger.debug(f"Ref '{ref_info.ref}' classified as {classified.ref_type.value}: '{classified.value}'")

    if classified.ref_type == RefType.DEFAULT_BRANCH:
        tags.append(LATEST_TAG)
    elif classified.ref_type == RefType.TAG:
        _, tag = split_separated_tag(classified.value, config.tag_separator)

        if config.tag_semver != SemverMode.OFF:
            semver_result = create_semver(config, tag)
            version = semver_result.semantic
            tags.extend(semver_result.tags)
        else:
            tags.append(tag)
    elif classified.ref_type == RefType.PULL_REQUEST:
        tags.append(ref_info.sha)
    else:
        tags.append(classified.value)

    tags.extend(config.tag_extra)

    if config.snapshot:
        tags.append(create_snapshot(ref_info.sha, clock()))

    if not tags:
        tags.append(ref_info.sha)

    # dict keeps insertion order
    qualified = [f"{image_name}:{tag}" for tag in dict.fromkeys(tags)]
    logger.info(f"Derived {len(qualified)} tag(s) for {image_name}, version: {version}")

    return DeriveResult(tags=qualified, version=version)
