"""
Ref Classification Module

Pure functions for classifying git refs and splitting separated tags.
This module contains no side effects - only ref analysis logic.
"""

import logging
from typing import Optional, Tuple

from .config import BRANCH_REF_PREFIX, DEFAULT_BRANCH, PULL_REQUEST_REF_PREFIX, TAG_REF_PREFIX
from .models import ClassifiedRef, RefType

logger = logging.getLogger(__name__)


def parse_branch(ref: str) -> str:
    """Strip the branch prefix and flatten slashes (feature/foo -> feature-foo)."""
    return ref.replace(BRANCH_REF_PREFIX, "", 1).replace("/", "-")


def parse_tag(ref: str) -> str:
    return ref.replace(TAG_REF_PREFIX, "", 1)


def is_git_tag(ref: str) -> bool:
    return parse_tag(ref) != ref


def parse_pull_request(ref: str) -> str:
    return ref.replace(PULL_REQUEST_REF_PREFIX, "", 1)


def is_pull_request(ref: str) -> bool:
    return parse_pull_request(ref) != ref


def classify_ref(ref: str) -> ClassifiedRef:
    """
    Classify a git ref into exactly one RefType.

    The normalized branch name is compared against the default branch
    before the tag and pull request checks.

    Args:
        ref: Raw git ref, e.g. refs/heads/main or refs/tags/v1.2.3

    Returns:
        ClassifiedRef with the ref type and its value
    """
    branch = parse_branch(ref)

    if branch == DEFAULT_BRANCH:
        return ClassifiedRef(RefType.DEFAULT_BRANCH, branch)

    if is_git_tag(ref):
        return ClassifiedRef(RefType.TAG, parse_tag(ref))

    if is_pull_request(ref):
        return ClassifiedRef(RefType.PULL_REQUEST, parse_pull_request(ref))

    return ClassifiedRef(RefType.BRANCH, branch)


def split_separated_tag(tag: str, separator: Optional[str]) -> Tuple[str, str]:
    """
    Split a tag such as "api@1.2.3" into project name and version.

    Args:
        tag: Tag value without the refs/tags/ prefix
        separator: Configured separator, or None

    Returns:
        (name, version) split at the first separator occurrence, or
        ("", tag) when no separator is configured or found
    """
    if separator:
        name, found, version = tag.partition(separator)
        if found:
            logger.debug(f"Split tag '{tag}' into project '{name}' and version '{version}'")
            return name, version
    return "", tag
