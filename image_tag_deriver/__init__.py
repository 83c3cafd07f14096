"""Derive container image tags from git refs."""

from .config import TagConfig
from .exceptions import ConfigurationError, TagDeriverError, ValidationError
from .models import DeriveResult, PrereleaseMode, RefInfo, SemverMode
from .tag_deriver import derive_tags

__all__ = [
    "ConfigurationError",
    "DeriveResult",
    "PrereleaseMode",
    "RefInfo",
    "SemverMode",
    "TagConfig",
    "TagDeriverError",
    "ValidationError",
    "derive_tags",
]
