"""
Environment Configuration Module

Handles parsing and validation of environment variables.
This is a pure module - no side effects, just data transformation.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Optional, Any
import logging

import dpath

from .config import SNAPSHOT_SHA_LENGTH, TagConfig
from .exceptions import ConfigurationError
from .models import PrereleaseMode, RefInfo, SemverMode, parse_semver_mode
from .utils import parse_bool, split_list

logger = logging.getLogger(__name__)

# Config file key (dotted path) -> environment variable it provides a default for
CONFIG_FILE_KEYS = {
    "image": "IMAGE",
    "registry": "REGISTRY",
    "tag.semver": "TAG_SEMVER",
    "tag.separator": "TAG_SEPARATOR",
    "tag.extra": "TAG_EXTRA",
    "semver.prerelease": "SEMVER_PRERELEASE",
    "semver.higher": "SEMVER_HIGHER",
    "snapshot": "SNAPSHOT",
}


def config_file_to_env(data: Optional[Dict[str, Any]]) -> Dict[str, str]:
    """Flatten a parsed YAML config file into environment-style values.

    Args:
        data: Parsed YAML content, e.g. {"tag": {"semver": "fail"}}

    Returns:
        Dictionary keyed by environment variable name

    Raises:
        ConfigurationError: If a section such as "tag" is not a mapping
    """
    env = {}
    if not data:
        return env

    for path, env_name in CONFIG_FILE_KEYS.items():
        section, _, _ = path.rpartition(".")
        if section:
            parent = dpath.get(data, section, separator=".", default=None)
            if parent is not None and not isinstance(parent, dict):
                raise ConfigurationError(
                    f"Config file key '{section}' must be a mapping, got {type(parent).__name__}"
                )
        value = dpath.get(data, path, separator=".", default=None)
        if value is None:
            continue
        if isinstance(value, bool):
            env[env_name] = "true" if value else "false"
        elif isinstance(value, (list, tuple)):
            env[env_name] = ",".join(str(item) for item in value)
        else:
            env[env_name] = str(value)
    return env


@dataclass
class EnvironmentConfig:
    """Configuration parsed from environment variables."""

    image: str
    ref: str
    sha: str
    registry: Optional[str] = None
    tag_semver: SemverMode = SemverMode.OFF
    semver_prerelease: Optional[PrereleaseMode] = None
    semver_higher: bool = False
    tag_separator: Optional[str] = None
    tag_extra: List[str] = field(default_factory=list)
    snapshot: bool = False
    output_file: Optional[str] = None
    dry_run: bool = False
    _prerelease_error: Optional[str] = field(default=None, init=False, repr=False)

    @classmethod
    def from_env(cls, env: Dict[str, str], defaults: Optional[Dict[str, str]] = None) -> "EnvironmentConfig":
        """Create configuration from environment variables.

        Args:
            env: Dictionary of environment variables (typically os.environ)
            defaults: Values used when a variable is missing from env,
                typically from config_file_to_env()

        Returns:
            EnvironmentConfig instance
        """
        values = {**(defaults or {}), **env}

        # Parse prerelease mode with validation
        prerelease_str = values.get("SEMVER_PRERELEASE", "").strip().lower()
        semver_prerelease = None
        prerelease_error = None
        if prerelease_str:
            try:
                semver_prerelease = PrereleaseMode(prerelease_str)
            except ValueError:
                # Invalid mode - will be caught in validation
                prerelease_error = prerelease_str

        tag_semver = parse_semver_mode(values.get("TAG_SEMVER"))
        if tag_semver == SemverMode.ON:
            logger.info(f"TAG_SEMVER={values.get('TAG_SEMVER')!r} enables semver tags, non-semver tags are skipped")

        config = cls(
            image=values.get("IMAGE", "").strip(),
            ref=values.get("GITHUB_REF", "").strip(),
            sha=values.get("GITHUB_SHA", "").strip(),
            registry=values.get("REGISTRY", "").strip() or None,
            tag_semver=tag_semver,
            semver_prerelease=semver_prerelease,
            semver_higher=parse_bool(values.get("SEMVER_HIGHER")),
            tag_separator=values.get("TAG_SEPARATOR") or None,
            tag_extra=split_list(values.get("TAG_EXTRA")),
            snapshot=parse_bool(values.get("SNAPSHOT")),
            output_file=values.get("GITHUB_OUTPUT") or None,
            dry_run=parse_bool(values.get("DRY_RUN")),
        )
        config._prerelease_error = prerelease_error
        return config

    def validate(self) -> List[str]:
        """Validate the configuration.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []

        # Required fields
        if not self.image:
            errors.append("IMAGE is required")

        if not self.ref:
            errors.append("GITHUB_REF is required (or run inside a git checkout)")

        if not self.sha:
            errors.append("GITHUB_SHA is required (or run inside a git checkout)")
        elif len(self.sha) < SNAPSHOT_SHA_LENGTH:
            errors.append(f"GITHUB_SHA '{self.sha}' must have at least {SNAPSHOT_SHA_LENGTH} characters")

        if self._prerelease_error is not None:
            valid_modes = [m.value for m in PrereleaseMode]
            errors.append(
                f"Invalid SEMVER_PRERELEASE '{self._prerelease_error}'. "
                f"Valid options are: {', '.join(valid_modes)}"
            )

        return errors

    def to_tag_config(self) -> TagConfig:
        """Build the tagging policy passed to derive_tags()."""
        return TagConfig(
            image=self.image,
            registry=self.registry,
            tag_semver=self.tag_semver,
            semver_prerelease=self.semver_prerelease,
            semver_higher=self.semver_higher,
            tag_separator=self.tag_separator,
            tag_extra=tuple(self.tag_extra),
            snapshot=self.snapshot,
        )

    def to_ref_info(self) -> RefInfo:
        return RefInfo(ref=self.ref, sha=self.sha)
