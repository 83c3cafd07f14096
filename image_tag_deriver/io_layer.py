"""
I/O Layer for Image Tag Deriver

This module contains all I/O operations (file system, Git)
separated from business logic. This is the "imperative shell" that
handles all side effects.
"""

import logging
from pathlib import Path
from typing import Dict, Optional, Any

import yaml
from git import Repo
from git.exc import GitError, InvalidGitRepositoryError, NoSuchPathError

from .exceptions import ConfigurationError
from .models import DeriveResult, RefInfo

logger = logging.getLogger(__name__)


class IOLayer:
    """Handles all I/O operations for the application."""

    def __init__(self, dry_run: bool = False):
        """Initialize the I/O layer.

        Args:
            dry_run: If True, don't perform actual writes
        """
        self.dry_run = dry_run

    # -----------------------------------------------------------------------------
    # File System Operations
    # -----------------------------------------------------------------------------

    def read_yaml(self, path: str) -> Optional[Dict[str, Any]]:
        """Read a YAML file and return its contents.

        Args:
            path: Path to the YAML file

        Returns:
            Dictionary with YAML contents or None if file doesn't exist

        Raises:
            ConfigurationError: If the file cannot be read, is not valid YAML
                or is not a mapping
        """
        file_path = Path(path)
        if not file_path.exists():
            return None

        try:
            with file_path.open() as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigurationError(f"Failed to read {path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Failed to parse {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"{path} must contain a mapping, got {type(data).__name__}")
        return data

    def write_outputs(self, result: DeriveResult, output_file: str) -> bool:
        """Append derived tags and version to a GitHub Actions output file.

        Args:
            result: Derivation result
            output_file: Path of the file named by GITHUB_OUTPUT

        Returns:
            True if written, False if dry run
        """
        if self.dry_run:
            print(f"[DRY RUN] Would write outputs to {output_file}")
            return False

        with Path(output_file).open("a") as f:
            f.write(f"tags={','.join(result.tags)}\n")
            f.write(f"version={result.version or ''}\n")

        return True

    # -----------------------------------------------------------------------------
    # Git Operations
    # -----------------------------------------------------------------------------

    def resolve_git_ref(self, path: str = ".") -> Optional[RefInfo]:
        """Resolve the current ref and commit sha from a local git checkout.

        A checked out branch resolves to refs/heads/<branch>. A detached
        HEAD resolves to refs/tags/<tag> when a tag points at it, otherwise
        the ref is left empty.

        Args:
            path: Path inside the git repository

        Returns:
            RefInfo or None if path is not a git repository
        """
        try:
            repo = Repo(path, search_parent_directories=True)
            commit = repo.head.commit
        except (InvalidGitRepositoryError, NoSuchPathError, ValueError) as e:
            logger.warning(f"Cannot resolve git ref from {path}: {e}")
            return None

        if not repo.head.is_detached:
            ref = f"refs/heads/{repo.active_branch.name}"
        else:
            tag = self._find_tag(repo, commit, path)
            ref = f"refs/tags/{tag.name}" if tag else ""

        logger.debug(f"Resolved local git ref '{ref}' at {commit.hexsha}")
        return RefInfo(ref=ref, sha=commit.hexsha)

    def _find_tag(self, repo: Repo, commit: Any, path: str) -> Optional[Any]:
        """Return the first tag pointing at commit, skipping tree and blob tags."""
        try:
            tags = list(repo.tags)
        except GitError as e:
            logger.warning(f"Cannot list tags in {path}: {e}")
            return None

        for tag in tags:
            try:
                if tag.commit == commit:
                    return tag
            except ValueError as e:
                # Tag points at a tree or blob instead of a commit
                logger.debug(f"Skipping tag {tag.name}: {e}")
        return None
