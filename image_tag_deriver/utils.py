"""
Utility Functions Module for Image Tag Deriver

This module provides small helpers used by the command line shell.

Functions:
    setup_logging: Configures application logging
    parse_bool: Interprets an environment variable value as a boolean
    split_list: Splits a comma or whitespace separated value into items
"""

import logging
import re
from typing import List, Optional

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"true", "yes", "on", "1"}


def setup_logging(level: int = logging.INFO) -> None:
    """Configure logging for the application."""
    logging.basicConfig(
        level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def parse_bool(value: Optional[str], default: bool = False) -> bool:
    """Interpret "true"/"yes"/"on"/"1" (any case) as True."""
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUE_VALUES


def split_list(value: Optional[str]) -> List[str]:
    """Split "a, b c" into ["a", "b", "c"]."""
    if not value:
        return []
    return [item for item in re.split(r"[,\s]+", value) if item]
