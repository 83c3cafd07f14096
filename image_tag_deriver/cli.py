#!/usr/bin/env python3

"""
Image Tag Derivation Script for CI Pipelines

Simplified CLI using the Functional Core, Imperative Shell pattern.
All tag derivation logic is in pure functions, all I/O is in the I/O layer.
"""

import logging
import os
import sys

from .config import DEFAULT_CONFIG_FILE
from .environment import EnvironmentConfig, config_file_to_env
from .exceptions import TagDeriverError
from .io_layer import IOLayer
from .tag_deriver import derive_tags
from .utils import setup_logging


def main():
    """Main entry point - parse, derive, report."""
    try:
        setup_logging(getattr(logging, os.environ.get("LOG_LEVEL", "INFO").upper(), logging.INFO))

        # Step 1: Read optional config file and parse environment
        config_file = os.environ.get("CONFIG_FILE", DEFAULT_CONFIG_FILE)
        defaults = config_file_to_env(IOLayer().read_yaml(config_file))
        config = EnvironmentConfig.from_env(os.environ, defaults)
        io_layer = IOLayer(config.dry_run)

        # Step 2: Fall back to the local checkout outside of CI
        if not config.ref or not config.sha:
            local = io_layer.resolve_git_ref()
            if local:
                config.ref = config.ref or local.ref
                config.sha = config.sha or local.sha

        # Step 3: Validate configuration
        errors = config.validate()
        if errors:
            for error in errors:
                print(f"Error: {error}")
            sys.exit(1)

        print(f"Image: {config.image}")
        print(f"Ref: {config.ref}")
        print(f"Commit: {config.sha}")

        # Step 4: Derive tags
        result = derive_tags(config.to_tag_config(), config.to_ref_info())

        print("Tags:")
        for tag in result.tags:
            print(f"  - {tag}")
        print(f"Version: {result.version or '-'}")

        # Step 5: Publish outputs for later workflow steps
        if config.output_file:
            io_layer.write_outputs(result, config.output_file)
    except TagDeriverError as e:
        print(f"Error: {e}")
        sys.exit(1)
    except Exception as e:
        print(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
