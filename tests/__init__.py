"""Test suite for Image Tag Deriver.

This package contains test modules and fixtures for verifying the functionality
of the Image Tag Deriver tool. It includes tests for:
- Ref classification and separated tags
- Semver and higher tag expansion
- Snapshot tags and tag derivation
- Environment and config file handling
- The I/O layer and CLI

The test suite uses pytest and provides fixtures for common test scenarios.
"""
