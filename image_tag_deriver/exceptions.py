"""Custom exceptions for Image Tag Deriver."""


class TagDeriverError(Exception):
    """Base class for all errors raised by the tag deriver."""


class ValidationError(TagDeriverError):
    """Raised when a git tag is not a semver and semver mode is 'fail'."""

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f'Tag "{tag}" is not a semver')


class ConfigurationError(TagDeriverError):
    """Raised when the tagging policy cannot be loaded or is incomplete."""
