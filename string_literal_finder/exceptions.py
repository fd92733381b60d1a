"""
Exceptions raised by the string literal finder.
"""


class StringLiteralFinderError(Exception):
    """Base class for all finder errors."""


class ResolutionError(StringLiteralFinderError):
    """A type, parameter or callable could not be resolved from the tree."""


class ConfigurationError(StringLiteralFinderError):
    """A project settings document could not be read or parsed."""
