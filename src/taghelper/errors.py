"""
Exceptions raised by the tag builders.

All of them are programmer-usage errors: they are raised synchronously,
before any markup is produced, and never retried.
"""

__all__ = [
    "TagHelperError",
    "ArgumentError",
    "UsageConflictError",
]


class TagHelperError(Exception):
    """Base class for all taghelper errors."""


class ArgumentError(TagHelperError, ValueError):
    """Raised when a required argument (src, content, name) is missing."""


class UsageConflictError(TagHelperError, ValueError):
    """Raised when mutually exclusive link options are combined."""
