"""
taghelper - Generate HTML tags in an easy way.

View-helper style builders for images, links, text fields, selects and
date selects. This package is organized into focused modules:

- html/     Tag builders and element serialization (no dependencies)
            - tags: image_tag, link_to, text_field_tag, select_tag,
                    options_for_select, date_select_tag, TagHelper
            - element: ElementSerializer, Text, Fragment
            - javascript: escape_javascript and onclick snippets

- clock     Current date source for date selects
- errors    ArgumentError, UsageConflictError
- config    Builder defaults

- preview   HTML page showing every helper (requires jinja2)
- ui/       Notebook integration (requires marimo)
- cli       Command line entry point (requires fire)

Usage:
    from taghelper import image_tag, link_to, select_tag

    image_tag("photos/cat.jpg")
    link_to("Sign out", {"href": "/session", "method": "delete"})

Logging goes through loguru and is disabled for this package unless the
application calls logger.enable("taghelper").
"""

__version__ = "0.1.0"

from loguru import logger

from taghelper.errors import (
    TagHelperError,
    ArgumentError,
    UsageConflictError,
)

from taghelper.clock import (
    DateParts,
    SystemClock,
    FixedClock,
)

from taghelper.html import (
    TagHelper,
    ElementSerializer,
    image_tag,
    link_to,
    text_field_tag,
    select_tag,
    options_for_select,
    date_select_tag,
    escape_javascript,
)

logger.disable("taghelper")

__all__ = [
    "__version__",
    # errors
    "TagHelperError",
    "ArgumentError",
    "UsageConflictError",
    # clock
    "DateParts",
    "SystemClock",
    "FixedClock",
    # html
    "TagHelper",
    "ElementSerializer",
    "image_tag",
    "link_to",
    "text_field_tag",
    "select_tag",
    "options_for_select",
    "date_select_tag",
    "escape_javascript",
]
