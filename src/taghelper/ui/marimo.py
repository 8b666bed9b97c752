"""
Display tag builder output in marimo notebooks.

Builders return plain strings; marimo renders strings as text, so the
markup has to be wrapped in mo.Html to show up as elements.
"""

__all__ = [
    "html_from_tag",
    "html_from_builder",
]

from typing import Any, Callable, Optional

import marimo as mo

from taghelper.html.element import ElementSerializer, Tag


def html_from_tag(
    tag: Tag,
    escape_chars: str = "",
    serializer: Optional[ElementSerializer] = None,
) -> mo.Html:
    """
    Serialize a Tag and wrap it for display.

    Args:
        tag: Element to render
        escape_chars: Characters to entity-encode ("<>&" or "")
        serializer: Serializer to use (default: ElementSerializer())
    """
    serializer = serializer or ElementSerializer()
    return mo.Html(serializer.serialize_tag(tag, escape_chars))


def html_from_builder(builder: Callable[..., str], *args: Any) -> mo.Html:
    """
    Call a tag builder and wrap its markup for display.

    Example:
        >>> html_from_builder(image_tag, "photos/cat.jpg", {"class": "thumb"})
    """
    return mo.Html(builder(*args))
