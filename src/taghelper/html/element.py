"""
HTML element serialization - no external dependencies.

Turns a tag name, an attribute mapping and some content into HTML text.
The tag builders never concatenate markup themselves; they go through
ElementSerializer so escaping is decided in exactly one place.
"""

__all__ = [
    "Text",
    "Fragment",
    "Content",
    "Tag",
    "ElementSerializer",
    "as_content",
    "escape_entities",
]

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Sequence, Tuple, Union

from taghelper.config import ENTITIES, VOID_ELEMENTS


@dataclass(frozen=True)
class Text:
    """Single piece of element content."""

    value: str


@dataclass(frozen=True)
class Fragment:
    """Several pieces of element content, emitted one after another."""

    parts: Tuple[str, ...] = ()


Content = Union[Text, Fragment]


def as_content(value: Union[str, Sequence[str], Content, None]) -> Optional[Content]:
    """
    Coerce builder input into a Content variant.

    Example:
        >>> as_content("Home")
        Text(value='Home')
        >>> as_content(["<b>", "Home", "</b>"])
        Fragment(parts=('<b>', 'Home', '</b>'))
    """
    if value is None or isinstance(value, (Text, Fragment)):
        return value
    if isinstance(value, (list, tuple)):
        return Fragment(tuple(str(part) for part in value))
    return Text(str(value))


def escape_entities(text: str, escape_chars: str) -> str:
    """
    Entity-encode every character of text that appears in escape_chars.

    Example:
        >>> escape_entities("a < b & c", "<>&")
        'a &lt; b &amp; c'
        >>> escape_entities("a < b", "")
        'a < b'
    """
    if not escape_chars:
        return text
    table = {ord(char): ENTITIES.get(char, f"&#{ord(char)};") for char in escape_chars}
    return text.translate(table)


@dataclass(frozen=True)
class Tag:
    """An HTML element about to be serialized."""

    name: str
    attributes: Mapping[str, Any] = field(default_factory=dict)
    content: Optional[Content] = None


class ElementSerializer:
    """
    Serialize elements to HTML text.

    Attribute values and text content are entity-encoded for the characters
    in escape_chars. Double quotes in attribute values are always encoded
    since attributes are emitted double-quoted.

    Example:
        >>> ElementSerializer().serialize("a", {"href": "#"}, Text("Home"))
        '<a href="#">Home</a>'
    """

    def serialize(
        self,
        tag_name: str,
        attributes: Mapping[str, Any],
        content: Optional[Content] = None,
        escape_chars: str = "",
    ) -> str:
        """
        Serialize a single element.

        Args:
            tag_name: Element name (e.g. "img", "a")
            attributes: Attribute mapping, rendered in iteration order.
                        None values are left out.
            content: Text or Fragment placed between start and end tag
            escape_chars: Characters to entity-encode ("<>&" or "")

        Returns:
            HTML text of the element, without a trailing newline
        """
        start = self._start_tag(tag_name, attributes, escape_chars)
        if tag_name in VOID_ELEMENTS:
            return start
        return f"{start}{self._content(content, escape_chars)}</{tag_name}>"

    def serialize_tag(self, tag: Tag, escape_chars: str = "") -> str:
        return self.serialize(tag.name, tag.attributes, tag.content, escape_chars)

    def _start_tag(
        self,
        tag_name: str,
        attributes: Mapping[str, Any],
        escape_chars: str,
    ) -> str:
        parts = [f"<{tag_name}"]
        for key, value in attributes.items():
            if value is None:
                continue
            escaped = escape_entities(str(value), escape_chars)
            if '"' not in escape_chars:
                escaped = escaped.replace('"', ENTITIES['"'])
            parts.append(f'{key}="{escaped}"')
        return " ".join(parts) + ">"

    def _content(self, content: Optional[Content], escape_chars: str) -> str:
        if content is None:
            return ""
        if isinstance(content, Text):
            return escape_entities(content.value, escape_chars)
        return "".join(escape_entities(part, escape_chars) for part in content.parts)
