"""
View-helper tag builders.

Functions that build image, link, text field, select and date select
markup from an option mapping. Defaults are merged under the caller's
options, so anything the caller passes (class, id, style, ...) ends up as
an attribute on the tag.

Usage:
    from taghelper.html import image_tag, link_to

    image_tag("photos/cat.jpg", {"class": "thumb"})
    link_to("Delete", {"href": "/items/1", "method": "delete", "confirm": "Sure?"})
"""

__all__ = [
    "TagHelper",
    "image_tag",
    "link_to",
    "text_field_tag",
    "select_tag",
    "options_for_select",
    "date_select_tag",
]

import re
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Union

from loguru import logger

from taghelper.clock import Clock, DateParts, SystemClock
from taghelper.config import CONFIG, DATE_PARTS
from taghelper.errors import ArgumentError
from taghelper.html.element import (
    Content,
    ElementSerializer,
    Fragment,
    Tag,
    Text,
    as_content,
)
from taghelper.html.javascript import convert_options_to_javascript
from taghelper.html.options import merge_options, tag_options

# Filename without extension, e.g. "cat" from "photos/cat.jpg"
_ALT_PATTERN = re.compile(r"([^/]+)\.\w+$")

OptionEntry = Mapping[str, Any]


def _strip_newlines(html: str) -> str:
    return html.replace("\n", "")


def _selected_set(selected: Any) -> List[str]:
    """Normalize selected value(s) to a list of strings for membership tests."""
    if selected is None:
        return []
    if isinstance(selected, (str, int)):
        return [str(selected)]
    return [str(value) for value in selected]


class TagHelper:
    """
    Tag builders bound to an element serializer and a clock.

    Example:
        >>> helper = TagHelper()
        >>> helper.text_field_tag("email")
        '<input name="email" id="email" type="text">'
    """

    def __init__(
        self,
        serializer: Optional[ElementSerializer] = None,
        clock: Optional[Clock] = None,
    ):
        """
        Args:
            serializer: Element serializer (default: ElementSerializer())
            clock: Source of today's date for date selects (default: SystemClock())
        """
        self.serializer = serializer or ElementSerializer()
        self.clock = clock or SystemClock()

    def image_tag(self, src: str, options: Optional[Mapping[str, Any]] = None) -> str:
        """
        Generate an HTML img tag pointing to src.

        Args:
            src: Image source URL
            options: Extra attributes. "alt" defaults to the file name of src
                     without extension, "escape_html" (default True) controls
                     entity encoding.

        Returns:
            HTML img tag string, newlines removed

        Raises:
            ArgumentError: If src is empty

        Example:
            >>> image_tag("photos/cat.jpg")
            '<img alt="cat" src="photos/cat.jpg">'
        """
        if not src:
            raise ArgumentError("You need to specify a source for the image tag")

        match = _ALT_PATTERN.search(src)
        defaults = {
            "alt": match.group(1) if match else None,
            "escape_html": True,
            "src": src,
        }
        attributes = merge_options(defaults, options)
        escape_html = bool(attributes.pop("escape_html"))

        html = self.serializer.serialize_tag(
            Tag("img", attributes),
            escape_chars=CONFIG["escape_chars"] if escape_html else "",
        )
        logger.debug(f"Built image tag for {src}")
        return _strip_newlines(html)

    def link_to(
        self,
        content: Union[str, Sequence[str], Content],
        options: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """
        Generate an HTML anchor tag.

        Besides plain attributes, options understands:

        - href: link target (default "#")
        - escape_html: entity-encode attributes and content (default False)
        - confirm: text of a confirm dialog shown before following the link
        - popup: True, or [window_name, window_features], to open a new window
        - method: submit the link as a POST form, with a _method field for
          other verbs ("put", "delete", ...)

        Args:
            content: Link text, or a list of pieces concatenated as children
            options: Link options

        Returns:
            HTML anchor tag string, newlines removed

        Raises:
            ArgumentError: If content is empty
            UsageConflictError: If popup and method are both given

        Example:
            >>> link_to("Home", {"href": "/"})
            '<a href="/">Home</a>'
        """
        if not content or content in (Text(""), Fragment()):
            raise ArgumentError("You need to specify content for the link")

        explicit_href = (options or {}).get("href")
        merged = merge_options(
            {"href": CONFIG["link_default_href"], "escape_html": False},
            options,
        )
        escape_html = bool(merged.pop("escape_html"))
        href = merged.pop("href")

        convert_options_to_javascript(merged, url=explicit_href)
        tag_options(merged)

        attributes = {"href": href, **merged}
        html = self.serializer.serialize_tag(
            Tag("a", attributes, as_content(content)),
            escape_chars=CONFIG["escape_chars"] if escape_html else "",
        )
        logger.debug(f"Built link to {href}")
        return _strip_newlines(html)

    def text_field_tag(self, name: str, options: Optional[Mapping[str, Any]] = None) -> str:
        """
        Generate a text input tag.

        Args:
            name: Value of the name attribute; id defaults to it too
            options: Extra attributes (value, class, size, ...)

        Returns:
            HTML input tag string, newlines removed

        Raises:
            ArgumentError: If name is empty
        """
        if not name:
            raise ArgumentError("You need to specify a name for the text field")

        attributes = merge_options({"name": name, "id": name, "type": "text"}, options)
        return _strip_newlines(self.serializer.serialize_tag(Tag("input", attributes)))

    def select_tag(
        self,
        name: str,
        options_or_markup: Union[Sequence[OptionEntry], str, None] = None,
        html_options: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """
        Generate a select tag.

        Args:
            name: Value of the name attribute; id defaults to it too
            options_or_markup: Either a list of {"title", "value"} entries, or
                               markup from options_for_select
            html_options: Extra attributes. With a list of entries, "value"
                          holds the selected value(s) and is not rendered.

        Returns:
            HTML select tag string. Newlines between options are kept.

        Raises:
            ArgumentError: If name is empty

        Example:
            >>> select_tag("size", [{"title": "Small", "value": "s"}], {"value": ["s"]})
            '<select name="size" id="size"><option value="s" selected="true">Small</option>\\n</select>'
        """
        if not name:
            raise ArgumentError("You need to specify a name for the selector")

        html_options = dict(html_options or {})
        inner = options_or_markup
        if isinstance(inner, (list, tuple)):
            selected = html_options.pop("value", None)
            inner = self.options_for_select(inner, selected)

        attributes = merge_options({"name": name, "id": name}, html_options)
        content = Text(inner) if inner is not None else None
        return self.serializer.serialize_tag(Tag("select", attributes, content))

    def options_for_select(
        self,
        entries: Iterable[OptionEntry],
        selected_values: Union[Sequence[Any], str, None] = None,
    ) -> str:
        """
        Generate option tags to put inside select_tag.

        Args:
            entries: Mappings with a "title" (visible text) and a "value";
                     any other key becomes an attribute
            selected_values: Values to mark selected="true"

        Returns:
            Option tags, each followed by a newline

        Example:
            >>> options_for_select([{"title": "A", "value": "a"}], ["a"])
            '<option value="a" selected="true">A</option>\\n'
        """
        selected = _selected_set(selected_values)
        html = []
        for entry in entries:
            attributes = dict(entry)
            title = attributes.pop("title", None)
            value = attributes.get("value")
            if value is not None and str(value) in selected:
                attributes["selected"] = CONFIG["selected_marker"]
            option = self.serializer.serialize_tag(Tag("option", attributes, as_content(title)))
            html.append(option + "\n")
        return "".join(html)

    def date_select_tag(self, name: str, options: Optional[Mapping[str, Any]] = None) -> str:
        """
        Generate three select tags: day, month and year.

        Each select is named and id'd after name with a _day, _month or _year
        suffix. Remaining options (class, style, ...) go on all three.

        Options:
            year_start: First year (default: current year)
            year_end: Last year, inclusive (default: year_start + 5)
            selected_date: Object with year/month/day (default or None: today)
            id: Base id (default: name)

        Days always run 1..31, whatever the month.

        Raises:
            ArgumentError: If name is empty
        """
        if not name:
            raise ArgumentError("You need to specify a name for the selector")

        today = self.clock.now()
        attributes = merge_options(
            {"name": name, "id": name, "selected_date": today},
            options,
        )
        selected = DateParts.from_date(attributes.pop("selected_date") or today)
        year_start = int(attributes.pop("year_start", today.year))
        year_end = int(attributes.pop("year_end", year_start + CONFIG["year_span"]))
        base_name = attributes.pop("name")
        base_id = attributes.pop("id")

        day_first, day_last = CONFIG["day_range"]
        month_first, month_last = CONFIG["month_range"]
        ranges = {
            "day": (range(day_first, day_last + 1), selected.day),
            "month": (range(month_first, month_last + 1), selected.month),
            "year": (range(year_start, year_end + 1), selected.year),
        }

        html = []
        for part in DATE_PARTS:
            values, current = ranges[part]
            select_attributes = {
                "name": f"{base_name}_{part}",
                "id": f"{base_id}_{part}",
                **attributes,
            }
            inner = self._numeric_options(values, current)
            html.append(self.serializer.serialize_tag(Tag("select", select_attributes, Text(inner))))
        return "".join(html)

    def _numeric_options(self, values: Iterable[int], current: int) -> str:
        html = []
        for value in values:
            attributes = {"value": value}
            if value == current:
                attributes["selected"] = CONFIG["selected_marker"]
            html.append(self.serializer.serialize_tag(Tag("option", attributes, Text(str(value)))))
        return "".join(html)


_default_helper = TagHelper()


def image_tag(src: str, options: Optional[Mapping[str, Any]] = None) -> str:
    """Generate an img tag with the default helper (see TagHelper.image_tag)."""
    return _default_helper.image_tag(src, options)


def link_to(
    content: Union[str, Sequence[str], Content],
    options: Optional[Mapping[str, Any]] = None,
) -> str:
    """Generate an anchor tag with the default helper (see TagHelper.link_to)."""
    return _default_helper.link_to(content, options)


def text_field_tag(name: str, options: Optional[Mapping[str, Any]] = None) -> str:
    """Generate a text input with the default helper."""
    return _default_helper.text_field_tag(name, options)


def select_tag(
    name: str,
    options_or_markup: Union[Sequence[OptionEntry], str, None] = None,
    html_options: Optional[Mapping[str, Any]] = None,
) -> str:
    """Generate a select tag with the default helper."""
    return _default_helper.select_tag(name, options_or_markup, html_options)


def options_for_select(
    entries: Iterable[OptionEntry],
    selected_values: Union[Sequence[Any], str, None] = None,
) -> str:
    """Generate option tags with the default helper."""
    return _default_helper.options_for_select(entries, selected_values)


def date_select_tag(name: str, options: Optional[Mapping[str, Any]] = None) -> str:
    """Generate day/month/year selects with the default helper (system clock)."""
    return _default_helper.date_select_tag(name, options)
