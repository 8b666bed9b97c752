"""
HTML subpackage - tag builders and the element serializer.

Pure functions and small classes for generating HTML fragments.
"""

from taghelper.html.element import (
    Text,
    Fragment,
    Tag,
    ElementSerializer,
    as_content,
    escape_entities,
)

from taghelper.html.options import (
    merge_options,
    tag_options,
)

from taghelper.html.javascript import (
    escape_javascript,
    convert_options_to_javascript,
)

from taghelper.html.tags import (
    TagHelper,
    image_tag,
    link_to,
    text_field_tag,
    select_tag,
    options_for_select,
    date_select_tag,
)

__all__ = [
    # element
    "Text",
    "Fragment",
    "Tag",
    "ElementSerializer",
    "as_content",
    "escape_entities",
    # options
    "merge_options",
    "tag_options",
    # javascript
    "escape_javascript",
    "convert_options_to_javascript",
    # tags
    "TagHelper",
    "image_tag",
    "link_to",
    "text_field_tag",
    "select_tag",
    "options_for_select",
    "date_select_tag",
]
