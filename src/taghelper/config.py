"""
Builder defaults and constants.

All magic strings and numbers used by the tag builders are centralized here
for easy maintenance.
"""

from typing import Any, Dict, Tuple

# ====================================================================
# BUILDER CONFIGURATION
# ====================================================================

CONFIG: Dict[str, Any] = {
    # Escaping
    "escape_chars": "<>&",  # Characters entity-encoded when escape_html is on
    # Links
    "link_default_href": "#",
    "method_override_field": "_method",  # Hidden field name for REST-style verbs
    # Date selects
    "year_span": 5,  # Default year_end = year_start + year_span (inclusive)
    "day_range": (1, 31),  # No month-length adjustment
    "month_range": (1, 12),
    "selected_marker": "true",  # Value of the selected="..." attribute
    # Preview page
    "preview_output_dir": "_site",
    "preview_template": "preview.html.j2",
}

# ====================================================================
# HTML CONSTANTS
# ====================================================================

# Attributes rendered as name="name" when truthy, dropped when falsy
BOOLEAN_ATTRIBUTES: Tuple[str, ...] = ("disabled", "readonly", "multiple")

# Elements that never carry content or an end tag
VOID_ELEMENTS: Tuple[str, ...] = (
    "area",
    "base",
    "br",
    "col",
    "embed",
    "hr",
    "img",
    "input",
    "link",
    "meta",
    "param",
    "source",
    "track",
    "wbr",
)

# Name/id suffixes of the three date-select parts, in output order
DATE_PARTS: Tuple[str, ...] = ("day", "month", "year")

ENTITIES: Dict[str, str] = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
}
