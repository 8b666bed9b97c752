"""
Option map utilities - no external dependencies.

Builders take a mapping of attribute names to values. These helpers merge
user options over defaults and normalize HTML boolean attributes.
"""

__all__ = [
    "OptionMap",
    "merge_options",
    "tag_options",
]

from typing import Any, Dict, Iterable, Mapping, Optional

from taghelper.config import BOOLEAN_ATTRIBUTES

OptionMap = Dict[str, Any]


def merge_options(
    defaults: Mapping[str, Any],
    options: Optional[Mapping[str, Any]] = None,
) -> OptionMap:
    """
    Shallow-merge options over defaults into a new dict.

    Keys keep the position of their first appearance, so defaults come
    first in attribute order, while values from options win.

    Args:
        defaults: Builder defaults
        options: Caller options (not modified)

    Returns:
        New merged dict

    Example:
        >>> merge_options({"href": "#", "class": "a"}, {"class": "b", "id": "x"})
        {'href': '#', 'class': 'b', 'id': 'x'}
    """
    merged = dict(defaults)
    if options:
        merged.update(options)
    return merged


def tag_options(
    options: OptionMap,
    boolean_attributes: Iterable[str] = BOOLEAN_ATTRIBUTES,
) -> OptionMap:
    """
    Normalize boolean attributes in place.

    A falsy boolean attribute is removed; a truthy one gets its own name as
    value (disabled="disabled").

    Example:
        >>> tag_options({"disabled": True, "readonly": False, "id": "x"})
        {'disabled': 'disabled', 'id': 'x'}
    """
    for name in boolean_attributes:
        if name not in options:
            continue
        if options[name]:
            options[name] = name
        else:
            del options[name]
    return options
