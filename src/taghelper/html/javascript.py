"""
Inline JavaScript snippets for link onclick handlers.

The snippets are fixed string templates: a confirm dialog, a popup window,
and a hidden form that turns a link click into a POST (with a _method field
for other verbs).
"""

__all__ = [
    "escape_javascript",
    "confirm_javascript_function",
    "popup_javascript_function",
    "method_javascript_function",
    "convert_options_to_javascript",
]

from typing import Any, Optional

from loguru import logger

from taghelper.config import CONFIG
from taghelper.errors import UsageConflictError
from taghelper.html.options import OptionMap


def escape_javascript(javascript: Any) -> str:
    """
    Make text safe to embed inside a single-quoted JavaScript string.

    Backslashes are doubled, "</" becomes "<\\/", CRLF becomes a literal
    "\\n" and all quote characters are removed. This is best effort, not a
    sanitizer.

    Example:
        >>> escape_javascript("Don't </script>")
        'Dont <\\\\/script>'
    """
    if not javascript:
        return ""
    escaped = str(javascript).replace("\\", "\\\\")
    escaped = escaped.replace("</", "<\\/")
    escaped = escaped.replace("\r\n", "\\n")
    for quote in ("'", '"'):
        escaped = escaped.replace(quote, "")
    return escaped


def confirm_javascript_function(confirm: str) -> str:
    """
    Example:
        >>> confirm_javascript_function("Sure?")
        "confirm('Sure?')"
    """
    return f"confirm('{escape_javascript(confirm)}')"


def popup_javascript_function(popup: Any) -> str:
    """
    Build a window.open call.

    Args:
        popup: True for a plain popup, or a [window_name, window_features]
               pair to pass both to window.open

    Example:
        >>> popup_javascript_function(True)
        'window.open(this.href);'
        >>> popup_javascript_function(["help", "width=300"])
        "window.open(this.href, 'help', 'width=300');"
    """
    if isinstance(popup, (list, tuple)) and len(popup) == 2:
        window_name, window_features = popup
        return f"window.open(this.href, '{window_name}', '{window_features}');"
    return "window.open(this.href);"


def method_javascript_function(method: str, url: Optional[str] = None) -> str:
    """
    Build a snippet that submits the link target through a hidden form.

    The form always posts. When method is anything other than "post" a
    hidden _method input carries the real verb.

    Args:
        method: HTTP verb ("post", "put", "delete", ...)
        url: Explicit form action; this.href when empty
    """
    action = f"'{url}'" if url else "this.href"
    field = CONFIG["method_override_field"]
    parts = [
        "var f = document.createElement('form');",
        "f.style.display = 'none';",
        "this.parentNode.appendChild(f);",
        "f.method = 'POST';",
        f"f.action = {action};",
    ]
    if method != "post":
        parts += [
            "var m = document.createElement('input');",
            "m.setAttribute('type', 'hidden');",
            f"m.setAttribute('name', '{field}');",
            f"m.setAttribute('value', '{method}');",
            "f.appendChild(m);",
        ]
    parts.append("f.submit();")
    return " ".join(parts)


def convert_options_to_javascript(
    options: OptionMap,
    url: Optional[str] = None,
) -> OptionMap:
    """
    Replace confirm/popup/method options with an onclick handler, in place.

    Args:
        options: Link options; confirm, popup and method are removed
        url: Explicit link target, used as form action for method links

    Returns:
        The same options dict

    Raises:
        UsageConflictError: If popup and method are both set
    """
    confirm = options.pop("confirm", None)
    popup = options.pop("popup", None)
    method = options.pop("method", None)

    if popup and method:
        raise UsageConflictError("You can't use popup and method in the same link")

    if confirm and popup:
        onclick = (
            f"if ({confirm_javascript_function(confirm)}) "
            f"{{ {popup_javascript_function(popup)} }}; return false;"
        )
    elif confirm and method:
        onclick = (
            f"if ({confirm_javascript_function(confirm)}) "
            f"{{ {method_javascript_function(method)} }}; return false;"
        )
    elif confirm:
        onclick = f"return {confirm_javascript_function(confirm)};"
    elif method:
        onclick = f"{method_javascript_function(method, url)} return false;"
    elif popup:
        onclick = f"{popup_javascript_function(popup)} return false;"
    else:
        return options

    logger.debug(f"Resolved onclick handler: {onclick}")
    options["onclick"] = onclick
    return options
