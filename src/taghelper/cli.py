"""
Command line interface for the tag builders.

Each command prints one fragment. Extra --key=value flags become attributes
on the generated tag:

    taghelper image photos/cat.jpg --class=thumb
    taghelper link "Sign out" --href=/session --method=delete --confirm="Sure?"
    taghelper text_field email --size=40
    taghelper select color --entries='[{"title": "Red", "value": "red"}]' --value='["red"]'
    taghelper date_select dob --year_start=1950 --year_end=2010
    taghelper preview --output_dir=_site
"""

__all__ = ["main"]

import sys
from typing import Any, Callable, Dict, List, Optional

import fire
from loguru import logger

from taghelper.config import CONFIG
from taghelper.errors import TagHelperError
from taghelper.html.tags import TagHelper
from taghelper.preview import write_preview


def _run(build: Callable[[], str]) -> str:
    try:
        return build()
    except TagHelperError as e:
        logger.error(f"{type(e).__name__}: {e}")
        raise


def image(src: str, **attributes: Any) -> str:
    """Print an img tag."""
    return _run(lambda: TagHelper().image_tag(src, attributes))


def link(content: str, **attributes: Any) -> str:
    """Print an anchor tag (supports --confirm, --popup, --method)."""
    return _run(lambda: TagHelper().link_to(content, attributes))


def text_field(name: str, **attributes: Any) -> str:
    """Print a text input tag."""
    return _run(lambda: TagHelper().text_field_tag(name, attributes))


def select(name: str, entries: Optional[List[Dict[str, Any]]] = None, **attributes: Any) -> str:
    """Print a select tag built from a list of {"title", "value"} entries."""
    return _run(lambda: TagHelper().select_tag(name, list(entries or []), attributes))


def date_select(name: str, **attributes: Any) -> str:
    """Print day, month and year select tags."""
    return _run(lambda: TagHelper().date_select_tag(name, attributes))


def preview(output_dir: str = CONFIG["preview_output_dir"]) -> str:
    """Write a preview page of every helper and print its path."""
    return str(write_preview(output_dir))


COMMANDS: Dict[str, Callable[..., str]] = {
    "image": image,
    "link": link,
    "text_field": text_field,
    "select": select,
    "date_select": date_select,
    "preview": preview,
}


def main() -> None:
    logger.remove()
    logger.add(sys.stderr, level="INFO")
    logger.enable("taghelper")
    fire.Fire(COMMANDS)
