"""
Preview page for the tag builders.

Renders one HTML page that shows the output of every helper next to the
call that produced it. Handy to eyeball escaping and attribute order in a
browser.
"""

__all__ = [
    "build_samples",
    "render_preview",
    "write_preview",
]

from pathlib import Path
from typing import Dict, List, Optional, Union

import jinja2
from loguru import logger

from taghelper.config import CONFIG
from taghelper.html.tags import TagHelper


def build_samples(helper: Optional[TagHelper] = None) -> List[Dict[str, str]]:
    """
    Render a fixed set of helper calls.

    Returns:
        List of {"call": ..., "html": ...} dicts, in display order
    """
    helper = helper or TagHelper()
    colors = [
        {"title": "Red", "value": "red"},
        {"title": "Green", "value": "green"},
        {"title": "Blue", "value": "blue"},
    ]
    samples = [
        ('image_tag("photos/cat.jpg")', helper.image_tag("photos/cat.jpg")),
        (
            'link_to("Help", {"href": "/help", "popup": ["help", "width=300"]})',
            helper.link_to("Help", {"href": "/help", "popup": ["help", "width=300"]}),
        ),
        (
            'link_to("Delete", {"href": "/items/1", "method": "delete", "confirm": "Sure?"})',
            helper.link_to(
                "Delete",
                {"href": "/items/1", "method": "delete", "confirm": "Sure?"},
            ),
        ),
        ('text_field_tag("email")', helper.text_field_tag("email")),
        (
            'select_tag("color", colors, {"value": ["green"]})',
            helper.select_tag("color", colors, {"value": ["green"]}),
        ),
        ('date_select_tag("dob")', helper.date_select_tag("dob")),
    ]
    return [{"call": call, "html": html} for call, html in samples]


def render_preview(
    helper: Optional[TagHelper] = None,
    template_name: str = CONFIG["preview_template"],
) -> str:
    """Render the preview page to a string."""
    env = jinja2.Environment(
        loader=jinja2.PackageLoader("taghelper", "templates"),
        autoescape=True,
    )
    template = env.get_template(template_name)
    return template.render(samples=build_samples(helper))


def write_preview(
    output_dir: Union[str, Path] = CONFIG["preview_output_dir"],
    helper: Optional[TagHelper] = None,
) -> Path:
    """
    Write the preview page to output_dir/index.html.

    Args:
        output_dir: Directory where index.html is saved (created if missing)
        helper: Helper used to render the samples

    Returns:
        Path of the written file
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    index_path = output_dir / "index.html"

    logger.info("Generating preview page")
    try:
        rendered_html = render_preview(helper)
        with open(index_path, "w") as f:
            f.write(rendered_html)
    except jinja2.exceptions.TemplateError as e:
        logger.error(f"Error rendering template: {e}")
        raise
    except OSError as e:
        logger.error(f"Error writing preview page: {e}")
        raise

    logger.info(f"Successfully generated preview at {index_path}")
    return index_path
