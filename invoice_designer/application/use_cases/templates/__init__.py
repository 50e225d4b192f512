"""Template-related use cases."""

from .create_template import create_template
from .delete_template import delete_template
from .get_template import get_template
from .list_templates import list_templates
from .render_template import render_layout_preview, render_template
from .seed_templates import seed_templates
from .update_template import UNSET, update_template

__all__ = [
    "UNSET",
    "create_template",
    "delete_template",
    "get_template",
    "list_templates",
    "render_layout_preview",
    "render_template",
    "seed_templates",
    "update_template",
]
