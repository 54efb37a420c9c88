"""
yardtypes Prose Package

Renders parsed type annotations as English descriptions.

Author: xwest
"""

from .list_join import list_join
from .renderer import ProseRenderer, article, render, render_all

__all__ = [
    "ProseRenderer",
    "article",
    "list_join",
    "render",
    "render_all",
]
