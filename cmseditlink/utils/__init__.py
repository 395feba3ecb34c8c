"""cmseditlink utility functions.

Each file in this package exports exactly one function, following
the single file == function/class rule.
"""

from .logger import configure_logging
from .get_logger import get_logger
from .join_links import join_links
from .render_template import render_template

__all__ = [
    "configure_logging",
    "get_logger",
    "join_links",
    "render_template",
]
