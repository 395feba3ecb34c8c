"""API module for cmseditlink.

Each file exports exactly one function or class. Public names are re-exported
from the top-level ``cmseditlink`` package.
"""

__all__ = []
