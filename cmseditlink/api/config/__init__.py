"""Config API module."""

__all__ = []
