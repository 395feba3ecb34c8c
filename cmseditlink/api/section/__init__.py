"""Admin section API domain."""

__all__ = []
