"""Record API domain: the record interfaces consumed by link scaffolding."""

__all__ = []
