"""Link API domain: edit link chains and URL scaffolding."""

__all__ = []
