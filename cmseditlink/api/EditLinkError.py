"""Base error for edit link resolution."""


class EditLinkError(Exception):
    """Base class for every error raised while building or resolving an edit link."""
