"""Invalid link argument error."""

from ..EditLinkError import EditLinkError


class InvalidLinkArgumentError(EditLinkError, TypeError):
    """Raised when a chaining operation gets neither a record nor an EditLink."""
