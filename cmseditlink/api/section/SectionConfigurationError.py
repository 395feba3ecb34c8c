"""Admin section configuration error."""

from ..EditLinkError import EditLinkError


class SectionConfigurationError(EditLinkError):
    """Raised when a record's hooks or the link setup point at an unusable admin section."""
