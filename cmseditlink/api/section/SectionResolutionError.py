"""Admin section resolution error."""

from ..EditLinkError import EditLinkError


class SectionResolutionError(EditLinkError):
    """Raised when no registered admin section manages a record's class or its ancestors."""

    def __init__(self, class_name: str, searched: list[str] | None = None):
        self.class_name = class_name
        self.searched = searched or [class_name]
        message = f"Could not find an admin section for record class {class_name!r}"
        if len(self.searched) > 1:
            message += f" (searched: {', '.join(self.searched)})"
        super().__init__(message)
