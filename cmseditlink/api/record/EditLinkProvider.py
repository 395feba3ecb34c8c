"""Optional record capability: build the record's own edit link."""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..link.EditLink import EditLink


@runtime_checkable
class EditLinkProvider(Protocol):
    def provide_edit_link(self, action: str) -> "EditLink":
        """Return the edit link for this record, typically with breadcrumbs via its owners."""
        ...
