"""Optional record capability: choose the admin section that edits the record."""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..section.AdminSection import AdminSection


@runtime_checkable
class EditSectionHintProvider(Protocol):
    def edit_section_hint(self) -> "AdminSection | str | None":
        """Return the admin section (or its registered name) that edits this record.

        ``None`` means no preference: every registered section is searched.
        """
        ...
