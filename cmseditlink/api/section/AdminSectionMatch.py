"""Result of matching a record to its admin section."""

from dataclasses import dataclass

from .AdminSection import AdminSection


@dataclass(frozen=True)
class AdminSectionMatch:
    """The admin section that manages a record.

    ``class_name`` is the managed class that matched, which may be an ancestor of
    the record's own class (a section managing ``Page`` also edits ``NewsPage``
    records, under the ``Page`` URL).
    """

    section: AdminSection
    class_name: str
