"""Record protocol."""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable


@runtime_checkable
class Record(Protocol):
    """A content record that edit links can point at.

    Attributes:
        id: Unique identifier of the record
        class_name: Fully qualified record class name (namespace parts joined with ``\\``)
        class_ancestry: Record class names from the root base class down to ``class_name``
    """

    @property
    def id(self) -> int | str: ...

    @property
    def class_name(self) -> str: ...

    @property
    def class_ancestry(self) -> Sequence[str]: ...
