"""Record with explicitly given identity."""

from dataclasses import dataclass, field

from ._root_first_ancestry import root_first_ancestry


@dataclass(frozen=True)
class SimpleRecord:
    """Record value object for hosts whose records are not Python classes.

    ``class_ancestry`` defaults to just ``class_name``. It may be given root-first
    or leaf-first and is stored root-first, ending with ``class_name``.
    """

    id: int | str
    class_name: str
    class_ancestry: tuple[str, ...] = field(default=())

    def __post_init__(self):
        if not isinstance(self.class_name, str) or not self.class_name:
            raise ValueError("SimpleRecord.class_name must be a non-empty string")
        ancestry = tuple(root_first_ancestry(self.class_name, self.class_ancestry))
        object.__setattr__(self, "class_ancestry", ancestry)
