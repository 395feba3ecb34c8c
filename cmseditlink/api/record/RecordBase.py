"""Base class for records modelled as Python classes."""

from typing import ClassVar

NAMESPACE_SEPARATOR = "\\"


class RecordBase:
    """Record whose class name and ancestry come from the Python class hierarchy.

    Subclasses may set ``__namespace__`` (e.g. ``"App\\Library"``) so that the
    record class name is qualified the way the host's admin sections expect.
    The namespace is inherited unless a subclass sets its own.

    Example:
        ```python
        class Page(RecordBase):
            __namespace__ = "CMS"

        class NewsPage(Page):
            pass

        NewsPage(3).class_ancestry
        # Returns: ("CMS\\Page", "CMS\\NewsPage")
        ```
    """

    __namespace__: ClassVar[str] = ""

    def __init__(self, id: int | str):
        self.id = id

    @classmethod
    def record_class_name(cls) -> str:
        if cls.__namespace__:
            return f"{cls.__namespace__}{NAMESPACE_SEPARATOR}{cls.__name__}"
        return cls.__name__

    @property
    def class_name(self) -> str:
        return type(self).record_class_name()

    @property
    def class_ancestry(self) -> tuple[str, ...]:
        return tuple(
            klass.record_class_name()
            for klass in reversed(type(self).__mro__)
            if issubclass(klass, RecordBase) and klass is not RecordBase
        )

    def __repr__(self):
        return f"{type(self).__name__}(id={self.id!r})"
