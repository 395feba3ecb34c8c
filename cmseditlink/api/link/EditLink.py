"""Edit links to records in the admin interface.

An ``EditLink`` points at the edit screen of one record. Links can be chained
into "breadcrumbs" that lead to the actual edit screen. For example, a ``Book``
edited inside the ``Library`` that holds it:

```python
book_link = EditLink.link_for(book, scaffolder=scaffolder)
book_link.via(library, "Books")
str(book_link)
# Returns: "admin/libraries/EditForm/field/Library/item/1/ItemEditForm/field/Books/item/7/edit"
```

The same chain built from the other end:

```python
EditLink.link_for(library, scaffolder=scaffolder).hereon(book, "Books")
```

Any link of a chain renders the whole chain.
"""

import copy
from typing import TYPE_CHECKING, Union

from markupsafe import escape

from ..record.Record import Record
from ..section.SectionConfigurationError import SectionConfigurationError
from .InvalidLinkArgumentError import InvalidLinkArgumentError

if TYPE_CHECKING:
    from .LinkScaffolder import LinkScaffolder

DEFAULT_ACTION = "edit"


class EditLink:
    """One hop in a chain of edit links.

    Attributes:
        record: The record this hop points at.
        relation_name: Relation (as named by the parent record) leading from the
            parent hop to this one. Unused on the root of a chain.
    """

    def __init__(self, record: Record, action: str = DEFAULT_ACTION, scaffolder: "LinkScaffolder | None" = None):
        self.record = record
        self.relation_name: str | None = None
        self._action = action
        self._parent: EditLink | None = None
        self._child: EditLink | None = None
        self._scaffolder = scaffolder

    @classmethod
    def link_for(
        cls, record: Record, action: str = DEFAULT_ACTION, scaffolder: "LinkScaffolder | None" = None
    ) -> "EditLink":
        """Return a standalone edit link for the given record.

        Args:
            record: Record to link to
            action: Usually the default value 'edit' is what you want
            scaffolder: Scaffolder used when the link is rendered
        """
        return cls(record, action, scaffolder)

    @property
    def parent(self) -> "EditLink | None":
        return self._parent

    @property
    def child(self) -> "EditLink | None":
        return self._child

    @property
    def scaffolder(self) -> "LinkScaffolder | None":
        return self._scaffolder

    @scaffolder.setter
    def scaffolder(self, scaffolder: "LinkScaffolder | None") -> None:
        self._scaffolder = scaffolder

    def attach_as_child_of(self, record_or_link: Union[Record, "EditLink"], relation_name: str) -> "EditLink":
        """Chain this link AFTER the given record or link.

        ```python
        EditLink.link_for(book).attach_as_child_of(book.library, "Books")
        ```
        To edit a Book, the admin interface should reach it through the Library
        the Book belongs to.

        Args:
            record_or_link: The owner record (or a link to it)
            relation_name: Name of the relation that the owner uses when referring
                to this link's record ("Books" above)

        If this link already had a parent, that parent is detached and becomes the
        leaf of its own chain.

        Returns:
            The owner's link, so that chaining can continue towards the root
        """
        link = self._resolve_link(record_or_link, keep_ancestors=True)
        if self._parent is not None:
            self._parent._child = None
        link._child = self
        self._parent = link
        self.relation_name = relation_name
        return link

    via = attach_as_child_of

    def attach_as_parent_of(self, record_or_link: Union[Record, "EditLink"], relation_name: str) -> "EditLink":
        """Chain the given record or link AFTER this link. The mirror of ``attach_as_child_of``.

        Args:
            record_or_link: The owned record (or a link to it)
            relation_name: Name of the relation that this link's record uses when
                referring to the given record

        If this link already had a child, that child is detached and becomes the
        root of its own chain.

        Returns:
            The owned record's link, so that chaining can continue towards the leaf
        """
        link = self._resolve_link(record_or_link, keep_ancestors=False)
        if self._child is not None:
            self._child._parent = None
        link._parent = self
        self._child = link
        link.relation_name = relation_name
        return link

    hereon = attach_as_parent_of

    def root(self) -> "EditLink":
        link = self
        while link._parent is not None:
            link = link._parent
        return link

    def children(self, include_self: bool = False) -> list["EditLink"]:
        """Return the links from this one down to the leaf, in root-to-leaf order."""
        children = [self] if include_self else []
        child = self._child
        while child is not None:
            children.append(child)
            child = child._child
        return children

    def action(self, value: str | None = None) -> Union[str, "EditLink"]:
        """Get or set the 'action' part of the link.

        The action is the last part of the URL and is usually 'edit'. In a chain
        only the action of the LAST link (the leaf) is used; the others are
        discarded:

        ```python
        EditLink.link_for(book).action("history").via(library, "Books")  # Correct: book is the leaf
        EditLink.link_for(book).via(library, "Books").action("history")  # Wrong: sets the library's action

        EditLink.link_for(library).hereon(book, "Books").action("history")  # Correct
        EditLink.link_for(library).action("history").hereon(book, "Books")  # Wrong
        ```

        Returns:
            The action if ``value`` is None, otherwise this link (for fluent calls)
        """
        if value is None:
            return self._action
        self._action = value
        return self

    def url(self, scaffolder: "LinkScaffolder | None" = None) -> str:
        """Render the whole chain this link belongs to.

        Raises:
            SectionConfigurationError: If no scaffolder is given or attached to the chain
            SectionResolutionError: If no admin section manages the root record
        """
        scaffolder = scaffolder or self._find_scaffolder()
        if scaffolder is None:
            raise SectionConfigurationError(
                f"No LinkScaffolder available to render the edit link for {self.record.class_name!r}; "
                "pass one to EditLink.link_for() or url()."
            )
        return scaffolder.scaffold(self.root())

    def for_template(self) -> str:
        return self.url()

    def __html__(self) -> str:
        return str(escape(self.url()))

    def __str__(self):
        return self.url()

    def __repr__(self):
        return f"EditLink({self.record.class_name!r}, id={self.record.id!r}, action={self._action!r})"

    def _copy_chain(self, keep_ancestors: bool) -> "EditLink":
        """Copy this link with its ancestors (or its descendants) so the copy can be relinked.

        The source chain is never touched; the copies share only the records.
        """
        head = copy.copy(self)
        node = head
        if keep_ancestors:
            head._child = None
            while node._parent is not None:
                parent = copy.copy(node._parent)
                parent._child = node
                node._parent = parent
                node = parent
        else:
            head._parent = None
            while node._child is not None:
                child = copy.copy(node._child)
                child._parent = node
                node._child = child
                node = child
        return head

    def _find_scaffolder(self) -> "LinkScaffolder | None":
        if self._scaffolder is not None:
            return self._scaffolder
        for link in self.root().children(include_self=True):
            if link._scaffolder is not None:
                return link._scaffolder
        return None

    def _resolve_link(self, record_or_link: Union[Record, "EditLink"], keep_ancestors: bool) -> "EditLink":
        if isinstance(record_or_link, EditLink):
            return record_or_link._copy_chain(keep_ancestors)
        if isinstance(record_or_link, Record):
            return type(self).link_for(record_or_link, scaffolder=self._scaffolder)
        raise InvalidLinkArgumentError(
            f"Expected a record or an EditLink, got {type(record_or_link).__name__}: {record_or_link!r}"
        )
