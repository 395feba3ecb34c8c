"""Entry point for getting a record's edit link."""

from ..record.EditLinkProvider import EditLinkProvider
from ..record.Record import Record
from ..section.SectionConfigurationError import SectionConfigurationError
from .EditLink import DEFAULT_ACTION, EditLink
from .LinkScaffolder import LinkScaffolder

PROVIDER_METHOD = "provide_edit_link"


def edit_link_for(record: Record, action: str = DEFAULT_ACTION, scaffolder: LinkScaffolder | None = None) -> EditLink:
    """Return the edit link of a record.

    Records implementing ``EditLinkProvider`` build their own link, usually to add
    breadcrumbs through the records that own them:

    ```python
    class Book(RecordBase):
        def provide_edit_link(self, action):
            return EditLink.link_for(self, action).via(self.library, "Books")
    ```

    Other records get a plain single-hop link.

    Args:
        record: Record to link to
        action: Action at the end of the URL
        scaffolder: Scaffolder attached to the link (if the provided link has none)

    Raises:
        SectionConfigurationError: If the record's link provider returns something else than an EditLink
    """
    if isinstance(record, EditLinkProvider):
        link = record.provide_edit_link(action)
        if not isinstance(link, EditLink):
            raise SectionConfigurationError(
                f"{record.class_name}.{PROVIDER_METHOD}() should return an EditLink, got {type(link).__name__}."
            )
        if scaffolder is not None and link.scaffolder is None:
            link.scaffolder = scaffolder
        return link
    return EditLink.link_for(record, action, scaffolder)
