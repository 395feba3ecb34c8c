"""Turns edit link chains into admin URLs."""

from typing import TYPE_CHECKING

from ...utils.get_logger import get_logger
from ...utils.join_links import join_links
from ..config.ScaffoldConfig import ScaffoldConfig
from ..record._root_first_ancestry import root_first_ancestry
from ..record.EditSectionHintProvider import EditSectionHintProvider
from ..record.Record import Record
from ..section.AdminSection import AdminSection
from ..section.AdminSectionMatch import AdminSectionMatch
from ..section.AdminSectionRegistry import AdminSectionRegistry
from ..section.SectionConfigurationError import SectionConfigurationError
from ..section.SectionResolutionError import SectionResolutionError

if TYPE_CHECKING:
    from .EditLink import EditLink

logger = get_logger("link.scaffolder")

HINT_METHOD = "edit_section_hint"


class LinkScaffolder:
    """Builds the admin URL of an edit link chain.

    The scaffolder keeps no per-call state, so one instance can serve every link
    of an application.
    """

    def __init__(self, registry: AdminSectionRegistry, config: ScaffoldConfig | None = None):
        self.registry = registry
        self.config = config or ScaffoldConfig()

    def scaffold(self, root_link: "EditLink") -> str:
        """Return the URL of the chain starting at ``root_link``.

        The root record decides the admin section. Every following link appends
        a nested item form reached through its relation name. The action of the
        last link ends the URL.

        Raises:
            SectionResolutionError: If no admin section manages the root record
            SectionConfigurationError: If the root record's section hint is wrong
        """
        match = self.pick_admin_section(root_link.record)
        managed_class = self.sanitise_class_name(match.class_name)
        url = ""
        last_action = ""
        for link in root_link.children(include_self=True):
            record = link.record
            if not url:
                # Root link; the action is appended after the loop
                url = join_links(
                    match.section.base_url_for(managed_class),
                    "EditForm",
                    "field",
                    managed_class,
                    "item",
                    record.id,
                )
            else:
                url = join_links(
                    url,
                    "ItemEditForm",
                    "field",
                    link.relation_name,
                    "item",
                    record.id,
                )
            last_action = link.action()
        url = join_links(url, last_action)
        logger.debug("Scaffolded edit link for %s #%s: %s", root_link.record.class_name, root_link.record.id, url)
        return url

    def sanitise_class_name(self, class_name: str) -> str:
        return class_name.replace(self.config.namespace_separator, self.config.namespace_replacement)

    def pick_admin_section(self, record: Record) -> AdminSectionMatch:
        """Find the admin section that manages ``record``.

        A record implementing ``EditSectionHintProvider`` can name its section;
        the named section is still checked to really manage the record's class.
        Otherwise every registered section is a candidate.

        Classes are tried in ``match_order`` (most generic first by default), each
        against every candidate, and the first section managing the class wins.
        The returned match carries the class that matched, which is the one the
        URL must use: a section managing ``Page`` edits a ``NewsPage`` as a ``Page``.

        Raises:
            SectionConfigurationError: If the section hint is invalid or names a
                section that cannot manage the record
            SectionResolutionError: If no registered section manages the record
        """
        hint_section = self._hinted_section(record)
        candidates = [hint_section] if hint_section is not None else self.registry.all_sections()

        class_names = self.search_order(record)
        for class_name in class_names:
            for candidate in candidates:
                if candidate.manages(class_name):
                    logger.debug("Record class %s is managed by admin section %r", class_name, candidate.name)
                    return AdminSectionMatch(candidate, class_name)

        if hint_section is not None:
            logger.debug("Section hint %r cannot manage %s", hint_section.name, record.class_name)
            raise SectionConfigurationError(
                f"{record.class_name}.{HINT_METHOD}() returned a wrong admin section {hint_section.name!r}. "
                f"The section should be able to manage instances of {record.class_name!r}."
            )
        logger.debug("No admin section manages %s", record.class_name)
        raise SectionResolutionError(record.class_name, class_names)

    def search_order(self, record: Record) -> list[str]:
        """Return the record's classes in the order they are matched against sections.

        Ancestry is accepted root-first or leaf-first.
        """
        ancestry = root_first_ancestry(record.class_name, record.class_ancestry)
        if self.config.match_order == "specific_first":
            ancestry.reverse()
        return ancestry

    def _hinted_section(self, record: Record) -> AdminSection | None:
        if not isinstance(record, EditSectionHintProvider):
            return None

        hint = record.edit_section_hint()
        if hint is None:
            return None
        if isinstance(hint, AdminSection):
            return hint
        if isinstance(hint, str):
            section = self.registry.get(hint)
            if section is None:
                raise SectionConfigurationError(
                    f"{record.class_name}.{HINT_METHOD}() returned {hint!r}, which is not a registered admin section."
                )
            return section
        raise SectionConfigurationError(
            f"{record.class_name}.{HINT_METHOD}() should return either an AdminSection instance "
            f"or the name of a registered admin section, got {type(hint).__name__}."
        )
