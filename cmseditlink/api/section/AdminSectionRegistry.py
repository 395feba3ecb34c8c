"""Registry of the admin sections available to link scaffolding."""

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from .AdminSection import AdminSection
from .ModelAdminSection import ModelAdminSection

if TYPE_CHECKING:
    from ..config.EditLinkConfig import EditLinkConfig


class AdminSectionRegistry:
    """Admin sections by name, in registration order.

    The registry is an explicit object handed to a ``LinkScaffolder``; there is
    no process-wide instance.
    """

    def __init__(self, sections: Iterable[AdminSection] = ()) -> None:
        self._sections: dict[str, AdminSection] = {}
        for section in sections:
            self.register(section)

    def register(self, section: AdminSection) -> None:
        if not isinstance(section, AdminSection):
            raise TypeError(f"Expected an AdminSection, got {type(section).__name__}")
        if section.name in self._sections:
            raise ValueError(f"Admin section already registered: {section.name!r}")
        self._sections[section.name] = section

    def get(self, name: str) -> AdminSection | None:
        return self._sections.get(name)

    def all_sections(self) -> list[AdminSection]:
        return list(self._sections.values())

    def __len__(self) -> int:
        return len(self._sections)

    def __iter__(self) -> Iterator[AdminSection]:
        return iter(self.all_sections())

    def __contains__(self, item: object) -> bool:
        if isinstance(item, AdminSection):
            return self._sections.get(item.name) is item
        return item in self._sections

    @classmethod
    def from_config(cls, config: "EditLinkConfig") -> "AdminSectionRegistry":
        """Build a registry of ``ModelAdminSection`` objects from configuration."""
        return cls(
            ModelAdminSection(
                name=section_config.name,
                url_segment=section_config.url_segment,
                managed_models=section_config.managed_models,
                url_base=config.admin_url_base,
                model_tabs=section_config.model_tabs,
            )
            for section_config in config.sections
        )
