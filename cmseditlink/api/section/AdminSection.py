"""Abstract base class for admin sections."""

from abc import ABC, abstractmethod
from collections.abc import Mapping


class AdminSection(ABC):
    """An admin interface component that owns the edit URLs of some record classes."""

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @abstractmethod
    def managed_classes(self) -> Mapping[str, str]:
        """Return managed record class names mapped to their titles in this section."""
        pass

    @abstractmethod
    def base_url_for(self, class_name: str) -> str:
        """Return the section's base URL for editing records of ``class_name``.

        ``class_name`` arrives with namespace separators already made URL-safe.
        """
        pass

    def manages(self, class_name: str) -> bool:
        return class_name in self.managed_classes()
