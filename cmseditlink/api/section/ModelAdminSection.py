"""Admin section that manages a fixed set of record classes."""

from collections.abc import Iterable, Mapping

from ...utils.join_links import join_links
from ._normalize_managed_models import _normalize_managed_models
from .AdminSection import AdminSection


class ModelAdminSection(AdminSection):
    """Admin section mounted at ``<url_base>/<url_segment>``.

    With ``model_tabs`` enabled every managed class gets its own tab, so the base
    URL for a class becomes ``<url_base>/<url_segment>/<class>``.
    """

    def __init__(
        self,
        name: str,
        url_segment: str,
        managed_models: Mapping[str, str] | Iterable[str],
        url_base: str = "",
        model_tabs: bool = False,
    ):
        if not name:
            raise ValueError("Admin section name must be a non-empty string")
        self._name = name
        self.url_segment = url_segment
        self.url_base = url_base
        self.model_tabs = model_tabs
        self._managed_models = _normalize_managed_models(managed_models)

    @property
    def name(self) -> str:
        return self._name

    def managed_classes(self) -> dict[str, str]:
        return dict(self._managed_models)

    def base_url_for(self, class_name: str) -> str:
        return join_links(self.url_base, self.url_segment, class_name if self.model_tabs else None)

    def __repr__(self):
        return f"ModelAdminSection(name={self._name!r}, url_segment={self.url_segment!r})"
