"""cmseditlink - links to record edit screens in a CMS admin interface.

Build an ``EditLink`` for a record, optionally chained through the records that
own it, and render it to the URL of the record's edit form.
"""

from .api.config.ConfigError import ConfigError
from .api.config.EditLinkConfig import EditLinkConfig
from .api.config.ScaffoldConfig import ScaffoldConfig
from .api.EditLinkError import EditLinkError
from .api.link.edit_link_for import edit_link_for
from .api.link.EditLink import EditLink
from .api.link.InvalidLinkArgumentError import InvalidLinkArgumentError
from .api.link.LinkScaffolder import LinkScaffolder
from .api.record.EditLinkProvider import EditLinkProvider
from .api.record.EditSectionHintProvider import EditSectionHintProvider
from .api.record.Record import Record
from .api.record.RecordBase import RecordBase
from .api.record.SimpleRecord import SimpleRecord
from .api.section.AdminSection import AdminSection
from .api.section.AdminSectionMatch import AdminSectionMatch
from .api.section.AdminSectionRegistry import AdminSectionRegistry
from .api.section.ModelAdminSection import ModelAdminSection
from .api.section.SectionConfigurationError import SectionConfigurationError
from .api.section.SectionResolutionError import SectionResolutionError
from .get_package_version import get_package_version

__version__ = get_package_version()

__all__ = [
    "AdminSection",
    "AdminSectionMatch",
    "AdminSectionRegistry",
    "ConfigError",
    "EditLink",
    "EditLinkConfig",
    "EditLinkError",
    "EditLinkProvider",
    "EditSectionHintProvider",
    "InvalidLinkArgumentError",
    "LinkScaffolder",
    "ModelAdminSection",
    "Record",
    "RecordBase",
    "ScaffoldConfig",
    "SectionConfigurationError",
    "SectionResolutionError",
    "SimpleRecord",
    "__version__",
    "edit_link_for",
]
