"""Top-level cmseditlink configuration."""

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .AdminSectionConfig import AdminSectionConfig
from .ConfigError import ConfigError
from .get_config_path import get_config_path
from .ScaffoldConfig import ScaffoldConfig

if TYPE_CHECKING:
    from ..link.LinkScaffolder import LinkScaffolder
    from ..section.AdminSectionRegistry import AdminSectionRegistry


class EditLinkConfig(BaseModel):
    """Admin sections and scaffolding options for edit links."""

    model_config = ConfigDict(extra="forbid")

    admin_url_base: str = Field("admin", description="URL prefix of every admin section")
    scaffold: ScaffoldConfig = Field(default_factory=ScaffoldConfig)
    sections: list[AdminSectionConfig] = Field(default_factory=list)

    @model_validator(mode="after")
    def unique_section_names(self) -> "EditLinkConfig":
        seen: set[str] = set()
        for section in self.sections:
            if section.name in seen:
                raise ValueError(f"duplicate admin section name: {section.name!r}")
            seen.add(section.name)
        return self

    @classmethod
    def load(cls, path: Path | None = None) -> "EditLinkConfig":
        """Load and validate config from a JSON file.

        Args:
            path: Config file path. Defaults to ``get_config_path()``.

        Raises:
            ConfigError: If config file not found or unreadable, invalid JSON, or validation error
        """
        path = path or get_config_path()

        if not path.exists():
            raise ConfigError(f"Configuration file not found at {path}")

        try:
            with path.open(encoding="utf-8") as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in config file {path}: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ConfigError(f"Configuration in {path} must be a JSON object, got {type(raw).__name__}")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ConfigError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="python")

    def build_registry(self) -> "AdminSectionRegistry":
        from ..section.AdminSectionRegistry import AdminSectionRegistry

        return AdminSectionRegistry.from_config(self)

    def build_scaffolder(self) -> "LinkScaffolder":
        """Build a ``LinkScaffolder`` over a registry of the configured sections."""
        from ..link.LinkScaffolder import LinkScaffolder

        return LinkScaffolder(self.build_registry(), self.scaffold)
