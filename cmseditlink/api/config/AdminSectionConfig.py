"""Admin section configuration."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..section._normalize_managed_models import _normalize_managed_models


class AdminSectionConfig(BaseModel):
    """One admin section and the record classes it manages."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1, description="Section name, used by section hints")
    url_segment: str = Field(..., description="URL segment of the section below the admin base URL")
    managed_models: dict[str, str] = Field(..., description="Managed record class names mapped to titles")
    model_tabs: bool = Field(False, description="Append the managed class name to the section URL")

    @field_validator("managed_models", mode="before")
    @classmethod
    def accept_class_name_list(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return _normalize_managed_models(value)
        return value

    @field_validator("managed_models")
    @classmethod
    def require_managed_models(cls, value: dict[str, str]) -> dict[str, str]:
        if not value:
            raise ValueError("managed_models must name at least one record class")
        return value
