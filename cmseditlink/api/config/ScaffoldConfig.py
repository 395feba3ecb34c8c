"""Link scaffolding configuration."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ScaffoldConfig(BaseModel):
    """How record class names are matched and written into edit URLs."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    namespace_separator: str = Field("\\", min_length=1, description="Namespace separator used in record class names")
    namespace_replacement: str = Field("-", description="URL-safe replacement for the namespace separator")
    match_order: Literal["generic_first", "specific_first"] = Field(
        "generic_first",
        description="Whether the most generic or the most specific record class is matched first",
    )
