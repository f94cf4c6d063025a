from datetime import datetime
from typing import Dict, List, Optional

from pydantic import AliasChoices, AliasGenerator, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel, to_pascal


# ============================================================
# Entity
# ============================================================

class Claim(BaseModel):
    """Identity attribute assertion as held in memory between mapper and gateway."""

    id: str = ""
    type: str = ""
    value: str = ""
    value_type: str = ""
    display_text: str = ""
    properties: Optional[Dict[str, str]] = None
    description: Optional[str] = None


# ============================================================
# Tool-surface DTOs (PascalCase on the wire)
# ============================================================

class _PascalModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True)


class _ClaimFields(_PascalModel):
    # Missing or null strings become "", the validator reports them.
    type: str = Field(default="", description="The type of the claim (e.g., 'email', 'role'). This field is mandatory.")
    value: str = Field(default="", description="The value of the claim. This field is mandatory.")
    value_type: str = Field(
        default="",
        description="The XML schema data type of the value "
        "(e.g., 'http://www.w3.org/2001/XMLSchema#string'). This field is mandatory.",
    )
    display_text: str = Field(default="", description="A human-readable display text for the claim. This field is mandatory.")
    properties: Optional[Dict[str, str]] = Field(
        default=None,
        description="An optional dictionary of additional properties for the claim (string key-value pairs).",
    )
    description: Optional[str] = Field(default=None, description="An optional description for the claim (max 500 characters).")

    @field_validator("type", "value", "value_type", "display_text", mode="before")
    @classmethod
    def _none_as_empty(cls, v):
        return "" if v is None else v


class ClaimCreateDto(_ClaimFields):
    """Create request. The Id is assigned by the server."""


class ClaimUpdateDto(_ClaimFields):
    id: str = Field(default="", description="The id of the claim. Must match the claimId path parameter.")

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_text(cls, v):
        return "" if v is None else str(v)


class ClaimOutgoingDto(_PascalModel):
    id: str = ""
    type: str = ""
    value: str = ""
    value_type: str = ""
    display_text: str = ""
    properties: Optional[Dict[str, str]] = None
    description: Optional[str] = None


class ErrorOutgoingDto(_PascalModel):
    errors: List[str] = Field(default_factory=list)
    status: str = ""


class AppVersionDto(_PascalModel):
    app_version: str = ""
    app_now: datetime
    app_now_utc: datetime
    app_utc_ticks: int


# ============================================================
# Remote API DTO (camelCase out, camel or Pascal in)
# ============================================================

class ClaimDto(BaseModel):
    model_config = ConfigDict(
        alias_generator=AliasGenerator(
            validation_alias=lambda name: AliasChoices(to_camel(name), to_pascal(name)),
            serialization_alias=to_camel,
        ),
        populate_by_name=True,
    )

    id: str = ""
    type: str = ""
    value: str = ""
    value_type: str = ""
    display_text: str = ""
    properties: Optional[Dict[str, str]] = None
    description: Optional[str] = None

    @field_validator("id", "type", "value", "value_type", "display_text", mode="before")
    @classmethod
    def _none_as_empty(cls, v):
        return "" if v is None else v
