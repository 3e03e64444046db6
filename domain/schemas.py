"""Pydantic models for survey submissions as stored and served."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Records written before `items` existed carry no version and load as 1.
LEGACY_SCHEMA_VERSION = 1
SUBMISSION_SCHEMA_VERSION = 2


class FlavorItem(BaseModel):
    """One leaf flavor pick: category > subcategory > flavor."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    category: str = Field(..., min_length=1)
    subcategory: str = Field(..., min_length=1)
    flavor: str = Field(..., min_length=1)

    def label(self, sep: str = ">") -> str:
        return f"{self.category}{sep}{self.subcategory}{sep}{self.flavor}"


class SelectionItem(BaseModel):
    """A non-leaf pick: a whole category, or a subcategory within a category."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    type: Literal["category", "subcategory"]
    name: str = Field(..., min_length=1)
    category: str | None = Field(
        default=None,
        description="Parent category; required when type == 'subcategory'.",
    )

    @model_validator(mode="after")
    def _validate(self) -> "SelectionItem":
        if self.type == "subcategory" and not self.category:
            raise ValueError("subcategory items require a parent category")
        return self


class SubmissionRecord(BaseModel):
    """
    One completed survey response.

    - Created by the submission log from a validated candidate
    - Serialized with camelCase keys (the HTTP and storage format)
    - Never mutated after creation
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    schema_version: int = Field(default=LEGACY_SCHEMA_VERSION, alias="schemaVersion")
    id: int = Field(..., gt=0, description="Epoch milliseconds at creation.")
    name: str = Field(..., min_length=1)
    age: int = Field(..., ge=1, le=120)
    coffee_name: str = Field(default="", alias="coffeeName")
    flavors: list[FlavorItem] = Field(default_factory=list)
    items: list[SelectionItem] = Field(default_factory=list)
    timestamp: str = Field(..., description="Japan-time display string, e.g. 2025/1/5 9:03:07.")
    raw_timestamp: str = Field(..., alias="rawTimestamp", description="ISO-8601 UTC instant.")

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)


class SubmissionCandidate(BaseModel):
    """A validated, normalized submission request (no id or timestamps yet)."""

    model_config = ConfigDict(frozen=True)

    name: str
    age: int
    coffee_name: str
    flavors: list[FlavorItem] = Field(default_factory=list)
    items: list[SelectionItem] = Field(default_factory=list)
