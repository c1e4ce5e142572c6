"""
Domain models for stored vars and discovery requests.

The persisted document is modelled with pydantic so that a malformed file
is rejected as a whole instead of being partially read. Discovery requests
are plain in-memory values and never touch disk.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

VARS_FILE_FORMAT = "bv-vars-1"


class StoredVar(BaseModel):
    """A single persisted value. Masked when the model is printed."""

    value: SecretStr = Field(..., description="Stored var value")

    @field_validator("value")
    @classmethod
    def validate_value(cls, v: SecretStr) -> SecretStr:
        """Reject values that are blank once whitespace is removed."""
        if not v.get_secret_value().strip():
            raise ValueError("Stored value cannot be empty")
        return v

    def get_value(self) -> str:
        """Get the plain text value."""
        return self.value.get_secret_value()  # pylint: disable=no-member


class VarsFile(BaseModel):
    """On-disk document holding every stored var, keyed by var name."""

    model_config = ConfigDict(populate_by_name=True)

    format: str = Field(default=VARS_FILE_FORMAT, alias="_format")
    vars: Dict[str, StoredVar] = Field(default_factory=dict)

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        """Only the current document format is understood."""
        if v != VARS_FILE_FORMAT:
            raise ValueError(f"Unsupported vars file format '{v}'")
        return v

    def to_document(self) -> dict:
        """Serialize to the JSON-ready dictionary written to disk."""
        return {
            "_format": self.format,
            "vars": {key: {"value": stored.get_value()} for key, stored in self.vars.items()},
        }


class Requirement(Enum):
    """How strictly a configuration asked for a var."""

    OPTIONAL = "optional"
    REQUIRED = "required"

    def merge(self, other: "Requirement") -> "Requirement":
        """Combine two requests for the same key; required always wins."""
        if Requirement.REQUIRED in (self, other):
            return Requirement.REQUIRED
        return Requirement.OPTIONAL


@dataclass(frozen=True)
class VarRequest:
    """A key requested by a configuration during a discovery pass."""

    key: str
    requirement: Requirement
