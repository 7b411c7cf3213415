"""Shared models for commit-guard."""
from typing import List, Optional, Tuple
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field

# Fields a required-field list may refer to and that a header can satisfy.
KNOWN_FIELDS = ("type", "scope", "description", "body", "footer")

class ViolationKind(str, Enum):
    UNKNOWN_TYPE = "unknown-type"
    MISSING_FIELD = "missing-field"
    MALFORMED_HEADER = "malformed-header"

class CommitTypeSpec(BaseModel):
    """A registered commit type and the fields it requires."""

    model_config = ConfigDict(frozen=True)

    name: str
    required: Tuple[str, ...] = ("description",)

class ParsedMessage(BaseModel):
    """Structural decomposition of a commit message.

    Optional fields are ``None`` when absent, which is not the same as an
    empty string: ``feat(): x`` has an empty scope, ``feat: x`` has none.
    """

    model_config = ConfigDict(frozen=True)

    header: str
    type: str
    scope: Optional[str] = None
    description: str = ""
    body: Optional[str] = None
    footer: Optional[str] = None

    def field_value(self, name: str) -> Optional[str]:
        """Return the value of a structural field, or None if unknown."""
        if name not in KNOWN_FIELDS:
            return None
        return getattr(self, name)

class Violation(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: ViolationKind
    commit_type: Optional[str] = None
    field: Optional[str] = None
    detail: Optional[str] = None

class ValidationResult(BaseModel):
    violations: List[Violation] = Field(default_factory=list, description="Violations in detection order")

    @property
    def is_valid(self) -> bool:
        return not self.violations

    @classmethod
    def valid(cls) -> 'ValidationResult':
        return cls()

    @classmethod
    def invalid(cls, violations: List[Violation]) -> 'ValidationResult':
        return cls(violations=list(violations))
