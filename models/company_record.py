from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .fields import (
    ApplicationStatus,
    format_deadline,
    parse_deadline,
    parse_status,
    validate_company_name,
    validate_email,
    validate_phone,
    validate_recruiter_name,
    validate_role,
    validate_tags,
)


class CompanyRecord(BaseModel):
    """A tracked job application. Immutable; edits produce a new record."""

    name: str
    phone: str | None = None
    email: str | None = None
    role: str
    deadline: date
    status: ApplicationStatus
    recruiter_name: str
    tags: frozenset[str] = Field(default_factory=frozenset)

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("name", mode="before")
    @classmethod
    def check_name(cls, v):
        return validate_company_name(v)

    @field_validator("phone", mode="before")
    @classmethod
    def check_phone(cls, v):
        return validate_phone(v)

    @field_validator("email", mode="before")
    @classmethod
    def check_email(cls, v):
        return validate_email(v)

    @field_validator("role", mode="before")
    @classmethod
    def check_role(cls, v):
        return validate_role(v)

    @field_validator("deadline", mode="before")
    @classmethod
    def check_deadline(cls, v):
        return parse_deadline(v)

    @field_validator("status", mode="before")
    @classmethod
    def check_status(cls, v):
        return parse_status(v)

    @field_validator("recruiter_name", mode="before")
    @classmethod
    def check_recruiter_name(cls, v):
        return validate_recruiter_name(v)

    @field_validator("tags", mode="before")
    @classmethod
    def check_tags(cls, v):
        return validate_tags(v) or frozenset()

    @property
    def display_name(self) -> str:
        return self.name

    def is_same_company(self, other: "CompanyRecord | None") -> bool:
        """Identity check used for duplicate detection: same name, ignoring case.

        Weaker than ``==``, which compares every field.
        """
        if other is None:
            return False
        if other is self:
            return True
        return other.name.casefold() == self.name.casefold()

    def describe(self) -> str:
        lines = [
            f"{self.name}",
            f"  Role: {self.role}",
            f"  Status: {self.status.value} ({self.status.label})",
            f"  Deadline: {format_deadline(self.deadline)}",
            f"  Recruiter: {self.recruiter_name}",
        ]
        if self.phone:
            lines.append(f"  Phone: {self.phone}")
        if self.email:
            lines.append(f"  Email: {self.email}")
        if self.tags:
            lines.append("  Tags: " + ", ".join(f"[{t}]" for t in sorted(self.tags)))
        return "\n".join(lines)

    def _field_values(self) -> tuple:
        return tuple(getattr(self, name) for name in type(self).model_fields)

    def __eq__(self, other: object) -> bool:
        """Full structural equality over every field."""
        if not isinstance(other, CompanyRecord):
            return NotImplemented
        return self._field_values() == other._field_values()

    def __hash__(self) -> int:
        return hash(self._field_values())
