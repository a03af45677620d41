from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator

from .company_record import CompanyRecord
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


_FIELD_CHECKS = {
    "name": validate_company_name,
    "phone": validate_phone,
    "email": validate_email,
    "role": validate_role,
    "deadline": parse_deadline,
    "status": parse_status,
    "recruiter_name": validate_recruiter_name,
    "tags": validate_tags,
}


class EditCompanyDescriptor(BaseModel):
    """Stores the details to edit a company with.

    Each field left as ``None`` keeps the company's current value; each set
    field replaces it. Assigning ``None`` to a field clears it again. Tags are
    held as a frozenset copy, so later changes to the caller's collection do
    not leak in.
    """

    name: str | None = None
    phone: str | None = None
    email: str | None = None
    role: str | None = None
    deadline: date | None = None
    status: ApplicationStatus | None = None
    recruiter_name: str | None = None
    tags: frozenset[str] | None = None

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    @field_validator("*", mode="before")
    @classmethod
    def check_field(cls, v, info: ValidationInfo):
        if v is None:
            return None
        return _FIELD_CHECKS[info.field_name](v)

    @classmethod
    def from_descriptor(cls, other: "EditCompanyDescriptor") -> "EditCompanyDescriptor":
        """Copy constructor; the result shares no mutable state with ``other``."""
        return cls.model_validate(other.model_dump())

    def edited_fields(self) -> dict:
        return {name: value for name, value in self if value is not None}

    def is_any_field_edited(self) -> bool:
        """Returns True if at least one field is set."""
        return bool(self.edited_fields())

    def apply_to(self, company: CompanyRecord) -> CompanyRecord:
        """Return a new record: set fields from this descriptor, the rest from ``company``."""
        merged = company.model_dump()
        merged.update(self.edited_fields())
        return CompanyRecord.model_validate(merged)

    def __str__(self) -> str:
        parts = []
        for name, value in self.edited_fields().items():
            if name == "deadline":
                value = format_deadline(value)
            elif name == "status":
                value = value.value
            elif name == "tags":
                value = sorted(value)
            parts.append(f"{name}={value}")
        return f"{type(self).__name__}{{{', '.join(parts)}}}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EditCompanyDescriptor):
            return NotImplemented
        return self.edited_fields() == other.edited_fields()
