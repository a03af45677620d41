from __future__ import annotations

import re
from datetime import date, datetime
from enum import Enum
from typing import Iterable, Optional


DEADLINE_FORMAT = "%d-%m-%Y"

_NAME_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9 &.,'()/+-]*$")
_RECRUITER_RE = re.compile(r"^[A-Za-z][A-Za-z .'-]*$")
_PHONE_RE = re.compile(r"^\d{3,}$")
_EMAIL_RE = re.compile(r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")
_TAG_RE = re.compile(r"^[A-Za-z0-9]+$")

MAX_TEXT_LENGTH = 100


class ApplicationStatus(str, Enum):
    PENDING_APPLICATION = "PA"
    SUBMITTED_APPLICATION = "SA"
    PENDING_INTERVIEW = "PI"
    PENDING_OUTCOME = "PO"
    OFFERED = "O"
    REJECTED = "R"

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").title()


def _require_text(value: object, what: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{what} should be text")
    text = value.strip()
    if not text:
        raise ValueError(f"{what} should not be blank")
    if len(text) > MAX_TEXT_LENGTH:
        raise ValueError(f"{what} should be at most {MAX_TEXT_LENGTH} characters")
    return text


def validate_company_name(value: object) -> str:
    text = _require_text(value, "Company name")
    if not _NAME_RE.match(text):
        raise ValueError("Company name should start with a letter or digit")
    return text


def validate_recruiter_name(value: object) -> str:
    text = _require_text(value, "Recruiter name")
    if not _RECRUITER_RE.match(text):
        raise ValueError("Recruiter name should only contain letters, spaces, '.', \"'\" and '-'")
    return text


def validate_role(value: object) -> str:
    return _require_text(value, "Role")


def validate_phone(value: object) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    if not _PHONE_RE.match(text):
        raise ValueError("Phone numbers should only contain digits, and be at least 3 digits long")
    return text


def validate_email(value: object) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    if not _EMAIL_RE.match(text):
        raise ValueError("Email should be of the format local-part@domain")
    return text


def parse_status(value: object) -> object:
    """Accept status codes case-insensitively; enum members pass through."""
    if isinstance(value, str) and not isinstance(value, ApplicationStatus):
        code = value.strip().upper()
        try:
            return ApplicationStatus(code)
        except ValueError:
            codes = ", ".join(s.value for s in ApplicationStatus)
            raise ValueError(f"Application status should be one of: {codes}") from None
    return value


def parse_deadline(value: object) -> object:
    if isinstance(value, str):
        try:
            return datetime.strptime(value.strip(), DEADLINE_FORMAT).date()
        except ValueError:
            raise ValueError("Deadline should be a valid date in the format dd-mm-yyyy") from None
    return value


def format_deadline(value: date) -> str:
    return value.strftime(DEADLINE_FORMAT)


def validate_tags(value: Optional[Iterable[str]]) -> Optional[frozenset]:
    """Return an immutable copy of the given tags after checking each one."""
    if value is None:
        return None
    if isinstance(value, str):
        value = [value]
    tags = []
    for tag in value:
        text = str(tag).strip()
        if not _TAG_RE.match(text):
            raise ValueError(f"Tag '{text}' should be alphanumeric")
        tags.append(text)
    return frozenset(tags)
