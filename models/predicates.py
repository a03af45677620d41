from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Tuple

from .company_record import CompanyRecord


class CompanyPredicate(Protocol):
    def __call__(self, company: CompanyRecord) -> bool:
        ...


@dataclass(frozen=True)
class ShowAllCompanies:
    def __call__(self, company: CompanyRecord) -> bool:
        return True


@dataclass(frozen=True)
class NameContainsKeywords:
    """Matches companies whose name contains any keyword as a whole word, ignoring case."""

    keywords: Tuple[str, ...]

    def __call__(self, company: CompanyRecord) -> bool:
        words = {w.casefold() for w in company.name.split()}
        return any(k.casefold() in words for k in self.keywords)


SHOW_ALL_COMPANIES = ShowAllCompanies()
