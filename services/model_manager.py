from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from models.company_record import CompanyRecord
from models.predicates import SHOW_ALL_COMPANIES, CompanyPredicate


logger = logging.getLogger(__name__)


class ModelError(Exception):
    pass


class DuplicateCompanyError(ModelError):
    def __init__(self, company: CompanyRecord):
        super().__init__(f"Company already exists: {company.name}")
        self.company = company


class CompanyNotFoundError(ModelError):
    def __init__(self, company: CompanyRecord):
        super().__init__(f"Company not found: {company.name}")
        self.company = company


class ModelManager:
    """In-memory address book plus the view the user currently sees.

    Not thread-safe: callers run one command to completion before the next.
    """

    def __init__(self, companies: Optional[Iterable[CompanyRecord]] = None):
        self._companies: List[CompanyRecord] = []
        self._predicate: CompanyPredicate = SHOW_ALL_COMPANIES
        self._current_viewed: Optional[CompanyRecord] = None
        for company in companies or []:
            self.add_company(company)

    # --- Address book ---
    def get_company_list(self) -> Tuple[CompanyRecord, ...]:
        return tuple(self._companies)

    def has_company(self, company: CompanyRecord) -> bool:
        """True if a company with the same identity is already stored."""
        return any(c.is_same_company(company) for c in self._companies)

    def add_company(self, company: CompanyRecord) -> None:
        if self.has_company(company):
            raise DuplicateCompanyError(company)
        self._companies.append(company)

    def delete_company(self, company: CompanyRecord) -> None:
        try:
            self._companies.remove(company)
        except ValueError:
            raise CompanyNotFoundError(company) from None
        if self._current_viewed == company:
            self._current_viewed = None

    def set_company(self, target: CompanyRecord, edited: CompanyRecord) -> None:
        """Replace ``target`` with ``edited`` in place, keeping its position."""
        try:
            position = self._companies.index(target)
        except ValueError:
            raise CompanyNotFoundError(target) from None
        if not target.is_same_company(edited) and self.has_company(edited):
            raise DuplicateCompanyError(edited)
        self._companies[position] = edited
        if self._current_viewed == target:
            self._current_viewed = edited

    def clear(self) -> None:
        self._companies = []
        self._current_viewed = None

    # --- Filtered view ---
    @property
    def current_predicate(self) -> CompanyPredicate:
        return self._predicate

    def get_filtered_company_list(self) -> Tuple[CompanyRecord, ...]:
        return tuple(c for c in self._companies if self._predicate(c))

    def update_filtered_company_list(self, predicate: CompanyPredicate) -> None:
        self._predicate = predicate
        logger.debug("Filter updated to %s", predicate)

    # --- Currently viewed ---
    @property
    def current_viewed_company(self) -> Optional[CompanyRecord]:
        return self._current_viewed

    def set_current_viewed_company(self, company: Optional[CompanyRecord]) -> None:
        self._current_viewed = company
