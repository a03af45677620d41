from __future__ import annotations

from typing import Optional, Protocol, Sequence

from models.company_record import CompanyRecord
from models.predicates import CompanyPredicate


class CompanyModelPort(Protocol):
    def get_filtered_company_list(self) -> Sequence[CompanyRecord]:
        ...

    def has_company(self, company: CompanyRecord) -> bool:
        ...

    def add_company(self, company: CompanyRecord) -> None:
        ...

    def delete_company(self, company: CompanyRecord) -> None:
        ...

    def set_company(self, target: CompanyRecord, edited: CompanyRecord) -> None:
        ...

    def update_filtered_company_list(self, predicate: CompanyPredicate) -> None:
        ...

    def set_current_viewed_company(self, company: Optional[CompanyRecord]) -> None:
        ...

    def clear(self) -> None:
        ...
