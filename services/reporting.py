from __future__ import annotations

from typing import Optional, Sequence

from models.company_record import CompanyRecord
from models.fields import format_deadline


def format_company_row(position: int, company: CompanyRecord) -> str:
    tags = " ".join(f"[{t}]" for t in sorted(company.tags))
    row = (
        f"{position:>3}. {company.name} | {company.role} | {company.status.value} "
        f"| due {format_deadline(company.deadline)}"
    )
    return f"{row} {tags}" if tags else row


def print_company_list(companies: Sequence[CompanyRecord]) -> None:
    """Print the displayed list with the one-based indexes commands expect."""
    if not companies:
        print("(no companies to show)")
        return
    for i, company in enumerate(companies, start=1):
        print(format_company_row(i, company))


def print_viewed_company(company: Optional[CompanyRecord]) -> None:
    if company is None:
        return
    print("-" * 60)
    print(company.describe())
    print("-" * 60)
