from __future__ import annotations

from models.company_record import CompanyRecord


MESSAGE_INVALID_COMPANY_DISPLAYED_INDEX = "The company index provided is invalid"
MESSAGE_COMPANIES_LISTED_OVERVIEW = "%d companies listed!"
MESSAGE_DUPLICATE_COMPANY = "This company already exists in the address book."
MESSAGE_NOT_EDITED = "At least one field to edit must be provided."


def company_name(company: CompanyRecord) -> str:
    return company.display_name
