from .fields import ApplicationStatus
from .company_record import CompanyRecord
from .edit_descriptor import EditCompanyDescriptor
from .index import Index
from .predicates import NameContainsKeywords, ShowAllCompanies, SHOW_ALL_COMPANIES

__all__ = [
    "ApplicationStatus",
    "CompanyRecord",
    "EditCompanyDescriptor",
    "Index",
    "NameContainsKeywords",
    "ShowAllCompanies",
    "SHOW_ALL_COMPANIES",
]
