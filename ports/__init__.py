from .model import CompanyModelPort

__all__ = [
    "CompanyModelPort",
]
