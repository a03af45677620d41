from __future__ import annotations

from dataclasses import dataclass

from commands.base import Command, CommandResult
from commands.messages import MESSAGE_COMPANIES_LISTED_OVERVIEW
from models.predicates import SHOW_ALL_COMPANIES, NameContainsKeywords
from ports.model import CompanyModelPort


MESSAGE_LIST_SUCCESS = "Listed all companies"


@dataclass
class ListCommand(Command):
    command_word = "list"

    def execute(self, model: CompanyModelPort) -> CommandResult:
        model.update_filtered_company_list(SHOW_ALL_COMPANIES)
        return CommandResult(MESSAGE_LIST_SUCCESS)


@dataclass
class FindCommand(Command):
    """Shows companies whose name contains any of the keywords."""

    predicate: NameContainsKeywords

    command_word = "find"

    def execute(self, model: CompanyModelPort) -> CommandResult:
        model.update_filtered_company_list(self.predicate)
        return CommandResult(MESSAGE_COMPANIES_LISTED_OVERVIEW % len(model.get_filtered_company_list()))

    def describe_args(self):
        return {"keywords": list(self.predicate.keywords)}
