from __future__ import annotations

from dataclasses import dataclass

from commands.base import Command, CommandError, CommandResult
from commands.messages import MESSAGE_INVALID_COMPANY_DISPLAYED_INDEX, company_name
from models.index import Index
from ports.model import CompanyModelPort


MESSAGE_VIEW_SUCCESS = "Viewing %s"


@dataclass
class ViewCommand(Command):
    index: Index

    command_word = "view"

    def execute(self, model: CompanyModelPort) -> CommandResult:
        last_shown = model.get_filtered_company_list()
        if self.index.zero_based >= len(last_shown):
            raise CommandError(MESSAGE_INVALID_COMPANY_DISPLAYED_INDEX)
        company = last_shown[self.index.zero_based]
        model.set_current_viewed_company(company)
        return CommandResult(MESSAGE_VIEW_SUCCESS % company_name(company))

    def describe_args(self):
        return {"index": self.index.one_based}
