from __future__ import annotations

from dataclasses import dataclass

from commands.base import Command, CommandError, CommandResult
from commands.messages import MESSAGE_INVALID_COMPANY_DISPLAYED_INDEX, company_name
from models.index import Index
from ports.model import CompanyModelPort


MESSAGE_DELETE_COMPANY_SUCCESS = "Deleted company: %s"


@dataclass
class DeleteCommand(Command):
    index: Index

    command_word = "delete"

    def execute(self, model: CompanyModelPort) -> CommandResult:
        last_shown = model.get_filtered_company_list()
        if self.index.zero_based >= len(last_shown):
            raise CommandError(MESSAGE_INVALID_COMPANY_DISPLAYED_INDEX)
        to_delete = last_shown[self.index.zero_based]
        model.delete_company(to_delete)
        return CommandResult(MESSAGE_DELETE_COMPANY_SUCCESS % company_name(to_delete))

    def describe_args(self):
        return {"index": self.index.one_based}
