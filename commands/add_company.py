from __future__ import annotations

from dataclasses import dataclass

from commands.base import Command, CommandError, CommandResult
from commands.messages import MESSAGE_DUPLICATE_COMPANY, company_name
from models.company_record import CompanyRecord
from ports.model import CompanyModelPort


MESSAGE_ADD_SUCCESS = "New company added: %s"


@dataclass
class AddCommand(Command):
    company: CompanyRecord

    command_word = "add"

    def execute(self, model: CompanyModelPort) -> CommandResult:
        if model.has_company(self.company):
            raise CommandError(MESSAGE_DUPLICATE_COMPANY)
        model.add_company(self.company)
        model.set_current_viewed_company(self.company)
        return CommandResult(MESSAGE_ADD_SUCCESS % company_name(self.company))

    def describe_args(self):
        return {"name": self.company.name}
