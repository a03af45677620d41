from __future__ import annotations

from dataclasses import dataclass

from commands.base import Command, CommandResult
from models.predicates import SHOW_ALL_COMPANIES
from ports.model import CompanyModelPort


MESSAGE_CLEAR_SUCCESS = "Address book has been cleared!"


@dataclass
class ClearCommand(Command):
    command_word = "clear"

    def execute(self, model: CompanyModelPort) -> CommandResult:
        model.clear()
        model.update_filtered_company_list(SHOW_ALL_COMPANIES)
        return CommandResult(MESSAGE_CLEAR_SUCCESS)
