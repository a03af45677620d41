from __future__ import annotations

from dataclasses import dataclass

from commands.base import Command, CommandResult
from ports.model import CompanyModelPort


SHOWING_HELP_MESSAGE = "Opened help window."


@dataclass
class HelpCommand(Command):
    command_word = "help"

    def execute(self, model: CompanyModelPort) -> CommandResult:
        return CommandResult(SHOWING_HELP_MESSAGE, show_help=True)
