from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ports.model import CompanyModelPort


class CommandError(Exception):
    """A command could not be carried out; the message is shown to the user."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class CommandResult:
    feedback: str
    show_help: bool = False
    exit: bool = False


class Command:
    command_word: str = ""

    def execute(self, model: CompanyModelPort) -> CommandResult:
        raise NotImplementedError

    def describe_args(self) -> Optional[dict]:
        """Arguments recorded in the command trace; None when there are none."""
        return None
