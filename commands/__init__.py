from .base import Command, CommandError, CommandResult
from .add_company import AddCommand
from .clear_companies import ClearCommand
from .delete_company import DeleteCommand
from .edit_company import EditCommand
from .help import HelpCommand
from .list_companies import FindCommand, ListCommand
from .runner import run_command
from .view_company import ViewCommand

__all__ = [
    "Command",
    "CommandError",
    "CommandResult",
    "AddCommand",
    "ClearCommand",
    "DeleteCommand",
    "EditCommand",
    "FindCommand",
    "HelpCommand",
    "ListCommand",
    "ViewCommand",
    "run_command",
]
