from __future__ import annotations

import logging

from commands.base import Command, CommandError, CommandResult
from ports.model import CompanyModelPort
from utils.command_log import log_command
from utils.logging_setup import init_logging


logger = logging.getLogger(__name__)


def run_command(command: Command, model: CompanyModelPort) -> CommandResult:
    """Execute one command to completion, logging the outcome.

    CommandError propagates to the caller after it has been logged.
    """
    init_logging()
    word = command.command_word
    try:
        result = command.execute(model)
    except CommandError as exc:
        logger.info("Command rejected", extra={"command": word, "status": "error", "error": exc.message})
        log_command(command=word, status="error", message=exc.message, extras=command.describe_args())
        raise
    logger.info("Command executed", extra={"command": word, "status": "ok"})
    log_command(command=word, status="ok", message=result.feedback, extras=command.describe_args())
    return result
