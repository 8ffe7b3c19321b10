import logging

from sqlalchemy.ext.asyncio import AsyncSession

from sentinel.core.config import settings
from sentinel.core.console import formatter
from sentinel.core.console.dispatcher import CommandDispatcher, CommandResult
from sentinel.core.console.errors import CriticalError
from sentinel.core.console.gateway import LogGateway, describe_backend_error
from sentinel.core.console.parser import parse
from sentinel.core.runtime import RuntimeState

logger = logging.getLogger("sentinel.console")


def render_result(result: CommandResult) -> str:
    if result.ok:
        return result.output or ""
    return formatter.format_error(result.error)


class CommandConsole:
    """
    Text command interpreter for the logs table.

    execute_command always returns text: parse errors, missing records and
    storage failures all come back as messages.
    """

    def __init__(self, dispatcher: CommandDispatcher):
        self.dispatcher = dispatcher

    async def execute_command(self, raw_text: str) -> str:
        try:
            command = parse(raw_text)
            result = await self.dispatcher.dispatch(command)
            return render_result(result)
        except Exception as error:
            logger.error(f"Console failed to handle {raw_text!r}: {error}")
            return formatter.format_error(CriticalError(describe_backend_error(error)))


def build_console(db: AsyncSession, runtime: RuntimeState) -> CommandConsole:
    dispatcher = CommandDispatcher(
        LogGateway(db),
        runtime,
        platform=settings.PLATFORM_LABEL,
        port=settings.PORT,
        view_limit=settings.CONSOLE_VIEW_LIMIT,
    )
    return CommandConsole(dispatcher)
