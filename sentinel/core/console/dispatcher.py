import logging
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Awaitable, Callable, Dict, Optional

from sentinel.core.console import formatter
from sentinel.core.console.errors import (
    BackendError,
    CommandError,
    CriticalError,
    NotFoundError,
    UserInputError,
)
from sentinel.core.console.gateway import LogGateway, describe_backend_error
from sentinel.core.console.parser import ParsedCommand, Verb
from sentinel.core.runtime import RuntimeState

logger = logging.getLogger("sentinel.console")

# logs.id is a 32-bit INTEGER column
MIN_LOG_ID = -(2**31)
MAX_LOG_ID = 2**31 - 1
LOG_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def parse_log_id(argument: str) -> int:
    """Base-10 id that fits the id column, or UserInputError."""
    if not LOG_ID_PATTERN.fullmatch(argument):
        raise UserInputError("invalid ID format. Usage: delete <id>")

    log_id = int(argument)
    if not MIN_LOG_ID <= log_id <= MAX_LOG_ID:
        raise UserInputError("invalid ID format. Usage: delete <id>")
    return log_id


@dataclass(frozen=True)
class CommandResult:
    output: Optional[str] = None
    error: Optional[CommandError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


Handler = Callable[[str], Awaitable[str]]


class CommandDispatcher:
    """Runs one parsed console command against the log storage."""

    def __init__(
        self,
        gateway: LogGateway,
        runtime: RuntimeState,
        *,
        platform: str,
        port: int,
        view_limit: int = 20,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.gateway = gateway
        self.runtime = runtime
        self.platform = platform
        self.port = port
        self.view_limit = view_limit
        self.clock = clock

        self._handlers: Dict[Verb, Handler] = {
            Verb.INSERT: self.handle_insert,
            Verb.VIEW: self.handle_view,
            Verb.DELETE: self.handle_delete,
            Verb.STATUS: self.handle_status,
            Verb.HELP: self.handle_help,
        }

    async def dispatch(self, command: ParsedCommand) -> CommandResult:
        handler = self._handlers.get(command.verb, self.handle_unknown)
        try:
            output = await handler(command.argument)
        except (UserInputError, NotFoundError) as error:
            return CommandResult(error=error)
        except BackendError as error:
            return CommandResult(error=CriticalError(error.message))
        except Exception as error:
            logger.error(f"Command '{command.verb.value}' failed unexpectedly: {error}")
            return CommandResult(error=CriticalError(describe_backend_error(error)))

        return CommandResult(output=output)

    # =========================
    # Handlers
    # =========================
    async def handle_insert(self, argument: str) -> str:
        if not argument:
            raise UserInputError("no text provided for insert. Usage: insert <text>")

        new_log = await self.gateway.insert_log(argument)
        logger.info(f"Inserted log {new_log.id}")
        return formatter.format_inserted(new_log)

    async def handle_view(self, argument: str) -> str:
        logs = await self.gateway.list_recent_logs(self.view_limit)
        if not logs:
            return formatter.EMPTY_LOGS_MESSAGE
        return formatter.format_log_listing(logs)

    async def handle_delete(self, argument: str) -> str:
        log_id = parse_log_id(argument)

        deleted = await self.gateway.delete_log(log_id)
        if deleted is None:
            raise NotFoundError(f"Log {log_id} not found")

        logger.info(f"Deleted log {log_id}")
        return formatter.format_deleted(deleted.id)

    async def handle_status(self, argument: str) -> str:
        uptime = formatter.format_uptime(self.clock() - self.runtime.started_at)

        # A failed probe is reported, not raised
        try:
            await self.gateway.ping()
            database = formatter.CONNECTED
        except Exception as error:
            logger.warning(f"Database probe failed during status: {error}")
            database = formatter.DISCONNECTED

        return formatter.format_status(uptime, self.platform, database, self.port)

    async def handle_help(self, argument: str) -> str:
        return formatter.format_help(self.view_limit)

    async def handle_unknown(self, argument: str) -> str:
        raise UserInputError(
            f"unknown command '{argument}'. Type 'help' to see available commands."
        )
