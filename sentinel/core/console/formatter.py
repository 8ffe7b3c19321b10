from datetime import timedelta
from typing import Iterable

from sentinel.core.console.errors import (
    CommandError,
    NotFoundError,
    UserInputError,
)

CONNECTED = "CONNECTED"
DISCONNECTED = "DISCONNECTED"

EMPTY_LOGS_MESSAGE = "Log table is empty. Use 'insert <text>' to add one."


# =========================
# Logs
# =========================
def format_log_line(record) -> str:
    return f"[{record.id}] {record.created_at.isoformat()} → {record.content}"


def format_log_listing(records: Iterable) -> str:
    # Order is whatever the dispatcher hands over
    return "\n".join(format_log_line(record) for record in records)


def format_inserted(record) -> str:
    return f"Log saved successfully (ID: {record.id})"


def format_deleted(log_id: int) -> str:
    return f"Log {log_id} deleted successfully"


# =========================
# Status
# =========================
def format_uptime(elapsed: timedelta) -> str:
    total_seconds = max(int(elapsed.total_seconds()), 0)
    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours}h {minutes}m {seconds}s"


def format_status(uptime: str, platform: str, database: str, port: int) -> str:
    return "\n".join(
        [
            "=== SYSTEM STATUS ===",
            f"Uptime:   {uptime}",
            f"Platform: {platform}",
            f"Database: {database}",
            f"Port:     {port}",
        ]
    )


# =========================
# Help
# =========================
def format_help(view_limit: int) -> str:
    return "\n".join(
        [
            "Available commands:",
            "  insert <text>  - Save a new log entry",
            f"  view           - Show the {view_limit} most recent logs",
            "  delete <id>    - Delete a log by its ID",
            "  status         - Show server uptime and database connectivity",
            "  help           - Show this message",
        ]
    )


# =========================
# Errors
# =========================
def format_error(error: CommandError) -> str:
    if isinstance(error, NotFoundError):
        return error.message
    if isinstance(error, UserInputError):
        return f"Error: {error.message}"
    # CriticalError, or a BackendError that reached here unwrapped
    return f"CRITICAL ERROR: {error.message}"
