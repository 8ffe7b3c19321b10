"""Failures a console command can end in.

All of them are rendered as text by the formatter; none is allowed to
escape ``CommandConsole.execute_command``.
"""


class CommandError(Exception):
    """Base class for every console failure."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UserInputError(CommandError):
    """Malformed or incomplete command text."""


class NotFoundError(CommandError):
    """Well-formed command that points at a record which does not exist."""


class BackendError(CommandError):
    """The storage gateway failed (connectivity, timeout, constraint)."""


class CriticalError(CommandError):
    """Unexpected failure caught at the dispatcher boundary."""
