from enum import Enum

from pydantic import BaseModel, ConfigDict


class Verb(str, Enum):
    INSERT = "insert"
    VIEW = "view"
    DELETE = "delete"
    STATUS = "status"
    HELP = "help"
    UNKNOWN = "unknown"


class ParsedCommand(BaseModel):
    verb: Verb
    argument: str = ""

    model_config = ConfigDict(frozen=True)


INSERT_PREFIX = "insert "
DELETE_PREFIX = "delete "


def parse(raw_text: str) -> ParsedCommand:
    """
    Turn console input into a verb and its argument.

    Verbs are matched case-insensitively, but the insert body keeps the
    casing it was typed with. Anything unrecognised (including empty
    input) comes back as UNKNOWN carrying the lowercased text, so this
    never raises.
    """
    trimmed = (raw_text or "").strip()
    lowered = trimmed.lower()

    if not trimmed:
        return ParsedCommand(verb=Verb.UNKNOWN)

    if lowered.startswith(INSERT_PREFIX):
        return ParsedCommand(
            verb=Verb.INSERT, argument=trimmed[len(INSERT_PREFIX):].strip()
        )
    if lowered == "view":
        return ParsedCommand(verb=Verb.VIEW)
    if lowered.startswith(DELETE_PREFIX):
        return ParsedCommand(
            verb=Verb.DELETE, argument=trimmed[len(DELETE_PREFIX):].strip()
        )
    if lowered == "status":
        return ParsedCommand(verb=Verb.STATUS)
    if lowered == "help":
        return ParsedCommand(verb=Verb.HELP)

    # Bare "insert" / "delete": let the handler report its usage error
    if lowered in (Verb.INSERT.value, Verb.DELETE.value):
        return ParsedCommand(verb=Verb(lowered))

    return ParsedCommand(verb=Verb.UNKNOWN, argument=lowered)
