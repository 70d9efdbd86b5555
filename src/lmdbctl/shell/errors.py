"""ShellError hierarchy — failures raised while resolving or executing a command.

Every error carries a stable ``code`` (mirrored into :class:`ServiceError`)
and a human message.  None of them are fatal: the REPL reports the message
and keeps reading input.
"""

from __future__ import annotations


class ShellError(Exception):
    """Base class for recoverable console errors."""

    code = "SHELL_ERROR"
    default_message = "command failed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


# --- Resolution errors (never touch the store) ---


class EmptyCommand(ShellError):
    code = "EMPTY_COMMAND"
    default_message = "empty command"


class UnknownCommand(ShellError):
    code = "UNKNOWN_COMMAND"
    default_message = "invalid command"


class InsufficientArguments(ShellError):
    code = "INSUFFICIENT_ARGUMENTS"
    default_message = "not enough arguments"


class InvalidArgument(ShellError):
    code = "INVALID_ARGUMENT"
    default_message = "invalid argument"


# --- Execution errors ---


class NotFound(ShellError):
    code = "NOT_FOUND"
    default_message = "key not found"


class MalformedValue(ShellError):
    code = "MALFORMED_VALUE"
    default_message = "value is not valid JSON"


class StoreError(ShellError):
    """Any other failure reported by LMDB (transaction, cursor, environment)."""

    code = "STORE_ERROR"
    default_message = "store error"
