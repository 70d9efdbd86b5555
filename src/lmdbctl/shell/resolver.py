"""Command resolution — verb lookup and positional arity checks.

Resolution is purely syntactic: it never touches the store.  The table
below is the single source of truth for which verbs exist and how many
positional arguments each one needs.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from lmdbctl.shell.errors import EmptyCommand, InsufficientArguments, UnknownCommand

# verb -> minimum number of positional arguments
REQUIRED_ARGS: dict[str, int] = {
    "scan": 0,
    "keys": 0,
    "stat": 0,
    "expand": 0,
    "exists": 1,
    "get": 1,
    "del": 1,
    "put": 2,
    "exit": 0,
    "quit": 0,
    "it": 0,
}

CONTINUE_VERB = "it"
JSON_FLAG = "json"


@dataclass(frozen=True)
class Command:
    """A validated console command, consumed by exactly one handler."""

    verb: str
    key: bytes | None = None
    value: bytes | None = None
    flags: frozenset[str] = field(default_factory=frozenset)

    @property
    def json_print(self) -> bool:
        return JSON_FLAG in self.flags


def resolve_command(args: list[bytes]) -> Command:
    """Build a :class:`Command` from tokenizer output.

    The key is ``args[1]`` and the value ``args[2]`` (only for verbs that
    need two positionals).  Zero-length tokens do not count toward arity,
    so ``put k ""`` is missing its value.  Tokens after the consumed
    positionals are scanned for the ``json`` flag.

    Raises:
        EmptyCommand: No tokens at all.
        UnknownCommand: The verb is not in :data:`REQUIRED_ARGS`.
        InsufficientArguments: Fewer non-empty positionals than required.
    """
    if not args:
        raise EmptyCommand

    verb = args[0].decode("utf-8", errors="replace")
    minimum = REQUIRED_ARGS.get(verb)
    if minimum is None:
        raise UnknownCommand

    num_args = 0
    key: bytes | None = None
    value: bytes | None = None
    if len(args) >= 2 and args[1]:
        key = args[1]
        num_args += 1
    if minimum > 1 and len(args) >= 3 and args[2]:
        value = args[2]
        num_args += 1
    if num_args < minimum:
        raise InsufficientArguments

    flags = {JSON_FLAG for extra in args[num_args + 1 :] if extra == JSON_FLAG.encode()}
    return Command(verb=verb, key=key, value=value, flags=frozenset(flags))
