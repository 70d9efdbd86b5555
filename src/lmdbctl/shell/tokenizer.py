"""Line tokenizer for console input.

Arguments are separated by whitespace runs, or enclosed in quotes
(double, single or backtick).  Inside a quoted region whitespace is kept and a
backslash escapes the following byte.  Tokenizing never fails: an
unterminated quoted region at end of input is dropped.

By default *any* quote byte closes a region, whichever one opened it
(``'a"`` is the token ``a``).  Pass ``matching_quotes=True`` to close a
region only with the quote that opened it.
"""

from __future__ import annotations

from enum import StrEnum

QUOTES = frozenset(b"\"'`")
WHITESPACE = frozenset(b" \t\n\v\f\r")
ESCAPE = ord("\\")


class _State(StrEnum):
    NONE = "none"
    WORD = "word"
    QUOTE = "quote"
    ESCAPED = "escaped"


def parse_input(line: bytes, *, matching_quotes: bool = False) -> list[bytes]:
    """Split a raw console line into argument tokens.

    Args:
        line: Raw bytes as read from the input stream (trailing newline
            optional).
        matching_quotes: Only the opening quote byte closes a quoted region.

    Returns:
        Tokens in input order.  Empty input yields an empty list.

    Examples:
        >>> parse_input(b'put "a b" c')
        [b'put', b'a b', b'c']
        >>> parse_input(b"put 'a\\\\'b' c")
        [b'put', b"a'b", b'c']
    """
    tokens: list[bytes] = []
    arg = bytearray()
    state = _State.NONE
    opener: int | None = None

    for b in line:
        if state is _State.NONE:
            if b in QUOTES:
                opener = b
                state = _State.QUOTE
            elif b not in WHITESPACE:
                arg.append(b)
                state = _State.WORD
        elif state is _State.ESCAPED:
            arg.append(b)
            state = _State.QUOTE
        elif state is _State.WORD:
            if b in WHITESPACE:
                tokens.append(bytes(arg))
                arg.clear()
                state = _State.NONE
            else:
                arg.append(b)
        elif state is _State.QUOTE:
            if b == ESCAPE:
                state = _State.ESCAPED
            elif b in QUOTES and (not matching_quotes or b == opener):
                tokens.append(bytes(arg))
                arg.clear()
                state = _State.NONE
            else:
                arg.append(b)

    # A bare word may run to end of input; an open quote may not.
    if state is _State.WORD:
        tokens.append(bytes(arg))
    return tokens
