"""Reference token classification and command text splitting.

A reference token is the raw leading argument of a context-bearing
command. It is classified into exactly one of three kinds, in
precedence order:

1. a bare unsigned 64-bit account id (``1234567890123``)
2. a mention wrapping an account id (``<@1234567890123>`` or ``<@!…>``)
3. a short handle (anything else)
"""

from __future__ import annotations

import re
from enum import StrEnum

MAX_ACCOUNT_ID = 2**64 - 1

_DIGITS = re.compile(r"[0-9]+")
_MENTION = re.compile(r"<@!?([0-9]+)>")
_TOKEN = re.compile(r"\S+")


class ReferenceKind(StrEnum):
    """How a reference token was interpreted."""

    ACCOUNT_ID = "account_id"
    MENTION = "mention"
    HANDLE = "handle"


def parse_account_id(token: str) -> int | None:
    """Parse *token* as an unsigned 64-bit integer, or return None."""
    if not _DIGITS.fullmatch(token):
        return None
    value = int(token)
    if value > MAX_ACCOUNT_ID:
        return None
    return value


def parse_mention(token: str) -> int | None:
    """Extract the account id from ``<@ID>`` / ``<@!ID>``, or return None."""
    match = _MENTION.fullmatch(token)
    if match is None:
        return None
    return parse_account_id(match.group(1))


def classify_reference(token: str) -> ReferenceKind:
    """Classify *token*; the first matching kind wins."""
    if parse_account_id(token) is not None:
        return ReferenceKind.ACCOUNT_ID
    if parse_mention(token) is not None:
        return ReferenceKind.MENTION
    return ReferenceKind.HANDLE


def normalize_handle(handle: str) -> str:
    """Handles are stored and compared lowercase."""
    return handle.strip().lower()


def split_leading(text: str, count: int) -> tuple[list[str], str]:
    """Split off up to *count* whitespace-delimited tokens.

    Returns the tokens and the untouched remainder (leading whitespace
    stripped). Fewer than *count* tokens are returned when the text runs
    out.

    Examples:
        >>> split_leading("system abcd  member list", 2)
        (['system', 'abcd'], 'member list')
        >>> split_leading("system", 2)
        (['system'], '')
    """
    tokens: list[str] = []
    pos = 0
    for match in _TOKEN.finditer(text):
        if len(tokens) == count:
            break
        tokens.append(match.group(0))
        pos = match.end()
    return tokens, text[pos:].lstrip()


def tokenize(text: str) -> list[str]:
    """All whitespace-delimited tokens of *text*."""
    return _TOKEN.findall(text)
