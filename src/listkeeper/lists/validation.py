"""Name validation for lists and todos.

Each check returns a user-facing error message, or None when the name is
acceptable. Callers trim names with strip_name() first.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from listkeeper.lists.types import TodoList

MIN_NAME_LENGTH = 1
MAX_NAME_LENGTH = 100

# Letters, digits, and ! . , ? plus the space character.
_DISALLOWED_CHARS = re.compile(r"[^A-Za-z0-9!.,? ]")

# ASCII whitespace and NUL only; NBSP and other Unicode spaces are kept so the
# charset check rejects them.
_STRIP_CHARS = " \t\n\v\f\r\0"


def strip_name(name: str) -> str:
    return name.strip(_STRIP_CHARS)


def _valid_length(name: str) -> bool:
    return MIN_NAME_LENGTH <= len(name) <= MAX_NAME_LENGTH


def has_disallowed_chars(name: str) -> bool:
    return _DISALLOWED_CHARS.search(name) is not None


def error_for_list_name(
    name: str,
    lists: Iterable[TodoList],
    exclude_id: int | None = None,
) -> str | None:
    """Validate a list name against length, charset, and uniqueness rules.

    Args:
        name: Candidate list name (already stripped).
        lists: Existing lists in the session.
        exclude_id: Id of a list being renamed; its own name does not count
            as a duplicate.

    Returns:
        Error message, or None if the name is valid.
    """
    if not _valid_length(name):
        return "List name must be between 1 and 100 characters."
    if has_disallowed_chars(name):
        return "List name may only contain letters, numbers, and common punctuation."
    if any(lst.name == name and lst.id != exclude_id for lst in lists):
        return "List name must be unique."
    return None


def error_for_todo(name: str) -> str | None:
    """Validate a todo name against length and charset rules."""
    if not _valid_length(name):
        return "Todo must be between 1 and 100 characters."
    if has_disallowed_chars(name):
        return "Todo name may only contain letters, numbers, and common punctuation."
    return None
