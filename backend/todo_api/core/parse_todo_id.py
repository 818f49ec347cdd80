"""Todo Id Parsing — turns a raw path segment into a TodoId.

Invariants:
    - Accepts ASCII digits with an optional leading '+', nothing else
    - Result is always within 1..MAX_TODO_ID
    - Raises MalformedInputError, never ValueError

Design Decisions:
    - Regex over bare int(): int() also accepts whitespace, underscores and
      non-ASCII digits, none of which belong in a URL id
"""

import re

from todo_api.core.domain_types import MAX_TODO_ID, TodoId
from todo_api.core.errors import MalformedInputError

_ID_PATTERN = re.compile(r"\+?[0-9]+")


def parse_todo_id(raw: str) -> TodoId:
    """Parse a path id, raising MalformedInputError when it is not a positive integer."""
    if not _ID_PATTERN.fullmatch(raw):
        raise MalformedInputError(f"Invalid todo id '{raw}'", field="id")
    value = int(raw)
    if not 1 <= value <= MAX_TODO_ID:
        raise MalformedInputError(f"Todo id out of range: {value}", field="id")
    return TodoId(value)
