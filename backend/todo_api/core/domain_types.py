"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - TodoId wraps the integer primary key, always in 1..MAX_TODO_ID
    - Known status values encoded as an Enum; the store itself accepts any string

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum: serializes to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

TodoId = NewType("TodoId", int)

# todos.id is a 32-bit INTEGER column
MAX_TODO_ID = 2**31 - 1


# ─── Enums ───────────────────────────────────────────────────────

class TodoStatus(str, Enum):
    """Workflow states a Todo is expected to move through."""
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    DONE = "done"


def is_known_status(value: str) -> bool:
    """True when value is one of the TodoStatus values."""
    return value in {s.value for s in TodoStatus}
