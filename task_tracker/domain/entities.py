"""
Domain entities for the task tracker.
"""

from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional

DEFAULT_TASK_STATUS = "pending"


def utc_now_iso() -> str:
    """Current UTC time as fixed-width ISO-8601 text (lexical order == time order)."""
    return datetime.now(timezone.utc).isoformat(timespec="microseconds")


class MutationOutcome(str, Enum):
    """Result of an update or delete that did not fail."""

    UPDATED = "updated"
    DELETED = "deleted"
    NOT_FOUND = "not_found"

    @property
    def found(self) -> bool:
        return self is not MutationOutcome.NOT_FOUND


@dataclass
class Task:
    """Task entity."""

    id: int
    title: str
    description: Optional[str] = None
    # Free text; "pending" is only the creation default.
    status: str = DEFAULT_TASK_STATUS
    created_at: str = ""
    updated_at: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
