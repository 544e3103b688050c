"""Todo data model for Project Hub."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from .errors import EmptyTitleError
from .urgency import Urgency, classify_urgency, is_overdue
from .utils.datetime import now_local, parse_iso, to_iso_string


class TodoPriority(Enum):
    """Task priority levels."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"

    @property
    def rank(self) -> int:
        """Sort rank, most pressing first."""
        return _PRIORITY_RANK[self]


_PRIORITY_RANK = {
    TodoPriority.URGENT: 0,
    TodoPriority.HIGH: 1,
    TodoPriority.MEDIUM: 2,
    TodoPriority.LOW: 3,
}


@dataclass
class Todo:
    """A single todo row.

    ``due_date`` is kept as the ISO-8601 string that crosses the storage
    boundary; use :attr:`due_datetime` for a resolved value.
    """

    id: int
    title: str
    description: str = ""

    due_date: Optional[str] = None
    priority: TodoPriority = TodoPriority.MEDIUM

    is_completed: bool = False
    completed_at: Optional[str] = None

    recurrence_rule: Optional[str] = None
    parent_id: Optional[int] = None
    position: int = 0
    project_ids: List[str] = field(default_factory=list)

    created_at: str = field(default_factory=lambda: to_iso_string(now_local()))
    updated_at: str = field(default_factory=lambda: to_iso_string(now_local()))

    def __post_init__(self):
        self.title = self.title.strip()
        if not self.title:
            raise EmptyTitleError()

        if isinstance(self.priority, str):
            self.priority = TodoPriority(self.priority)

    def _touch(self, now: Optional[datetime] = None):
        self.updated_at = to_iso_string(now or now_local())

    @property
    def due_datetime(self) -> Optional[datetime]:
        """Stored due date as a local datetime, None if absent or unreadable."""
        return parse_iso(self.due_date)

    def set_due_date(self, due: Optional[datetime]):
        """Store a confirmed due date (None clears it)."""
        self.due_date = to_iso_string(due)
        self._touch()

    def clear_due_date(self):
        """Remove the due date."""
        self.set_due_date(None)

    def complete(self, now: Optional[datetime] = None):
        """Mark the todo as completed."""
        now = now or now_local()
        self.is_completed = True
        self.completed_at = to_iso_string(now)
        self._touch(now)

    def reopen(self):
        """Reopen a completed todo."""
        self.is_completed = False
        self.completed_at = None
        self._touch()

    def toggle(self, is_completed: bool, now: Optional[datetime] = None):
        """Set completion state the way the list checkbox does."""
        if is_completed:
            self.complete(now)
        else:
            self.reopen()

    def urgency(self, now: Optional[datetime] = None) -> Urgency:
        """Urgency tier of this todo's due date right now."""
        return classify_urgency(self.due_date, now)

    def is_overdue(self, now: Optional[datetime] = None) -> bool:
        """Check if the todo is open and past due."""
        if self.is_completed:
            return False
        return is_overdue(self.due_date, now)

    def completed_on(self, day: datetime) -> bool:
        """True when the todo was completed on ``day``'s calendar date."""
        completed = parse_iso(self.completed_at)
        return completed is not None and completed.date() == day.date()

    def to_dict(self) -> Dict[str, Any]:
        """Convert the Todo to a plain dictionary."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "due_date": self.due_date,
            "priority": self.priority.value,
            "is_completed": self.is_completed,
            "completed_at": self.completed_at,
            "recurrence_rule": self.recurrence_rule,
            "parent_id": self.parent_id,
            "position": self.position,
            "project_ids": list(self.project_ids),
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Todo":
        """Create a Todo from a dictionary."""
        def as_iso(value: Any) -> Optional[str]:
            # Hand-edited YAML may hold real timestamps instead of strings
            if isinstance(value, datetime):
                return to_iso_string(value)
            return value

        kwargs = dict(
            id=data.get("id", 0),
            title=data.get("title", ""),
            description=data.get("description") or "",
            due_date=as_iso(data.get("due_date")),
            priority=TodoPriority(data.get("priority", "medium")),
            is_completed=data.get("is_completed", False),
            completed_at=as_iso(data.get("completed_at")),
            recurrence_rule=data.get("recurrence_rule"),
            parent_id=data.get("parent_id"),
            position=data.get("position", 0),
            project_ids=list(data.get("project_ids") or []),
        )
        for stamp in ("created_at", "updated_at"):
            if data.get(stamp):
                kwargs[stamp] = as_iso(data[stamp])
        return cls(**kwargs)
