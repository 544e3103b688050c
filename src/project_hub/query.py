"""Filtering, sorting and summaries over todo lists."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

from fuzzywuzzy import fuzz, process

from .todo import Todo, TodoPriority
from .urgency import Urgency
from .utils.datetime import now_local


class StatusFilter(Enum):
    """Tabs shown above the todo list."""
    ALL = "all"
    PENDING = "pending"
    COMPLETED = "completed"
    OVERDUE = "overdue"


class SortKey(Enum):
    """Available list orderings."""
    DUE_DATE = "due_date"
    PRIORITY = "priority"
    CREATED = "created"


@dataclass
class TodoStats:
    """Counters for the summary cards."""
    pending: int = 0
    overdue: int = 0
    completed_today: int = 0


def matches_filter(todo: Todo, status: StatusFilter = StatusFilter.ALL,
                   priority: Optional[TodoPriority] = None,
                   now: Optional[datetime] = None) -> bool:
    """Check a single todo against the status tab and priority filter."""
    if status == StatusFilter.PENDING and todo.is_completed:
        return False
    if status == StatusFilter.COMPLETED and not todo.is_completed:
        return False
    if status == StatusFilter.OVERDUE and not todo.is_overdue(now):
        return False

    if priority is not None and todo.priority != priority:
        return False

    return True


def filter_todos(todos: Iterable[Todo], status: StatusFilter = StatusFilter.ALL,
                 priority: Optional[TodoPriority] = None,
                 now: Optional[datetime] = None) -> List[Todo]:
    """Return the todos visible under the given filters."""
    now = now or now_local()
    return [todo for todo in todos if matches_filter(todo, status, priority, now)]


def _due_sort_key(todo: Todo) -> Tuple[int, datetime]:
    due = todo.due_datetime
    if due is None:
        return (1, datetime.max)
    return (0, due)


def sort_todos(todos: Iterable[Todo], key: SortKey = SortKey.DUE_DATE) -> List[Todo]:
    """Order todos; sorting is stable so ties keep their incoming order.

    Due-date order puts todos without a date last. Created order is newest
    first.
    """
    if key == SortKey.DUE_DATE:
        return sorted(todos, key=_due_sort_key)
    if key == SortKey.PRIORITY:
        return sorted(todos, key=lambda todo: todo.priority.rank)
    return sorted(todos, key=lambda todo: todo.created_at, reverse=True)


def todo_stats(todos: Iterable[Todo], now: Optional[datetime] = None) -> TodoStats:
    """Compute pending, overdue and completed-today counts."""
    now = now or now_local()
    stats = TodoStats()

    for todo in todos:
        if not todo.is_completed:
            stats.pending += 1
            if todo.is_overdue(now):
                stats.overdue += 1
        if todo.completed_on(now):
            stats.completed_today += 1

    return stats


def group_by_urgency(todos: Iterable[Todo],
                     now: Optional[datetime] = None) -> Dict[Urgency, List[Todo]]:
    """Bucket todos by urgency tier, most urgent tier first."""
    now = now or now_local()
    groups: Dict[Urgency, List[Todo]] = {tier: [] for tier in Urgency}

    for todo in todos:
        groups[todo.urgency(now)].append(todo)

    return groups


def fuzzy_search(todos: Iterable[Todo], query: str, limit: int = 10,
                 score_cutoff: int = 60) -> List[Tuple[Todo, int]]:
    """Find todos whose titles loosely match ``query``.

    Returns (todo, score) pairs, best match first.
    """
    query = query.strip()
    if not query:
        return []

    by_id = {todo.id: todo for todo in todos}
    choices = {todo_id: todo.title for todo_id, todo in by_id.items()}

    results = process.extractBests(query, choices, scorer=fuzz.partial_ratio,
                                   score_cutoff=score_cutoff, limit=limit)
    return [(by_id[todo_id], score) for _title, score, todo_id in results]
