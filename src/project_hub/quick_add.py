"""Quick-add form state for new todos.

The form re-runs date extraction on every text change and offers the
result as a suggestion. Nothing is committed until the user confirms the
suggestion or submits the form.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from .errors import EmptyTitleError
from .parser import DateExtractor, get_extractor
from .todo import TodoPriority
from .utils.datetime import to_iso_string

logger = logging.getLogger(__name__)

# Inputs this short are never scanned for dates
MIN_SUGGESTION_LENGTH = 3


@dataclass
class DateSuggestion:
    """A detected date and the title that would remain without it."""
    text: str
    date: datetime


@dataclass
class TodoDraft:
    """Payload handed to the persistence layer when a todo is created."""
    title: str
    due_date: Optional[str] = None
    priority: TodoPriority = TodoPriority.MEDIUM
    project_ids: List[str] = field(default_factory=list)


class QuickAddForm:
    """Input state behind the "add a todo" box."""

    def __init__(self, default_project_id: Optional[str] = None,
                 extractor: Optional[DateExtractor] = None):
        self.default_project_id = default_project_id
        self.extractor = extractor or get_extractor()
        self.reset()

    def reset(self):
        """Clear the form back to its initial values."""
        self.text = ""
        self.due_date: Optional[datetime] = None
        self.priority = TodoPriority.MEDIUM
        self.suggestion: Optional[DateSuggestion] = None
        self.project_ids: List[str] = [self.default_project_id] if self.default_project_id else []

    def set_text(self, text: str, now: Optional[datetime] = None) -> Optional[DateSuggestion]:
        """Update the input and recompute the date suggestion."""
        self.text = text
        self.suggestion = None

        if len(text) > MIN_SUGGESTION_LENGTH:
            extracted = self.extractor.extract(text, now)
            if extracted.date is not None and extracted.clean_text != text:
                self.suggestion = DateSuggestion(text=extracted.clean_text, date=extracted.date)

        return self.suggestion

    def accept_suggestion(self) -> bool:
        """Apply the pending suggestion to the title and due date."""
        if self.suggestion is None:
            return False

        self.text = self.suggestion.text
        self.due_date = self.suggestion.date
        self.suggestion = None
        return True

    def dismiss_suggestion(self):
        """Ignore the detected date and keep the title as typed."""
        self.suggestion = None

    def set_due_date(self, due: Optional[datetime]):
        """Pick a due date explicitly."""
        self.due_date = due

    def clear_due_date(self):
        self.due_date = None

    def set_priority(self, priority):
        self.priority = TodoPriority(priority)

    def toggle_project(self, project_id: str):
        """Link or unlink a project."""
        if project_id in self.project_ids:
            self.project_ids.remove(project_id)
        else:
            self.project_ids.append(project_id)

    def submit(self) -> TodoDraft:
        """Build the todo payload and reset the form.

        An unconfirmed suggestion still wins over the picker on submit.

        Raises:
            EmptyTitleError: if no title text is left
        """
        title = self.text
        due = self.due_date

        if self.suggestion is not None:
            title = self.suggestion.text
            due = self.suggestion.date

        title = title.strip()
        if not title:
            raise EmptyTitleError()

        draft = TodoDraft(
            title=title,
            due_date=to_iso_string(due),
            priority=self.priority,
            project_ids=list(self.project_ids),
        )
        logger.debug(f"Submitting todo draft: {draft}")

        self.reset()
        return draft
