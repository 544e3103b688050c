"""Local todo store: one markdown file with the rows in YAML frontmatter.

The frontmatter is the source of truth. The markdown body is a readable
checklist regenerated on every save and ignored on load.
"""

import logging
from pathlib import Path
from typing import List, Optional

import frontmatter

from .config import ConfigModel
from .errors import TodoNotFoundError
from .formatting import format_smart_date_time
from .quick_add import TodoDraft
from .todo import Todo, TodoPriority

logger = logging.getLogger(__name__)


class TodoMarkdownFormat:
    """Renders todos as a markdown checklist."""

    @staticmethod
    def to_markdown(todo: Todo) -> str:
        """Convert a Todo to a single checklist line."""
        checkbox = "- [x]" if todo.is_completed else "- [ ]"
        line = f"{checkbox} {todo.title}"

        if todo.due_date:
            label = format_smart_date_time(todo.due_date)
            line += f" (due {label or todo.due_date})"

        if todo.priority != TodoPriority.MEDIUM:
            line += f" ~{todo.priority.value}"

        return f"{line} <!-- id:{todo.id} -->"

    @classmethod
    def render(cls, todos: List[Todo]) -> str:
        lines = ["# Todos", ""]
        lines.extend(cls.to_markdown(todo) for todo in todos)
        return "\n".join(lines) + "\n"


class Storage:
    """File-backed todo rows."""

    def __init__(self, config: ConfigModel, path: Optional[Path] = None):
        self.config = config
        self.path = Path(path) if path else config.get_todos_path()

    def load_todos(self) -> List[Todo]:
        """Load all todos, or an empty list when nothing is stored yet."""
        if not self.path.exists():
            return []

        post = frontmatter.load(str(self.path))
        todos = []
        for row in post.metadata.get("todos") or []:
            todos.append(Todo.from_dict(row))

        logger.debug(f"Loaded {len(todos)} todos from {self.path}")
        return todos

    def save_todos(self, todos: List[Todo]) -> None:
        """Write all todos back to disk."""
        self.path.parent.mkdir(parents=True, exist_ok=True)

        post = frontmatter.Post(
            TodoMarkdownFormat.render(todos),
            todos=[todo.to_dict() for todo in todos],
        )
        with open(self.path, "w") as f:
            f.write(frontmatter.dumps(post))
            f.write("\n")

        logger.debug(f"Saved {len(todos)} todos to {self.path}")

    def next_id(self, todos: List[Todo]) -> int:
        return max((todo.id for todo in todos), default=0) + 1

    def add(self, draft: TodoDraft) -> Todo:
        """Create a todo from a submitted draft."""
        todos = self.load_todos()

        todo = Todo(
            id=self.next_id(todos),
            title=draft.title,
            due_date=draft.due_date,
            priority=draft.priority,
            project_ids=list(draft.project_ids),
            position=len(todos),
        )
        todos.append(todo)
        self.save_todos(todos)
        return todo

    def get(self, todo_id: int) -> Todo:
        """Fetch one todo by id.

        Raises:
            TodoNotFoundError: if there is no such todo
        """
        for todo in self.load_todos():
            if todo.id == todo_id:
                return todo
        raise TodoNotFoundError(todo_id)

    def update(self, updated: Todo) -> Todo:
        """Replace the stored row with the same id."""
        todos = self.load_todos()

        for index, todo in enumerate(todos):
            if todo.id == updated.id:
                todos[index] = updated
                self.save_todos(todos)
                return updated

        raise TodoNotFoundError(updated.id)

    def delete(self, todo_id: int) -> None:
        """Remove a todo."""
        todos = self.load_todos()
        remaining = [todo for todo in todos if todo.id != todo_id]

        if len(remaining) == len(todos):
            raise TodoNotFoundError(todo_id)

        self.save_todos(remaining)
