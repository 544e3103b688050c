"""Exceptions raised by Project Hub."""


class HubError(Exception):
    """Base class for Project Hub errors."""


class EmptyTitleError(HubError, ValueError):
    """A todo was submitted without a title."""

    def __init__(self, message: str = "Todo title cannot be empty"):
        super().__init__(message)


class TodoNotFoundError(HubError, KeyError):
    """No todo exists with the requested id."""

    def __init__(self, todo_id: int):
        self.todo_id = todo_id
        super().__init__(f"Todo {todo_id} not found")

    def __str__(self) -> str:
        return self.args[0]
