"""The task record kept by the to-do list."""

from dataclasses import asdict, dataclass


@dataclass
class Task:
    """A to-do item."""

    id: int
    title: str
    completed: bool = False

    def complete(self):
        """Mark the task as done."""
        self.completed = True

    def to_dict(self):
        """Return the task as a JSON-ready mapping."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data):
        """Build a task from a stored mapping; raise ``ValueError`` if it is malformed."""
        try:
            task_id, title, completed = data["id"], data["title"], data["completed"]
        except (KeyError, TypeError):
            task_id = None
        if not (
            type(task_id) is int
            and 0 <= task_id <= 0xFFFFFFFF
            and isinstance(title, str)
            and isinstance(completed, bool)
        ):
            raise ValueError(f"invalid task record: {data!r}")
        return cls(task_id, title, completed)