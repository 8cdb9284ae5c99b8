"""JSON file storage for tasks and the id counter."""

import json
import re
from pathlib import Path

from minitools.todo.task import Task


class TaskStorage:
    """Keeps tasks in ``<data_dir>/tasks.json`` and ids in ``<data_dir>/id_counter.txt``."""

    def __init__(self, data_dir="data"):
        self.data_dir = Path(data_dir)
        self.tasks_path = self.data_dir / "tasks.json"
        self.counter_path = self.data_dir / "id_counter.txt"

    def list_tasks(self):
        """Return the stored tasks; an unreadable or missing file means none."""
        try:
            records = json.loads(self.tasks_path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError):
            return []
        if not isinstance(records, list):
            raise ValueError("tasks file must hold a JSON array")
        return [Task.from_dict(record) for record in records]

    def save_tasks(self, tasks):
        """Write ``tasks`` as pretty-printed JSON, creating the data directory."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        content = json.dumps([t.to_dict() for t in tasks], indent=2, ensure_ascii=False)
        self.tasks_path.write_text(content, encoding="utf-8")

    def generate_id(self):
        """Advance the stored counter and return its new value."""
        counter = 0
        try:
            content = self.counter_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            content = None
        if content is not None:
            if not re.fullmatch(r"\+?[0-9]+", content) or int(content) > 0xFFFFFFFF:
                raise ValueError(f"invalid id counter: {content!r}")
            counter = int(content)
        counter += 1
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.counter_path.write_text(str(counter), encoding="utf-8")
        return counter