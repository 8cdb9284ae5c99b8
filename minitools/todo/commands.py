"""The actions of the to-do list."""

from __future__ import annotations

from minitools.todo.storage import TaskStorage
from minitools.todo.task import Task


class TaskNotFoundError(LookupError):
    """Raised when no open task has the requested id."""

    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task with ID {task_id} not found")
        self.task_id = task_id


def add_task(storage: TaskStorage, title: str) -> Task:
    """Store a new task under a fresh id and return it."""
    task = Task(storage.generate_id(), title)
    tasks = storage.list_tasks()
    tasks.append(task)
    storage.save_tasks(tasks)
    print(f"Task '{task.title}' added successfully!")
    return task


def list_tasks(storage: TaskStorage) -> list[Task]:
    """Print and return every stored task."""
    tasks = storage.list_tasks()
    for task in tasks:
        print(f"Task ID: '{task.id}', Title: {task.title}")
    return tasks


def remove_task(storage: TaskStorage, task_id: int) -> list[Task]:
    """Drop every task with ``task_id``; return the tasks that remain."""
    remaining = [task for task in storage.list_tasks() if task.id != task_id]
    storage.save_tasks(remaining)
    print("Task removed successfully!")
    return remaining


def complete_task(storage: TaskStorage, task_id: int) -> Task:
    """Mark the first task with ``task_id`` as completed and return it.

    Raises ``TaskNotFoundError`` when there is no such task, or when it was
    already completed.
    """
    tasks = storage.list_tasks()
    task = next((task for task in tasks if task.id == task_id), None)
    if task is None:
        raise TaskNotFoundError(task_id)
    newly_completed = not task.completed
    if newly_completed:
        task.complete()
    print(f"Task: '{task.title}' is completed")
    if not newly_completed:
        raise TaskNotFoundError(task_id)
    storage.save_tasks(tasks)
    return task