import json

import pytest

from minitools.todo.storage import TaskStorage
from minitools.todo.task import Task


@pytest.fixture
def storage(tmp_path):
    return TaskStorage(tmp_path / "data")


def test_missing_file_means_no_tasks(storage):
    assert storage.list_tasks() == []


def test_save_and_list_round_trip(storage):
    tasks = [Task(1, "one"), Task(2, "two", True)]
    storage.save_tasks(tasks)
    assert storage.list_tasks() == tasks


def test_saved_file_is_pretty_json(storage):
    storage.save_tasks([Task(1, "x")])
    expected = '[\n  {\n    "id": 1,\n    "title": "x",\n    "completed": false\n  }\n]'
    assert storage.tasks_path.read_text() == expected


def test_saved_empty_list(storage):
    storage.save_tasks([])
    assert json.loads(storage.tasks_path.read_text()) == []
    assert storage.list_tasks() == []


def test_generate_id_counts_up(storage):
    assert [storage.generate_id() for _ in range(3)] == [1, 2, 3]
    assert storage.counter_path.read_text() == "3"


def test_generate_id_continues_from_file(storage):
    storage.data_dir.mkdir(parents=True)
    storage.counter_path.write_text("41")
    assert storage.generate_id() == 42


@pytest.mark.parametrize("content", ["abc", "", "5\n", "-1"])
def test_generate_id_rejects_bad_counter(storage, content):
    storage.data_dir.mkdir(parents=True)
    storage.counter_path.write_text(content)
    with pytest.raises(ValueError):
        storage.generate_id()


def test_corrupt_tasks_file_raises(storage):
    storage.data_dir.mkdir(parents=True)
    storage.tasks_path.write_text("{not json")
    with pytest.raises(ValueError):
        storage.list_tasks()


def test_default_data_dir():
    assert TaskStorage().tasks_path.as_posix() == "data/tasks.json"