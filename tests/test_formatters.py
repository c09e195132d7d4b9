"""
Tests for task formatting
"""

from todo_client.models.task import Task
from todo_client.utils.formatters import format_task, format_task_list


def test_format_task():
    assert format_task(Task(id=3, title="Buy milk", completed=False)) == "[ ] #3 Buy milk"
    assert format_task(Task(id=4, title="Walk the dog", completed=True)) == "[x] #4 Walk the dog"


def test_format_task_list():
    tasks = [Task(id=1, title="a"), Task(id=2, title="b", completed=True)]
    assert format_task_list(tasks) == "[ ] #1 a\n[x] #2 b"
    assert format_task_list([]) == "(no tasks)"
