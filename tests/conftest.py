"""
Pytest configuration and fixtures
"""

import pytest
from unittest.mock import AsyncMock, MagicMock
from todo_client.api.tasks_client import TasksClient
from todo_client.models.task import Task
from todo_client.services.task_list import TaskListController


@pytest.fixture
def sample_tasks():
    """Tasks as the service would list them"""
    return [
        Task(id=1, title="Buy milk", completed=False),
        Task(id=2, title="Walk the dog", completed=True),
        Task(id=3, title="Write report", completed=False),
    ]


@pytest.fixture
def mock_tasks_client(sample_tasks):
    """Mock todo service client"""
    client = MagicMock(spec=TasksClient)
    client.list_tasks = AsyncMock(return_value=list(sample_tasks))
    client.create_task = AsyncMock(return_value=Task(id=42, title="New Task", completed=False))
    client.update_task = AsyncMock(return_value=None)
    client.delete_task = AsyncMock(return_value=None)
    client.close = AsyncMock(return_value=None)
    return client


@pytest.fixture
def controller(mock_tasks_client):
    """Controller with mocked client and an empty collection"""
    return TaskListController(mock_tasks_client)


@pytest.fixture
async def loaded_controller(controller):
    """Controller whose collection has been loaded from the mocked service"""
    await controller.load()
    controller.client.list_tasks.reset_mock()
    return controller
