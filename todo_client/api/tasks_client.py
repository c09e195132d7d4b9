"""
Todo service API client
"""

from typing import Optional, List
import httpx
from pydantic import TypeAdapter
from todo_client.api.base_client import BaseAPIClient
from todo_client.config.settings import settings
from todo_client.config.constants import TASKS_ENDPOINT, TASK_ENDPOINT
from todo_client.models.task import Task, TaskCreate, TaskUpdate


_TASK_LIST = TypeAdapter(List[Task])


class TasksClient(BaseAPIClient):
    """Client for the remote task service: list, create, update, delete"""
    
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize tasks client
        
        Args:
            base_url: Service base URL, defaults to TODO_API_BASE_URL
            timeout: Request timeout in seconds, defaults to REQUEST_TIMEOUT
            transport: Optional httpx transport (used by tests)
        """
        super().__init__(
            base_url or settings.TODO_API_BASE_URL,
            timeout=timeout if timeout is not None else settings.REQUEST_TIMEOUT,
            transport=transport,
        )
    
    async def list_tasks(self) -> List[Task]:
        """
        Fetch all tasks
        
        Returns:
            Tasks in the order the service returned them
        """
        data = await self.get(TASKS_ENDPOINT)
        return _TASK_LIST.validate_python(data)
    
    async def create_task(self, title: str, completed: bool = False) -> Task:
        """
        Create a task
        
        Args:
            title: Task title
            completed: Initial completion flag
            
        Returns:
            Created task with the server-assigned id
        """
        payload = TaskCreate(title=title, completed=completed).model_dump()
        data = await self.post(TASKS_ENDPOINT, json_data=payload)
        task = Task.model_validate(data)
        self.logger.info(f"Task created: {task.id}")
        return task
    
    async def update_task(
        self,
        task_id: int,
        title: Optional[str] = None,
        completed: Optional[bool] = None,
    ) -> None:
        """
        Partially update a task. The response body is not used.
        
        Args:
            task_id: Task ID
            title: New title, if changing
            completed: New completion flag, if changing
        """
        payload = TaskUpdate(title=title, completed=completed).to_payload()
        await self.patch(TASK_ENDPOINT.format(task_id=task_id), json_data=payload)
        self.logger.info(f"Task updated: {task_id} {payload}")
    
    async def delete_task(self, task_id: int) -> None:
        """
        Delete a task
        
        Args:
            task_id: Task ID
        """
        await self.delete(TASK_ENDPOINT.format(task_id=task_id))
        self.logger.info(f"Task deleted: {task_id}")
