"""
Task list state and its synchronization with the todo service
"""

from typing import Optional, List, Tuple
from todo_client.api.tasks_client import TasksClient
from todo_client.models.task import Task
from todo_client.models.state import TaskFilter, Theme, EditingState
from todo_client.models.response import FailureReport
from todo_client.utils.logger import logger
from todo_client.utils.error_handler import handle_error, HANDLED_ERRORS
from todo_client.utils.formatters import format_task, format_task_list


class TaskListController:
    """
    Owns the screen state and keeps the local task list in line with the
    service.

    Every state change goes through one of the operations below. The task
    collection is never modified in place: each successful operation swaps
    in a new tuple built from the collection as it stands when the response
    arrives. Failed calls are logged and leave the collection untouched.
    """

    def __init__(self, client: TasksClient):
        """
        Initialize controller

        Args:
            client: Todo service API client
        """
        self.client = client
        self.logger = logger

        self._tasks: Tuple[Task, ...] = ()
        self.title = ""
        self.editing = EditingState.idle()
        self.filter = TaskFilter.ALL
        self.theme = Theme.LIGHT
        self.last_failure: Optional[FailureReport] = None

    @property
    def tasks(self) -> Tuple[Task, ...]:
        return self._tasks

    @property
    def visible_tasks(self) -> List[Task]:
        """Tasks matching the current filter, recomputed on every access"""
        return [task for task in self._tasks if self.filter.matches(task)]

    def get_task(self, task_id: int) -> Optional[Task]:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def _fail(self, operation: str, error: Exception) -> None:
        self.last_failure = handle_error(operation, error)

    async def load(self) -> None:
        """Replace the local collection with the service's task list"""
        try:
            tasks = await self.client.list_tasks()
        except HANDLED_ERRORS as e:
            self._fail("fetching tasks", e)
            return

        self._tasks = tuple(tasks)
        self.logger.info(f"Loaded {len(self._tasks)} tasks")
        self.logger.debug(format_task_list(self._tasks))

    async def add(self, title: Optional[str] = None) -> None:
        """
        Create a task and prepend it once the service returns it

        Args:
            title: Task title; the input buffer is used when omitted
        """
        if title is None:
            title = self.title
        title = title.strip()
        if not title:
            return

        try:
            created = await self.client.create_task(title=title, completed=False)
        except HANDLED_ERRORS as e:
            self._fail("adding task", e)
            return

        self.logger.info(f"Task added: {format_task(created)}")
        self._tasks = (created,) + self._tasks
        self.title = ""

    async def toggle_complete(self, task_id: int) -> None:
        """Flip the completion flag of a task"""
        task = self.get_task(task_id)
        if task is None:
            return

        updated = task.model_copy(update={"completed": not task.completed})

        try:
            await self.client.update_task(task_id, completed=updated.completed)
        except HANDLED_ERRORS as e:
            self._fail("toggling completion", e)
            return

        # The service's echo is not consumed; the local flip is authoritative
        self._tasks = tuple(updated if t.id == task_id else t for t in self._tasks)

    async def delete(self, task_id: int) -> None:
        """Delete a task and drop it locally once the service confirms"""
        try:
            await self.client.delete_task(task_id)
        except HANDLED_ERRORS as e:
            self._fail("deleting task", e)
            return

        self._tasks = tuple(t for t in self._tasks if t.id != task_id)

    def begin_edit(self, task_id: int) -> None:
        """Select a task for editing, replacing any previous selection"""
        task = self.get_task(task_id)
        if task is None:
            return
        self.editing = EditingState(task_id=task.id, text=task.title)

    def set_edit_text(self, text: str) -> None:
        if not self.editing.is_editing:
            return
        self.editing = EditingState(task_id=self.editing.task_id, text=text)

    def cancel_edit(self) -> None:
        self.editing = EditingState.idle()

    async def commit_edit(self, task_id: int, new_title: str) -> None:
        """
        Submit a new title for the task being edited.

        Edit mode exits as soon as the title is submitted, before the service
        answers; the old title stays on screen until the write is confirmed.
        A blank title exits edit mode without a request.

        Args:
            task_id: Task being edited
            new_title: Replacement title
        """
        if not self.editing.is_editing_task(task_id):
            return

        self.editing = EditingState.idle()

        new_title = new_title.strip()
        if not new_title:
            return

        try:
            await self.client.update_task(task_id, title=new_title)
        except HANDLED_ERRORS as e:
            self._fail("editing task", e)
            return

        self._tasks = tuple(
            t.model_copy(update={"title": new_title}) if t.id == task_id else t
            for t in self._tasks
        )

    async def save_edit(self) -> None:
        """Commit the current edit selection with the edit buffer"""
        if not self.editing.is_editing:
            return
        await self.commit_edit(self.editing.task_id, self.editing.text)

    def set_filter(self, task_filter: TaskFilter) -> None:
        self.filter = TaskFilter(task_filter)

    def toggle_theme(self) -> None:
        self.theme = self.theme.toggled()
