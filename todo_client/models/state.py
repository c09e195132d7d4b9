"""
Screen state models: filter, theme and editing selection
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict
from todo_client.config.constants import (
    FILTER_ALL,
    FILTER_PENDING,
    FILTER_COMPLETED,
    COLOR_ROSE,
    COLOR_PLUM,
)
from todo_client.models.task import Task


class TaskFilter(str, Enum):
    """Status filters for the task list"""
    ALL = FILTER_ALL
    PENDING = FILTER_PENDING
    COMPLETED = FILTER_COMPLETED
    
    @property
    def label(self) -> str:
        return self.value.capitalize()
    
    def matches(self, task: Task) -> bool:
        """Return True if the task belongs in this filter's view"""
        if self is TaskFilter.PENDING:
            return not task.completed
        if self is TaskFilter.COMPLETED:
            return task.completed
        return True


class Palette(BaseModel):
    """Colors used to render one theme"""
    
    model_config = ConfigDict(frozen=True)
    
    background: str
    foreground: str
    button_background: str
    button_text: str
    icon: str


class Theme(str, Enum):
    """Light/dark theme"""
    LIGHT = "light"
    DARK = "dark"
    
    @property
    def palette(self) -> Palette:
        if self is Theme.DARK:
            return Palette(
                background=COLOR_PLUM,
                foreground=COLOR_ROSE,
                button_background=COLOR_ROSE,
                button_text=COLOR_PLUM,
                icon="sunny",
            )
        return Palette(
            background=COLOR_ROSE,
            foreground=COLOR_PLUM,
            button_background=COLOR_PLUM,
            button_text=COLOR_ROSE,
            icon="moon",
        )
    
    def toggled(self) -> "Theme":
        return Theme.LIGHT if self is Theme.DARK else Theme.DARK


class EditingState(BaseModel):
    """
    Edit selection: Idle when task_id is None, otherwise Editing(task_id, text)
    """
    
    model_config = ConfigDict(frozen=True)
    
    task_id: Optional[int] = None
    text: str = ""
    
    @classmethod
    def idle(cls) -> "EditingState":
        return cls()
    
    @property
    def is_editing(self) -> bool:
        return self.task_id is not None
    
    def is_editing_task(self, task_id: int) -> bool:
        return self.task_id is not None and self.task_id == task_id
