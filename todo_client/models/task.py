"""
Task model
"""

from typing import Optional, Dict, Any
from pydantic import BaseModel, ConfigDict
from todo_client.config.constants import TASK_DEFAULT_COMPLETED


class Task(BaseModel):
    """Task as returned by the todo service"""
    
    model_config = ConfigDict(frozen=True)
    
    id: int
    title: str
    completed: bool = TASK_DEFAULT_COMPLETED


class TaskCreate(BaseModel):
    """Task creation model"""
    
    title: str
    completed: bool = TASK_DEFAULT_COMPLETED


class TaskUpdate(BaseModel):
    """Partial task update; unset fields are left out of the request body"""
    
    title: Optional[str] = None
    completed: Optional[bool] = None
    
    def to_payload(self) -> Dict[str, Any]:
        """Serialize only the fields that were given"""
        return self.model_dump(exclude_none=True)
