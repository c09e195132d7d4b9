"""
Task formatting utilities
"""

from typing import Iterable
from todo_client.models.task import Task


def format_task(task: Task) -> str:
    """
    Format a single task as a one-line summary
    
    Args:
        task: Task to format
        
    Returns:
        Summary like "[x] #3 Buy milk"
    """
    mark = "x" if task.completed else " "
    return f"[{mark}] #{task.id} {task.title}"


def format_task_list(tasks: Iterable[Task]) -> str:
    """
    Format tasks one per line
    
    Args:
        tasks: Tasks to format
        
    Returns:
        Multi-line summary, or a placeholder when there are no tasks
    """
    lines = [format_task(task) for task in tasks]
    if not lines:
        return "(no tasks)"
    return "\n".join(lines)
