"""Domain models for the application"""
from .task import Priority, Task, TaskCreate, TaskFilter, TaskUpdate, parse_task_id

__all__ = [
    'Priority',
    'Task', 'TaskCreate', 'TaskUpdate', 'TaskFilter',
    'parse_task_id',
]
