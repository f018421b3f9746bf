"""Task repository"""
from typing import List, Optional

from supabase import Client  # type: ignore

from app.models.task import Task, TaskCreate, TaskFilter, TaskUpdate

from .base import BaseRepository


class TaskRepository(BaseRepository[Task, TaskCreate, TaskUpdate]):
    """Repository for task operations"""
    
    def __init__(self, client: Client, table_name: str = "tasks"):
        super().__init__(client, table_name, Task)
    
    async def find_matching(self, task_filter: Optional[TaskFilter] = None) -> List[Task]:
        """Find tasks matching the filter, most recently created first
        
        Args:
            task_filter: Optional completed/priority constraints, AND-combined
        """
        filters = task_filter.as_filters() if task_filter else {}
        return await self.find_by_filters(filters, order_by="created_at", desc=True)
