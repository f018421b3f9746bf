"""
Task Service

Translates task intents into collection operations:
- listing with optional completed/priority filters
- CRUD by identifier, with malformed identifiers treated as not found
"""

import logging
from typing import List, Optional

from supabase import Client

from app.infra.supabase.repositories.tasks import TaskRepository
from app.models.task import Task, TaskCreate, TaskFilter, TaskUpdate, parse_task_id
from app.services.errors import NotFound, ValidationError
from app.utils.datetime_helper import utc_now

logger = logging.getLogger(__name__)


class TaskService:
    """Service for managing tasks"""

    def __init__(self, supabase_client: Client, table_name: str = "tasks"):
        self.supabase = supabase_client
        self.task_repo = TaskRepository(supabase_client, table_name)

    async def list_tasks(self, task_filter: Optional[TaskFilter] = None) -> List[Task]:
        """
        List tasks matching the filter, most recently created first.

        An empty result is an empty list, never an error.
        """
        return await self.task_repo.find_matching(task_filter)

    async def get_task(self, task_id: str) -> Task:
        """
        Get a single task by ID.

        Raises:
            NotFound: If the id is malformed or no task has it
        """
        parsed = parse_task_id(task_id)
        if parsed is None:
            raise NotFound()

        task = await self.task_repo.find_by_id(parsed)
        if task is None:
            raise NotFound()
        return task

    async def create_task(self, data: TaskCreate) -> Task:
        """
        Create a new task. The collection assigns the id; created_at is set here.

        Raises:
            ValidationError: If the title is blank
        """
        if not data.title or not data.title.strip():
            raise ValidationError("Title is required")

        task = await self.task_repo.create(data, created_at=utc_now().isoformat())
        logger.info(f"Created task {task.id}")
        return task

    async def update_task(self, task_id: str, data: TaskUpdate) -> Task:
        """
        Apply the explicitly set fields of data and stamp updated_at.

        Raises:
            NotFound: If the id is malformed or no task has it
        """
        parsed = parse_task_id(task_id)
        if parsed is None:
            raise NotFound()

        task = await self.task_repo.update(parsed, data, updated_at=utc_now().isoformat())
        if task is None:
            raise NotFound()

        logger.info(f"Updated task {task.id} fields={sorted(data.model_fields_set)}")
        return task

    async def delete_task(self, task_id: str) -> None:
        """
        Delete a task permanently.

        Raises:
            NotFound: If the id is malformed or no task has it
        """
        parsed = parse_task_id(task_id)
        if parsed is None:
            raise NotFound()

        if not await self.task_repo.delete(parsed):
            raise NotFound()
        logger.info(f"Deleted task {parsed}")
