from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request

from app.api.task_input import (
    parse_create_body,
    parse_task_filter,
    parse_update_body,
    read_json_body,
)
from app.models.task import Task
from app.services.task_service import TaskService

router = APIRouter(tags=["tasks"])


def get_task_service(request: Request) -> TaskService:
    """Return the service created during application startup"""
    return request.app.state.task_service


def _task_payload(task: Task) -> dict:
    """Serialize a task, omitting updated_at until the first update"""
    payload = task.model_dump(mode="json")
    if payload.get("updated_at") is None:
        payload.pop("updated_at", None)
    return payload


@router.get("")
async def list_tasks(
    completed: Optional[str] = Query(None),
    priority: Optional[str] = Query(None),
    service: TaskService = Depends(get_task_service),
) -> List[dict]:
    """List tasks, optionally filtered by completed and/or priority"""
    tasks = await service.list_tasks(parse_task_filter(completed, priority))
    return [_task_payload(task) for task in tasks]


@router.get("/{task_id}")
async def get_task(task_id: str, service: TaskService = Depends(get_task_service)) -> dict:
    """Get a single task by ID"""
    task = await service.get_task(task_id)
    return _task_payload(task)


@router.post("", status_code=201)
async def create_task(request: Request, service: TaskService = Depends(get_task_service)) -> dict:
    """Create a new task"""
    data = parse_create_body(await read_json_body(request))
    task = await service.create_task(data)
    return _task_payload(task)


@router.put("/{task_id}")
async def update_task(
    task_id: str,
    request: Request,
    service: TaskService = Depends(get_task_service),
) -> dict:
    """Update an existing task with any subset of its editable fields"""
    data = parse_update_body(await read_json_body(request))
    task = await service.update_task(task_id, data)
    return _task_payload(task)


@router.delete("/{task_id}")
async def delete_task(task_id: str, service: TaskService = Depends(get_task_service)) -> dict:
    """Delete a task"""
    await service.delete_task(task_id)
    return {"message": "Task deleted successfully"}
