"""Request validation for the tasks API

Bodies are validated field by field: a field with the wrong type is dropped
instead of failing the whole request. Only the title on creation is mandatory.
"""

import logging
from datetime import date
from typing import Any, Dict, List, Optional

from fastapi import Request
from pydantic import StrictBool, StrictStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from app.models.task import Priority, TaskCreate, TaskFilter, TaskUpdate
from app.services.errors import ValidationError

logger = logging.getLogger(__name__)

_FIELD_ADAPTERS: Dict[str, TypeAdapter] = {
    "title": TypeAdapter(StrictStr),
    "description": TypeAdapter(StrictStr),
    "priority": TypeAdapter(Priority),
    "completed": TypeAdapter(StrictBool),
    "tags": TypeAdapter(List[StrictStr]),
    "due_date": TypeAdapter(date),
}

CREATE_FIELDS = ("title", "description", "priority", "tags", "due_date")
UPDATE_FIELDS = ("title", "description", "priority", "completed", "tags", "due_date")


async def read_json_body(request: Request) -> Dict[str, Any]:
    """Decode the request body, treating anything but a JSON object as empty"""
    try:
        body = await request.json()
    except ValueError:
        logger.debug("Request body is not valid JSON, ignoring it")
        return {}
    return body if isinstance(body, dict) else {}


def _clean_fields(body: Dict[str, Any], allowed: tuple) -> Dict[str, Any]:
    """Keep the allowed fields that validate, dropping the rest"""
    cleaned: Dict[str, Any] = {}
    for name in allowed:
        if name not in body:
            continue
        value = body[name]

        if name == "due_date":
            if value is None:
                cleaned[name] = None
                continue
            # Only ISO date strings; numbers would otherwise coerce to epoch dates
            if not isinstance(value, str):
                logger.debug(f"Dropping field {name}: expected a date string")
                continue

        try:
            value = _FIELD_ADAPTERS[name].validate_python(value)
        except PydanticValidationError:
            logger.debug(f"Dropping invalid field {name}")
            continue

        if name == "title":
            value = value.strip()
            if not value:
                logger.debug("Dropping blank title")
                continue

        cleaned[name] = value
    return cleaned


def parse_create_body(body: Dict[str, Any]) -> TaskCreate:
    """
    Build a fully defaulted creation record.

    Raises:
        ValidationError: If the title is missing, not a string or blank
    """
    fields = _clean_fields(body, CREATE_FIELDS)
    if "title" not in fields:
        raise ValidationError("Title is required")
    # An explicit null due date on creation is the same as no due date
    if fields.get("due_date", "") is None:
        fields.pop("due_date")
    return TaskCreate(**fields)


def parse_update_body(body: Dict[str, Any]) -> TaskUpdate:
    """Build a partial update record holding only valid, explicitly supplied fields"""
    return TaskUpdate(**_clean_fields(body, UPDATE_FIELDS))


def parse_task_filter(completed: Optional[str], priority: Optional[str]) -> TaskFilter:
    """Turn raw query parameters into a filter; unrecognised values add no constraint"""
    task_filter = TaskFilter()

    if completed is not None:
        lowered = completed.strip().lower()
        if lowered in ("true", "false"):
            task_filter.completed = lowered == "true"

    if priority:
        try:
            task_filter.priority = Priority(priority.strip().lower())
        except ValueError:
            logger.debug(f"Ignoring unknown priority filter {priority!r}")

    return task_filter
