from fastapi import APIRouter
from app.api import health, tasks

api_router = APIRouter()

# Include all sub-routers
api_router.include_router(health.router)
api_router.include_router(tasks.router, prefix="/api/tasks")
# Same routes at the bare path, kept out of the OpenAPI schema
api_router.include_router(tasks.router, prefix="/tasks", include_in_schema=False)
