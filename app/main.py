import logging

# Log configuration (before other imports)
# ruff: noqa: E402
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    force=True
)

from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from supabase import Client

from app.api.base import api_router
from app.config import Settings, get_settings
from app.infra.supabase import create_supabase_client
from app.services.errors import NotFound, StoreFailure, TaskError, ValidationError
from app.services.task_service import TaskService

logger = logging.getLogger(__name__)

VERSION = "1.0.0"

ERROR_STATUS = {
    ValidationError: 400,
    NotFound: 404,
    StoreFailure: 500,
}


async def task_error_handler(request: Request, exc: TaskError) -> JSONResponse:
    status_code = ERROR_STATUS.get(type(exc), 500)
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=status_code, content={"error": exc.message})


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"{request.method} {request.url.path} raised an unexpected error")
    return JSONResponse(status_code=500, content={"error": str(exc)})


def create_app(settings: Optional[Settings] = None, client: Optional[Client] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Configuration; read from the environment when omitted
        client: Supabase client to use instead of creating one at startup

    Returns:
        The configured application. The task service is created on startup
        and released on shutdown.
    """
    settings = settings or get_settings()
    logging.getLogger().setLevel(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        supabase_client = client if client is not None else create_supabase_client(settings)
        app.state.task_service = TaskService(supabase_client, settings.tasks_table)
        logger.info(f"Task service ready (table={settings.tasks_table})")
        yield
        app.state.task_service = None
        logger.info("Task service shut down")

    app = FastAPI(
        title="Task API",
        description="CRUD API for task records backed by a Supabase table",
        version=VERSION,
        lifespan=lifespan,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    for error_class in ERROR_STATUS:
        app.add_exception_handler(error_class, task_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)

    # Include all API routes
    app.include_router(api_router)

    public_dir = Path(settings.public_dir)
    if public_dir.is_dir():
        # Mounted last so the API routes take precedence
        app.mount("/", StaticFiles(directory=public_dir, html=True), name="public")
    else:
        @app.get("/")
        def read_root():
            return {
                "message": "Task API",
                "docs": "/docs",
                "version": VERSION,
            }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
