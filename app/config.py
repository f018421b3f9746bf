import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv


def _split_origins(raw: str) -> List[str]:
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]


@dataclass
class Settings:
    """Runtime configuration for the task API"""
    supabase_url: Optional[str] = None
    supabase_key: Optional[str] = None
    tasks_table: str = "tasks"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    public_dir: str = "public"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 3000


def get_settings() -> Settings:
    """Load settings from the environment, reading .env first if present"""
    load_dotenv(dotenv_path=".env")

    return Settings(
        supabase_url=os.getenv("SUPABASE_URL"),
        supabase_key=os.getenv("SUPABASE_SERVICE_ROLE_KEY"),
        tasks_table=os.getenv("TASKS_TABLE", "tasks"),
        cors_origins=_split_origins(os.getenv("CORS_ORIGINS", "*")),
        public_dir=os.getenv("PUBLIC_DIR", "public"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "3000")),
    )
