import os
from functools import lru_cache
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv(dotenv_path=".env")


class Settings(BaseModel):
    """Process-wide settings, read once from the environment"""
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    sendgrid_api_key: str = ""
    email_from: str = "info@rightflowindia.com"
    app_base_url: str = "http://localhost:3000"
    reminder_window_days: int = 30
    cors_allow_origins: List[str] = ["*"]

    @classmethod
    def from_env(cls) -> "Settings":
        origins = os.getenv("CORS_ALLOW_ORIGINS", "*")
        return cls(
            supabase_url=os.getenv("SUPABASE_URL", ""),
            supabase_service_role_key=os.getenv("SUPABASE_SERVICE_ROLE_KEY", ""),
            sendgrid_api_key=os.getenv("SENDGRID_API_KEY", ""),
            email_from=os.getenv("EMAIL_FROM", "info@rightflowindia.com"),
            app_base_url=os.getenv("APP_BASE_URL", "http://localhost:3000").rstrip("/"),
            reminder_window_days=int(os.getenv("REMINDER_WINDOW_DAYS", "30")),
            cors_allow_origins=[o.strip() for o in origins.split(",") if o.strip()],
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings"""
    return Settings.from_env()
