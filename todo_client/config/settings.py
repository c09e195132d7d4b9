"""
Application settings and configuration
"""

import os
from pathlib import Path
from dotenv import load_dotenv
from typing import Optional
from todo_client.config.constants import TODO_API_DEFAULT_BASE_URL

# Load environment variables from .env file
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(dotenv_path=env_path)


def _optional_float(name: str, value: Optional[str]) -> Optional[float]:
    if value is None or not value.strip():
        return None
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"{name} must be a number of seconds, got: {value}")


class Settings:
    """Application settings loaded from environment variables"""
    
    # Todo API
    TODO_API_BASE_URL: str = os.getenv("TODO_API_BASE_URL", TODO_API_DEFAULT_BASE_URL)
    # None means requests never time out
    REQUEST_TIMEOUT: Optional[float] = _optional_float("REQUEST_TIMEOUT", os.getenv("REQUEST_TIMEOUT"))
    
    # Application
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE: Optional[str] = os.getenv("LOG_FILE") or None
    WEB_HOST: str = os.getenv("WEB_HOST", "127.0.0.1")
    WEB_PORT: int = int(os.getenv("WEB_PORT", "8000"))
    
    @classmethod
    def validate(cls) -> bool:
        """Validate that the API base URL is present and usable"""
        base_url = (cls.TODO_API_BASE_URL or "").strip()
        
        if not base_url:
            raise ValueError("Missing required environment variable: TODO_API_BASE_URL")
        
        if not base_url.startswith(("http://", "https://")):
            raise ValueError(
                f"TODO_API_BASE_URL must be an http(s) URL, got: {base_url}"
            )
        
        return True


# Global settings instance
settings = Settings()
