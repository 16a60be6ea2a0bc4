"""
Configuration Management

Centralized configuration management using environment variables
with proper validation and type safety.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv


# Load environment variables from .env in project root (resolve to absolute path)
_backend_root = Path(__file__).resolve().parent.parent
_env_path = _backend_root / ".env"
if _env_path.exists():
    load_dotenv(dotenv_path=str(_env_path))
else:
    # Also load from current working directory so "python backend_server.py" picks up .env
    load_dotenv()


@dataclass
class DatabaseConfig:
    """SQLAlchemy database configuration"""
    url: str
    echo: bool = False


@dataclass
class ServerConfig:
    """HTTP server configuration"""
    host: str
    port: int
    frontend_url: str = ""


@dataclass
class UploadConfig:
    """Resume upload storage configuration"""
    directory: str = "uploads"
    max_file_size: int = 10 * 1024 * 1024  # 10MB


@dataclass
class Config:
    """Main application configuration"""

    database: DatabaseConfig
    server: ServerConfig
    upload: UploadConfig = field(default_factory=UploadConfig)

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT: str = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    @classmethod
    def from_env(cls) -> "Config":
        """
        Create configuration from environment variables.

        Returns:
            Configured Config instance

        Raises:
            ValueError: If required environment variables are missing
        """
        database_url = os.getenv("DATABASE_URL")
        if not database_url:
            raise ValueError("DATABASE_URL environment variable is required")

        return cls(
            database=DatabaseConfig(
                url=database_url,
                echo=os.getenv("DATABASE_ECHO", "false").lower() == "true",
            ),
            server=ServerConfig(
                host=os.getenv("SERVER_HOST", "0.0.0.0"),
                port=int(os.getenv("SERVER_PORT", "8000")),
                frontend_url=os.getenv("FRONTEND_URL", ""),
            ),
            upload=UploadConfig(
                directory=os.getenv("UPLOAD_DIR", "uploads"),
                max_file_size=int(os.getenv("MAX_UPLOAD_SIZE", str(10 * 1024 * 1024))),
            ),
            LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO"),
            LOG_FORMAT=os.getenv(
                "LOG_FORMAT",
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            ),
        )


def get_config() -> Config:
    """
    Get configuration from environment variables.

    Returns:
        Configuration instance
    """
    return Config.from_env()
