from pathlib import Path
from dotenv import dotenv_values
from pydantic import Field
from pydantic_settings import BaseSettings

import os

# Load .env for local/dev environments only where the environment lacks a value
BASE_DIR = Path(__file__).resolve().parent.parent.parent
env_file = BASE_DIR / ".env"

if env_file.exists():
    file_env = dotenv_values(env_file)
    for k, v in file_env.items():
        if k not in os.environ and v is not None:
            os.environ[k] = v


class Settings(BaseSettings):
    """Application settings pulled from environment variables."""

    # API Configuration
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, description="API port")
    debug: bool = Field(default=False, description="Enable debug mode")
    allowed_origins: str = Field(
        default="http://localhost:3000", description="CORS allowed origins"
    )

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="json", description="Logging format (json or console)"
    )

    # World Generation Configuration
    default_seed: str = Field(
        default="world-seed", description="Seed used when a request omits one"
    )
    default_organization_density: str = Field(
        default="normal", description="Organization density: sparse, normal or dense"
    )

    @property
    def cors_origins(self) -> list:
        """Split the comma separated origin list."""
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


settings = Settings()
