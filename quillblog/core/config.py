import json
import logging
from typing import List, Union, Any, Optional, Dict
from pydantic import AnyHttpUrl, Field, field_validator, SecretStr
from pydantic_settings import BaseSettings
from sqlalchemy.engine import make_url
from google.api_core.exceptions import NotFound
import os

logger = logging.getLogger(__name__)

SECRET_IDS = ['DATABASE_URL', 'SECRET_KEY']


def get_secrets() -> Optional[dict[str, str]]:
    project_id = os.getenv('GOOGLE_CLOUD_PROJECT')
    if not project_id:
        return None

    from google.cloud import secretmanager
    client = secretmanager.SecretManagerServiceClient()

    secrets = {}
    for secret_id in SECRET_IDS:
        try:
            name = f"projects/{project_id}/secrets/{secret_id}/versions/latest"
            response = client.access_secret_version(request={"name": name})
            secrets[secret_id] = response.payload.data.decode("UTF-8")
        except NotFound:
            logger.warning(f"Secret {secret_id} not found in GCP Secret Manager.")
    return secrets


class Settings(BaseSettings):
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "QuillBlog"

    BACKEND_CORS_ORIGINS: List[AnyHttpUrl] = [
        "http://localhost",
        "http://localhost:3000",
        "http://localhost:8080",
    ]

    GOOGLE_CLOUD_PROJECT: Optional[str] = None
    ENVIRONMENT: str = Field(default="development")
    LOG_LEVEL: str = Field(default="INFO")

    DATABASE_URL: str = "sqlite:///./quillblog.db"
    DB_POOL_SIZE: int = Field(default=10)
    DB_MAX_OVERFLOW: int = Field(default=20)

    SECRET_KEY: SecretStr = Field(default=SecretStr("development-only-secret-key-change-me"))
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(default=60 * 24 * 7)

    EXCERPT_LENGTH: int = Field(default=500)

    HOST: str = "0.0.0.0"
    PORT: int = Field(default=5000)

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> Union[List[str], str]:
        if isinstance(v, str):
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                return [i.strip() for i in v.split(",") if i.strip()]
        return v

    @field_validator("DATABASE_URL", mode="before")
    @classmethod
    def normalize_database_url(cls, v: Any) -> Any:
        # Heroku-style URLs use the scheme SQLAlchemy dropped in 1.4
        if isinstance(v, str) and v.startswith("postgres://"):
            return "postgresql://" + v[len("postgres://"):]
        return v

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "allow"

    @classmethod
    def from_gcp_secrets(cls) -> 'Settings':
        secrets = get_secrets()
        if secrets:
            return cls(**secrets)
        return cls()


def get_settings() -> Settings:
    env = os.getenv("ENVIRONMENT", "development")
    if env == "production":
        return Settings.from_gcp_secrets()
    return Settings()


def log_settings(current: Settings) -> Dict[str, Any]:
    """Log every setting, redacting secrets. Returns what was logged."""
    logged = {}
    for field, value in current.model_dump().items():
        if isinstance(value, SecretStr):
            logged[field] = "[REDACTED]"
        elif field == "DATABASE_URL":
            logged[field] = make_url(value).render_as_string(hide_password=True)
        else:
            logged[field] = value
        logger.info(f"{field}: {logged[field]}")
    return logged


settings = get_settings()
