"""Configuration models."""

from typing import Optional

from psycopg.conninfo import make_conninfo
from pydantic import BaseModel, Field, field_validator


class PostgresConfig(BaseModel):
    """Postgres configuration."""

    host: str = Field("localhost", description="Database host")
    port: int = Field(5432, description="Database port")
    database: str = Field("contentstore", description="Database name")
    user: str = Field("contentstore", description="Database user")
    password: Optional[str] = Field(None, description="Database password")
    password_env: Optional[str] = Field(None, description="Environment variable for password")
    pool_max_size: int = Field(10, description="Maximum pooled connections", ge=1)

    @property
    def conninfo(self) -> str:
        """libpq connection string; values are quoted as needed."""
        params = {
            "host": self.host,
            "port": self.port,
            "dbname": self.database,
            "user": self.user,
        }
        if self.password:
            params["password"] = self.password
        return make_conninfo(**params)


class AdminConfig(BaseModel):
    """Administrator login settings."""

    password: Optional[str] = Field(None, description="Admin password (prefer password_env)")
    password_env: Optional[str] = Field(
        "CONTENTSTORE_ADMIN_PASSWORD", description="Environment variable for admin password"
    )
    session_timeout_minutes: int = Field(
        60 * 24, description="Lifetime of a login session", ge=1
    )


class BlogConfig(BaseModel):
    """Blog rendering settings used by search results."""

    article_url_prefix: str = Field("/blog/", description="Prefix joined with the slug")

    @field_validator("article_url_prefix")
    @classmethod
    def validate_prefix(cls, v: str) -> str:
        """Ensure the prefix ends with a slash."""
        return v if v.endswith("/") else v + "/"


class ShortcutConfig(BaseModel):
    """Static search shortcut from shortcuts.yaml."""

    name: str = Field(..., description="Display name matched against search queries")
    url: str = Field(..., description="Target URL")

    class Config:
        """Pydantic config."""

        frozen = True


class ConfigModel(BaseModel):
    """Main configuration model."""

    postgres: PostgresConfig = Field(default_factory=PostgresConfig)
    admin: AdminConfig = Field(default_factory=AdminConfig)
    blog: BlogConfig = Field(default_factory=BlogConfig)
