from os import environ

from pydantic import BaseModel, ConfigDict
from sqlalchemy.engine import URL


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    aws_region: str
    postgres_host: str
    postgres_port: int
    postgres_database: str
    postgres_user: str
    postgres_password: str
    postgres_secret_arn: str | None = None
    environment: str

    @property
    def database_url(self) -> str:
        """SQLAlchemy URL for the psycopg 3 driver."""
        url = URL.create(
            "postgresql+psycopg",
            username=self.postgres_user,
            password=self.postgres_password,
            host=self.postgres_host,
            port=self.postgres_port,
            database=self.postgres_database,
        )
        return url.render_as_string(hide_password=False)


_cached_config: Config | None = None


def _reset_config() -> None:
    """Reset cached config (testing only)."""
    global _cached_config
    _cached_config = None


def get_config() -> Config:
    global _cached_config
    if _cached_config is not None:
        return _cached_config

    _cached_config = Config(
        aws_region=environ.get("AWS_REGION", "us-east-1"),
        postgres_host=environ.get("POSTGRES_HOST", "localhost"),
        postgres_port=int(environ.get("POSTGRES_PORT", "5432")),
        postgres_database=environ.get("POSTGRES_DATABASE", "smarttrip"),
        postgres_user=environ.get("POSTGRES_USER", "smarttrip"),
        postgres_password=environ.get("POSTGRES_PASSWORD", "localdev"),
        postgres_secret_arn=environ.get("POSTGRES_SECRET_ARN") or None,
        environment=environ.get("ENVIRONMENT", "local"),
    )
    return _cached_config
