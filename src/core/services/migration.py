"""Run Alembic migrations programmatically, invoked via the migrate Lambda handler."""

import io
import json
import logging
import os

from alembic.config import Config

from alembic import command
from core.clients import get_secrets_client

logger = logging.getLogger(__name__)


def _load_credentials_from_secret(secret_arn: str) -> None:
    """Fetch Postgres credentials from Secrets Manager and set env vars."""
    secret = json.loads(get_secrets_client().get_secret_value(SecretId=secret_arn)["SecretString"])
    os.environ["POSTGRES_USER"] = secret.get("username", "smarttrip")
    os.environ["POSTGRES_PASSWORD"] = secret.get("password", "")
    os.environ["POSTGRES_HOST"] = secret.get("host", os.environ.get("POSTGRES_HOST", ""))
    os.environ["POSTGRES_PORT"] = str(secret.get("port", 5432))
    os.environ["POSTGRES_DATABASE"] = secret.get("dbname", os.environ.get("POSTGRES_DATABASE", "smarttrip"))


def run_migrations(revision: str = "head") -> dict[str, str]:
    secret_arn = os.environ.get("POSTGRES_SECRET_ARN")
    if secret_arn:
        _load_credentials_from_secret(secret_arn)

    ini_path = os.environ.get("ALEMBIC_CONFIG", "/var/task/alembic.ini")
    cfg = Config(ini_path)
    cfg.set_main_option("script_location", os.path.join(os.path.dirname(ini_path), "alembic"))

    stderr_buf = io.StringIO()
    stream_handler = logging.StreamHandler(stderr_buf)
    alembic_logger = logging.getLogger("alembic")
    alembic_logger.addHandler(stream_handler)

    try:
        command.upgrade(cfg, revision)
        output = stderr_buf.getvalue()
        logger.info("Migration to %s complete: %s", revision, output)
        return {"status": "success", "output": output}
    except Exception as e:
        logger.error("Migration failed: %s", e)
        raise
    finally:
        alembic_logger.removeHandler(stream_handler)
