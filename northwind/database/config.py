"""
Database configuration for the Northwind Employees data-access layer.

This module builds connection strings and engine options for the supported
RDBMS backends:
- SQLite (default, file or in-memory)
- MySQL/MariaDB (via pymysql)
- PostgreSQL (via psycopg2)

Configuration is loaded from environment variables, optionally from a
``.env`` file, with defaults suitable for local development.
"""

import os
import logging
from typing import Optional, Dict, Any
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError
from sqlalchemy.pool import StaticPool, QueuePool
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


class DatabaseConfigurationError(ValueError):
    """Raised when the database environment describes an unsupported setup."""
    pass


def build_database_url() -> str:
    """
    Build database URL from environment variables.

    Environment variables:
    - DATABASE_URL: Complete database URL (takes precedence)
    - DB_TYPE: Database type (sqlite, mysql, mariadb, postgresql)
    - DB_HOST: Database host (default: localhost)
    - DB_PORT: Database port (default: varies by type)
    - DB_NAME: Database name (default: northwind / northwind.db)
    - DB_USER: Database username
    - DB_PASSWORD: Database password

    Returns:
        Complete database URL string

    Raises:
        DatabaseConfigurationError: If DB_TYPE is not supported
    """
    database_url = os.getenv("DATABASE_URL")
    if database_url:
        return database_url

    db_type = os.getenv("DB_TYPE", "sqlite").lower()

    if db_type == "sqlite":
        db_name = os.getenv("DB_NAME", "northwind.db")
        return f"sqlite:///{db_name}"

    elif db_type in ["mysql", "mariadb"]:
        host = os.getenv("DB_HOST", "localhost")
        port = os.getenv("DB_PORT", "3306")
        database = os.getenv("DB_NAME", "northwind")
        username = os.getenv("DB_USER", "root")
        password = os.getenv("DB_PASSWORD", "")
        return f"mysql+pymysql://{username}:{password}@{host}:{port}/{database}?charset=utf8mb4"

    elif db_type == "postgresql":
        host = os.getenv("DB_HOST", "localhost")
        port = os.getenv("DB_PORT", "5432")
        database = os.getenv("DB_NAME", "northwind")
        username = os.getenv("DB_USER", "postgres")
        password = os.getenv("DB_PASSWORD", "")
        return f"postgresql+psycopg2://{username}:{password}@{host}:{port}/{database}"

    else:
        raise DatabaseConfigurationError(f"Unsupported database type: {db_type}")


def detect_database_type(database_url: str) -> str:
    """Detect database type from URL."""
    if database_url.startswith("sqlite"):
        return "sqlite"
    elif database_url.startswith(("mysql", "mariadb")):
        return "mysql"
    elif database_url.startswith("postgresql"):
        return "postgresql"
    else:
        return "unknown"


def is_memory_database(database_url: str) -> bool:
    """Whether a SQLite URL names a private in-memory database."""
    try:
        url = make_url(database_url)
    except ArgumentError:
        return False
    return url.database in (None, "", ":memory:") or url.query.get("mode") == "memory"


def engine_options(database_url: str, echo: Optional[bool] = None) -> Dict[str, Any]:
    """
    Get database-specific engine configuration.

    Args:
        database_url: URL the engine will be created for
        echo: Enable SQL statement logging. Defaults to DB_ECHO env var

    Returns:
        Dictionary of create_engine() keyword arguments
    """
    if echo is None:
        echo = os.getenv("DB_ECHO", "false").lower() in ("1", "true", "yes")

    kwargs: Dict[str, Any] = {
        "echo": echo,
        "pool_pre_ping": True,  # Verify connections before use
    }

    db_type = detect_database_type(database_url)

    if db_type == "sqlite":
        kwargs["connect_args"] = {
            "check_same_thread": False,
            "timeout": 30,  # busy timeout while another connection writes
        }
        if is_memory_database(database_url):
            # In-memory databases live and die with their connection, so one is shared
            kwargs["poolclass"] = StaticPool
        else:
            # File databases get one connection per checkout, like the server backends
            kwargs.update({
                "poolclass": QueuePool,
                "pool_size": int(os.getenv("DB_POOL_SIZE", "5")),
                "max_overflow": int(os.getenv("DB_MAX_OVERFLOW", "10")),
                "pool_timeout": int(os.getenv("DB_POOL_TIMEOUT", "30")),
            })

    elif db_type in ["mysql", "postgresql"]:
        kwargs.update({
            "poolclass": QueuePool,
            "pool_size": int(os.getenv("DB_POOL_SIZE", "10")),
            "max_overflow": int(os.getenv("DB_MAX_OVERFLOW", "20")),
            "pool_timeout": int(os.getenv("DB_POOL_TIMEOUT", "30")),
            "pool_recycle": int(os.getenv("DB_POOL_RECYCLE", "3600")),
        })

        if db_type == "mysql":
            kwargs["connect_args"] = {
                "charset": "utf8mb4",
                "connect_timeout": 30,
            }

    return kwargs


def mask_url(database_url: str) -> str:
    """Render a database URL with its password hidden, for logs and output."""
    try:
        return make_url(database_url).render_as_string(hide_password=True)
    except ArgumentError:
        logger.debug("Could not parse database URL for masking")
        return database_url.split("@")[-1] if "@" in database_url else database_url


__all__ = [
    "DatabaseConfigurationError",
    "build_database_url",
    "detect_database_type",
    "engine_options",
    "is_memory_database",
    "mask_url",
]
