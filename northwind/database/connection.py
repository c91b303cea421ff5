"""
Connection factories for relational databases.

``EmployeeService`` depends only on the ``ConnectionFactory`` protocol: given
a connection string, produce a fresh connection that can be used as a
context manager, executes parameterized statements and commits.

``SQLAlchemyConnectionFactory`` is the concrete adapter. It supports SQLite,
MySQL, MariaDB and PostgreSQL through SQLAlchemy engines, created lazily and
cached per connection string.
"""

import logging
import threading
from typing import Any, Dict, Protocol, runtime_checkable

from sqlalchemy import create_engine
from sqlalchemy.engine import Connection, Engine

from .config import engine_options, mask_url

logger = logging.getLogger(__name__)


@runtime_checkable
class ConnectionFactory(Protocol):
    """Capability to open a new database connection for a connection string."""

    def connect(self, connection_string: str) -> Connection:
        ...


class SQLAlchemyConnectionFactory:
    """Factory and engine cache for RDBMS connections using SQLAlchemy."""

    def __init__(self, **engine_kwargs: Any):
        """
        Initialize the factory.

        Args:
            **engine_kwargs: Arguments passed to create_engine(), overriding
                the per-database defaults from ``engine_options()``
        """
        self.engine_kwargs = engine_kwargs
        self._engines: Dict[str, Engine] = {}
        self._lock = threading.Lock()

    def get_engine(self, connection_string: str) -> Engine:
        """
        Get the SQLAlchemy engine for a connection string, creating it once.

        Args:
            connection_string: SQLAlchemy database URL

        Returns:
            SQLAlchemy Engine instance
        """
        with self._lock:
            engine = self._engines.get(connection_string)
            if engine is None:
                kwargs = engine_options(connection_string)
                kwargs.update(self.engine_kwargs)
                engine = create_engine(connection_string, **kwargs)
                self._engines[connection_string] = engine
                logger.info(f"Created database engine for {mask_url(connection_string)}")
            return engine

    def connect(self, connection_string: str) -> Connection:
        """
        Create a new connection.

        Returns:
            SQLAlchemy Connection object; close it (or use it in a ``with``
            block) to hand it back to the pool
        """
        return self.get_engine(connection_string).connect()

    def dispose(self) -> None:
        """Dispose of every cached engine and its connection pool."""
        with self._lock:
            engines = list(self._engines.values())
            self._engines.clear()
        for engine in engines:
            engine.dispose()
        logger.debug(f"Disposed {len(engines)} database engine(s)")

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.dispose()
