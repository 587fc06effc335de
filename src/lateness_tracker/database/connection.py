from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Optional

import mysql.connector
from mysql.connector import pooling

from ..common.app_logger import get_logger
from ..core.constants import DEFAULT_POOL_SIZE

logger = get_logger("database")


@dataclass(frozen=True)
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str
    pool_size: int = DEFAULT_POOL_SIZE

    @classmethod
    def from_dict(cls, db_config: dict, *, pool_size: int = DEFAULT_POOL_SIZE) -> "DBConfig":
        return cls(
            host=str(db_config.get("host", "localhost")),
            port=int(db_config.get("port", 3306)),
            user=str(db_config.get("user", "root")),
            password=str(db_config.get("password", "")),
            database=str(db_config.get("database", "lateness_db")),
            pool_size=int(pool_size),
        )

    def describe(self) -> str:
        return f"{self.user}@{self.host}:{self.port}/{self.database}"


class DatabaseConnection:
    """Process-scoped connection pool.

    Created once at startup by the container and handed to every repository.
    Each repository call borrows one connection with connect() and hands it
    back with release(). When every pooled connection is in use, connect()
    waits for one to be released instead of failing.
    """

    def __init__(self, config: DBConfig):
        self._config = config
        self._pool: Optional[pooling.MySQLConnectionPool] = None
        self._pool_lock = threading.Lock()
        # One slot per pooled connection; MySQLConnectionPool itself raises PoolError when empty.
        self._slots = threading.BoundedSemaphore(config.pool_size)

    @property
    def config(self) -> DBConfig:
        return self._config

    def _get_pool(self) -> pooling.MySQLConnectionPool:
        # Lazy so the app can start (and serve the SPA) before MySQL is reachable.
        if self._pool is None:
            with self._pool_lock:
                if self._pool is None:
                    self._pool = pooling.MySQLConnectionPool(
                        pool_name="lateness_tracker",
                        pool_size=self._config.pool_size,
                        host=self._config.host,
                        port=int(self._config.port),
                        user=self._config.user,
                        password=self._config.password,
                        database=self._config.database,
                    )
                    logger.info(
                        "connection pool ready (%s, size=%s)", self._config.describe(), self._config.pool_size
                    )
        return self._pool

    def connect(self):
        self._slots.acquire()
        try:
            return self._get_pool().get_connection()
        except mysql.connector.Error:
            self._slots.release()
            logger.exception("could not obtain a connection for %s", self._config.describe())
            raise
        except Exception:
            self._slots.release()
            raise

    def release(self, conn) -> None:
        """Return a connection obtained from connect() to the pool."""
        try:
            # Pooled connections go back to the pool on close().
            conn.close()
        finally:
            self._slots.release()

    def close(self) -> None:
        with self._pool_lock:
            if self._pool is None:
                return
            # mysql-connector has no public API to shut a pool down; _remove_connections()
            # closes the idle connections it holds. Borrowed ones close on release().
            self._pool._remove_connections()
            self._pool = None
        logger.info("connection pool closed")
