from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Optional

from mysql.connector import errors, pooling

from ..core.constants import DEFAULT_POOL_NAME, DEFAULT_POOL_SIZE, DEFAULT_POOL_TIMEOUT


@dataclass
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str
    pool_size: int = DEFAULT_POOL_SIZE
    pool_name: str = DEFAULT_POOL_NAME
    pool_timeout: float = DEFAULT_POOL_TIMEOUT


class DatabaseConnection:
    """Process-wide connection pool owner.

    The pool is opened on first use and drained by ``close()``. Callers never
    hold a connection outside a ``db_cursor`` scope. ``MySQLConnectionPool``
    fails at once when every connection is out, so borrowers queue on a
    semaphore sized like the pool and wait up to ``pool_timeout`` seconds.
    """

    _instance: Optional["DatabaseConnection"] = None

    def __init__(self, config: DBConfig):
        self._config = config
        self._pool: Optional[pooling.MySQLConnectionPool] = None
        self._lock = threading.Lock()
        self._slots = threading.BoundedSemaphore(int(config.pool_size))

    @classmethod
    def get_instance(cls, config: DBConfig) -> "DatabaseConnection":
        if cls._instance is None:
            cls._instance = DatabaseConnection(config)
        return cls._instance

    def _get_pool(self) -> pooling.MySQLConnectionPool:
        with self._lock:
            if self._pool is None:
                self._pool = pooling.MySQLConnectionPool(
                    pool_name=self._config.pool_name,
                    pool_size=int(self._config.pool_size),
                    pool_reset_session=True,
                    host=self._config.host,
                    port=int(self._config.port),
                    user=self._config.user,
                    password=self._config.password,
                    database=self._config.database,
                    autocommit=False,
                )
            return self._pool

    def connect(self):
        """Borrow a pooled connection, waiting for a free one.

        Every borrowed connection must be handed back through ``release()``.
        """
        if not self._slots.acquire(timeout=self._config.pool_timeout):
            raise errors.PoolError(
                f"No free connection in pool '{self._config.pool_name}' after {self._config.pool_timeout}s"
            )
        try:
            return self._get_pool().get_connection()
        except BaseException:
            self._slots.release()
            raise

    def release(self, conn) -> None:
        """Return ``conn`` to the pool and free its slot."""
        try:
            conn.close()
        finally:
            self._slots.release()

    def close(self) -> None:
        """Drain idle pooled connections. The pool reopens on next use.

        Driver errors propagate; the shutdown hook in ``main`` logs them.
        """
        with self._lock:
            pool, self._pool = self._pool, None
        if pool is not None:
            # The pool exposes no public drain call.
            pool._remove_connections()
