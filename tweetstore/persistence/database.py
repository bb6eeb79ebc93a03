"""Synchronous status archive backed by SQLAlchemy Core."""

import logging
from contextlib import contextmanager
from typing import Iterable, Iterator

import sqlalchemy as sa
from sqlalchemy.engine import URL, Connection
from sqlalchemy.exc import ArgumentError, DBAPIError, SQLAlchemyError
from sqlalchemy.pool import NullPool

from ..config import DatabaseConfig
from .exceptions import DriverError
from .models import StatusRecord
from .tables import status_table

logger = logging.getLogger(__name__)

ROW_COUNT_FAILED = -1


class StatusDatabase:
    """A named database on a server, holding tables of archived statuses.

    Every public method opens its own connection and closes it before
    returning. Driver and SQL failures are logged and turned into an empty
    result (or ``ROW_COUNT_FAILED`` for ``get_row_count``); nothing is raised
    to the caller.
    """

    def __init__(self, name: str, config: DatabaseConfig):
        self._name = name
        self._config = config
        self._url = config.url_for(name)

    @property
    def name(self) -> str:
        return self._name

    @property
    def config(self) -> DatabaseConfig:
        return self._config

    @property
    def url(self) -> URL:
        return self._url

    @contextmanager
    def _connect(self) -> Iterator[Connection]:
        """Open a single, unpooled connection for the duration of one call."""
        logger.debug(f"Loading driver {self._config.driver}")
        try:
            engine = sa.create_engine(self._url, poolclass=NullPool)
        except (ImportError, ArgumentError) as e:
            raise DriverError(str(e), driver=self._config.driver) from e

        logger.debug(f"Connecting to {self._url.render_as_string(hide_password=True)}")
        try:
            with engine.connect() as conn:
                yield conn
        finally:
            engine.dispose()

    # === Tables ===

    def list_tables(self) -> list[str]:
        """Names of the tables in this database."""
        try:
            with self._connect() as conn:
                logger.debug("Retrieving tables...")
                return sa.inspect(conn).get_table_names()
        except (DriverError, SQLAlchemyError) as e:
            _log_failure(e)
            return []

    def create_table(self, table_name: str) -> None:
        """Create an empty status table called ``table_name``."""
        try:
            with self._connect() as conn:
                logger.info(f"Creating table {table_name}...")
                status_table(table_name).create(conn)
                conn.commit()
        except (DriverError, SQLAlchemyError) as e:
            _log_failure(e)

    def drop_table(self, table_name: str) -> None:
        try:
            with self._connect() as conn:
                logger.info(f"Dropping table {table_name}...")
                status_table(table_name).drop(conn)
                conn.commit()
        except (DriverError, SQLAlchemyError) as e:
            _log_failure(e)

    # === Rows ===

    def insert_statuses(self, statuses: Iterable[StatusRecord], table_name: str) -> int:
        """Insert the statuses whose id is not yet in ``table_name``.

        Each row is committed as soon as it is written, so on failure the rows
        before it stay in the table.

        Returns:
            Number of rows actually inserted.
        """
        table = status_table(table_name)
        inserted = 0
        try:
            with self._connect() as conn:
                logger.info(f"Adding statuses into {table_name}...")
                for status in statuses:
                    if _row_exists(conn, table, status.id):
                        logger.debug(f"Status {status.id} already archived, skipping")
                        continue
                    conn.execute(sa.insert(table).values(**status.to_row()))
                    conn.commit()
                    inserted += 1
        except (DriverError, SQLAlchemyError) as e:
            _log_failure(e)

        logger.info(f"Total statuses inserted into {table_name}: {inserted}")
        return inserted

    def get_column(self, field: str, table_name: str) -> list[str | None]:
        """All values of column ``field`` in ``table_name``, as strings.

        SQL NULL is returned as ``None``. A ``field`` outside the status
        schema is logged and gives ``[]``.
        """
        table = status_table(table_name)
        if field not in table.c:
            logger.error(f"Unknown column {field!r} for table {table_name}")
            return []
        query = sa.select(table.c[field])
        try:
            with self._connect() as conn:
                logger.debug(f"Getting {field} from {table_name}...")
                values = conn.execute(query).scalars().all()
        except (DriverError, SQLAlchemyError) as e:
            _log_failure(e)
            return []
        return [None if value is None else str(value) for value in values]

    def get_row_count(self, table_name: str) -> int:
        """Number of rows in ``table_name``, or ``ROW_COUNT_FAILED``."""
        query = sa.select(sa.func.count()).select_from(sa.table(table_name))
        try:
            with self._connect() as conn:
                return conn.execute(query).scalar_one()
        except (DriverError, SQLAlchemyError) as e:
            _log_failure(e)
            return ROW_COUNT_FAILED


def _row_exists(conn: Connection, table: sa.Table, status_id: int) -> bool:
    query = sa.select(table.c.id).where(table.c.id == status_id)
    return conn.execute(query).first() is not None


def _error_code(exc: SQLAlchemyError) -> str:
    """Vendor error code from the DBAPI exception, else SQLAlchemy's own code."""
    if isinstance(exc, DBAPIError) and exc.orig is not None and exc.orig.args:
        code = exc.orig.args[0]
        if isinstance(code, int):
            return str(code)
    return exc.code or "-"


def _log_failure(exc: Exception) -> None:
    if isinstance(exc, DriverError):
        logger.error(f"Driver error ({exc.driver}): {exc}")
    else:
        logger.error(f"SQL error {_error_code(exc)}: {exc}")
