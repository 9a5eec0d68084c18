"""
Statement handles over DB-API 2.0 cursors (PEP-249).

Parameters bind onto positional setters (`set_int(1, 42)`), but Python drivers
take a parameter sequence per `execute`. `PreparedStatement` collects the
setter calls into a row and hands it to the cursor, rewriting `?` markers for
the connection's dialect on the way.

    with prepare_statement(cn, 'INSERT INTO t (a, b) VALUES (?, ?)') as stmt:
        stmt.set_int(1, 42)
        stmt.set_string(2, 'x')
        stmt.execute()
"""
import logging
import time
from collections.abc import Sequence
from functools import wraps
from typing import Any, Protocol, Self, runtime_checkable

from paramsql.exceptions import InvalidStateError, ValidationError
from paramsql.strategy import DialectStrategy, get_db_strategy
from paramsql.utils import get_raw_connection

logger = logging.getLogger(__name__)

__all__ = ['StatementHandle', 'PreparedStatement', 'prepare_statement']


@runtime_checkable
class StatementHandle(Protocol):
    """Positional setter contract that parameters bind onto.

    Indexes are 1-based.
    """

    def set_int(self, index: int, value: int | None) -> None: ...
    def set_long(self, index: int, value: int | None) -> None: ...
    def set_double(self, index: int, value: float | None) -> None: ...
    def set_string(self, index: int, value: str | None) -> None: ...
    def set_date(self, index: int, value: Any) -> None: ...
    def set_timestamp(self, index: int, value: Any) -> None: ...
    def set_decimal(self, index: int, value: Any) -> None: ...
    def set_null(self, index: int, sql_type: int) -> None: ...
    def add_batch(self) -> None: ...
    def execute_batch(self) -> Sequence[int]: ...


def dumpsql(func):
    """Decorator for logging statement SQL, bound values and timing."""
    @wraps(func)
    def wrapper(self, *args: Any, **kwargs: Any):
        start = time.time()
        if self._batch:
            logger.debug(f'SQL:\n{self.sql}\nparams: {len(self._batch)} rows')
        else:
            logger.debug(f'SQL:\n{self.sql}\nargs: {dict(sorted(self._values.items()))}')
        try:
            return func(self, *args, **kwargs)
        finally:
            logger.debug(f'Query time: {time.time() - start:.4f}s')
    return wrapper


class PreparedStatement:
    """Statement handle bound to one SQL text and one DB-API cursor.
    """

    def __init__(self, cursor: Any, sql: str, strategy: DialectStrategy) -> None:
        self.dbapi_cursor = cursor
        self.sql = sql
        self.strategy = strategy
        self.driver_sql = strategy.standardize_sql(sql)
        self._values: dict[int, Any] = {}
        self._batch: list[tuple] = []
        self._closed = False

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    @property
    def rowcount(self) -> int:
        """Number of rows affected by the last operation."""
        return self.dbapi_cursor.rowcount

    @property
    def lastrowid(self) -> Any:
        """Key generated by the last single-row INSERT, None if the driver has none.

        sqlite3 reports the rowid. psycopg only reports an OID, so on
        postgresql add `RETURNING id` to the SQL and read it with `fetchone`.
        """
        return self.dbapi_cursor.lastrowid

    def fetchone(self) -> tuple | None:
        return self.dbapi_cursor.fetchone()

    def fetchall(self) -> list[tuple]:
        return self.dbapi_cursor.fetchall()

    # ========================= Setters =========================

    def _set(self, index: int, value: Any) -> None:
        if self._closed:
            raise InvalidStateError('Statement is closed')
        if index <= 0:
            raise ValidationError(f'Invalid index: {index}')
        self._values[index] = value

    def set_int(self, index: int, value: int | None) -> None:
        self._set(index, value)

    def set_long(self, index: int, value: int | None) -> None:
        self._set(index, value)

    def set_double(self, index: int, value: float | None) -> None:
        self._set(index, value)

    def set_string(self, index: int, value: str | None) -> None:
        self._set(index, value)

    def set_date(self, index: int, value: Any) -> None:
        self._set(index, value)

    def set_timestamp(self, index: int, value: Any) -> None:
        self._set(index, value)

    def set_decimal(self, index: int, value: Any) -> None:
        self._set(index, value)

    def set_null(self, index: int, sql_type: int) -> None:
        # DB-API drivers infer the null's type, sql_type is informational
        self._set(index, None)

    def clear_parameters(self) -> None:
        self._values.clear()

    # ========================= Execution =========================

    def _current_row(self) -> tuple:
        """Bound values in index order. Indexes must run 1..n without gaps."""
        count = len(self._values)
        if count and max(self._values) != count:
            missing = sorted(set(range(1, max(self._values) + 1)) - set(self._values))
            raise InvalidStateError(f'No value bound for parameter index {missing}')
        return self.strategy.adapt_row([self._values[i] for i in range(1, count + 1)])

    @dumpsql
    def execute(self) -> int:
        """Run the statement once with the bound row.

        Returns
            Number of rows affected as reported by the driver
        """
        self.dbapi_cursor.execute(self.driver_sql, self._current_row())
        return self.dbapi_cursor.rowcount

    def add_batch(self) -> None:
        """Queue the bound row and start a new one."""
        if self._closed:
            raise InvalidStateError('Statement is closed')
        self._batch.append(self._current_row())
        self._values.clear()

    @dumpsql
    def execute_batch(self) -> list[int]:
        """Run all queued rows with `executemany`.

        Returns
            One-element list with the aggregate affected count, or an empty
            list when nothing was queued
        """
        if not self._batch:
            return []
        rows, self._batch = self._batch, []
        self.dbapi_cursor.executemany(self.driver_sql, rows)
        return [self.dbapi_cursor.rowcount]

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._values.clear()
        self._batch.clear()
        self.dbapi_cursor.close()


def prepare_statement(cn: Any, sql: str) -> PreparedStatement:
    """Open a statement for `sql` on a database connection.

    Parameters
        cn: DB-API connection (sqlite3, psycopg) or a wrapper exposing one
        sql: SQL with `?` markers

    Returns
        PreparedStatement owning a fresh cursor; use it as a context manager
    """
    strategy = get_db_strategy(cn)
    cursor = get_raw_connection(cn).cursor()
    return PreparedStatement(cursor, sql, strategy)
