"""
SQLite-specific strategy implementation.

SQLite uses the `qmark` paramstyle natively, so SQL passes through unchanged.
The default sqlite3 adapters for date and datetime are deprecated and Decimal
has none, so those values are converted to text here.
"""
import datetime
import decimal
from typing import Any

from paramsql.strategy.base import DialectStrategy, register_strategy


@register_strategy('sqlite')
class SQLiteStrategy(DialectStrategy):
    """SQLite-specific operations.
    """

    @property
    def dialect_name(self) -> str:
        """Return the dialect identifier for SQLite."""
        return 'sqlite'

    def standardize_sql(self, sql: str) -> str:
        return sql

    def adapt_value(self, value: Any) -> Any:
        # datetime before date, datetime is a date subclass
        if isinstance(value, datetime.datetime):
            return value.isoformat(sep=' ')
        if isinstance(value, datetime.date):
            return value.isoformat()
        if isinstance(value, decimal.Decimal):
            return str(value)
        return value
