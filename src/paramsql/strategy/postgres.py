"""
PostgreSQL-specific strategy implementation.

psycopg uses the `format` paramstyle, so `?` markers become `%s` and literal
percent signs are doubled. Dates, datetimes and decimals are adapted natively
by psycopg.
"""
from paramsql.sql import standardize_placeholders
from paramsql.strategy.base import DialectStrategy, register_strategy


@register_strategy('postgresql')
class PostgresStrategy(DialectStrategy):
    """PostgreSQL-specific operations.
    """

    @property
    def dialect_name(self) -> str:
        """Return the dialect identifier for PostgreSQL."""
        return 'postgresql'

    def standardize_sql(self, sql: str) -> str:
        """Convert `?` markers to PostgreSQL-style (%s).
        """
        return standardize_placeholders(sql, dialect='postgresql')
