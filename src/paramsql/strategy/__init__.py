"""
Dialect strategy lookup for statement handles.

    strategy = get_db_strategy(cn)
    cursor.execute(strategy.standardize_sql(sql), strategy.adapt_row(row))
"""
from functools import lru_cache

from paramsql.strategy.base import _STRATEGY_REGISTRY
from paramsql.strategy.base import DialectStrategy as DialectStrategy
from paramsql.strategy.base import register_strategy as register_strategy
from paramsql.strategy.postgres import PostgresStrategy as PostgresStrategy
from paramsql.strategy.sqlite import SQLiteStrategy as SQLiteStrategy
from paramsql.utils import get_dialect_name


@lru_cache(maxsize=8)
def get_strategy(dialect: str) -> DialectStrategy:
    """Shared strategy instance for a registered dialect name.

    Raises
        ValueError: If no strategy is registered for the dialect
    """
    if dialect not in _STRATEGY_REGISTRY:
        raise ValueError(f'Unsupported dialect: {dialect}. Available: {sorted(_STRATEGY_REGISTRY)}')
    return _STRATEGY_REGISTRY[dialect]()


def get_db_strategy(cn) -> DialectStrategy:
    """Strategy for the dialect of a connection."""
    return get_strategy(get_dialect_name(cn))
