"""Low-level connection utilities with no internal dependencies.

These utilities work with any connection object (raw DB-API connections
or wrappers exposing one) and have no imports
from other paramsql modules, making them safe to import without circular
dependency concerns.
"""
from typing import Any


def get_dialect_name(obj: Any) -> str:
    """Get dialect name for a database connection or engine.
    """
    if hasattr(obj, 'dialect'):
        dialect = obj.dialect
        if isinstance(dialect, str):
            return dialect.lower()
        return str(dialect.name).lower()

    if hasattr(obj, 'engine') and hasattr(obj.engine, 'dialect'):
        return str(obj.engine.dialect.name).lower()

    if hasattr(obj, 'dbapi_connection'):
        return get_dialect_name(obj.dbapi_connection)

    type_name = f'{type(obj).__module__}.{type(obj).__name__}'
    if 'psycopg' in type_name:
        return 'postgresql'
    if 'sqlite3' in type_name:
        return 'sqlite'

    raise AttributeError(f'Cannot determine dialect for {type(obj)}')


def get_raw_connection(connection: Any) -> Any:
    """Extract the raw DBAPI connection from a wrapper."""
    if hasattr(connection, 'driver_connection'):
        return connection.driver_connection
    if hasattr(connection, 'dbapi_connection'):
        return connection.dbapi_connection
    return connection
