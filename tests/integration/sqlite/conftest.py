"""
Fixtures for SQLite integration tests.
"""
import pytest


@pytest.fixture
def fetch_rows(sqlite_conn):
    """Read back test_table ordered by id."""
    def fetch(where='1 = 1'):
        cursor = sqlite_conn.execute(
            f'SELECT name, value, price, created, updated FROM test_table WHERE {where} ORDER BY id')
        return cursor.fetchall()
    return fetch
