"""
Single-row INSERT statement builder, with MySQL IGNORE and upsert variants.
"""
from typing import Any, Self

from paramsql.builders.base import SQLBuildable
from paramsql.parameter import Parameter

__all__ = ['InsertBuilder']


class InsertBuilder(SQLBuildable):
    """Fluent single-row INSERT builder.

        InsertBuilder().into('users').insert('id', 1).insert('name', 'bob')
        # INSERT INTO users (id,name) VALUES (?,?)

    Values are `Parameter`s or plain values typed through `Parameter.of`.
    Setting a column twice keeps its first position and the latest value.
    """

    def __init__(self) -> None:
        self.table = ''
        self.is_ignore = False
        self.insert_columns: dict[str, Parameter] = {}
        self.update_columns: dict[str, Parameter] = {}

    def into(self, table: str) -> Self:
        self.table = table
        return self

    def insert(self, column: str, value: Parameter | Any) -> Self:
        self.insert_columns[column] = Parameter.of(value)
        return self

    def insert_ignore(self) -> Self:
        self.is_ignore = True
        return self

    def on_duplicate_key_update(self, column: str, value: Parameter | Any) -> Self:
        self.update_columns[column] = Parameter.of(value)
        return self

    def get_params(self) -> list[Parameter]:
        return list(self.insert_columns.values()) + list(self.update_columns.values())

    def is_valid(self) -> bool:
        if not self.table or not self.insert_columns:
            return False
        return not (self.is_ignore and self.update_columns)

    def _construct_sql(self) -> str:
        keyword = 'INSERT IGNORE' if self.is_ignore else 'INSERT'
        columns = ','.join(self.insert_columns)
        markers = ','.join('?' * len(self.insert_columns))
        sql = f'{keyword} INTO {self.table} ({columns}) VALUES ({markers})'
        if self.update_columns:
            assignments = ', '.join(f'{col} = ?' for col in self.update_columns)
            sql = f'{sql} ON DUPLICATE KEY UPDATE {assignments}'
        return sql
