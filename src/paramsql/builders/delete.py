"""
DELETE statement builder.
"""
from typing import Self

from paramsql.builders.base import Conditionable, SQLBuildable
from paramsql.condition import Condition
from paramsql.parameter import Parameter

__all__ = ['DeleteBuilder']


class DeleteBuilder(Conditionable, SQLBuildable):
    """Fluent DELETE builder. Refuses to render without a WHERE condition.
    """

    def __init__(self) -> None:
        self.table = ''
        self.condition: Condition | None = None
        self.condition_params: list[Parameter] = []

    def from_(self, table: str) -> Self:
        self.table = table
        return self

    def get_params(self) -> list[Parameter]:
        return list(self.condition_params)

    def is_valid(self) -> bool:
        return bool(self.table) and not Condition.is_empty(self.condition)

    def _construct_sql(self) -> str:
        return f'DELETE FROM {self.table} WHERE {self.condition.as_sql()}'
