"""
UPDATE statement builder.
"""
from typing import Any, Self

from paramsql.builders.base import Conditionable, SQLBuildable
from paramsql.condition import Condition
from paramsql.parameter import Parameter

__all__ = ['UpdateBuilder']


class UpdateBuilder(Conditionable, SQLBuildable):
    """Fluent UPDATE builder. A non-empty WHERE condition is required.

        UpdateBuilder().table('users').set('name', 'bob')
            .where(Condition.create('id = ?')).param(Parameter.of_int(7))
        # UPDATE users SET name=? WHERE id = ?

    Parameters are the SET values followed by the condition parameters.
    """

    def __init__(self) -> None:
        self.target = ''
        self.set_columns: dict[str, Parameter] = {}
        self.condition: Condition | None = None
        self.condition_params: list[Parameter] = []

    def table(self, name: str) -> Self:
        self.target = name
        return self

    def set(self, column: str, value: Parameter | Any) -> Self:
        self.set_columns[column] = Parameter.of(value)
        return self

    def get_params(self) -> list[Parameter]:
        return list(self.set_columns.values()) + self.condition_params

    def is_valid(self) -> bool:
        return bool(self.target) and bool(self.set_columns) and not Condition.is_empty(self.condition)

    def _construct_sql(self) -> str:
        assignments = ','.join(f'{col}=?' for col in self.set_columns)
        return f'UPDATE {self.target} SET {assignments} WHERE {self.condition.as_sql()}'
