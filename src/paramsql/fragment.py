"""
SQL fragments other than conditions: join clauses and union keywords.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Protocol, Self, runtime_checkable

from paramsql.condition import Condition

__all__ = ['SQLFragment', 'JoinType', 'UnionType', 'Join']


@runtime_checkable
class SQLFragment(Protocol):
    """Anything that renders itself as a piece of SQL text."""

    def as_sql(self) -> str:
        ...


class JoinType(Enum):
    LEFT = 'LEFT'
    INNER = 'INNER'

    def as_sql(self) -> str:
        return self.value


class UnionType(Enum):
    UNION = 'UNION'
    UNION_ALL = 'UNION ALL'

    def as_sql(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Join:
    """`<TYPE> JOIN <table> ON <condition>`."""
    join_type: JoinType
    table: str
    condition: Condition

    @classmethod
    def left(cls, table: str, condition: Condition) -> Self:
        return cls(JoinType.LEFT, table, condition)

    @classmethod
    def inner(cls, table: str, condition: Condition) -> Self:
        return cls(JoinType.INNER, table, condition)

    def as_sql(self) -> str:
        return f'{self.join_type.as_sql()} JOIN {self.table} ON {self.condition.as_sql()}'

    def __str__(self) -> str:
        return self.as_sql()
