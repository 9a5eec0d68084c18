"""
UNION / UNION ALL of several SELECT builders.
"""
from typing import Self

from paramsql.builders.base import SQLBuildable
from paramsql.builders.select import SelectBuilder
from paramsql.fragment import UnionType
from paramsql.parameter import Parameter

__all__ = ['UnionSelectBuilder']


class UnionSelectBuilder(SQLBuildable):
    """Joins two or more selects with UNION or UNION ALL.

        UnionSelectBuilder.create(first).union(second).union_all(third)
            .order_by('some_data')

    Parameters are each select's parameters in union order.
    """

    def __init__(self, first: SelectBuilder) -> None:
        self.selects: list[SelectBuilder] = [first]
        self.types: list[UnionType] = []
        self.order_columns: list[str] = []

    @classmethod
    def create(cls, first: SelectBuilder) -> Self:
        return cls(first)

    def union(self, select: SelectBuilder) -> Self:
        self.types.append(UnionType.UNION)
        self.selects.append(select)
        return self

    def union_all(self, select: SelectBuilder) -> Self:
        self.types.append(UnionType.UNION_ALL)
        self.selects.append(select)
        return self

    def order_by(self, column: str) -> Self:
        """ORDER BY applied to the whole union."""
        self.order_columns.append(column)
        return self

    def get_params(self) -> list[Parameter]:
        return [param for select in self.selects for param in select.get_params()]

    def is_valid(self) -> bool:
        return len(self.selects) >= 2 and len(self.types) + 1 == len(self.selects)

    def _construct_sql(self) -> str:
        parts = [self.selects[0].to_sql()]
        for union_type, select in zip(self.types, self.selects[1:]):
            parts.append(union_type.as_sql())
            parts.append(select.to_sql())
        if self.order_columns:
            parts.append(f"ORDER BY {', '.join(self.order_columns)}")
        return ' '.join(parts)
