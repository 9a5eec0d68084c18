"""
SELECT statement builder.

    SelectBuilder()
        .select('id').select('name')
        .from_('users u')
        .left_join('orders o', Condition.eq_to('o.user_id', 'u.id'))
        .where(Condition.create('u.status = ?'))
        .param(Parameter.of_str('active'))
        .order_by('name')
        .limit(10)
"""
from typing import Self

from paramsql.builders.base import Conditionable, SQLBuildable
from paramsql.condition import Condition
from paramsql.exceptions import ValidationError
from paramsql.fragment import Join
from paramsql.parameter import Parameter

__all__ = ['SelectBuilder']


class SelectBuilder(Conditionable, SQLBuildable):
    """Fluent SELECT builder with joins, grouping, paging and CTEs.

    Parameter order is CTE parameters first, then this builder's own.
    """

    def __init__(self) -> None:
        self.columns: list[str] = []
        self.table = ''
        self.is_distinct = False
        self.joins: list[Join] = []
        self.condition: Condition | None = None
        self.condition_params: list[Parameter] = []
        self.group_columns: list[str] = []
        self.having_condition: Condition | None = None
        self.order_columns: list[str] = []
        self.limit_rows: int | None = None
        self.offset_rows: int | None = None
        self.fetch_rows: int | None = None
        self.ctes: list[str] = []
        self.cte_params: list[Parameter] = []

    def select(self, column: str) -> Self:
        column = (column or '').strip()
        if column == '*':
            raise ValidationError("'SELECT *' is not allowed.")
        self.columns.append(column)
        return self

    def distinct(self) -> Self:
        self.is_distinct = True
        return self

    def from_(self, table: str) -> Self:
        self.table = table
        return self

    def inner_join(self, table: str, condition: Condition) -> Self:
        self.joins.append(Join.inner(table, condition))
        return self

    def left_join(self, table: str, condition: Condition) -> Self:
        self.joins.append(Join.left(table, condition))
        return self

    def group_by(self, column: str) -> Self:
        self.group_columns.append(column)
        return self

    def having(self, condition: Condition | str) -> Self:
        """HAVING condition. Parameters for its markers go through `param`,
        after those of the WHERE condition.
        """
        self.having_condition = Condition(condition) if isinstance(condition, str) else condition
        return self

    def order_by(self, column: str) -> Self:
        self.order_columns.append(column)
        return self

    def limit(self, rows: int) -> Self:
        self.limit_rows = rows
        return self

    def limit_offset(self, rows: int, offset: int) -> Self:
        self.limit_rows = rows
        self.offset_rows = offset
        return self

    def fetch_first(self, rows: int) -> Self:
        self.fetch_rows = rows
        return self

    def with_(self, name: str, query: 'SelectBuilder') -> Self:
        """Add a common table expression `name AS (query)`.

        The query is rendered now; later changes to it are not picked up.
        """
        self.ctes.append(f'{name} AS ({query.to_sql()})')
        self.cte_params.extend(query.get_params())
        return self

    def get_params(self) -> list[Parameter]:
        return self.cte_params + self.condition_params

    def is_valid(self) -> bool:
        return bool(self.columns) and bool(self.table)

    def _construct_sql(self) -> str:
        parts = []
        if self.ctes:
            parts.append(f"WITH {', '.join(self.ctes)}")
        parts.append('SELECT DISTINCT' if self.is_distinct else 'SELECT')
        parts.append(', '.join(self.columns))
        parts.append(f'FROM {self.table}')
        parts.extend(join.as_sql() for join in self.joins)
        if not Condition.is_empty(self.condition):
            parts.append(f'WHERE {self.condition.as_sql()}')
        if self.group_columns:
            parts.append(f"GROUP BY {', '.join(self.group_columns)}")
        if not Condition.is_empty(self.having_condition):
            parts.append(f'HAVING {self.having_condition.as_sql()}')
        if self.order_columns:
            parts.append(f"ORDER BY {', '.join(self.order_columns)}")
        if self.limit_rows is not None:
            parts.append(f'LIMIT {self.limit_rows}')
            if self.offset_rows is not None:
                parts.append(f'OFFSET {self.offset_rows}')
        if self.fetch_rows is not None:
            parts.append(f'FETCH FIRST {self.fetch_rows} ROWS ONLY')
        return ' '.join(parts)
