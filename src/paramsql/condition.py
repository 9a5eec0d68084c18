"""
Composable SQL condition fragments for WHERE, ON and HAVING clauses.

A `Condition` holds condition text only. Parameters for any `?` markers in the
text travel separately, supplied by the caller in marker order.

    # column1 = 'value1' OR column2 IS NULL
    Condition.eq_to('column1', "'value1'").or_(Condition.is_null('column2'))

    # (column1 = 'value1' OR column2 IS NULL) AND (column3 = column4)
    Condition.bracket(
        Condition.create("column1 = 'value1'").or_(Condition.is_null('column2'))
    ).and_bracket(Condition.create('column3 = column4'))

The empty condition is the identity for `and_` and `or_`, which makes
conditional composition read naturally:

    cond = Condition.empty() if include_all else Condition.is_null('expiry_date')
"""
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Self

from paramsql.exceptions import ValidationError
from paramsql.parameter import to_native

__all__ = ['Condition', 'PLACEHOLDER']

PLACEHOLDER = '?'


def _as_value_list(values: Any) -> Sequence[Any]:
    if values is None:
        return []
    if isinstance(values, str):
        raise ValidationError('values must be a sequence, not a string.')
    return [to_native(v) for v in values]


def _render_in_values(values: Sequence[Any], operator: str) -> str:
    """Render IN-list members: ints bare, strings single-quoted."""
    if not values:
        raise ValidationError('list cannot be empty.')

    rendered = []
    for val in values:
        if isinstance(val, int) and not isinstance(val, bool):
            rendered.append(str(val))
        elif isinstance(val, str):
            rendered.append(f"'{val}'")
        else:
            raise ValidationError(f'Unsupported type for Condition.{operator}().')
    return ','.join(rendered)


def _as_condition(condition: 'Condition | str | None') -> 'Condition | None':
    if isinstance(condition, str):
        return Condition(condition)
    return condition


@dataclass(frozen=True, slots=True)
class Condition:
    """Immutable SQL condition text. Combinators return new instances.
    """
    sql: str = ''

    # ========================= Constructors =========================

    @classmethod
    def create(cls, condition: str) -> Self:
        """Condition from raw text, e.g. `Condition.create('col1 = ?')`.
        """
        return cls(condition)

    @classmethod
    def empty(cls) -> Self:
        """Condition that is ignored by `and_` and `or_`.
        """
        return cls('')

    @classmethod
    def eq_to(cls, left: str, right: str) -> Self:
        """`left = right` for column or literal comparisons.

        Placeholders are refused here; write `Condition.create('col = ?')`.
        """
        if left == PLACEHOLDER or right == PLACEHOLDER:
            raise ValidationError(
                "Condition created by eq_to cannot use '?'. Use Condition.create() instead.")
        return cls(f'{left} = {right}')

    @classmethod
    def is_null(cls, column: str) -> Self:
        return cls(f'{column} IS NULL')

    @classmethod
    def is_not_null(cls, column: str) -> Self:
        return cls(f'{column} IS NOT NULL')

    @classmethod
    def in_(cls, column: str, values: Sequence[int | str]) -> Self:
        """`column IN (...)` with literal int or string values.

        Not meant for placeholders: strings are single-quoted and not escaped.
        Use `in_placeholders` for bound values.
        """
        values = _as_value_list(values)
        return cls(f'{column} IN ({_render_in_values(values, "in_")})')

    @classmethod
    def not_in(cls, column: str, values: Sequence[int | str]) -> Self:
        values = _as_value_list(values)
        return cls(f'{column} NOT IN ({_render_in_values(values, "not_in")})')

    @classmethod
    def in_placeholders(cls, column: str, count: int) -> Self:
        """`column IN (?,?,...)` with `count` markers.
        """
        if count <= 0:
            raise ValidationError('placeholder count must be positive.')
        return cls(f"{column} IN ({','.join([PLACEHOLDER] * count)})")

    @classmethod
    def not_in_placeholders(cls, column: str, count: int) -> Self:
        if count <= 0:
            raise ValidationError('placeholder count must be positive.')
        return cls(f"{column} NOT IN ({','.join([PLACEHOLDER] * count)})")

    @classmethod
    def bracket(cls, condition: 'Condition | str') -> Self:
        """Wrap in parentheses. An empty condition becomes `()`.
        """
        return cls(f'({_as_condition(condition).sql})')

    @classmethod
    def pick_by_flag(cls, flag: bool | None, if_true: 'Condition',
                     if_false: 'Condition') -> 'Condition':
        """Pick a condition by a tri-state flag; None picks the empty condition.
        """
        if flag is None:
            return cls.empty()
        return if_true if flag else if_false

    @staticmethod
    def is_empty(condition: 'Condition | None') -> bool:
        """True for None, the empty condition, or whitespace-only text.
        """
        return condition is None or not condition.sql or not condition.sql.strip()

    # ========================= Combinators =========================

    def _combine(self, keyword: str, other: 'Condition | str | None') -> 'Condition':
        other = _as_condition(other)
        if Condition.is_empty(other):
            return self
        if Condition.is_empty(self):
            return other
        return Condition(f'{self.sql} {keyword} {other.sql}')

    def and_(self, other: 'Condition | str | None') -> 'Condition':
        return self._combine('AND', other)

    def or_(self, other: 'Condition | str | None') -> 'Condition':
        return self._combine('OR', other)

    def and_bracket(self, other: 'Condition | str') -> 'Condition':
        """Shorthand for `self.and_(Condition.bracket(other))`."""
        return self.and_(Condition.bracket(other))

    def or_bracket(self, other: 'Condition | str') -> 'Condition':
        """Shorthand for `self.or_(Condition.bracket(other))`."""
        return self.or_(Condition.bracket(other))

    # ========================= Rendering =========================

    def as_sql(self) -> str:
        return self.sql

    def __str__(self) -> str:
        return self.sql
