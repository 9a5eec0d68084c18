"""
Debug rendering of parameterized SQL.

Produces a one-line statement with every `?` replaced by the matching
parameter's debug literal, for logs. The output is documentation only: it is
not escaped and date formats may not suit every server. Always execute the
parameterized SQL.
"""
from collections.abc import Sequence

from paramsql.condition import PLACEHOLDER
from paramsql.exceptions import ParameterCountError
from paramsql.parameter import Parameter

__all__ = ['normalize_sql', 'count_placeholders', 'as_debug_sql']


def normalize_sql(sql: str) -> str:
    """Collapse multi-line SQL into one line.

    Lines are trimmed, blank lines dropped and the rest joined by single
    spaces. Placeholder count and order are unchanged.
    """
    return ' '.join(line.strip() for line in sql.splitlines() if line.strip())


def count_placeholders(sql: str) -> int:
    """Count `?` characters. Every `?` counts, including ones inside literals.
    """
    return sql.count(PLACEHOLDER)


def as_debug_sql(sql: str | None, params: Sequence[Parameter]) -> str | None:
    """Inline parameters into SQL for logging.

    Parameters
        sql: SQL with `?` markers; None is returned unchanged
        params: One parameter per marker, in marker order

    Returns
        Normalized one-line SQL without `?` markers

    Raises
        ParameterCountError: If marker and parameter counts differ
    """
    if sql is None:
        return None

    sql = normalize_sql(sql)
    if count_placeholders(sql) != len(params):
        raise ParameterCountError(
            f'Placeholder and parameter count is not matched: '
            f'{count_placeholders(sql)} placeholders, {len(params)} parameters')

    parts = sql.split(PLACEHOLDER)
    result = [parts[0]]
    for param, part in zip(params, parts[1:]):
        result.append(param.to_debug_sql())
        result.append(part)
    return ''.join(result)
