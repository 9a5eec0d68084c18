"""
Parameterized SQL paired with its ordered parameters.
"""
from collections.abc import Iterable
from typing import Any

from paramsql.filler import as_debug_sql
from paramsql.parameter import Parameter
from paramsql.statement import PreparedStatement, prepare_statement

__all__ = ['ParamSQL']


class ParamSQL:
    """Immutable (SQL, parameters, debug SQL) triple produced by a builder.

    The debug SQL is rendered at construction, so a placeholder/parameter
    count mismatch fails here and nowhere later.

    Parameters
        sql: SQL with `?` markers, kept unchanged as `prepared_sql`
        params: Parameters in marker order

    Raises
        ParameterCountError: If the number of `?` markers differs from the
            number of parameters
    """

    __slots__ = ('_prepared_sql', '_params', '_debug_sql')

    def __init__(self, sql: str, params: Iterable[Parameter]) -> None:
        self._prepared_sql = sql
        self._params = tuple(params)
        self._debug_sql = as_debug_sql(sql, self._params)

    @property
    def prepared_sql(self) -> str:
        return self._prepared_sql

    @property
    def debug_sql(self) -> str:
        """One-line SQL with parameters inlined. For logs only."""
        return self._debug_sql

    @property
    def parameters(self) -> tuple[Parameter, ...]:
        return self._params

    def bind(self, statement: Any) -> Any:
        """Bind every parameter onto a statement at indexes 1..n.

        Returns
            The same statement
        """
        for index, param in enumerate(self._params, start=1):
            param.bind_to(statement, index)
        return statement

    def prepare(self, cn: Any) -> PreparedStatement:
        """Open a statement on a connection and bind the parameters to it.

        The caller owns the returned statement:

            with param_sql.prepare(cn) as stmt:
                stmt.execute()
        """
        statement = prepare_statement(cn, self._prepared_sql)
        try:
            return self.bind(statement)
        except Exception:
            statement.close()
            raise

    def __repr__(self) -> str:
        return f'ParamSQL({self._prepared_sql!r}, {list(self._params)!r})'

    def __str__(self) -> str:
        return self._debug_sql
