"""
Chunked batch execution of multi-row INSERT statements.

A runner holds the pieces of one INSERT statement split around its row tuple:

    base    INSERT INTO my_table (col1,col2) VALUES
    row      (?,?)
    suffix  ON DUPLICATE KEY UPDATE col2=VALUES(col2)

One statement `base row suffix` is prepared per run. Each data item is turned
into one parameter per column by the extractors, bound and queued with
`add_batch`. The queue is executed every `max_batch_size` rows and once more
for a non-empty remainder. With logging enabled, each executed chunk records
a debug statement whose VALUES list holds exactly that chunk's rows:

    INSERT INTO my_table (col1,col2) VALUES('abc',456),('def',123)
"""
import logging
from collections.abc import Callable, Iterable, Sequence
from typing import Any, Self

import pandas as pd
from paramsql.exceptions import ValidationError
from paramsql.filler import as_debug_sql
from paramsql.options import BuilderOptions
from paramsql.parameter import Parameter
from paramsql.statement import prepare_statement

logger = logging.getLogger(__name__)

__all__ = ['BatchInsertRunner', 'Extractor']

Extractor = Callable[[Any], Any]


def _as_records(data: Any) -> list[Any]:
    if data is None:
        return []
    if isinstance(data, pd.DataFrame):
        return data.to_dict('records')
    return list(data)


class BatchInsertRunner:
    """Executes one INSERT for many data items in size-bounded chunks.

    Configure with the fluent setters, then call `execute_with(cn)`. A runner
    must not be executed concurrently from several threads.
    """

    def __init__(self, base_sql: str, param_sql: str, after_sql: str = '',
                 extractors: Sequence[Extractor] = (),
                 options: BuilderOptions | None = None) -> None:
        options = options or BuilderOptions()
        self.base_sql = base_sql
        self.param_sql = param_sql
        self.after_sql = after_sql or ''
        self.extractors = list(extractors)
        self.prepared_sql = f'{base_sql} {param_sql} {self.after_sql}'.strip()
        self.max_batch_size = options.max_batch_size
        self.log_enabled = options.log_enabled
        self.data: list[Any] = []
        self.debug_sql: list[str] = []

    # ========================= Configuration =========================

    def set_data(self, data: Iterable[Any] | pd.DataFrame | None) -> Self:
        """Items to insert. DataFrame rows are passed to extractors as dicts.
        """
        self.data = _as_records(data)
        return self

    def set_max_batch_size(self, max_batch_size: int) -> Self:
        if max_batch_size is None or max_batch_size <= 0:
            raise ValidationError('batch size must be non-zero and positive.')
        self.max_batch_size = max_batch_size
        return self

    def set_log_enabled(self, log_enabled: bool) -> Self:
        self.log_enabled = log_enabled
        return self

    # ========================= Execution =========================

    def _extract(self, item: Any) -> list[Parameter]:
        params = []
        for extractor in self.extractors:
            value = extractor(item)
            params.append(value if isinstance(value, Parameter) else Parameter.of(value))
        return params

    def _flush(self, statement: Any, records: list[str], rows: int) -> int:
        affected = sum(statement.execute_batch())
        logger.debug(f'Executed batch of {rows} rows, {affected} affected')
        if self.log_enabled:
            chunk_sql = f"{self.base_sql}{','.join(records)} {self.after_sql}"
            self.debug_sql.append(chunk_sql.strip())
        records.clear()
        return affected

    def run(self, statement: Any) -> int:
        """Bind and execute all data items on an open statement handle.

        Parameters
            statement: Handle prepared for `prepared_sql`

        Returns
            Sum of affected rows over all executed chunks
        """
        self.debug_sql.clear()
        total = 0
        pending = 0
        records: list[str] = []

        for item in self.data:
            params = self._extract(item)
            for index, param in enumerate(params, start=1):
                param.bind_to(statement, index)
            statement.add_batch()
            pending += 1

            if self.log_enabled:
                records.append(as_debug_sql(self.param_sql, params))

            if pending == self.max_batch_size:
                total += self._flush(statement, records, pending)
                pending = 0

        if pending:
            total += self._flush(statement, records, pending)

        logger.debug(f'Batch insert of {len(self.data)} rows affected {total} rows')
        return total

    def execute_with(self, cn: Any) -> int:
        """Prepare the statement on a connection and run all data items.

        The statement is closed before returning, also on failure. Commit and
        rollback stay with the caller.
        """
        with prepare_statement(cn, self.prepared_sql) as statement:
            return self.run(statement)

    def __repr__(self) -> str:
        return f'BatchInsertRunner({self.prepared_sql!r}, rows={len(self.data)})'
