"""
Multi-row INSERT builder feeding a `BatchInsertRunner`.
"""
from typing import Self

from paramsql.builders.base import SQLBuildable
from paramsql.exceptions import InvalidStateError
from paramsql.options import BuilderOptions
from paramsql.parameter import Parameter
from paramsql.runner import BatchInsertRunner, Extractor

__all__ = ['BatchInsertBuilder']


class BatchInsertBuilder(SQLBuildable):
    """Fluent INSERT builder whose columns are filled per data item.

    Each column gets an extractor that maps one data item to its value:

        runner = (BatchInsertBuilder()
                  .into('my_table')
                  .insert('col1', lambda item: Parameter.of_str(item.name))
                  .insert_on_duplicate_update('col2', lambda item: item.count)
                  .to_batch_runner())
        runner.set_data(items).execute_with(cn)
    """

    def __init__(self) -> None:
        self.table = ''
        self.is_ignore = False
        self.extractors: dict[str, Extractor] = {}
        self.update_columns: list[str] = []

    def into(self, table: str) -> Self:
        self.table = table
        return self

    def insert(self, column: str, extractor: Extractor) -> Self:
        self.extractors[column] = extractor
        return self

    def insert_ignore(self) -> Self:
        self.is_ignore = True
        return self

    def on_duplicate_key_update(self, *columns: str) -> Self:
        """Columns overwritten with the inserted value on a key conflict."""
        self.update_columns.extend(columns)
        return self

    def insert_on_duplicate_update(self, column: str, extractor: Extractor) -> Self:
        self.extractors[column] = extractor
        self.update_columns.append(column)
        return self

    def get_params(self) -> list[Parameter]:
        # Values come from the data items at run time
        return []

    def is_valid(self) -> bool:
        if not self.table or not self.extractors:
            return False
        return not (self.is_ignore and self.update_columns)

    def _base_sql(self) -> str:
        keyword = 'INSERT IGNORE' if self.is_ignore else 'INSERT'
        return f"{keyword} INTO {self.table} ({','.join(self.extractors)}) VALUES"

    def _row_sql(self) -> str:
        return f" ({','.join('?' * len(self.extractors))})"

    def _upsert_sql(self) -> str:
        if not self.update_columns:
            return ''
        assignments = ','.join(f'{col}=VALUES({col})' for col in self.update_columns)
        return f'ON DUPLICATE KEY UPDATE {assignments}'

    def _construct_sql(self) -> str:
        return f'{self._base_sql()}{self._row_sql()} {self._upsert_sql()}'.strip()

    def to_param_sql(self):
        raise InvalidStateError('Batch inserts bind per data item, use to_batch_runner()')

    def to_batch_runner(self, options: BuilderOptions | None = None) -> BatchInsertRunner:
        """Runner for this statement.

        Raises
            InvalidStateError: If the builder is incomplete
        """
        if not self.is_valid():
            raise InvalidStateError(f'{type(self).__name__} is invalid')
        return BatchInsertRunner(self._base_sql(), self._row_sql(), self._upsert_sql(),
                                 list(self.extractors.values()), options)
