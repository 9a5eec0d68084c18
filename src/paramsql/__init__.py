"""
Dynamic SQL construction and parameter binding.

Conditions compose WHERE/ON/HAVING text, typed parameters carry the values
for its `?` markers, and builders assemble whole statements:

    ps = (SelectBuilder()
          .select('id').from_('users')
          .where(Condition.create('status = ?'))
          .param(Parameter.of_str('active'))
          .to_param_sql())
    with ps.prepare(cn) as stmt:
        stmt.execute()

`ParamSQL.debug_sql` and `BatchInsertRunner.debug_sql` hold the statements
with values inlined, for logs only.
"""
__version__ = '0.1.0'

from paramsql.builders import BatchInsertBuilder, DeleteBuilder, InsertBuilder
from paramsql.builders import SelectBuilder, UnionSelectBuilder, UpdateBuilder
from paramsql.condition import Condition
from paramsql.exceptions import DbConnectionError, IntegrityError
from paramsql.exceptions import InvalidStateError, OperationalError
from paramsql.exceptions import ParameterCountError, ProgrammingError
from paramsql.exceptions import SQLBuilderError, UniqueViolation
from paramsql.exceptions import ValidationError
from paramsql.filler import as_debug_sql, normalize_sql
from paramsql.fragment import Join, JoinType, UnionType
from paramsql.options import DEFAULT_MAX_BATCH_SIZE, BuilderOptions
from paramsql.param_sql import ParamSQL
from paramsql.parameter import Parameter, ParameterType, SQLType, dates
from paramsql.parameter import datetimes, decimals, doubles, ints, longs
from paramsql.parameter import strings
from paramsql.runner import BatchInsertRunner
from paramsql.statement import PreparedStatement, StatementHandle
from paramsql.statement import prepare_statement
