"""
Fluent statement builders. Each renders SQL with `?` markers plus the
parameters for them, packaged as a `ParamSQL` by `to_param_sql()`.
"""
from paramsql.builders.base import Conditionable, SQLBuildable
from paramsql.builders.batch import BatchInsertBuilder
from paramsql.builders.delete import DeleteBuilder
from paramsql.builders.insert import InsertBuilder
from paramsql.builders.select import SelectBuilder
from paramsql.builders.union import UnionSelectBuilder
from paramsql.builders.update import UpdateBuilder

__all__ = [
    'SQLBuildable',
    'Conditionable',
    'SelectBuilder',
    'InsertBuilder',
    'UpdateBuilder',
    'DeleteBuilder',
    'UnionSelectBuilder',
    'BatchInsertBuilder',
]
