import importlib

import pytest

MODULES = [
    'paramsql.exceptions',
    'paramsql.utils',
    'paramsql.sql',
    'paramsql.options',
    'paramsql.strategy.base',
    'paramsql.strategy.postgres',
    'paramsql.strategy.sqlite',
    'paramsql.strategy',
    'paramsql.parameter',
    'paramsql.condition',
    'paramsql.fragment',
    'paramsql.filler',
    'paramsql.statement',
    'paramsql.param_sql',
    'paramsql.runner',
    'paramsql.builders.base',
    'paramsql.builders.select',
    'paramsql.builders.insert',
    'paramsql.builders.update',
    'paramsql.builders.delete',
    'paramsql.builders.union',
    'paramsql.builders.batch',
    'paramsql.builders',
    'paramsql',
]


@pytest.mark.parametrize('module', MODULES)
def test_module_imports(module):
    """Test if modules can be imported without circular dependencies"""
    assert importlib.import_module(module) is not None


def test_public_names():
    paramsql = importlib.import_module('paramsql')
    for name in ('Parameter', 'Condition', 'ParamSQL', 'BatchInsertRunner', 'SelectBuilder',
                 'BuilderOptions', 'ValidationError', 'prepare_statement'):
        assert hasattr(paramsql, name), name


if __name__ == '__main__':
    pytest.main([__file__])
