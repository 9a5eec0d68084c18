"""
Unit tests for typed parameters: factories, type inference, binding and
debug rendering.
"""
import datetime
import decimal
from unittest.mock import MagicMock

import numpy as np
import pandas as pd
import pytest
from paramsql.exceptions import InvalidStateError, ValidationError
from paramsql.parameter import Parameter, ParameterType, SQLType, dates
from paramsql.parameter import datetimes, decimals, doubles, ints, longs
from paramsql.parameter import strings, to_native


class TestFactories:
    """Typed factories tag values and reject mismatched types."""

    def test_typed_factories(self):
        assert Parameter.of_int(1).type == ParameterType.INTEGER
        assert Parameter.of_long(2**40).type == ParameterType.LONG
        assert Parameter.of_double(1.5).type == ParameterType.DOUBLE
        assert Parameter.of_str('a').type == ParameterType.STRING
        assert Parameter.of_date(datetime.date(2024, 1, 31)).type == ParameterType.DATE
        assert Parameter.of_datetime(datetime.datetime(2024, 1, 31, 1, 2, 3)).type == ParameterType.DATETIME
        assert Parameter.of_decimal(decimal.Decimal('1.10')).type == ParameterType.DECIMAL

    def test_null_values_keep_their_tag(self):
        param = Parameter.of_int(None)
        assert param.type == ParameterType.INTEGER
        assert param.is_null()
        assert not Parameter.of_int(0).is_null()

    def test_double_accepts_int(self):
        param = Parameter.of_double(3)
        assert param.value == 3.0
        assert isinstance(param.value, float)

    def test_date_truncates_datetime(self):
        param = Parameter.of_date(datetime.datetime(2024, 1, 31, 10, 30))
        assert param.value == datetime.date(2024, 1, 31)

    def test_decimal_from_int_and_str(self):
        assert Parameter.of_decimal(5).value == decimal.Decimal(5)
        assert Parameter.of_decimal('12.50').value == decimal.Decimal('12.50')

    @pytest.mark.parametrize(('factory', 'value'), [
        (Parameter.of_int, 'x'),
        (Parameter.of_int, 1.5),
        (Parameter.of_int, True),
        (Parameter.of_long, '1'),
        (Parameter.of_double, 'x'),
        (Parameter.of_str, 1),
        (Parameter.of_date, '2024-01-31'),
        (Parameter.of_datetime, datetime.date(2024, 1, 31)),
        (Parameter.of_decimal, 1.5),
        (Parameter.of_decimal, 'abc'),
    ], ids=['int-str', 'int-float', 'int-bool', 'long-str', 'double-str', 'str-int',
            'date-str', 'datetime-date', 'decimal-float', 'decimal-invalid'])
    def test_type_mismatch_rejected(self, factory, value):
        with pytest.raises(ValidationError):
            factory(value)

    def test_unknown_tag_rejected(self):
        with pytest.raises(InvalidStateError):
            Parameter('INTEGER', 1)

    def test_immutable(self):
        param = Parameter.of_int(1)
        with pytest.raises(AttributeError):
            param.value = 2


class TestInference:
    """Parameter.of infers the tag from the Python type."""

    @pytest.mark.parametrize(('value', 'expected'), [
        (1, ParameterType.INTEGER),
        (2**31 - 1, ParameterType.INTEGER),
        (-2**31, ParameterType.INTEGER),
        (2**31, ParameterType.LONG),
        (1.5, ParameterType.DOUBLE),
        ('abc', ParameterType.STRING),
        (datetime.date(2024, 1, 31), ParameterType.DATE),
        (datetime.datetime(2024, 1, 31, 1, 2, 3), ParameterType.DATETIME),
        (decimal.Decimal('1.5'), ParameterType.DECIMAL),
    ], ids=['int', 'int-max', 'int-min', 'long', 'float', 'str', 'date', 'datetime', 'decimal'])
    def test_infers_type(self, value, expected):
        assert Parameter.of(value).type == expected

    def test_parameter_passes_through(self):
        param = Parameter.of_long(1)
        assert Parameter.of(param) is param

    @pytest.mark.parametrize('value', [None, True, object(), [1]],
                             ids=['none', 'bool', 'object', 'list'])
    def test_uninferable_rejected(self, value):
        with pytest.raises(ValidationError):
            Parameter.of(value)

    def test_numpy_scalars(self):
        assert Parameter.of(np.int64(5)) == Parameter.of_int(5)
        assert Parameter.of(np.float64(2.5)) == Parameter.of_double(2.5)

    def test_pandas_timestamp(self):
        param = Parameter.of(pd.Timestamp('2024-03-20 14:23:56'))
        assert param.type == ParameterType.DATETIME
        assert param.value == datetime.datetime(2024, 3, 20, 14, 23, 56)


class TestToNative:
    """Missing values from NumPy and pandas become None."""

    @pytest.mark.parametrize('value', [None, float('nan'), np.nan, pd.NaT, pd.NA,
                                       np.datetime64('NaT'), np.float64('nan')],
                             ids=['none', 'nan', 'np-nan', 'nat', 'na', 'np-nat', 'np-float-nan'])
    def test_missing_values(self, value):
        assert to_native(value) is None

    def test_typed_factory_nulls_from_pandas(self):
        assert Parameter.of_double(np.nan).is_null()
        assert Parameter.of_datetime(pd.NaT).is_null()

    def test_datetime64(self):
        assert to_native(np.datetime64('2024-01-31T10:00:00')) == datetime.datetime(2024, 1, 31, 10)


class TestBindTo:
    """Binding dispatches on the tag alone."""

    @pytest.mark.parametrize(('param', 'setter'), [
        (Parameter.of_int(7), 'set_int'),
        (Parameter.of_long(7), 'set_long'),
        (Parameter.of_double(7.5), 'set_double'),
        (Parameter.of_str('x'), 'set_string'),
        (Parameter.of_date(datetime.date(2024, 1, 31)), 'set_date'),
        (Parameter.of_datetime(datetime.datetime(2024, 1, 31, 1, 2, 3)), 'set_timestamp'),
        (Parameter.of_decimal(decimal.Decimal('1.5')), 'set_decimal'),
    ], ids=['int', 'long', 'double', 'str', 'date', 'datetime', 'decimal'])
    def test_setter(self, mock_statement, param, setter):
        result = param.bind_to(mock_statement, 3)
        getattr(mock_statement, setter).assert_called_once_with(3, param.value)
        mock_statement.set_null.assert_not_called()
        assert result is mock_statement

    @pytest.mark.parametrize(('param', 'sql_type'), [
        (Parameter.of_int(None), SQLType.INTEGER),
        (Parameter.of_long(None), SQLType.BIGINT),
        (Parameter.of_double(None), SQLType.DOUBLE),
    ], ids=['int', 'long', 'double'])
    def test_numeric_null_uses_typed_null(self, mock_statement, param, sql_type):
        param.bind_to(mock_statement, 1)
        mock_statement.set_null.assert_called_once_with(1, sql_type)
        mock_statement.set_int.assert_not_called()
        mock_statement.set_long.assert_not_called()
        mock_statement.set_double.assert_not_called()

    @pytest.mark.parametrize(('param', 'setter'), [
        (Parameter.of_str(None), 'set_string'),
        (Parameter.of_date(None), 'set_date'),
        (Parameter.of_datetime(None), 'set_timestamp'),
        (Parameter.of_decimal(None), 'set_decimal'),
    ], ids=['str', 'date', 'datetime', 'decimal'])
    def test_other_null_uses_setter(self, mock_statement, param, setter):
        param.bind_to(mock_statement, 1)
        getattr(mock_statement, setter).assert_called_once_with(1, None)
        mock_statement.set_null.assert_not_called()

    def test_integer_type_code(self):
        assert SQLType.INTEGER == 4
        assert SQLType.BIGINT == -5
        assert SQLType.DOUBLE == 8

    @pytest.mark.parametrize('index', [0, -1])
    def test_invalid_index(self, mock_statement, index):
        with pytest.raises(ValidationError):
            Parameter.of_int(1).bind_to(mock_statement, index)

    def test_none_statement(self):
        with pytest.raises(ValidationError):
            Parameter.of_int(1).bind_to(None, 1)


class TestDebugSQL:
    """Debug literals for log output."""

    @pytest.mark.parametrize(('param', 'expected'), [
        (Parameter.of_int(123), '123'),
        (Parameter.of_long(2**40), '1099511627776'),
        (Parameter.of_double(123.45), '123.45'),
        (Parameter.of_str('HELLO'), "'HELLO'"),
        (Parameter.of_str("it's"), "'it's'"),
        (Parameter.of_date(datetime.date(2024, 1, 31)), "'2024-01-31'"),
        (Parameter.of_datetime(datetime.datetime(2024, 3, 20, 14, 23, 56)), "'2024-03-20 14:23:56'"),
        (Parameter.of_decimal(decimal.Decimal('10.50')), '10.50'),
    ], ids=['int', 'long', 'double', 'str', 'str-unescaped', 'date', 'datetime', 'decimal'])
    def test_literal(self, param, expected):
        assert param.to_debug_sql() == expected
        assert str(param) == expected

    @pytest.mark.parametrize('factory', [
        Parameter.of_int, Parameter.of_long, Parameter.of_double, Parameter.of_str,
        Parameter.of_date, Parameter.of_datetime, Parameter.of_decimal,
    ])
    def test_null(self, factory):
        assert factory(None).to_debug_sql() == 'NULL'

    def test_datetime_drops_microseconds(self):
        param = Parameter.of_datetime(datetime.datetime(2024, 3, 20, 14, 23, 56, 999))
        assert param.to_debug_sql() == "'2024-03-20 14:23:56'"

    def test_early_years_zero_padded(self):
        assert Parameter.of_date(datetime.date(999, 1, 31)).to_debug_sql() == "'0999-01-31'"
        param = Parameter.of_datetime(datetime.datetime(45, 1, 31, 1, 2, 3))
        assert param.to_debug_sql() == "'0045-01-31 01:02:03'"


class TestListHelpers:
    """Whole lists converted with one typed factory."""

    def test_helpers(self):
        assert ints([1, None]) == [Parameter.of_int(1), Parameter.of_int(None)]
        assert longs([1]) == [Parameter.of_long(1)]
        assert doubles([1.5]) == [Parameter.of_double(1.5)]
        assert dates([datetime.date(2024, 1, 1)]) == [Parameter.of_date(datetime.date(2024, 1, 1))]
        assert datetimes([]) == []
        assert decimals(['1.5']) == [Parameter.of_decimal(decimal.Decimal('1.5'))]

    def test_strings_with_getter(self):
        users = [MagicMock(username='alice'), MagicMock(username='bob')]
        assert strings(users, lambda u: u.username) == [Parameter.of_str('alice'), Parameter.of_str('bob')]
        assert strings(['a']) == [Parameter.of_str('a')]


if __name__ == '__main__':
    pytest.main([__file__])
