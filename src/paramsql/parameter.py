"""
Typed bind parameters.

A `Parameter` pairs a value with one tag from a closed set of kinds. The tag
alone decides how the value is bound onto a statement and how it is rendered
in debug SQL, so consumers iterate parameters without inspecting values:

    INTEGER, LONG, DOUBLE   null bound through set_null(index, sql_type)
    STRING, DECIMAL         null bound through the ordinary setter
    DATE, DATETIME          null bound through the ordinary setter

NumPy scalars and pandas missing values are normalized to native Python
values (or None) before tagging.
"""
import datetime
import decimal
import math
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Self

import numpy as np
import pandas as pd
from paramsql.exceptions import InvalidStateError, ValidationError

__all__ = [
    'SQLType',
    'ParameterType',
    'Parameter',
    'ints',
    'longs',
    'doubles',
    'strings',
    'dates',
    'datetimes',
    'decimals',
]

INT32_MIN = -2**31
INT32_MAX = 2**31 - 1


class SQLType(IntEnum):
    """SQL type codes passed to `set_null`. Values are the ODBC SQL type codes.
    """
    INTEGER = 4
    BIGINT = -5
    DOUBLE = 8
    VARCHAR = 12
    DATE = 91
    TIMESTAMP = 93
    DECIMAL = 3


class ParameterType(Enum):
    """Closed set of bindable value kinds.

    Each member carries the statement setter name, the SQL type code and
    whether a null value needs the explicit typed-null bind.
    """
    INTEGER = ('set_int', SQLType.INTEGER, True)
    LONG = ('set_long', SQLType.BIGINT, True)
    DOUBLE = ('set_double', SQLType.DOUBLE, True)
    STRING = ('set_string', SQLType.VARCHAR, False)
    DATE = ('set_date', SQLType.DATE, False)
    DATETIME = ('set_timestamp', SQLType.TIMESTAMP, False)
    DECIMAL = ('set_decimal', SQLType.DECIMAL, False)

    def __init__(self, setter: str, sql_type: SQLType, typed_null: bool) -> None:
        self.setter = setter
        self.sql_type = sql_type
        self.typed_null = typed_null


def _quoted(value: Any) -> str:
    return f"'{value}'"


_DEBUG_FORMATTERS: dict[ParameterType, Callable[[Any], str]] = {
    ParameterType.INTEGER: str,
    ParameterType.LONG: str,
    ParameterType.DOUBLE: str,
    ParameterType.DECIMAL: str,
    ParameterType.STRING: _quoted,
    ParameterType.DATE: lambda v: _quoted(v.isoformat()),
    ParameterType.DATETIME: lambda v: _quoted(f'{v.year:04d}-{v:%m-%d %H:%M:%S}'),
}


def to_native(value: Any) -> Any:
    """Convert NumPy and pandas scalars to plain Python values.

    NaN, NaT and pd.NA become None.
    """
    if value is None or value is pd.NaT or value is pd.NA:
        return None

    if isinstance(value, float) and (math.isnan(value) or math.isinf(value)):
        return None

    if isinstance(value, np.datetime64):
        if np.isnat(value):
            return None
        return pd.Timestamp(value).to_pydatetime()

    if isinstance(value, np.floating):
        if np.isnan(value) or np.isinf(value):
            return None
        return value.item()

    if isinstance(value, (np.integer, np.bool_)):
        return value.item()

    if isinstance(value, pd.Timestamp):
        return value.to_pydatetime()

    return value


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True, slots=True)
class Parameter:
    """Immutable typed bind value.

    Build instances through the typed factories (`of_int`, `of_str`, ...) or
    through `of`, which infers the tag from the Python type.
    """
    type: ParameterType
    value: Any = None

    def __post_init__(self):
        if not isinstance(self.type, ParameterType):
            raise InvalidStateError(f'Unsupported parameter type: {self.type!r}')

    # ========================= Factories =========================

    @classmethod
    def of_int(cls, value: int | None) -> Self:
        value = to_native(value)
        if value is not None and not _is_int(value):
            raise ValidationError(f'Expected int, got {type(value).__name__}')
        return cls(ParameterType.INTEGER, value)

    @classmethod
    def of_long(cls, value: int | None) -> Self:
        value = to_native(value)
        if value is not None and not _is_int(value):
            raise ValidationError(f'Expected int, got {type(value).__name__}')
        return cls(ParameterType.LONG, value)

    @classmethod
    def of_double(cls, value: float | None) -> Self:
        value = to_native(value)
        if value is not None:
            if not isinstance(value, float) and not _is_int(value):
                raise ValidationError(f'Expected float, got {type(value).__name__}')
            value = float(value)
        return cls(ParameterType.DOUBLE, value)

    @classmethod
    def of_str(cls, value: str | None) -> Self:
        value = to_native(value)
        if value is not None and not isinstance(value, str):
            raise ValidationError(f'Expected str, got {type(value).__name__}')
        return cls(ParameterType.STRING, value)

    @classmethod
    def of_date(cls, value: datetime.date | None) -> Self:
        """Date parameter. A datetime is truncated to its date.
        """
        value = to_native(value)
        if isinstance(value, datetime.datetime):
            value = value.date()
        if value is not None and not isinstance(value, datetime.date):
            raise ValidationError(f'Expected date, got {type(value).__name__}')
        return cls(ParameterType.DATE, value)

    @classmethod
    def of_datetime(cls, value: datetime.datetime | None) -> Self:
        value = to_native(value)
        if value is not None and not isinstance(value, datetime.datetime):
            raise ValidationError(f'Expected datetime, got {type(value).__name__}')
        return cls(ParameterType.DATETIME, value)

    @classmethod
    def of_decimal(cls, value: decimal.Decimal | int | str | None) -> Self:
        value = to_native(value)
        if value is None or isinstance(value, decimal.Decimal):
            return cls(ParameterType.DECIMAL, value)
        if not _is_int(value) and not isinstance(value, str):
            raise ValidationError(f'Expected Decimal, got {type(value).__name__}')
        try:
            return cls(ParameterType.DECIMAL, decimal.Decimal(value))
        except decimal.InvalidOperation as e:
            raise ValidationError(f'Invalid decimal value: {value!r}') from e

    @classmethod
    def of(cls, value: Any) -> Self:
        """Create a parameter, inferring its type from the value.

        Ints within the signed 32-bit range become INTEGER, larger ones LONG.
        None cannot be inferred; use a typed factory for nulls.
        """
        if isinstance(value, Parameter):
            return value
        value = to_native(value)
        if value is None:
            raise ValidationError('Cannot infer parameter type from None, use a typed factory')
        if isinstance(value, bool):
            raise ValidationError('bool is not a supported parameter type')
        if isinstance(value, int):
            if INT32_MIN <= value <= INT32_MAX:
                return cls(ParameterType.INTEGER, value)
            return cls(ParameterType.LONG, value)
        if isinstance(value, float):
            return cls(ParameterType.DOUBLE, value)
        if isinstance(value, str):
            return cls(ParameterType.STRING, value)
        if isinstance(value, datetime.datetime):
            return cls(ParameterType.DATETIME, value)
        if isinstance(value, datetime.date):
            return cls(ParameterType.DATE, value)
        if isinstance(value, decimal.Decimal):
            return cls(ParameterType.DECIMAL, value)
        raise ValidationError(f'Unsupported parameter type: {type(value).__name__}')

    # ========================= Operations =========================

    def is_null(self) -> bool:
        return self.value is None

    def bind_to(self, statement: Any, index: int) -> Any:
        """Bind this value at a 1-based position of a statement handle.

        Null INTEGER/LONG/DOUBLE values go through
        `statement.set_null(index, sql_type)`; every other value, null or
        not, goes through the type's ordinary setter.

        Parameters
            statement: Object implementing the statement handle contract
            index: 1-based placeholder position

        Returns
            The same statement
        """
        if statement is None:
            raise ValidationError('Statement cannot be None')
        if index <= 0:
            raise ValidationError(f'Invalid index: {index}')

        if self.value is None and self.type.typed_null:
            statement.set_null(index, self.type.sql_type)
            return statement

        getattr(statement, self.type.setter)(index, self.value)
        return statement

    def to_debug_sql(self) -> str:
        """Render the value as an inline SQL literal for logging.

        Strings are quoted without escaping; the output is not safe to execute.
        """
        if self.value is None:
            return 'NULL'
        return _DEBUG_FORMATTERS[self.type](self.value)

    def __str__(self) -> str:
        return self.to_debug_sql()


# ========================= List helpers =========================

def ints(values: Iterable[int | None]) -> list[Parameter]:
    return [Parameter.of_int(v) for v in values]


def longs(values: Iterable[int | None]) -> list[Parameter]:
    return [Parameter.of_long(v) for v in values]


def doubles(values: Iterable[float | None]) -> list[Parameter]:
    return [Parameter.of_double(v) for v in values]


def strings(values: Iterable[Any], getter: Callable[[Any], str | None] | None = None) -> list[Parameter]:
    """String parameters from a collection.

    With a getter, each item is mapped through it first, e.g.
    `strings(users, lambda u: u.name)`.
    """
    if getter is None:
        return [Parameter.of_str(v) for v in values]
    return [Parameter.of_str(getter(v)) for v in values]


def dates(values: Iterable[datetime.date | None]) -> list[Parameter]:
    return [Parameter.of_date(v) for v in values]


def datetimes(values: Iterable[datetime.datetime | None]) -> list[Parameter]:
    return [Parameter.of_datetime(v) for v in values]


def decimals(values: Iterable[decimal.Decimal | None]) -> list[Parameter]:
    return [Parameter.of_decimal(v) for v in values]
