"""
Shared contract of the statement builders.

Builders are fluent: every configuring method mutates the builder and returns
it. They collect parameters in marker order and hand both to `ParamSQL`,
which performs the placeholder/parameter count check.
"""
from abc import ABC, abstractmethod
from typing import Self

from paramsql.condition import Condition
from paramsql.exceptions import InvalidStateError
from paramsql.param_sql import ParamSQL
from paramsql.parameter import Parameter

__all__ = ['SQLBuildable', 'Conditionable']


class SQLBuildable(ABC):
    """Builder that renders a single statement.
    """

    @abstractmethod
    def is_valid(self) -> bool:
        """Whether enough has been configured to render a statement."""

    @abstractmethod
    def _construct_sql(self) -> str:
        """Render the statement. Only called on a valid builder."""

    @abstractmethod
    def get_params(self) -> list[Parameter]:
        """Parameters in marker order."""

    def to_sql(self) -> str:
        """Render the statement with `?` markers.

        Raises
            InvalidStateError: If the builder is incomplete
        """
        if not self.is_valid():
            raise InvalidStateError(f'{type(self).__name__} is invalid')
        return self._construct_sql()

    def to_param_sql(self) -> ParamSQL:
        return ParamSQL(self.to_sql(), self.get_params())

    def __str__(self) -> str:
        return self.to_sql()


class Conditionable:
    """WHERE condition plus the parameters for its markers.
    """
    condition: Condition | None
    condition_params: list[Parameter]

    def where(self, condition: Condition | str) -> Self:
        """Set the WHERE condition, replacing any earlier one."""
        self.condition = Condition(condition) if isinstance(condition, str) else condition
        return self

    def param(self, *params: Parameter) -> Self:
        """Append parameters for markers in the condition, in marker order."""
        self.condition_params.extend(Parameter.of(p) for p in params)
        return self
