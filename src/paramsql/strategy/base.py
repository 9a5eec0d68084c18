"""
Base strategy interface for dialect-specific statement handling.

Defines the abstract base class that all dialect strategies inherit from. A
strategy knows how a driver spells its placeholders and how bound values must
be adapted before they reach the driver, so the statement adapter can stay
dialect-agnostic.
"""
from abc import ABC, abstractmethod
from typing import Any

# Registry of dialect name -> strategy class
# Defined here to avoid circular imports (concrete strategies import from base)
_STRATEGY_REGISTRY: dict[str, type['DialectStrategy']] = {}


def register_strategy(dialect: str):
    """Decorator to register a strategy class for a dialect.

    Usage:
        @register_strategy('postgresql')
        class PostgresStrategy(DialectStrategy):
            ...
    """
    def decorator(cls: type['DialectStrategy']) -> type['DialectStrategy']:
        _STRATEGY_REGISTRY[dialect] = cls
        return cls
    return decorator


class DialectStrategy(ABC):
    """Base class for dialect-specific statement behavior.
    """

    @property
    @abstractmethod
    def dialect_name(self) -> str:
        """Return the dialect identifier."""

    @abstractmethod
    def standardize_sql(self, sql: str) -> str:
        """Rewrite builder SQL (`?` markers) for the driver.
        """

    def adapt_value(self, value: Any) -> Any:
        """Adapt a bound value for the driver. Identity by default.
        """
        return value

    def adapt_row(self, row: list[Any]) -> tuple:
        """Adapt every value of a bound row.
        """
        return tuple(self.adapt_value(v) for v in row)
