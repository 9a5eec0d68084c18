"""
Exception classes for SQL building and parameter binding.

Errors raised by this package derive from `SQLBuilderError`. Errors raised by
the database driver while binding or executing are never wrapped; the driver
groups below exist so callers can catch them without importing each driver.
"""
import sqlite3

import psycopg


class SQLBuilderError(Exception):
    """Base class for all paramsql errors.
    """


class ValidationError(SQLBuilderError, ValueError):
    """Invalid argument passed to a fragment, parameter or runner.
    """


class ParameterCountError(ValidationError):
    """Placeholder count does not match the number of parameters.
    """


class InvalidStateError(SQLBuilderError, RuntimeError):
    """Builder is incomplete or an internal invariant was violated.
    """


DbConnectionError = (
    psycopg.OperationalError,
    psycopg.InterfaceError,
    sqlite3.OperationalError,
    sqlite3.InterfaceError,
    )

IntegrityError = (
    psycopg.IntegrityError,
    sqlite3.IntegrityError,
    )

ProgrammingError = (
    psycopg.ProgrammingError,
    psycopg.DatabaseError,
    sqlite3.ProgrammingError,
    sqlite3.DatabaseError,
    )

OperationalError = (
    psycopg.OperationalError,
    sqlite3.OperationalError,
    )

UniqueViolation = (
    psycopg.errors.UniqueViolation,
    sqlite3.IntegrityError,
    )
