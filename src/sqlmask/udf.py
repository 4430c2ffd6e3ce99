"""
DuckDB scalar function registration.

Registers the masking functions on a DuckDB connection:

    mask_string(VARCHAR, BIGINT, BIGINT, VARCHAR) -> VARCHAR
    mask_email(VARCHAR) -> VARCHAR
    scramble_string(VARCHAR) -> VARCHAR

Example:
    >>> con = connect()
    >>> con.sql("SELECT mask_email('johndoe@example.com')").fetchone()
    ('j******@example.com',)

NULL arguments yield NULL without calling into Python. The mask character
is read per row.
"""

import duckdb
from duckdb.typing import BIGINT, VARCHAR
from prometheus_client import Counter, Histogram

from sqlmask.functions import (
    MASK_EMAIL,
    MASK_STRING,
    SCRAMBLE_STRING,
    mask_email,
    mask_string,
    scramble_string,
)
from sqlmask.utils.logging import ContextLogger
from sqlmask.utils.tracing import add_span_attributes, trace_function

logger = ContextLogger(__name__, component="udf")


MASKING_OPERATIONS = Counter(
    "masking_operations_total",
    "Masking function calls evaluated by the query engine",
    ["function"],
)

MASKING_TIME = Histogram(
    "masking_seconds",
    "Time spent in a masking function call",
    ["function"],
    buckets=[0.00001, 0.00005, 0.0001, 0.0005, 0.001, 0.005, 0.01],
)


_MASK_STRING_CALLS = MASKING_OPERATIONS.labels(function=MASK_STRING)
_MASK_STRING_TIME = MASKING_TIME.labels(function=MASK_STRING)
_MASK_EMAIL_CALLS = MASKING_OPERATIONS.labels(function=MASK_EMAIL)
_MASK_EMAIL_TIME = MASKING_TIME.labels(function=MASK_EMAIL)
_SCRAMBLE_CALLS = MASKING_OPERATIONS.labels(function=SCRAMBLE_STRING)
_SCRAMBLE_TIME = MASKING_TIME.labels(function=SCRAMBLE_STRING)


def _mask_string_udf(value: str, start: int, length: int, mask_char: str) -> str:
    with _MASK_STRING_TIME.time():
        result = mask_string(value, start, length, mask_char)
    _MASK_STRING_CALLS.inc()
    return result


def _mask_email_udf(value: str) -> str:
    with _MASK_EMAIL_TIME.time():
        result = mask_email(value)
    _MASK_EMAIL_CALLS.inc()
    return result


def _scramble_string_udf(value: str) -> str:
    with _SCRAMBLE_TIME.time():
        result = scramble_string(value)
    _SCRAMBLE_CALLS.inc()
    return result


# name -> (callable, parameter types, has side effects)
FUNCTIONS = {
    MASK_STRING: (_mask_string_udf, [VARCHAR, BIGINT, BIGINT, VARCHAR], False),
    MASK_EMAIL: (_mask_email_udf, [VARCHAR], False),
    # Non-deterministic, must not be constant folded or cached
    SCRAMBLE_STRING: (_scramble_string_udf, [VARCHAR], True),
}


@trace_function("register_functions")
def register_functions(
    connection: duckdb.DuckDBPyConnection,
    prefix: str = "",
) -> list[str]:
    """
    Register the masking functions on a connection.

    Args:
        connection: DuckDB connection
        prefix: Optional prefix for the SQL function names

    Returns:
        SQL names of the registered functions
    """
    registered = []

    for name, (func, parameters, side_effects) in FUNCTIONS.items():
        sql_name = f"{prefix}{name}"
        connection.create_function(
            sql_name,
            func,
            parameters,
            VARCHAR,
            side_effects=side_effects,
        )
        registered.append(sql_name)
        logger.debug("Registered function", function=sql_name)

    add_span_attributes(function_count=len(registered))
    logger.info(f"Registered {len(registered)} masking functions", prefix=prefix)

    return registered


def unregister_functions(connection: duckdb.DuckDBPyConnection, prefix: str = "") -> None:
    """Remove functions added by register_functions()."""
    for name in FUNCTIONS:
        connection.remove_function(f"{prefix}{name}")

    logger.info("Unregistered masking functions", prefix=prefix)


def connect(database: str = ":memory:", prefix: str = "", **kwargs) -> duckdb.DuckDBPyConnection:
    """
    Open a DuckDB connection with the masking functions registered.

    Args:
        database: Database path, in-memory by default
        prefix: Optional prefix for the SQL function names
        **kwargs: Passed through to duckdb.connect()
    """
    connection = duckdb.connect(database, **kwargs)
    register_functions(connection, prefix=prefix)
    return connection
