"""
CLI command implementations.

- mask / mask-email / scramble: apply one function to a single value
- query: run SQL on a DuckDB connection with the functions registered
"""

import argparse
import logging

import duckdb

from sqlmask.functions import mask_email, mask_string, scramble_string
from sqlmask.udf import connect
from sqlmask.utils.tracing import trace_operation

logger = logging.getLogger(__name__)


def _format_value(value) -> str:
    return "NULL" if value is None else str(value)


def cmd_mask(args: argparse.Namespace) -> int:
    print(mask_string(args.value, args.start, args.length, args.mask_char))
    return 0


def cmd_mask_email(args: argparse.Namespace) -> int:
    print(mask_email(args.value))
    return 0


def cmd_scramble(args: argparse.Namespace) -> int:
    print(scramble_string(args.value))
    return 0


def cmd_query(args: argparse.Namespace) -> int:
    """
    Execute a SQL statement and print the result rows tab-separated

    Args:
        args: Parsed command-line arguments

    Returns:
        Process exit status
    """
    logger.info(f"Running query against {args.database}")

    try:
        with trace_operation("cli_query", database=args.database):
            connection = connect(args.database, prefix=args.prefix)
            try:
                relation = connection.sql(args.sql)
                if relation is None:
                    # Statements without a result set (CREATE, INSERT, ...)
                    return 0

                if args.header:
                    print("\t".join(relation.columns))

                rows = relation.fetchall()
            finally:
                connection.close()

    except duckdb.Error as e:
        logger.error(f"Query failed: {e}")
        return 1

    for row in rows:
        print("\t".join(_format_value(value) for value in row))

    logger.info(f"Query returned {len(rows)} row(s)")
    return 0
