"""
Command-line argument parser configuration.

Defines the sqlmask commands and their options.
"""

import argparse

from sqlmask.config import default_mask_char


def create_parser() -> argparse.ArgumentParser:
    """
    Create and configure the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="sqlmask",
        description="String masking functions for DuckDB",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Mask five characters starting at the third
  sqlmask mask "hello world" --start 3 --length 5

  # Mask the local part of an email address
  sqlmask mask-email johndoe@example.com

  # Shuffle the characters of a string
  sqlmask scramble password

  # Run SQL with the functions registered
  sqlmask query "SELECT mask_email(email) FROM 'customers.csv'"
        """
    )

    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        default='WARNING',
        help='Logging level (default: WARNING)'
    )
    parser.add_argument(
        '--json-logs',
        action='store_true',
        help='Emit logs as JSON'
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # ========== mask command ==========
    mask_parser = subparsers.add_parser('mask', help='Mask a run of characters')
    mask_parser.add_argument('value', help='String to mask')
    mask_parser.add_argument(
        '--start',
        type=int,
        default=1,
        help='1-based position of the first masked character (default: 1)'
    )
    mask_parser.add_argument(
        '--length',
        type=int,
        required=True,
        help='Number of characters to mask'
    )
    mask_parser.add_argument(
        '--mask-char',
        default=default_mask_char(),
        help='Mask character (default: SQLMASK_DEFAULT_MASK_CHAR or *)'
    )

    # ========== mask-email command ==========
    email_parser = subparsers.add_parser('mask-email', help='Mask an email local part')
    email_parser.add_argument('value', help='Email address to mask')

    # ========== scramble command ==========
    scramble_parser = subparsers.add_parser('scramble', help='Shuffle the characters of a string')
    scramble_parser.add_argument('value', help='String to scramble')

    # ========== query command ==========
    query_parser = subparsers.add_parser('query', help='Run SQL with the masking functions registered')
    query_parser.add_argument('sql', help='SQL statement to execute')
    query_parser.add_argument(
        '--database',
        default=':memory:',
        help='DuckDB database file (default: in-memory)'
    )
    query_parser.add_argument(
        '--prefix',
        default='',
        help='Prefix for the registered function names'
    )
    query_parser.add_argument(
        '--header',
        action='store_true',
        help='Print column names before the rows'
    )

    return parser
