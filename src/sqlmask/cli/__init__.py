"""
Command-line interface for the masking functions.

Available commands:
- mask: positional masking of a single value
- mask-email: email masking of a single value
- scramble: character scrambling of a single value
- query: run SQL with the functions registered on DuckDB
"""

import sys

from sqlmask.utils.logging import setup_logging

from .commands import cmd_mask, cmd_mask_email, cmd_query, cmd_scramble
from .parser import create_parser

COMMANDS = {
    'mask': cmd_mask,
    'mask-email': cmd_mask_email,
    'scramble': cmd_scramble,
    'query': cmd_query,
}


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the sqlmask CLI"""
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, json_format=args.json_logs)

    command = COMMANDS.get(args.command)
    if command is None:
        parser.print_help()
        sys.exit(1)

    sys.exit(command(args))


__all__ = [
    'main',
    'create_parser',
    'cmd_mask',
    'cmd_mask_email',
    'cmd_scramble',
    'cmd_query',
]


if __name__ == '__main__':
    main()
