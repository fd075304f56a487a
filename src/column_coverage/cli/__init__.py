"""
Command-line interface for column coverage.

Available commands:
- compute: Compute documentation or test coverage from dbt artifacts
- report: Render a previously computed report
"""

import sys

from .commands import cmd_compute, cmd_report
from .parser import create_parser
from .settings import ComputeSettings, get_compute_settings, setup_logging


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the column-coverage CLI"""
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(args)

    if args.command == 'compute':
        cmd_compute(args)
    elif args.command == 'report':
        cmd_report(args)
    else:
        parser.print_help()
        sys.exit(1)


__all__ = [
    'main',
    'setup_logging',
    'get_compute_settings',
    'ComputeSettings',
    'cmd_compute',
    'cmd_report',
    'create_parser',
]


if __name__ == '__main__':
    main()
