"""
Import Organizer CLI - Command Line Interface

This module provides the command-line interface for Import Organizer.
"""

import argparse
import sys
from typing import Optional

from loguru import logger

from import_organizer.config.config import configs
from import_organizer.models.domain_models import ProjectConfiguration
from import_organizer.organizer import organize_project


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Configure loguru sinks for the application.

    Args:
        level: Minimum level for console output (defaults to ORGANIZER_LOG_LEVEL)
        log_file: Optional file that receives the same records (defaults to ORGANIZER_LOG_FILE)
    """
    level = (level or configs.ORGANIZER_LOG_LEVEL).upper()
    log_file = log_file if log_file is not None else configs.ORGANIZER_LOG_FILE

    logger.remove()
    logger.add(sys.stdout, level=level, format="<level>{message}</level>")
    if log_file:
        logger.add(log_file, level="DEBUG",
                   format="{time:YYYY-MM-DD HH:mm:ss} - {name} - {level} - {message}")


def organize_command(args: argparse.Namespace) -> int:
    """
    Execute the organize run for the positional directory.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    setup_logging()

    try:
        configs.validate_organizer_config()
        config = ProjectConfiguration.from_settings(args.dir)
        organize_project(config)
    except Exception as e:
        logger.debug(f"Organizer run failed: {e!r}")
        print(f"❌ Error organizing files: {e}", file=sys.stderr)
        return 1

    print(f"✅ Project files in \"{args.dir}\" organized successfully!")
    return 0


def create_parser() -> argparse.ArgumentParser:
    """
    Create and configure the argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog='import-organizer',
        description='Move project files to the folders implied by their alias-rooted and relative imports',
        epilog='Settings: ORGANIZER_SOURCE_FOLDERS, ORGANIZER_IMPORT_ALIAS, ORGANIZER_LOG_LEVEL, '
               'ORGANIZER_LOG_FILE (environment or .env)'
    )

    parser.add_argument(
        'dir',
        nargs='?',
        type=str,
        default=configs.ORGANIZER_DEFAULT_DIR,
        help=f'Project directory to organize (default: {configs.ORGANIZER_DEFAULT_DIR})'
    )

    parser.set_defaults(func=organize_command)

    return parser


def main(argv: Optional[list] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv)

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == '__main__':
    sys.exit(main())
