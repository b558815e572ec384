"""
Command-line interface for git-pseudo-version.

Reads the HEAD commit of a repository (directory given as the only argument,
or on stdin) and prints its pseudo-version to stdout.
"""

import sys
import argparse
from loguru import logger
from rich.console import Console

from .config import load_config
from .git import GitError, describe_tag, read_revision_info
from .logging_config import setup_logging
from .pseudo import pseudo_version
from .semver import classify, highest_version

# Logs share stderr so stdout carries only the version
console = Console(stderr=True)


def parse_arguments(argv=None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog='git-pseudo-version',
        description='Print a semantic pseudo-version for the HEAD commit of a git repository'
    )
    
    parser.add_argument('directory', nargs='?', help='Repository directory (read from stdin if omitted)')
    
    # Version inputs
    parser.add_argument('--major', help='Major version prefix, e.g. v2 (default: v0)')
    parser.add_argument('--older', help='Most recent tag preceding the revision, e.g. v1.2.3 (default: none)')
    parser.add_argument('--describe', action='store_true', help='Use the nearest tag from "git describe --tags" as the preceding tag')
    
    # System paths
    parser.add_argument('--git-path', help='Path to the git executable (default: git)')
    
    # Logging
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'debug', 'info', 'warning', 'error'], help='Logging level (default: WARNING)')
    
    return parser.parse_args(argv)


def read_directory(args: argparse.Namespace) -> str:
    """Return the repository directory from the argument, falling back to stdin."""
    if args.directory:
        return args.directory
    
    directory = sys.stdin.read().strip()
    if not directory:
        logger.error('❌ Expected a single directory argument or a directory on stdin')
        sys.exit(1)
    return directory


def generate(config) -> str:
    """
    Read revision metadata for the configured repository and build its pseudo-version.
    
    Raises:
        GitError: If revision metadata cannot be read
    """
    info = read_revision_info(config.directory, config.git_path)
    
    older = config.older
    if config.describe:
        # A semver tag on HEAD itself beats whatever git describe happens to pick
        older = highest_version(info.tags) or describe_tag(config.directory, config.git_path) or ''
        logger.info(f'Nearest tag: {older or "(none)"}')
    
    if older and not classify(older).is_valid:
        logger.warning(f'⚠️  {older!r} is not a semantic version, ignoring it')
    
    version = pseudo_version(config.major, older, info.time, info.revision)
    logger.debug(f'Pseudo-version for {info.revision}: {version}')
    return version


def main(argv=None) -> None:
    """Main entry point for the application."""
    setup_logging('WARNING', console=console)
    
    args = parse_arguments(argv)
    
    # Apply log level from arguments early so config debug output shows
    if args.log_level:
        setup_logging(args.log_level.upper(), console=console)
    
    directory = read_directory(args)
    
    config = load_config(args, directory)
    if config is None:
        sys.exit(1)
    
    setup_logging(config.log_level, console=console)
    
    try:
        version = generate(config)
    except GitError as e:
        logger.error(f'❌ {e}')
        sys.exit(1)
    
    print(version)


if __name__ == '__main__':
    main()
