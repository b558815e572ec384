"""
Configuration management for git-pseudo-version.

Handles environment variable loading, validation, and provides a single
configuration object for a run. CLI arguments take precedence over
environment variables, which take precedence over defaults.
"""

import os
import re
from dataclasses import dataclass
from typing import Optional
from dotenv import load_dotenv
from loguru import logger

# Load environment variables from .env file
load_dotenv()

VALID_LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
BOOL_VALUES = {'true': True, '1': True, 'yes': True, 'false': False, '0': False, 'no': False}
MAJOR_PATTERN = re.compile(r'v(?:0|[1-9][0-9]*)')


def get_config_value(cli_args, field_name: str, env_key: str, default, value_type: type = str):
    """
    Get configuration value with proper precedence: CLI args > env vars > defaults.
    
    Args:
        cli_args: CLI arguments object or None
        field_name: Name of the CLI argument field
        env_key: Environment variable key
        default: Default value if neither CLI nor env var is set
        value_type: Type to convert the value to (str, bool)
        
    Returns:
        The configuration value converted to the specified type
    """
    cli_value = getattr(cli_args, field_name, None) if cli_args else None
    if cli_value is not None:
        return cli_value
    
    env_value = os.environ.get(env_key, '')
    if value_type == bool:
        return BOOL_VALUES.get(env_value.strip().lower(), default)
    return env_value or default


def config_source(cli_args, field_name: str, env_key: str) -> str:
    """Name the setting that supplied a value: the CLI flag if given, else the env var."""
    cli_value = getattr(cli_args, field_name, None) if cli_args else None
    if cli_value not in (None, False):
        return '--' + field_name.replace('_', '-')
    return env_key


def get_config_value_str(cli_args, field_name: str, env_key: str, default: str = '') -> str:
    """Get string configuration value."""
    return get_config_value(cli_args, field_name, env_key, default, str)


def get_config_value_bool(cli_args, field_name: str, env_key: str, default: bool = False) -> bool:
    """Get boolean configuration value."""
    return get_config_value(cli_args, field_name, env_key, default, bool)


@dataclass
class Config:
    """Configuration object containing all settings for one run."""
    
    # Repository
    directory: str
    git_path: str
    
    # Version inputs
    major: str
    older: str
    describe: bool
    
    # Logging
    log_level: str


def load_config(cli_args=None, directory: str = '.') -> Optional[Config]:
    """
    Load and validate configuration from CLI arguments and environment variables.
    
    Args:
        cli_args: Parsed CLI arguments or None
        directory: Repository directory to read revision metadata from
        
    Returns:
        Config: Validated configuration object, or None if validation failed
    """
    major = get_config_value_str(cli_args, 'major', 'PSEUDO_VERSION_MAJOR', '')
    older = get_config_value_str(cli_args, 'older', 'PSEUDO_VERSION_OLDER', '')
    # store_true flags are False rather than None when not given
    describe = bool(getattr(cli_args, 'describe', False)) or get_config_value_bool(
        None, 'describe', 'PSEUDO_VERSION_DESCRIBE', False)
    git_path = get_config_value_str(cli_args, 'git_path', 'GIT_PATH', 'git')
    log_level = get_config_value_str(cli_args, 'log_level', 'LOG_LEVEL', 'WARNING').upper()
    
    validation_errors = []
    
    if log_level not in VALID_LOG_LEVELS:
        validation_errors.append(f'LOG_LEVEL must be one of {VALID_LOG_LEVELS} (got: {log_level})')
    
    if major and not MAJOR_PATTERN.fullmatch(major):
        validation_errors.append(f'PSEUDO_VERSION_MAJOR must look like v0, v1, v2... (got: {major})')
    
    if older and describe:
        older_source = config_source(cli_args, 'older', 'PSEUDO_VERSION_OLDER')
        describe_source = config_source(cli_args, 'describe', 'PSEUDO_VERSION_DESCRIBE')
        logger.warning(f'Both {older_source} ({older}) and {describe_source} given, using {older_source}')
        describe = False
    
    if validation_errors:
        logger.error('❌ Configuration Error:')
        for i, error_msg in enumerate(validation_errors, 1):
            logger.error(f'   {i}. {error_msg}')
        return None
    
    config = Config(
        directory=directory,
        git_path=git_path,
        major=major,
        older=older,
        describe=describe,
        log_level=log_level
    )
    
    logger.debug(f'DIRECTORY = {config.directory}')
    logger.debug(f'PSEUDO_VERSION_MAJOR = {config.major or "(default)"}')
    logger.debug(f'PSEUDO_VERSION_OLDER = {config.older or "(none)"}')
    logger.debug(f'PSEUDO_VERSION_DESCRIBE = {config.describe}')
    logger.debug(f'GIT_PATH = {config.git_path}')
    
    return config
