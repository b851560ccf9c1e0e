"""File utility for Pleeease."""

import os
import logging
from typing import Any, Dict, Optional

import aiofiles
import orjson

from .config import RC_FILENAME
from .error import ConfigError, FileOperationError

logger = logging.getLogger(__name__)


def ensure_directory(path: str) -> bool:
    """Ensure directory exists.

    Raises:
        FileOperationError: If directory creation fails
    """
    if not path:
        return True
    try:
        os.makedirs(path, exist_ok=True)
        return True
    except OSError as e:
        raise FileOperationError(f"Failed to create directory {path}: {e}")


def safe_read_file(file_path: str, encoding: str = 'utf-8') -> str:
    """Safely read content from a file.

    Args:
        file_path: Path to the file
        encoding: File encoding

    Returns:
        File content

    Raises:
        FileOperationError: If file read fails
    """
    try:
        with open(file_path, 'r', encoding=encoding) as f:
            return f.read()
    except OSError as e:
        raise FileOperationError(f"Failed to read file {file_path}: {e}")


async def read_file_async(file_path: str, encoding: str = 'utf-8') -> str:
    """Read a file without blocking the event loop."""
    try:
        async with aiofiles.open(file_path, 'r', encoding=encoding) as f:
            return await f.read()
    except OSError as e:
        raise FileOperationError(f"Failed to read file {file_path}: {e}")


async def write_file_async(file_path: str, content: str, encoding: str = 'utf-8') -> bool:
    """Write a file without blocking the event loop."""
    ensure_directory(os.path.dirname(file_path))
    try:
        async with aiofiles.open(file_path, 'w', encoding=encoding) as f:
            await f.write(content)
        return True
    except OSError as e:
        raise FileOperationError(f"Failed to write file {file_path}: {e}")


def find_config_file(directory: str = '.') -> Optional[str]:
    """Return the path of the rc file in ``directory``, if there is one."""
    candidate = os.path.join(directory, RC_FILENAME)
    if os.path.isfile(candidate):
        return candidate
    return None


def load_config_file(file_path: str) -> Dict[str, Any]:
    """Load a JSON configuration file.

    An empty file yields an empty mapping. Decoding errors are not caught.

    Raises:
        FileOperationError: If the file cannot be read
        ConfigError: If the document is not an object
    """
    content = safe_read_file(file_path)
    if not content.strip():
        return {}

    data = orjson.loads(content)
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration file {file_path} must contain an object")

    logger.debug(f"Loaded {len(data)} option(s) from {file_path}")
    return data


# Exported functions
__all__ = [
    'ensure_directory',
    'safe_read_file',
    'read_file_async',
    'write_file_async',
    'find_config_file',
    'load_config_file',
]
