"""Common utilities for CSS Compacter."""

import os
from .config import CSS_EXTENSIONS, DEFAULT_OUTPUT_SUFFIX
from .error import FileOperationError

def ensure_directory(path: str) -> None:
    """Create ``path`` and its parents if missing; an empty path is the cwd.

    Raises:
        FileOperationError: If directory creation fails
    """
    if not path:
        return
    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        raise FileOperationError(f"Failed to create directory {path}: {e}")

def get_file_extension(path: str) -> str:
    """Get file extension (lowercase)."""
    return os.path.splitext(path)[1].lower()

def is_compacted_output(path: str) -> bool:
    """Whether ``path`` looks like a file this tool wrote."""
    return os.path.basename(path).lower().endswith(DEFAULT_OUTPUT_SUFFIX)

def is_css_file(path: str) -> bool:
    """Check whether path names a stylesheet."""
    return os.path.isfile(path) and get_file_extension(path) in CSS_EXTENSIONS

def compacted_name(path: str) -> str:
    """``theme.css`` -> ``theme.compact.css``; other extensions are replaced too."""
    stem = os.path.splitext(os.path.basename(path))[0]
    return stem + DEFAULT_OUTPUT_SUFFIX

# Exported functions
__all__ = [
    'ensure_directory',
    'get_file_extension',
    'is_compacted_output',
    'is_css_file',
    'compacted_name',
]
