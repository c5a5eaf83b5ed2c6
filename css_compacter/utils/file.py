"""File utility for CSS Compacter."""

import os
import logging
from typing import Optional

import chardet

from .config import MAX_CSS_SIZE
from .common import compacted_name, ensure_directory
from .error import FileOperationError, ResourceLimitError

def detect_encoding(raw_data: bytes) -> str:
    """Detect the encoding of raw stylesheet bytes.

    UTF-8 is assumed whenever the bytes decode cleanly; otherwise chardet
    guesses, falling back to UTF-8.
    """
    try:
        raw_data.decode('utf-8')
        return 'utf-8'
    except UnicodeDecodeError:
        result = chardet.detect(raw_data)
        encoding = result.get('encoding') or 'utf-8'
        logging.debug(f"Detected encoding {encoding} (confidence {result.get('confidence')})")
        return encoding

def decode_css(raw_data: bytes, encoding: Optional[str] = None) -> str:
    """Decode stylesheet bytes, stripping a UTF-8 byte order mark.

    Raises:
        ResourceLimitError: If the content exceeds MAX_CSS_SIZE
        FileOperationError: If the bytes cannot be decoded
    """
    if len(raw_data) > MAX_CSS_SIZE:
        raise ResourceLimitError(
            f"CSS input too large ({len(raw_data)} bytes, max {MAX_CSS_SIZE})"
        )
    encoding = encoding or detect_encoding(raw_data)
    try:
        text = raw_data.decode(encoding)
    except (UnicodeDecodeError, LookupError) as e:
        raise FileOperationError(f"Failed to decode CSS as {encoding}: {e}")
    return text.lstrip('\ufeff')

def safe_write_file(file_path: str, content: str, encoding: str = "utf-8") -> None:
    """Write text to ``file_path``, creating missing parent directories.

    Newlines are written as given.

    Raises:
        FileOperationError: If file write fails
    """
    try:
        ensure_directory(os.path.dirname(file_path))
        with open(file_path, 'w', encoding=encoding, newline='') as f:
            f.write(content)
    except OSError as e:
        raise FileOperationError(f"Failed to write file {file_path}: {e}")

def safe_read_file(file_path: str, encoding: Optional[str] = None) -> str:
    """Safely read a stylesheet from a file.
    
    Args:
        file_path: Path to the file
        encoding: File encoding, detected when omitted
        
    Returns:
        File content
        
    Raises:
        FileOperationError: If file read fails
        ResourceLimitError: If the file exceeds MAX_CSS_SIZE
    """
    try:
        size = os.path.getsize(file_path)
        if size > MAX_CSS_SIZE:
            raise ResourceLimitError(
                f"File too large (max {MAX_CSS_SIZE / 1024 / 1024}MB): {file_path}"
            )
        with open(file_path, 'rb') as f:
            raw_data = f.read()
    except OSError as e:
        raise FileOperationError(f"Failed to read file {file_path}: {e}")
    return decode_css(raw_data, encoding)

def output_path_for(file_path: str, output_dir: Optional[str] = None) -> str:
    """Derive the compacted output path for an input stylesheet.

    ``theme.css`` becomes ``theme.compact.css``, placed next to the input
    or inside ``output_dir`` when given.
    """
    directory = output_dir or os.path.dirname(file_path)
    return os.path.join(directory, compacted_name(file_path))

# Exported functions
__all__ = [
    'detect_encoding',
    'decode_css',
    'safe_write_file',
    'safe_read_file',
    'output_path_for',
]
