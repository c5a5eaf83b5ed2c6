"""Error utility for CSS Compacter."""

class CSSCompacterError(Exception):
    """Base exception for CSS Compacter."""
    pass

class OptionsError(CSSCompacterError):
    """Raised when formatter options are unknown or invalid."""
    pass

class FileOperationError(CSSCompacterError):
    """Raised when file operations fail."""
    pass

class ResourceLimitError(CSSCompacterError):
    """Raised when an input file exceeds the size limit."""
    pass

# Exported exceptions
__all__ = [
    'CSSCompacterError',
    'OptionsError',
    'FileOperationError',
    'ResourceLimitError',
]
