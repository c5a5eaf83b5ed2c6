"""Configuration utility for CSS Compacter."""

# Project version
VERSION = "1.0.0"

# Unit conversion
DEFAULT_PX_BASE = 16
DEFAULT_REM_BASE = 16
NUMERIC_PRECISION = 3
ZERO_EPSILON = 1e-8

# Rendering
INDENT = '  '

# File size limits (in bytes)
MAX_CSS_SIZE = 5 * 1024 * 1024      # 5 MB

# Batch processing
MAX_WORKERS = 4

# Supported file extensions
CSS_EXTENSIONS = ['.css']

# Output naming
DEFAULT_OUTPUT_SUFFIX = '.compact.css'

# Logging
LOG_LEVEL = 'INFO'

# Other settings
ENABLE_COLOR = True
ENABLE_PROGRESS = True

# Exported config
__all__ = [
    'VERSION',
    'DEFAULT_PX_BASE', 'DEFAULT_REM_BASE', 'NUMERIC_PRECISION', 'ZERO_EPSILON',
    'INDENT', 'MAX_CSS_SIZE', 'MAX_WORKERS',
    'CSS_EXTENSIONS', 'DEFAULT_OUTPUT_SUFFIX',
    'LOG_LEVEL',
    'ENABLE_COLOR', 'ENABLE_PROGRESS',
]
