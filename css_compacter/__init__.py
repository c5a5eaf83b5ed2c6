"""CSS Compacter: normalize, sort, convert and minify stylesheets."""

from .core import (
    FormatterOptions,
    OutputMode,
    SortPreset,
    UnitMode,
    AttributeSpacing,
    update_options,
    options_from_dict,
    load_options,
    clamp_base,
    format_css,
    format_files,
)
from .utils.config import VERSION

__version__ = VERSION

__all__ = [
    'FormatterOptions',
    'OutputMode',
    'SortPreset',
    'UnitMode',
    'AttributeSpacing',
    'update_options',
    'options_from_dict',
    'load_options',
    'clamp_base',
    'format_css',
    'format_files',
    '__version__',
]
