"""Core functionality for CSS formatting."""

from .options import (
    FormatterOptions,
    OutputMode,
    SortPreset,
    UnitMode,
    AttributeSpacing,
    update_options,
    options_from_dict,
    load_options,
    clamp_base,
)
from .formatter import format_css
from .batch import format_file, format_files, collect_css_files, plan_outputs

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
    'format_file',
    'format_files',
    'collect_css_files',
    'plan_outputs',
]
