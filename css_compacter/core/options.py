"""Formatter options and the pure operations that build and update them."""

from dataclasses import dataclass, fields, replace, asdict
from enum import Enum
from typing import Any, Dict, Mapping

import orjson

from ..utils.config import DEFAULT_PX_BASE, DEFAULT_REM_BASE
from ..utils.error import OptionsError, FileOperationError

class OutputMode(str, Enum):
    MULTI_LINE = 'multi-line'
    SINGLE_LINE = 'single-line'
    MINIFY = 'minify'

class SortPreset(str, Enum):
    NONE = 'none'
    CONCENTRIC = 'concentric'
    CATEGORY = 'category'
    ALPHABETICAL = 'alphabetical'

class UnitMode(str, Enum):
    NONE = ''
    PX_TO_REM = 'px2rem'
    REM_TO_PX = 'rem2px'

class AttributeSpacing(str, Enum):
    """What symbol tightening does with whitespace after an attribute selector.

    ``fuse`` removes it like any other whitespace around ``]``.
    ``whitespace`` keeps a single space when whitespace was present and an
    identifier, class or ID follows. ``identifier`` keeps a single space
    whenever one of those follows, whether or not whitespace was present.
    """
    FUSE = 'fuse'
    WHITESPACE = 'whitespace'
    IDENTIFIER = 'identifier'

_ENUM_FIELDS = {
    'output_mode': OutputMode,
    'sort_preset': SortPreset,
    'unit_mode': UnitMode,
    'attribute_spacing': AttributeSpacing,
}

# Option names used by the browser front end
_CAMEL_CASE_NAMES = {
    'removeComments': 'remove_comments',
    'collapseWhitespace': 'collapse_whitespace',
    'tightenSymbols': 'tighten_symbols',
    'trimSemicolon': 'trim_semicolon',
    'outputMode': 'output_mode',
    'sortProperties': 'sort_properties',
    'sortPreset': 'sort_preset',
    'unitMode': 'unit_mode',
    'pxBase': 'px_base',
    'remBase': 'rem_base',
    'attributeSpacing': 'attribute_spacing',
}

@dataclass(frozen=True)
class FormatterOptions:
    """Toggles controlling a single ``format_css`` call.

    ``px_base`` and ``rem_base`` must be >= 1; callers clamp with
    :func:`clamp_base` before building options.
    """
    remove_comments: bool = True
    collapse_whitespace: bool = True
    tighten_symbols: bool = True
    trim_semicolon: bool = True
    output_mode: OutputMode = OutputMode.MULTI_LINE
    sort_properties: bool = False
    sort_preset: SortPreset = SortPreset.CONCENTRIC
    unit_mode: UnitMode = UnitMode.NONE
    px_base: float = DEFAULT_PX_BASE
    rem_base: float = DEFAULT_REM_BASE
    attribute_spacing: AttributeSpacing = AttributeSpacing.FUSE

    def __post_init__(self):
        for name, enum_type in _ENUM_FIELDS.items():
            object.__setattr__(self, name, _coerce_enum(name, enum_type, getattr(self, name)))

    @property
    def is_minify(self) -> bool:
        return self.output_mode is OutputMode.MINIFY

    @property
    def effective_collapse(self) -> bool:
        """Whitespace collapsing is forced on in minify mode."""
        return self.collapse_whitespace or self.is_minify

    @property
    def effective_tighten(self) -> bool:
        """Symbol tightening is forced on in minify mode."""
        return self.tighten_symbols or self.is_minify

    def update(self, **changes: Any) -> 'FormatterOptions':
        return update_options(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        for name in _ENUM_FIELDS:
            data[name] = data[name].value
        return data

def _coerce_enum(name: str, enum_type, value):
    if isinstance(value, enum_type):
        return value
    try:
        return enum_type(value)
    except ValueError:
        allowed = ', '.join(repr(member.value) for member in enum_type)
        raise OptionsError(f"Invalid value {value!r} for {name} (expected one of {allowed})")

def _field_names():
    return {f.name for f in fields(FormatterOptions)}

def _normalize_keys(changes: Mapping[str, Any]) -> Dict[str, Any]:
    normalized = {}
    known = _field_names()
    for key, value in changes.items():
        name = _CAMEL_CASE_NAMES.get(key, key)
        if name not in known:
            raise OptionsError(f"Unknown formatter option: {key}")
        normalized[name] = value
    return normalized

def update_options(options: FormatterOptions, **changes: Any) -> FormatterOptions:
    """Return a copy of ``options`` with ``changes`` merged in.

    Keys may use either snake_case field names or the front end's
    camelCase names. The original value is never modified.

    Raises:
        OptionsError: If a key is unknown or an enum value is invalid
    """
    if not changes:
        return options
    return replace(options, **_normalize_keys(changes))

def options_from_dict(data: Mapping[str, Any]) -> FormatterOptions:
    """Build options from a mapping, starting from the defaults."""
    if not isinstance(data, Mapping):
        raise OptionsError(f"Options must be a mapping, got {type(data).__name__}")
    return update_options(FormatterOptions(), **dict(data))

def load_options(path: str) -> FormatterOptions:
    """Load options from a JSON file.

    Raises:
        FileOperationError: If the file cannot be read
        OptionsError: If the JSON is invalid or names unknown options
    """
    try:
        with open(path, 'rb') as f:
            raw = f.read()
    except OSError as e:
        raise FileOperationError(f"Failed to read options file {path}: {e}")
    try:
        data = orjson.loads(raw)
    except orjson.JSONDecodeError as e:
        raise OptionsError(f"Invalid JSON in options file {path}: {e}")
    return options_from_dict(data)

def clamp_base(value: Any) -> float:
    """Clamp a user supplied unit base to at least 1.

    Anything that does not parse as a finite number counts as 0 and so
    clamps to 1.
    """
    try:
        number = float(value)
    except (TypeError, ValueError):
        number = 0.0
    if number != number or number in (float('inf'), float('-inf')):
        number = 0.0
    return max(number, 1)

__all__ = [
    'OutputMode',
    'SortPreset',
    'UnitMode',
    'AttributeSpacing',
    'FormatterOptions',
    'update_options',
    'options_from_dict',
    'load_options',
    'clamp_base',
]
