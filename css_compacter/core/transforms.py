"""Text level transforms applied to the whole stylesheet before splitting.

Every transform is a pure ``str -> str`` function. The formatter composes
them in a fixed order: strip comments, convert units, collapse whitespace,
tighten symbols, trim the semicolon before ``}``.
"""

import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Callable

from .options import AttributeSpacing, UnitMode
from .scanner import scan
from ..utils.config import NUMERIC_PRECISION, ZERO_EPSILON, DEFAULT_PX_BASE, DEFAULT_REM_BASE
from ..utils.logging import get_logger

logger = get_logger(__name__)

_COMMENT_RE = re.compile(r'/\*.*?\*/', re.DOTALL)
_WHITESPACE_RE = re.compile(r'\s+')
_SPACE_BEFORE_PAREN_RE = re.compile(r'([a-z0-9_-])\s+\(', re.IGNORECASE)
_SPACE_AFTER_OPEN_RE = re.compile(r'\(\s+')
_SPACE_BEFORE_CLOSE_RE = re.compile(r'\s+\)')
_SPACE_AFTER_CLOSE_RE = re.compile(r'\)\s+(?=[;:,)}])')
_SYMBOL_RE = re.compile(r'\s*([{}:;,>~+()\[\]=])\s*')
_SEMICOLON_BRACE_RE = re.compile(r';\s*}')
_DESCENDANT_START_RE = re.compile(r'[.#a-zA-Z0-9_-]')
_PX_RE = re.compile(r'(-?[0-9]*\.?[0-9]+)px\b')
_REM_RE = re.compile(r'(-?[0-9]*\.?[0-9]+)rem\b')

def strip_comments(css: str) -> str:
    """Remove every terminated ``/* ... */`` span."""
    return _COMMENT_RE.sub('', css)

def collapse_whitespace(css: str) -> str:
    """Collapse whitespace runs to one space and keep function calls compact."""
    css = _WHITESPACE_RE.sub(' ', css)
    css = _SPACE_BEFORE_PAREN_RE.sub(r'\1(', css)
    css = _SPACE_AFTER_OPEN_RE.sub('(', css)
    css = _SPACE_BEFORE_CLOSE_RE.sub(')', css)
    return _SPACE_AFTER_CLOSE_RE.sub(')', css)

def collapse_whitespace_preserve_top_level_comments(css: str) -> str:
    """Collapse whitespace everywhere except inside top-level comments.

    Comments sitting outside every rule are copied untouched; comments
    inside rule bodies are collapsed along with the rest of the body.
    """
    result = []
    buffer = []
    depth = 0

    def flush():
        if buffer:
            result.append(collapse_whitespace(''.join(buffer)))
            buffer.clear()

    for chunk, symbol in scan(css):
        if depth == 0 and chunk.startswith('/*'):
            flush()
            result.append(chunk)
            continue
        if symbol == '{':
            depth += 1
        elif symbol == '}':
            depth = max(0, depth - 1)
        buffer.append(chunk)

    flush()
    return ''.join(result)

def select_collapser(comments_kept: bool) -> Callable[[str], str]:
    """Pick the whitespace collapser for the current comment policy."""
    if comments_kept:
        return collapse_whitespace_preserve_top_level_comments
    return collapse_whitespace

class SymbolTightener:
    """Removes whitespace around ``{ } : ; , > ~ + ( ) [ ] =``.

    The only configurable part is what happens after a closing ``]``; see
    :class:`AttributeSpacing`.
    """

    def __init__(self, attribute_spacing: AttributeSpacing = AttributeSpacing.FUSE):
        self.attribute_spacing = AttributeSpacing(attribute_spacing)

    def __repr__(self):
        return f"{type(self).__name__}({self.attribute_spacing.value!r})"

    def __call__(self, css: str) -> str:
        return _SYMBOL_RE.sub(self._replace, css)

    def _replace(self, match) -> str:
        symbol = match.group(1)
        if symbol == ']' and self._keeps_space(match):
            return '] '
        return symbol

    def _keeps_space(self, match) -> bool:
        if self.attribute_spacing is AttributeSpacing.FUSE:
            return False
        following = match.string[match.end():match.end() + 1]
        if not following or not _DESCENDANT_START_RE.match(following):
            return False
        if self.attribute_spacing is AttributeSpacing.WHITESPACE:
            return match.group(0)[-1].isspace()
        return True

_TIGHTENERS = {policy: SymbolTightener(policy) for policy in AttributeSpacing}

def get_tightener(attribute_spacing: AttributeSpacing = AttributeSpacing.FUSE) -> SymbolTightener:
    return _TIGHTENERS[AttributeSpacing(attribute_spacing)]

def tighten_symbols(css: str, attribute_spacing: AttributeSpacing = AttributeSpacing.FUSE) -> str:
    return get_tightener(attribute_spacing)(css)

def trim_semicolon_before_brace(css: str) -> str:
    """Drop the ``;`` that directly precedes a ``}``."""
    return _SEMICOLON_BRACE_RE.sub('}', css)

def format_numeric(value: float, precision: int = NUMERIC_PRECISION) -> str:
    """Round half away from zero to ``precision`` places, then drop trailing
    zeros and a trailing dot.

    >>> format_numeric(1.5)
    '1.5'
    >>> format_numeric(2.0)
    '2'
    """
    quantum = Decimal(1).scaleb(-precision)
    try:
        text = str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))
    except InvalidOperation:
        # More digits than the decimal context holds
        text = f"{value:.{precision}f}"
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    if text in ('-0', ''):
        text = '0'
    return text

def _parse_number(raw: str):
    try:
        number = float(raw)
    except ValueError:
        return None
    if number != number or number in (float('inf'), float('-inf')):
        return None
    return number

def px_to_rem(css: str, base: float = DEFAULT_PX_BASE, precision: int = NUMERIC_PRECISION) -> str:
    """Rewrite ``<n>px`` as ``<n / base>rem``; zero becomes a bare ``0``."""
    def replace(match):
        number = _parse_number(match.group(1))
        if number is None:
            return match.group(0)
        if abs(number) < ZERO_EPSILON:
            return '0'
        return format_numeric(number / base, precision) + 'rem'

    return _PX_RE.sub(replace, css)

def rem_to_px(css: str, base: float = DEFAULT_REM_BASE, precision: int = NUMERIC_PRECISION) -> str:
    """Rewrite ``<n>rem`` as ``<n * base>px``."""
    def replace(match):
        number = _parse_number(match.group(1))
        if number is None:
            return match.group(0)
        return format_numeric(number * base, precision) + 'px'

    return _REM_RE.sub(replace, css)

def convert_units(css: str, unit_mode: UnitMode, px_base: float = DEFAULT_PX_BASE,
                  rem_base: float = DEFAULT_REM_BASE) -> str:
    """Apply the selected unit conversion, if any."""
    unit_mode = UnitMode(unit_mode)
    if unit_mode is UnitMode.PX_TO_REM:
        logger.debug(f"Converting px to rem (base {px_base})")
        return px_to_rem(css, px_base)
    if unit_mode is UnitMode.REM_TO_PX:
        logger.debug(f"Converting rem to px (base {rem_base})")
        return rem_to_px(css, rem_base)
    return css

__all__ = [
    'strip_comments',
    'collapse_whitespace',
    'collapse_whitespace_preserve_top_level_comments',
    'select_collapser',
    'SymbolTightener',
    'get_tightener',
    'tighten_symbols',
    'trim_semicolon_before_brace',
    'format_numeric',
    'px_to_rem',
    'rem_to_px',
    'convert_units',
]
