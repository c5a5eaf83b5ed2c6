"""The CSS formatting pipeline.

``format_css`` is a pure function of its input text and options: it holds
no state between calls and returns a string for any input, however
malformed.
"""

import re
from typing import Optional, Set, Tuple

from .options import FormatterOptions, OutputMode, UnitMode
from .renderer import format_blocks
from .transforms import (
    convert_units,
    get_tightener,
    select_collapser,
    strip_comments,
    trim_semicolon_before_brace,
)
from ..utils.logging import get_logger

logger = get_logger(__name__)

_SPACED_ATTRIBUTE_RE = re.compile(r'(\[[^\]]+\])\s+([.#][\w-]+)')
_ATTRIBUTE_FOLLOWER_RE = re.compile(r'(\[[^\]]+\])\s*([.#][\w-]+)')

AttributePair = Tuple[str, str]

def find_spaced_attribute_pairs(css: str) -> Set[AttributePair]:
    """Attribute selectors followed, after whitespace, by a class or ID."""
    return {(match.group(1), match.group(2)) for match in _SPACED_ATTRIBUTE_RE.finditer(css)}

def restore_attribute_spacing(css: str, pairs: Set[AttributePair]) -> str:
    """Put back the descendant space between recorded attribute/class pairs."""
    if not pairs:
        return css

    def replace(match):
        if (match.group(1), match.group(2)) in pairs:
            return f"{match.group(1)} {match.group(2)}"
        return match.group(0)

    return _ATTRIBUTE_FOLLOWER_RE.sub(replace, css)

def normalize_single_line(css: str) -> str:
    """Trim every line and drop the empty ones."""
    return '\n'.join(line.strip() for line in css.split('\n') if line.strip())

def format_css(css_text: str, options: Optional[FormatterOptions] = None) -> str:
    """Reformat ``css_text`` according to ``options``.

    Args:
        css_text: Raw CSS source, which need not be valid
        options: Formatter toggles, defaults when omitted

    Returns:
        The formatted CSS; empty for empty or whitespace-only input
    """
    if options is None:
        options = FormatterOptions()

    css = css_text.strip()
    if not css:
        return ''

    tighten = options.effective_tighten
    spaced_pairs = set() if tighten else find_spaced_attribute_pairs(css_text)

    if options.remove_comments:
        css = strip_comments(css)
    if options.unit_mode is not UnitMode.NONE:
        css = convert_units(css, options.unit_mode, options.px_base, options.rem_base)
    if options.effective_collapse:
        css = select_collapser(comments_kept=not options.remove_comments)(css)
    if tighten:
        css = get_tightener(options.attribute_spacing)(css)
    if options.trim_semicolon:
        css = trim_semicolon_before_brace(css)

    formatted = format_blocks(css, options).strip()
    formatted = restore_attribute_spacing(formatted, spaced_pairs)

    if options.output_mode is OutputMode.SINGLE_LINE:
        formatted = normalize_single_line(formatted)

    logger.debug(f"Formatted {len(css_text)} chars into {len(formatted)} chars")
    return formatted

__all__ = [
    'format_css',
    'find_spaced_attribute_pairs',
    'restore_attribute_spacing',
    'normalize_single_line',
]
