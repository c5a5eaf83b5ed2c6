"""Property classification and declaration ordering.

Declarations are ordered by the group their property belongs to, then by
the position of the matching pattern inside that group, then by their
original position. Patterns are plain names (matching the property itself
or any ``name-*`` longhand) or compiled regular expressions.
"""

import re
import sys
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

from .options import SortPreset

PropertyPattern = Union[str, re.Pattern]

EXACT_MATCH = 3
REGEX_MATCH = 2
PREFIX_MATCH = 1
NO_MATCH = 0

UNCLASSIFIED_INDEX = sys.maxsize

_VENDOR_PREFIX_RE = re.compile(r'^-(webkit|moz|ms|o)-', re.IGNORECASE)

@dataclass(frozen=True)
class PropertyGroup:
    name: str
    patterns: Tuple[PropertyPattern, ...]

@dataclass(frozen=True)
class MatchResult:
    group_index: int
    property_index: int
    specificity: int

# Box model centric order, positioning outwards in
CONCENTRIC_GROUPS = (
    PropertyGroup('layout-position', (
        'display',
        'contain',
        'contain-intrinsic-size',
        'position',
        'inset',
        'inset-block',
        'inset-inline',
        'top',
        'right',
        'bottom',
        'left',
        'float',
        'clear',
        'isolation',
        'z-index',
        'flex-direction',
        'flex-wrap',
        'flex-flow',
        'flex',
        'flex-grow',
        'flex-shrink',
        'flex-basis',
        'justify',
        'align',
        'place',
        'order',
        'grid-template',
        'grid-auto',
        'grid',
        'grid-row',
        'grid-column',
        'gap',
        'row-gap',
        'column-gap',
        'columns',
        'column',
    )),
    PropertyGroup('visibility-layer', (
        'visibility',
        'opacity',
        'z-index',
    )),
    PropertyGroup('box-layer', (
        'margin',
        'outline',
        'border',
        'background',
        'padding',
    )),
    PropertyGroup('sizing-overflow', (
        'box-sizing',
        'width',
        'min-width',
        'max-width',
        'inline-size',
        'min-inline-size',
        'max-inline-size',
        'height',
        'min-height',
        'max-height',
        'block-size',
        'min-block-size',
        'max-block-size',
        'aspect-ratio',
        'object-fit',
        'object-position',
        'overflow',
        'overscroll',
        'scroll-behavior',
        'scroll-snap',
        'scroll-margin',
        'scroll-padding',
        'scrollbar',
    )),
    PropertyGroup('typography', (
        'font',
        'line-height',
        'line-clamp',
        'letter-spacing',
        'word',
        'text',
        'writing',
        'white-space',
        'tab-size',
        'hyphen',
        'hyphenate',
        'quotes',
        'list-style',
        'accent-color',
        'color',
        'caret',
        'vertical-align',
    )),
    PropertyGroup('visual-interaction', (
        'box-decoration',
        'box-shadow',
        'filter',
        'backdrop-filter',
        'mix-blend-mode',
        'background-blend-mode',
        'mask',
        'clip',
        'shape',
        'image',
        'fill',
        'stroke',
        'transform',
        'perspective',
        'backface-visibility',
        'transition',
        'animation',
        'cursor',
        'pointer',
        'user-select',
        'touch-action',
        'will-change',
        'appearance',
        'zoom',
        'resize',
        'content',
    )),
)

# Flatter positioning / display-box / border-background / typography / interaction order
CATEGORY_GROUPS = (
    PropertyGroup('positioning', ('position', 'top', 'right', 'bottom', 'left', 'z-index')),
    PropertyGroup('display-box', (
        'display',
        'float',
        'clear',
        'flex',
        'flex-direction',
        'flex-wrap',
        'flex-flow',
        'flex-grow',
        'flex-shrink',
        'flex-basis',
        'justify',
        'align',
        'place',
        'order',
        'grid',
        'grid-template',
        'grid-auto',
        'grid-row',
        'grid-column',
        'gap',
        'row-gap',
        'column-gap',
        'width',
        'min-width',
        'max-width',
        'height',
        'min-height',
        'max-height',
        'inline-size',
        'block-size',
        'margin',
        'padding',
        'box-sizing',
        'overflow',
        'overflow-x',
        'overflow-y',
    )),
    PropertyGroup('border-background', (
        'border',
        'border-top',
        'border-right',
        'border-bottom',
        'border-left',
        'border-radius',
        'outline',
        'background',
        'box-shadow',
    )),
    PropertyGroup('typography', ('font', 'line-height', 'text', 'color')),
    PropertyGroup('interaction', ('cursor', 'transition', 'transform', 'animation')),
    PropertyGroup('etc', ('content', 'list-style', 'appearance')),
)

PRESET_GROUPS = {
    SortPreset.CONCENTRIC: CONCENTRIC_GROUPS,
    SortPreset.CATEGORY: CATEGORY_GROUPS,
}

def match_pattern(prop: str, pattern: PropertyPattern) -> int:
    """Score how specifically ``pattern`` matches a normalized property name."""
    if isinstance(pattern, str):
        name = pattern.lower()
        if prop == name:
            return EXACT_MATCH
        if prop.startswith(name + '-'):
            return PREFIX_MATCH
        return NO_MATCH
    return REGEX_MATCH if pattern.search(prop) else NO_MATCH

def resolve_property_order(prop: str, groups: Sequence[PropertyGroup] = CONCENTRIC_GROUPS) -> Optional[MatchResult]:
    """Find the most specific pattern for ``prop``.

    Among equally specific matches the earliest pattern wins, by group and
    then by position within the group. Returns None when nothing matches.
    """
    best = None
    for group_index, group in enumerate(groups):
        for property_index, pattern in enumerate(group.patterns):
            specificity = match_pattern(prop, pattern)
            if specificity == NO_MATCH:
                continue
            if best is None or specificity > best.specificity:
                best = MatchResult(group_index, property_index, specificity)
    return best

def extract_property_name(declaration: str) -> str:
    """Lower-cased property name without any vendor prefix."""
    raw = declaration.split(':', 1)[0].strip()
    return _VENDOR_PREFIX_RE.sub('', raw).lower()

class DeclarationSorter:
    """Orders declarations; the base class keeps source order."""

    def sort(self, declarations: List[str]) -> List[str]:
        return list(declarations)

    def __call__(self, declarations: List[str]) -> List[str]:
        if not declarations:
            return list(declarations)
        return self.sort(declarations)

class GroupedSorter(DeclarationSorter):
    """Stable sort by (group, pattern position, original position)."""

    def __init__(self, groups: Sequence[PropertyGroup]):
        self.groups = tuple(groups)

    def sort_key(self, declaration: str, original_index: int) -> Tuple[int, int, int]:
        resolved = resolve_property_order(extract_property_name(declaration), self.groups)
        if resolved is None:
            return len(self.groups), UNCLASSIFIED_INDEX, original_index
        return resolved.group_index, resolved.property_index, original_index

    def sort(self, declarations: List[str]) -> List[str]:
        keyed = [
            (self.sort_key(declaration, index), declaration)
            for index, declaration in enumerate(declarations)
        ]
        keyed.sort(key=lambda item: item[0])
        return [declaration for _, declaration in keyed]

class AlphabeticalSorter(DeclarationSorter):
    """Lexical order of the whole declaration text, case-insensitive."""

    def sort(self, declarations: List[str]) -> List[str]:
        return sorted(declarations, key=str.lower)

def get_sorter(preset: SortPreset) -> DeclarationSorter:
    preset = SortPreset(preset)
    if preset in PRESET_GROUPS:
        return GroupedSorter(PRESET_GROUPS[preset])
    if preset is SortPreset.ALPHABETICAL:
        return AlphabeticalSorter()
    return DeclarationSorter()

def sort_declarations(declarations: List[str], preset: SortPreset) -> List[str]:
    """Reorder declarations for ``preset``; ``none`` keeps the input order."""
    return get_sorter(preset)(declarations)

__all__ = [
    'PropertyGroup',
    'MatchResult',
    'CONCENTRIC_GROUPS',
    'CATEGORY_GROUPS',
    'PRESET_GROUPS',
    'EXACT_MATCH',
    'REGEX_MATCH',
    'PREFIX_MATCH',
    'NO_MATCH',
    'match_pattern',
    'resolve_property_order',
    'extract_property_name',
    'DeclarationSorter',
    'GroupedSorter',
    'AlphabeticalSorter',
    'get_sorter',
    'sort_declarations',
]
