"""Context-aware splitting of CSS text into blocks and declarations.

Both splitters share one left-to-right scanner that knows when it is inside
a quoted string or a comment, so punctuation in ``content: "a;b"``,
``url(data:...;base64,...)`` or ``/* } */`` is never mistaken for structure.
Malformed input is never rejected: an unterminated comment or string runs
to the end of the text and unmatched closing brackets are clamped at zero.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional, Tuple

QUOTES = ('"', "'")

_LEADING_COMMENT_RE = re.compile(r'^\s*/\*.*?\*/\s*', re.DOTALL)

class ScanMode(Enum):
    NORMAL = 'normal'
    STRING = 'string'
    COMMENT = 'comment'

class BlockKind(str, Enum):
    RULE = 'rule'
    COMMENT = 'comment'
    PASSTHROUGH = 'passthrough'

@dataclass(frozen=True)
class RawBlock:
    """A top-level chunk of source with its closing brace removed."""
    text: str

@dataclass(frozen=True)
class ParsedBlock:
    """A raw block broken into leading comments, selector and body.

    ``selector`` and ``body`` are only meaningful for ``BlockKind.RULE``;
    a passthrough block keeps its stray text in ``selector``.
    """
    kind: BlockKind
    comments: List[str] = field(default_factory=list)
    selector: str = ''
    body: str = ''

def scan(text: str) -> Iterator[Tuple[str, Optional[str]]]:
    """Walk ``text`` yielding ``(chunk, structural)`` pairs.

    ``chunk`` is the verbatim text consumed in one step. ``structural`` is
    the single character when it sits outside strings, comments and
    escapes, and ``None`` for chunks that must be copied without
    interpretation (a whole comment, a whole string, an escape pair).
    Joining every chunk reproduces ``text`` exactly.
    """
    mode = ScanMode.NORMAL
    length = len(text)
    i = 0
    while i < length:
        char = text[i]

        if mode is ScanMode.NORMAL:
            if char == '/' and text.startswith('*', i + 1):
                mode = ScanMode.COMMENT
                continue
            if char in QUOTES:
                mode = ScanMode.STRING
                continue
            if char == '\\':
                yield text[i:i + 2], None
                i += 2
                continue
            yield char, char
            i += 1
            continue

        if mode is ScanMode.COMMENT:
            end = text.find('*/', i + 2)
            end = length if end == -1 else end + 2
            yield text[i:end], None
            i = end
            mode = ScanMode.NORMAL
            continue

        # ScanMode.STRING: i points at the opening quote
        j = i + 1
        while j < length:
            if text[j] == '\\':
                j += 2
                continue
            if text[j] == char:
                j += 1
                break
            j += 1
        yield text[i:j], None
        i = j
        mode = ScanMode.NORMAL

def split_blocks(css: str) -> List[RawBlock]:
    """Split CSS into top-level blocks.

    A block ends when a ``}`` brings the brace depth back to zero; the
    closing brace itself is dropped. Text left over at the end (stray
    text, an unterminated rule, a trailing comment) becomes a final block.
    """
    blocks = []
    current = []
    depth = 0

    def flush(drop_last: bool):
        text = ''.join(current[:-1] if drop_last else current).strip()
        if text:
            blocks.append(RawBlock(text))
        current.clear()

    for chunk, symbol in scan(css):
        current.append(chunk)
        if symbol == '{':
            depth += 1
        elif symbol == '}':
            depth = max(0, depth - 1)
            if depth == 0:
                flush(drop_last=True)

    flush(drop_last=False)
    return blocks

def split_declarations(body: str) -> List[str]:
    """Split a block body on ``;`` separators at nesting depth zero.

    Semicolons inside strings, comments, ``()``, ``[]`` or nested ``{}``
    are kept literally. Empty declarations (``;;``) are discarded.
    """
    declarations = []
    current = []
    depth = {'{': 0, '(': 0, '[': 0}
    closers = {'}': '{', ')': '(', ']': '['}

    def push():
        text = ''.join(current).strip()
        if text:
            declarations.append(text)
        current.clear()

    for chunk, symbol in scan(body):
        if symbol in depth:
            depth[symbol] += 1
        elif symbol in closers:
            opener = closers[symbol]
            depth[opener] = max(0, depth[opener] - 1)
        elif symbol == ';' and not any(depth.values()):
            push()
            continue
        current.append(chunk)

    push()
    return declarations

def extract_leading_comments(text: str) -> Tuple[List[str], str]:
    """Peel complete comments off the front of a block.

    Returns the trimmed comments and whatever text follows them.
    """
    comments = []
    remainder = text
    while True:
        match = _LEADING_COMMENT_RE.match(remainder)
        if not match:
            break
        comments.append(match.group(0).strip())
        remainder = remainder[match.end():]
    return comments, remainder

def find_structural(text: str, target: str) -> int:
    """Index of the first ``target`` outside strings and comments, or -1."""
    position = 0
    for chunk, symbol in scan(text):
        if symbol == target:
            return position
        position += len(chunk)
    return -1

def parse_block(block: RawBlock) -> ParsedBlock:
    """Classify a raw block and separate its selector from its body."""
    comments, remainder = extract_leading_comments(block.text)
    remainder = remainder.strip()
    if not remainder:
        return ParsedBlock(BlockKind.COMMENT, comments)

    brace = find_structural(remainder, '{')
    if brace == -1:
        return ParsedBlock(BlockKind.PASSTHROUGH, comments, selector=remainder)

    return ParsedBlock(
        BlockKind.RULE,
        comments,
        selector=remainder[:brace].strip(),
        body=remainder[brace + 1:].strip(),
    )

__all__ = [
    'ScanMode',
    'BlockKind',
    'RawBlock',
    'ParsedBlock',
    'scan',
    'split_blocks',
    'split_declarations',
    'extract_leading_comments',
    'find_structural',
    'parse_block',
]
