"""Reassembly of parsed blocks into the selected output layout."""

from typing import List, Sequence

from .options import FormatterOptions, OutputMode
from .scanner import BlockKind, ParsedBlock, parse_block, split_blocks, split_declarations
from .sorter import sort_declarations
from ..utils.config import INDENT
from ..utils.logging import get_logger

logger = get_logger(__name__)

def join_declarations(declarations: Sequence[str], options: FormatterOptions) -> str:
    """Terminate and join declarations for the output mode.

    The final semicolon is left off when ``trim_semicolon`` is set.
    """
    if not declarations:
        return ''

    last = len(declarations) - 1

    def terminated(index: int, declaration: str) -> str:
        if options.trim_semicolon and index == last:
            return declaration
        return declaration + ';'

    if options.output_mode is OutputMode.MULTI_LINE:
        return '\n'.join(
            INDENT + terminated(index, declaration)
            for index, declaration in enumerate(declarations)
        )

    separator = '' if options.effective_tighten else ' '
    return separator.join(
        terminated(index, declaration)
        for index, declaration in enumerate(declarations)
    )

def render_rule(selector: str, declarations: Sequence[str], options: FormatterOptions) -> str:
    body = join_declarations(declarations, options)
    if not body.strip():
        return f"{selector}{{}}" if options.effective_collapse else f"{selector} {{ }}"

    brace_space = '' if options.effective_tighten else ' '
    if options.output_mode is OutputMode.MULTI_LINE:
        return f"{selector}{brace_space}{{\n{body}\n}}"
    if options.output_mode is OutputMode.SINGLE_LINE:
        return f"{selector}{brace_space}{{{brace_space}{body}{brace_space}}}"
    return f"{selector}{{{body}}}"

def render_block(block: ParsedBlock, options: FormatterOptions) -> str:
    """Render one block with its leading comments on their own lines.

    Rules are split into declarations and sorted when requested; stray
    text without a ``{`` is passed through as written.
    """
    parts: List[str] = list(block.comments)

    if block.kind is BlockKind.RULE:
        declarations = split_declarations(block.body)
        if options.sort_properties:
            declarations = sort_declarations(declarations, options.sort_preset)
        parts.append(render_rule(block.selector, declarations, options))
    elif block.kind is BlockKind.PASSTHROUGH:
        parts.append(block.selector)

    return '\n'.join(part for part in parts if part)

def format_blocks(css: str, options: FormatterOptions) -> str:
    """Split ``css`` into top-level blocks and render each of them."""
    blocks = [parse_block(raw) for raw in split_blocks(css)]
    logger.debug(f"Rendering {len(blocks)} block(s) as {options.output_mode.value}")
    joiner = '' if options.is_minify else '\n'
    return joiner.join(render_block(block, options) for block in blocks)

__all__ = [
    'join_declarations',
    'render_rule',
    'render_block',
    'format_blocks',
]
