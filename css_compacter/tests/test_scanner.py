"""Tests for the block and declaration splitters."""

import pytest

from ..core.scanner import (
    BlockKind,
    RawBlock,
    extract_leading_comments,
    find_structural,
    parse_block,
    scan,
    split_blocks,
    split_declarations,
)

def texts(blocks):
    return [block.text for block in blocks]

class TestScan:
    """Tests for the low-level scanner."""

    @pytest.mark.parametrize('text', [
        '',
        'a { color: red; }',
        'a{content:"}\\"{"}',
        "/* open comment { ; ",
        'x: "unterminated; string',
        r'a\;b',
        "url('data:image/png;base64,AAA')",
    ])
    def test_chunks_reproduce_input(self, text):
        assert ''.join(chunk for chunk, _ in scan(text)) == text

    def test_strings_and_comments_are_not_structural(self):
        symbols = [symbol for _, symbol in scan('a{"}"/*}*/}')]
        assert symbols.count('}') == 1
        assert symbols.count('{') == 1

    def test_escaped_quote_stays_inside_string(self):
        chunks = [chunk for chunk, symbol in scan(r'"a\"b";') if symbol is None]
        assert chunks == [r'"a\"b"']

    def test_find_structural_skips_strings(self):
        assert find_structural('a[title="{"] { x: y', '{') == 13
        assert find_structural('no brace here', '{') == -1

class TestSplitBlocks:
    """Tests for top-level block splitting."""

    def test_empty_input(self):
        assert split_blocks('') == []
        assert split_blocks('   \n  ') == []

    def test_closing_brace_is_dropped(self):
        assert texts(split_blocks('a{b:c}d{e:f}')) == ['a{b:c', 'd{e:f']

    def test_brace_inside_string(self):
        assert texts(split_blocks('a{content:"}"}b{}')) == ['a{content:"}"', 'b{']

    def test_brace_inside_comment(self):
        assert texts(split_blocks('/* } */a{x:y}')) == ['/* } */a{x:y']

    def test_nested_rules_stay_in_one_block(self):
        assert texts(split_blocks('@media x{a{b:c}}d{}')) == ['@media x{a{b:c}', 'd{']

    def test_unterminated_comment_runs_to_end(self):
        assert texts(split_blocks('a{x:y}/* open } {')) == ['a{x:y', '/* open } {']

    def test_unmatched_closing_brace_is_clamped(self):
        assert texts(split_blocks('} a{x:y}')) == ['a{x:y']

    def test_trailing_stray_text_is_kept(self):
        assert texts(split_blocks('a{x:y} stray')) == ['a{x:y', 'stray']

    def test_unterminated_rule_is_kept(self):
        assert texts(split_blocks('a{x:y')) == ['a{x:y']

class TestSplitDeclarations:
    """Tests for declaration splitting."""

    def test_simple(self):
        assert split_declarations('color: red; margin: 0') == ['color: red', 'margin: 0']

    def test_empty_declarations_are_dropped(self):
        assert split_declarations('a:1;;b:2; ;') == ['a:1', 'b:2']
        assert split_declarations('') == []

    def test_semicolon_in_string(self):
        assert split_declarations('content: "a;b"; x: y') == ['content: "a;b"', 'x: y']

    def test_escaped_quote_in_string(self):
        assert split_declarations(r'content: "a\";b"; x: y') == [r'content: "a\";b"', 'x: y']

    def test_unquoted_data_uri(self):
        body = 'background: url(data:image/png;base64,xx); color: red'
        assert split_declarations(body) == ['background: url(data:image/png;base64,xx)', 'color: red']

    def test_brackets_and_nested_functions(self):
        body = 'x: [a;b]; width: calc(100% - (2 * var(--gap;x))); y: z'
        assert split_declarations(body) == [
            'x: [a;b]',
            'width: calc(100% - (2 * var(--gap;x)))',
            'y: z',
        ]

    def test_nested_rule_body(self):
        body = '.a { color: red; } .b { margin: 0 }'
        assert split_declarations(body) == [body]

    def test_semicolon_in_comment(self):
        assert split_declarations('color: red /* ; */; x: y') == ['color: red /* ; */', 'x: y']

    def test_unbalanced_closers_do_not_go_negative(self):
        assert split_declarations('a: 1)); b: 2') == ['a: 1))', 'b: 2']

class TestParseBlock:
    """Tests for block classification."""

    def test_leading_comments(self):
        comments, remainder = extract_leading_comments('/* a */ /* b */\n.x{')
        assert comments == ['/* a */', '/* b */']
        assert remainder == '.x{'

    def test_rule_with_comment(self):
        block = parse_block(RawBlock('/* a */\n.x { color: red'))
        assert block.kind is BlockKind.RULE
        assert block.comments == ['/* a */']
        assert block.selector == '.x'
        assert block.body == 'color: red'

    def test_comment_only(self):
        block = parse_block(RawBlock('/* only */'))
        assert block.kind is BlockKind.COMMENT
        assert block.comments == ['/* only */']

    def test_passthrough(self):
        block = parse_block(RawBlock('stray text'))
        assert block.kind is BlockKind.PASSTHROUGH
        assert block.selector == 'stray text'

    def test_unterminated_comment_is_passthrough(self):
        block = parse_block(RawBlock('/* never closed'))
        assert block.kind is BlockKind.PASSTHROUGH

    def test_brace_in_selector_string(self):
        block = parse_block(RawBlock('a[title="{"] { x: y'))
        assert block.selector == 'a[title="{"]'
        assert block.body == 'x: y'
