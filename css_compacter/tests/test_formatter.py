"""Tests for the formatting pipeline."""

import itertools

import pytest

from ..core.formatter import (
    find_spaced_attribute_pairs,
    format_css,
    normalize_single_line,
    restore_attribute_spacing,
)
from ..core.options import AttributeSpacing, FormatterOptions, OutputMode, SortPreset, UnitMode
from ..core.scanner import split_blocks

ATTRIBUTE_INPUT = '.card[data-active="true"] .tag::before { content: "#"; }'

ADVERSARIAL_INPUTS = [
    '}}}}',
    '{{{{',
    'a { b: "unterminated',
    '/* never closed { ; }',
    "a { content: '\\'; } }",
    'a[b="]"] { c: url(data:x;y) ;',
    ';;;::,,,',
    '@media screen { a { color: red; }',
    '\\',
    'a { width: 1e999px; height: -.px; }',
]

def all_option_sets():
    for mode, flags, unit in itertools.product(
        OutputMode,
        itertools.product([False, True], repeat=5),
        UnitMode,
    ):
        remove, collapse, tighten, trim, sort = flags
        yield FormatterOptions(
            remove_comments=remove,
            collapse_whitespace=collapse,
            tighten_symbols=tighten,
            trim_semicolon=trim,
            output_mode=mode,
            sort_properties=sort,
            unit_mode=unit,
        )

class TestScenarios:
    """End-to-end formatting scenarios."""

    def test_basic_tightening(self, default_options):
        css = 'h1 ,  h2 { color : red ; margin-bottom: 12px ;; }'
        assert format_css(css, default_options) == 'h1,h2{\n  color:red;\n  margin-bottom:12px\n}'

    def test_defaults_used_without_options(self):
        assert format_css('a { color : red ; }') == 'a{\n  color:red\n}'

    def test_px_to_rem(self, plain_options):
        options = plain_options.update(unit_mode=UnitMode.PX_TO_REM, px_base=16)
        assert format_css('.a { padding: 32px; }', options) == '.a { padding: 2rem; }'

    def test_rem_to_px(self, plain_options):
        options = plain_options.update(unitMode='rem2px', remBase=10)
        assert format_css('.a { font-size: 1.5rem; }', options) == '.a { font-size: 15px; }'

    def test_attribute_space_kept_without_tightening(self):
        options = FormatterOptions(tighten_symbols=False)
        assert format_css(ATTRIBUTE_INPUT, options) == (
            '.card[data-active="true"] .tag::before {\n  content: "#"\n}'
        )

    def test_attribute_space_fused_when_tightening(self, minify_options):
        assert format_css(ATTRIBUTE_INPUT, minify_options) == (
            '.card[data-active="true"].tag::before{content:"#"}'
        )

    def test_attribute_space_whitespace_policy(self, minify_options):
        options = minify_options.update(attribute_spacing=AttributeSpacing.WHITESPACE)
        assert format_css(ATTRIBUTE_INPUT, options) == (
            '.card[data-active="true"] .tag::before{content:"#"}'
        )

    def test_sorting(self, default_options):
        options = default_options.update(sort_properties=True, sort_preset=SortPreset.CONCENTRIC)
        css = '.a { margin: 0; color: red; display: flex; }'
        assert format_css(css, options) == '.a{\n  display:flex;\n  margin:0;\n  color:red\n}'

    def test_sort_preset_ignored_when_sorting_disabled(self, default_options):
        options = default_options.update(sort_preset=SortPreset.ALPHABETICAL)
        assert format_css('.a { z: 1; a: 2; }', options) == '.a{\n  z:1;\n  a:2\n}'

    def test_minify(self, minify_options):
        css = 'a { color : red ; }\n\nb { margin: 0 }'
        assert format_css(css, minify_options) == 'a{color:red}b{margin:0}'

    def test_minify_nested_at_rule(self, minify_options):
        css = '@media (max-width: 768px) {\n  .a { color: red; }\n}'
        assert format_css(css, minify_options) == '@media(max-width:768px){.a{color:red}}'

    def test_single_line(self):
        options = FormatterOptions(output_mode=OutputMode.SINGLE_LINE)
        css = 'a { color: red; }\n\n\nb { x: y; }'
        assert format_css(css, options) == 'a{color:red}\nb{x:y}'

    def test_single_line_keeps_comment_lines(self):
        options = FormatterOptions(
            remove_comments=False,
            collapse_whitespace=False,
            tighten_symbols=False,
            output_mode=OutputMode.SINGLE_LINE,
        )
        css = '/* head */\n\na {\n  color: red;\n}\n'
        assert format_css(css, options) == '/* head */\na { color: red }'

    def test_top_level_comment_kept_verbatim(self):
        options = FormatterOptions(remove_comments=False)
        css = '/*  Header   comment  */\n.a { color: red; }'
        assert format_css(css, options) == '/*  Header   comment  */\n.a{\n  color:red\n}'

    def test_comments_removed(self, default_options, sample_css):
        assert '/*' not in format_css(sample_css, default_options)

class TestEdgeCases:
    """Malformed and degenerate input."""

    @pytest.mark.parametrize('css', ['', '   ', '\n\t\n'])
    def test_empty_input(self, css):
        for options in all_option_sets():
            assert format_css(css, options) == ''

    def test_stray_text_passes_through(self, default_options):
        assert format_css('a { color: red; } stray text', default_options) == (
            'a{\n  color:red\n}\nstray text'
        )

    def test_unmatched_closing_brace_is_dropped(self, default_options):
        assert format_css('} a { color: red; }', default_options) == 'a{\n  color:red\n}'

    def test_unterminated_comment(self, default_options):
        assert format_css('a { color: red; } /* never closed', default_options) == (
            'a{\n  color:red\n}\n/* never closed'
        )

    def test_empty_rule(self, default_options, plain_options):
        assert format_css('a { }', default_options) == 'a{}'
        assert format_css('a { }', plain_options) == 'a { }'

    @pytest.mark.parametrize('css', ADVERSARIAL_INPUTS)
    def test_never_raises(self, css):
        for options in all_option_sets():
            assert isinstance(format_css(css, options), str)

class TestProperties:
    """Invariants that hold for any input."""

    def test_minify_is_idempotent(self, minify_options, sample_css, special_chars_css):
        for css in (sample_css, special_chars_css, 'a { b: c } stray', '} a{x:y'):
            once = format_css(css, minify_options)
            assert format_css(once, minify_options) == once

    def test_block_count_is_preserved(self, default_options, sample_css):
        expected = len(split_blocks(format_css(sample_css, FormatterOptions(output_mode='minify'))))
        assert expected == 6
        for mode in OutputMode:
            output = format_css(sample_css, default_options.update(output_mode=mode))
            assert len(split_blocks(output)) == expected

    def test_special_values_survive(self, default_options, special_chars_css):
        output = format_css(special_chars_css, default_options)
        assert 'content:"a;b{c}";' in output
        assert "url('data:image/svg+xml;utf8,<svg></svg>')" in output

    def test_calls_are_independent(self, default_options, sample_css):
        first = format_css(sample_css, default_options)
        format_css('x { y: z }', FormatterOptions(output_mode='minify'))
        assert format_css(sample_css, default_options) == first

class TestAttributeRestoration:
    """Tests for descendant spacing restoration helpers."""

    def test_find_pairs(self):
        pairs = find_spaced_attribute_pairs('x[a="1"]  #id, y[b].c')
        assert pairs == {('[a="1"]', '#id')}

    def test_restore_recorded_pair(self):
        assert restore_attribute_spacing('[a].b{}', {('[a]', '.b')}) == '[a] .b{}'

    def test_unrecorded_pair_stays_fused(self):
        assert restore_attribute_spacing('[a].c{}', {('[a]', '.b')}) == '[a].c{}'

    def test_no_pairs(self):
        assert restore_attribute_spacing('[a].b', set()) == '[a].b'

    def test_normalize_single_line(self):
        assert normalize_single_line('  a  \n\n  b\n   \n') == 'a\nb'
