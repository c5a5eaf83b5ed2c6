"""Pytest configuration for CSS Compacter tests."""

import pytest
import logging

from ..core.options import FormatterOptions, OutputMode

# Configure logging
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

@pytest.fixture(scope='session')
def default_options():
    """Return the default formatter options."""
    return FormatterOptions()

@pytest.fixture(scope='session')
def plain_options():
    """Return options with every transform switched off, single-line layout."""
    return FormatterOptions(
        remove_comments=False,
        collapse_whitespace=False,
        tighten_symbols=False,
        trim_semicolon=False,
        output_mode=OutputMode.SINGLE_LINE,
    )

@pytest.fixture(scope='session')
def minify_options():
    """Return options for minified output."""
    return FormatterOptions(output_mode=OutputMode.MINIFY)

@pytest.fixture(scope='session')
def sample_css():
    """Return sample CSS content for testing."""
    return """
/* --- group selector --- */
h1,
h2 ,
.title {
    color : #333 ;
    margin-bottom: 12px ;;
}

/* --- descendant selector --- */
#main-area   .content-box   {
    padding: 20px 30px ;
    background: #f9f9f9  ; ;
}

/* --- attribute selector --- */
input[type="text"]   {
    border :1px solid #ccc ;
    padding :8px 12px  ;  ;
}

.list > li {
    padding:5px 0 ;
    border-bottom :1px solid #eee ;;
}

.card[data-active="true"] .tag::before {
    content: "#";
}

@media (max-width: 768px) {
    .content {
        flex-direction: column;
    }
}
"""

@pytest.fixture(scope='session')
def special_chars_css():
    """Return CSS with strings, data URIs and nested functions."""
    return (
        '.icon {\n'
        '    content: "a;b{c}";\n'
        "    background: url('data:image/svg+xml;utf8,<svg></svg>');\n"
        '    width: calc(100% - (2 * 8px));\n'
        '}\n'
    )

@pytest.fixture
def css_tree(tmp_path):
    """Create a directory with a few stylesheets."""
    (tmp_path / 'a.css').write_text('.a { color : red ; }', encoding='utf-8')
    nested = tmp_path / 'nested'
    nested.mkdir()
    (nested / 'b.css').write_text('.b { margin : 0 ; }', encoding='utf-8')
    (nested / 'notes.txt').write_text('not css', encoding='utf-8')
    return tmp_path
