#!/usr/bin/env python3
"""
Command-line interface for CSS Compacter.
"""

import argparse
import logging
import os
import sys
from typing import Any, Dict, List, Optional

import colorama
import orjson
from colorama import Fore, Style

from css_compacter.core.batch import format_files
from css_compacter.core.formatter import format_css
from css_compacter.core.options import (
    AttributeSpacing,
    FormatterOptions,
    OutputMode,
    SortPreset,
    UnitMode,
    clamp_base,
    load_options,
)
from css_compacter.utils.config import ENABLE_COLOR, VERSION
from css_compacter.utils.error import CSSCompacterError, OptionsError
from css_compacter.utils.file import decode_css, safe_read_file, safe_write_file
from css_compacter.utils.logging import setup_logging

STDIN_MARKER = '-'

class UserInterface:
    """Coloured status messages on stderr so stdout stays pure CSS."""

    def __init__(self, quiet: bool = False, verbose: bool = False, color: bool = ENABLE_COLOR,
                 output_format: str = 'text'):
        self.quiet = quiet
        self.verbose = verbose
        self.color = color
        self.output_format = output_format
        if color:
            colorama.init()

    def _print(self, color: str, label: str, message: str):
        if self.quiet:
            return
        if self.color:
            print(f"{color}{label}: {message}{Style.RESET_ALL}", file=sys.stderr)
        else:
            print(f"{label}: {message}", file=sys.stderr)

    def print_info(self, message: str):
        self._print(Fore.BLUE, 'Info', message)

    def print_warning(self, message: str):
        self._print(Fore.YELLOW, 'Warning', message)

    def print_success(self, message: str):
        self._print(Fore.GREEN, 'Success', message)

    def print_debug(self, message: str):
        if self.verbose:
            self._print(Fore.CYAN, 'Debug', message)

    def print_error(self, message: str):
        # Errors are shown even in quiet mode
        if self.color:
            print(f"{Fore.RED}Error: {message}{Style.RESET_ALL}", file=sys.stderr)
        else:
            print(f"Error: {message}", file=sys.stderr)

    def format_output(self, data: Dict[str, Any]) -> str:
        """Format a result summary as JSON or indented text."""
        if self.output_format == 'json':
            return orjson.dumps(data, option=orjson.OPT_INDENT_2 | orjson.OPT_SORT_KEYS).decode('utf-8')
        return self._format_text_output(data)

    def _format_text_output(self, data: Dict[str, Any], indent: str = '') -> str:
        output = []
        for key, value in data.items():
            if isinstance(value, dict):
                output.append(f"{indent}{key}:")
                output.append(self._format_text_output(value, indent + '  '))
            else:
                output.append(f"{indent}{key}: {value}")
        return "\n".join(output)

def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog='css-compacter',
        description='Normalize, sort, convert and minify CSS'
    )

    parser.add_argument(
        'inputs',
        nargs='*',
        default=[STDIN_MARKER],
        help="CSS files or directories ('-' reads stdin, the default)"
    )

    # Output options
    parser.add_argument(
        '-o', '--output',
        help='Write the result to this file instead of stdout (single input only)'
    )
    parser.add_argument(
        '--output-dir',
        help='Write <name>.compact.css files into this directory'
    )

    # Formatting options; None means "not given on the command line"
    parser.add_argument(
        '--keep-comments', dest='remove_comments', action='store_const', const=False,
        help='Keep CSS comments'
    )
    parser.add_argument(
        '--no-collapse', dest='collapse_whitespace', action='store_const', const=False,
        help='Do not collapse whitespace'
    )
    parser.add_argument(
        '--no-tighten', dest='tighten_symbols', action='store_const', const=False,
        help='Keep whitespace around punctuation'
    )
    parser.add_argument(
        '--keep-semicolon', dest='trim_semicolon', action='store_const', const=False,
        help='Keep the last semicolon of each block'
    )
    parser.add_argument(
        '--mode', dest='output_mode',
        choices=[mode.value for mode in OutputMode],
        help='Output layout (default: multi-line)'
    )
    parser.add_argument(
        '--minify', dest='output_mode', action='store_const', const=OutputMode.MINIFY.value,
        help='Shortcut for --mode minify'
    )
    parser.add_argument(
        '--sort', dest='sort_properties', action='store_const', const=True,
        help='Reorder declarations inside each block'
    )
    parser.add_argument(
        '--preset', dest='sort_preset',
        choices=[preset.value for preset in SortPreset],
        help='Property order used by --sort (default: concentric)'
    )
    unit_group = parser.add_mutually_exclusive_group()
    unit_group.add_argument(
        '--px2rem', dest='unit_mode', action='store_const', const=UnitMode.PX_TO_REM.value,
        help='Convert px values to rem'
    )
    unit_group.add_argument(
        '--rem2px', dest='unit_mode', action='store_const', const=UnitMode.REM_TO_PX.value,
        help='Convert rem values to px'
    )
    parser.add_argument(
        '--base',
        help='Pixels per rem for unit conversion (clamped to at least 1)'
    )
    parser.add_argument(
        '--attribute-spacing',
        choices=[policy.value for policy in AttributeSpacing],
        help='How tightening treats the space after an attribute selector'
    )
    parser.add_argument(
        '--config',
        help='JSON file with formatter options; command-line flags take precedence'
    )

    # Reporting options
    parser.add_argument(
        '--report',
        choices=['text', 'json'],
        default='text',
        help='Format of the batch summary'
    )
    parser.add_argument(
        '--no-color',
        action='store_true',
        help='Disable coloured messages'
    )
    parser.add_argument(
        '--log-file',
        help='Also write log messages to this file'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose output'
    )
    parser.add_argument(
        '-q', '--quiet',
        action='store_true',
        help='Only print errors'
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {VERSION}'
    )
    return parser

def build_options(args: argparse.Namespace) -> FormatterOptions:
    """Combine the optional config file with command-line overrides."""
    options = load_options(args.config) if args.config else FormatterOptions()

    changes = {}
    for name in ('remove_comments', 'collapse_whitespace', 'tighten_symbols', 'trim_semicolon',
                 'output_mode', 'sort_properties', 'sort_preset', 'unit_mode', 'attribute_spacing'):
        value = getattr(args, name, None)
        if value is not None:
            changes[name] = value

    if args.base is not None:
        base = clamp_base(args.base)
        unit_mode = UnitMode(changes.get('unit_mode', options.unit_mode))
        if unit_mode is UnitMode.REM_TO_PX:
            changes['rem_base'] = base
        else:
            changes['px_base'] = base

    options = options.update(**changes)
    # Config files are not clamped by the loader
    return options.update(px_base=clamp_base(options.px_base), rem_base=clamp_base(options.rem_base))

def read_input(source: str) -> str:
    if source == STDIN_MARKER:
        return decode_css(sys.stdin.buffer.read())
    return safe_read_file(source)

def run_single(source: str, options: FormatterOptions, output: Optional[str], ui: UserInterface) -> None:
    css = read_input(source)
    formatted = format_css(css, options)
    if output:
        safe_write_file(output, formatted + '\n' if formatted else formatted)
        ui.print_success(f"CSS saved to {output} ({len(css)} -> {len(formatted)} chars)")
    else:
        sys.stdout.write(formatted)
        if formatted:
            sys.stdout.write('\n')
        sys.stdout.flush()

def run_batch(inputs: List[str], options: FormatterOptions, output_dir: Optional[str],
              ui: UserInterface) -> bool:
    summary = format_files(inputs, options, output_dir=output_dir, show_progress=not ui.quiet)
    for file, result in summary['results'].items():
        if result['status'] == 'success':
            ui.print_debug(f"{file} -> {result['output_file']}")
        else:
            ui.print_error(f"{file}: {result['error']}")

    if ui.output_format == 'json':
        print(ui.format_output(summary))
    else:
        ui.print_info(f"Processed {summary['total_files']} file(s):")
        ui.print_success(f"{summary['successful_files']} file(s) formatted")
        if summary['failed_files']:
            ui.print_error(f"{summary['failed_files']} file(s) failed")
    return summary['failed_files'] == 0

def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    args = build_parser().parse_args(argv)
    ui = UserInterface(
        quiet=args.quiet,
        verbose=args.verbose,
        color=ENABLE_COLOR and not args.no_color,
        output_format=args.report
    )

    try:
        setup_logging(
            logging.DEBUG if args.verbose else logging.WARNING,
            log_file=args.log_file
        )
        options = build_options(args)
        ui.print_debug(f"Options: {options.to_dict()}")

        batch = (
            args.output_dir is not None
            or len(args.inputs) > 1
            or any(os.path.isdir(source) for source in args.inputs)
        )
        if not batch:
            run_single(args.inputs[0], options, args.output, ui)
            return 0

        if args.output:
            raise OptionsError("--output accepts a single input; use --output-dir for several")
        if STDIN_MARKER in args.inputs:
            raise OptionsError("stdin cannot be combined with other inputs")
        return 0 if run_batch(args.inputs, options, args.output_dir, ui) else 1

    except (CSSCompacterError, OSError) as e:
        logging.debug("Formatting failed", exc_info=True)
        ui.print_error(str(e))
        return 1

if __name__ == '__main__':
    sys.exit(main())
