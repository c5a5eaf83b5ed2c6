#!/usr/bin/env python
"""Test runner for CSS Compacter."""

import sys
import pytest
from pathlib import Path

def main(extra_args=None):
    """Run the test suite with coverage; extra arguments go to pytest."""
    tests_dir = Path(__file__).parent

    # Make the package importable without installing it
    sys.path.insert(0, str(tests_dir.parent.parent))

    args = [
        '--verbose',
        '--cov=css_compacter',
        '--cov-report=term-missing',
        str(tests_dir)
    ]
    args.extend(extra_args or [])
    return pytest.main(args)

if __name__ == '__main__':
    sys.exit(main(sys.argv[1:]))
