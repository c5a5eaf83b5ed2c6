"""Formatting many stylesheets at once."""

import os
import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from .formatter import format_css
from .options import FormatterOptions
from ..utils.common import is_compacted_output, is_css_file
from ..utils.config import MAX_WORKERS
from ..utils.error import CSSCompacterError, FileOperationError
from ..utils.file import safe_read_file, safe_write_file, output_path_for
from ..utils.progress import ProgressReporter

def _iter_css_files(paths: Iterable[str]) -> Iterator[Tuple[str, Optional[str]]]:
    """Yield ``(file, root)``; ``root`` is the walked directory, None for a file argument."""
    for path in paths:
        if os.path.isdir(path):
            for root, _, files in os.walk(path):
                for name in files:
                    full_path = os.path.join(root, name)
                    if is_css_file(full_path) and not is_compacted_output(full_path):
                        yield full_path, path
        elif os.path.isfile(path):
            yield path, None
        else:
            raise FileOperationError(f"File not found: {path}")

def collect_css_files(paths: Iterable[str]) -> List[str]:
    """Expand files and directories into a sorted list of stylesheets.

    Previously compacted outputs (``*.compact.css``) found while walking
    a directory are skipped.

    Raises:
        FileOperationError: If a path does not exist
    """
    return sorted(dict.fromkeys(file for file, _ in _iter_css_files(paths)))

def plan_outputs(paths: Iterable[str], output_dir: Optional[str] = None) -> Dict[str, str]:
    """Map every stylesheet under ``paths`` to the file its result is written to.

    Without ``output_dir`` each result lands next to its input. With it,
    files found by walking a directory keep their location relative to
    that directory, so ``src/a/x.css`` and ``src/b/x.css`` stay apart.

    Raises:
        FileOperationError: If a path does not exist
    """
    plan = {}
    for file, root in _iter_css_files(paths):
        target_dir = output_dir
        if output_dir and root:
            relative = os.path.relpath(os.path.dirname(file), root)
            target_dir = os.path.normpath(os.path.join(output_dir, relative))
        plan.setdefault(file, output_path_for(file, target_dir))
    return dict(sorted(plan.items()))

def format_file(file_path: str, options: FormatterOptions,
                output_dir: Optional[str] = None, output_file: Optional[str] = None) -> Dict[str, Any]:
    """Format one stylesheet and write it to ``output_file``, or next to the
    input (or into ``output_dir``) as ``<name>.compact.css``."""
    css = safe_read_file(file_path)
    formatted = format_css(css, options)
    output_file = output_file or output_path_for(file_path, output_dir)
    safe_write_file(output_file, formatted)
    return {
        'status': 'success',
        'output_file': output_file,
        'input_size': len(css),
        'output_size': len(formatted),
    }

def format_files(paths: Iterable[str], options: FormatterOptions, output_dir: Optional[str] = None,
                 max_workers: int = MAX_WORKERS, show_progress: bool = False) -> Dict[str, Any]:
    """Format every stylesheet under ``paths`` in a thread pool.

    A failing file is recorded with ``status: 'error'`` and does not stop
    the rest of the batch. Two inputs that would write the same output
    file are never both written; the later one is reported as an error.
    """
    plan = plan_outputs(paths, output_dir)
    progress = ProgressReporter(total_steps=len(plan), enabled=show_progress)
    progress.start()

    results = {}
    jobs = {}
    claimed = {}
    for file, output_file in plan.items():
        key = os.path.normcase(os.path.abspath(output_file))
        if key in claimed:
            error = f"Output {output_file} is already written from {claimed[key]}"
            results[file] = {'status': 'error', 'error': error}
            progress.error(f"{file}: {error}")
            continue
        claimed[key] = file
        jobs[file] = output_file

    workers = max(1, min(max_workers, len(jobs) or 1, os.cpu_count() or 1))
    with ThreadPoolExecutor(max_workers=workers) as executor:
        future_to_file = {
            executor.submit(format_file, file, options, output_file=output_file): file
            for file, output_file in jobs.items()
        }

        for future in as_completed(future_to_file):
            file = future_to_file[future]
            try:
                results[file] = future.result()
                progress.update(os.path.basename(file))
            except (CSSCompacterError, OSError) as e:
                results[file] = {'status': 'error', 'error': str(e)}
                progress.error(f"{file}: {e}")

    progress.finish()

    success_count = sum(1 for r in results.values() if r['status'] == 'success')
    logging.info(f"Formatted {success_count}/{len(results)} stylesheet(s)")
    return {
        'status': 'success' if success_count == len(results) else 'partial',
        'total_files': len(results),
        'successful_files': success_count,
        'failed_files': len(results) - success_count,
        'results': results,
        'processing_time': progress.elapsed_seconds,
    }

__all__ = ['collect_css_files', 'plan_outputs', 'format_file', 'format_files']
