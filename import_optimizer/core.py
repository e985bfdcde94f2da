#!/usr/bin/env python3
"""Core utilities for import-optimizer. This module locates the leading
import block of a JavaScript/TypeScript source, runs the configured
optimization rules over it, and rewrites files on disk.
"""
from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable
from typing import Iterator
from typing import List
from typing import Optional
from typing import Tuple

from import_optimizer.formatter import assemble
from import_optimizer.formatter import format_imports
from import_optimizer.parser import ImportDeclaration
from import_optimizer.parser import is_import_line
from import_optimizer.parser import is_side_effect_import
from import_optimizer.parser import parse_import_line
from import_optimizer.rules import OptimizationRules
from import_optimizer.rules import apply_rules

LOG = logging.getLogger(__name__)

SOURCE_SUFFIXES = ('.js', '.jsx', '.mjs', '.cjs', '.ts', '.tsx')
DEFAULT_IGNORE = ('node_modules',)


def split_lines(source: str) -> List[str]:
    """Split source text on newlines, dropping carriage returns and the
    empty piece after a final newline."""
    if not source:
        return []
    lines = source.split('\n')
    if source.endswith('\n'):
        lines.pop()
    return [line[:-1] if line.endswith('\r') else line for line in lines]


def find_import_block(lines: List[str]) -> Tuple[List[int], int]:
    """Find the import lines of the leading import block.

    The block is the longest prefix made of import lines and blank lines.
    Returns (import_line_indices, body_start) where body_start is the index
    of the first line after the block.
    """
    import_indices: List[int] = []
    for i, line in enumerate(lines):
        stripped = line.strip()
        if is_import_line(stripped):
            import_indices.append(i)
        elif stripped:
            return import_indices, i
    return import_indices, len(lines)


class ImportOptimizer:
    """Rewrite the leading import block according to a set of rules."""

    def __init__(self, rules: Optional[OptimizationRules] = None):
        self.rules = rules if rules is not None else OptimizationRules()

    def configure(self, sort_imports: bool, remove_duplicates: bool, merge_imports: bool) -> None:
        self.rules = OptimizationRules(
            sort_imports=sort_imports,
            remove_duplicates=remove_duplicates,
            merge_imports=merge_imports,
        )

    def optimize(self, source: str) -> str:
        """Return ``source`` with its import block rewritten.

        Lines inside the block that look like imports but cannot be parsed
        are kept verbatim right after the rewritten imports. If nothing in
        the block parses, the source is returned unchanged.
        """
        lines = split_lines(source)
        import_indices, body_start = find_import_block(lines)
        if not import_indices:
            LOG.debug("No import statements found.")
            return source

        declarations: List[ImportDeclaration] = []
        unparsed: List[str] = []
        for index in import_indices:
            decl = parse_import_line(lines[index], index)
            if decl is None:
                if is_side_effect_import(lines[index]):
                    LOG.debug(f"line {index + 1}: keeping side-effect import: {lines[index].strip()}")
                else:
                    LOG.warning(f"line {index + 1}: could not parse import, keeping it as is: {lines[index].strip()}")
                unparsed.append(lines[index])
            else:
                declarations.append(decl)

        LOG.debug(f"Found {len(declarations)} imports and {len(unparsed)} unparsed import lines")
        if not declarations:
            return source

        merged = apply_rules(declarations, self.rules)
        result = assemble(format_imports(merged) + unparsed, lines[body_start:])
        if source.endswith('\n'):
            result += '\n'
        return result


def optimize_source(source: str, rules: Optional[OptimizationRules] = None) -> str:
    """Optimize ``source`` with a one-off optimizer."""
    return ImportOptimizer(rules).optimize(source)


def process_file(file_path: str, rules: OptimizationRules, apply: bool = False) -> Tuple[bool, List[Tuple[int, str]]]:
    """Check or fix the import block of a single file.

    Returns (modified, warnings).
    """
    path_obj = Path(file_path)

    try:
        source = path_obj.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        return False, [(0, f"Could not read file: {e}")]

    new_source = optimize_source(source, rules)
    if new_source == source:
        return False, []

    if not apply:
        return True, [(1, "Import block is not optimized.")]

    try:
        path_obj.write_text(new_source, encoding='utf-8')
    except OSError as e:
        return False, [(0, f"Could not write file: {e}")]
    return True, []


def iter_source_files(root: str, ignore: Optional[Iterable[str]] = None) -> Iterator[Path]:
    """Yield script files under the given root directory, excluding ignored
    directory names and path prefixes."""
    ignore_set = set(DEFAULT_IGNORE) | set(ignore or [])
    root_path = Path(root)
    ignore_parts = [Path(pattern).parts for pattern in ignore_set]
    for path in sorted(root_path.rglob('*')):
        if not path.is_file() or path.suffix not in SOURCE_SUFFIXES:
            continue
        relative = path.relative_to(root_path)
        if any(part in ignore_set for part in relative.parts[:-1]):
            continue
        if any(relative.parts[:len(parts)] == parts for parts in ignore_parts):
            continue
        yield path
