"""Top-level package for import-optimizer.

This package exposes the core API for sorting, deduplicating and merging
ES module import statements.
"""

from import_optimizer.config import read_rules_config
from import_optimizer.core import find_import_block
from import_optimizer.core import ImportOptimizer
from import_optimizer.core import iter_source_files
from import_optimizer.core import optimize_source
from import_optimizer.core import process_file
from import_optimizer.parser import ImportDeclaration
from import_optimizer.parser import NamedImport
from import_optimizer.parser import parse_import_line
from import_optimizer.rules import MergedImport
from import_optimizer.rules import OptimizationRules


__all__ = [
    "ImportOptimizer",
    "OptimizationRules",
    "ImportDeclaration",
    "NamedImport",
    "MergedImport",
    "parse_import_line",
    "find_import_block",
    "optimize_source",
    "process_file",
    "iter_source_files",
    "read_rules_config",
]
