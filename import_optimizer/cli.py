#!/usr/bin/env python3
"""Command-line interface for import-optimizer using Click."""

from importlib import metadata
import logging
from pathlib import Path
import sys
from typing import Optional

import click
from import_optimizer import config
from import_optimizer import core
from import_optimizer.rules import OptimizationRules


try:
    VERSION = f"import-optimizer {metadata.version('import_optimizer')}"
except metadata.PackageNotFoundError:
    VERSION = "import-optimizer"


def _resolve_rules(path: Path, sort: Optional[bool], dedupe: Optional[bool],
                   merge: Optional[bool]) -> OptimizationRules:
    """Load configured rules for ``path`` and apply command-line overrides."""
    root = path if path.is_dir() else path.parent
    rules = config.read_rules_config(str(root))
    if sort is not None:
        rules.sort_imports = sort
    if dedupe is not None:
        rules.remove_duplicates = dedupe
    if merge is not None:
        rules.merge_imports = merge
    logging.debug("Rules: %s", rules)
    return rules


def _handle_files(path: Path, rules: OptimizationRules, apply_changes: bool) -> int:
    """Process script files and report or fix their import blocks.

    Args:
        path: File or directory to process.
        rules: Optimization rules to apply.
        apply_changes: If True, apply fixes in place.
    Returns:
        0 if no changes, 1 if changes required, 2 if error occurred.
    """
    exit_code = 0
    total_warnings = 0

    if path.is_file():
        file_paths = [path]
    else:
        file_paths = list(core.iter_source_files(str(path)))

    for file_path in file_paths:
        modified, warnings = core.process_file(str(file_path), rules, apply=apply_changes)

        for lineno, msg in warnings:
            if lineno == 0:
                logging.error("[%s] ERROR: %s", file_path, msg)
                exit_code = max(exit_code, 2)
            else:
                logging.warning("[%s] line %s: %s", file_path, lineno, msg)
                total_warnings += 1

        if modified:
            msg = "file updated." if apply_changes else "imports would be modified."
            logging.info("[%s] %s", file_path, msg)
            exit_code = max(exit_code, 1)

    if total_warnings:
        logging.info("Total warnings: %d", total_warnings)

    return exit_code


def rule_options(func):
    """Attach the --sort/--dedupe/--merge switches to a command."""
    func = click.option("--merge/--no-merge", default=None,
                        help="Merge imports from the same module.")(func)
    func = click.option("--dedupe/--no-dedupe", default=None,
                        help="Remove duplicate import lines.")(func)
    func = click.option("--sort/--no-sort", default=None,
                        help="Sort imports by module source.")(func)
    return func


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Increase verbosity.")
@click.option("-q", "--quiet", is_flag=True, help="Suppress non-error output.")
@click.version_option(version=VERSION, prog_name="import-optimizer CLI")
def cli(verbose: bool, quiet: bool) -> None:
    """Sort, deduplicate and merge ES module imports."""
    # Configure logging only once
    if not logging.getLogger().handlers:
        if quiet:
            logging.basicConfig(level=logging.ERROR, format="%(message)s")
        else:
            logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format="%(message)s")


@cli.command(help="Report files whose imports are not optimized.")
@click.argument("path", type=click.Path(exists=True, file_okay=True, dir_okay=True))
@rule_options
def check(path: str, sort: Optional[bool], dedupe: Optional[bool], merge: Optional[bool]) -> None:
    rules = _resolve_rules(Path(path), sort, dedupe, merge)
    sys.exit(_handle_files(Path(path), rules, apply_changes=False))


@cli.command(help="Optimize imports in place.")
@click.argument("path", type=click.Path(exists=True, file_okay=True, dir_okay=True))
@rule_options
def fix(path: str, sort: Optional[bool], dedupe: Optional[bool], merge: Optional[bool]) -> None:
    rules = _resolve_rules(Path(path), sort, dedupe, merge)
    sys.exit(_handle_files(Path(path), rules, apply_changes=True))


@cli.command(name="format", help="Read source from stdin and write the optimized source to stdout.")
@rule_options
def format_(sort: Optional[bool], dedupe: Optional[bool], merge: Optional[bool]) -> None:
    rules = _resolve_rules(Path.cwd(), sort, dedupe, merge)
    source = click.get_text_stream("stdin").read()
    click.echo(core.optimize_source(source, rules), nl=False)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
