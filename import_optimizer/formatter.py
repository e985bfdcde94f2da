"""Render merged imports back into import statements."""

from typing import Iterable
from typing import List

from import_optimizer.parser import NamedImport
from import_optimizer.rules import MergedImport


def format_named_import(named: NamedImport) -> str:
    return named.name if named.alias is None else f"{named.name} as {named.alias}"


def format_import_clause(imp: MergedImport) -> str:
    """Build the clause between ``import`` and ``from``."""
    parts: List[str] = []
    if imp.default_binding:
        parts.append(imp.default_binding)
    if imp.namespace_alias:
        parts.append(f"* as {imp.namespace_alias}")
    if imp.named_bindings:
        named_parts = [format_named_import(named) for named in imp.named_bindings]
        if len(named_parts) == 1:
            parts.append(named_parts[0])
        else:
            parts.append("{ " + ", ".join(named_parts) + " }")
    return ", ".join(parts)


def format_imports(imports: Iterable[MergedImport]) -> List[str]:
    """Return one import statement per merged import."""
    lines = []
    for imp in imports:
        clause = format_import_clause(imp) or "{}"
        lines.append(f"import {clause} from '{imp.module_source}';")
    return lines


def assemble(import_lines: List[str], body_lines: List[str]) -> str:
    """Join the import block and the trailing body with one blank line."""
    result = "\n".join(import_lines)
    if body_lines:
        if result:
            result += "\n\n"
        result += "\n".join(body_lines)
    return result
