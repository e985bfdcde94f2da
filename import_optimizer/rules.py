"""Rules module for import-optimizer.

This module defines the optimization rules and the two strategies that apply
them to parsed declarations: merging by module source, and the plain
dedupe/sort path used when merging is turned off.
"""

from __future__ import annotations
from dataclasses import dataclass
from dataclasses import field
import logging
from typing import Dict
from typing import Iterable
from typing import List
from typing import Optional

from import_optimizer.parser import ImportDeclaration
from import_optimizer.parser import NamedImport

LOG = logging.getLogger(__name__)


@dataclass
class OptimizationRules:
    sort_imports: bool = False
    remove_duplicates: bool = False
    merge_imports: bool = False


@dataclass
class MergedImport:
    """Import bindings of one module source, ready to be formatted."""

    module_source: str
    default_binding: Optional[str] = None
    named_bindings: List[NamedImport] = field(default_factory=list)
    namespace_alias: Optional[str] = None

    @classmethod
    def from_declaration(cls, decl: ImportDeclaration) -> "MergedImport":
        return cls(
            module_source=decl.module_source,
            default_binding=decl.default_binding,
            named_bindings=list(decl.named_bindings),
            namespace_alias=decl.namespace_alias,
        )


def merge_imports(imports: Iterable[ImportDeclaration], sort: bool = False) -> List[MergedImport]:
    """Merge declarations that share a module source.

    Groups keep the order in which their source was first seen. Inside a
    group the first default and the first namespace alias win, and a named
    binding is only added if its name is not already present.

    Args:
        imports: Declarations in file order.
        sort: If True, order groups by module source and each group's named
            bindings by name.
    Returns:
        The merged groups.
    """
    groups: Dict[str, MergedImport] = {}

    for decl in imports:
        entry = groups.get(decl.module_source)
        if entry is None:
            entry = groups[decl.module_source] = MergedImport(decl.module_source)

        if decl.default_binding:
            if entry.default_binding is None:
                entry.default_binding = decl.default_binding
            elif entry.default_binding != decl.default_binding:
                LOG.debug(f"Discarding default import '{decl.default_binding}' from '{decl.module_source}'")

        if decl.namespace_alias:
            if entry.namespace_alias is None:
                entry.namespace_alias = decl.namespace_alias
            elif entry.namespace_alias != decl.namespace_alias:
                LOG.debug(f"Discarding namespace import '{decl.namespace_alias}' from '{decl.module_source}'")

        known = {named.name for named in entry.named_bindings}
        for named in decl.named_bindings:
            if named.name in known:
                LOG.debug(f"Skipping duplicate named import '{named.name}' from '{decl.module_source}'")
                continue
            entry.named_bindings.append(NamedImport(named.name, named.alias))
            known.add(named.name)

    merged = list(groups.values())
    LOG.debug(f"Merged {len(merged)} module sources")

    if sort:
        merged.sort(key=lambda m: m.module_source.encode("utf-8"))
        for entry in merged:
            entry.named_bindings.sort(key=lambda n: n.name.encode("utf-8"))

    return merged


def dedupe_and_sort(imports: Iterable[ImportDeclaration], remove_duplicates: bool = False,
                    sort: bool = False) -> List[MergedImport]:
    """Apply duplicate-line removal and sorting without merging bindings."""
    unique: List[ImportDeclaration] = []
    seen_lines = set()
    for decl in imports:
        if remove_duplicates:
            key = decl.original_text.strip()
            if key in seen_lines:
                LOG.debug(f"Removing duplicate import line {decl.line_index + 1}")
                continue
            seen_lines.add(key)
        unique.append(decl)

    if sort:
        unique.sort(key=lambda d: d.module_source.encode("utf-8"))

    return [MergedImport.from_declaration(decl) for decl in unique]


def apply_rules(imports: List[ImportDeclaration], rules: OptimizationRules) -> List[MergedImport]:
    """Run the merge or dedupe/sort strategy selected by ``rules``."""
    if rules.merge_imports:
        return merge_imports(imports, sort=rules.sort_imports)
    return dedupe_and_sort(imports, remove_duplicates=rules.remove_duplicates, sort=rules.sort_imports)
