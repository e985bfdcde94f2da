"""Parser module for import-optimizer.

This module turns single ES-module import lines into structured
declarations. It is a textual parser: one line in, one declaration (or
``None``) out.
"""

from __future__ import annotations
from dataclasses import dataclass
from dataclasses import field
import logging
import re
from typing import List
from typing import Optional
from typing import Tuple

LOG = logging.getLogger(__name__)

QUOTES = "'\""

_FROM_TOKEN = re.compile(r"\bfrom\b")
_AS_TOKEN = re.compile(r"\s+as\s+")
_IMPORT_TOKEN = re.compile(r"import\b")
_SIDE_EFFECT = re.compile(r"""import\s*['"]""")
_NAMESPACE = re.compile(r"\*\s*as\s+(?P<alias>[^\s,{}]+)\s*(?:,\s*(?P<rest>.*?))?\s*$")


@dataclass
class NamedImport:
    name: str
    alias: Optional[str] = None


@dataclass
class ImportDeclaration:
    """One recognized import line."""

    original_text: str
    line_index: int
    module_source: str
    default_binding: Optional[str] = None
    named_bindings: List[NamedImport] = field(default_factory=list)
    namespace_alias: Optional[str] = None


def is_import_line(line: str) -> bool:
    """Return True if the stripped line starts with the ``import`` token."""
    return _IMPORT_TOKEN.match(line.strip()) is not None


def is_side_effect_import(line: str) -> bool:
    """Return True for bare module imports such as ``import './a.css';``."""
    return _SIDE_EFFECT.match(line.strip()) is not None


def extract_module_source(specifier: str) -> str:
    """Extract the module source from the text following ``from``.

    The source is the text between the first and the last quote character.
    Without a usable quote pair, surrounding quotes, whitespace and
    semicolons are stripped and the result is cut at the first semicolon.
    """
    start = next((i for i, c in enumerate(specifier) if c in QUOTES), None)
    end = next((i for i in range(len(specifier) - 1, -1, -1) if specifier[i] in QUOTES), None)
    if start is not None and end is not None and start < end:
        return specifier[start + 1:end]

    trimmed = specifier.strip(QUOTES + "; \t")
    if ";" in trimmed:
        return trimmed.split(";", 1)[0].strip()
    return trimmed


def parse_named_imports(inner: str) -> List[NamedImport]:
    """Parse the interior of a ``{ ... }`` group into named bindings.

    ``as`` is only recognized as a separate word, so identifiers such as
    ``hasAccess`` or ``classNames`` are kept whole.
    """
    named: List[NamedImport] = []
    seen = set()
    for item in inner.split(","):
        item = item.strip()
        if not item:
            continue
        parts = _AS_TOKEN.split(item, maxsplit=1)
        name = parts[0].strip()
        alias = parts[1].strip() if len(parts) == 2 else None
        if not name:
            continue
        if name in seen:
            LOG.debug(f"Skipping repeated named import '{name}'")
            continue
        seen.add(name)
        named.append(NamedImport(name, alias or None))
    return named


def _parse_namespace_clause(part: str) -> Optional[Tuple[Optional[str], List[NamedImport], Optional[str]]]:
    """Parse ``[default,] * as alias [, named]`` clauses."""
    star = part.index("*")
    default = part[:star].strip()
    if default:
        if not default.endswith(","):
            return None
        default = default[:-1].strip()
        if not default or any(c in default for c in "{},*"):
            return None

    match = _NAMESPACE.match(part, star)
    if match is None:
        LOG.debug(f"Unrecognized namespace clause: '{part}'")
        return None

    named: List[NamedImport] = []
    rest = match.group("rest")
    if rest:
        if rest.startswith("{") and rest.endswith("}"):
            named = parse_named_imports(rest[1:-1])
        elif any(c in rest for c in "{}*"):
            return None
        else:
            named = parse_named_imports(rest)

    LOG.debug(f"Namespace import clause: '{part}'")
    return default or None, named, match.group("alias")


def parse_import_clause(clause: str) -> Optional[Tuple[Optional[str], List[NamedImport], Optional[str]]]:
    """Classify an import clause.

    Returns a ``(default, named, namespace)`` tuple, or None when the clause
    has no recognizable shape.
    """
    part = clause.strip()
    if not part:
        return None

    if "*" in part:
        return _parse_namespace_clause(part)

    if part.startswith("{") and part.endswith("}"):
        LOG.debug(f"Named import clause: '{part}'")
        return None, parse_named_imports(part[1:-1]), None

    if "{" in part and "}" in part:
        brace_start = part.index("{")
        brace_end = part.rindex("}")
        if brace_start < brace_end:
            default = part[:brace_start].strip().rstrip(",").strip()
            LOG.debug(f"Mixed import clause: default='{default}', named='{part[brace_start:brace_end + 1]}'")
            return default or None, parse_named_imports(part[brace_start + 1:brace_end]), None

    if not any(c in part for c in "{}*"):
        LOG.debug(f"Default import clause: '{part}'")
        return part, [], None

    LOG.debug(f"Unrecognized import clause: '{part}'")
    return None


def parse_import_line(line: str, line_index: int) -> Optional[ImportDeclaration]:
    """Parse one import line into an ImportDeclaration.

    Args:
        line: The source line; surrounding whitespace is ignored.
        line_index: 0-based position of the line in the source.

    Returns:
        The parsed declaration, or None if the line is not a well-formed
        ``import ... from '...'`` statement.
    """
    text = line.strip()
    if not is_import_line(text):
        return None

    match = _FROM_TOKEN.search(text)
    if match is None:
        return None

    clause = text[len("import"):match.start()]
    source = extract_module_source(text[match.end():].strip())
    LOG.debug(f"Extracted module source '{source}' from line {line_index + 1}")
    if not source:
        return None

    parsed = parse_import_clause(clause)
    if parsed is None:
        return None
    default, named, namespace = parsed

    return ImportDeclaration(
        original_text=text,
        line_index=line_index,
        module_source=source,
        default_binding=default,
        named_bindings=named,
        namespace_alias=namespace,
    )
