import configparser
import logging
import tomllib
from pathlib import Path

from import_optimizer.rules import OptimizationRules

LOG = logging.getLogger(__name__)

SECTION = "import-optimizer"
KEYS = {
    "sort-imports": "sort_imports",
    "remove-duplicates": "remove_duplicates",
    "merge-imports": "merge_imports",
}


def _rules_from_mapping(values) -> OptimizationRules:
    rules = OptimizationRules()
    for key, attr in KEYS.items():
        if key in values:
            setattr(rules, attr, values[key])
    return rules


def read_rules_config(root: str) -> OptimizationRules:
    """Detect optimization rules from pyproject.toml, setup.cfg or tox.ini, or use defaults."""
    root = Path(root)

    toml_path = root / "pyproject.toml"
    if toml_path.exists():
        try:
            with open(toml_path, "rb") as f:
                data = tomllib.load(f)
            section = data.get("tool", {}).get(SECTION)
            if isinstance(section, dict):
                return _rules_from_mapping({k: bool(v) for k, v in section.items()})
        except (OSError, tomllib.TOMLDecodeError) as e:
            LOG.debug(f"Ignoring unreadable {toml_path}: {e}")

    for cfg_name in ("setup.cfg", "tox.ini"):
        cfg_path = root / cfg_name
        if not cfg_path.exists():
            continue
        parser = configparser.ConfigParser()
        try:
            parser.read(cfg_path, encoding="utf-8")
            if parser.has_section(SECTION):
                section = parser[SECTION]
                return _rules_from_mapping({k: section.getboolean(k) for k in KEYS if k in section})
        except (configparser.Error, ValueError) as e:
            LOG.debug(f"Ignoring unreadable {cfg_path}: {e}")

    return OptimizationRules()
