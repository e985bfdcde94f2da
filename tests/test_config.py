from import_optimizer.config import read_rules_config
from import_optimizer.rules import OptimizationRules


def test_read_rules_config_from_toml(tmp_path):
    toml = tmp_path / "pyproject.toml"
    toml.write_text("[tool.import-optimizer]\nsort-imports = true\nmerge-imports = true\n")
    rules = read_rules_config(str(tmp_path))
    assert rules == OptimizationRules(sort_imports=True, remove_duplicates=False, merge_imports=True)


def test_read_rules_config_from_setup_cfg(tmp_path):
    cfg = tmp_path / "setup.cfg"
    cfg.write_text("[import-optimizer]\nremove-duplicates = yes\nsort-imports = false\n")
    rules = read_rules_config(str(tmp_path))
    assert rules == OptimizationRules(sort_imports=False, remove_duplicates=True, merge_imports=False)


def test_read_rules_config_defaults(tmp_path):
    assert read_rules_config(str(tmp_path)) == OptimizationRules()


def test_broken_toml_falls_back_to_defaults(tmp_path):
    (tmp_path / "pyproject.toml").write_text("[tool.import-optimizer\nsort-imports = ")
    assert read_rules_config(str(tmp_path)) == OptimizationRules()
