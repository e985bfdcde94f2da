from import_optimizer.parser import NamedImport
from import_optimizer.parser import parse_import_line
from import_optimizer.rules import dedupe_and_sort
from import_optimizer.rules import merge_imports


def _parse(*lines):
    return [parse_import_line(line, i) for i, line in enumerate(lines)]


def test_merge_unions_named_bindings_in_first_seen_order():
    merged = merge_imports(_parse(
        "import { b } from 'm';",
        "import z from 'z';",
        "import { a, b as other } from 'm';",
    ))
    assert [m.module_source for m in merged] == ["m", "z"]
    assert merged[0].named_bindings == [NamedImport("b"), NamedImport("a")]


def test_merge_first_default_and_namespace_win():
    merged = merge_imports(_parse(
        "import A from 'x';",
        "import B from 'x';",
        "import * as One from 'y';",
        "import * as Two from 'y';",
    ))
    assert merged[0].default_binding == "A"
    assert merged[1].namespace_alias == "One"


def test_merge_with_sort_orders_groups_and_names_bytewise():
    merged = merge_imports(_parse(
        "import { mapState } from 'vuex';",
        "import { mapActions } from 'vuex';",
        "import Enum from '@/data/Enum';",
        "import config from '@/data/config.json';",
    ), sort=True)
    assert [m.module_source for m in merged] == ["@/data/Enum", "@/data/config.json", "vuex"]
    assert [n.name for n in merged[2].named_bindings] == ["mapActions", "mapState"]


def test_dedupe_keeps_first_identical_line():
    result = dedupe_and_sort(_parse(
        "import a from 'x';",
        "import a from 'x';",
        "import b from 'x';",
    ), remove_duplicates=True)
    assert [r.default_binding for r in result] == ["a", "b"]


def test_sort_is_stable():
    result = dedupe_and_sort(_parse(
        "import b from 'x';",
        "import c from 'a';",
        "import a from 'x';",
    ), sort=True)
    assert [r.default_binding for r in result] == ["c", "b", "a"]
