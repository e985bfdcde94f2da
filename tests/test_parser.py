from import_optimizer.parser import extract_module_source
from import_optimizer.parser import is_import_line
from import_optimizer.parser import is_side_effect_import
from import_optimizer.parser import NamedImport
from import_optimizer.parser import parse_import_clause
from import_optimizer.parser import parse_import_line
from import_optimizer.parser import parse_named_imports


def test_parse_named_import_line():
    decl = parse_import_line('import { mapState } from "vuex";', 3)
    assert decl.module_source == "vuex"
    assert decl.line_index == 3
    assert decl.default_binding is None
    assert decl.namespace_alias is None
    assert decl.named_bindings == [NamedImport("mapState")]
    assert decl.original_text == 'import { mapState } from "vuex";'


def test_parse_mixed_import_line():
    decl = parse_import_line("  import React, { useState, useEffect as effect } from 'react';", 0)
    assert decl.default_binding == "React"
    assert decl.named_bindings == [NamedImport("useState"), NamedImport("useEffect", "effect")]
    assert decl.original_text == "import React, { useState, useEffect as effect } from 'react';"


def test_parse_namespace_import_line():
    decl = parse_import_line('import * as NS from "x";', 0)
    assert decl.namespace_alias == "NS"
    assert decl.default_binding is None
    assert decl.named_bindings == []


def test_parse_default_import_line():
    decl = parse_import_line('import utils from "@/utils/utils";', 0)
    assert decl.default_binding == "utils"
    assert decl.module_source == "@/utils/utils"


def test_alias_split_respects_word_boundaries():
    named = parse_named_imports(" hasAccess, classNames as cn, assign ")
    assert named == [
        NamedImport("hasAccess"),
        NamedImport("classNames", "cn"),
        NamedImport("assign"),
    ]


def test_repeated_names_keep_first():
    named = parse_named_imports("a as x, b, a as y,")
    assert named == [NamedImport("a", "x"), NamedImport("b")]


def test_namespace_alias_containing_as():
    assert parse_import_clause("* as assets") == (None, [], "assets")


def test_rejected_lines():
    assert parse_import_line("import './style.css';", 0) is None
    assert parse_import_line("import a", 0) is None
    assert parse_import_line("import * from 'x';", 0) is None
    assert parse_import_line('import a from "', 0) is None
    assert parse_import_line("import from 'x';", 0) is None
    assert parse_import_line("const a = 1;", 0) is None


def test_extract_module_source():
    assert extract_module_source('"vuex";') == "vuex"
    assert extract_module_source("'a' ; // 'b'") == "a' ; // 'b"
    assert extract_module_source("lodash;") == "lodash"
    assert extract_module_source("lodash ; extra") == "lodash"
    assert extract_module_source("';") == ""


def test_from_inside_identifier_is_not_a_keyword():
    decl = parse_import_line("import fromage from 'cheese';", 0)
    assert decl.default_binding == "fromage"
    assert decl.module_source == "cheese"


def test_parse_default_with_namespace():
    assert parse_import_clause("D, * as NS") == ("D", [], "NS")
    assert parse_import_clause("D * as NS") is None
    assert parse_import_clause("{ a }, * as NS") is None


def test_namespace_alias_stops_at_comma():
    default, named, namespace = parse_import_clause("* as NS, { a, b as c }")
    assert default is None
    assert namespace == "NS"
    assert named == [NamedImport("a"), NamedImport("b", "c")]
    assert parse_import_clause("D, * as NS, a as x") == ("D", [NamedImport("a", "x")], "NS")


def test_import_must_be_a_whole_word():
    assert not is_import_line("importScripts('w.js');")
    assert is_import_line("  import{ a } from 'a';")
    assert parse_import_line("importer from 'x';", 0) is None
    assert is_side_effect_import("import './a.css';")
    assert not is_side_effect_import("import a from './a';")
