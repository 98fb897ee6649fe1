from dataclasses import replace

import pytest

from lite_bundle.core.assemble import assemble_bundle, indent_block, render_lookup, substitute
from lite_bundle.core.builder import BundleBuilder
from lite_bundle.errors import DependencyCycleError, TemplateError, UnsortedImportsError


def test_render_lookup():
    assert render_lookup(["add", "map"], "R") == "var R = {\n    add: add,\n    map: map\n};"


def test_indent_skips_blank_lines_and_trailing_newline():
    assert indent_block("a\nb\n\nc\n") == "a\n    b\n\n    c\n"


def test_substitute_replaces_first_placeholder_only():
    assert substitute("x /* p */ y /* p */", "/* p */", "$1") == "x $1 y /* p */"


def test_template_without_placeholder():
    with pytest.raises(TemplateError):
        substitute("nothing here", "/* global R */", "body")


def test_assemble_bundle_order_and_lookup():
    rendered = {"p": "var p = 1;", "q": "var q = p + 1;"}

    bundle = assemble_bundle(["q"], ["p", "q"], rendered.__getitem__, "(\n    /* global R */\n)")

    assert bundle == "(\n    var p = 1;\n\n    var q = p + 1;\n\n    var R = {\n        q: q\n    };\n)"


def test_builder_end_to_end(write_module, settings):
    write_module("p", "module.exports = 1;\n")
    write_module("q", "var p = require('./p');\n\nmodule.exports = p + 1;\n")

    bundle = BundleBuilder(settings).build(["q"])

    assert bundle == (
        "(function() {\n"
        "    var p = 1;\n"
        "\n"
        "    var q = p + 1;\n"
        "\n"
        "    var R = {\n"
        "        q: q\n"
        "    };\n"
        "}());\n"
    )
    assert bundle.index("var p =") < bundle.index("var q =")


def test_builder_accepts_file_names_and_dedupes(write_module, settings, src_root):
    write_module("_identity", "module.exports = function _identity(x) { return x; };\n")
    write_module(
        "identity",
        """
        var _identity = require('./internal/_identity');
        module.exports = _identity;
        """,
    )
    write_module("always", "module.exports = function always(x) { return function() { return x; }; };\n")

    bundle = BundleBuilder(settings).build([str(src_root / "identity.js"), "always", "identity"])

    assert "var _identity = function _identity(x) { return x; };" in bundle
    assert "var R = {\n        always: always,\n        identity: identity\n    };" in bundle
    assert "_identity: _identity" not in bundle
    assert bundle.index("var _identity") < bundle.index("var identity")


def test_builder_uses_namespace_and_placeholder(write_module, settings, template_file):
    template_file.write_text("/* bundle */\n", encoding="utf-8")
    write_module("a", "module.exports = 'a';\n")

    custom = replace(settings, namespace="Lib", placeholder="/* bundle */", indent=2)
    bundle = BundleBuilder(custom).build(["a"])

    assert bundle == "var a = 'a';\n\n  var Lib = {\n    a: a\n  };\n"


def test_builder_fails_without_partial_output(write_module, settings):
    write_module("good", "module.exports = 1;\n")
    write_module("bad", "var z = require('./z');\nvar a = require('./a');\nmodule.exports = a;\n")

    with pytest.raises(UnsortedImportsError):
        BundleBuilder(settings).build(["bad", "good"])


def test_builder_reports_cycles(write_module, settings):
    write_module("a", "var b = require('./b');\nmodule.exports = b;\n")
    write_module("b", "var a = require('./a');\nmodule.exports = a;\n")

    with pytest.raises(DependencyCycleError):
        BundleBuilder(settings).build(["a"])


def test_missing_template(write_module, settings, tmp_path):
    write_module("a", "module.exports = 1;\n")

    with pytest.raises(TemplateError):
        BundleBuilder(replace(settings, template_path=tmp_path / "absent.js")).build(["a"])
