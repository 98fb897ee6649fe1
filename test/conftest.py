from __future__ import annotations

import logging
import os
from pathlib import Path
from textwrap import dedent

import pytest

from lite_bundle.config import Settings
from lite_bundle.core.parser import ParseCache
from lite_bundle.repo.layout import ModuleLayout

TEMPLATE = "(function() {\n    /* global R */\n}());\n"


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch):
    for name in list(os.environ):
        if name.startswith("LITE_BUNDLE_"):
            monkeypatch.delenv(name)
    yield
    # main.run() installs a handler bound to the captured stderr of one test
    logging.getLogger("lite_bundle").handlers.clear()


@pytest.fixture
def src_root(tmp_path: Path) -> Path:
    root = tmp_path / "src"
    (root / "internal").mkdir(parents=True)
    return root


@pytest.fixture
def layout(src_root: Path) -> ModuleLayout:
    return ModuleLayout(source_root=src_root)


@pytest.fixture
def cache() -> ParseCache:
    return ParseCache()


@pytest.fixture
def write_module(layout: ModuleLayout):
    """Write a module by identifier; internal identifiers land under src/internal.

    Usage:
        write_module("add", '''
            var _curry2 = require('./internal/_curry2');
            module.exports = _curry2(function add(a, b) { return a + b; });
        ''')
    """

    def _write(identifier: str, content: str) -> Path:
        path = layout.identifier_to_path(identifier)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(dedent(content).lstrip("\n"), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def template_file(tmp_path: Path) -> Path:
    path = tmp_path / "template.js"
    path.write_text(TEMPLATE, encoding="utf-8")
    return path


@pytest.fixture
def settings(src_root: Path, template_file: Path) -> Settings:
    return Settings(
        source_root=src_root,
        internal_dir="internal",
        template_path=template_file,
        namespace="R",
        placeholder="/* global R */",
        indent=4,
        verbose=False,
    )
