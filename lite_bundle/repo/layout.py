"""Mapping between module identifiers, file names and import paths."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Union

MODULE_SUFFIX = ".js"

# `_foo` is internal, `__` (the placeholder module) is not.
_INTERNAL_RE = re.compile(r"^(?!__$)_")
_RELATIVE_RE = re.compile(r"^[.]{1,2}/")
_DOT_LETTER_RE = re.compile(r"[.]([a-z])")


def is_internal(identifier: str) -> bool:
    return bool(_INTERNAL_RE.match(identifier))


def filename_to_identifier(filename: Union[str, Path]) -> str:
    """``path/to/foo.js`` -> ``foo``; a bare identifier is returned unchanged."""
    name = Path(filename).name
    if name.endswith(MODULE_SUFFIX):
        name = name[: -len(MODULE_SUFFIX)]
    return name


@dataclass(frozen=True)
class ModuleLayout:
    source_root: Path
    internal_dir: str = "internal"

    @property
    def internal_root(self) -> Path:
        return self.source_root / self.internal_dir

    def identifier_to_path(self, identifier: str) -> Path:
        root = self.internal_root if is_internal(identifier) else self.source_root
        return root / f"{identifier}{MODULE_SUFFIX}"

    def import_path_to_identifier(self, literal: str) -> str:
        """Identifier an import path must be bound to.

        ``./internal/_curry2`` -> ``_curry2``, ``../map`` -> ``map``,
        ``./foo.bar`` -> ``fooBar``.
        """
        marker = f"./{self.internal_dir}/"
        if literal.startswith(marker):
            literal = "./" + literal[len(marker):]
        literal = _RELATIVE_RE.sub("", literal, count=1)
        return _DOT_LETTER_RE.sub(lambda m: m.group(1).upper(), literal)
