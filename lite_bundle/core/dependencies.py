"""Dependency extraction from a module's import prefix."""

from __future__ import annotations

import logging
from typing import List

from ..errors import ImportNameMismatchError, UnsortedImportsError
from ..repo.layout import ModuleLayout
from .ast_utils import named_children, string_value
from .conventions import ignored_declarations, import_prefix, validate_body
from .parser import ParseCache

logger = logging.getLogger(__name__)


def dependencies_of(identifier: str, layout: ModuleLayout, cache: ParseCache) -> List[str]:
    """Return the names of the immediate dependencies of ``identifier``.

    Assumes this format::

        var _quux = require('./internal/_quux');
        var bar = require('./bar');
        var baz = require('./baz');

    Requirements:

      - one binding per import;
      - the argument to require must be a string literal;
      - the require path must match the bound name; and
      - imports are sorted by bound name.
    """
    parsed = cache.parse(layout.identifier_to_path(identifier))
    path = str(parsed.path)
    body = validate_body(parsed)

    for warning in ignored_declarations(parsed, body):
        logger.warning(warning.message)

    imports = import_prefix(body)

    names = [d.name for d in imports]
    if any(a >= b for a, b in zip(names, names[1:])):
        raise UnsortedImportsError(f"Dependencies not declared in alphabetical order in {path}", file=path)

    for declarator in imports:
        literal = string_value(named_children(declarator.init.child_by_field_name("arguments"))[0])
        if declarator.name != layout.import_path_to_identifier(literal):
            raise ImportNameMismatchError(
                f"Dependency declared with different variable name: "
                f"`{declarator.name}` & `{literal}` in {path}",
                file=path,
                line=declarator.line,
            )

    return names
