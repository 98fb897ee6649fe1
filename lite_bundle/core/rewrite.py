"""Export rewriting: ``module.exports = <expr>`` -> ``var <id> = <expr>;``."""

from __future__ import annotations

from ..repo.layout import ModuleLayout
from .conventions import export_value, validate_body
from .parser import ParseCache
from .syntax import VarDeclaration


def export_declaration(identifier: str, layout: ModuleLayout, cache: ParseCache) -> VarDeclaration:
    parsed = cache.parse(layout.identifier_to_path(identifier))
    body = validate_body(parsed)
    export = body[-1].node
    value = export_value(body[-1])

    # Top-level comments, plus those inside the export but outside its value
    # (e.g. between `=` and the expression), which the value's text would drop.
    leading = tuple(
        c
        for c in parsed.comments
        if c.top_level
        or (
            export.start_byte <= c.start_byte < export.end_byte
            and not value.start_byte <= c.start_byte < value.end_byte
        )
    )
    return VarDeclaration(name=identifier, init=value, leading_comments=leading)


def rewrite_export(identifier: str, layout: ModuleLayout, cache: ParseCache) -> str:
    return export_declaration(identifier, layout, cache).render()
