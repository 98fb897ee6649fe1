"""Bundle assembly: declarations, lookup object and template substitution."""

from __future__ import annotations

import re
from typing import Callable, Iterable, Sequence

from ..errors import TemplateError

# Line breaks followed by content; blank lines and the end stay unindented.
_INDENTABLE_BREAK = re.compile(r"\n(?!$)", re.MULTILINE)


def render_lookup(identifiers: Iterable[str], namespace: str, indent_unit: str = "    ") -> str:
    entries = ",".join(f"\n{indent_unit}{name}: {name}" for name in identifiers)
    return f"var {namespace} = {{{entries}\n}};"


def indent_block(text: str, indent_unit: str = "    ") -> str:
    return _INDENTABLE_BREAK.sub(lambda _: "\n" + indent_unit, text)


def substitute(template: str, placeholder: str, block: str) -> str:
    if placeholder not in template:
        raise TemplateError(f"Placeholder `{placeholder}` not found in template")
    return template.replace(placeholder, block, 1)


def assemble_bundle(
    requested: Sequence[str],
    ordered: Sequence[str],
    render: Callable[[str], str],
    template: str,
    *,
    namespace: str = "R",
    placeholder: str = "/* global R */",
    indent_unit: str = "    ",
) -> str:
    """Concatenate rendered modules plus the lookup object into ``template``."""
    modules = "\n\n".join(render(identifier) for identifier in ordered)
    block = modules + "\n\n" + render_lookup(requested, namespace, indent_unit)
    return substitute(template, placeholder, indent_block(block, indent_unit))
