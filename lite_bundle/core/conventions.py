"""Module convention checks.

A bundleable module looks like::

    var _curry2 = require('./internal/_curry2');
    var map = require('./map');

    /**
     * Docs.
     */
    module.exports = _curry2(function foo(a, b) { ... });

The predicates below match those shapes on the tagged statement variants;
``validate_body`` enforces the fatal rules.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, cast

from tree_sitter import Node as TSNode

from ..errors import Diagnostic, EmptyModuleError, MisplacedExportError, ignored_declaration_warning
from .ast_utils import named_children, node_text, top_level_statements, unwrap_parens
from .syntax import Declaration, Declarator, ExpressionStatement, ParseResult, Statement

IMPORT_FUNCTION = "require"
EXPORT_OBJECT = "module"
EXPORT_PROPERTY = "exports"

VARIABLE_KINDS = {"var", "let", "const"}


def is_require_call(init: Optional[TSNode]) -> bool:
    """``require('<literal>')`` with exactly one string argument."""
    if init is None or init.type != "call_expression":
        return False
    callee = init.child_by_field_name("function")
    if callee is None or callee.type != "identifier" or node_text(callee) != IMPORT_FUNCTION:
        return False
    args = init.child_by_field_name("arguments")
    if args is None or args.type != "arguments":
        return False
    values = named_children(args)
    return len(values) == 1 and values[0].type == "string"


def is_import_declaration(stmt: Statement) -> bool:
    if not isinstance(stmt, Declaration) or stmt.kind not in VARIABLE_KINDS:
        return False
    if len(stmt.declarators) != 1:
        return False
    declarator = stmt.declarators[0]
    return declarator.is_identifier and is_require_call(declarator.init)


def is_export_assignment(stmt: Statement) -> bool:
    """``module.exports = <expr>``."""
    if not isinstance(stmt, ExpressionStatement):
        return False
    expr = unwrap_parens(stmt.expression)
    if expr is None or expr.type != "assignment_expression":
        return False
    left = expr.child_by_field_name("left")
    if left is None or left.type != "member_expression":
        return False
    obj = left.child_by_field_name("object")
    prop = left.child_by_field_name("property")
    return (
        obj is not None
        and obj.type == "identifier"
        and node_text(obj) == EXPORT_OBJECT
        and prop is not None
        and prop.type == "property_identifier"
        and node_text(prop) == EXPORT_PROPERTY
    )


def export_value(stmt: Statement) -> TSNode:
    """Right-hand side of a validated export assignment."""
    expr = unwrap_parens(cast(ExpressionStatement, stmt).expression)
    return expr.child_by_field_name("right")


def import_prefix(body: Sequence[Statement]) -> List[Declarator]:
    """Declarators of the leading run of import declarations.

    Scanning stops at the first other statement; later `require` declarations
    are not imports.
    """
    imports: List[Declarator] = []
    for stmt in body:
        if not is_import_declaration(stmt):
            break
        imports.append(cast(Declaration, stmt).declarators[0])
    return imports


def validate_body(parsed: ParseResult) -> List[Statement]:
    """Return the top-level statements, raising if the module shape is wrong."""
    path = str(parsed.path)
    body = top_level_statements(parsed.root)
    if not body:
        raise EmptyModuleError(f"Nothing parsable in {path}", file=path)
    last = body[-1]
    if not is_export_assignment(last):
        raise MisplacedExportError(
            f"module.exports not positioned last in {path}:{last.line}",
            file=path,
            line=last.line,
        )
    return body


def ignored_declarations(parsed: ParseResult, body: Sequence[Statement]) -> List[Diagnostic]:
    """Warnings for top-level code that is neither an import nor the export."""
    path = str(parsed.path)
    warnings: List[Diagnostic] = []
    for stmt in body[len(import_prefix(body)):]:
        if isinstance(stmt, Declaration):
            for declarator in stmt.declarators:
                warnings.append(
                    ignored_declaration_warning(
                        f"Top-level declaration `{declarator.name}` ignored in {path}:{declarator.line}",
                        file=path,
                        line=declarator.line,
                    )
                )
        elif not is_export_assignment(stmt):
            kind = stmt.node.type
            warnings.append(
                ignored_declaration_warning(
                    f"Top-level statement `{kind}` ignored in {path}:{stmt.line}",
                    file=path,
                    line=stmt.line,
                )
            )
    return warnings
