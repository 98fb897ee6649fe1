"""AST helpers to turn tree-sitter nodes into bundler statements."""

from __future__ import annotations

from typing import List, Optional, Tuple

from tree_sitter import Node as TSNode

from .syntax import (
    Comment,
    Declaration,
    Declarator,
    ExpressionStatement,
    OtherStatement,
    Span,
    Statement,
    Token,
)


# Children of `program` that are not statements.
NON_STATEMENT_TYPES = {"comment", "html_comment", "hash_bang_line"}

COMMENT_TYPES = {"comment", "html_comment"}

STRING_ESCAPES = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "b": "\b",
    "f": "\f",
    "v": "\v",
}


def span_for(path: str, node: TSNode) -> Span:
    sl, sc = node.start_point
    el, ec = node.end_point
    return (path, sl + 1, sc + 1, el + 1, ec + 1)


def node_text(node: Optional[TSNode]) -> str:
    if node is None:
        return ""
    return node.text.decode("utf-8")


def named_children(node: TSNode) -> List[TSNode]:
    """Named children without interleaved comments."""
    return [c for c in node.named_children if c.type not in COMMENT_TYPES]


def unwrap_parens(node: Optional[TSNode]) -> Optional[TSNode]:
    while node is not None and node.type == "parenthesized_expression":
        inner = named_children(node)
        node = inner[0] if len(inner) == 1 else None
    return node


def top_level_statements(root: TSNode) -> List[Statement]:
    return [classify_statement(c) for c in root.named_children if c.type not in NON_STATEMENT_TYPES]


def classify_statement(node: TSNode) -> Statement:
    if node.type == "variable_declaration":
        return Declaration(node=node, kind="var", declarators=_declarators(node))
    if node.type == "lexical_declaration":
        kind_node = node.child_by_field_name("kind")
        return Declaration(node=node, kind=node_text(kind_node) or "let", declarators=_declarators(node))
    if node.type in {"function_declaration", "generator_function_declaration", "class_declaration"}:
        name = node.child_by_field_name("name")
        kind = "class" if node.type == "class_declaration" else "function"
        declarator = Declarator(
            name=node_text(name),
            is_identifier=name is not None and name.type == "identifier",
            init=None,
            line=node.start_point[0] + 1,
        )
        return Declaration(node=node, kind=kind, declarators=(declarator,))
    if node.type == "expression_statement":
        inner = named_children(node)
        return ExpressionStatement(node=node, expression=inner[0] if inner else None)
    return OtherStatement(node=node)


def _declarators(node: TSNode) -> Tuple[Declarator, ...]:
    out = []
    for child in named_children(node):
        if child.type != "variable_declarator":
            continue
        name = child.child_by_field_name("name")
        out.append(
            Declarator(
                name=node_text(name),
                is_identifier=name is not None and name.type == "identifier",
                init=child.child_by_field_name("value"),
                line=child.start_point[0] + 1,
            )
        )
    return tuple(out)


def collect_comments_and_tokens(path: str, root: TSNode) -> Tuple[Tuple[Comment, ...], Tuple[Token, ...]]:
    """Preorder walk collecting comments and non-comment leaf tokens."""
    comments: List[Comment] = []
    tokens: List[Token] = []
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type in COMMENT_TYPES:
            parent = node.parent
            comments.append(
                Comment(
                    text=node_text(node),
                    span=span_for(path, node),
                    top_level=parent is not None and parent.type == "program",
                    start_byte=node.start_byte,
                )
            )
            continue
        if node.child_count == 0:
            if node.end_byte > node.start_byte:
                tokens.append(Token(kind=node.type, text=node_text(node), span=span_for(path, node)))
            continue
        # string content is a single token, like an ECMAScript tokenizer sees it
        if node.type in {"string", "template_string", "regex"} and not _has_substitution(node):
            tokens.append(Token(kind=node.type, text=node_text(node), span=span_for(path, node)))
            continue
        stack.extend(reversed(node.children))
    return tuple(comments), tuple(tokens)


def _has_substitution(node: TSNode) -> bool:
    return any(c.type == "template_substitution" for c in node.children)


def first_error(node: TSNode) -> Optional[TSNode]:
    """Return the first ERROR or MISSING node in preorder, if any."""
    if not node.has_error:
        return None
    stack = [node]
    while stack:
        n = stack.pop()
        if n.type == "ERROR" or n.is_missing:
            return n
        stack.extend(reversed(n.children))
    return node


def string_value(node: TSNode) -> str:
    """Decoded value of a `string` literal node."""
    parts: List[str] = []
    for child in node.named_children:
        text = node_text(child)
        if child.type == "string_fragment":
            parts.append(text)
        elif child.type == "escape_sequence":
            parts.append(_unescape(text))
    return "".join(parts)


def _unescape(seq: str) -> str:
    body = seq[1:]
    if body and all(c in "01234567" for c in body):
        return chr(int(body, 8))
    if body in STRING_ESCAPES:
        return STRING_ESCAPES[body]
    if body.startswith("u{") and body.endswith("}"):
        return chr(int(body[2:-1], 16))
    if body[:1] in {"u", "x"} and len(body) > 1:
        return chr(int(body[1:], 16))
    if body.startswith(("\n", "\r")):
        return ""
    return body
