"""Core syntax data structures shared by the bundler stages."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple, Union

from tree_sitter import Node as TSNode
from tree_sitter import Tree


Span = Tuple[str, int, int, int, int]  # (path, start_line, start_col, end_line, end_col)


@dataclass(frozen=True)
class Comment:
    text: str
    span: Span
    top_level: bool
    start_byte: int = 0


@dataclass(frozen=True)
class Token:
    kind: str
    text: str
    span: Span


@dataclass(frozen=True)
class ParseResult:
    """One parsed file: the tree plus its comment and token sequences."""

    path: Path
    source: bytes
    tree: Tree
    comments: Tuple[Comment, ...]
    tokens: Tuple[Token, ...]

    @property
    def root(self) -> TSNode:
        return self.tree.root_node


# Top-level statement variants.


@dataclass(frozen=True)
class Declarator:
    name: str
    is_identifier: bool
    init: Optional[TSNode]
    line: int


@dataclass(frozen=True)
class Declaration:
    """``var``/``let``/``const``/``function``/``class`` at top level."""

    node: TSNode
    kind: str
    declarators: Tuple[Declarator, ...]

    @property
    def line(self) -> int:
        return self.node.start_point[0] + 1


@dataclass(frozen=True)
class ExpressionStatement:
    node: TSNode
    expression: Optional[TSNode]

    @property
    def line(self) -> int:
        return self.node.start_point[0] + 1


@dataclass(frozen=True)
class OtherStatement:
    node: TSNode

    @property
    def kind(self) -> str:
        return self.node.type

    @property
    def line(self) -> int:
        return self.node.start_point[0] + 1


Statement = Union[Declaration, ExpressionStatement, OtherStatement]


@dataclass(frozen=True)
class VarDeclaration:
    """A synthesized ``var <name> = <init>;`` statement.

    Built fresh for every rewritten module so the cached tree stays untouched.
    """

    name: str
    init: TSNode
    leading_comments: Tuple[Comment, ...] = field(default_factory=tuple)
    kind: str = "var"

    def render(self) -> str:
        init_text = self.init.text.decode("utf-8")
        lines = [c.text for c in self.leading_comments]
        lines.append(f"{self.kind} {self.name} = {init_text};")
        return "\n".join(lines)
