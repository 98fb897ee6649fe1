"""Core stages of the bundler.

Parsing, convention checks, dependency extraction, graph ordering, export
rewriting and assembly.
"""

def __getattr__(name):
    """Lazy import so light users do not pay for loading tree-sitter."""

    # Data structures
    if name in ("ParseResult", "Comment", "Token", "VarDeclaration", "Span"):
        from .syntax import ParseResult, Comment, Token, VarDeclaration, Span
        return locals()[name]

    # Parsing
    if name == "ParseCache":
        from .parser import ParseCache
        return ParseCache
    if name == "create_parser":
        from .languages import create_parser
        return create_parser

    # Conventions and extraction
    if name in ("validate_body", "ignored_declarations", "is_import_declaration", "is_export_assignment"):
        from .conventions import validate_body, ignored_declarations, is_import_declaration, is_export_assignment
        return locals()[name]
    if name == "dependencies_of":
        from .dependencies import dependencies_of
        return dependencies_of

    # Graph
    if name in ("build_dependency_graph", "order_dependencies"):
        from .graph import build_dependency_graph, order_dependencies
        return locals()[name]

    # Output
    if name in ("rewrite_export", "export_declaration"):
        from .rewrite import rewrite_export, export_declaration
        return locals()[name]
    if name in ("assemble_bundle", "render_lookup", "indent_block"):
        from .assemble import assemble_bundle, render_lookup, indent_block
        return locals()[name]
    if name == "BundleBuilder":
        from .builder import BundleBuilder
        return BundleBuilder

    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")

__all__ = [
    "ParseResult",
    "Comment",
    "Token",
    "VarDeclaration",
    "Span",
    "ParseCache",
    "create_parser",
    "validate_body",
    "ignored_declarations",
    "is_import_declaration",
    "is_export_assignment",
    "dependencies_of",
    "build_dependency_graph",
    "order_dependencies",
    "rewrite_export",
    "export_declaration",
    "assemble_bundle",
    "render_lookup",
    "indent_block",
    "BundleBuilder",
]
