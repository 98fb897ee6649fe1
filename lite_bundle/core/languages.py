"""JavaScript grammar loader for tree-sitter with an optional local grammar."""

from __future__ import annotations

import ctypes
import functools
import os
from pathlib import Path
from typing import Optional

from tree_sitter import Language, Parser

PROVIDER_MODULE = "tree_sitter_javascript"
GRAMMAR_SO = "tree-sitter-javascript.so"


def _local_so() -> Optional[Path]:
    # Allow a prebuilt grammar via env for machines without the provider wheel.
    lib_dir = os.environ.get("LITE_BUNDLE_LIB_DIR", "").strip()
    if not lib_dir:
        return None
    return Path(lib_dir).resolve() / GRAMMAR_SO


@functools.lru_cache(maxsize=None)
def create_parser() -> Parser:
    """Create (once) a JavaScript parser.

    Resolution order:
    1) tree_sitter_javascript provider module
    2) local .so from $LITE_BUNDLE_LIB_DIR via ctypes + tree_sitter.Language
    3) raise RuntimeError
    """
    errors = []

    try:
        mod = __import__(PROVIDER_MODULE)
        return Parser(Language(mod.language()))
    except Exception as e:
        errors.append(f"provider_module({PROVIDER_MODULE}) failed: {e!r}")

    so_path = _local_so()
    if so_path and so_path.exists():
        try:
            return Parser(_load_language_from_so(so_path))
        except Exception as e:
            errors.append(f"local_so({so_path}) failed: {e!r}")

    detail = "; ".join(errors) if errors else "no detailed error captured"
    raise RuntimeError(f"No JavaScript parser available. Details: {detail}")


def _load_language_from_so(so_path: Path) -> Language:
    """Load the tree-sitter Language from a grammar .so."""
    lib = ctypes.CDLL(str(so_path))
    if not hasattr(lib, PROVIDER_MODULE):
        raise RuntimeError(f"Grammar library missing symbol: {PROVIDER_MODULE}")
    func = getattr(lib, PROVIDER_MODULE)
    func.restype = ctypes.c_void_p
    ptr = func()
    if not ptr:
        raise RuntimeError(f"Failed to obtain TSLanguage* from {PROVIDER_MODULE}")
    return Language(ptr)
