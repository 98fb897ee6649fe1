"""Memoized source parsing."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Union

from ..errors import MissingModuleError, ParseError
from .ast_utils import collect_comments_and_tokens, first_error
from .languages import create_parser
from .syntax import ParseResult

logger = logging.getLogger(__name__)


class ParseCache:
    """Parse results keyed by file path, scoped to one bundling run.

    Each path is read and parsed at most once; later calls return the same
    ``ParseResult`` object, so comment and token lists stay consistent with the
    tree other stages inspect.
    """

    def __init__(self) -> None:
        self._results: Dict[Path, ParseResult] = {}

    def __contains__(self, path: object) -> bool:
        return isinstance(path, (str, Path)) and Path(path).resolve() in self._results

    def __len__(self) -> int:
        return len(self._results)

    def parse(self, path: Union[str, Path]) -> ParseResult:
        key = Path(path).resolve()
        cached = self._results.get(key)
        if cached is not None:
            return cached
        result = self._parse_file(Path(path))
        self._results[key] = result
        return result

    def _parse_file(self, path: Path) -> ParseResult:
        try:
            source = path.read_bytes()
        except FileNotFoundError:
            raise MissingModuleError(f"No such module file: {path}", file=str(path)) from None
        except IsADirectoryError:
            raise MissingModuleError(f"Module path is a directory: {path}", file=str(path)) from None
        except OSError as e:
            raise MissingModuleError(f"Cannot read module file {path}: {e.strerror or e}", file=str(path)) from None

        try:
            source.decode("utf-8")
        except UnicodeDecodeError as e:
            line = source.count(b"\n", 0, e.start) + 1
            raise ParseError(f"Failed to parse {path}:{line}: not valid UTF-8", file=str(path), line=line) from None

        logger.debug("Parsing %s (%d bytes)", path, len(source))
        tree = create_parser().parse(source)
        bad = first_error(tree.root_node)
        if bad is not None:
            line = bad.start_point[0] + 1
            what = f"missing `{bad.type}`" if bad.is_missing else "syntax error"
            raise ParseError(f"Failed to parse {path}:{line}: {what}", file=str(path), line=line)

        comments, tokens = collect_comments_and_tokens(str(path), tree.root_node)
        return ParseResult(path=path, source=source, tree=tree, comments=comments, tokens=tokens)
