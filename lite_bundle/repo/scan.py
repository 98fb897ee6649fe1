"""Source tree scanning for complete builds."""

from __future__ import annotations

import re
from pathlib import Path
from typing import List

from ..errors import MissingModuleError

_MODULE_FILE_RE = re.compile(r".*[.]js$")


def scan_modules(source_root: Path) -> List[Path]:
    """Every ``*.js`` file directly under ``source_root`` (internal modules excluded)."""
    if not source_root.is_dir():
        raise MissingModuleError(f"Source directory does not exist: {source_root}", file=str(source_root))
    results = [
        path
        for path in source_root.iterdir()
        if _MODULE_FILE_RE.match(path.name) and path.is_file()
    ]
    # stable ordering
    return sorted(results, key=lambda p: p.name)
