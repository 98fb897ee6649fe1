"""Argument validation and settings overrides for the CLI."""

import argparse
import os
from dataclasses import replace
from pathlib import Path
from typing import List

from lite_bundle.config import Settings
from lite_bundle.errors import MissingModuleError
from lite_bundle.repo import scan_modules


def settings_from_args(args: argparse.Namespace, base: Settings) -> Settings:
    """Apply command line overrides on top of environment settings.

    Args:
        args: Parsed command line arguments.
        base: Settings loaded from the environment.

    Returns:
        Settings with every explicitly passed flag applied.
    """
    overrides = {}
    if args.src:
        overrides["source_root"] = Path(args.src)
    if args.template:
        overrides["template_path"] = Path(args.template)
    if args.namespace:
        overrides["namespace"] = args.namespace
        # The placeholder follows the namespace unless pinned in the environment.
        if "LITE_BUNDLE_PLACEHOLDER" not in os.environ:
            overrides["placeholder"] = f"/* global {args.namespace} */"
    if args.verbose:
        overrides["verbose"] = True
    return replace(base, **overrides)


def validate_source_root(source_root: Path) -> Path:
    """Resolve the module source root.

    Raises:
        MissingModuleError: If the path is not an existing directory.
    """
    source_root = Path(source_root).resolve()
    if not source_root.is_dir():
        raise MissingModuleError(f"Source directory does not exist: {source_root}", file=str(source_root))
    return source_root


def requested_files(args: argparse.Namespace, settings: Settings) -> List[str]:
    """Module files to bundle: every top-level module with --complete, else the positionals."""
    if args.complete:
        return [str(p) for p in scan_modules(settings.source_root)]
    return list(args.files)
