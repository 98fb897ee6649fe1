"""lite-bundle command line entry point.

Flow:
1. Parse arguments and load settings (environment, then flags)
2. Resolve the requested modules (positionals or --complete)
3. Build the bundle
4. Write it to stdout, or report the first fatal error and exit 1
"""

import argparse
import sys
import time
from dataclasses import replace
from typing import List, Optional

from lite_bundle import __version__
from lite_bundle.config import Settings
from lite_bundle.core.builder import BundleBuilder
from lite_bundle.errors import BundleError
from util import (
    configure_logging,
    elapsed_since,
    env_verbose,
    requested_files,
    settings_from_args,
    validate_source_root,
)


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        The parsed argument namespace.
    """
    parser = argparse.ArgumentParser(
        prog="lite-bundle",
        description="Bundle selected modules and their dependencies into a single script",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
        Examples:
        # Bundle two modules (and everything they require)
        lite-bundle src/map.js src/filter.js > dist/custom.js

        # Bundle every module under the source root
        lite-bundle --complete > dist/full.js
                """
    )

    parser.add_argument(
        "files",
        nargs="*",
        help="Module files or identifiers to include (e.g. src/map.js or map)"
    )

    parser.add_argument(
        "--complete",
        action="store_true",
        help="Include every module in the source root"
    )

    parser.add_argument(
        "--src",
        type=str,
        default="",
        help="Module source root (default: $LITE_BUNDLE_SRC or ./src)"
    )

    parser.add_argument(
        "--template",
        type=str,
        default="",
        help="Wrapper template file (default: bundled UMD template)"
    )

    parser.add_argument(
        "--namespace",
        type=str,
        default="",
        help="Name of the generated lookup object (default: R)"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Verbose logging"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    args = parser.parse_args(argv)
    if not args.complete and not args.files:
        parser.error("no modules given (pass module files or --complete)")
    return args


def run(argv: Optional[List[str]] = None) -> int:
    """Run the bundler and return the process exit code."""
    args = parse_arguments(argv)
    settings = settings_from_args(args, Settings.load())
    logger = configure_logging(verbose=settings.verbose or env_verbose())

    started = time.monotonic()
    try:
        settings = replace(settings, source_root=validate_source_root(settings.source_root))
        files = requested_files(args, settings)
        bundle = BundleBuilder(settings).build(files)
    except BundleError as e:
        logger.error(str(e))
        return 1

    sys.stdout.write(bundle)
    logger.debug("Built bundle from %d module(s) in %s", len(files), elapsed_since(started))
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
