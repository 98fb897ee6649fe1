"""CLI support utilities: argument handling, console logging and timing."""

from util.arg_utils import requested_files, settings_from_args, validate_source_root
from util.console_utils import configure_logging, env_verbose
from util.runtime_utils import elapsed_since, format_duration

__all__ = [
    "configure_logging",
    "elapsed_since",
    "env_verbose",
    "format_duration",
    "requested_files",
    "settings_from_args",
    "validate_source_root",
]
