"""Module layout and source tree scanning.

Resolves module identifiers to files under the source root and lists the
modules a complete build includes.
"""

from .layout import ModuleLayout, filename_to_identifier, is_internal
from .scan import scan_modules

__all__ = [
    "ModuleLayout",
    "filename_to_identifier",
    "is_internal",
    "scan_modules",
]
