"""Selective bundler for single-export-per-file JavaScript module trees."""

__version__ = "0.1.0"

from .config import Settings
from .errors import BundleError, Diagnostic

__all__ = [
    "__version__",
    "Settings",
    "BundleError",
    "Diagnostic",
]
