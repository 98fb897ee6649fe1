"""Bundler errors and diagnostics.

Every fatal condition is a ``BundleError`` carrying a ``Diagnostic``. Library
code only raises; the CLI driver is the one place that turns an error into a
non-zero exit status.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Diagnostic(BaseModel):
    """A single error or warning about one module file."""

    model_config = ConfigDict(frozen=True)

    file: str = Field(default="", description="Path of the offending file (may be empty)")
    line: Optional[int] = Field(default=None, description="Line number (1-indexed), when known")
    message: str = Field(..., description="Human readable message, location included")
    severity: str = Field(default="error", description="Severity: error or warning")
    code: str = Field(default="", description="Stable diagnostic code (e.g. 'unsorted-imports')")


class BundleError(Exception):
    """Base class for every fatal bundling condition."""

    code = "bundle"

    def __init__(self, message: str, *, file: str = "", line: Optional[int] = None) -> None:
        super().__init__(message)
        self.diagnostic = Diagnostic(file=str(file), line=line, message=message, code=self.code)

    @property
    def file(self) -> str:
        return self.diagnostic.file

    @property
    def line(self) -> Optional[int]:
        return self.diagnostic.line


class ParseError(BundleError):
    code = "parse-error"


class MissingModuleError(BundleError):
    code = "missing-module"


class EmptyModuleError(BundleError):
    code = "empty-module"


class MisplacedExportError(BundleError):
    code = "misplaced-export"


class UnsortedImportsError(BundleError):
    code = "unsorted-imports"


class ImportNameMismatchError(BundleError):
    code = "import-name-mismatch"


class DependencyCycleError(BundleError):
    code = "dependency-cycle"


class TemplateError(BundleError):
    code = "template"


IGNORED_DECLARATION = "ignored-declaration"


def ignored_declaration_warning(message: str, *, file: str, line: Optional[int]) -> Diagnostic:
    """Non-fatal diagnostic for a top-level declaration the bundler skips."""
    return Diagnostic(file=str(file), line=line, message=message, severity="warning", code=IGNORED_DECLARATION)
