from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_TEMPLATE = Path(__file__).resolve().parent / "templates" / "template.js"


def _env_bool(name: str, default: str = "0") -> bool:
    return os.environ.get(name, default).strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: str) -> int:
    try:
        return int(os.environ.get(name, default).strip())
    except Exception:
        return int(default)


def _env_str(name: str, default: str = "") -> str:
    return os.environ.get(name, default)


@dataclass(frozen=True)
class Settings:
    source_root: Path
    internal_dir: str

    template_path: Path
    namespace: str
    placeholder: str
    indent: int

    verbose: bool

    @property
    def indent_unit(self) -> str:
        return " " * self.indent

    @staticmethod
    def load() -> "Settings":
        namespace = _env_str("LITE_BUNDLE_NAMESPACE", "R").strip() or "R"
        return Settings(
            source_root=Path(_env_str("LITE_BUNDLE_SRC", "src")),
            internal_dir=_env_str("LITE_BUNDLE_INTERNAL_DIR", "internal").strip().strip("/") or "internal",
            template_path=Path(_env_str("LITE_BUNDLE_TEMPLATE", str(DEFAULT_TEMPLATE))),
            namespace=namespace,
            placeholder=_env_str("LITE_BUNDLE_PLACEHOLDER", f"/* global {namespace} */"),
            indent=max(0, _env_int("LITE_BUNDLE_INDENT", "4")),
            verbose=_env_bool("LITE_BUNDLE_VERBOSE", "0"),
        )
