"""Bundle builder orchestrating parsing, graph ordering and assembly."""

from __future__ import annotations

import functools
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from ..config import Settings
from ..errors import TemplateError
from ..repo.layout import ModuleLayout, filename_to_identifier
from .assemble import assemble_bundle
from .dependencies import dependencies_of
from .graph import DependencyGraph, build_dependency_graph, order_dependencies
from .parser import ParseCache
from .rewrite import rewrite_export

logger = logging.getLogger(__name__)


class BundleBuilder:
    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or Settings.load()
        self.layout = ModuleLayout(
            source_root=self.settings.source_root,
            internal_dir=self.settings.internal_dir,
        )

    def requested_identifiers(self, names: Iterable[Union[str, Path]]) -> List[str]:
        """File names or identifiers -> sorted, de-duplicated identifiers."""
        return sorted({filename_to_identifier(n) for n in names})

    def dependency_graph(self, identifiers: Iterable[str], cache: ParseCache) -> DependencyGraph:
        extract = functools.partial(dependencies_of, layout=self.layout, cache=cache)
        return build_dependency_graph(identifiers, extract)

    def load_template(self) -> str:
        path = self.settings.template_path
        try:
            return path.read_text(encoding="utf-8")
        except OSError as e:
            raise TemplateError(f"Cannot read template {path}: {e.strerror or e}", file=str(path)) from None

    def build(self, names: Iterable[Union[str, Path]]) -> str:
        """Build the bundle text for the requested modules and their dependencies."""
        requested = self.requested_identifiers(names)
        template = self.load_template()
        cache = ParseCache()

        graph = self.dependency_graph(requested, cache)
        ordered = order_dependencies(graph)
        logger.debug(
            "Bundling %d requested module(s), %d in closure: %s",
            len(requested),
            len(ordered),
            " ".join(ordered),
        )

        render = functools.partial(rewrite_export, layout=self.layout, cache=cache)
        return assemble_bundle(
            requested,
            ordered,
            render,
            template,
            namespace=self.settings.namespace,
            placeholder=self.settings.placeholder,
            indent_unit=self.settings.indent_unit,
        )
