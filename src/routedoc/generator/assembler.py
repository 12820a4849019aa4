"""Document assembly: turn documented routes into one OpenAPI document."""
from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Iterable, Optional

from routedoc.exporter import export_document
from routedoc.generator.analyzer import analyze_route
from routedoc.generator.reconciler import reconcile
from routedoc.generator.schemas import SchemaRegistry
from routedoc.openapi.builder import DocumentConfig
from routedoc.openapi.models import Components, OpenAPI, PathItem
from routedoc.routing.annotations import OperationTable
from routedoc.routing.tree import RouteNode, Routing
from routedoc.utils.config import OPENAPI_VERSION, OUTPUT_PATH
from routedoc.utils.errors import AssemblerStateError
from routedoc.utils.logging import timed_run

logger = logging.getLogger(__name__)


class AssemblerState(str, Enum):
    CONFIGURING = "configuring"
    ASSEMBLED = "assembled"


class DocumentAssembler:
    """Builds one document per instance.

    The assembler starts out ``configuring``: document-level fields may be
    applied any number of times. ``assemble`` adds the documented routes and
    moves it to ``assembled``, after which the document is read-only.
    """

    def __init__(
        self,
        registry: Optional[SchemaRegistry] = None,
        openapi_version: str = OPENAPI_VERSION,
    ) -> None:
        self.registry = registry if registry is not None else SchemaRegistry()
        self.state = AssemblerState.CONFIGURING
        self._document = OpenAPI(
            openapi=openapi_version,
            components=Components(schemas={}, security_schemes={}),
        )

    def configure(self, config: DocumentConfig) -> None:
        self._require(AssemblerState.CONFIGURING)
        document = self._document
        document.info = config.info.model_copy(deep=True)
        if config.servers:
            document.servers = [
                *(document.servers or []),
                *(server.model_copy(deep=True) for server in config.servers),
            ]
        if config.tags:
            document.tags = [
                *(document.tags or []),
                *(tag.model_copy(deep=True) for tag in config.tags),
            ]
        if config.security_schemes:
            document.components.security_schemes = {
                **(document.components.security_schemes or {}),
                **{
                    name: scheme.model_copy(deep=True)
                    for name, scheme in config.security_schemes.items()
                },
            }
        if config.security:
            document.security = [
                *(document.security or []),
                *({name: list(scopes) for name, scopes in item.items()} for item in config.security),
            ]

    def assemble(self, routes: Iterable[RouteNode], operations: OperationTable) -> OpenAPI:
        """Insert every documented route and finish the document."""
        self._require(AssemblerState.CONFIGURING)
        paths: dict[str, PathItem] = {}
        with timed_run(logger, "assemble") as stats:
            for node, operation in operations.documented(list(routes)):
                info = analyze_route(node)
                finished = reconcile(operation, info, self.registry)
                path_item = paths.setdefault(info.url, PathItem())
                if path_item.operation(info.method) is not None:
                    # Same URL and method declared twice: the later route wins.
                    logger.debug(
                        "assembler.operation_replaced",
                        extra={"url": info.url, "method": info.method},
                    )
                path_item.set_operation(info.method, finished)
            stats["paths"] = len(paths)
            stats["schemas"] = len(self.registry)
        self._document.paths = paths
        self._document.components.schemas = self.registry.schemas
        self.state = AssemblerState.ASSEMBLED
        logger.info(
            "assembler.assembled",
            extra={"paths": len(paths), "schemas": len(self.registry)},
        )
        return self._document

    @property
    def document(self) -> OpenAPI:
        self._require(AssemblerState.ASSEMBLED)
        return self._document

    def _require(self, state: AssemblerState) -> None:
        if self.state is not state:
            raise AssemblerStateError(state.value, self.state.value)


def build_openapi(
    routing: Routing,
    operations: OperationTable,
    config: Optional[DocumentConfig] = None,
) -> OpenAPI:
    """Run one generation pass with a fresh schema registry."""
    assembler = DocumentAssembler()
    if config is not None:
        assembler.configure(config)
    return assembler.assemble(routing.walk(), operations)


def generate_openapi(
    routing: Routing,
    operations: OperationTable,
    config: Optional[DocumentConfig] = None,
    output: Optional[Path] = None,
    fmt: str = "auto",
) -> OpenAPI:
    """Build the document and write it to ``output``; the extension picks the format."""
    document = build_openapi(routing, operations, config)
    export_document(document, output or OUTPUT_PATH, fmt=fmt)
    return document


__all__ = ["AssemblerState", "DocumentAssembler", "build_openapi", "generate_openapi"]
