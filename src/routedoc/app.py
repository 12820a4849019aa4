"""Application container tying a route tree to its documentation."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from routedoc.generator.assembler import build_openapi, generate_openapi
from routedoc.openapi.builder import DocumentConfig
from routedoc.openapi.models import OpenAPI
from routedoc.routing.annotations import OperationSource, OperationTable
from routedoc.routing.tree import RouteNode, Routing


@dataclass
class DocumentedApi:
    """Routes, the operations documented on them, and document-level config."""

    routing: Routing = field(default_factory=Routing)
    operations: OperationTable = field(default_factory=OperationTable)
    config: DocumentConfig = field(default_factory=DocumentConfig)

    def api(self, operation: OperationSource, node: RouteNode) -> RouteNode:
        return self.operations.api(operation, node)

    def openapi(self) -> OpenAPI:
        return build_openapi(self.routing, self.operations, self.config)

    def generate(self, output: Optional[Path] = None, fmt: str = "auto") -> OpenAPI:
        return generate_openapi(self.routing, self.operations, self.config, output=output, fmt=fmt)
