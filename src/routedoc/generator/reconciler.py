"""Merge inferred route parameters into explicitly documented operations."""
from __future__ import annotations

from typing import Dict, Iterable, Optional

from routedoc.generator.analyzer import InferredParameter, RouteInfo
from routedoc.generator.schemas import SchemaRegistry
from routedoc.openapi.models import MediaType, Operation, Parameter

DEFAULT_PARAMETER_TYPE = str


def reconcile(operation: Operation, info: RouteInfo, registry: SchemaRegistry) -> Operation:
    """Return a completed copy of ``operation`` for the route described by ``info``.

    Explicit values always win: inferred facts only fill fields that are
    still unset, and unset schemas fall back to a plain string.
    """
    finished = operation.model_copy(deep=True)
    process_parameters(finished, info.path_parameters, "path", registry)
    process_parameters(finished, info.query_parameters, "query", registry)
    resolve_schemas(finished, registry)
    return finished


def process_parameters(
    operation: Operation,
    parameters: Iterable[InferredParameter],
    location: str,
    registry: SchemaRegistry,
) -> None:
    for name, required in parameters:
        if operation.parameters is None:
            operation.parameters = []
        # Matched by name only: a path and a query parameter sharing a name
        # end up merged into whichever was declared first.
        existing = _find(operation.parameters, name)
        if existing is None:
            operation.parameters.append(
                Parameter(
                    name=name,
                    location=location,
                    required=True if required else None,
                    schema_=registry.resolve(DEFAULT_PARAMETER_TYPE),
                )
            )
            continue
        if existing.required is None:
            existing.required = True if required else None
        if existing.location is None:
            existing.location = location
        if existing.schema_ is None and existing.content is None:
            existing.schema_ = registry.resolve(DEFAULT_PARAMETER_TYPE)


def resolve_schemas(operation: Operation, registry: SchemaRegistry) -> None:
    """Replace every Python type left in ``operation`` with its schema."""
    for parameter in operation.parameters or []:
        if parameter.schema_ is not None:
            parameter.schema_ = registry.resolve(parameter.schema_)
        _resolve_content(parameter.content, registry)
    if operation.request_body is not None:
        _resolve_content(operation.request_body.content, registry)
    for response in (operation.responses or {}).values():
        _resolve_content(response.content, registry)


def _resolve_content(content: Optional[Dict[str, MediaType]], registry: SchemaRegistry) -> None:
    for media_type in (content or {}).values():
        if media_type.schema_ is not None:
            media_type.schema_ = registry.resolve(media_type.schema_)


def _find(parameters: list[Parameter], name: str) -> Optional[Parameter]:
    for parameter in parameters:
        if parameter.name == name:
            return parameter
    return None


__all__ = ["DEFAULT_PARAMETER_TYPE", "process_parameters", "reconcile", "resolve_schemas"]
