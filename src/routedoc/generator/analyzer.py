"""Route analysis: rebuild the path template, method and parameters of a route."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from routedoc.routing.tree import (
    ConstantSegment,
    HttpMethodSelector,
    OptionalPathParameter,
    OptionalQueryParameter,
    PathParameter,
    QueryParameter,
    RootSelector,
    RouteNode,
)
from routedoc.utils.errors import RouteAnalysisError

InferredParameter = Tuple[str, bool]  # (name, required)


@dataclass
class RouteInfo:
    """Structural facts about one route, listed in root-to-leaf order."""

    method: str
    template: str
    path_parameters: List[InferredParameter] = field(default_factory=list)
    query_parameters: List[InferredParameter] = field(default_factory=list)

    @property
    def url(self) -> str:
        return normalize_path(self.template)


def normalize_path(template: str) -> str:
    """Trim exactly one trailing slash, except for the root path itself."""
    if template != "/" and template.endswith("/"):
        return template[:-1]
    return template


def analyze_route(route: RouteNode) -> RouteInfo:
    """Walk from ``route`` up to the root, collecting what its ancestry declares.

    The walk goes leaf to root, so every path fragment is prepended to the
    text gathered so far.
    """
    template = ""
    methods: List[str] = []
    path_parameters: List[InferredParameter] = []
    query_parameters: List[InferredParameter] = []

    node: Optional[RouteNode] = route
    while node is not None:
        match node.selector:
            case RootSelector():
                template = "/" + template
            case ConstantSegment(value=value):
                template = f"{value}/{template}"
            case PathParameter(name=name, prefix=prefix, suffix=suffix):
                template = f"{prefix}{{{name}}}{suffix}/{template}"
                path_parameters.append((name, True))
            case OptionalPathParameter(name=name, prefix=prefix, suffix=suffix):
                template = f"{prefix}{{{name}}}{suffix}/{template}"
                path_parameters.append((name, False))
            case QueryParameter(name=name):
                query_parameters.append((name, True))
            case OptionalQueryParameter(name=name):
                query_parameters.append((name, False))
            case HttpMethodSelector(method=method):
                methods.append(method)
            case other:
                raise RouteAnalysisError(
                    route, methods, f"route {route!r} has unknown selector {other!r}"
                )
        node = node.parent

    if len(methods) != 1:
        raise RouteAnalysisError(route, methods)

    path_parameters.reverse()
    query_parameters.reverse()
    return RouteInfo(
        method=methods[0],
        template=template,
        path_parameters=path_parameters,
        query_parameters=query_parameters,
    )


__all__ = ["InferredParameter", "RouteInfo", "analyze_route", "normalize_path"]
