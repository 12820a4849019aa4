"""Route tree: nested selectors that lead from the root to HTTP method handlers.

Each node carries one selector and a link to its parent. Paths are declared
with the usual template syntax::

    routing = Routing()
    routing.route("/items", lambda items: items.get("{id}", handler=show_item))

which produces ``root -> items -> {id} -> GET``.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Union

HTTP_METHODS = ("GET", "POST", "PUT", "DELETE", "PATCH", "HEAD", "OPTIONS", "TRACE")

_PARAMETER_SEGMENT = re.compile(
    r"^(?P<prefix>[^{}]*)\{(?P<name>[^{}?]+)(?P<optional>\?)?\}(?P<suffix>[^{}]*)$"
)


@dataclass(frozen=True)
class RootSelector:
    pass


@dataclass(frozen=True)
class ConstantSegment:
    value: str


@dataclass(frozen=True)
class PathParameter:
    name: str
    prefix: str = ""
    suffix: str = ""


@dataclass(frozen=True)
class OptionalPathParameter:
    name: str
    prefix: str = ""
    suffix: str = ""


@dataclass(frozen=True)
class QueryParameter:
    name: str


@dataclass(frozen=True)
class OptionalQueryParameter:
    name: str


@dataclass(frozen=True)
class HttpMethodSelector:
    method: str


Selector = Union[
    RootSelector,
    ConstantSegment,
    PathParameter,
    OptionalPathParameter,
    QueryParameter,
    OptionalQueryParameter,
    HttpMethodSelector,
]

Handler = Callable[..., object]


def parse_segment(segment: str) -> Selector:
    """Classify one path segment as a constant or a path parameter."""
    found = _PARAMETER_SEGMENT.match(segment)
    if found is None:
        return ConstantSegment(segment)
    name = found.group("name")
    prefix = found.group("prefix")
    suffix = found.group("suffix")
    if found.group("optional"):
        return OptionalPathParameter(name, prefix, suffix)
    return PathParameter(name, prefix, suffix)


def parse_path(path: str) -> List[Selector]:
    """Split a path template into segment selectors, ignoring empty segments."""
    return [parse_segment(segment) for segment in path.split("/") if segment]


class RouteNode:
    """A node of the route tree."""

    def __init__(
        self,
        selector: Selector,
        parent: Optional["RouteNode"] = None,
        handler: Optional[Handler] = None,
    ):
        self._selector = selector
        self._parent = parent
        self._children: List[RouteNode] = []
        self.handler = handler

    @property
    def selector(self) -> Selector:
        return self._selector

    @property
    def parent(self) -> Optional["RouteNode"]:
        return self._parent

    @property
    def children(self) -> tuple["RouteNode", ...]:
        return tuple(self._children)

    def child(self, selector: Selector) -> "RouteNode":
        """Return the child carrying ``selector``, creating it if needed."""
        for existing in self._children:
            if existing.selector == selector:
                return existing
        node = RouteNode(selector, parent=self)
        self._children.append(node)
        return node

    def route(
        self, path: str, build: Optional[Callable[["RouteNode"], object]] = None
    ) -> "RouteNode":
        node = self
        for selector in parse_path(path):
            node = node.child(selector)
        if build is not None:
            build(node)
        return node

    def param(
        self, name: str, build: Optional[Callable[["RouteNode"], object]] = None
    ) -> "RouteNode":
        node = self.child(QueryParameter(name))
        if build is not None:
            build(node)
        return node

    def optional_param(
        self, name: str, build: Optional[Callable[["RouteNode"], object]] = None
    ) -> "RouteNode":
        node = self.child(OptionalQueryParameter(name))
        if build is not None:
            build(node)
        return node

    def method(self, method: str, handler: Optional[Handler] = None) -> "RouteNode":
        verb = method.upper()
        if verb not in HTTP_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")
        node = self.child(HttpMethodSelector(verb))
        if handler is not None:
            node.handler = handler
        return node

    def get(self, path: str = "", handler: Optional[Handler] = None) -> "RouteNode":
        return self.route(path).method("GET", handler)

    def post(self, path: str = "", handler: Optional[Handler] = None) -> "RouteNode":
        return self.route(path).method("POST", handler)

    def put(self, path: str = "", handler: Optional[Handler] = None) -> "RouteNode":
        return self.route(path).method("PUT", handler)

    def delete(self, path: str = "", handler: Optional[Handler] = None) -> "RouteNode":
        return self.route(path).method("DELETE", handler)

    def patch(self, path: str = "", handler: Optional[Handler] = None) -> "RouteNode":
        return self.route(path).method("PATCH", handler)

    def head(self, path: str = "", handler: Optional[Handler] = None) -> "RouteNode":
        return self.route(path).method("HEAD", handler)

    def options(self, path: str = "", handler: Optional[Handler] = None) -> "RouteNode":
        return self.route(path).method("OPTIONS", handler)

    def walk(self) -> Iterator["RouteNode"]:
        """Yield this node and all of its descendants, depth-first."""
        yield self
        for child in self._children:
            yield from child.walk()

    def __repr__(self) -> str:
        parts: List[str] = []
        node: Optional[RouteNode] = self
        while node is not None:
            parts.append(_describe(node.selector))
            node = node.parent
        return "RouteNode(" + " -> ".join(reversed(parts)) + ")"


class Routing(RouteNode):
    """Root of a route tree."""

    def __init__(self) -> None:
        super().__init__(RootSelector())

    def all_routes(self) -> List[RouteNode]:
        return [node for node in self.walk() if node is not self]


def _describe(selector: Selector) -> str:
    match selector:
        case RootSelector():
            return "/"
        case ConstantSegment(value=value):
            return value
        case PathParameter(name=name, prefix=prefix, suffix=suffix):
            return f"{prefix}{{{name}}}{suffix}"
        case OptionalPathParameter(name=name, prefix=prefix, suffix=suffix):
            return f"{prefix}{{{name}?}}{suffix}"
        case QueryParameter(name=name):
            return f"[{name}]"
        case OptionalQueryParameter(name=name):
            return f"[{name}?]"
        case HttpMethodSelector(method=method):
            return f"({method})"
        case _:
            return repr(selector)


__all__ = [
    "ConstantSegment",
    "HTTP_METHODS",
    "HttpMethodSelector",
    "OptionalPathParameter",
    "OptionalQueryParameter",
    "PathParameter",
    "QueryParameter",
    "RootSelector",
    "RouteNode",
    "Routing",
    "Selector",
    "parse_path",
    "parse_segment",
]
