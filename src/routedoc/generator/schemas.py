"""Schema resolution and the per-run registry of named component schemas."""
from __future__ import annotations

import dataclasses
import enum
import inspect
import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, is_typeddict

from pydantic import BaseModel, TypeAdapter

REF_TEMPLATE = "#/components/schemas/{model}"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedSchema:
    """A type's schema plus every named schema it refers to, by short name."""

    schema: Dict[str, Any]
    referenced: Dict[str, Dict[str, Any]]


TypeResolver = Callable[[Any], ResolvedSchema]


def short_name(tp: Any) -> str | None:
    """Return the name a type is registered under, or None for anonymous types."""
    if inspect.isclass(tp) and not hasattr(tp, "__origin__"):
        # Parameterized generics are named like "Page[Item]"; components keys
        # only allow letters, digits, ".", "-" and "_".
        return re.sub(r"[^a-zA-Z0-9.\-_]", "_", tp.__name__)
    return None


def is_named_type(tp: Any) -> bool:
    if short_name(tp) is None:
        return False
    return (
        issubclass(tp, BaseModel)
        or dataclasses.is_dataclass(tp)
        or issubclass(tp, enum.Enum)
        or is_typeddict(tp)
    )


def resolve_type(tp: Any) -> ResolvedSchema:
    """Build the JSON schema of ``tp`` with pydantic.

    Nested definitions are pulled out of ``$defs`` and their references point
    at ``#/components/schemas``. A named type is also listed among its own
    referenced schemas.
    """
    schema = TypeAdapter(tp).json_schema(ref_template=REF_TEMPLATE)
    definitions = schema.pop("$defs", {})
    referenced: Dict[str, Dict[str, Any]] = {}
    name = short_name(tp)
    if name is not None and is_named_type(tp):
        referenced[name] = schema
    # A self-referencing model comes back as a bare $ref; its definition wins.
    referenced.update(definitions)
    return ResolvedSchema(schema=schema, referenced=referenced)


class SchemaRegistry:
    """Named schemas shared by every operation of one generation run.

    Entries are keyed by short type name. Registering a different schema
    under a name that is already taken replaces the earlier entry.
    """

    def __init__(self, resolver: TypeResolver = resolve_type) -> None:
        self._resolver = resolver
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def resolve(self, tp: Any) -> Dict[str, Any]:
        """Return an inline schema for ``tp`` or a reference to its registered entry."""
        if isinstance(tp, dict):
            return tp
        resolved = self._resolver(tp)
        if not resolved.referenced:
            return resolved.schema
        name = short_name(tp)
        if name is None:
            # Containers such as list[Item] have no name of their own.
            self._register_all(resolved.referenced)
            return resolved.schema
        self.register(name, resolved.schema)
        self._register_all(resolved.referenced)
        return {"$ref": REF_TEMPLATE.format(model=name)}

    def register(self, name: str, schema: Dict[str, Any]) -> None:
        previous = self._schemas.get(name)
        if previous is not None and previous != schema:
            logger.debug("schema.overwrite", extra={"schema_name": name})
        self._schemas[name] = schema

    def _register_all(self, schemas: Dict[str, Dict[str, Any]]) -> None:
        for name, schema in schemas.items():
            self.register(name, schema)

    @property
    def schemas(self) -> Dict[str, Dict[str, Any]]:
        return dict(self._schemas)

    def __contains__(self, name: object) -> bool:
        return name in self._schemas

    def __len__(self) -> int:
        return len(self._schemas)


__all__ = [
    "REF_TEMPLATE",
    "ResolvedSchema",
    "SchemaRegistry",
    "TypeResolver",
    "is_named_type",
    "resolve_type",
    "short_name",
]
