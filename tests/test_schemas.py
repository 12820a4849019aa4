from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel, create_model

from routedoc.generator.schemas import (
    REF_TEMPLATE,
    ResolvedSchema,
    SchemaRegistry,
    is_named_type,
    resolve_type,
    short_name,
)


class Nested(BaseModel):
    c: str


class Composite(BaseModel):
    a: str
    b: int
    d: Nested
    f: list[Nested]


class Flat(BaseModel):
    x: int


class TreeNode(BaseModel):
    value: int
    children: list["TreeNode"] = []


@dataclass
class Point:
    x: float
    y: float


class Color(Enum):
    RED = "red"
    BLUE = "blue"


T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    items: list[T]


class Catalog(BaseModel):
    page: Page[Flat]


class TestResolveType:
    def test_primitive_has_no_references(self):
        resolved = resolve_type(str)
        assert resolved.schema == {"type": "string"}
        assert resolved.referenced == {}

    def test_model_lists_itself_and_nested(self):
        resolved = resolve_type(Composite)
        assert set(resolved.referenced) == {"Composite", "Nested"}
        assert resolved.schema["properties"]["d"] == {"$ref": "#/components/schemas/Nested"}
        assert "$defs" not in resolved.schema

    def test_flat_model_lists_itself(self):
        assert set(resolve_type(Flat).referenced) == {"Flat"}

    def test_self_referencing_model_keeps_definition(self):
        resolved = resolve_type(TreeNode)
        assert "properties" in resolved.referenced["TreeNode"]

    def test_named_types(self):
        assert is_named_type(Flat)
        assert is_named_type(Point)
        assert is_named_type(Color)
        assert not is_named_type(int)
        assert not is_named_type(list[Flat])

    def test_short_name(self):
        assert short_name(Flat) == "Flat"
        assert short_name(list[Flat]) is None

    def test_short_name_of_generic_model_is_a_valid_key(self):
        assert short_name(Page[Flat]) == "Page_Flat_"


class TestSchemaRegistry:
    def test_primitive_is_inline_and_not_registered(self):
        registry = SchemaRegistry()
        assert registry.resolve(int) == {"type": "integer"}
        assert len(registry) == 0

    def test_composite_is_registered_and_referenced(self):
        registry = SchemaRegistry()
        ref = registry.resolve(Composite)
        assert ref == {"$ref": REF_TEMPLATE.format(model="Composite")}
        assert set(registry.schemas) == {"Composite", "Nested"}

    def test_same_type_twice_yields_one_entry(self):
        registry = SchemaRegistry()
        first = registry.resolve(Composite)
        second = registry.resolve(Composite)
        assert first == second
        assert len(registry) == 2

    def test_dict_schema_passes_through(self):
        registry = SchemaRegistry()
        schema = {"type": "string", "format": "uuid"}
        assert registry.resolve(schema) is schema
        assert len(registry) == 0

    def test_container_stays_inline_but_registers_items(self):
        registry = SchemaRegistry()
        schema = registry.resolve(list[Flat])
        assert schema == {"type": "array", "items": {"$ref": "#/components/schemas/Flat"}}
        assert "Flat" in registry

    def test_short_name_collision_overwrites(self):
        first = create_model("Thing", a=(int, ...))
        second = create_model("Thing", b=(str, ...))
        registry = SchemaRegistry()
        registry.resolve(first)
        registry.resolve(second)
        assert len(registry) == 1
        assert set(registry.schemas["Thing"]["properties"]) == {"b"}

    def test_custom_resolver(self):
        calls = []

        def resolver(tp):
            calls.append(tp)
            return ResolvedSchema(schema={"type": "object"}, referenced={"Sub": {"type": "string"}})

        registry = SchemaRegistry(resolver=resolver)
        assert registry.resolve(Flat) == {"$ref": "#/components/schemas/Flat"}
        assert registry.schemas == {"Flat": {"type": "object"}, "Sub": {"type": "string"}}
        assert calls == [Flat]

    def test_generic_model_registered_under_sanitized_name(self):
        registry = SchemaRegistry()
        assert registry.resolve(Page[Flat]) == {"$ref": "#/components/schemas/Page_Flat_"}
        assert set(registry.schemas) == {"Page_Flat_", "Flat"}

    def test_generic_field_matches_top_level_name(self):
        registry = SchemaRegistry()
        registry.resolve(Page[Flat])
        registry.resolve(Catalog)
        assert registry.schemas["Catalog"]["properties"]["page"] == {"$ref": "#/components/schemas/Page_Flat_"}
        assert set(registry.schemas) == {"Page_Flat_", "Flat", "Catalog"}

    def test_schemas_property_is_a_copy(self):
        registry = SchemaRegistry()
        registry.resolve(Flat)
        registry.schemas.clear()
        assert "Flat" in registry
