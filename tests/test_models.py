import pytest

from routedoc.openapi.models import Info, OpenAPI, Operation, Parameter, PathItem, Response


class TestParameter:
    def test_create_minimal_parameter(self):
        p = Parameter(name="id")
        assert p.name == "id"
        assert p.location is None
        assert p.required is None
        assert p.schema_ is None

    def test_aliases_on_dump(self):
        p = Parameter(name="id", location="path", required=True, schema_={"type": "string"})
        assert p.to_dict() == {"name": "id", "in": "path", "required": True, "schema": {"type": "string"}}

    def test_populate_by_alias(self):
        p = Parameter(**{"name": "q", "in": "query", "allowEmptyValue": True})
        assert p.location == "query"
        assert p.allow_empty_value is True

    def test_schema_may_hold_a_type(self):
        assert Parameter(name="n", schema_=int).schema_ is int


class TestPathItem:
    def test_set_and_get_operation(self):
        item = PathItem()
        item.set_operation("PUT", Operation(summary="replace"))
        assert item.operation("put").summary == "replace"
        assert item.operation("GET") is None
        assert item.methods() == ["put"]

    def test_unknown_method_rejected(self):
        with pytest.raises(ValueError):
            PathItem().set_operation("CONNECT", Operation())

    def test_methods_in_document_order(self):
        item = PathItem()
        for method in ("PATCH", "GET", "DELETE"):
            item.set_operation(method, Operation())
        assert item.methods() == ["get", "delete", "patch"]


class TestOpenAPI:
    def test_serialization_roundtrip(self):
        doc = OpenAPI(
            info=Info(title="T", version="1"),
            paths={"/": PathItem(get=Operation(summary="s", responses={"200": Response(description="ok")}))},
        )
        data = doc.to_dict()
        assert data["paths"]["/"]["get"]["responses"]["200"] == {"description": "ok"}
        again = OpenAPI(**data)
        assert again.paths["/"].get.summary == "s"
