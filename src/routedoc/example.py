"""Example API documented with routedoc.

Run ``routedoc show routedoc.example:create_app`` to print its document.
"""

from pydantic import BaseModel

from routedoc.app import DocumentedApi
from routedoc.openapi.builder import DocumentBuilder, OperationBuilder
from routedoc.openapi.models import SecurityScheme


class ExampleNested(BaseModel):
    c: str


class Example(BaseModel):
    a: str
    b: int
    d: ExampleNested
    f: list[ExampleNested]


class Item(BaseModel):
    id: str
    name: str
    tags: list[str] = []


def hello():
    return "Hello World!"


def echo():
    return Example(a="hey", b=10, d=ExampleNested(c="r"), f=[])


def list_items():
    return []


def show_item():
    return Item(id="1", name="first")


def create_app() -> DocumentedApi:
    config = (
        DocumentBuilder()
        .info(title="Example API", version="1.0.0")
        .server("http://127.0.0.1:8080")
        .tag("items", "Item catalogue")
        .security_scheme("Bearer", SecurityScheme.basic())
        .security("Bearer")
        .build()
    )
    api = DocumentedApi(config=config)
    routing = api.routing

    api.api(OperationBuilder().summary("hello world"), routing.get("/", hello))
    api.api(
        OperationBuilder()
        .summary("summary")
        .request_body(schema=str, description="")
        .response("200", "", schema=Example),
        routing.post("/", echo),
    )
    api.api(
        OperationBuilder()
        .summary("some")
        .parameter("id", "path")
        .response("200", "", schema=str),
        routing.put("/some/{id}", hello),
    )

    items = routing.route("/items")
    api.api(
        OperationBuilder()
        .summary("List items")
        .tag("items")
        .parameter("sort", description="Field to sort by")
        .response("200", "All items", schema=list[Item]),
        items.optional_param("sort").method("GET", list_items),
    )
    api.api(
        OperationBuilder().summary("Fetch one item").tag("items").response("200", "The item", schema=Item),
        items.get("{id}", show_item),
    )
    api.api(
        OperationBuilder()
        .summary("Replace one item")
        .tag("items")
        .request_body(schema=Item, required=True)
        .response("200", "The stored item", schema=Item)
        .security("Bearer"),
        items.put("{id}", show_item),
    )
    return api
