"""Fluent builders for document-level configuration and per-route operations.

Each builder collects plain field assignments and hands back a finished
value from ``build()``::

    operation = (
        OperationBuilder()
        .summary("Fetch one item")
        .parameter("id", "path", description="Item id")
        .response("200", "The item", schema=Item)
        .build()
    )
"""

from typing import Any, Iterable

from pydantic import ConfigDict, Field

from routedoc.openapi.models import (
    Contact,
    ExternalDocs,
    Info,
    License,
    MediaType,
    OpenApiModel,
    Operation,
    Parameter,
    RequestBody,
    Response,
    SecurityScheme,
    Server,
    Tag,
)

DEFAULT_MEDIA_TYPE = "application/json"


class DocumentConfig(OpenApiModel):
    """Document-level fields applied to the assembler before routes are added."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    info: Info = Field(default_factory=Info)
    servers: tuple[Server, ...] = ()
    tags: tuple[Tag, ...] = ()
    security_schemes: dict[str, SecurityScheme] = Field(default_factory=dict, alias="securitySchemes")
    security: tuple[dict[str, list[str]], ...] = ()


class DocumentBuilder:
    """Collects info, servers, tags and security declarations."""

    def __init__(self):
        self._info = Info()
        self._servers: list[Server] = []
        self._tags: list[Tag] = []
        self._security_schemes: dict[str, SecurityScheme] = {}
        self._security: list[dict[str, list[str]]] = []

    def info(
        self,
        title: str,
        version: str,
        terms_of_service: str | None = None,
        description: str | None = None,
        contact: Contact | None = None,
        license: License | None = None,
    ) -> "DocumentBuilder":
        self._info = Info(
            title=title,
            version=version,
            terms_of_service=terms_of_service,
            description=description,
            contact=contact,
            license=license,
        )
        return self

    def server(self, url: str, description: str | None = None) -> "DocumentBuilder":
        self._servers.append(Server(url=url, description=description))
        return self

    def tag(
        self, name: str, description: str | None = None, external_docs: ExternalDocs | None = None
    ) -> "DocumentBuilder":
        self._tags.append(Tag(name=name, description=description, external_docs=external_docs))
        return self

    def security_scheme(self, key: str, scheme: SecurityScheme) -> "DocumentBuilder":
        self._security_schemes[key] = scheme
        return self

    def security(self, key: str, scopes: Iterable[str] = ()) -> "DocumentBuilder":
        self._security.append({key: list(scopes)})
        return self

    def build(self) -> DocumentConfig:
        return DocumentConfig(
            info=self._info.model_copy(deep=True),
            servers=tuple(self._servers),
            tags=tuple(self._tags),
            security_schemes=dict(self._security_schemes),
            security=tuple(dict(item) for item in self._security),
        )


class OperationBuilder:
    """Collects the explicit documentation of one route."""

    def __init__(self):
        self._operation = Operation()

    def summary(self, text: str) -> "OperationBuilder":
        self._operation.summary = text
        return self

    def description(self, text: str) -> "OperationBuilder":
        self._operation.description = text
        return self

    def operation_id(self, value: str) -> "OperationBuilder":
        self._operation.operation_id = value
        return self

    def tag(self, name: str) -> "OperationBuilder":
        if self._operation.tags is None:
            self._operation.tags = []
        self._operation.tags.append(name)
        return self

    def parameter(
        self,
        name: str,
        location: str | None = None,
        description: str | None = None,
        required: bool | None = None,
        deprecated: bool | None = None,
        allow_empty_value: bool | None = None,
        schema: Any = None,
    ) -> "OperationBuilder":
        """Declare a parameter. Redeclaring the same name and location replaces it."""
        parameter = Parameter(
            name=name,
            location=location,
            description=description,
            required=required,
            deprecated=deprecated,
            allow_empty_value=allow_empty_value,
            schema_=schema,
        )
        parameters = self._operation.parameters or []
        parameters = [p for p in parameters if (p.name, p.location) != (name, location)]
        parameters.append(parameter)
        self._operation.parameters = parameters
        return self

    def request_body(
        self,
        schema: Any = None,
        media_type: str = DEFAULT_MEDIA_TYPE,
        description: str | None = None,
        required: bool | None = None,
    ) -> "OperationBuilder":
        body = self._operation.request_body or RequestBody()
        if description is not None:
            body.description = description
        if required is not None:
            body.required = required
        if schema is not None:
            body.content = {**(body.content or {}), media_type: MediaType(schema_=schema)}
        self._operation.request_body = body
        return self

    def response(
        self,
        code: str | int,
        description: str | None = None,
        schema: Any = None,
        media_type: str = DEFAULT_MEDIA_TYPE,
    ) -> "OperationBuilder":
        responses = self._operation.responses or {}
        response = responses.get(str(code)) or Response()
        if description is not None:
            response.description = description
        if schema is not None:
            response.content = {**(response.content or {}), media_type: MediaType(schema_=schema)}
        responses[str(code)] = response
        self._operation.responses = responses
        return self

    def external_docs(self, url: str, description: str | None = None) -> "OperationBuilder":
        self._operation.external_docs = ExternalDocs(url=url, description=description)
        return self

    def deprecated(self, flag: bool = True) -> "OperationBuilder":
        self._operation.deprecated = flag
        return self

    def security(self, key: str, scopes: Iterable[str] = ()) -> "OperationBuilder":
        if self._operation.security is None:
            self._operation.security = []
        self._operation.security.append({key: list(scopes)})
        return self

    def build(self) -> Operation:
        return self._operation.model_copy(deep=True)
