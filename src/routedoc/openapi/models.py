"""Data models for the generated OpenAPI document.

Operation metadata attached to routes uses the same models as the final
document. Until a generation run resolves them, ``schema`` fields may hold
a plain Python type instead of a JSON schema dict.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

PATH_ITEM_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")


class OpenApiModel(BaseModel):
    """Base model: fields are populated by name, serialized by alias."""

    model_config = ConfigDict(populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Contact(OpenApiModel):
    name: str | None = None
    url: str | None = None
    email: str | None = None


class License(OpenApiModel):
    name: str | None = None
    url: str | None = None


class Info(OpenApiModel):
    title: str | None = None
    version: str | None = None
    description: str | None = None
    terms_of_service: str | None = Field(default=None, alias="termsOfService")
    contact: Contact | None = None
    license: License | None = None


class Server(OpenApiModel):
    url: str
    description: str | None = None


class ExternalDocs(OpenApiModel):
    url: str | None = None
    description: str | None = None


class Tag(OpenApiModel):
    name: str
    description: str | None = None
    external_docs: ExternalDocs | None = Field(default=None, alias="externalDocs")


class OAuthFlow(OpenApiModel):
    authorization_url: str | None = Field(default=None, alias="authorizationUrl")
    token_url: str | None = Field(default=None, alias="tokenUrl")
    refresh_url: str | None = Field(default=None, alias="refreshUrl")
    scopes: dict[str, str] | None = None


class OAuthFlows(OpenApiModel):
    implicit: OAuthFlow | None = None
    password: OAuthFlow | None = None
    client_credentials: OAuthFlow | None = Field(default=None, alias="clientCredentials")
    authorization_code: OAuthFlow | None = Field(default=None, alias="authorizationCode")


class SecurityScheme(OpenApiModel):
    """A security scheme declared under ``components.securitySchemes``."""

    type: str  # http / apiKey / openIdConnect / oauth2
    description: str | None = None
    scheme: str | None = None
    bearer_format: str | None = Field(default=None, alias="bearerFormat")
    location: str | None = Field(default=None, alias="in")  # query / header / cookie
    name: str | None = None
    open_id_connect_url: str | None = Field(default=None, alias="openIdConnectUrl")
    flows: OAuthFlows | None = None

    @classmethod
    def basic(cls, description: str | None = None) -> "SecurityScheme":
        return cls(type="http", scheme="basic", description=description)

    @classmethod
    def bearer(cls, bearer_format: str | None = None, description: str | None = None) -> "SecurityScheme":
        return cls(type="http", scheme="bearer", bearer_format=bearer_format, description=description)

    @classmethod
    def api_key(cls, location: str, name: str, description: str | None = None) -> "SecurityScheme":
        return cls(type="apiKey", location=location, name=name, description=description)

    @classmethod
    def open_id_connect(cls, url: str, description: str | None = None) -> "SecurityScheme":
        return cls(type="openIdConnect", open_id_connect_url=url, description=description)

    @classmethod
    def oauth(cls, flows: OAuthFlows, description: str | None = None) -> "SecurityScheme":
        return cls(type="oauth2", flows=flows, description=description)


class MediaType(OpenApiModel):
    schema_: Any = Field(default=None, alias="schema")  # JSON schema dict or Python type


class Parameter(OpenApiModel):
    """A single operation parameter. ``required`` is tri-state: True / False / unset."""

    name: str
    location: str | None = Field(default=None, alias="in")  # path / query / header / cookie
    description: str | None = None
    required: bool | None = None
    deprecated: bool | None = None
    allow_empty_value: bool | None = Field(default=None, alias="allowEmptyValue")
    schema_: Any = Field(default=None, alias="schema")
    content: dict[str, MediaType] | None = None


class RequestBody(OpenApiModel):
    description: str | None = None
    required: bool | None = None
    content: dict[str, MediaType] | None = None


class Response(OpenApiModel):
    description: str | None = None
    content: dict[str, MediaType] | None = None


class Operation(OpenApiModel):
    """Documentation for one HTTP method at one path."""

    tags: list[str] | None = None
    summary: str | None = None
    description: str | None = None
    external_docs: ExternalDocs | None = Field(default=None, alias="externalDocs")
    operation_id: str | None = Field(default=None, alias="operationId")
    parameters: list[Parameter] | None = None
    request_body: RequestBody | None = Field(default=None, alias="requestBody")
    responses: dict[str, Response] | None = None
    deprecated: bool | None = None
    security: list[dict[str, list[str]]] | None = None


class PathItem(OpenApiModel):
    """All operations registered under one URL, at most one per method."""

    get: Operation | None = None
    put: Operation | None = None
    post: Operation | None = None
    delete: Operation | None = None
    options: Operation | None = None
    head: Operation | None = None
    patch: Operation | None = None
    trace: Operation | None = None

    def operation(self, method: str) -> Operation | None:
        return getattr(self, _slot(method))

    def set_operation(self, method: str, operation: Operation) -> None:
        setattr(self, _slot(method), operation)

    def methods(self) -> list[str]:
        return [m for m in PATH_ITEM_METHODS if getattr(self, m) is not None]


class Components(OpenApiModel):
    schemas: dict[str, Any] | None = None
    security_schemes: dict[str, SecurityScheme] | None = Field(default=None, alias="securitySchemes")


class OpenAPI(OpenApiModel):
    """The complete document handed to the exporter."""

    openapi: str = "3.1.0"
    info: Info = Field(default_factory=Info)
    servers: list[Server] | None = None
    tags: list[Tag] | None = None
    paths: dict[str, PathItem] = Field(default_factory=dict)
    components: Components = Field(default_factory=Components)
    security: list[dict[str, list[str]]] | None = None


def _slot(method: str) -> str:
    slot = method.lower()
    if slot not in PATH_ITEM_METHODS:
        raise ValueError(f"Unsupported HTTP method: {method}")
    return slot
