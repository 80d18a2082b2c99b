"""
Data models for OpenAPI documents and the Knife4j output shapes.
"""

from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

HTTP_METHODS = ("get", "post", "put", "delete", "patch")

Number = Union[int, float]


class _SpecModel(BaseModel):
    model_config = ConfigDict(
        extra="ignore", populate_by_name=True, frozen=True, coerce_numbers_to_str=True
    )


class Schema(_SpecModel):
    """A (possibly recursive) schema node.

    Unset constraints are ``None``. A schema with a non-empty ``ref`` is a
    pure reference; resolution ignores its other fields.
    """

    ref: Optional[str] = Field(default=None, alias="$ref")
    type: Optional[str] = None
    format: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    default: Any = None
    example: Any = None

    # Numeric
    multiple_of: Optional[Number] = Field(default=None, alias="multipleOf")
    maximum: Optional[Number] = None
    minimum: Optional[Number] = None
    exclusive_maximum: Union[bool, Number] = Field(default=False, alias="exclusiveMaximum")
    exclusive_minimum: Union[bool, Number] = Field(default=False, alias="exclusiveMinimum")

    # String
    max_length: Optional[int] = Field(default=None, alias="maxLength")
    min_length: Optional[int] = Field(default=None, alias="minLength")
    pattern: Optional[str] = None

    # Array
    items: Optional["Schema"] = None
    max_items: Optional[int] = Field(default=None, alias="maxItems")
    min_items: Optional[int] = Field(default=None, alias="minItems")
    unique_items: bool = Field(default=False, alias="uniqueItems")

    # Object
    properties: Optional[Dict[str, "Schema"]] = None
    required: List[str] = Field(default_factory=list)
    max_properties: Optional[int] = Field(default=None, alias="maxProperties")
    min_properties: Optional[int] = Field(default=None, alias="minProperties")

    enum: List[Any] = Field(default_factory=list)

    nullable: bool = False
    read_only: bool = Field(default=False, alias="readOnly")
    write_only: bool = Field(default=False, alias="writeOnly")
    deprecated: bool = False

    @property
    def is_reference(self) -> bool:
        return bool(self.ref)


class MediaType(_SpecModel):
    schema_: Optional[Schema] = Field(default=None, alias="schema")
    example: Any = None


class RequestBody(_SpecModel):
    required: bool = False
    description: Optional[str] = None
    content: Dict[str, MediaType] = Field(default_factory=dict)


class Response(_SpecModel):
    description: str = ""
    content: Optional[Dict[str, MediaType]] = None


class Operation(_SpecModel):
    """A single operation under a path."""

    tags: List[str] = Field(default_factory=list)
    summary: str = ""
    operation_id: str = Field(default="", alias="operationId")
    description: str = ""
    request_body: Optional[RequestBody] = Field(default=None, alias="requestBody")
    responses: Dict[str, Response] = Field(default_factory=dict)
    deprecated: bool = False

    @field_validator("responses", mode="before")
    @classmethod
    def _status_codes_as_str(cls, value: Any) -> Any:
        # YAML loads bare status codes such as 200 as integers
        if isinstance(value, dict):
            return {str(code): response for code, response in value.items()}
        return value


class PathItem(_SpecModel):
    get: Optional[Operation] = None
    post: Optional[Operation] = None
    put: Optional[Operation] = None
    delete: Optional[Operation] = None
    patch: Optional[Operation] = None

    def operations(self) -> Iterator[Tuple[str, Operation]]:
        """Yield ``(method, operation)`` pairs for the methods that are set."""
        for method in HTTP_METHODS:
            operation = getattr(self, method)
            if operation is not None:
                yield method, operation


class ServerVariable(_SpecModel):
    default: str = ""
    description: str = ""
    enum: List[str] = Field(default_factory=list)


class Server(_SpecModel):
    url: str
    description: str = ""
    variables: Dict[str, ServerVariable] = Field(default_factory=dict)


class Info(_SpecModel):
    title: str = ""
    version: str = ""
    description: str = ""


class Components(_SpecModel):
    schemas: Dict[str, Schema] = Field(default_factory=dict)

    @field_validator("schemas", mode="before")
    @classmethod
    def _empty_if_missing(cls, value: Any) -> Any:
        return {} if value is None else value


class Document(_SpecModel):
    """Root of a loaded OpenAPI document."""

    openapi: str = ""
    info: Info = Field(default_factory=Info)
    servers: List[Server] = Field(default_factory=list)
    paths: Dict[str, PathItem] = Field(default_factory=dict)
    components: Components = Field(default_factory=Components)

    @field_validator("paths", "components", mode="before")
    @classmethod
    def _empty_if_missing(cls, value: Any) -> Any:
        # A bare "components:" key in YAML loads as None
        return {} if value is None else value


class ParameterNode(BaseModel):
    """Represents one field of a flattened request body."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: str = ""
    type: str = ""
    schema_name: str = Field(default="", alias="schemaValue")
    required: bool = False
    location: str = Field(default="body", alias="in")
    children: List["ParameterNode"] = Field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)

    def count(self) -> int:
        """Number of nodes in this tree, including this one."""
        return 1 + sum(child.count() for child in self.children)


class SwaggerResource(BaseModel):
    """An entry of the resource list the documentation UI loads first."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    url: str = "/v3/api-docs"
    config_url: str = Field(default="/v3/api-docs/swagger-config", alias="configUrl")
    oauth2_redirect_url: str = Field(
        default="/swagger-ui/oauth2-redirect.html", alias="oauth2RedirectUrl"
    )
    validator_url: str = Field(default="", alias="validatorUrl")
    location: str = "/v3/api-docs"
    swagger_version: str = Field(default="3.0.3", alias="swaggerVersion")
    tag_sort: str = Field(default="order", alias="tagSort")
    operation_sort: str = Field(default="order", alias="operationSort")


Schema.model_rebuild()
ParameterNode.model_rebuild()
