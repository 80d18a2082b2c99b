"""
Core functionality for converting OpenAPI documents to the Knife4j format.
"""

import copy
import logging
from typing import Any, Dict, List, Optional

from pydantic_core import to_jsonable_python

from .comments import CommentParser, ParsedComment
from .config import Settings, get_settings
from .models import (
    Document,
    MediaType,
    Operation,
    RequestBody,
    Schema,
    Server,
    SwaggerResource,
)
from .parameters import ParameterTreeBuilder, build_request_parameters
from .resolver import SchemaResolver

logger = logging.getLogger(__name__)

# Info tags copied into the output as vendor extensions
_INFO_EXTENSION_TAGS = ("author", "contact", "license")


def _json_value(value: Any) -> Any:
    # Examples, defaults and enum members may hold YAML dates or nested
    # containers owned by the document
    return to_jsonable_python(copy.deepcopy(value))


def _description(parsed: ParsedComment) -> Optional[str]:
    if parsed.has_tag("description"):
        return parsed.get("description")
    return parsed.text or None


class Knife4jConverter:
    """Converts an OpenAPI document to the document served at ``/v3/api-docs``."""

    def __init__(
        self,
        document: Document,
        server_name: Optional[str] = None,
        settings: Optional[Settings] = None,
    ):
        """Initialize the converter.

        Args:
            document: The loaded OpenAPI document. It is never modified.
            server_name: Display name of the service; defaults to the
                configured ``server_name``
            settings: Settings to use instead of the environment defaults
        """
        self.document = document
        self.settings = settings or get_settings()
        self.server_name = server_name or self.settings.server_name
        self.comment_parser = CommentParser()
        self.resolver = SchemaResolver(document.components.schemas)
        self.parameter_builder = ParameterTreeBuilder(
            self.resolver, max_depth=self.settings.max_parameter_depth
        )

    def _convert_info(self) -> Dict[str, Any]:
        info = self.document.info
        result: Dict[str, Any] = {
            "title": info.title,
            "version": info.version,
            "name": self.server_name,
        }
        parsed = self.comment_parser.parse(info.description)
        description = _description(parsed)
        if description:
            result["description"] = description
        for tag in _INFO_EXTENSION_TAGS:
            if parsed.has_tag(tag):
                result[f"x-{tag}"] = parsed.get(tag)
        return result

    def _convert_server(self, server: Server) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "url": server.url,
            "description": server.description,
        }
        if server.variables:
            result["variables"] = {
                name: {
                    "default": variable.default,
                    "description": variable.description,
                    "enum": list(variable.enum),
                }
                for name, variable in server.variables.items()
            }
        return result

    def _convert_servers(self) -> List[Dict[str, Any]]:
        if not self.document.servers:
            return [
                {
                    "url": self.settings.default_server_url,
                    "description": self.settings.default_server_description,
                }
            ]
        return [self._convert_server(server) for server in self.document.servers]

    def _convert_content(self, content: Dict[str, MediaType]) -> Dict[str, Any]:
        result = {}
        for content_type, media_type in content.items():
            media = {}
            if media_type.schema_ is not None:
                media["schema"] = self.convert_schema(media_type.schema_)
            if media_type.example is not None:
                media["example"] = _json_value(media_type.example)
            result[content_type] = media
        return result

    def _convert_request_body(self, request_body: RequestBody) -> Dict[str, Any]:
        return {
            "required": request_body.required,
            "content": self._convert_content(request_body.content),
        }

    def _convert_operation(self, operation: Operation) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "tags": list(operation.tags),
            "summary": operation.summary,
            "operationId": operation.operation_id,
        }

        description = _description(self.comment_parser.parse(operation.description))
        if description:
            result["description"] = description
        if operation.deprecated:
            result["deprecated"] = True

        if operation.request_body is not None:
            result["requestBody"] = self._convert_request_body(operation.request_body)
            parameters = build_request_parameters(
                operation.request_body, self.parameter_builder
            )
            if parameters is not None:
                result["reqParameters"] = [node.to_dict() for node in parameters]

        responses = {}
        for code, response in operation.responses.items():
            response_map: Dict[str, Any] = {"description": response.description}
            if response.content is not None:
                response_map["content"] = self._convert_content(response.content)
            responses[code] = response_map
        result["responses"] = responses

        return result

    def _convert_paths(self) -> Dict[str, Any]:
        paths = {}
        for path, path_item in self.document.paths.items():
            paths[path] = {
                method: self._convert_operation(operation)
                for method, operation in path_item.operations()
            }
        return paths

    def convert_schema(self, schema: Schema) -> Dict[str, Any]:
        """Convert a schema field by field.

        Unset constraints are left out, except for the boolean flags, which
        are always written so that an explicit ``false`` is kept.

        Args:
            schema: The schema to convert

        Returns:
            dict: The converted schema
        """
        result: Dict[str, Any] = {}

        for key, value in (
            ("type", schema.type),
            ("format", schema.format),
            ("title", schema.title),
            ("description", schema.description),
        ):
            if value:
                result[key] = value
        if schema.default is not None:
            result["default"] = _json_value(schema.default)
        if schema.example is not None:
            result["example"] = _json_value(schema.example)

        # Numeric
        if schema.multiple_of is not None:
            result["multipleOf"] = schema.multiple_of
        if schema.maximum is not None:
            result["maximum"] = schema.maximum
        if schema.minimum is not None:
            result["minimum"] = schema.minimum
        result["exclusiveMaximum"] = schema.exclusive_maximum
        result["exclusiveMinimum"] = schema.exclusive_minimum

        # String
        if schema.max_length is not None:
            result["maxLength"] = schema.max_length
        if schema.min_length is not None:
            result["minLength"] = schema.min_length
        if schema.pattern:
            result["pattern"] = schema.pattern

        # Array
        if schema.items is not None:
            result["items"] = self.convert_schema(schema.items)
        if schema.max_items is not None:
            result["maxItems"] = schema.max_items
        if schema.min_items is not None:
            result["minItems"] = schema.min_items
        result["uniqueItems"] = schema.unique_items

        # Object
        if schema.max_properties is not None:
            result["maxProperties"] = schema.max_properties
        if schema.min_properties is not None:
            result["minProperties"] = schema.min_properties
        if schema.required:
            result["required"] = list(schema.required)

        if schema.enum:
            result["enum"] = _json_value(list(schema.enum))

        if schema.properties is not None:
            result["properties"] = {
                name: self.convert_schema(prop)
                for name, prop in schema.properties.items()
            }

        if schema.ref:
            result["$ref"] = schema.ref

        result["nullable"] = schema.nullable
        result["readOnly"] = schema.read_only
        result["writeOnly"] = schema.write_only
        result["deprecated"] = schema.deprecated

        return result

    def convert(self) -> Dict[str, Any]:
        """Convert the document.

        Returns:
            dict: A JSON-serializable document in the Knife4j format
        """
        paths = self._convert_paths()
        schemas = {
            name: self.convert_schema(schema)
            for name, schema in self.document.components.schemas.items()
        }
        logger.info(
            "Converted %d paths and %d schemas for %s",
            len(paths),
            len(schemas),
            self.server_name,
        )
        return {
            "openapi": self.settings.openapi_version,
            "info": self._convert_info(),
            "servers": self._convert_servers(),
            "paths": paths,
            "components": {"schemas": schemas},
        }


def default_resources(
    server_name: Optional[str] = None, settings: Optional[Settings] = None
) -> List[SwaggerResource]:
    """Return the resource list used when none is configured."""
    settings = settings or get_settings()
    return [
        SwaggerResource(
            name=server_name or settings.server_name,
            swagger_version=settings.swagger_version,
        )
    ]


def build_swagger_config(resources: List[SwaggerResource]) -> Dict[str, Any]:
    """Build the document served at ``/v3/api-docs/swagger-config``."""
    return {"urls": [resource.model_dump(by_alias=True) for resource in resources]}
