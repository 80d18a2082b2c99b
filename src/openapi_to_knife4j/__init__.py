"""OpenAPI to Knife4j converter package."""

from .comments import CommentParser, ParsedComment
from .converter import Knife4jConverter, build_swagger_config, default_resources
from .exceptions import OpenAPIToKnife4jError, ParseError
from .loader import load_document, load_document_file
from .models import Document, ParameterNode, Schema, SwaggerResource
from .parameters import ParameterTreeBuilder, build_request_parameters
from .resolver import SchemaResolver, ref_name

__version__ = "0.1.0"
__all__ = [
    "CommentParser",
    "Document",
    "Knife4jConverter",
    "OpenAPIToKnife4jError",
    "ParameterNode",
    "ParameterTreeBuilder",
    "ParseError",
    "ParsedComment",
    "Schema",
    "SchemaResolver",
    "SwaggerResource",
    "build_request_parameters",
    "build_swagger_config",
    "default_resources",
    "load_document",
    "load_document_file",
    "ref_name",
]
