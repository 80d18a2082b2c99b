"""
Flattening of request body schemas into Knife4j parameter trees.
"""

import logging
from typing import FrozenSet, List, Optional

from .models import ParameterNode, RequestBody, Schema
from .resolver import SchemaResolver, ref_name

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 32

_EMPTY_SCHEMA = Schema()


class ParameterTreeBuilder:
    """Builds ParameterNode trees from schemas.

    Building is pure: the builder only reads the resolver's schemas, and the
    chain of schema names being expanded is passed down the recursion, so a
    builder can be shared between callers.
    """

    def __init__(self, resolver: SchemaResolver, max_depth: int = DEFAULT_MAX_DEPTH):
        self.resolver = resolver
        self.max_depth = max_depth

    def build(
        self,
        name: str,
        schema: Schema,
        required: bool = False,
        location: str = "body",
        schema_name: str = "",
    ) -> ParameterNode:
        """Build the parameter tree of a schema.

        Args:
            name: Name of the root node
            schema: The root schema, already resolved if it was a reference
            required: Whether the root parameter is required
            location: Where the parameter is sent (e.g. "body")
            schema_name: Component name of ``schema``, if it has one

        Returns:
            The root node; its children follow the property names in
            lexicographic order
        """
        seen = frozenset({schema_name}) if schema_name else frozenset()
        return self._build_node(
            name,
            schema,
            required,
            location,
            schema_name,
            schema.type or "",
            schema.description or "",
            seen,
            0,
        )

    def _build_node(
        self,
        name: str,
        schema: Schema,
        required: bool,
        location: str,
        schema_name: str,
        type_: str,
        description: str,
        seen: FrozenSet[str],
        depth: int,
    ) -> ParameterNode:
        node = ParameterNode(
            name=name,
            description=description,
            type=type_,
            schema_name=schema_name,
            required=required,
            location=location,
        )
        if not schema.properties:
            return node
        if depth >= self.max_depth:
            logger.debug("Parameter tree depth limit reached at %s", name)
            return node

        for prop_name in sorted(schema.properties):
            prop = schema.properties[prop_name]
            child_schema = _EMPTY_SCHEMA
            child_name = ""
            child_type = prop.type or ""
            child_description = prop.description or ""

            if prop.is_reference:
                child_name = ref_name(prop.ref)
                resolved = self.resolver.resolve(prop.ref)
                if resolved is not None:
                    child_type = child_type or resolved.type or ""
                    child_description = child_description or resolved.description or ""
                    if child_name in seen:
                        logger.debug(
                            "Circular reference to %s cut at %s", child_name, prop_name
                        )
                    else:
                        child_schema = resolved

            node.children.append(
                self._build_node(
                    prop_name,
                    child_schema,
                    prop_name in schema.required,
                    location,
                    child_name,
                    child_type,
                    child_description,
                    seen | {child_name} if child_name else seen,
                    depth + 1,
                )
            )
        return node


def select_media_type_schema(request_body: RequestBody) -> Optional[Schema]:
    """Return the schema of the preferred media type of a request body.

    ``application/json`` wins; otherwise the first declared media type is used.
    """
    content = request_body.content
    if "application/json" in content:
        return content["application/json"].schema_
    for media_type in content.values():
        return media_type.schema_
    return None


def build_request_parameters(
    request_body: Optional[RequestBody],
    builder: ParameterTreeBuilder,
) -> Optional[List[ParameterNode]]:
    """Build the ``reqParameters`` of an operation.

    Only bodies whose schema is a ``$ref`` get a parameter tree; plain bodies
    return None. A dangling reference still yields a root node, without
    children.
    """
    if request_body is None:
        return None
    schema = select_media_type_schema(request_body)
    if schema is None or not schema.is_reference:
        return None

    name = ref_name(schema.ref)
    target = builder.resolver.resolve(schema.ref)
    root = builder.build(
        name[:1].lower() + name[1:],
        target if target is not None else _EMPTY_SCHEMA,
        required=request_body.required,
        location="body",
        schema_name=name,
    )
    return [root]
