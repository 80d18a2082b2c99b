"""
Schema reference resolution against ``components/schemas``.

Only local, single-level references are supported: the referenced name is
the part of the ``$ref`` string after its last ``/``.
"""

import logging
from types import MappingProxyType
from typing import Mapping, Optional

from .models import Schema

logger = logging.getLogger(__name__)


def ref_name(ref: str) -> str:
    """Return the schema name a reference points to.

    >>> ref_name("#/components/schemas/Widget")
    'Widget'
    """
    return ref.rsplit("/", 1)[-1]


class SchemaResolver:
    """Resolves ``$ref`` strings to component schemas."""

    def __init__(self, schemas: Optional[Mapping[str, Schema]] = None):
        """Initialize the resolver.

        Args:
            schemas: The component schemas by name. None is treated as empty.
        """
        self.schemas: Mapping[str, Schema] = MappingProxyType(dict(schemas or {}))

    def resolve(self, ref: Optional[str]) -> Optional[Schema]:
        """Resolve a reference.

        Args:
            ref: Reference string (e.g. "#/components/schemas/Widget")

        Returns:
            The referenced schema, or None if the name is not defined
        """
        if not ref:
            return None
        schema = self.schemas.get(ref_name(ref))
        if schema is None:
            logger.debug("Unresolved schema reference: %s", ref)
        return schema
