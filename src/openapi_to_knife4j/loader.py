"""
Loading of OpenAPI documents from JSON or YAML text.
"""

import json
import logging
from pathlib import Path
from typing import Union

import yaml
from pydantic import ValidationError

from .exceptions import ParseError
from .models import Document

logger = logging.getLogger(__name__)


def _decode(raw: Union[bytes, str]) -> str:
    if isinstance(raw, str):
        return raw
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise ParseError(f"Specification is not valid UTF-8: {e}")


def load_document(raw: Union[bytes, str]) -> Document:
    """Parse a specification document.

    Args:
        raw: The document as bytes or text, serialized as JSON or YAML

    Returns:
        The parsed Document

    Raises:
        ParseError: If the content is not well formed or does not describe
            an OpenAPI document
    """
    content = _decode(raw)

    try:
        # Try JSON first
        data = json.loads(content)
    except json.JSONDecodeError:
        try:
            # YAML is a superset of JSON, so this also reports JSON mistakes
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            logger.warning("Failed to parse specification: %s", e)
            raise ParseError(f"Failed to parse specification: {e}")

    if not isinstance(data, dict):
        raise ParseError(
            f"Specification must be a mapping, got {type(data).__name__}"
        )

    try:
        document = Document.model_validate(data)
    except ValidationError as e:
        logger.warning("Specification does not match the document model: %s", e)
        raise ParseError(f"Invalid specification: {e}")

    logger.debug(
        "Loaded OpenAPI %s document with %d paths and %d schemas",
        document.openapi or "(unknown)",
        len(document.paths),
        len(document.components.schemas),
    )
    return document


def load_document_file(path: Union[str, Path]) -> Document:
    """Read and parse a specification document from disk.

    Raises:
        ParseError: If the file cannot be read or parsed
    """
    try:
        raw = Path(path).read_bytes()
    except OSError as e:
        raise ParseError(f"Failed to read specification file {path}: {e}")
    return load_document(raw)
