class OpenAPIToKnife4jError(Exception):
    """Base exception for OpenAPI to Knife4j conversion errors."""
    pass

class ParseError(OpenAPIToKnife4jError):
    """Raised when a specification document cannot be parsed."""
    pass
