"""
Component audit exception hierarchy.

Only conditions that stop an analysis raise. Everything the analysis can
carry on from (odd references, unknown pointer kinds) is accumulated as an
anomaly on the report instead.

Usage::

    from src.component_audit.exceptions import AuditError, DocumentError

    try:
        document = DocumentBuilder().build(data)
    except DocumentError as exc:
        print(f"Malformed document at {exc.location}: {exc}")
"""


class AuditError(Exception):
    """Base exception for all component audit errors."""


class DocumentError(AuditError, ValueError):
    """The decoded document does not have the expected OpenAPI shape."""

    def __init__(self, message: str, location: str = "#"):
        super().__init__(f"{message} (at {location})")
        self.location = location


class SchemaDepthError(AuditError):
    """Inline schema nesting exceeds the configured ceiling."""

    def __init__(self, max_depth: int):
        super().__init__(f"Schema nesting exceeds maximum depth of {max_depth}")
        self.max_depth = max_depth
