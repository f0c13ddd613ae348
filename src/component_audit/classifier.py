"""Complexity Classifier deciding whether a schema carries structural richness."""

from .exceptions import SchemaDepthError
from .models import (AllOfSchema, AnyOfSchema, AnySchema, ArraySchema,
                     BooleanSchema, CompositeSchema, NotSchema, ObjectSchema,
                     OneOfSchema, ScalarSchema, Schema, as_item)

DEFAULT_MAX_DEPTH = 64


class ComplexityClassifier:
    """Classifies inline schema nodes as simple or complex.

    References are never followed: a reference item, member or element
    counts as not complex.
    """

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH):
        self.max_depth = max_depth

    def is_complex(self, schema: Schema) -> bool:
        """
        Decide whether a schema node is complex.

        Args:
            schema: An inline schema node (callers skip references)

        Returns:
            True for objects, enumerated scalars, arrays of complex elements,
            combinators with a complex inline member and untyped nodes with
            items or an enumeration. False otherwise.

        Raises:
            SchemaDepthError: If inline nesting exceeds max_depth
            TypeError: If schema is not a known schema node
        """
        return self._is_complex(schema, 0)

    def _is_complex(self, schema: Schema, depth: int) -> bool:
        if depth > self.max_depth:
            raise SchemaDepthError(self.max_depth)

        if isinstance(schema, ScalarSchema):
            return len(schema.enumeration) > 0
        if isinstance(schema, BooleanSchema):
            return False
        if isinstance(schema, ObjectSchema):
            return True
        if isinstance(schema, ArraySchema):
            return self._is_complex_slot(schema.items, depth)
        if isinstance(schema, (OneOfSchema, AnyOfSchema, AllOfSchema)):
            return self._any_complex(schema, depth)
        if isinstance(schema, NotSchema):
            return self._is_complex_slot(schema.member, depth)
        if isinstance(schema, AnySchema):
            return schema.items is not None or len(schema.enumeration) > 0

        raise TypeError(f"Unknown schema node: {type(schema).__name__}")

    def _any_complex(self, schema: CompositeSchema, depth: int) -> bool:
        return any(self._is_complex_slot(member, depth) for member in schema.members)

    def _is_complex_slot(self, slot, depth: int) -> bool:
        """Classify a reference-or-inline slot; empty and reference slots are not complex."""
        item = as_item(slot)
        if item is None:
            return False
        return self._is_complex(item, depth + 1)
