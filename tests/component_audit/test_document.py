"""Tests for Document Builder."""

import pytest

from src.component_audit.document import DocumentBuilder
from src.component_audit.exceptions import DocumentError
from src.component_audit.models import (AllOfSchema, AnyOfSchema, AnySchema,
                                        ArraySchema, BooleanSchema, NotSchema,
                                        ObjectSchema, OneOfSchema, Reference,
                                        ScalarSchema)


def build_schema(schema):
    document = DocumentBuilder().build({"components": {"schemas": {"S": schema}}})
    return document.components.schemas["S"]


class TestDocumentBuilder:
    """Test cases for DocumentBuilder."""

    def test_empty_document(self):
        """Test that missing components and paths build an empty document."""
        document = DocumentBuilder().build({"openapi": "3.0.0"})

        assert document.openapi == "3.0.0"
        assert document.components is None
        assert document.paths == {}

    def test_schema_variants(self):
        """Test that each keyword selects the expected schema node."""
        assert build_schema({"type": "string", "enum": ["a"]}) == ScalarSchema(type="string", enumeration=["a"])
        assert build_schema({"type": "boolean"}) == BooleanSchema()
        assert isinstance(build_schema({"type": "object"}), ObjectSchema)
        assert build_schema({"type": "array"}) == ArraySchema(items=None)
        assert isinstance(build_schema({"oneOf": [{"type": "string"}]}), OneOfSchema)
        assert isinstance(build_schema({"anyOf": [{"type": "string"}]}), AnyOfSchema)
        assert isinstance(build_schema({"allOf": [{"type": "string"}]}), AllOfSchema)
        assert isinstance(build_schema({"not": {"type": "string"}}), NotSchema)
        assert build_schema({"description": "anything"}) == AnySchema()

    def test_type_wins_over_combinators(self):
        """Test that a declared type takes precedence over oneOf."""
        schema = build_schema({"type": "object", "oneOf": [{"type": "string"}]})

        assert isinstance(schema, ObjectSchema)

    def test_untyped_properties_build_any_schema(self):
        """Test that properties without a type do not make an object schema."""
        schema = build_schema({"properties": {"name": {"type": "string"}}})

        assert schema == AnySchema()

    def test_type_lists(self):
        """Test OpenAPI 3.1 type lists."""
        assert build_schema({"type": ["string", "null"]}) == ScalarSchema(type="string")
        assert build_schema({"type": ["string", "integer"]}) == AnySchema()
        assert build_schema({"type": "null"}) == AnySchema()

    def test_references_in_slots(self):
        """Test that $ref mappings become references at every slot."""
        schema = build_schema({"type": "array", "items": {"$ref": "#/components/schemas/Pet"}})

        assert schema.items == Reference(ref="#/components/schemas/Pet")
        assert build_schema({"$ref": "#/components/schemas/Other"}) == Reference(ref="#/components/schemas/Other")

    def test_parameter_with_content(self):
        """Test parameters described by a content map."""
        document = DocumentBuilder().build(
            {
                "components": {
                    "parameters": {
                        "filter": {
                            "name": "filter",
                            "in": "query",
                            "content": {"application/json": {"schema": {"type": "object"}}},
                        }
                    }
                }
            }
        )
        param = document.components.parameters["filter"]

        assert param.schema is None
        assert isinstance(param.content["application/json"].schema, ObjectSchema)

    def test_default_response_is_separated(self):
        """Test that the default response is kept apart from status codes."""
        document = DocumentBuilder().build(
            {
                "paths": {
                    "/pets": {
                        "get": {
                            "responses": {
                                200: {"description": "ok"},
                                "default": {"$ref": "#/components/responses/Error"},
                            }
                        }
                    }
                }
            }
        )
        operation = document.paths["/pets"].operations["get"]

        assert list(operation.responses) == ["200"]
        assert operation.default == Reference(ref="#/components/responses/Error")
        assert [designator for designator, _ in operation.iter_responses()] == ["200", "default"]

    def test_path_item_parameters_and_methods(self):
        """Test that only HTTP methods become operations."""
        document = DocumentBuilder().build(
            {
                "paths": {
                    "/pets/{id}": {
                        "summary": "Pets",
                        "parameters": [{"$ref": "#/components/parameters/id"}],
                        "get": {"responses": {}},
                        "delete": {"responses": {}},
                    }
                }
            }
        )
        path_item = document.paths["/pets/{id}"]

        assert sorted(path_item.operations) == ["delete", "get"]
        assert path_item.parameters == [Reference(ref="#/components/parameters/id")]

    def test_rejects_non_mapping_root(self):
        """Test that a non-object document is rejected."""
        with pytest.raises(DocumentError):
            DocumentBuilder().build(["not", "a", "document"])

    def test_rejects_unknown_type(self):
        """Test that unknown schema types are rejected with their location."""
        with pytest.raises(DocumentError) as exc_info:
            build_schema({"type": "date"})

        assert exc_info.value.location == "#/components/schemas/S/type"

    def test_rejects_parameter_without_schema_or_content(self):
        """Test that a parameter needs a schema or content."""
        with pytest.raises(DocumentError):
            DocumentBuilder().build({"components": {"parameters": {"p": {"name": "p", "in": "query"}}}})

    def test_rejects_deep_nesting(self):
        """Test the nesting ceiling."""
        schema = {"type": "boolean"}
        for _ in range(4):
            schema = {"type": "array", "items": schema}

        builder = DocumentBuilder(max_depth=3)
        with pytest.raises(DocumentError):
            builder.build({"components": {"schemas": {"S": schema}}})

    def test_extensions_are_skipped(self):
        """Test that x- extension keys under paths and responses are ignored."""
        document = DocumentBuilder().build(
            {
                "paths": {
                    "x-internal": True,
                    "x-group": {"get": {"responses": {}}},
                    "/a": {
                        "x-owner": "team-a",
                        "get": {
                            "responses": {
                                "x-codegen": "skip",
                                "x-meta": {"description": "not a response"},
                                "200": {"description": "ok"},
                            }
                        },
                    },
                }
            }
        )

        assert list(document.paths) == ["/a"]
        operation = document.paths["/a"].operations["get"]
        assert list(operation.responses) == ["200"]
        assert operation.default is None

    def test_rejects_non_string_type(self):
        """Test that a mapping or list element as type is a document error."""
        with pytest.raises(DocumentError) as exc_info:
            build_schema({"type": {"x": 1}})

        assert exc_info.value.location == "#/components/schemas/S/type"

        with pytest.raises(DocumentError):
            build_schema({"type": [{"x": 1}, "null"]})
