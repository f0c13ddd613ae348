"""Document Builder turning a decoded OpenAPI mapping into the typed model."""

from typing import Any, Dict, List, Optional

from .classifier import DEFAULT_MAX_DEPTH
from .exceptions import DocumentError
from .models import (HTTP_METHODS, AllOfSchema, AnyOfSchema, AnySchema,
                     ArraySchema, BooleanSchema, Components, Document, Header,
                     Link, MediaType, NotSchema, ObjectSchema, OneOfSchema,
                     Operation, Parameter, PathItem, Reference, Response,
                     ScalarSchema)

SCALAR_TYPES = {"string", "number", "integer"}


def _escape(token: str) -> str:
    return str(token).replace("~", "~0").replace("/", "~1")


def _is_extension(key: Any) -> bool:
    return isinstance(key, str) and key.startswith("x-")


class DocumentBuilder:
    """Builds a Document from JSON/YAML data, rejecting malformed shapes."""

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH):
        self.max_depth = max_depth

    def build(self, data: Any) -> Document:
        """
        Build a typed document.

        Args:
            data: Decoded OpenAPI document (the root mapping)

        Returns:
            Document with components and paths populated

        Raises:
            DocumentError: If a required structure has the wrong shape
        """
        root = self._mapping(data, "#")

        components = None
        if root.get("components") is not None:
            components = self._build_components(root["components"], "#/components")

        paths = {}
        for path, path_item in self._mapping(root.get("paths") or {}, "#/paths").items():
            if _is_extension(path):
                continue
            location = f"#/paths/{_escape(path)}"
            paths[path] = self._reference_or(path_item, location, self._build_path_item)

        return Document(openapi=str(root.get("openapi", "")), components=components, paths=paths)

    # Helpers

    def _mapping(self, value: Any, location: str) -> Dict[str, Any]:
        if not isinstance(value, dict):
            raise DocumentError(f"Expected an object, got {type(value).__name__}", location)
        return value

    def _sequence(self, value: Any, location: str) -> List[Any]:
        if not isinstance(value, list):
            raise DocumentError(f"Expected an array, got {type(value).__name__}", location)
        return value

    def _reference_or(self, value: Any, location: str, build_item, *args):
        """Build either a Reference or, via build_item, an inline item."""
        value = self._mapping(value, location)
        if "$ref" in value:
            ref = value["$ref"]
            if not isinstance(ref, str):
                raise DocumentError("$ref must be a string", location)
            return Reference(ref=ref)
        return build_item(value, location, *args)

    # Components

    def _build_components(self, data: Any, location: str) -> Components:
        data = self._mapping(data, location)
        sections = {}
        for section, build_item in (
            ("schemas", self._build_schema),
            ("parameters", self._build_parameter),
            ("responses", self._build_response),
        ):
            entries = self._mapping(data.get(section) or {}, f"{location}/{section}")
            sections[section] = {
                str(name): self._reference_or(entry, f"{location}/{section}/{_escape(name)}", build_item)
                for name, entry in entries.items()
            }
        return Components(**sections)

    # Schemas

    def _schema_slot(self, value: Any, location: str, depth: int = 0):
        return self._reference_or(value, location, self._build_schema, depth)

    def _build_schema(self, data: Dict[str, Any], location: str, depth: int = 0):
        if depth > self.max_depth:
            raise DocumentError(f"Schema nesting exceeds maximum depth of {self.max_depth}", location)

        schema_type = self._effective_type(data.get("type"), location)
        enumeration = self._enumeration(data, location)

        if schema_type in SCALAR_TYPES:
            return ScalarSchema(type=schema_type, enumeration=enumeration, format=data.get("format"))
        if schema_type == "boolean":
            return BooleanSchema()
        if schema_type == "object":
            properties = {
                name: self._schema_slot(prop, f"{location}/properties/{_escape(name)}", depth + 1)
                for name, prop in self._mapping(data.get("properties") or {}, f"{location}/properties").items()
            }
            required = data.get("required") or []
            return ObjectSchema(properties=properties, required=list(required))
        if schema_type == "array":
            return ArraySchema(items=self._optional_items(data, location, depth))

        for keyword, schema_class in (("oneOf", OneOfSchema), ("allOf", AllOfSchema), ("anyOf", AnyOfSchema)):
            if keyword in data:
                members = self._sequence(data[keyword], f"{location}/{keyword}")
                return schema_class(
                    members=[
                        self._schema_slot(member, f"{location}/{keyword}/{index}", depth + 1)
                        for index, member in enumerate(members)
                    ]
                )
        if "not" in data:
            return NotSchema(member=self._schema_slot(data["not"], f"{location}/not", depth + 1))

        return AnySchema(items=self._optional_items(data, location, depth), enumeration=enumeration)

    def _effective_type(self, schema_type: Any, location: str) -> Optional[str]:
        """Resolve the `type` keyword; 3.1 type lists with one non-null type collapse to it."""
        if schema_type is None:
            return None
        if isinstance(schema_type, list):
            concrete = [t for t in schema_type if t != "null"]
            return self._effective_type(concrete[0], location) if len(concrete) == 1 else None
        if schema_type == "null":
            return None
        if not isinstance(schema_type, str) or schema_type not in SCALAR_TYPES | {"boolean", "object", "array"}:
            raise DocumentError(f"Unknown schema type {schema_type!r}", f"{location}/type")
        return schema_type

    def _enumeration(self, data: Dict[str, Any], location: str) -> List[Any]:
        if data.get("enum") is None:
            return []
        return list(self._sequence(data["enum"], f"{location}/enum"))

    def _optional_items(self, data: Dict[str, Any], location: str, depth: int):
        if data.get("items") is None:
            return None
        return self._schema_slot(data["items"], f"{location}/items", depth + 1)

    # Parameters, headers and content

    def _build_content(self, data: Any, location: str) -> Dict[str, MediaType]:
        content = {}
        for media_type, entry in self._mapping(data, location).items():
            entry_location = f"{location}/{_escape(media_type)}"
            entry = self._mapping(entry or {}, entry_location)
            schema = None
            if entry.get("schema") is not None:
                schema = self._schema_slot(entry["schema"], f"{entry_location}/schema")
            content[media_type] = MediaType(schema=schema)
        return content

    def _schema_or_content(self, data: Dict[str, Any], location: str, what: str):
        if data.get("schema") is not None:
            return self._schema_slot(data["schema"], f"{location}/schema"), {}
        if data.get("content") is not None:
            return None, self._build_content(data["content"], f"{location}/content")
        raise DocumentError(f"{what} must define either 'schema' or 'content'", location)

    def _build_parameter(self, data: Dict[str, Any], location: str) -> Parameter:
        if not isinstance(data.get("name"), str):
            raise DocumentError("Parameter is missing its 'name'", location)
        schema, content = self._schema_or_content(data, location, "Parameter")
        return Parameter(name=data["name"], location=str(data.get("in", "")), schema=schema, content=content)

    def _build_header(self, data: Dict[str, Any], location: str) -> Header:
        schema, content = self._schema_or_content(data, location, "Header")
        return Header(schema=schema, content=content)

    # Responses

    def _build_link(self, data: Dict[str, Any], location: str) -> Link:
        return Link(operation_id=data.get("operationId"), operation_ref=data.get("operationRef"))

    def _build_response(self, data: Dict[str, Any], location: str) -> Response:
        headers = {
            name: self._reference_or(header, f"{location}/headers/{_escape(name)}", self._build_header)
            for name, header in self._mapping(data.get("headers") or {}, f"{location}/headers").items()
        }
        content = self._build_content(data.get("content") or {}, f"{location}/content")
        links = {
            name: self._reference_or(link, f"{location}/links/{_escape(name)}", self._build_link)
            for name, link in self._mapping(data.get("links") or {}, f"{location}/links").items()
        }
        return Response(description=str(data.get("description", "")), headers=headers, content=content, links=links)

    # Paths

    def _build_parameters(self, data: Any, location: str) -> List[Any]:
        return [
            self._reference_or(param, f"{location}/{index}", self._build_parameter)
            for index, param in enumerate(self._sequence(data or [], location))
        ]

    def _build_operation(self, method: str, data: Any, location: str) -> Operation:
        data = self._mapping(data, location)
        responses = {}
        default = None
        for status, response in self._mapping(data.get("responses") or {}, f"{location}/responses").items():
            if _is_extension(status):
                continue
            built = self._reference_or(response, f"{location}/responses/{_escape(status)}", self._build_response)
            if str(status) == "default":
                default = built
            else:
                responses[str(status)] = built
        return Operation(
            method=method,
            operation_id=data.get("operationId"),
            parameters=self._build_parameters(data.get("parameters"), f"{location}/parameters"),
            responses=responses,
            default=default,
        )

    def _build_path_item(self, data: Dict[str, Any], location: str) -> PathItem:
        operations = {
            method: self._build_operation(method, data[method], f"{location}/{method}")
            for method in HTTP_METHODS
            if data.get(method) is not None
        }
        parameters = self._build_parameters(data.get("parameters"), f"{location}/parameters")
        return PathItem(operations=operations, parameters=parameters)
