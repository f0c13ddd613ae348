"""In-memory OpenAPI document model consumed by the component audit."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union

DEFAULT_RESPONSE = "default"

HTTP_METHODS = ["get", "put", "post", "delete", "options", "head", "patch", "trace"]


class ComponentKind(str, Enum):
    """The three component namespaces tracked by the audit."""

    SCHEMAS = "schemas"
    PARAMETERS = "parameters"
    RESPONSES = "responses"

    @classmethod
    def from_token(cls, token: str) -> Optional["ComponentKind"]:
        """Map a pointer token to a namespace, None if it names no tracked namespace."""
        for kind in cls:
            if kind.value == token:
                return kind
        return None


@dataclass
class Reference:
    """A `$ref` pointer standing in place of an inline item."""

    ref: str


class ReferenceOr:
    """Typing helper: ReferenceOr[X] is a slot holding either a Reference or an inline X."""

    def __class_getitem__(cls, item):
        return Union[Reference, item]


def is_reference(value: Any) -> bool:
    """Check whether a slot holds a reference rather than an inline item."""
    return isinstance(value, Reference)


def as_item(value: Any) -> Optional[Any]:
    """Return the inline item of a slot, or None when the slot is a reference."""
    if value is None or isinstance(value, Reference):
        return None
    return value


# Schema nodes


@dataclass
class ScalarSchema:
    """A string, number or integer schema."""

    type: str  # "string", "number" or "integer"
    enumeration: List[Any] = field(default_factory=list)
    format: Optional[str] = None


@dataclass
class BooleanSchema:
    """A boolean schema."""


@dataclass
class ObjectSchema:
    """An object schema. Properties are kept but never inspected for complexity."""

    properties: Dict[str, "ReferenceOr[Schema]"] = field(default_factory=dict)
    required: List[str] = field(default_factory=list)


@dataclass
class ArraySchema:
    """An array schema with an optional element schema."""

    items: Optional["ReferenceOr[Schema]"] = None


@dataclass
class CompositeSchema:
    """Base for the oneOf/anyOf/allOf combinators."""

    members: List["ReferenceOr[Schema]"] = field(default_factory=list)


@dataclass
class OneOfSchema(CompositeSchema):
    pass


@dataclass
class AnyOfSchema(CompositeSchema):
    pass


@dataclass
class AllOfSchema(CompositeSchema):
    pass


@dataclass
class NotSchema:
    """A negation combinator over a single member."""

    member: "ReferenceOr[Schema]"


@dataclass
class AnySchema:
    """An untyped schema, possibly carrying items and/or an enumeration."""

    items: Optional["ReferenceOr[Schema]"] = None
    enumeration: List[Any] = field(default_factory=list)


Schema = Union[
    ScalarSchema,
    BooleanSchema,
    ObjectSchema,
    ArraySchema,
    OneOfSchema,
    AnyOfSchema,
    AllOfSchema,
    NotSchema,
    AnySchema,
]


# Document structure


@dataclass
class MediaType:
    """A media type entry of a content map."""

    schema: Optional["ReferenceOr[Schema]"] = None


@dataclass
class Parameter:
    """An operation or component parameter.

    Exactly one of `schema` and `content` is set.
    """

    name: str
    location: str
    schema: Optional["ReferenceOr[Schema]"] = None
    content: Dict[str, MediaType] = field(default_factory=dict)


@dataclass
class Header:
    """A response header, described by a schema or a content map."""

    schema: Optional["ReferenceOr[Schema]"] = None
    content: Dict[str, MediaType] = field(default_factory=dict)


@dataclass
class Link:
    """A response link. Never classified."""

    operation_id: Optional[str] = None
    operation_ref: Optional[str] = None


@dataclass
class Response:
    """A response with its headers, content bodies and links."""

    description: str = ""
    headers: Dict[str, "ReferenceOr[Header]"] = field(default_factory=dict)
    content: Dict[str, MediaType] = field(default_factory=dict)
    links: Dict[str, "ReferenceOr[Link]"] = field(default_factory=dict)


@dataclass
class Operation:
    """A single HTTP operation of a path item."""

    method: str
    operation_id: Optional[str] = None
    parameters: List["ReferenceOr[Parameter]"] = field(default_factory=list)
    responses: Dict[str, "ReferenceOr[Response]"] = field(default_factory=dict)
    default: Optional["ReferenceOr[Response]"] = None

    def iter_responses(self):
        """Yield (designator, response) pairs, the default response last."""
        for status, response in self.responses.items():
            yield status, response
        if self.default is not None:
            yield DEFAULT_RESPONSE, self.default


@dataclass
class PathItem:
    """The operations and shared parameters of one path."""

    operations: Dict[str, Operation] = field(default_factory=dict)
    parameters: List["ReferenceOr[Parameter]"] = field(default_factory=list)


@dataclass
class Components:
    """The reusable component namespaces tracked by the audit."""

    schemas: Dict[str, "ReferenceOr[Schema]"] = field(default_factory=dict)
    parameters: Dict[str, "ReferenceOr[Parameter]"] = field(default_factory=dict)
    responses: Dict[str, "ReferenceOr[Response]"] = field(default_factory=dict)


@dataclass
class Document:
    """A decoded OpenAPI document."""

    openapi: str = ""
    components: Optional[Components] = None
    paths: Dict[str, "ReferenceOr[PathItem]"] = field(default_factory=dict)
