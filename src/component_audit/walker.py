"""Path Reference Walker recording every component referenced from the paths."""

import logging
from typing import List

from .classifier import ComplexityClassifier
from .context import AnalysisContext, Anomaly, InlineSchemaNote
from .exceptions import SchemaDepthError
from .models import Document, Operation, Parameter, is_reference
from .reference_resolver import ReferenceResolver

logger = logging.getLogger(__name__)

PATH_LEVEL = "*"


class PathReferenceWalker:
    """Walks the parameters and responses of every operation under every path."""

    def __init__(self, classifier: ComplexityClassifier = None, resolver: ReferenceResolver = None):
        self.classifier = classifier or ComplexityClassifier()
        self.resolver = resolver or ReferenceResolver()

    def walk(self, document: Document, context: AnalysisContext) -> None:
        """
        Record referenced component names into the context's tallies.

        Args:
            document: Document to walk
            context: Analysis context receiving reference tallies and notes
        """
        for path, path_item in document.paths.items():
            logger.info(f"Scanning path {path}")
            if is_reference(path_item):
                context.record_anomaly(Anomaly(category="path item reference", location=path, reference=path_item.ref))
                continue

            self._walk_parameters(context, path, PATH_LEVEL, path_item.parameters)
            for method, operation in path_item.operations.items():
                self._walk_operation(context, path, method, operation)

    def _walk_operation(self, context: AnalysisContext, path: str, method: str, operation: Operation) -> None:
        self._walk_parameters(context, path, method, operation.parameters)
        for designator, response in operation.iter_responses():
            self._walk_response(context, path, method, designator, response)

    def _record(self, context: AnalysisContext, ref: str, site: str) -> None:
        parsed = self.resolver.parse_reference(ref)
        kind = parsed.component_kind
        if kind is not None:
            context.record_reference(kind, parsed.name)
        logger.debug(f"{site} reference name {parsed.name} of type {parsed.kind}")

    def _walk_parameters(self, context: AnalysisContext, path: str, method: str, parameters: List) -> None:
        for param in parameters:
            if is_reference(param):
                self._record(context, param.ref, "Param")
                continue
            self._walk_parameter_schemas(context, path, method, param)

    def _walk_parameter_schemas(self, context: AnalysisContext, path: str, method: str, param: Parameter) -> None:
        schemas = [param.schema] + [media.schema for media in param.content.values()]
        for schema in schemas:
            if schema is None:
                continue
            if is_reference(schema):
                self._record(context, schema.ref, f"Param {param.name}")
            else:
                self._note_inline(context, schema, InlineSchemaNote(path, method, "parameter", param.name))

    def _walk_response(self, context: AnalysisContext, path: str, method: str, designator: str, response) -> None:
        if is_reference(response):
            self._record(context, response.ref, "Response")
            return

        for media in response.content.values():
            if media.schema is None:
                continue
            if is_reference(media.schema):
                self._record(context, media.schema.ref, "Response")
            else:
                self._note_inline(context, media.schema, InlineSchemaNote(path, method, "response", designator))

    def _note_inline(self, context: AnalysisContext, schema, note: InlineSchemaNote) -> None:
        """Surface an inline complex schema; inline schemas are never counted as references."""
        try:
            is_complex = self.classifier.is_complex(schema)
        except SchemaDepthError as e:
            context.record_anomaly(
                Anomaly(category="deeply nested schema", location=f"{note.method} {note.path}", reference=str(e))
            )
            return
        if is_complex:
            context.record_inline_schema(note)
        else:
            logger.debug(f"{note.site.capitalize()} schema is simple for {note.designator}")
