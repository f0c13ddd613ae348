"""Component Collector bucketing every inline component schema as simple or complex."""

import logging
from typing import Dict

from .classifier import ComplexityClassifier
from .context import AnalysisContext, Anomaly
from .exceptions import SchemaDepthError
from .models import (ComponentKind, Components, Document, MediaType, Response,
                     as_item, is_reference)

logger = logging.getLogger(__name__)


class ComponentCollector:
    """Walks the schemas, parameters and responses namespaces of a document."""

    def __init__(self, classifier: ComplexityClassifier = None):
        self.classifier = classifier or ComplexityClassifier()

    def collect(self, document: Document, context: AnalysisContext) -> None:
        """
        Classify every inline component schema into the context's buckets.

        Args:
            document: Document to walk
            context: Analysis context receiving buckets and anomalies
        """
        components = document.components
        if components is None:
            logger.info("Document has no components section")
            return

        self._collect_schemas(components, context)
        self._collect_parameters(components, context)
        self._collect_responses(components, context)

        for kind in ComponentKind:
            usage = context[kind]
            logger.info(f"Collected {kind.value}: {len(usage.complex)} complex, {len(usage.simple)} simple")

    def _classify(self, context: AnalysisContext, kind: ComponentKind, key: str, schema, owner: str) -> None:
        try:
            is_complex = self.classifier.is_complex(schema)
        except SchemaDepthError as e:
            context.record_anomaly(Anomaly(category="deeply nested schema", location=key, reference=str(e), kind=kind))
            return
        context[kind].add(key, schema, is_complex, owner=owner)

    def _collect_schemas(self, components: Components, context: AnalysisContext) -> None:
        for name, schema in components.schemas.items():
            if is_reference(schema):
                context.record_anomaly(
                    Anomaly(category="schema reference", location=name, reference=schema.ref, kind=ComponentKind.SCHEMAS)
                )
                continue
            self._classify(context, ComponentKind.SCHEMAS, name, schema, name)

    def _collect_parameters(self, components: Components, context: AnalysisContext) -> None:
        for name, param in components.parameters.items():
            if is_reference(param):
                context.record_anomaly(
                    Anomaly(category="param reference", location=name, reference=param.ref, kind=ComponentKind.PARAMETERS)
                )
                continue

            if param.schema is not None:
                self._collect_parameter_schema(context, name, param.schema)
            for media_type, media in param.content.items():
                logger.debug(f"Param {name} carries content {media_type}")
                if media.schema is not None:
                    self._collect_parameter_schema(context, name, media.schema)

    def _collect_parameter_schema(self, context: AnalysisContext, name: str, schema) -> None:
        if is_reference(schema):
            logger.debug(f"Found param reference {name} => {schema.ref}")
            return
        self._classify(context, ComponentKind.PARAMETERS, name, schema, name)

    def _collect_responses(self, components: Components, context: AnalysisContext) -> None:
        for name, response in components.responses.items():
            if is_reference(response):
                context.record_anomaly(
                    Anomaly(category="response reference", location=name, reference=response.ref, kind=ComponentKind.RESPONSES)
                )
                continue

            self._collect_response_headers(context, name, response)
            self._collect_content(context, name, f"{name}/content", response.content, key_per_media_type=True)

            for link_name, link in response.links.items():
                if is_reference(link):
                    context.record_anomaly(
                        Anomaly(
                            category="response link reference",
                            location=f"{name}/link/{link_name}",
                            reference=link.ref,
                            kind=ComponentKind.RESPONSES,
                        )
                    )

    def _collect_response_headers(self, context: AnalysisContext, name: str, response: Response) -> None:
        for header_name, header in response.headers.items():
            key = f"{name}/header/{header_name}"
            if is_reference(header):
                context.record_anomaly(
                    Anomaly(category="response header reference", location=key, reference=header.ref, kind=ComponentKind.RESPONSES)
                )
                continue

            if header.schema is not None:
                schema = as_item(header.schema)
                if schema is None:
                    context.record_anomaly(
                        Anomaly(
                            category="response header schema reference",
                            location=key,
                            reference=header.schema.ref,
                            kind=ComponentKind.RESPONSES,
                        )
                    )
                else:
                    self._classify(context, ComponentKind.RESPONSES, key, schema, name)
            self._collect_content(context, name, key, header.content, key_per_media_type=False)

    def _collect_content(
        self,
        context: AnalysisContext,
        owner: str,
        key_prefix: str,
        content: Dict[str, MediaType],
        key_per_media_type: bool,
    ) -> None:
        """Classify content schemas of a response (one key per media type) or a header (one key)."""
        for media_type, media in content.items():
            if media.schema is None:
                continue
            key = f"{key_prefix}/{media_type}" if key_per_media_type else key_prefix
            if is_reference(media.schema):
                category = "response content reference" if key_per_media_type else "response header reference"
                context.record_anomaly(
                    Anomaly(category=category, location=key, reference=media.schema.ref, kind=ComponentKind.RESPONSES)
                )
                continue
            self._classify(context, ComponentKind.RESPONSES, key, media.schema, owner)
