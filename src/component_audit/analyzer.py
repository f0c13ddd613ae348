"""Component usage analyzer orchestrating collection, path walking and reporting."""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict

from .classifier import DEFAULT_MAX_DEPTH, ComplexityClassifier
from .collector import ComponentCollector
from .context import AnalysisContext
from .document import DocumentBuilder
from .models import Document
from .reporter import OWNER_MATCH, UsageReport, UsageReporter
from .walker import PathReferenceWalker

if TYPE_CHECKING:
    from ..cli.config import Config

logger = logging.getLogger(__name__)


@dataclass
class AnalyzerConfig:
    """Configuration for a component usage analysis."""

    max_schema_depth: int = DEFAULT_MAX_DEPTH
    response_match: str = OWNER_MATCH

    @classmethod
    def from_config(cls, config: "Config") -> "AnalyzerConfig":
        """Create config from Config object."""
        return cls(
            max_schema_depth=config.max_schema_depth,
            response_match=config.response_usage_match,
        )


class ComponentUsageAnalyzer:
    """Runs one full analysis pass per call over a fresh context."""

    def __init__(self, config: AnalyzerConfig = None):
        self.config = config or AnalyzerConfig()
        classifier = ComplexityClassifier(max_depth=self.config.max_schema_depth)
        self.builder = DocumentBuilder(max_depth=self.config.max_schema_depth)
        self.collector = ComponentCollector(classifier)
        self.walker = PathReferenceWalker(classifier)
        self.reporter = UsageReporter(response_match=self.config.response_match)

    def analyze(self, document: Document) -> UsageReport:
        """
        Analyze component usage of a document.

        Args:
            document: Typed OpenAPI document

        Returns:
            UsageReport listing unused components and anomalies
        """
        context = AnalysisContext()

        logger.info("Collecting schema information")
        self.collector.collect(document, context)

        logger.info("Parsing paths information")
        self.walker.walk(document, context)

        return self.reporter.report(context)

    def analyze_data(self, data: Dict[str, Any]) -> UsageReport:
        """Build a document from decoded data, then analyze it. Raises DocumentError."""
        return self.analyze(self.builder.build(data))
