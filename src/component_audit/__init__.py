"""Component audit: classifies OpenAPI components and reports the ones no path uses."""

from .analyzer import AnalyzerConfig, ComponentUsageAnalyzer
from .classifier import ComplexityClassifier
from .collector import ComponentCollector
from .context import AnalysisContext, Anomaly, InlineSchemaNote, NamespaceUsage
from .document import DocumentBuilder
from .exceptions import AuditError, DocumentError, SchemaDepthError
from .loader import LoadResult, SpecLoader
from .models import ComponentKind, Document, Reference
from .reference_resolver import ParsedReference, ReferenceResolver
from .reporter import UnusedComponent, UsageReport, UsageReporter
from .walker import PathReferenceWalker

__all__ = [
    "AnalysisContext",
    "AnalyzerConfig",
    "Anomaly",
    "AuditError",
    "ComplexityClassifier",
    "ComponentCollector",
    "ComponentKind",
    "ComponentUsageAnalyzer",
    "Document",
    "DocumentBuilder",
    "DocumentError",
    "InlineSchemaNote",
    "LoadResult",
    "NamespaceUsage",
    "ParsedReference",
    "PathReferenceWalker",
    "Reference",
    "ReferenceResolver",
    "SchemaDepthError",
    "SpecLoader",
    "UnusedComponent",
    "UsageReport",
    "UsageReporter",
]
