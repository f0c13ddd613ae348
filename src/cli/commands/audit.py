"""Audit command - reports components never referenced from the paths."""

import json
import logging
import sys

from src.cli.config import Config
from src.component_audit.analyzer import AnalyzerConfig, ComponentUsageAnalyzer
from src.component_audit.document import DocumentBuilder
from src.component_audit.loader import SpecLoader

logger = logging.getLogger(__name__)


def audit_command(config: Config, schema: str, as_json: bool = False):
    """Load a document, analyze component usage and print every finding."""
    analyzer_config = AnalyzerConfig.from_config(config)
    loader = SpecLoader(DocumentBuilder(max_depth=analyzer_config.max_schema_depth))

    logger.info(f"📄 Loading {schema}")
    result = loader.load(schema)
    if not result.success:
        logger.error(f"❌ Cannot read {schema}: {result.error}")
        sys.exit(1)

    report = ComponentUsageAnalyzer(analyzer_config).analyze(result.document)

    if as_json:
        print(json.dumps(report.to_dict(), indent=2))
        return

    print("Report")
    for finding in report.unused:
        print(finding.describe())

    if config.show_anomalies and report.anomalies:
        print()
        print("Anomalies")
        for anomaly in report.anomalies:
            print(anomaly.describe())

    if config.show_inline_schemas and report.inline_schemas:
        print()
        print("Inline complex schemas")
        for note in report.inline_schemas:
            print(note.describe())

    logger.info(f"✅ {len(report.unused)} unused components, {len(report.anomalies)} anomalies")
