"""Classify command - prints the simple/complex buckets of every namespace."""

import json
import logging
import sys

from src.cli.config import Config
from src.component_audit.analyzer import AnalyzerConfig, ComponentUsageAnalyzer
from src.component_audit.document import DocumentBuilder
from src.component_audit.loader import SpecLoader

logger = logging.getLogger(__name__)


def classify_command(config: Config, schema: str, as_json: bool = False):
    """Print which components are simple and which are complex."""
    analyzer_config = AnalyzerConfig.from_config(config)
    loader = SpecLoader(DocumentBuilder(max_depth=analyzer_config.max_schema_depth))

    result = loader.load(schema)
    if not result.success:
        logger.error(f"❌ Cannot read {schema}: {result.error}")
        sys.exit(1)

    classification = ComponentUsageAnalyzer(analyzer_config).analyze(result.document).classification

    if as_json:
        print(json.dumps(classification, indent=2))
        return

    for namespace, buckets in classification.items():
        for bucket in ("complex", "simple"):
            for key in buckets[bucket]:
                print(f"{namespace} {bucket}: {key}")
