"""Usage Reporter flagging collected components that no path references."""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List

from .context import AnalysisContext, Anomaly, InlineSchemaNote
from .models import ComponentKind

logger = logging.getLogger(__name__)

OWNER_MATCH = "owner"
EXACT_MATCH = "exact"
RESPONSE_MATCH_MODES = (OWNER_MATCH, EXACT_MATCH)

KIND_LABELS = {
    ComponentKind.SCHEMAS: "Schema",
    ComponentKind.PARAMETERS: "Param",
    ComponentKind.RESPONSES: "Response",
}


@dataclass
class UnusedComponent:
    """A collected component key never referenced from the paths."""

    kind: ComponentKind
    key: str

    def describe(self) -> str:
        return f"{KIND_LABELS[self.kind]} {self.key} is never used"


@dataclass
class UsageReport:
    """Findings of one analysis pass."""

    unused: List[UnusedComponent] = field(default_factory=list)
    anomalies: List[Anomaly] = field(default_factory=list)
    inline_schemas: List[InlineSchemaNote] = field(default_factory=list)
    classification: Dict[str, Dict[str, List[str]]] = field(default_factory=dict)

    def unused_for(self, kind: ComponentKind) -> List[str]:
        return [finding.key for finding in self.unused if finding.kind == kind]

    @property
    def has_findings(self) -> bool:
        return bool(self.unused or self.anomalies)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "unused": {kind.value: self.unused_for(kind) for kind in ComponentKind},
            "anomalies": [
                {"category": a.category, "location": a.location, "reference": a.reference} for a in self.anomalies
            ],
            "inline_schemas": [
                {"path": n.path, "method": n.method, "site": n.site, "designator": n.designator}
                for n in self.inline_schemas
            ],
            "classification": self.classification,
        }


class UsageReporter:
    """Set-differences collected component keys against the reference tallies."""

    def __init__(self, response_match: str = OWNER_MATCH):
        if response_match not in RESPONSE_MATCH_MODES:
            raise ValueError(f"response_match must be one of {RESPONSE_MATCH_MODES}, got {response_match!r}")
        self.response_match = response_match

    def report(self, context: AnalysisContext) -> UsageReport:
        """
        Build the usage report.

        Args:
            context: Populated analysis context

        Returns:
            UsageReport with one UnusedComponent per unreferenced key, per namespace
        """
        report = UsageReport(anomalies=list(context.anomalies), inline_schemas=list(context.inline_schemas))

        for kind in ComponentKind:
            usage = context[kind]
            referenced = set(usage.referenced)
            report.classification[kind.value] = {"simple": sorted(usage.simple), "complex": sorted(usage.complex)}

            for key in usage.keys():
                if self._match_key(kind, key, usage.owners) not in referenced:
                    report.unused.append(UnusedComponent(kind=kind, key=key))

        logger.info(f"Found {len(report.unused)} unused components and {len(report.anomalies)} anomalies")
        return report

    def _match_key(self, kind: ComponentKind, key: str, owners: Dict[str, str]) -> str:
        """Response sub-keys match on their owning response name unless exact matching is configured."""
        if kind == ComponentKind.RESPONSES and self.response_match == OWNER_MATCH:
            return owners.get(key, key)
        return key
