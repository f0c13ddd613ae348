"""Per-run state shared by the collector, the walker and the reporter."""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .models import ComponentKind

logger = logging.getLogger(__name__)


@dataclass
class Anomaly:
    """A reference found where an inline item was expected."""

    category: str  # e.g. "schema reference", "response header reference"
    location: str  # derived key or path/method designator
    reference: str
    kind: Optional[ComponentKind] = None

    def describe(self) -> str:
        return f"Unexpected {self.category} {self.location} => {self.reference}"


@dataclass
class InlineSchemaNote:
    """An inline complex schema found at a site that would usually hold a reference."""

    path: str
    method: str
    site: str  # "parameter" or "response"
    designator: str  # parameter name or response status

    def describe(self) -> str:
        return f"Inline complex {self.site} schema for {self.designator} in {self.method.upper()} {self.path}"


@dataclass
class NamespaceUsage:
    """Classification buckets and reference tally of one component namespace."""

    kind: ComponentKind
    simple: Dict[str, Any] = field(default_factory=dict)
    complex: Dict[str, Any] = field(default_factory=dict)
    owners: Dict[str, str] = field(default_factory=dict)
    referenced: List[str] = field(default_factory=list)

    def add(self, key: str, schema: Any, is_complex: bool, owner: Optional[str] = None) -> None:
        """Bucket a classified schema. A key seen again as complex moves out of simple."""
        if is_complex:
            self.simple.pop(key, None)
            self.complex[key] = schema
        elif key not in self.complex:
            self.simple[key] = schema
        self.owners[key] = owner or key

    def keys(self) -> List[str]:
        return sorted(set(self.complex) | set(self.simple))


class AnalysisContext:
    """Mutable state of a single analysis pass."""

    def __init__(self):
        self.namespaces = {kind: NamespaceUsage(kind=kind) for kind in ComponentKind}
        self.anomalies: List[Anomaly] = []
        self.inline_schemas: List[InlineSchemaNote] = []

    def __getitem__(self, kind: ComponentKind) -> NamespaceUsage:
        return self.namespaces[kind]

    def record_reference(self, kind: ComponentKind, name: str) -> None:
        self.namespaces[kind].referenced.append(name)

    def record_anomaly(self, anomaly: Anomaly) -> None:
        logger.debug(anomaly.describe())
        self.anomalies.append(anomaly)

    def record_inline_schema(self, note: InlineSchemaNote) -> None:
        logger.debug(note.describe())
        self.inline_schemas.append(note)
