"""Reference Resolver for splitting $ref pointers into component name and kind."""

import logging
from typing import NamedTuple, Optional

from .models import ComponentKind

logger = logging.getLogger(__name__)


class ParsedReference(NamedTuple):
    """The last two tokens of a pointer expression."""

    name: str
    kind: str

    @property
    def component_kind(self) -> Optional[ComponentKind]:
        return ComponentKind.from_token(self.kind)


class ReferenceResolver:
    """Resolves same-document $ref strings to (name, kind) pairs."""

    def parse_reference(self, ref: str) -> ParsedReference:
        """
        Split a pointer into its component name and component kind.

        Args:
            ref: Reference string (e.g., "#/components/schemas/Pet")

        Returns:
            ParsedReference with the final token as name and the token before
            it as kind. Missing tokens resolve to empty strings.
        """
        tokens = ref.split("/")
        name = tokens[-1]
        kind = tokens[-2] if len(tokens) > 1 else ""
        return ParsedReference(name=name, kind=kind)

    def resolve(self, ref: str) -> Optional[ComponentKind]:
        """Return the namespace a pointer targets, or None for untracked kinds."""
        parsed = self.parse_reference(ref)
        kind = parsed.component_kind
        if kind is None:
            logger.debug(f"Ignoring reference {ref!r} of untracked kind {parsed.kind!r}")
        return kind
