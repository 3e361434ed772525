"""Per-document diagnostics collection."""

from typing import Dict, Iterator, List, Tuple

from ..models import Diagnostic


class DiagnosticCollection:
    """
    Diagnostics currently shown for each document, keyed by URI.

    Entries are only ever replaced whole or removed, never merged.
    """

    def __init__(self, name: str = "security"):
        self.name = name
        self._entries: Dict[str, List[Diagnostic]] = {}

    def set(self, uri: str, diagnostics: List[Diagnostic]):
        """Replace every diagnostic for a document."""
        self._entries[uri] = list(diagnostics)

    def get(self, uri: str) -> List[Diagnostic]:
        """Get a copy of a document's diagnostics (empty if none)."""
        return list(self._entries.get(uri, []))

    def has(self, uri: str) -> bool:
        return uri in self._entries

    def delete(self, uri: str):
        self._entries.pop(uri, None)

    def clear(self):
        """Remove the entries of all documents."""
        self._entries.clear()

    def __iter__(self) -> Iterator[Tuple[str, List[Diagnostic]]]:
        return iter([(uri, list(diags)) for uri, diags in self._entries.items()])

    def __len__(self) -> int:
        return len(self._entries)
