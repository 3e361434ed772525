"""Scan Trigger - Decide when and for which documents to scan."""

import asyncio
from typing import Optional, Set

from ..models import TextDocument
from ..utils import get_logger
from .translator import FindingTranslator


class ScanTrigger:
    """
    Starts a scan for every qualifying lifecycle event.

    There is no debouncing: each save of a target-language document starts
    its own analyzer run.
    """

    def __init__(self, translator: FindingTranslator, language_id: str = "python"):
        self.translator = translator
        self.language_id = language_id
        self._pending: Set[asyncio.Task] = set()

    def on_document_saved(self, document: TextDocument) -> Optional[asyncio.Task]:
        """Handle a document save. Returns the scan task, or None if ignored."""
        return self._schedule(document)

    def on_activation(self, document: TextDocument) -> Optional[asyncio.Task]:
        """Handle activation while an editor is open on a document."""
        return self._schedule(document)

    def accepts(self, document: TextDocument) -> bool:
        return document.language_id == self.language_id

    @property
    def pending(self) -> Set[asyncio.Task]:
        return set(self._pending)

    async def wait_idle(self):
        """Wait until every scan started so far has finished."""
        while self._pending:
            await asyncio.gather(*self._pending)

    def cancel_all(self):
        for task in self._pending:
            task.cancel()
        self._pending.clear()

    def _schedule(self, document: TextDocument) -> Optional[asyncio.Task]:
        if not self.accepts(document):
            return None

        loop = asyncio.get_running_loop()
        task = loop.create_task(self.translator.scan(document))
        # The loop only keeps weak references to tasks
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        get_logger().debug(f"Scheduled scan of {document.path}")
        return task
