"""Editor-facing entry points: activation, lifecycle events and commands."""

import asyncio
from typing import Any, Callable, Dict, List, Optional

from .config import AssistantConfig
from .models import CodeAction, Diagnostic, Range, TextDocument
from .pipeline import FindingTranslator, HardcodedSecretFixer, ScanTrigger, enrich_prompt
from .tools import AnalyzerRunner, DiagnosticCollection
from .utils import get_logger


ENRICH_PROMPT_COMMAND = "secure-code-assistant.enrichPrompt"
SCAN_DOCUMENT_COMMAND = "secure-code-assistant.scanDocument"


class SecureCodeAssistant:
    """
    Wires the scan pipeline to a host editor.

    Owns the diagnostics collection and hands it to the translator (writer)
    and the fix provider's callers (readers). The host forwards its events:

        assistant = SecureCodeAssistant()
        assistant.activate(active_document)
        assistant.on_did_save(document)
        assistant.provide_code_actions(document, range, diagnostics)
    """

    def __init__(
        self,
        config: Optional[AssistantConfig] = None,
        runner: Optional[AnalyzerRunner] = None,
    ):
        self.config = config or AssistantConfig()
        self.diagnostics = DiagnosticCollection(self.config.collection_name)
        self.translator = FindingTranslator(self.diagnostics, self.config, runner)
        self.trigger = ScanTrigger(self.translator, self.config.language_id)
        self.fixer = HardcodedSecretFixer()
        self._commands: Dict[str, Callable[..., Any]] = {}

    def activate(self, active_document: Optional[TextDocument] = None) -> Optional[asyncio.Task]:
        """
        Register commands and scan the active document, if any.

        Must be called from a running event loop when a document is given.
        """
        get_logger().info("Secure Code Assistant is now active")

        self.register_command(ENRICH_PROMPT_COMMAND, enrich_prompt)
        self.register_command(SCAN_DOCUMENT_COMMAND, self.trigger.on_document_saved)

        if active_document is not None:
            return self.trigger.on_activation(active_document)
        return None

    def deactivate(self):
        """Cancel in-flight scans and drop all diagnostics."""
        self.trigger.cancel_all()
        self.translator.reset()
        self.diagnostics.clear()
        self._commands.clear()

    def on_did_save(self, document: TextDocument) -> Optional[asyncio.Task]:
        return self.trigger.on_document_saved(document)

    def provide_code_actions(
        self,
        document: TextDocument,
        range: Range,
        diagnostics: Optional[List[Diagnostic]] = None,
    ) -> List[CodeAction]:
        """
        Quick fixes for a document.

        The host normally passes the diagnostics under the cursor; without
        them, every stored diagnostic for the document is considered.
        """
        if diagnostics is None:
            diagnostics = self.diagnostics.get(document.uri)
        return self.fixer.provide_fixes(document, range, diagnostics)

    def register_command(self, name: str, handler: Callable[..., Any]):
        self._commands[name] = handler

    def execute_command(self, name: str, *args: Any) -> Any:
        if name not in self._commands:
            raise KeyError(f"Unknown command: {name}")
        return self._commands[name](*args)

    @property
    def commands(self) -> List[str]:
        return sorted(self._commands)
