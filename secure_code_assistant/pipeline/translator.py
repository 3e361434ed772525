"""Finding Translator - Run the analyzer and turn its findings into diagnostics."""

import json
from typing import Dict, List, Optional

from ..config import AssistantConfig
from ..models import Diagnostic, Finding, TextDocument
from ..tools import AnalyzerError, AnalyzerResult, AnalyzerRunner, DiagnosticCollection
from ..utils import get_logger


# stderr fragments that mean "nothing to analyze", not a tool failure
BENIGN_ERRORS = ("no rules found", "no files matched")


def parse_findings(stdout: str) -> List[Finding]:
    """
    Parse the analyzer's JSON output.

    A missing ``results`` list counts as empty. A single malformed result
    fails the whole parse.

    Raises:
        ValueError: stdout is not valid JSON
        AttributeError: the JSON document is not an object
        KeyError, TypeError: a result is missing fields or has bad types
    """
    output = json.loads(stdout)
    results = output.get("results") or []
    return [Finding.from_result(result) for result in results]


def translate(stdout: str, source: Optional[str] = None) -> List[Diagnostic]:
    """Map raw analyzer output straight to diagnostics."""
    return [finding.to_diagnostic(source=source) for finding in parse_findings(stdout)]


class FindingTranslator:
    """
    Scans documents and publishes diagnostics.

    Responsibilities:
    1. Run the analyzer with the bundled rules
    2. Classify tool failures (benign or not)
    3. Map findings to diagnostics and replace the document's entry
    4. Reset every document on malformed output
    """

    def __init__(
        self,
        diagnostics: DiagnosticCollection,
        config: Optional[AssistantConfig] = None,
        runner: Optional[AnalyzerRunner] = None,
    ):
        self.diagnostics = diagnostics
        self.config = config or AssistantConfig()
        self.runner = runner or AnalyzerRunner(self.config.analyzer)
        self._sequence: Dict[str, int] = {}

    async def scan(self, document: TextDocument):
        """Scan one document and update its diagnostics."""
        logger = get_logger()

        sequence = self._sequence.get(document.uri, 0) + 1
        self._sequence[document.uri] = sequence

        logger.info(f"Scanning {document.path}")

        try:
            result = await self.runner.run(self.config.rules_path, document.path)
        except AnalyzerError as e:
            logger.error(f"Analyzer error: {e}")
            return

        if self._is_stale(document.uri, sequence):
            logger.debug(f"Discarding superseded scan #{sequence} of {document.path}")
            return

        if result.failed and not result.has_output:
            self._handle_tool_error(document, result)
            return

        try:
            diagnostics = translate(result.stdout, source=self.config.analyzer)
        except Exception:
            logger.exception("Failed to parse analyzer JSON output.")
            self.diagnostics.clear()
            return

        self.diagnostics.set(document.uri, diagnostics)
        logger.info(f"Stored {len(diagnostics)} diagnostics for {document.path}")

    def reset(self):
        """Forget scan sequence numbers, e.g. after all scans were cancelled."""
        self._sequence.clear()

    def _handle_tool_error(self, document: TextDocument, result: AnalyzerResult):
        if any(marker in result.stderr for marker in BENIGN_ERRORS):
            self.diagnostics.set(document.uri, [])
            return
        # Previous diagnostics for the document are kept
        get_logger().error(f"Analyzer error: {result.stderr.strip()}")

    def _is_stale(self, uri: str, sequence: int) -> bool:
        if not self.config.discard_stale_results:
            return False
        return self._sequence.get(uri) != sequence
