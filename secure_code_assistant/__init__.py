"""Secure Code Assistant - analyzer diagnostics and quick fixes for Python files."""

from .config import AssistantConfig, DEFAULT_CONFIG
from .extension import SecureCodeAssistant, ENRICH_PROMPT_COMMAND, SCAN_DOCUMENT_COMMAND

__all__ = [
    "AssistantConfig",
    "DEFAULT_CONFIG",
    "SecureCodeAssistant",
    "ENRICH_PROMPT_COMMAND",
    "SCAN_DOCUMENT_COMMAND",
]
