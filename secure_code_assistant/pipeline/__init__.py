"""Scan pipeline: trigger, translator and fix provider."""

from .translator import BENIGN_ERRORS, FindingTranslator, parse_findings, translate
from .scan_trigger import ScanTrigger
from .fix_provider import HardcodedSecretFixer, HARDCODED_SECRET_SUFFIX
from .enrich_prompt import SECURITY_GUIDELINES, enrich_prompt

__all__ = [
    "BENIGN_ERRORS",
    "FindingTranslator",
    "parse_findings",
    "translate",
    "ScanTrigger",
    "HardcodedSecretFixer",
    "HARDCODED_SECRET_SUFFIX",
    "SECURITY_GUIDELINES",
    "enrich_prompt",
]
