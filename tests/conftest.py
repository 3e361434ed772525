"""Shared fixtures: documents and a stand-in for the analyzer process."""

import asyncio
import json
from typing import List, Tuple

import pytest

from secure_code_assistant.models import TextDocument
from secure_code_assistant.tools import AnalyzerResult


def make_document(
    name: str = "app.py",
    text: str = "",
    language_id: str = "python",
) -> TextDocument:
    return TextDocument(
        uri=f"file:///project/{name}",
        path=f"/project/{name}",
        language_id=language_id,
        text=text,
    )


def semgrep_output(*results: dict) -> AnalyzerResult:
    """A successful run printing the given results."""
    return AnalyzerResult(returncode=0, stdout=json.dumps({"results": list(results)}), stderr="")


def semgrep_result(
    line: int = 3,
    col: int = 5,
    end_line: int = 3,
    end_col: int = 20,
    message: str = "m",
    severity: str = "ERROR",
    check_id: str = "x.hardcoded-secret",
) -> dict:
    return {
        "check_id": check_id,
        "start": {"line": line, "col": col},
        "end": {"line": end_line, "col": end_col},
        "extra": {"message": message, "severity": severity},
    }


class FakeRunner:
    """Returns canned results in order; exceptions in the queue are raised."""

    def __init__(self, *results):
        self.results: List = list(results)
        self.calls: List[tuple] = []

    async def run(self, rules_path, file_path) -> AnalyzerResult:
        self.calls.append((str(rules_path), str(file_path)))
        result = self.results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


class GatedRunner:
    """Holds each run until its gate is opened, to control completion order."""

    def __init__(self):
        self.queued: List[Tuple[asyncio.Event, AnalyzerResult]] = []
        self.calls = 0

    def queue(self, result: AnalyzerResult) -> asyncio.Event:
        gate = asyncio.Event()
        self.queued.append((gate, result))
        return gate

    async def run(self, rules_path, file_path) -> AnalyzerResult:
        gate, result = self.queued[self.calls]
        self.calls += 1
        await gate.wait()
        return result


@pytest.fixture
def document() -> TextDocument:
    return make_document()
