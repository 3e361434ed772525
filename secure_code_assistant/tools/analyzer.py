"""Subprocess wrapper for the external static analyzer."""

import asyncio
from dataclasses import dataclass
from pathlib import Path
from typing import List, Union

from ..utils import get_logger


class AnalyzerError(Exception):
    """The analyzer process could not be started."""

    def __init__(self, command: List[str], reason: str):
        self.command = command
        super().__init__(f"Failed to run {' '.join(command)}: {reason}")


@dataclass
class AnalyzerResult:
    """Raw outcome of one analyzer run."""
    returncode: int
    stdout: str
    stderr: str

    @property
    def failed(self) -> bool:
        """Nonzero exit or anything written to stderr."""
        return self.returncode != 0 or bool(self.stderr.strip())

    @property
    def has_output(self) -> bool:
        return bool(self.stdout.strip())


class AnalyzerRunner:
    """
    Runs the analyzer against a single file.

    The command line is:
        <analyzer> --config <rules> --json <file>
    """

    def __init__(self, analyzer: str = "semgrep"):
        self.analyzer = analyzer

    def build_command(self, rules_path: Union[str, Path], file_path: Union[str, Path]) -> List[str]:
        return [self.analyzer, "--config", str(rules_path), "--json", str(file_path)]

    async def run(self, rules_path: Union[str, Path], file_path: Union[str, Path]) -> AnalyzerResult:
        """
        Run the analyzer and wait for it to exit.

        Raises:
            AnalyzerError: if the process cannot be spawned
        """
        cmd = self.build_command(rules_path, file_path)
        get_logger().debug(f"Running: {' '.join(cmd)}")

        try:
            process = await asyncio.create_subprocess_exec(
                *cmd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise AnalyzerError(cmd, str(e)) from e

        try:
            stdout, stderr = await process.communicate()
        except asyncio.CancelledError:
            if process.returncode is None:
                process.kill()
            raise
        return AnalyzerResult(
            returncode=process.returncode,
            stdout=stdout.decode("utf-8", errors="replace"),
            stderr=stderr.decode("utf-8", errors="replace"),
        )
