#!/usr/bin/env python3
"""
Secure Code Assistant - Command Line Host

Runs the same pipeline an editor would: saving a file triggers a scan,
diagnostics are collected per document, and hardcoded-secret findings
get a quick fix.

Usage:
    python -m secure_code_assistant.main scan app.py
    python -m secure_code_assistant.main fix settings.py --apply
    echo "Write a login view" | python -m secure_code_assistant.main enrich-prompt
"""

import argparse
import asyncio
import difflib
import json
import logging
import sys
from pathlib import Path
from typing import Dict, List

from .config import AssistantConfig
from .extension import SecureCodeAssistant, ENRICH_PROMPT_COMMAND
from .models import Diagnostic, Range, TextDocument, apply_text_edits
from .utils import setup_logging, get_logger


async def scan_files(assistant: SecureCodeAssistant, paths: List[str]) -> Dict[str, List[Diagnostic]]:
    """
    Treat each file as saved and wait for all scans.

    Returns:
        Diagnostics per file path, for target-language files only
    """
    assistant.activate()
    documents = [TextDocument.from_path(p) for p in paths]

    for document in documents:
        if assistant.on_did_save(document) is None:
            get_logger().info(f"Skipping {document.path} (language: {document.language_id})")

    await assistant.trigger.wait_idle()

    return {
        document.path: assistant.diagnostics.get(document.uri)
        for document in documents
        if assistant.trigger.accepts(document)
    }


def format_diagnostic(path: str, diagnostic: Diagnostic) -> str:
    """Format as path:line:col: severity: message [code] with 1-based positions."""
    data = diagnostic.to_dict()
    return f"{path}:{data['line']}:{data['column']}: {data['severity']}: {data['message']} [{data['code']}]"


def fix_document(assistant: SecureCodeAssistant, document: TextDocument) -> str:
    """
    Apply every available quick fix to a document, one at a time.

    Each fix is computed against the text left by the previous one, as
    when a user accepts fixes in turn.
    """
    text = document.text
    for diagnostic in assistant.diagnostics.get(document.uri):
        current = TextDocument(document.uri, document.path, document.language_id, text)
        # An inserted import shifts later lines down by one
        shift = current.line_count - document.line_count
        moved = Diagnostic(
            range=Range.of(
                diagnostic.range.start.line + shift,
                diagnostic.range.start.character,
                diagnostic.range.end.line + shift,
                diagnostic.range.end.character,
            ),
            message=diagnostic.message,
            severity=diagnostic.severity,
            code=diagnostic.code,
            source=diagnostic.source,
        )
        for action in assistant.provide_code_actions(current, moved.range, [moved]):
            text = apply_text_edits(text, action.edit.edits_for(document.uri))
    return text


def cmd_scan(args):
    """Handle 'scan' subcommand."""
    setup_logging(level=logging.DEBUG if args.debug else None)
    assistant = SecureCodeAssistant(AssistantConfig.from_env())

    results = asyncio.run(scan_files(assistant, args.files))

    if args.json:
        print(json.dumps(
            {path: [d.to_dict() for d in diags] for path, diags in results.items()},
            indent=2,
        ))
    else:
        for path, diags in results.items():
            for diagnostic in diags:
                print(format_diagnostic(path, diagnostic))

    found = sum(len(diags) for diags in results.values())
    sys.exit(1 if found else 0)


def cmd_fix(args):
    """Handle 'fix' subcommand."""
    setup_logging(level=logging.DEBUG if args.debug else None)
    assistant = SecureCodeAssistant(AssistantConfig.from_env())

    asyncio.run(scan_files(assistant, [args.file]))
    document = TextDocument.from_path(args.file)
    fixed = fix_document(assistant, document)

    if fixed == document.text:
        print("No fixes available.")
        sys.exit(0)

    if args.apply:
        Path(document.path).write_text(fixed, encoding="utf-8")
        print(f"Fixed {document.path}")
    else:
        diff = difflib.unified_diff(
            document.text.splitlines(keepends=True),
            fixed.splitlines(keepends=True),
            fromfile=f"a/{args.file}",
            tofile=f"b/{args.file}",
        )
        sys.stdout.writelines(diff)
    sys.exit(0)


def cmd_enrich_prompt(args):
    """Handle 'enrich-prompt' subcommand."""
    assistant = SecureCodeAssistant()
    assistant.activate()
    prompt = args.text if args.text is not None else sys.stdin.read()
    print(assistant.execute_command(ENRICH_PROMPT_COMMAND, prompt))


def main():
    """Main entry point with subcommands."""
    parser = argparse.ArgumentParser(
        description="Security diagnostics and quick fixes backed by semgrep",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  scan            Scan files and print diagnostics
  fix             Replace hardcoded secrets with environment lookups
  enrich-prompt   Append security guidelines to a prompt

Examples:
  %(prog)s scan app.py settings.py
  %(prog)s scan app.py --json
  %(prog)s fix settings.py --apply
  %(prog)s enrich-prompt "Write a Flask login view"

Environment:
  SCA_ANALYZER, SCA_RULES_PATH, SCA_LANGUAGE_ID, SCA_DISCARD_STALE_RESULTS
        """
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # scan subcommand
    scan_parser = subparsers.add_parser("scan", help="Scan files and print diagnostics")
    scan_parser.add_argument("files", nargs="+", help="Files to scan")
    scan_parser.add_argument("--json", action="store_true", help="Print diagnostics as JSON")
    scan_parser.set_defaults(func=cmd_scan)

    # fix subcommand
    fix_parser = subparsers.add_parser("fix", help="Apply hardcoded-secret quick fixes")
    fix_parser.add_argument("file", help="File to fix")
    fix_parser.add_argument("--apply", action="store_true", help="Write changes instead of printing a diff")
    fix_parser.set_defaults(func=cmd_fix)

    # enrich-prompt subcommand
    enrich_parser = subparsers.add_parser("enrich-prompt", help="Append security guidelines to a prompt")
    enrich_parser.add_argument("text", nargs="?", help="Prompt text (default: read stdin)")
    enrich_parser.set_defaults(func=cmd_enrich_prompt)

    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    args.func(args)


if __name__ == "__main__":
    main()
