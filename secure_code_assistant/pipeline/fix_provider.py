"""Fix Provider - Quick fixes for hardcoded secrets."""

import re
from typing import List, Optional

from ..models import (
    CodeAction,
    CodeActionKind,
    Diagnostic,
    Position,
    Range,
    TextDocument,
    WorkspaceEdit,
)


HARDCODED_SECRET_SUFFIX = "hardcoded-secret"

# A simple `name = ...` assignment at the start of a line
ASSIGNMENT_PATTERN = re.compile(r'^\s*([a-zA-Z_]+)\s*=')

FIX_TITLE = "Replace with os.environ.get()"
IMPORT_LINE = "import os\n"


class HardcodedSecretFixer:
    """
    Offers to move a hardcoded secret into an environment variable.

    Only the line the diagnostic starts on is rewritten. Everything after
    the first `=` is replaced, comments included.
    """

    provided_code_action_kinds = [CodeActionKind.QUICK_FIX]

    def provide_fixes(
        self,
        document: TextDocument,
        range: Range,
        diagnostics: List[Diagnostic],
    ) -> List[CodeAction]:
        """
        Build one fix per hardcoded-secret diagnostic whose line is an assignment.

        Args:
            document: Document the diagnostics belong to
            range: Range the host asked about (unused; the diagnostics decide)
            diagnostics: Diagnostics in the host's request context

        Returns:
            Fixes that could be built, in diagnostic order
        """
        actions = []

        for diagnostic in diagnostics:
            # Codes are namespaced by the analyzer, e.g. "rules.python.hardcoded-secret"
            if isinstance(diagnostic.code, str) and diagnostic.code.endswith(HARDCODED_SECRET_SUFFIX):
                fix = self.create_hardcoded_secret_fix(document, diagnostic)
                if fix:
                    fix.diagnostics = [diagnostic]
                    fix.is_preferred = True
                    actions.append(fix)

        return actions

    def create_hardcoded_secret_fix(
        self,
        document: TextDocument,
        diagnostic: Diagnostic,
    ) -> Optional[CodeAction]:
        """Build the edit for one diagnostic, or None if its line does not fit."""
        line = diagnostic.range.start.line
        if line < 0 or line >= document.line_count:
            return None

        line_text = document.line_at(line)
        match = ASSIGNMENT_PATTERN.match(line_text)
        if not match:
            return None

        variable_name = match.group(1)
        replacement_text = f'os.environ.get("{variable_name.upper()}")'
        equal_sign_index = line_text.index("=")

        edit = WorkspaceEdit()
        edit.replace(
            document.uri,
            Range.of(line, equal_sign_index + 1, line, len(line_text)),
            f" {replacement_text}",
        )

        if "import os" not in document.get_text():
            edit.insert(document.uri, Position(0, 0), IMPORT_LINE)

        return CodeAction(title=FIX_TITLE, kind=CodeActionKind.QUICK_FIX, edit=edit)
