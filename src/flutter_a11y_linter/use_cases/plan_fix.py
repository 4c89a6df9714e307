"""Use Case: Plan Fix - quick-fix candidates for the diagnostics of one document."""

from typing import Optional, Sequence

from flutter_a11y_linter.domain.constants import SOURCE_TAG
from flutter_a11y_linter.domain.entities import (
    CodeAction,
    SourceSpan,
    TextDocument,
    Violation,
)
from flutter_a11y_linter.domain.exceptions import InvalidSelectionError, StaleFixError
from flutter_a11y_linter.domain.fixes import FixSynthesizer
from flutter_a11y_linter.use_cases.analyze_document import AnalyzeDocumentUseCase


class PlanFixUseCase:
    """Turns violations into selectable code actions, as an editor's quick-fix menu would."""

    def __init__(
        self,
        analyzer: AnalyzeDocumentUseCase,
        synthesizer: Optional[FixSynthesizer] = None,
    ) -> None:
        self.analyzer = analyzer
        self.synthesizer = synthesizer or FixSynthesizer()

    def actions_for(
        self,
        document: TextDocument,
        diagnostics: Sequence[Violation],
        requested: Optional[SourceSpan] = None,
    ) -> list[CodeAction]:
        """
        Code actions for the diagnostics overlapping requested (all when None).

        Diagnostics raised by other tools are ignored. A diagnostic whose span
        went stale contributes no actions.
        """
        actions: list[CodeAction] = []
        for violation in diagnostics:
            if violation.source != SOURCE_TAG:
                continue
            if requested is not None and not PlanFixUseCase.touches(violation, requested):
                continue
            actions.extend(self._actions(document, violation))
        return actions

    def _actions(self, document: TextDocument, violation: Violation) -> list[CodeAction]:
        return [
            CodeAction(title=edit.title, edit=edit, violation=violation)
            for edit in self.synthesizer.synthesize(document.text, violation)
        ]

    @staticmethod
    def touches(violation: Violation, requested: SourceSpan) -> bool:
        """True if the violation overlaps requested; an empty request is a caret position."""
        span = violation.span
        if requested.is_empty:
            return span.start <= requested.start <= span.end
        return span.start < requested.end and requested.start < span.end

    def list_fixes(self, document: TextDocument) -> tuple[list[Violation], list[list[CodeAction]]]:
        """Fresh violations of document and, per violation, its code actions."""
        violations = self.analyzer.execute(document)
        return violations, [self._actions(document, v) for v in violations]

    def select(self, document: TextDocument, violation_number: int, choice: int) -> CodeAction:
        """
        The code action numbered choice for the violation numbered violation_number.

        Both numbers are 1-based, as printed by list_fixes consumers.
        Violations are recomputed on the current text so the edit is never stale.
        """
        violations = self.analyzer.execute(document)
        if not 1 <= violation_number <= len(violations):
            raise InvalidSelectionError(
                f"Violation {violation_number} does not exist ({len(violations)} found)."
            )
        violation = violations[violation_number - 1]
        actions = self._actions(document, violation)
        if not actions:
            raise StaleFixError(f"No fix available for violation {violation_number}.")
        if not 1 <= choice <= len(actions):
            raise InvalidSelectionError(
                f"Fix {choice} does not exist ({len(actions)} available)."
            )
        return actions[choice - 1]
