"""Use Case: Analyze Document - run the rule engine over one host document."""

from typing import Optional

from flutter_a11y_linter.domain.engine import RuleEngine
from flutter_a11y_linter.domain.entities import FileReport, TextDocument, Violation


class AnalyzeDocumentUseCase:
    """Detect violations in a document; documents in other languages are ignored."""

    def __init__(self, engine: Optional[RuleEngine] = None) -> None:
        self.engine = engine or RuleEngine()

    def execute(self, document: TextDocument) -> list[Violation]:
        if not document.is_dart:
            return []
        return self.engine.detect(document.text)

    def report(self, document: TextDocument, label: str) -> FileReport:
        """Violations of document bundled with the snapshot they were computed on."""
        return FileReport(
            label=label,
            uri=document.uri,
            text=document.text,
            violations=self.execute(document),
        )
