"""Rule Engine: text in, ordered violations out."""

from typing import Optional, Sequence

from flutter_a11y_linter.domain.entities import Violation
from flutter_a11y_linter.domain.rules import Checkable
from flutter_a11y_linter.domain.rules.accessibility import (
    MissingOnPressedRule,
    MissingSemanticLabelRule,
    MissingSemanticsRule,
)
from flutter_a11y_linter.domain.scanner import ScannedText


class RuleEngine:
    """
    Runs every accessibility rule over one document text.

    detect() is a pure function of its input: it never raises for any text,
    shares no state between calls, and orders its result by span start, then
    span end, then rule id.
    """

    def __init__(self, rules: Optional[Sequence[Checkable]] = None) -> None:
        self.rules: tuple[Checkable, ...] = tuple(rules) if rules is not None else (
            MissingSemanticsRule(),
            MissingSemanticLabelRule(),
            MissingOnPressedRule(),
        )

    def detect(self, text: str) -> list[Violation]:
        if not text:
            return []
        source = ScannedText(text)
        violations: list[Violation] = []
        for rule in self.rules:
            violations.extend(rule.check(source))
        return sorted(violations, key=Violation.sort_key)
