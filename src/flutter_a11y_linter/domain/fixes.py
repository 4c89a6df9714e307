"""Fix Synthesizer: candidate source edits for one violation."""

from typing import Optional

from flutter_a11y_linter.domain.constants import (
    ADD_SEMANTIC_LABEL_TITLE,
    IMAGE_WIDGET,
    PLACEHOLDER_LABEL,
    SEMANTIC_LABEL_TOKEN,
    SEMANTICS_WIDGET,
    WRAP_IN_SEMANTICS_TITLE,
)
from flutter_a11y_linter.domain.entities import Edit, RuleId, Violation
from flutter_a11y_linter.domain.scanner import ScannedText


class FixSynthesizer:
    """
    Builds independent quick-fix alternatives for a violation.

    Each returned Edit stands alone; none assumes another was applied.
    Nothing is applied here, and a violation whose span no longer delimits
    its construct in the supplied text yields no edits.
    """

    def synthesize(self, text: str, violation: Violation) -> list[Edit]:
        span = violation.span
        if span.is_empty or not span.fits(text):
            return []
        source = ScannedText(text)
        construct = source.construct_at(span.start, (violation.construct,))
        if construct is None or construct.span != span:
            return []

        widget = span.slice(text)
        edits = [FixSynthesizer.wrap_in_semantics(violation, widget)]
        wants_label = (
            violation.rule_id is RuleId.MISSING_SEMANTIC_LABEL
            or widget.startswith(IMAGE_WIDGET)
        )
        if wants_label and not source.has_token(span, SEMANTIC_LABEL_TOKEN):
            label_edit = FixSynthesizer.add_semantic_label(source, violation, widget)
            if label_edit is not None:
                edits.append(label_edit)
        return edits

    @staticmethod
    def wrap_in_semantics(violation: Violation, widget: str) -> Edit:
        """Replace the construct with Semantics(label: ..., child: <construct verbatim>)."""
        replacement = (
            f"{SEMANTICS_WIDGET}(\n"
            f"  label: '{PLACEHOLDER_LABEL}',\n"
            f"  child: {widget}\n"
            f")"
        )
        return Edit.replace(violation.span, replacement, WRAP_IN_SEMANTICS_TITLE)

    @staticmethod
    def add_semantic_label(
        source: ScannedText, violation: Violation, widget: str
    ) -> Optional[Edit]:
        """Insert a semanticLabel argument right before the construct's outermost ``)``."""
        closing = widget.rfind(")")
        if closing <= 0:
            return None
        position = violation.span.start + closing
        argument = f"{SEMANTIC_LABEL_TOKEN}: '{PLACEHOLDER_LABEL}'"
        previous = source.last_significant_char(position)
        if previous == "(":
            inserted = argument
        elif previous == ",":
            inserted = argument if source.text[position - 1].isspace() else " " + argument
        else:
            inserted = ", " + argument
        return Edit.insert(position, inserted, ADD_SEMANTIC_LABEL_TITLE)
