"""Domain models for rules."""

__all__ = [
    "Checkable",
    "RULE_DEFINITIONS",
]

from typing import TYPE_CHECKING, Protocol

from flutter_a11y_linter.domain.constants import (
    BUTTON_WIDGETS,
    IMAGE_WIDGET,
    INTERACTIVE_WIDGETS,
    ON_PRESSED_TOKEN,
    SEMANTIC_LABEL_TOKEN,
    SEMANTICS_TOKEN,
)
from flutter_a11y_linter.domain.entities import RuleDefinition, RuleId, Severity

if TYPE_CHECKING:
    from flutter_a11y_linter.domain.entities import Violation
    from flutter_a11y_linter.domain.scanner import ScannedText


class Checkable(Protocol):
    """One independent scan over a prepared text snapshot."""

    definition: RuleDefinition

    def check(self, source: "ScannedText") -> list["Violation"]:
        """Return every violation of this rule in source."""
        ...


# Versioned with the package; not user-editable.
RULE_DEFINITIONS: dict[RuleId, RuleDefinition] = {
    RuleId.MISSING_SEMANTICS: RuleDefinition(
        rule_id=RuleId.MISSING_SEMANTICS,
        message_template="{construct} should be wrapped in Semantics for accessibility",
        severity=Severity.WARNING,
        construct_names=INTERACTIVE_WIDGETS,
        required_token=SEMANTICS_TOKEN,
    ),
    RuleId.MISSING_SEMANTIC_LABEL: RuleDefinition(
        rule_id=RuleId.MISSING_SEMANTIC_LABEL,
        message_template="Image should have a semanticLabel for screen readers",
        severity=Severity.WARNING,
        construct_names=(IMAGE_WIDGET,),
        required_token=SEMANTIC_LABEL_TOKEN,
    ),
    RuleId.MISSING_ONPRESSED: RuleDefinition(
        rule_id=RuleId.MISSING_ONPRESSED,
        message_template="Button missing onPressed callback - inaccessible to screen readers",
        severity=Severity.ERROR,
        construct_names=BUTTON_WIDGETS,
        required_token=ON_PRESSED_TOKEN,
    ),
}
