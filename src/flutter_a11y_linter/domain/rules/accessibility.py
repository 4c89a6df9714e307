"""Accessibility rules for widget-tree source text."""

from flutter_a11y_linter.domain.constants import SEMANTICS_WIDGET
from flutter_a11y_linter.domain.entities import RuleDefinition, RuleId, SourceSpan, Violation
from flutter_a11y_linter.domain.rules import RULE_DEFINITIONS
from flutter_a11y_linter.domain.scanner import ConstructMatch, ScannedText


class MissingTokenRule:
    """
    Flags constructs whose balanced argument span lacks a required token.

    Subclasses choose the constructs (via their RuleDefinition) and may name
    wrapper spans that exempt everything they enclose.
    Rules hold no per-scan state.
    """

    require_variant: bool = False

    def __init__(self, definition: RuleDefinition) -> None:
        self.definition = definition

    def check(self, source: ScannedText) -> list[Violation]:
        wrappers = self.wrappers(source)
        violations: list[Violation] = []
        for construct in source.constructs(self.definition.construct_names, self.require_variant):
            if source.has_token(construct.span, self.definition.required_token):
                continue
            if any(MissingTokenRule._encloses(w, construct.span) for w in wrappers):
                continue
            violations.append(self._violation(construct))
        return violations

    def wrappers(self, source: ScannedText) -> list[SourceSpan]:
        return []

    @staticmethod
    def _encloses(outer: SourceSpan, inner: SourceSpan) -> bool:
        return outer.start < inner.start and inner.end <= outer.end

    def _violation(self, construct: ConstructMatch) -> Violation:
        return Violation(
            rule_id=self.definition.rule_id,
            message=self.definition.message_for(construct.name),
            severity=self.definition.severity,
            span=construct.span,
            construct=construct.name,
        )


class MissingSemanticsRule(MissingTokenRule):
    """missing-semantics: interactive or content widgets not wrapped in Semantics."""

    def __init__(self) -> None:
        super().__init__(RULE_DEFINITIONS[RuleId.MISSING_SEMANTICS])

    def wrappers(self, source: ScannedText) -> list[SourceSpan]:
        """A construct inside the argument list of a Semantics(...) is already wrapped."""
        return [wrapper.span for wrapper in source.constructs((SEMANTICS_WIDGET,))]


class MissingSemanticLabelRule(MissingTokenRule):
    """missing-semantic-label: Image.<variant>(...) without semanticLabel."""

    require_variant = True

    def __init__(self) -> None:
        super().__init__(RULE_DEFINITIONS[RuleId.MISSING_SEMANTIC_LABEL])


class MissingOnPressedRule(MissingTokenRule):
    """missing-onpressed: button-like widgets without an onPressed callback."""

    def __init__(self) -> None:
        super().__init__(RULE_DEFINITIONS[RuleId.MISSING_ONPRESSED])
