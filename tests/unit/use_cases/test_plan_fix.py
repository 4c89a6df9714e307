"""Unit tests for PlanFixUseCase."""

import dataclasses
from unittest.mock import Mock

import pytest

from flutter_a11y_linter.domain.entities import SourceSpan, TextDocument
from flutter_a11y_linter.domain.exceptions import InvalidSelectionError, StaleFixError
from flutter_a11y_linter.use_cases.analyze_document import AnalyzeDocumentUseCase
from flutter_a11y_linter.use_cases.plan_fix import PlanFixUseCase

TEXT = "Column(children: [\n  Image.asset('a.png'),\n  Switch(value: v),\n])"


@pytest.fixture
def document() -> TextDocument:
    return TextDocument(uri="/lib/main.dart", text=TEXT)


@pytest.fixture
def plan_fix() -> PlanFixUseCase:
    return PlanFixUseCase(analyzer=AnalyzeDocumentUseCase())


class TestActionsFor:
    def test_all_diagnostics_when_no_range(self, plan_fix, document) -> None:
        diagnostics = plan_fix.analyzer.execute(document)
        actions = plan_fix.actions_for(document, diagnostics)
        assert [a.title for a in actions] == [
            "Wrap in Semantics",
            "Add semanticLabel to Image",
            "Wrap in Semantics",
            "Add semanticLabel to Image",
            "Wrap in Semantics",
        ]

    def test_foreign_diagnostics_are_ignored(self, plan_fix, document) -> None:
        diagnostics = [
            dataclasses.replace(v, source="dart-analyzer")
            for v in plan_fix.analyzer.execute(document)
        ]
        assert plan_fix.actions_for(document, diagnostics) == []

    def test_requested_range_filters(self, plan_fix, document) -> None:
        diagnostics = plan_fix.analyzer.execute(document)
        caret = TEXT.index("Switch") + 2
        actions = plan_fix.actions_for(document, diagnostics, SourceSpan(caret, caret))
        assert [(a.title, a.violation.construct) for a in actions] == [
            ("Wrap in Semantics", "Switch")
        ]

    def test_stale_diagnostics_contribute_nothing(self, plan_fix, document) -> None:
        diagnostics = plan_fix.analyzer.execute(document)
        edited = TextDocument(uri=document.uri, text="// moved\n" + TEXT)
        assert plan_fix.actions_for(edited, diagnostics) == []


class TestTouches:
    def test_caret_at_either_edge(self, plan_fix, document) -> None:
        violation = plan_fix.analyzer.execute(document)[-1]
        start, end = violation.span.start, violation.span.end
        assert PlanFixUseCase.touches(violation, SourceSpan(start, start))
        assert PlanFixUseCase.touches(violation, SourceSpan(end, end))
        assert not PlanFixUseCase.touches(violation, SourceSpan(end + 1, end + 1))

    def test_overlapping_range(self, plan_fix, document) -> None:
        violation = plan_fix.analyzer.execute(document)[-1]
        assert PlanFixUseCase.touches(violation, SourceSpan(0, violation.span.start + 1))
        assert not PlanFixUseCase.touches(violation, SourceSpan(0, violation.span.start))


class TestListAndSelect:
    def test_list_fixes_pairs_actions_with_violations(self, plan_fix, document) -> None:
        violations, actions = plan_fix.list_fixes(document)
        assert len(violations) == len(actions) == 3
        assert [len(group) for group in actions] == [2, 2, 1]

    def test_select_returns_numbered_action(self, plan_fix, document) -> None:
        action = plan_fix.select(document, 1, 2)
        assert action.title == "Add semanticLabel to Image"
        assert action.edit.is_insertion

    @pytest.mark.parametrize("number,choice", [(0, 1), (4, 1), (3, 2), (1, 0)])
    def test_select_out_of_range(self, plan_fix, document, number: int, choice: int) -> None:
        with pytest.raises(InvalidSelectionError):
            plan_fix.select(document, number, choice)

    def test_select_without_actions_is_stale(self, document) -> None:
        synthesizer = Mock()
        synthesizer.synthesize.return_value = []
        plan_fix = PlanFixUseCase(analyzer=AnalyzeDocumentUseCase(), synthesizer=synthesizer)
        with pytest.raises(StaleFixError):
            plan_fix.select(document, 1, 1)
