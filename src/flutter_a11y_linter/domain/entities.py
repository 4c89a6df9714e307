from bisect import bisect_right
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from flutter_a11y_linter.domain.constants import DART_LANGUAGE_ID, SOURCE_TAG


class RuleId(Enum):
    """Accessibility rules the engine knows about."""
    MISSING_SEMANTICS = "missing-semantics"
    MISSING_SEMANTIC_LABEL = "missing-semantic-label"
    MISSING_ONPRESSED = "missing-onpressed"


class Severity(Enum):
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True, order=True)
class SourceSpan:
    """Half-open character range [start, end) into one snapshot of a document."""
    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid span [{self.start}, {self.end})")

    @property
    def length(self) -> int:
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    def fits(self, text: str) -> bool:
        """True if the span still addresses characters of text."""
        return self.end <= len(text)

    def slice(self, text: str) -> str:
        return text[self.start:self.end]


@dataclass(frozen=True)
class Violation:
    """One detected accessibility issue, valid only for the text it was computed on."""

    rule_id: RuleId
    message: str
    severity: Severity
    span: SourceSpan
    construct: str
    source: str = SOURCE_TAG

    def sort_key(self) -> tuple[int, int, str]:
        return (self.span.start, self.span.end, self.rule_id.value)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "rule_id": self.rule_id.value,
            "message": self.message,
            "severity": self.severity.value,
            "start": self.span.start,
            "end": self.span.end,
            "construct": self.construct,
            "source": self.source,
        }


@dataclass(frozen=True)
class Edit:
    """
    A proposed, unapplied text substitution.

    An insertion is an edit with a zero-length span. Edits are computed
    against one text snapshot and must be applied to that same snapshot.
    """

    span: SourceSpan
    replacement: str
    title: str = ""

    @classmethod
    def replace(cls, span: SourceSpan, replacement: str, title: str = "") -> "Edit":
        """Create an edit replacing the text at span."""
        return cls(span=span, replacement=replacement, title=title)

    @classmethod
    def insert(cls, position: int, text: str, title: str = "") -> "Edit":
        """Create a pure insertion at position."""
        return cls(span=SourceSpan(position, position), replacement=text, title=title)

    @property
    def is_insertion(self) -> bool:
        return self.span.is_empty

    def apply(self, text: str) -> str:
        """Return text with this single edit applied."""
        if not self.span.fits(text):
            raise ValueError("Edit span lies outside the text")
        return text[:self.span.start] + self.replacement + text[self.span.end:]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "title": self.title,
            "start": self.span.start,
            "end": self.span.end,
            "replacement": self.replacement,
        }


@dataclass(frozen=True)
class RuleDefinition:
    """Static description of one rule: what it reports and where it looks."""

    rule_id: RuleId
    message_template: str
    severity: Severity
    construct_names: tuple[str, ...]
    required_token: str

    def message_for(self, construct: str) -> str:
        return self.message_template.format(construct=construct)


@dataclass(frozen=True)
class TextDocument:
    """A document handed over by the host: identifier, full text and language tag."""

    uri: str
    text: str
    language_id: str = DART_LANGUAGE_ID

    @property
    def is_dart(self) -> bool:
        return self.language_id == DART_LANGUAGE_ID


@dataclass(frozen=True)
class Position:
    """1-based line, 0-based column."""
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


class LineIndex:
    """Maps character offsets of one text snapshot to line/column positions."""

    def __init__(self, text: str) -> None:
        self._length = len(text)
        self._line_starts = [0]
        for offset, char in enumerate(text):
            if char == "\n":
                self._line_starts.append(offset + 1)

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def position_at(self, offset: int) -> Position:
        offset = max(0, min(offset, self._length))
        line = bisect_right(self._line_starts, offset) - 1
        return Position(line=line + 1, column=offset - self._line_starts[line])

    def offset_at(self, position: Position) -> int:
        line = max(1, min(position.line, len(self._line_starts)))
        return min(self._line_starts[line - 1] + max(0, position.column), self._length)


@dataclass(frozen=True)
class CodeAction:
    """One selectable quick-fix: a titled edit resolving a single violation."""

    title: str
    edit: Edit
    violation: Violation


@dataclass(frozen=True)
class FileFailure:
    label: str
    error: str


@dataclass(frozen=True)
class FileReport:
    """Violations of one scanned file, with the snapshot used to compute them."""

    label: str
    uri: str
    text: str
    violations: list[Violation] = field(default_factory=list)

    def positioned(self) -> list[tuple[Violation, Position, Position]]:
        """Pair each violation with start/end positions in this snapshot."""
        index = LineIndex(self.text)
        return [
            (v, index.position_at(v.span.start), index.position_at(v.span.end))
            for v in self.violations
        ]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "label": self.label,
            "uri": self.uri,
            "violations": [
                {**v.to_dict(), "line": s.line, "column": s.column,
                 "end_line": e.line, "end_column": e.column}
                for v, s, e in self.positioned()
            ],
        }


@dataclass(frozen=True)
class ScanSummary:
    """Aggregate result of a batch scan."""

    total_files: int = 0
    processed_files: int = 0
    violation_count: int = 0
    files_with_issues: list[str] = field(default_factory=list)
    failures: list[FileFailure] = field(default_factory=list)
    reports: list[FileReport] = field(default_factory=list)
    cancelled: bool = False

    def has_violations(self) -> bool:
        return self.violation_count > 0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "total_files": self.total_files,
            "processed_files": self.processed_files,
            "violation_count": self.violation_count,
            "files_with_issues": list(self.files_with_issues),
            "failures": [{"label": f.label, "error": f.error} for f in self.failures],
            "cancelled": self.cancelled,
            "files": [r.to_dict() for r in self.reports if r.violations],
        }

