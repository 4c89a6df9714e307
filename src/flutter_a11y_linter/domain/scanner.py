"""Text scanning for widget-tree source: literal masking, construct spans, token lookup.

The scanner never parses Dart. It blanks out comments and string literal
contents (keeping offsets stable), then finds constructs by name and walks
their argument lists with a depth counter over ``(`` and ``)``.
"""

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterator, Optional

from flutter_a11y_linter.domain.entities import SourceSpan

_IDENT_CHARS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_$")
_QUOTES = "'\""

# Type arguments with one level of nesting, e.g. <int> or <Map<String, int>>
_TYPE_ARGS = r"(?:\s*<[^<>()]*(?:<[^<>()]*>[^<>()]*)*>)?"
_VARIANT = r"(?:\s*\.\s*(?P<variant>[A-Za-z_$][A-Za-z0-9_$]*))"


@dataclass(frozen=True)
class ConstructMatch:
    """A construct invocation found in source text."""

    name: str
    variant: Optional[str]
    span: SourceSpan
    open_paren: int


class DartMasker:
    """Blanks comments and string literal contents so that offsets stay aligned."""

    @staticmethod
    def mask(text: str) -> str:
        """
        Return text with comment characters and string contents replaced by spaces.

        Quote delimiters and newlines survive, so the result has the same
        length and line structure as the input.
        """
        out = list(text)
        n = len(text)
        i = 0
        while i < n:
            if text.startswith("//", i):
                end = text.find("\n", i)
                end = n if end == -1 else end
                DartMasker._blank(out, i, end)
                i = end
            elif text.startswith("/*", i):
                end = DartMasker._block_comment_end(text, i)
                DartMasker._blank(out, i, end)
                i = end
            elif text[i] in _QUOTES:
                content_start, content_end, end = DartMasker._string_bounds(text, i)
                DartMasker._blank(out, content_start, content_end)
                i = end
            else:
                i += 1
        return "".join(out)

    @staticmethod
    def _blank(out: list[str], start: int, end: int) -> None:
        for k in range(start, end):
            if out[k] != "\n":
                out[k] = " "

    @staticmethod
    def _block_comment_end(text: str, i: int) -> int:
        """Index just past the block comment opening at i. Block comments nest."""
        depth = 0
        n = len(text)
        while i < n:
            if text.startswith("/*", i):
                depth += 1
                i += 2
            elif text.startswith("*/", i):
                depth -= 1
                i += 2
                if depth == 0:
                    return i
            else:
                i += 1
        return n

    @staticmethod
    def _is_raw(text: str, i: int) -> bool:
        if i == 0 or text[i - 1] not in "rR":
            return False
        return i < 2 or text[i - 2] not in _IDENT_CHARS

    @staticmethod
    def _string_bounds(text: str, i: int) -> tuple[int, int, int]:
        """Return (content_start, content_end, end) of the string literal opening at i."""
        n = len(text)
        quote = text[i]
        raw = DartMasker._is_raw(text, i)
        delimiter = quote * 3 if text.startswith(quote * 3, i) else quote
        triple = len(delimiter) == 3
        content_start = i + len(delimiter)
        j = content_start
        while j < n:
            if not raw and text[j] == "\\":
                j += 2
                continue
            if text.startswith(delimiter, j):
                return content_start, j, j + len(delimiter)
            if not triple and text[j] == "\n":
                # Unterminated single-line literal stops at end of line
                return content_start, j, j
            if not raw and text.startswith("${", j):
                j = DartMasker._interpolation_end(text, j + 2)
                continue
            j += 1
        return content_start, n, n

    @staticmethod
    def _interpolation_end(text: str, i: int) -> int:
        """Index just past the closing brace of a ${...} interpolation whose body starts at i."""
        n = len(text)
        depth = 1
        while i < n:
            if text.startswith("//", i):
                end = text.find("\n", i)
                i = n if end == -1 else end
            elif text.startswith("/*", i):
                i = DartMasker._block_comment_end(text, i)
            elif text[i] in _QUOTES:
                i = DartMasker._string_bounds(text, i)[2]
            elif text[i] == "{":
                depth += 1
                i += 1
            elif text[i] == "}":
                depth -= 1
                i += 1
                if depth == 0:
                    return i
            else:
                i += 1
        return n


class ScannedText:
    """
    One text snapshot prepared for rule matching.

    ``text`` is the original source; ``masked`` is the same text with comments
    and literal contents blanked. All searches run on ``masked``; all spans
    address both.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.masked = DartMasker.mask(text)

    def find_matching_paren(self, open_index: int) -> Optional[int]:
        """Index of the ``)`` balancing the ``(`` at open_index, or None if unbalanced."""
        depth = 0
        masked = self.masked
        for j in range(open_index, len(masked)):
            char = masked[j]
            if char == "(":
                depth += 1
            elif char == ")":
                depth -= 1
                if depth == 0:
                    return j
        return None

    def constructs(
        self, names: tuple[str, ...], require_variant: bool = False
    ) -> Iterator[ConstructMatch]:
        """
        Yield every balanced invocation of one of names.

        Named constructors (``Image.asset(``) and type arguments
        (``Radio<int>(``) belong to their construct. Unterminated
        invocations are skipped.
        """
        pattern = ConstructPatterns.for_names(names, require_variant)
        for match in pattern.finditer(self.masked):
            construct = self._to_construct(match)
            if construct is not None:
                yield construct

    def construct_at(self, offset: int, names: tuple[str, ...]) -> Optional[ConstructMatch]:
        """The construct invocation starting exactly at offset, if any."""
        pattern = ConstructPatterns.for_names(names, False)
        match = pattern.match(self.masked, offset)
        if match is None:
            return None
        return self._to_construct(match)

    def _to_construct(self, match: "re.Match[str]") -> Optional[ConstructMatch]:
        open_paren = match.end() - 1
        close = self.find_matching_paren(open_paren)
        if close is None:
            return None
        return ConstructMatch(
            name=match.group("name"),
            variant=match.group("variant"),
            span=SourceSpan(match.start(), close + 1),
            open_paren=open_paren,
        )

    def has_token(self, span: SourceSpan, token: str) -> bool:
        """True if token appears as a whole identifier in code within span."""
        return ConstructPatterns.for_token(token).search(self.masked, span.start, span.end) is not None

    def last_significant_char(self, before: int) -> str:
        """The last non-whitespace masked character before offset, or ''."""
        j = before - 1
        while j >= 0 and self.masked[j].isspace():
            j -= 1
        return self.masked[j] if j >= 0 else ""


class ConstructPatterns:
    """Compiled regexes for construct heads and identifier tokens."""

    @staticmethod
    @lru_cache(maxsize=None)
    def for_names(names: tuple[str, ...], require_variant: bool) -> "re.Pattern[str]":
        alternatives = "|".join(re.escape(name) for name in names)
        variant = _VARIANT if require_variant else _VARIANT + "?"
        return re.compile(
            rf"(?<![A-Za-z0-9_$])(?P<name>{alternatives})(?![A-Za-z0-9_$])"
            rf"{_TYPE_ARGS}{variant}\s*\("
        )

    @staticmethod
    @lru_cache(maxsize=None)
    def for_token(token: str) -> "re.Pattern[str]":
        return re.compile(rf"(?<![A-Za-z0-9_$]){re.escape(token)}(?![A-Za-z0-9_$])")
