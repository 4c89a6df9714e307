"""Domain errors. Raised by use cases; the interface layer turns them into exit codes."""


class A11yLinterError(Exception):
    """Base class for errors the linter reports to its user."""


class StaleFixError(A11yLinterError):
    """A fix was requested for a span that no longer matches the document text."""


class InvalidSelectionError(A11yLinterError):
    """A violation or quick-fix number is out of range."""
