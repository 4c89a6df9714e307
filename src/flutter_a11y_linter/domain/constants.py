"""
Flutter A11y Linter: static construct registry and rule constants.
"""

# Diagnostics carrying this source belong to this tool.
SOURCE_TAG: str = "flutter-a11y"

DART_LANGUAGE_ID: str = "dart"

_CYAN: str = "\033[36m"
_RESET: str = "\033[0m"
_A11Y_ART: str = r"""
    ___   ______        __    _       __
   /   | <  <  /_  __  / /   (_)___  / /____  _____
  / /| | / // / / / / / /   / / __ \/ __/ _ \/ ___/
 / ___ |/ // / /_/ / / /___/ / / / / /_/  __/ /
/_/  |_/_//_/\__, / /_____/_/_/ /_/\__/\___/_/
            /____/          Flutter Accessibility Scan
"""
A11Y_BANNER = _CYAN + _A11Y_ART + _RESET

# Interactive or content-bearing widgets that need a Semantics wrapper.
INTERACTIVE_WIDGETS: tuple[str, ...] = (
    "GestureDetector",
    "InkWell",
    "TextButton",
    "ElevatedButton",
    "IconButton",
    "FloatingActionButton",
    "Image",
    "TextField",
    "Switch",
    "Checkbox",
    "Radio",
    "Slider",
    "ListTile",
)

BUTTON_WIDGETS: tuple[str, ...] = (
    "TextButton",
    "ElevatedButton",
    "OutlinedButton",
    "IconButton",
)

IMAGE_WIDGET: str = "Image"
SEMANTICS_WIDGET: str = "Semantics"

SEMANTICS_TOKEN: str = "Semantics"
SEMANTIC_LABEL_TOKEN: str = "semanticLabel"
ON_PRESSED_TOKEN: str = "onPressed"

PLACEHOLDER_LABEL: str = "TODO: Add descriptive label"

WRAP_IN_SEMANTICS_TITLE: str = "Wrap in Semantics"
ADD_SEMANTIC_LABEL_TITLE: str = "Add semanticLabel to Image"

# Discovery defaults ([tool.flutter-a11y] in pyproject.toml overrides them)
DEFAULT_INCLUDE_GLOB: str = "**/*.dart"
DEFAULT_EXCLUDE_GLOBS: tuple[str, ...] = ("**/build/**",)
DEFAULT_MAX_FILES: int = 1000

CONFIG_TABLE: str = "flutter-a11y"
