"""Load [tool.flutter-a11y] from pyproject.toml. Infrastructure I/O only."""

import sys
from pathlib import Path
from typing import Optional

from flutter_a11y_linter.domain.constants import CONFIG_TABLE

if sys.version_info >= (3, 11):
    import tomllib as toml_lib
else:
    import tomli as toml_lib


class ConfigFileLoader:
    """
    Loads config from the nearest pyproject.toml. No top-level functions.
    """

    @staticmethod
    def load_config_from_fs(start: Optional[Path] = None) -> dict[str, object]:
        """Walk up from start (default: cwd) and return the [tool.flutter-a11y] table, or {}."""
        current_path = (start or Path.cwd()).resolve()
        while True:
            config_file = current_path / "pyproject.toml"
            if config_file.exists():
                try:
                    with config_file.open("rb") as f:
                        data = toml_lib.load(f)
                except (OSError, toml_lib.TOMLDecodeError):
                    return {}
                tool_section = data.get("tool", {}) or {}
                section = tool_section.get(CONFIG_TABLE, {}) or {}
                return dict(section) if isinstance(section, dict) else {}
            if current_path.parent == current_path:
                return {}
            current_path = current_path.parent
