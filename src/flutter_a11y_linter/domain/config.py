"""Configuration loader for scan settings. Immutable value object created by Infrastructure."""

import logging

from flutter_a11y_linter.domain.constants import (
    DEFAULT_EXCLUDE_GLOBS,
    DEFAULT_INCLUDE_GLOB,
    DEFAULT_MAX_FILES,
)

logger = logging.getLogger("flutter_a11y_linter")


class ConfigurationLoader:
    """
    Discovery settings from [tool.flutter-a11y].

    Created by Infrastructure from the parsed table; the domain never reads
    the filesystem. Only file discovery is configurable: the construct
    registry and rule severities are fixed.
    """

    def __init__(self, config_dict: dict[str, object]) -> None:
        self._config = dict(config_dict)
        self.validate_config(self._config)

    def validate_config(self, config: dict[str, object]) -> None:
        """Warn about values that will be ignored in favour of defaults."""
        known = {"include", "exclude", "max_files"}
        for key in sorted(set(config) - known):
            logger.warning("Configuration Warning: unknown key '%s' in [tool.flutter-a11y].", key)
        if "include" in config and not isinstance(config["include"], str):
            logger.warning("Configuration Warning: 'include' must be a glob string; using default.")
        exclude = config.get("exclude")
        if exclude is not None and not isinstance(exclude, list):
            logger.warning("Configuration Warning: 'exclude' must be a list of globs; using default.")
        max_files = config.get("max_files")
        if max_files is not None and (
            isinstance(max_files, bool) or not isinstance(max_files, int) or max_files < 0
        ):
            logger.warning(
                "Configuration Warning: 'max_files' must be a non-negative integer; using default.")

    @property
    def config(self) -> dict[str, object]:
        """Return the loaded configuration."""
        return self._config

    @property
    def include(self) -> str:
        raw = self._config.get("include")
        return raw if isinstance(raw, str) and raw else DEFAULT_INCLUDE_GLOB

    @property
    def exclude(self) -> list[str]:
        raw = self._config.get("exclude")
        if isinstance(raw, list):
            return [str(x) for x in raw if isinstance(x, str)]
        return list(DEFAULT_EXCLUDE_GLOBS)

    @property
    def max_files(self) -> int:
        raw = self._config.get("max_files")
        if isinstance(raw, int) and not isinstance(raw, bool) and raw >= 0:
            return raw
        return DEFAULT_MAX_FILES
