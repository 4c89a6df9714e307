"""GuidanceService: loads the rule registry and provides manual instructions and the checklist."""

from pathlib import Path
from typing import Optional, cast

import yaml

from flutter_a11y_linter.domain.protocols import GuidanceServiceProtocol
from flutter_a11y_linter.domain.registry_types import RuleRegistryEntry

_CHECKLIST_KEY = "_checklist"


class GuidanceService(GuidanceServiceProtocol):
    """Loads rule_registry.yaml and answers rule / checklist lookups."""

    def __init__(self, registry_path: Optional[str] = None) -> None:
        if registry_path is not None:
            self._path = Path(registry_path)
        else:
            # Default: packaged resource next to this package
            _base = Path(__file__).resolve().parent.parent.parent
            self._path = _base / "resources" / "rule_registry.yaml"
        self._registry: dict[str, RuleRegistryEntry] = {}
        self._checklist: list[str] = []
        self._load()

    def _load(self) -> None:
        if not self._path.exists():
            return
        with open(self._path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if not isinstance(data, dict):
            return
        checklist = data.pop(_CHECKLIST_KEY, [])
        if isinstance(checklist, list):
            self._checklist = [str(item) for item in checklist]
        self._registry = {
            str(rule_id): cast(RuleRegistryEntry, entry)
            for rule_id, entry in data.items()
            if isinstance(entry, dict)
        }

    def get_entry(self, rule_id: str) -> Optional[RuleRegistryEntry]:
        """Return the registry entry for rule_id (or its display name), if any."""
        entry = self._registry.get(rule_id)
        if entry is not None:
            return cast(RuleRegistryEntry, dict(entry))
        wanted = rule_id.strip().lower()
        for candidate in self._registry.values():
            if str(candidate.get("display_name", "")).lower() == wanted:
                return cast(RuleRegistryEntry, dict(candidate))
        return None

    def get_rule_ids(self) -> list[str]:
        return sorted(self._registry)

    def get_manual_instructions(self, rule_id: str) -> str:
        entry = self.get_entry(rule_id)
        if not entry:
            return f"No guidance available for '{rule_id}'."
        return entry.get("manual_instructions", "").strip()

    def get_checklist(self) -> list[str]:
        return list(self._checklist)
