from typing import TypedDict


class RuleRegistryEntry(TypedDict, total=False):
    display_name: str
    short_description: str
    severity: str
    manual_instructions: str
    fix_titles: list[str]
    references: list[str]
