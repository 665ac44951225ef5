"""
GDS design-system data: semantic tokens, component catalog, platform facts.

Read once from the JSON files shipped in design_system/ when the registry is
built; requests only ever see the in-memory copy.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DESIGN_SYSTEM_DIR = Path(__file__).resolve().parent / "design_system"


@dataclass(frozen=True)
class DesignSystem:
    tokens: dict
    components: list
    platform: dict

    @property
    def catalog(self) -> dict:
        return {"components": self.components}

    def component_names(self) -> list[str]:
        return [c["name"] for c in self.components]


def _load_json(name: str, directory: Path) -> dict:
    path = directory / f"{name}.json"
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def load_design_system(directory: Path = DESIGN_SYSTEM_DIR) -> DesignSystem:
    """Load tokens.json, catalog.json and platform.json from `directory`."""
    tokens = _load_json("tokens", directory)
    catalog = _load_json("catalog", directory)
    platform = _load_json("platform", directory)
    components = catalog.get("components", [])
    logger.info("[design-system] Loaded %d components from %s", len(components), directory)
    return DesignSystem(tokens=tokens, components=components, platform=platform)
