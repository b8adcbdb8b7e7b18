"""Static level catalog.

Definitions use the external camelCase shape consumed by the game client so
they can be served or exported unchanged. ``profile`` is either one profile
name or a list applied in order.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from .config import LevelConfig
from .level import LevelOutput
from .pipeline import build_level

BASE_LEVEL_DEFS: List[Dict[str, Any]] = [
    {
        "id": 1, "name": "Easy I - Ember Keep", "difficulty": "Easy",
        "size": 400, "seed": 1401, "loopCount": 22, "minPathLength": 62, "minTurns": 9,
        "biasX": 1.2, "biasY": 1.08, "straightness": 1.1, "profile": "citadel",
    },
    {
        "id": 2, "name": "Easy II - Frost Gallery", "difficulty": "Easy",
        "size": 400, "seed": 1429, "loopCount": 24, "minPathLength": 66, "minTurns": 10,
        "biasX": 1.0, "biasY": 1.3, "straightness": 1.08, "profile": "crypt",
    },
    {
        "id": 3, "name": "Easy III - Ashen Bastion", "difficulty": "Easy",
        "size": 400, "seed": 1457, "loopCount": 26, "minPathLength": 70, "minTurns": 11,
        "biasX": 1.28, "biasY": 1.02, "straightness": 1.2, "profile": "serpent",
    },
    {
        "id": 4, "name": "Medium I - Iron Cathedral", "difficulty": "Medium",
        "size": 600, "seed": 3103, "loopCount": 56, "minPathLength": 116, "minTurns": 18,
        "biasX": 1.18, "biasY": 1.2, "straightness": 1.12, "profile": "crypt",
    },
    {
        "id": 5, "name": "Medium II - Twin Crypts", "difficulty": "Medium",
        "size": 600, "seed": 3137, "loopCount": 60, "minPathLength": 122, "minTurns": 19,
        "biasX": 1.36, "biasY": 1.0, "straightness": 1.15, "profile": "citadel",
    },
    {
        "id": 6, "name": "Medium III - Serpent Depths", "difficulty": "Medium",
        "size": 600, "seed": 3181, "loopCount": 64, "minPathLength": 130, "minTurns": 21,
        "biasX": 1.0, "biasY": 1.36, "straightness": 1.1, "profile": "serpent",
    },
    {
        "id": 7, "name": "Hard I - Dragon Necropolis", "difficulty": "Hard",
        "size": 900, "seed": 7109, "loopCount": 132, "minPathLength": 190, "minTurns": 33,
        "biasX": 1.23, "biasY": 1.22, "straightness": 1.12, "profile": "fortress",
    },
    {
        "id": 8, "name": "Hard II - Dread Fortress", "difficulty": "Hard",
        "size": 900, "seed": 7151, "loopCount": 138, "minPathLength": 200, "minTurns": 35,
        "biasX": 1.38, "biasY": 1.03, "straightness": 1.2, "profile": "fortress",
    },
    {
        "id": 9, "name": "Hard III - Crown of Relics", "difficulty": "Hard",
        "size": 900, "seed": 7207, "loopCount": 144, "minPathLength": 210, "minTurns": 37,
        "biasX": 1.1, "biasY": 1.18, "straightness": 1.15, "profile": "rings",
    },
]

# (name, difficulty, size, seed, loopCount, minPathLength, minTurns, biasX, biasY, straightness, profiles)
_EXTRA_TEMPLATES = [
    ("Easy IV - Azure Atrium", "Easy", 400, 9101, 30, 76, 13, 1.08, 1.16, 1.11, ["citadel"]),
    ("Easy V - Rune Library", "Easy", 400, 9177, 32, 82, 14, 1.02, 1.22, 1.16, ["crypt"]),
    ("Easy VI - Moonwell Crossing", "Easy", 400, 9253, 34, 86, 15, 1.24, 1.02, 1.2, ["serpent"]),
    ("Easy VII - Gilded Watch", "Easy", 400, 9329, 36, 90, 16, 1.18, 1.12, 1.18, ["citadel", "crypt"]),
    ("Easy VIII - Harbor Annex", "Easy", 400, 9405, 37, 92, 16, 1.12, 1.2, 1.15, ["crypt", "serpent"]),
    ("Easy IX - Sunken Lantern Hall", "Easy", 400, 9481, 38, 95, 17, 1.28, 1.0, 1.21, ["serpent", "citadel"]),
    ("Easy X - Ivy Rampart", "Easy", 400, 9557, 40, 98, 18, 1.14, 1.18, 1.18, ["rings"]),
    ("Medium IV - Obsidian Archives", "Medium", 600, 9633, 78, 144, 25, 1.08, 1.28, 1.14, ["crypt", "fortress"]),
    ("Medium V - Tidal Monastery", "Medium", 600, 9709, 82, 152, 26, 1.22, 1.1, 1.19, ["citadel", "serpent"]),
    ("Medium VI - Vault of Feathers", "Medium", 600, 9785, 86, 160, 27, 1.18, 1.16, 1.16, ["rings", "crypt"]),
    ("Medium VII - Cathedral Annex", "Medium", 600, 9861, 90, 168, 28, 1.32, 1.04, 1.21, ["fortress"]),
    ("Medium VIII - Lab of Mirrors", "Medium", 600, 9937, 94, 174, 30, 1.0, 1.34, 1.1, ["serpent", "rings"]),
    ("Medium IX - Storm Relay", "Medium", 600, 10013, 97, 182, 31, 1.26, 1.08, 1.18, ["citadel", "fortress"]),
    ("Medium X - Celestial Trench", "Medium", 600, 10089, 102, 188, 32, 1.12, 1.26, 1.17, ["rings", "serpent", "crypt"]),
    ("Hard IV - Warden Causeway", "Hard", 900, 10165, 166, 232, 42, 1.2, 1.2, 1.16, ["fortress", "crypt"]),
    ("Hard V - Astral Engine", "Hard", 900, 10241, 172, 244, 44, 1.34, 1.06, 1.21, ["rings", "fortress"]),
    ("Hard VI - Citadel Core", "Hard", 900, 10317, 178, 256, 46, 1.06, 1.34, 1.12, ["serpent", "crypt", "citadel"]),
    ("Hard VII - Dragon Relay Nexus", "Hard", 900, 10393, 184, 268, 48, 1.24, 1.24, 1.18, ["fortress", "serpent"]),
    ("Hard VIII - Imperial Spiral", "Hard", 900, 10469, 191, 278, 50, 1.3, 1.14, 1.2, ["rings", "citadel", "crypt"]),
    ("Hard IX - Final Rune Circuit", "Hard", 900, 10545, 198, 290, 53, 1.16, 1.3, 1.22, ["fortress", "rings", "serpent"]),
]

_TEMPLATE_KEYS = (
    "name", "difficulty", "size", "seed", "loopCount", "minPathLength",
    "minTurns", "biasX", "biasY", "straightness", "profile",
)

EXTRA_LEVEL_DEFS: List[Dict[str, Any]] = [
    {"id": len(BASE_LEVEL_DEFS) + i + 1, **dict(zip(_TEMPLATE_KEYS, row))}
    for i, row in enumerate(_EXTRA_TEMPLATES)
]

LEVEL_DEFS: List[Dict[str, Any]] = BASE_LEVEL_DEFS + EXTRA_LEVEL_DEFS

_CONFIGS: Optional[List[LevelConfig]] = None


def level_configs() -> List[LevelConfig]:
    """Validated configs for every catalog level, in id order (parsed once)."""
    global _CONFIGS
    if _CONFIGS is None:
        _CONFIGS = [LevelConfig.from_dict(d) for d in LEVEL_DEFS]
    return list(_CONFIGS)


def get_level_config(level_id: int) -> Optional[LevelConfig]:
    for cfg in level_configs():
        if cfg.id == level_id:
            return cfg
    return None


def build_catalog() -> List[LevelOutput]:
    """Generate every catalog level. Slow: most levels run the full retry budget."""
    return [build_level(cfg) for cfg in level_configs()]


__all__ = [
    "BASE_LEVEL_DEFS",
    "EXTRA_LEVEL_DEFS",
    "LEVEL_DEFS",
    "level_configs",
    "get_level_config",
    "build_catalog",
]
