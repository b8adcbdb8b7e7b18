from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Mapping, Optional, Tuple

from .grid import CELL_SIZE, grid_cells_for
from .rng import MASK32
from .sculptors import Profile

MIN_GRID_CELLS = 5
MAX_GRID_CELLS = 101


class LevelConfigError(ValueError):
    """Raised when a level definition cannot be turned into a valid config."""


def resolve_profiles(raw) -> Tuple[Profile, ...]:
    """Turn a profile name, a list of names, or Profile members into a tuple of members."""
    if raw is None:
        raise LevelConfigError("profile is required")
    if isinstance(raw, (str, Profile)):
        items = [raw]
    elif isinstance(raw, (list, tuple)):
        items = list(raw)
    else:
        raise LevelConfigError(f"profile must be a name or a list of names (got {raw!r})")
    if not items:
        raise LevelConfigError("profile list is empty")
    resolved = []
    for item in items:
        if isinstance(item, Profile):
            resolved.append(item)
            continue
        try:
            resolved.append(Profile.from_name(item))
        except KeyError:
            raise LevelConfigError(f"unknown profile {item!r}") from None
    return tuple(resolved)


# camelCase catalog keys -> dataclass fields
_KEY_ALIASES = {
    "loopCount": "loop_count",
    "minPathLength": "min_path_length",
    "minTurns": "min_turns",
    "biasX": "bias_x",
    "biasY": "bias_y",
    "profile": "profiles",
}


@dataclass(frozen=True)
class LevelConfig:
    size: int
    seed: int
    loop_count: int
    min_path_length: int
    min_turns: int
    bias_x: float = 1.0
    bias_y: float = 1.0
    straightness: float = 1.0
    profiles: Tuple[Profile, ...] = field(default=(Profile.CITADEL,))
    id: Optional[int] = None
    name: str = ""
    difficulty: str = ""

    @property
    def grid_cells(self) -> int:
        return grid_cells_for(self.size, CELL_SIZE)

    @property
    def profile_names(self) -> Tuple[str, ...]:
        return tuple(p.label for p in self.profiles)

    def validate(self) -> "LevelConfig":
        if isinstance(self.size, bool) or not isinstance(self.size, int) or self.size <= 0:
            raise LevelConfigError(f"size must be a positive integer (got {self.size!r})")
        if self.grid_cells < MIN_GRID_CELLS:
            raise LevelConfigError(
                f"size {self.size} gives a {self.grid_cells}-cell grid; need at least {MIN_GRID_CELLS}"
            )
        if self.grid_cells > MAX_GRID_CELLS:
            raise LevelConfigError(
                f"size {self.size} gives a {self.grid_cells}-cell grid; at most {MAX_GRID_CELLS} allowed"
            )
        if isinstance(self.seed, bool) or not isinstance(self.seed, int):
            raise LevelConfigError(f"seed must be an integer (got {self.seed!r})")
        for name in ("loop_count", "min_path_length", "min_turns"):
            val = getattr(self, name)
            if isinstance(val, bool) or not isinstance(val, int) or val < 0:
                raise LevelConfigError(f"{name} must be a non-negative integer (got {val!r})")
        # more samples than cells only re-test the same walls
        if self.loop_count > self.grid_cells ** 2:
            raise LevelConfigError(
                f"loop_count {self.loop_count} exceeds {self.grid_cells ** 2} for a {self.grid_cells}-cell grid"
            )
        for name in ("bias_x", "bias_y", "straightness"):
            val = getattr(self, name)
            if isinstance(val, bool) or not isinstance(val, (int, float)) or not val > 0:
                raise LevelConfigError(f"{name} must be a positive number (got {val!r})")
        if self.id is not None and (isinstance(self.id, bool) or not isinstance(self.id, int)):
            raise LevelConfigError(f"id must be an integer (got {self.id!r})")
        for name in ("name", "difficulty"):
            if not isinstance(getattr(self, name), str):
                raise LevelConfigError(f"{name} must be a string (got {getattr(self, name)!r})")
        if not self.profiles:
            raise LevelConfigError("profile list is empty")
        if not all(isinstance(p, Profile) for p in self.profiles):
            raise LevelConfigError("profiles must be resolved Profile members")
        return self

    def with_seed(self, seed: int) -> "LevelConfig":
        return replace(self, seed=int(seed) & MASK32)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LevelConfig":
        """Build and validate a config from catalog (camelCase) or snake_case keys."""
        kwargs = {}
        for key, value in data.items():
            name = _KEY_ALIASES.get(key, key)
            if name in cls.__dataclass_fields__:
                kwargs[name] = value
        missing = [k for k in ("size", "seed", "loop_count", "min_path_length", "min_turns") if k not in kwargs]
        if missing:
            raise LevelConfigError(f"missing keys: {', '.join(missing)}")
        kwargs["profiles"] = resolve_profiles(kwargs.get("profiles", Profile.CITADEL))
        return cls(**kwargs).validate()

    def to_dict(self) -> dict:
        names = list(self.profile_names)
        return {
            "id": self.id,
            "name": self.name,
            "difficulty": self.difficulty,
            "size": self.size,
            "seed": self.seed,
            "loopCount": self.loop_count,
            "minPathLength": self.min_path_length,
            "minTurns": self.min_turns,
            "biasX": self.bias_x,
            "biasY": self.bias_y,
            "straightness": self.straightness,
            "profile": names[0] if len(names) == 1 else names,
        }


__all__ = ["LevelConfig", "LevelConfigError", "resolve_profiles", "MIN_GRID_CELLS", "MAX_GRID_CELLS"]
