"""
Engine configuration for Migration.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

# Search depth presets offered to players
DIFFICULTY_LEVELS = {
    "easy": 1,
    "medium": 3,
    "hard": 5,
}


def resolve_difficulty(value: Union[str, int]) -> int:
    """
    Convert a difficulty name or number to a search depth.

    Args:
        value: Preset name ("easy", "medium", "hard") or a positive integer,
            either as int or as a numeric string

    Returns:
        Search depth in plies

    Raises:
        ValueError: If value is neither a known preset nor a positive integer
    """
    if isinstance(value, str):
        key = value.strip().lower()
        if key in DIFFICULTY_LEVELS:
            return DIFFICULTY_LEVELS[key]
        try:
            value = int(key)
        except ValueError:
            raise ValueError(
                f"Unknown difficulty '{value}'. "
                f"Use one of {sorted(DIFFICULTY_LEVELS)} or a positive integer"
            ) from None

    if value < 1:
        raise ValueError(f"Difficulty must be at least 1, got {value}")
    return value


@dataclass
class EngineConfig:
    """Configuration for a Migration engine process.

    Groups the defaults the protocol server uses when a client does not
    specify them.
    """

    size: int = 8
    """Board dimension for new games"""

    difficulty: int = DIFFICULTY_LEVELS["medium"]
    """Search depth of the bot in plies"""

    log_dir: Path = field(default_factory=lambda: Path.home() / ".migration")
    """Directory holding engine.log"""

    debug: bool = True
    """Log at DEBUG level instead of INFO"""

    def __post_init__(self):
        """Validate configuration values."""
        if self.size < 2:
            raise ValueError(f"size must be >= 2, got {self.size}")
        self.difficulty = resolve_difficulty(self.difficulty)
        self.log_dir = Path(self.log_dir)

    @property
    def log_file(self) -> Path:
        return self.log_dir / "engine.log"
