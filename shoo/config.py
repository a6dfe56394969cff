"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field


def _parse_seed() -> int | None:
    """Parse SHOO_SEED; unset or empty means an unseeded shoe."""
    seed = os.getenv("SHOO_SEED", "").strip()
    return int(seed) if seed else None


@dataclass(frozen=True)
class TableConfig:
    """Default table configuration."""

    num_decks: int = field(default_factory=lambda: int(os.getenv("SHOO_NUM_DECKS", "6")))
    num_spots: int = field(default_factory=lambda: int(os.getenv("SHOO_NUM_SPOTS", "1")))
    max_penetration: float = field(
        default_factory=lambda: float(os.getenv("SHOO_MAX_PENETRATION", "0.75"))
    )
    seed: int | None = field(default_factory=_parse_seed)

    def __post_init__(self) -> None:
        """Validate the table shape."""
        if self.num_decks < 1:
            raise ValueError("num_decks must be at least 1")
        if self.num_spots < 1:
            raise ValueError("num_spots must be at least 1")

