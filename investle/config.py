"""
configuration constants for investle.

all the magic numbers live here so they're easy to tweak.
changing game_start, shuffle_seed or the catalog ordering reshuffles
every future day, so treat them as deploy-time decisions.
"""

from dataclasses import dataclass
from datetime import date
from pathlib import Path


@dataclass
class Config:
    """game configuration: tweak these as needed."""

    # guess budget per session
    max_guesses: int = 8

    # timezone for day boundaries (named zone, so DST is handled)
    day_boundary_tz: str = "America/New_York"

    # day index 0 (civil date in day_boundary_tz)
    game_start: date = date(2025, 1, 1)

    # seed for the catalog shuffle
    shuffle_seed: int = 20250101

    # paths (relative to project root by default)
    data_dir: Path = Path("data")
    catalog_file: str = "stocks.json"

    def __post_init__(self):
        """ensure paths are Path objects and game_start is a date."""
        self.data_dir = Path(self.data_dir)
        if isinstance(self.game_start, str):
            self.game_start = date.fromisoformat(self.game_start)

    @property
    def catalog_path(self) -> Path:
        return self.data_dir / self.catalog_file


# default config instance
DEFAULT_CONFIG = Config()
