"""Configuration management for the video player."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Optional

DEFAULT_FLAG_REASON = "Not supplied"
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "video_player" / "config.json"


@dataclass
class AppConfig:
    library_path: Optional[Path] = None  # None -> built-in sample catalog
    random_seed: Optional[int] = None
    log_level: str = "WARNING"
    prompt: str = "Video Player> "
    default_flag_reason: str = DEFAULT_FLAG_REASON

    def __post_init__(self):
        # Ensure library_path is a Path object
        if self.library_path is not None and not isinstance(self.library_path, Path):
            self.library_path = Path(self.library_path)

    def save(self, path: Path) -> None:
        """Saves the configuration to a JSON file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(asdict(self), f, indent=2, cls=PathEncoder)

    @classmethod
    def from_file(cls, path: Path) -> "AppConfig":
        """Loads configuration from a JSON file."""
        if not path.exists():
            return cls()
        with open(path, "r") as f:
            data = json.load(f)
        return cls(**data)


class PathEncoder(json.JSONEncoder):
    def default(self, o: Any) -> Any:
        if isinstance(o, Path):
            return str(o)
        return super().default(o)


__all__ = ["AppConfig", "DEFAULT_CONFIG_PATH", "DEFAULT_FLAG_REASON"]
