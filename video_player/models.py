from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from .config import DEFAULT_FLAG_REASON
from .errors import AlreadyFlaggedError, NotFlaggedError

# Core data models for the catalog and the playback cursor


@dataclass(eq=False)
class Video:
    title: str
    video_id: str
    tags: Tuple[str, ...] = field(default_factory=tuple)
    flagged: bool = False
    flag_reason: Optional[str] = None  # set iff flagged

    def __post_init__(self):
        # Tags are fixed at load time
        self.tags = tuple(self.tags)

    def flag(self, reason: Optional[str] = None) -> None:
        if self.flagged:
            raise AlreadyFlaggedError(f"Video {self.video_id} is already flagged", self)
        self.flagged = True
        self.flag_reason = reason or DEFAULT_FLAG_REASON

    def unflag(self) -> None:
        if not self.flagged:
            raise NotFlaggedError(f"Video {self.video_id} is not flagged", self)
        self.flagged = False
        self.flag_reason = None

    def display_line(self) -> str:
        """Render as ``title (video_id) [tag1 tag2]`` plus the flag suffix."""
        line = f"{self.title} ({self.video_id}) [{' '.join(self.tags)}]"
        if self.flagged:
            line += f" - FLAGGED (reason: {self.flag_reason})"
        return line

    def __repr__(self) -> str:
        return f"Video({self.video_id!r}, title={self.title!r}, flagged={self.flagged})"


class PlaybackState(Enum):
    STOPPED = "stopped"
    PLAYING = "playing"
    PAUSED = "paused"


@dataclass(frozen=True)
class PlaybackStatus:
    state: PlaybackState
    video: Optional[Video] = None

    @property
    def is_stopped(self) -> bool:
        return self.state is PlaybackState.STOPPED


__all__ = ["Video", "PlaybackState", "PlaybackStatus"]
