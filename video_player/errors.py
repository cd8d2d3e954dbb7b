"""Exception taxonomy used inside the core.

Each error maps to a ``ResultKind``; ``VideoPlayer`` converts raised errors
into failure results so nothing propagates past the API boundary.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .results import ResultKind

if TYPE_CHECKING:
    from .models import Video


class PlayerError(Exception):
    kind: ResultKind

    def __init__(self, message: str, video: Optional["Video"] = None):
        super().__init__(message)
        self.video = video


class VideoNotFoundError(PlayerError):
    kind = ResultKind.VIDEO_NOT_FOUND


class PlaylistNotFoundError(PlayerError):
    kind = ResultKind.PLAYLIST_NOT_FOUND


class DuplicateNameError(PlayerError):
    kind = ResultKind.DUPLICATE_NAME


class DuplicateVideoError(PlayerError):
    kind = ResultKind.DUPLICATE_VIDEO


class NotInPlaylistError(PlayerError):
    kind = ResultKind.NOT_IN_PLAYLIST


class AlreadyFlaggedError(PlayerError):
    kind = ResultKind.ALREADY_FLAGGED


class NotFlaggedError(PlayerError):
    kind = ResultKind.NOT_FLAGGED


class VideoFlaggedError(PlayerError):
    """Raised when a flagged video is played or added to a playlist."""

    kind = ResultKind.VIDEO_FLAGGED

    def __init__(self, video: "Video"):
        super().__init__(
            f"Video {video.video_id} is flagged (reason: {video.flag_reason})", video
        )
        self.reason = video.flag_reason


class AlreadyPausedError(PlayerError):
    kind = ResultKind.ALREADY_PAUSED


class NotPausedError(PlayerError):
    kind = ResultKind.NOT_PAUSED


class NothingPlayingError(PlayerError):
    kind = ResultKind.NOTHING_PLAYING


class LibraryEmptyError(PlayerError):
    kind = ResultKind.LIBRARY_EMPTY


class CatalogFormatError(ValueError):
    """Catalog source could not be turned into a set of videos."""


__all__ = [
    "PlayerError",
    "VideoNotFoundError",
    "PlaylistNotFoundError",
    "DuplicateNameError",
    "DuplicateVideoError",
    "NotInPlaylistError",
    "AlreadyFlaggedError",
    "NotFlaggedError",
    "VideoFlaggedError",
    "AlreadyPausedError",
    "NotPausedError",
    "NothingPlayingError",
    "LibraryEmptyError",
    "CatalogFormatError",
]
