"""Structured results returned by every player operation.

The core never prints; callers receive a ``CommandResult`` (kind + payload)
and decide how to present it (see ``rendering``).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from .models import PlaybackStatus, Video
    from .playlist import Playlist


class ResultKind(Enum):
    # success kinds
    VIDEO_COUNT = "video_count"
    VIDEO_LIST = "video_list"
    PLAYING = "playing"
    STOPPED = "stopped"
    PAUSED = "paused"
    RESUMED = "resumed"
    STATUS = "status"
    PLAYLIST_CREATED = "playlist_created"
    VIDEO_ADDED = "video_added"
    PLAYLIST_LIST = "playlist_list"
    PLAYLIST_SHOWN = "playlist_shown"
    VIDEO_REMOVED = "video_removed"
    PLAYLIST_CLEARED = "playlist_cleared"
    PLAYLIST_DELETED = "playlist_deleted"
    SEARCH_RESULTS = "search_results"
    FLAGGED = "flagged"
    UNFLAGGED = "unflagged"
    # failure kinds
    VIDEO_NOT_FOUND = "video_not_found"
    PLAYLIST_NOT_FOUND = "playlist_not_found"
    DUPLICATE_NAME = "duplicate_name"
    DUPLICATE_VIDEO = "duplicate_video"
    NOT_IN_PLAYLIST = "not_in_playlist"
    ALREADY_FLAGGED = "already_flagged"
    NOT_FLAGGED = "not_flagged"
    VIDEO_FLAGGED = "video_flagged"
    ALREADY_PAUSED = "already_paused"
    NOT_PAUSED = "not_paused"
    NOTHING_PLAYING = "nothing_playing"
    LIBRARY_EMPTY = "library_empty"

    @property
    def is_failure(self) -> bool:
        return self in _FAILURES


_FAILURES = frozenset(
    {
        ResultKind.VIDEO_NOT_FOUND,
        ResultKind.PLAYLIST_NOT_FOUND,
        ResultKind.DUPLICATE_NAME,
        ResultKind.DUPLICATE_VIDEO,
        ResultKind.NOT_IN_PLAYLIST,
        ResultKind.ALREADY_FLAGGED,
        ResultKind.NOT_FLAGGED,
        ResultKind.VIDEO_FLAGGED,
        ResultKind.ALREADY_PAUSED,
        ResultKind.NOT_PAUSED,
        ResultKind.NOTHING_PLAYING,
        ResultKind.LIBRARY_EMPTY,
    }
)


@dataclass
class CommandResult:
    """Outcome of one API call.

    ``command`` names the operation (``"play"``, ``"add_to_playlist"`` ...).
    Only the payload fields relevant to ``kind`` are populated:

    - ``video``: the target video (played, paused, flagged, added ...)
    - ``stopped``: a video stopped as a side effect (play, flag)
    - ``videos``: ordered listing / search results / playlist contents
    - ``playlists``: registry listing
    - ``name``: playlist name exactly as the caller supplied it
    - ``term``: search term as supplied
    - ``reason``: flag reason
    - ``count``: number of videos
    - ``status``: playback status snapshot
    """

    command: str
    kind: ResultKind
    video: Optional["Video"] = None
    stopped: Optional["Video"] = None
    videos: List["Video"] = field(default_factory=list)
    playlists: List["Playlist"] = field(default_factory=list)
    name: Optional[str] = None
    term: Optional[str] = None
    reason: Optional[str] = None
    count: Optional[int] = None
    status: Optional["PlaybackStatus"] = None

    @property
    def ok(self) -> bool:
        return not self.kind.is_failure


__all__ = ["CommandResult", "ResultKind"]
