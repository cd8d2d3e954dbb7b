"""Command-like API over catalog, playback cursor and playlists.

Each public method performs one user command and returns a ``CommandResult``.
``PlayerError`` raised by the core is converted into a failure result here;
nothing escapes to the caller.
"""

from __future__ import annotations

import random
from typing import Callable, Optional

from .catalog import Catalog
from .config import DEFAULT_FLAG_REASON
from .errors import PlayerError, VideoFlaggedError
from .logging_utils import get_logger
from .models import PlaybackStatus
from .playback import PlaybackController
from .playlist import PlaylistRegistry
from .results import CommandResult, ResultKind
from . import search


class VideoPlayer:
    def __init__(
        self,
        catalog: Catalog,
        rng: Optional[random.Random] = None,
        default_flag_reason: str = DEFAULT_FLAG_REASON,
    ):
        self.catalog = catalog
        self.playback = PlaybackController(catalog, rng)
        self.playlists = PlaylistRegistry()
        self._default_flag_reason = default_flag_reason
        self._log = get_logger()

    def _guard(
        self,
        command: str,
        action: Callable[[], CommandResult],
        name: Optional[str] = None,
    ) -> CommandResult:
        try:
            return action()
        except PlayerError as e:
            self._log.debug(f"{command} rejected ({e.kind.value}): {e}")
            return CommandResult(
                command,
                e.kind,
                video=e.video,
                name=name,
                reason=e.reason if isinstance(e, VideoFlaggedError) else None,
            )

    # --- Catalog ----------------------------------------------------
    def number_of_videos(self) -> CommandResult:
        return CommandResult(
            "number_of_videos", ResultKind.VIDEO_COUNT, count=len(self.catalog)
        )

    def list_all(self) -> CommandResult:
        return CommandResult(
            "list_all",
            ResultKind.VIDEO_LIST,
            videos=search.sort_by_title(self.catalog.all()),
        )

    # --- Playback ---------------------------------------------------
    def play(self, video_id: str) -> CommandResult:
        def action():
            video, stopped = self.playback.play(video_id)
            return CommandResult("play", ResultKind.PLAYING, video=video, stopped=stopped)

        return self._guard("play", action)

    def play_random(self) -> CommandResult:
        def action():
            video, stopped = self.playback.play_random()
            return CommandResult(
                "play_random", ResultKind.PLAYING, video=video, stopped=stopped
            )

        return self._guard("play_random", action)

    def stop(self) -> CommandResult:
        return self._guard(
            "stop",
            lambda: CommandResult("stop", ResultKind.STOPPED, video=self.playback.stop()),
        )

    def pause(self) -> CommandResult:
        return self._guard(
            "pause",
            lambda: CommandResult("pause", ResultKind.PAUSED, video=self.playback.pause()),
        )

    def resume(self) -> CommandResult:
        return self._guard(
            "resume",
            lambda: CommandResult(
                "resume", ResultKind.RESUMED, video=self.playback.resume()
            ),
        )

    def status(self) -> PlaybackStatus:
        return self.playback.status()

    def show_playing(self) -> CommandResult:
        status = self.playback.status()
        return CommandResult(
            "show_playing", ResultKind.STATUS, video=status.video, status=status
        )

    # --- Playlists --------------------------------------------------
    def create_playlist(self, name: str) -> CommandResult:
        def action():
            self.playlists.create(name)
            self._log.info(f"Created playlist '{name}'")
            return CommandResult("create_playlist", ResultKind.PLAYLIST_CREATED, name=name)

        return self._guard("create_playlist", action, name=name)

    def add_to_playlist(self, name: str, video_id: str) -> CommandResult:
        def action():
            playlist = self.playlists.get(name)
            video = self.catalog.lookup(video_id)
            if video.flagged:
                raise VideoFlaggedError(video)
            playlist.add(video)
            self._log.info(f"Added {video_id} to playlist '{playlist.name}'")
            return CommandResult(
                "add_to_playlist", ResultKind.VIDEO_ADDED, video=video, name=name
            )

        return self._guard("add_to_playlist", action, name=name)

    def show_all_playlists(self) -> CommandResult:
        return CommandResult(
            "show_all_playlists",
            ResultKind.PLAYLIST_LIST,
            playlists=self.playlists.list_all(),
        )

    def show_playlist(self, name: str) -> CommandResult:
        def action():
            playlist = self.playlists.get(name)
            return CommandResult(
                "show_playlist",
                ResultKind.PLAYLIST_SHOWN,
                name=name,
                videos=playlist.videos(),
                playlists=[playlist],
            )

        return self._guard("show_playlist", action, name=name)

    def remove_from_playlist(self, name: str, video_id: str) -> CommandResult:
        def action():
            playlist = self.playlists.get(name)
            video = self.catalog.lookup(video_id)
            playlist.remove(video)
            self._log.info(f"Removed {video_id} from playlist '{playlist.name}'")
            return CommandResult(
                "remove_from_playlist", ResultKind.VIDEO_REMOVED, video=video, name=name
            )

        return self._guard("remove_from_playlist", action, name=name)

    def clear_playlist(self, name: str) -> CommandResult:
        def action():
            self.playlists.get(name).clear()
            self._log.info(f"Cleared playlist '{name}'")
            return CommandResult("clear_playlist", ResultKind.PLAYLIST_CLEARED, name=name)

        return self._guard("clear_playlist", action, name=name)

    def delete_playlist(self, name: str) -> CommandResult:
        def action():
            self.playlists.delete(name)
            self._log.info(f"Deleted playlist '{name}'")
            return CommandResult("delete_playlist", ResultKind.PLAYLIST_DELETED, name=name)

        return self._guard("delete_playlist", action, name=name)

    # --- Search -----------------------------------------------------
    def search_by_title(self, term: str) -> CommandResult:
        return CommandResult(
            "search_by_title",
            ResultKind.SEARCH_RESULTS,
            term=term,
            videos=search.search_by_title(self.catalog, term),
        )

    def search_by_tag(self, tag: str) -> CommandResult:
        return CommandResult(
            "search_by_tag",
            ResultKind.SEARCH_RESULTS,
            term=tag,
            videos=search.search_by_tag(self.catalog, tag),
        )

    def play_search_result(
        self, results: CommandResult, answer: Optional[str]
    ) -> Optional[CommandResult]:
        """Play the ``answer``-th (1-based) video of ``results``; None if no selection."""
        selected = search.parse_selection(answer, results.videos)
        if selected is None:
            return None
        return self.play(selected.video_id)

    # --- Moderation -------------------------------------------------
    def flag(self, video_id: str, reason: Optional[str] = None) -> CommandResult:
        def action():
            video = self.catalog.lookup(video_id)
            video.flag(reason or self._default_flag_reason)
            # No window where a flagged video stays current
            stopped = self.playback.stop_if_current(video)
            self._log.info(f"Flagged {video_id} (reason: {video.flag_reason})")
            return CommandResult(
                "flag",
                ResultKind.FLAGGED,
                video=video,
                stopped=stopped,
                reason=video.flag_reason,
            )

        return self._guard("flag", action)

    def unflag(self, video_id: str) -> CommandResult:
        def action():
            video = self.catalog.lookup(video_id)
            video.unflag()
            self._log.info(f"Removed flag from {video_id}")
            return CommandResult("unflag", ResultKind.UNFLAGGED, video=video)

        return self._guard("unflag", action)


__all__ = ["VideoPlayer"]
