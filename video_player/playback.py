"""Playback cursor state machine: Stopped -> Playing <-> Paused -> Stopped.

Only ``play`` changes which video is current. Every transition validates
first and mutates afterwards, so a rejected call leaves the cursor as it was.
"""

from __future__ import annotations

import random
from typing import Optional, Tuple

from .catalog import Catalog
from .errors import (
    AlreadyPausedError,
    LibraryEmptyError,
    NotPausedError,
    NothingPlayingError,
    VideoFlaggedError,
)
from .logging_utils import get_logger
from .models import PlaybackState, PlaybackStatus, Video


class PlaybackController:
    def __init__(self, catalog: Catalog, rng: Optional[random.Random] = None):
        self._catalog = catalog
        self._rng = rng or random.Random()
        self._current: Optional[Video] = None
        self._paused = False
        self._log = get_logger()

    @property
    def current(self) -> Optional[Video]:
        return self._current

    @property
    def state(self) -> PlaybackState:
        if self._current is None:
            return PlaybackState.STOPPED
        return PlaybackState.PAUSED if self._paused else PlaybackState.PLAYING

    def status(self) -> PlaybackStatus:
        return PlaybackStatus(self.state, self._current)

    def play(self, video_id: str) -> Tuple[Video, Optional[Video]]:
        """Start ``video_id``; returns ``(video, stopped)``.

        ``stopped`` is the video implicitly stopped to make room, if any (it
        may be the same video when replaying the current one).
        """
        video = self._catalog.lookup(video_id)
        if video.flagged:
            raise VideoFlaggedError(video)
        stopped = self._current
        if stopped is not None:
            self._log.info(f"Stopping video: {stopped.video_id}")
        self._current = video
        self._paused = False
        self._log.info(f"Playing video: {video.video_id}")
        return video, stopped

    def play_random(self) -> Tuple[Video, Optional[Video]]:
        eligible = self._catalog.eligible()
        if not eligible:
            raise LibraryEmptyError("No videos available")
        choice = eligible[self._rng.randrange(len(eligible))]
        self._log.debug(f"Random pick {choice.video_id} from {len(eligible)} eligible")
        return self.play(choice.video_id)

    def stop(self) -> Video:
        if self._current is None:
            raise NothingPlayingError("No video is currently playing")
        stopped = self._current
        self._current = None
        self._paused = False
        self._log.info(f"Stopping video: {stopped.video_id}")
        return stopped

    def stop_if_current(self, video: Video) -> Optional[Video]:
        """Stop playback when ``video`` is the current one (used by flagging)."""
        if self._current is not None and self._current.video_id == video.video_id:
            return self.stop()
        return None

    def pause(self) -> Video:
        if self._current is None:
            raise NothingPlayingError("No video is currently playing")
        if self._paused:
            raise AlreadyPausedError("Video already paused", self._current)
        self._paused = True
        self._log.info(f"Pausing video: {self._current.video_id}")
        return self._current

    def resume(self) -> Video:
        if self._current is None:
            raise NothingPlayingError("No video is currently playing")
        if not self._paused:
            raise NotPausedError("Video is not paused", self._current)
        self._paused = False
        self._log.info(f"Continuing video: {self._current.video_id}")
        return self._current


__all__ = ["PlaybackController"]
