"""Playlists: named, ordered, duplicate-free video references (no UI)."""

from __future__ import annotations

from typing import Dict, Iterator, List

from .errors import (
    DuplicateNameError,
    DuplicateVideoError,
    NotInPlaylistError,
    PlaylistNotFoundError,
)
from .models import Video


class Playlist:
    """Ordered video collection; insertion order, one entry per video id."""

    def __init__(self, name: str) -> None:
        self.name = name  # original casing, used for display
        self._videos: List[Video] = []

    @property
    def key(self) -> str:
        return normalize_name(self.name)

    def videos(self) -> List[Video]:
        return list(self._videos)

    def contains(self, video: Video) -> bool:
        return any(v.video_id == video.video_id for v in self._videos)

    def add(self, video: Video) -> None:
        if self.contains(video):
            raise DuplicateVideoError(
                f"Video {video.video_id} already in playlist {self.name}", video
            )
        self._videos.append(video)

    def remove(self, video: Video) -> None:
        for i, v in enumerate(self._videos):
            if v.video_id == video.video_id:
                self._videos.pop(i)
                return
        raise NotInPlaylistError(
            f"Video {video.video_id} is not in playlist {self.name}", video
        )

    def clear(self) -> None:
        self._videos.clear()

    def __contains__(self, video: object) -> bool:
        return isinstance(video, Video) and self.contains(video)

    def __iter__(self) -> Iterator[Video]:
        return iter(list(self._videos))

    def __len__(self) -> int:
        return len(self._videos)

    def __repr__(self) -> str:
        return f"Playlist({self.name!r}, videos={len(self._videos)})"


def normalize_name(name: str) -> str:
    # Lowercase only; whitespace is significant
    return name.lower()


class PlaylistRegistry:
    """Case-insensitive name -> Playlist store owning playlist lifecycle."""

    def __init__(self) -> None:
        self._playlists: Dict[str, Playlist] = {}

    def create(self, name: str) -> Playlist:
        key = normalize_name(name)
        if key in self._playlists:
            raise DuplicateNameError(f"A playlist named '{name}' already exists")
        playlist = Playlist(name)
        self._playlists[key] = playlist
        return playlist

    def get(self, name: str) -> Playlist:
        playlist = self._playlists.get(normalize_name(name))
        if playlist is None:
            raise PlaylistNotFoundError(f"Playlist '{name}' does not exist")
        return playlist

    def delete(self, name: str) -> Playlist:
        key = normalize_name(name)
        if key not in self._playlists:
            raise PlaylistNotFoundError(f"Playlist '{name}' does not exist")
        return self._playlists.pop(key)

    def list_all(self) -> List[Playlist]:
        return [self._playlists[k] for k in sorted(self._playlists)]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and normalize_name(name) in self._playlists

    def __len__(self) -> int:
        return len(self._playlists)


__all__ = ["Playlist", "PlaylistRegistry", "normalize_name"]
