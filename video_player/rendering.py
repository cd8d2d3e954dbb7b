"""Turn ``CommandResult`` objects into console text lines."""

from __future__ import annotations

from typing import Dict, List

from .models import PlaybackState
from .results import CommandResult, ResultKind

INDENT = "  "
SEARCH_PROMPT = [
    "Would you like to play any of the above? If yes, specify the number of the video.",
    "If your answer is not a valid number, we will assume it's a no.",
]

# "Cannot <action>: <reason>" prefixes per command; {name} is the playlist
# name as the caller typed it.
_FAILURE_PREFIX: Dict[str, str] = {
    "play": "Cannot play video",
    "play_random": "Cannot play video",
    "stop": "Cannot stop video",
    "pause": "Cannot pause video",
    "resume": "Cannot continue video",
    "create_playlist": "Cannot create playlist",
    "add_to_playlist": "Cannot add video to {name}",
    "show_playlist": "Cannot show playlist {name}",
    "remove_from_playlist": "Cannot remove video from {name}",
    "clear_playlist": "Cannot clear playlist {name}",
    "delete_playlist": "Cannot delete playlist {name}",
    "flag": "Cannot flag video",
    "unflag": "Cannot remove flag from video",
}

_FAILURE_REASON: Dict[ResultKind, str] = {
    ResultKind.VIDEO_NOT_FOUND: "Video does not exist",
    ResultKind.PLAYLIST_NOT_FOUND: "Playlist does not exist",
    ResultKind.DUPLICATE_NAME: "A playlist with the same name already exists",
    ResultKind.DUPLICATE_VIDEO: "Video already added",
    ResultKind.NOT_IN_PLAYLIST: "Video is not in playlist",
    ResultKind.ALREADY_FLAGGED: "Video is already flagged",
    ResultKind.NOT_FLAGGED: "Video is not flagged",
    ResultKind.VIDEO_FLAGGED: "Video is currently flagged (reason: {reason})",
    ResultKind.NOT_PAUSED: "Video is not paused",
    ResultKind.NOTHING_PLAYING: "No video is currently playing",
}


def _render_failure(result: CommandResult) -> List[str]:
    if result.kind is ResultKind.ALREADY_PAUSED:
        return [f"Video already paused: {result.video.title}"]
    if result.kind is ResultKind.LIBRARY_EMPTY:
        return ["No videos available"]
    prefix = _FAILURE_PREFIX.get(result.command, "Cannot complete command")
    reason = _FAILURE_REASON[result.kind]
    return [
        prefix.format(name=result.name) + ": " + reason.format(reason=result.reason)
    ]


def _render_search(result: CommandResult) -> List[str]:
    if not result.videos:
        return [f"No search results for {result.term}"]
    lines = [f"Here are the results for {result.term}:"]
    for i, v in enumerate(result.videos, start=1):
        lines.append(f"{INDENT}{i}) {v.display_line()}")
    lines.extend(SEARCH_PROMPT)
    return lines


def render(result: CommandResult) -> List[str]:
    if not result.ok:
        return _render_failure(result)

    kind = result.kind
    lines: List[str] = []
    if kind is ResultKind.VIDEO_COUNT:
        lines.append(f"{result.count} videos in the library")
    elif kind is ResultKind.VIDEO_LIST:
        lines.append("Here's a list of all available videos:")
        lines.extend(INDENT + v.display_line() for v in result.videos)
    elif kind is ResultKind.PLAYING:
        if result.stopped is not None:
            lines.append(f"Stopping video: {result.stopped.title}")
        lines.append(f"Playing video: {result.video.title}")
    elif kind is ResultKind.STOPPED:
        lines.append(f"Stopping video: {result.video.title}")
    elif kind is ResultKind.PAUSED:
        lines.append(f"Pausing video: {result.video.title}")
    elif kind is ResultKind.RESUMED:
        lines.append(f"Continuing video: {result.video.title}")
    elif kind is ResultKind.STATUS:
        status = result.status
        if status is None or status.is_stopped:
            lines.append("No video is currently playing")
        else:
            line = f"Currently playing: {status.video.display_line()}"
            if status.state is PlaybackState.PAUSED:
                line += " - PAUSED"
            lines.append(line)
    elif kind is ResultKind.PLAYLIST_CREATED:
        lines.append(f"Successfully created new playlist: {result.name}")
    elif kind is ResultKind.VIDEO_ADDED:
        lines.append(f"Added video to {result.name}: {result.video.title}")
    elif kind is ResultKind.PLAYLIST_LIST:
        if not result.playlists:
            lines.append("No playlists exist yet")
        else:
            lines.append("Showing all playlists:")
            lines.extend(INDENT + p.name for p in result.playlists)
    elif kind is ResultKind.PLAYLIST_SHOWN:
        lines.append(f"Showing playlist: {result.name}")
        if not result.videos:
            lines.append(f"{INDENT}No videos here yet")
        else:
            lines.extend(INDENT + v.display_line() for v in result.videos)
    elif kind is ResultKind.VIDEO_REMOVED:
        lines.append(f"Removed video from {result.name}: {result.video.title}")
    elif kind is ResultKind.PLAYLIST_CLEARED:
        lines.append(f"Successfully removed all videos from {result.name}")
    elif kind is ResultKind.PLAYLIST_DELETED:
        lines.append(f"Deleted playlist: {result.name}")
    elif kind is ResultKind.SEARCH_RESULTS:
        lines.extend(_render_search(result))
    elif kind is ResultKind.FLAGGED:
        if result.stopped is not None:
            lines.append(f"Stopping video: {result.stopped.title}")
        lines.append(
            f"Successfully flagged video: {result.video.title} (reason: {result.reason})"
        )
    elif kind is ResultKind.UNFLAGGED:
        lines.append(f"Successfully removed flag from video: {result.video.title}")
    return lines


__all__ = ["render", "SEARCH_PROMPT"]
