"""Textual command dispatcher: one input line -> one player call -> text reply.

After a search that produced results, the next line is consumed as the
follow-up selection rather than parsed as a command.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

from .logging_utils import get_logger
from .player import VideoPlayer
from .rendering import render
from .results import CommandResult, ResultKind

INVALID_COMMAND = (
    "Please enter a valid command, type HELP for a list of available commands."
)
GOODBYE = "Video player has now terminated its execution. Thank you and goodbye!"

HELP_LINES = [
    "Available commands:",
    "    NUMBER_OF_VIDEOS - Shows how many videos are in the library.",
    "    SHOW_ALL_VIDEOS - Lists all videos from the library.",
    "    PLAY <video_id> - Plays specified video.",
    "    PLAY_RANDOM - Plays a random video from the library.",
    "    STOP - Stop the current video.",
    "    PAUSE - Pause the current video.",
    "    CONTINUE - Resume the current paused video.",
    "    SHOW_PLAYING - Displays the title, video_id and tags of the video currently playing.",
    "    CREATE_PLAYLIST <playlist_name> - Creates a new (empty) playlist with the provided name.",
    "    ADD_TO_PLAYLIST <playlist_name> <video_id> - Adds the requested video to the playlist.",
    "    REMOVE_FROM_PLAYLIST <playlist_name> <video_id> - Removes the specified video from the specified playlist",
    "    CLEAR_PLAYLIST <playlist_name> - Removes all the videos from the playlist.",
    "    DELETE_PLAYLIST <playlist_name> - Deletes the playlist.",
    "    SHOW_PLAYLIST <playlist_name> - List all the videos in this playlist.",
    "    SHOW_ALL_PLAYLISTS - Display all the available playlists.",
    "    SEARCH_VIDEOS <search_term> - Display all the videos whose titles contain the search_term.",
    "    SEARCH_VIDEOS_WITH_TAG <tag_name> - Display all videos whose tags contains the provided tag.",
    "    FLAG_VIDEO <video_id> <flag_reason> - Mark a video as flagged.",
    "    ALLOW_VIDEO <video_id> - Removes a flag from a video.",
    "    HELP - Displays help.",
    "    EXIT - Terminates the program execution.",
]


@dataclass
class Reply:
    lines: List[str] = field(default_factory=list)
    ok: bool = True


Handler = Callable[[List[str]], CommandResult]


class CommandDispatcher:
    def __init__(self, player: VideoPlayer):
        self.player = player
        self.finished = False
        self._pending_search: Optional[CommandResult] = None
        self._log = get_logger()
        p = player
        # word -> (min args, max args or None for "rest of line", handler)
        self._commands: Dict[str, Tuple[int, Optional[int], Handler]] = {
            "NUMBER_OF_VIDEOS": (0, 0, lambda a: p.number_of_videos()),
            "SHOW_ALL_VIDEOS": (0, 0, lambda a: p.list_all()),
            "PLAY": (1, 1, lambda a: p.play(a[0])),
            "PLAY_RANDOM": (0, 0, lambda a: p.play_random()),
            "STOP": (0, 0, lambda a: p.stop()),
            "PAUSE": (0, 0, lambda a: p.pause()),
            "CONTINUE": (0, 0, lambda a: p.resume()),
            "SHOW_PLAYING": (0, 0, lambda a: p.show_playing()),
            "CREATE_PLAYLIST": (1, 1, lambda a: p.create_playlist(a[0])),
            "ADD_TO_PLAYLIST": (2, 2, lambda a: p.add_to_playlist(a[0], a[1])),
            "REMOVE_FROM_PLAYLIST": (2, 2, lambda a: p.remove_from_playlist(a[0], a[1])),
            "CLEAR_PLAYLIST": (1, 1, lambda a: p.clear_playlist(a[0])),
            "DELETE_PLAYLIST": (1, 1, lambda a: p.delete_playlist(a[0])),
            "SHOW_PLAYLIST": (1, 1, lambda a: p.show_playlist(a[0])),
            "SHOW_ALL_PLAYLISTS": (0, 0, lambda a: p.show_all_playlists()),
            "SEARCH_VIDEOS": (1, None, lambda a: p.search_by_title(" ".join(a))),
            "SEARCH_VIDEOS_WITH_TAG": (1, 1, lambda a: p.search_by_tag(a[0])),
            "FLAG_VIDEO": (1, None, lambda a: p.flag(a[0], " ".join(a[1:]) or None)),
            "ALLOW_VIDEO": (1, 1, lambda a: p.unflag(a[0])),
        }

    @property
    def awaiting_selection(self) -> bool:
        return self._pending_search is not None

    def handle(self, line: str) -> Reply:
        if self._pending_search is not None:
            return self._answer_search(line)

        tokens = line.split()
        if not tokens:
            return Reply()
        word, args = tokens[0].upper(), tokens[1:]
        if word == "EXIT":
            self.finished = True
            return Reply([GOODBYE])
        if word == "HELP":
            return Reply(list(HELP_LINES))

        entry = self._commands.get(word)
        if entry is None:
            self._log.debug(f"Unknown command: {line!r}")
            return Reply([INVALID_COMMAND], ok=False)
        min_args, max_args, handler = entry
        if len(args) < min_args or (max_args is not None and len(args) > max_args):
            self._log.debug(f"Wrong arguments for {word}: {args}")
            return Reply([INVALID_COMMAND], ok=False)

        result = handler(args)
        if result.kind is ResultKind.SEARCH_RESULTS and result.videos:
            self._pending_search = result
        return Reply(render(result), result.ok)

    def _answer_search(self, answer: str) -> Reply:
        results, self._pending_search = self._pending_search, None
        played = self.player.play_search_result(results, answer)
        if played is None:
            return Reply()
        return Reply(render(played), played.ok)


__all__ = ["CommandDispatcher", "Reply", "GOODBYE", "HELP_LINES", "INVALID_COMMAND"]
