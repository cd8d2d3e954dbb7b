"""Console video player package root.

Public surface kept intentionally small; internal modules may evolve.
"""

from .catalog import Catalog, load_catalog
from .config import AppConfig
from .models import PlaybackState, PlaybackStatus, Video
from .player import VideoPlayer
from .results import CommandResult, ResultKind

__all__ = [
    "AppConfig",
    "Catalog",
    "CommandResult",
    "PlaybackState",
    "PlaybackStatus",
    "ResultKind",
    "Video",
    "VideoPlayer",
    "load_catalog",
]


def main() -> int:
    """Run the command-line interface."""
    from .cli import run_cli

    return run_cli()
