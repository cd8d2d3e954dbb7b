"""Command-line interface: interactive loop or one-shot commands."""

from __future__ import annotations

import argparse
import json
import random
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from rich.console import Console

from .catalog import Catalog, load_catalog
from .commands import CommandDispatcher, Reply
from .config import DEFAULT_CONFIG_PATH, AppConfig
from .errors import CatalogFormatError
from .logging_utils import get_logger, set_level
from .player import VideoPlayer

WELCOME = "Hello and welcome to the video player! Type HELP for a list of available commands."
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Console video player")
    p.add_argument(
        "--library",
        type=Path,
        default=None,
        help="Catalog file, one 'title | video_id | tag1,tag2' per line (default: built-in sample)",
    )
    p.add_argument(
        "--seed", type=int, default=None, help="Random seed for PLAY_RANDOM"
    )
    p.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"JSON config file (default: {DEFAULT_CONFIG_PATH})",
    )
    p.add_argument("--log-level", choices=LOG_LEVELS, default=None, help="Log level")
    p.add_argument(
        "-c",
        "--command",
        dest="commands",
        action="append",
        default=[],
        help="Run a command and exit instead of reading stdin (repeatable)",
    )
    p.add_argument("--tui", action="store_true", help="Launch the Textual UI")
    return p


def load_config(parser: argparse.ArgumentParser, args: argparse.Namespace) -> AppConfig:
    # Only the implicit default path may be absent
    if args.config is not None and not args.config.exists():
        parser.error(f"Config file {args.config} does not exist")
    path = args.config or DEFAULT_CONFIG_PATH
    try:
        config = AppConfig.from_file(path)
    except (OSError, json.JSONDecodeError, TypeError) as e:
        parser.error(f"Invalid config file {path}: {e}")
    # Command line wins over the config file
    if args.library is not None:
        config.library_path = args.library
    if args.seed is not None:
        config.random_seed = args.seed
    if args.log_level is not None:
        config.log_level = args.log_level
    return config


def build_player(config: AppConfig) -> VideoPlayer:
    """Load the catalog named by ``config`` and wire up a player.

    Raises ``CatalogFormatError`` when the catalog file is unusable.
    """
    if config.library_path is not None:
        catalog = load_catalog(config.library_path)
    else:
        catalog = Catalog.sample()
    return VideoPlayer(
        catalog,
        rng=random.Random(config.random_seed),
        default_flag_reason=config.default_flag_reason,
    )


def print_reply(console: Console, reply: Reply) -> None:
    style = None if reply.ok else "yellow"
    for line in reply.lines:
        console.print(line, markup=False, highlight=False, emoji=False, style=style)


def run_cli(argv: list[str] | None = None, stdin: Optional[TextIO] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.tui and args.commands:
        parser.error("--tui cannot be combined with -c/--command")
    config = load_config(parser, args)
    try:
        set_level(config.log_level)
    except ValueError as e:
        parser.error(str(e))

    log = get_logger()
    try:
        player = build_player(config)
    except CatalogFormatError as e:
        parser.error(str(e))
    log.info(f"Catalog ready: {len(player.catalog)} videos")
    dispatcher = CommandDispatcher(player)

    if args.tui:
        from .tui import PlayerApp

        PlayerApp(dispatcher).run()
        return 0

    console = Console(soft_wrap=True)
    if args.commands:
        run_commands(console, dispatcher, args.commands)
        return 0
    run_loop(console, dispatcher, stdin or sys.stdin, config.prompt)
    return 0


def run_commands(console: Console, dispatcher: CommandDispatcher, commands: List[str]) -> None:
    for line in commands:
        print_reply(console, dispatcher.handle(line))
        if dispatcher.finished:
            break


def run_loop(
    console: Console, dispatcher: CommandDispatcher, stream: TextIO, prompt: str
) -> None:
    console.print(WELCOME, markup=False, highlight=False, emoji=False)
    while not dispatcher.finished:
        if not dispatcher.awaiting_selection:
            console.print(prompt, end="", markup=False, highlight=False, emoji=False)
        line = stream.readline()
        if not line:
            # End of input: also means "no selection" for a pending search
            break
        print_reply(console, dispatcher.handle(line.rstrip("\n")))


__all__ = ["build_parser", "build_player", "run_cli"]
