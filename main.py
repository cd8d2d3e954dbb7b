"""Entrypoint launching the command-line video player."""

import sys

from video_player.cli import run_cli


def main():
    # Interactive loop unless -c/--tui say otherwise
    sys.exit(run_cli())


if __name__ == "__main__":
    main()
