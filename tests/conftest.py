import io
import logging
import random
import sys
from pathlib import Path
import pytest

# Ensure project root on sys.path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from video_player.catalog import Catalog  # noqa: E402
from video_player.logging_utils import get_logger  # noqa: E402
from video_player.player import VideoPlayer  # noqa: E402


@pytest.fixture(autouse=True)
def reset_log_level():
    yield
    get_logger().setLevel(logging.WARNING)


@pytest.fixture()
def catalog():
    return Catalog.from_entries(
        [
            ("amazing_cats", "cat1", ["cat", "animal"]),
            ("funny_dogs", "dog1", ["dog", "animal"]),
            ("Life at Google", "google1", ["#google", "#career"]),
            ("Video about nothing", "nothing1", []),
        ]
    )


@pytest.fixture()
def player(catalog):
    return VideoPlayer(catalog, rng=random.Random(1234))


@pytest.fixture()
def library_file(tmp_path):
    path = tmp_path / "videos.txt"
    path.write_text(
        "amazing_cats | cat1 | cat,animal\n"
        "funny_dogs | dog1 | dog,animal\n"
        "\n"
        "Video about nothing | nothing1 |\n"
    )
    return path


@pytest.fixture()
def run_cli(capsys, tmp_path, monkeypatch):
    """Run the CLI in-process; returns (exit code, stdout, stderr)."""
    from video_player import cli

    monkeypatch.setattr(cli, "DEFAULT_CONFIG_PATH", tmp_path / "no-config.json")

    def runner(args, stdin_text=""):
        try:
            code = cli.run_cli(args, stdin=io.StringIO(stdin_text))
        except SystemExit as e:
            code = e.code
        out, err = capsys.readouterr()
        return code, out, err

    return runner
