"""Video catalog: id -> Video lookup populated once at startup."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from .errors import CatalogFormatError, VideoNotFoundError
from .logging_utils import get_logger
from .models import Video

FIELD_SEP = "|"
TAG_SEP = ","

CatalogEntry = Tuple[str, str, Sequence[str]]  # (title, video_id, tags)

SAMPLE_ENTRIES: List[CatalogEntry] = [
    ("Funny Dogs", "funny_dogs_video_id", ["#dog", "#animal"]),
    ("Amazing Cats", "amazing_cats_video_id", ["#cat", "#animal"]),
    ("Another Cat Video", "another_cat_video_id", ["#cat", "#animal"]),
    ("Life at Google", "life_at_google_video_id", ["#google", "#career"]),
    ("Video about nothing", "nothing_video_id", []),
]


class Catalog:
    """Read-only set of videos keyed by id.

    Flag state lives on the ``Video`` objects themselves; the catalog only
    supplies lookup and enumeration.
    """

    def __init__(self, videos: Iterable[Video] = ()):
        self._videos: Dict[str, Video] = {}
        for v in videos:
            if v.video_id in self._videos:
                raise CatalogFormatError(f"Duplicate video id '{v.video_id}'")
            self._videos[v.video_id] = v

    @classmethod
    def from_entries(cls, entries: Iterable[CatalogEntry]) -> "Catalog":
        return cls(Video(title, video_id, tuple(tags)) for title, video_id, tags in entries)

    @classmethod
    def sample(cls) -> "Catalog":
        return cls.from_entries(SAMPLE_ENTRIES)

    def get(self, video_id: str) -> Optional[Video]:
        return self._videos.get(video_id)

    def lookup(self, video_id: str) -> Video:
        video = self._videos.get(video_id)
        if video is None:
            raise VideoNotFoundError(f"Video '{video_id}' does not exist")
        return video

    def all(self) -> List[Video]:
        return list(self._videos.values())

    def eligible(self) -> List[Video]:
        """Videos that may be played at random or returned by search."""
        return [v for v in self._videos.values() if not v.flagged]

    def __contains__(self, video_id: object) -> bool:
        return video_id in self._videos

    def __iter__(self) -> Iterator[Video]:
        return iter(self._videos.values())

    def __len__(self) -> int:
        return len(self._videos)


def parse_line(line: str, lineno: int = 0) -> CatalogEntry:
    """Parse ``title | video_id | tag1,tag2`` into a catalog entry."""
    parts = [p.strip() for p in line.split(FIELD_SEP)]
    if len(parts) < 2 or len(parts) > 3:
        raise CatalogFormatError(
            f"Line {lineno}: expected 'title | video_id | tags', got {line.strip()!r}"
        )
    title, video_id = parts[0], parts[1]
    if not title or not video_id:
        raise CatalogFormatError(f"Line {lineno}: title and video id are required")
    tags: List[str] = []
    if len(parts) == 3 and parts[2]:
        tags = [t.strip() for t in parts[2].split(TAG_SEP) if t.strip()]
    return title, video_id, tags


def load_catalog(path: Path) -> Catalog:
    """Load a catalog file, one video per line; blank lines are skipped."""
    log = get_logger()
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CatalogFormatError(f"Cannot read catalog {path}: {e}") from e
    entries: List[CatalogEntry] = []
    seen: set[str] = set()
    for lineno, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        entry = parse_line(line, lineno)
        if entry[1] in seen:
            raise CatalogFormatError(f"Line {lineno}: duplicate video id '{entry[1]}'")
        seen.add(entry[1])
        entries.append(entry)
    log.debug(f"Loaded {len(entries)} videos from {path}")
    return Catalog.from_entries(entries)


__all__ = ["Catalog", "CatalogEntry", "SAMPLE_ENTRIES", "load_catalog", "parse_line"]
