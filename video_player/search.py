from __future__ import annotations

from typing import Iterable, List, Optional

from .models import Video


def sort_by_title(videos: Iterable[Video]) -> List[Video]:
    # Ties on title fall back to id so ordering stays deterministic
    return sorted(videos, key=lambda v: (v.title, v.video_id))


def search_by_title(videos: Iterable[Video], term: str) -> List[Video]:
    """Case-insensitive substring match on title, flagged videos excluded."""
    needle = term.lower()
    return sort_by_title(
        v for v in videos if not v.flagged and needle in v.title.lower()
    )


def search_by_tag(videos: Iterable[Video], tag: str) -> List[Video]:
    """Exact case-insensitive match against any tag, flagged videos excluded."""
    wanted = tag.lower()
    return sort_by_title(
        v for v in videos if not v.flagged and any(t.lower() == wanted for t in v.tags)
    )


def parse_selection(answer: str | None, results: List[Video]) -> Optional[Video]:
    """Map a 1-based answer onto ``results``; anything else means no selection."""
    if answer is None:
        return None
    try:
        index = int(answer.strip())
    except ValueError:
        return None
    if 1 <= index <= len(results):
        return results[index - 1]
    return None


__all__ = ["parse_selection", "search_by_tag", "search_by_title", "sort_by_title"]
