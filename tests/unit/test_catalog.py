import pytest
from video_player.catalog import Catalog, SAMPLE_ENTRIES, load_catalog, parse_line
from video_player.errors import CatalogFormatError, VideoNotFoundError
from video_player.models import Video


def test_lookup_and_get(catalog):
    assert catalog.lookup("cat1").title == "amazing_cats"
    assert catalog.get("missing") is None
    with pytest.raises(VideoNotFoundError):
        catalog.lookup("missing")


def test_all_and_len(catalog):
    assert len(catalog) == 4
    assert {v.video_id for v in catalog.all()} == {"cat1", "dog1", "google1", "nothing1"}
    assert "cat1" in catalog


def test_eligible_excludes_flagged(catalog):
    catalog.lookup("cat1").flag("spam")
    assert "cat1" not in [v.video_id for v in catalog.eligible()]
    assert len(catalog.eligible()) == 3


def test_duplicate_ids_rejected():
    with pytest.raises(CatalogFormatError):
        Catalog([Video("a", "x"), Video("b", "x")])


def test_sample_catalog():
    cat = Catalog.sample()
    assert len(cat) == len(SAMPLE_ENTRIES)
    assert cat.lookup("nothing_video_id").tags == ()


@pytest.mark.parametrize(
    "line,expected",
    [
        ("Funny Dogs | funny_dogs_video_id | #dog , #animal", ("Funny Dogs", "funny_dogs_video_id", ["#dog", "#animal"])),
        ("Nothing | n1 |", ("Nothing", "n1", [])),
        ("Nothing | n1", ("Nothing", "n1", [])),
    ],
)
def test_parse_line(line, expected):
    assert parse_line(line) == expected


@pytest.mark.parametrize("line", ["just a title", " | id | tag", "t |  | tag", "a | b | c | d"])
def test_parse_line_invalid(line):
    with pytest.raises(CatalogFormatError):
        parse_line(line, 3)


def test_load_catalog(library_file):
    cat = load_catalog(library_file)
    assert len(cat) == 3
    assert cat.lookup("dog1").tags == ("dog", "animal")


def test_load_catalog_duplicate_id(tmp_path):
    p = tmp_path / "videos.txt"
    p.write_text("A | x | t\nB | x | u\n")
    with pytest.raises(CatalogFormatError, match="Line 2"):
        load_catalog(p)


def test_load_catalog_missing_file(tmp_path):
    with pytest.raises(CatalogFormatError):
        load_catalog(tmp_path / "nope.txt")


def test_load_catalog_not_utf8(tmp_path):
    p = tmp_path / "videos.txt"
    p.write_bytes(b"Caf\xe9 | cafe1 | food\n")
    with pytest.raises(CatalogFormatError, match="Cannot read catalog"):
        load_catalog(p)
