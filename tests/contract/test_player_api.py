import pytest
from video_player.models import PlaybackState
from video_player.results import CommandResult, ResultKind

# Contract: every API call returns a CommandResult; failures never raise and
# never leave state partially mutated.


def playlist_ids(player, name):
    return [v.video_id for v in player.playlists.get(name)]


@pytest.mark.contract
@pytest.mark.parametrize(
    "call,kind",
    [
        (lambda p: p.play("missing"), ResultKind.VIDEO_NOT_FOUND),
        (lambda p: p.stop(), ResultKind.NOTHING_PLAYING),
        (lambda p: p.pause(), ResultKind.NOTHING_PLAYING),
        (lambda p: p.resume(), ResultKind.NOTHING_PLAYING),
        (lambda p: p.show_playlist("x"), ResultKind.PLAYLIST_NOT_FOUND),
        (lambda p: p.add_to_playlist("x", "cat1"), ResultKind.PLAYLIST_NOT_FOUND),
        (lambda p: p.remove_from_playlist("x", "cat1"), ResultKind.PLAYLIST_NOT_FOUND),
        (lambda p: p.clear_playlist("x"), ResultKind.PLAYLIST_NOT_FOUND),
        (lambda p: p.delete_playlist("x"), ResultKind.PLAYLIST_NOT_FOUND),
        (lambda p: p.flag("missing"), ResultKind.VIDEO_NOT_FOUND),
        (lambda p: p.unflag("missing"), ResultKind.VIDEO_NOT_FOUND),
        (lambda p: p.unflag("cat1"), ResultKind.NOT_FLAGGED),
    ],
)
def test_failures_are_results(player, call, kind):
    result = call(player)
    assert isinstance(result, CommandResult)
    assert result.kind is kind
    assert not result.ok


@pytest.mark.contract
def test_play_then_play_other_reports_stop(player):
    player.play("cat1")
    result = player.play("dog1")
    assert result.kind is ResultKind.PLAYING
    assert result.stopped.video_id == "cat1"
    assert result.video.video_id == "dog1"


@pytest.mark.contract
def test_replaying_current_only_stops_itself(player):
    player.play("cat1")
    result = player.play("cat1")
    assert result.kind is ResultKind.PLAYING
    assert result.stopped.video_id == "cat1"
    assert player.status().state is PlaybackState.PLAYING


@pytest.mark.contract
def test_pause_resume_keeps_video(player):
    player.play("cat1")
    assert player.pause().kind is ResultKind.PAUSED
    assert player.pause().kind is ResultKind.ALREADY_PAUSED
    assert player.resume().kind is ResultKind.RESUMED
    assert player.resume().kind is ResultKind.NOT_PAUSED
    status = player.status()
    assert status.state is PlaybackState.PLAYING
    assert status.video.video_id == "cat1"


@pytest.mark.contract
def test_flag_current_video_stops_playback(player):
    player.play("cat1")
    result = player.flag("cat1", "spam")
    assert result.kind is ResultKind.FLAGGED
    assert result.stopped.video_id == "cat1"
    assert player.status().is_stopped


@pytest.mark.contract
def test_flag_other_video_keeps_playback(player):
    player.play("dog1")
    result = player.flag("cat1")
    assert result.stopped is None
    assert result.reason == "Not supplied"
    assert player.status().video.video_id == "dog1"


@pytest.mark.contract
def test_flag_twice_keeps_reason(player):
    player.flag("cat1", "spam")
    result = player.flag("cat1", "other")
    assert result.kind is ResultKind.ALREADY_FLAGGED
    assert player.catalog.lookup("cat1").flag_reason == "spam"


@pytest.mark.contract
def test_play_flagged_is_noop(player):
    player.play("dog1")
    player.flag("cat1", "spam")
    result = player.play("cat1")
    assert result.kind is ResultKind.VIDEO_FLAGGED
    assert result.reason == "spam"
    assert player.status().video.video_id == "dog1"


@pytest.mark.contract
def test_create_duplicate_name(player):
    assert player.create_playlist("Foo").kind is ResultKind.PLAYLIST_CREATED
    assert player.create_playlist("foo").kind is ResultKind.DUPLICATE_NAME
    assert [p.name for p in player.show_all_playlists().playlists] == ["Foo"]


@pytest.mark.contract
def test_add_checks_in_order(player):
    player.create_playlist("Mix")
    assert player.add_to_playlist("Mix", "missing").kind is ResultKind.VIDEO_NOT_FOUND
    assert player.add_to_playlist("Mix", "cat1").kind is ResultKind.VIDEO_ADDED
    assert player.add_to_playlist("mix", "cat1").kind is ResultKind.DUPLICATE_VIDEO
    player.flag("dog1")
    assert player.add_to_playlist("Mix", "dog1").kind is ResultKind.VIDEO_FLAGGED
    assert playlist_ids(player, "Mix") == ["cat1"]


@pytest.mark.contract
def test_remove_and_clear_ignore_flags(player):
    player.create_playlist("Mix")
    player.add_to_playlist("Mix", "cat1")
    player.add_to_playlist("Mix", "dog1")
    player.flag("cat1")
    assert player.remove_from_playlist("Mix", "cat1").kind is ResultKind.VIDEO_REMOVED
    assert player.remove_from_playlist("Mix", "cat1").kind is ResultKind.NOT_IN_PLAYLIST
    assert player.remove_from_playlist("Mix", "missing").kind is ResultKind.VIDEO_NOT_FOUND
    assert player.clear_playlist("MIX").kind is ResultKind.PLAYLIST_CLEARED
    assert playlist_ids(player, "Mix") == []


@pytest.mark.contract
def test_show_playlist_includes_flagged_entries(player):
    player.create_playlist("Mix")
    player.add_to_playlist("Mix", "cat1")
    player.flag("cat1", "spam")
    result = player.show_playlist("mix")
    assert [v.video_id for v in result.videos] == ["cat1"]
    assert result.videos[0].flagged


@pytest.mark.contract
def test_delete_playlist(player):
    player.create_playlist("Mix")
    assert player.delete_playlist("MIX").kind is ResultKind.PLAYLIST_DELETED
    assert player.show_playlist("Mix").kind is ResultKind.PLAYLIST_NOT_FOUND
    assert player.create_playlist("mix").kind is ResultKind.PLAYLIST_CREATED


@pytest.mark.contract
def test_search_result_selection(player):
    results = player.search_by_tag("animal")
    assert [v.video_id for v in results.videos] == ["cat1", "dog1"]
    assert player.play_search_result(results, "nope") is None
    assert player.play_search_result(results, "3") is None
    played = player.play_search_result(results, "1")
    assert played.kind is ResultKind.PLAYING
    assert played.video.video_id == "cat1"


@pytest.mark.contract
def test_play_random_all_flagged(player, catalog):
    for v in catalog:
        player.flag(v.video_id)
    assert player.play_random().kind is ResultKind.LIBRARY_EMPTY
