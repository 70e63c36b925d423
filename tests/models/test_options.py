from __future__ import annotations

from twitch_gql.models import GameOptions, GameSort, StreamOptions, StreamQueryOpts, StreamSort, User


def test_options_default_paging() -> None:
    opts = StreamQueryOpts()

    assert opts.first == 25
    assert opts.after is None
    assert opts.options is None


def test_options_accept_out_of_range_first() -> None:
    assert StreamQueryOpts(first=0).first == 0
    assert StreamQueryOpts(first=1000).first == 1000


def test_stream_options_serialize_with_wire_names() -> None:
    options = StreamOptions(sort=StreamSort.RECENT, tags=["English"], languages=["en", "de"])

    assert options.to_variables() == {"sort": "RECENT", "tags": ["English"], "broadcasterLanguages": ["en", "de"]}


def test_game_options_drop_unset_fields() -> None:
    assert GameOptions(sort=GameSort.VIEWER_COUNT).to_variables() == {"sort": "VIEWER_COUNT"}


def test_user_accepts_wire_and_python_names() -> None:
    assert User.model_validate({"displayName": "A"}).display_name == "A"
    assert User(display_name="A").display_name == "A"
    assert User(id=5).id == 5


def test_user_null_scalars_fall_back_to_defaults() -> None:
    user = User.model_validate({"id": "1", "login": None, "displayName": None, "createdAt": None})

    assert user.login == ""
    assert user.display_name == ""
    assert user.created_at is None
