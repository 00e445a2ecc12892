"""Tests for the Server/Local location selector."""

from filepick_logics.data_model import FileLocation
from filepick_logics.location import LocationSelector


def test_both_defaults_to_server_and_is_visible():
    selector = LocationSelector(FileLocation.BOTH)
    assert selector.choice is FileLocation.SERVER
    assert selector.visible
    assert selector.options() == [FileLocation.SERVER, FileLocation.LOCAL]


def test_single_origin_is_forced_and_hidden():
    selector = LocationSelector(FileLocation.LOCAL)
    assert selector.choice is FileLocation.LOCAL
    assert not selector.visible
    assert selector.options() == [FileLocation.LOCAL]

    selector.set_choice(FileLocation.SERVER)
    assert selector.choice is FileLocation.LOCAL


def test_accepts_string_values():
    selector = LocationSelector("Server")
    assert selector.choice is FileLocation.SERVER
    assert not selector.visible


def test_callback_only_on_real_change():
    selector = LocationSelector()
    seen = []
    selector.on_change(seen.append)

    selector.set_choice(FileLocation.SERVER)
    selector.set_choice("Local")
    selector.set_choice(FileLocation.LOCAL)
    selector.set_choice(FileLocation.BOTH)

    assert seen == [FileLocation.LOCAL]
    assert selector.choice is FileLocation.LOCAL


def test_both_is_not_a_selectable_choice(capsys):
    selector = LocationSelector(FileLocation.BOTH)
    selector.set_choice(FileLocation.BOTH)

    assert selector.choice is FileLocation.SERVER
    out = capsys.readouterr().out
    assert "not a selectable location" in out
    assert "locked" not in out


def test_locked_selector_reports_lock(capsys):
    selector = LocationSelector(FileLocation.SERVER)
    selector.set_choice(FileLocation.LOCAL)
    assert "locked to Server" in capsys.readouterr().out
