# tests/test_cli.py

import json

import pytest

import cli.main as main
from cli.menus import assignments_menu


def feed_input(monkeypatch, *answers):
    answers = iter(answers)
    monkeypatch.setattr("builtins.input", lambda _prompt="": next(answers))


def test_add_assignment_flow(monkeypatch, capsys, empty_session):
    feed_input(monkeypatch, "Quiz", "7", "4.5", "n")

    assignments_menu.add_assignment(empty_session)

    out = capsys.readouterr().out
    assert "Please enter a valid grade (0-5)." in out
    assert "Assignment added successfully!" in out
    assert [a.name for a in empty_session.assignments] == ["Quiz"]


def test_add_duplicate_is_reported(monkeypatch, capsys, sample_session):
    feed_input(monkeypatch, "essay", "3", "n")

    assignments_menu.add_assignment(sample_session)

    out = capsys.readouterr().out
    assert "[ERROR: DUPLICATE_NAME]" in out
    assert len(sample_session.assignments) == 4


def test_add_cancel_on_blank_name(monkeypatch, empty_session):
    feed_input(monkeypatch, "")

    assignments_menu.add_assignment(empty_session)

    assert empty_session.assignments == ()


def test_remove_from_list_flow(monkeypatch, capsys, sample_session):
    # pick "select from all", choose the second entry, confirm
    feed_input(monkeypatch, "2", "2", "y")

    assignments_menu.find_and_remove_assignment(sample_session)

    out = capsys.readouterr().out
    assert '"Quiz 1" removed successfully' in out
    assert [a.id for a in sample_session.assignments] == [1, 3, 4]


def test_remove_by_search_declined(monkeypatch, sample_session):
    feed_input(monkeypatch, "1", "lab", "n")

    assignments_menu.find_and_remove_assignment(sample_session)

    assert len(sample_session.assignments) == 4


def test_dump_to_console(capsys, sample_session):
    assignments_menu.dump_to_console(sample_session)

    assert "GPA: 4.13 (B)" in capsys.readouterr().out


def test_export_flow(monkeypatch, capsys, sample_session, tmp_path):
    feed_input(monkeypatch, str(tmp_path / "exports"))

    assignments_menu.export_data(sample_session, str(tmp_path))

    exported = list((tmp_path / "exports").iterdir())
    assert len(exported) == 1
    assert json.loads(exported[0].read_text())["totalAssignments"] == 4
    assert "Data exported to" in capsys.readouterr().out


def test_run_cli_persists_between_runs(monkeypatch, capsys, tmp_path):
    environ = {"GPA_TRACKER_DATA_DIR": str(tmp_path)}

    # add one assignment, decline adding more, exit
    feed_input(monkeypatch, "1", "Essay", "4", "n", "0")

    with pytest.raises(SystemExit):
        main.run_cli(environ)

    assert (tmp_path / "storage.json").exists()

    feed_input(monkeypatch, "0")

    with pytest.raises(SystemExit):
        main.run_cli(environ)

    out = capsys.readouterr().out
    assert "Essay" in out
    assert "GPA: 4.00 (B) | 1 assignment" in out
