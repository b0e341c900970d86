"""Tests for the show_roster script."""

import json
import sys
from pathlib import Path

import pytest

from scripts import show_roster


def _run(monkeypatch, *argv: str) -> None:
    monkeypatch.setattr(sys, "argv", ["show_roster.py", *argv])
    show_roster.main()


def test_fetch_rosters_runs_each_game(mocker):
    mock_roster = mocker.patch(
        "banner_roster.roster.get_current_roster",
        side_effect=lambda game: [f"{game}-hero"],
    )

    result = show_roster.fetch_rosters(["genshin", "zzz"])

    assert result == {"genshin": ["genshin-hero"], "zzz": ["zzz-hero"]}
    assert mock_roster.call_count == 2


def test_roster_from_file(tmp_path: Path, zzz_html: str):
    page = tmp_path / "zzz.html"
    page.write_text(zzz_html, encoding="utf-8")

    assert show_roster.roster_from_file(page, "zzz") == ["Ellen", "Zhu Yuan"]


def test_roster_from_file_unknown_game(tmp_path: Path):
    with pytest.raises(ValueError, match="Unknown game"):
        show_roster.roster_from_file(tmp_path / "x.html", "wuwa")


def test_main_json_output(mocker, monkeypatch, capsys):
    mocker.patch("banner_roster.roster.get_current_roster", return_value=["Acheron"])

    _run(monkeypatch, "hsr", "starrail", "--json")

    assert json.loads(capsys.readouterr().out) == {"starrail": ["Acheron"]}


def test_main_exits_nonzero_on_empty_roster(mocker, monkeypatch):
    mocker.patch("banner_roster.roster.get_current_roster", return_value=[])

    with pytest.raises(SystemExit) as exc_info:
        _run(monkeypatch, "genshin")

    assert exc_info.value.code == 1


def test_main_unknown_game(monkeypatch, capsys):
    with pytest.raises(SystemExit) as exc_info:
        _run(monkeypatch, "wuwa")

    assert exc_info.value.code == 1
    assert "Unknown game 'wuwa'" in capsys.readouterr().err


def test_main_file_mode(monkeypatch, capsys, tmp_path: Path, genshin_html: str):
    page = tmp_path / "wish.html"
    page.write_text(genshin_html, encoding="utf-8")

    _run(monkeypatch, "genshin", "--file", str(page), "--json")

    assert json.loads(capsys.readouterr().out) == {"genshin": ["Alpha", "Beta"]}


def test_main_file_mode_requires_single_game(monkeypatch, tmp_path: Path):
    with pytest.raises(SystemExit):
        _run(monkeypatch, "--file", str(tmp_path / "x.html"))
