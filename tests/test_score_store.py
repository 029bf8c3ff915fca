"""Tests for the JSON file score store."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from shadow_rush.game_state import HighScoreEntry
from shadow_rush.score_store import JsonFileScoreStore


KEY = "mordor-high-scores"


def test_missing_file_loads_empty(tmp_path: Path) -> None:
    store = JsonFileScoreStore(tmp_path / "scores.json")
    assert store.load() == []


def test_save_then_load(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "scores.json"
    store = JsonFileScoreStore(path)
    entries = [HighScoreEntry(12, "2025-01-01T00:00:00.000Z"), HighScoreEntry(4, "2025-01-02T00:00:00.000Z")]

    store.save(entries)

    payload = json.loads(path.read_text(encoding="utf-8"))
    assert payload == {KEY: [e.to_dict() for e in entries]}
    assert JsonFileScoreStore(path).load() == entries


def test_invalid_json_loads_empty(tmp_path: Path) -> None:
    path = tmp_path / "scores.json"
    path.write_text("{not-json", encoding="utf-8")

    assert JsonFileScoreStore(path).load() == []


@pytest.mark.parametrize("document", [[1, 2, 3], {KEY: "nope"}, {KEY: {"score": 3}}, {"other": []}])
def test_wrong_shape_loads_empty(tmp_path: Path, document: object) -> None:
    path = tmp_path / "scores.json"
    path.write_text(json.dumps(document), encoding="utf-8")

    assert JsonFileScoreStore(path).load() == []


def test_save_preserves_other_keys(tmp_path: Path) -> None:
    path = tmp_path / "scores.json"
    path.write_text(json.dumps({"theme": "forge"}), encoding="utf-8")

    JsonFileScoreStore(path).save([HighScoreEntry(1, "x")])

    payload = json.loads(path.read_text(encoding="utf-8"))
    assert payload["theme"] == "forge"
    assert payload[KEY] == [{"score": 1, "date": "x"}]


def test_custom_key(tmp_path: Path) -> None:
    path = tmp_path / "scores.json"
    JsonFileScoreStore(path, key="other").save([HighScoreEntry(2, "y")])

    assert JsonFileScoreStore(path).load() == []
    assert JsonFileScoreStore(path, key="other").load() == [HighScoreEntry(2, "y")]


def test_write_failure_is_not_fatal(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    # parent "directory" is a file, so mkdir/open fails
    store = JsonFileScoreStore(blocker / "scores.json")

    store.save([HighScoreEntry(1, "x")])

    assert store.load() == []


def test_failed_replace_leaves_no_temp_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "scores.json"
    store = JsonFileScoreStore(path)
    store.save([HighScoreEntry(4, "a")])
    before = path.read_text(encoding="utf-8")

    def _fail(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr("shadow_rush.score_store.os.replace", _fail)
    store.save([HighScoreEntry(9, "b")])

    assert not (tmp_path / "scores.json.tmp").exists()
    assert path.read_text(encoding="utf-8") == before
    assert store.load() == [HighScoreEntry(4, "a")]
