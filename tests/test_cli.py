import json
from pathlib import Path

from voxlist.cli import main


def _write_script(path: Path, steps: list[dict]) -> str:
    path.write_text(json.dumps(steps, ensure_ascii=False), encoding="utf-8")
    return str(path)


def test_cli_no_args_shows_help(capsys) -> None:
    exit_code = main([])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert "usage: voxlist" in captured.out


def test_cli_parse_returns_json(capsys) -> None:
    exit_code = main(["parse", "delete the milk", "--language", "en"])
    captured = capsys.readouterr()

    assert exit_code == 0
    payload = json.loads(captured.out)
    assert payload["normalized"] == "delete the milk"
    assert payload["command"] == {"kind": "delete", "name": "milk"}


def test_cli_replay_review_session(tmp_path: Path, capsys) -> None:
    script = _write_script(
        tmp_path / "session.json",
        [
            {"type": "press"},
            {"type": "transcript", "index": 0, "text": "two cuc"},
            {"type": "transcript", "index": 0, "text": "two cucumbers", "final": True},
            {"type": "ended"},
            {"type": "wait", "seconds": 0.5},
            {"type": "transcript", "index": 0, "text": "and eggs", "final": True},
            {"type": "release"},
            {"type": "confirm"},
        ],
    )

    exit_code = main(["replay", script, "--language", "en"])
    captured = capsys.readouterr()

    assert exit_code == 0
    payload = json.loads(captured.out)
    assert [session["status"] for session in payload["sessions"]] == ["review", "captured"]
    assert [(item["name"], item["quantity"]) for item in payload["items"]] == [
        ("cucumbers", 2),
        ("eggs", 1),
    ]


def test_cli_replay_direct_with_seed_and_undo(tmp_path: Path, capsys) -> None:
    script = _write_script(
        tmp_path / "session.json",
        [
            {"type": "press"},
            {"type": "transcript", "index": 0, "text": "milk 4", "final": True},
            {"type": "release"},
            {"type": "undo"},
        ],
    )

    exit_code = main(["replay", script, "--direct", "--item", "milk:2"])
    captured = capsys.readouterr()

    assert exit_code == 0
    payload = json.loads(captured.out)
    assert payload["reports"][0]["undo_available"] is True
    assert payload["undo"][0]["status"] == "applied"
    assert payload["items"] == [{"id": "seed-0", "name": "milk", "quantity": 2, "purchased": False}]


def test_cli_replay_rejects_bad_script(tmp_path: Path, capsys) -> None:
    script = tmp_path / "broken.json"
    script.write_text('{"type": "press"}', encoding="utf-8")

    exit_code = main(["replay", str(script)])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "JSON list" in captured.err


def test_cli_replay_rejects_unknown_step(tmp_path: Path, capsys) -> None:
    script = _write_script(tmp_path / "session.json", [{"type": "press"}, {"type": "dance"}])

    exit_code = main(["replay", script])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "step 1" in captured.err
