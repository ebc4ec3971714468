"""Command-line entry point: solve mode, settings loading and player wiring."""

import io
import json

from TicTacToe_AI import main as main_mod
from TicTacToe_AI.Board import Board, Mark
from TicTacToe_AI.EnginePlayer import EnginePlayer
from TicTacToe_AI.Player import HumanPlayer
from TicTacToe_AI.ai import difficulty
from TicTacToe_AI.ai.difficulty import DifficultySettings
from TicTacToe_AI.gui.text_view import TextView, render_text


def _empty_rows(size=20):
    return [[{"mark": None, "latest": False} for _ in range(size)] for _ in range(size)]


def test_solve_reads_request_file(tmp_path, capsys):
    path = tmp_path / "request.json"
    path.write_text(json.dumps({"board": _empty_rows(), "difficulty": 5}), encoding="utf-8")

    assert main_mod.main(["--mode", "solve", "--request", str(path)]) == 0
    assert json.loads(capsys.readouterr().out) == {"row": 10, "col": 10}


def test_solve_reads_stdin(monkeypatch, capsys):
    rows = _empty_rows()
    for col in (3, 4, 6, 7):
        rows[5][col] = {"mark": "X", "latest": False}
    monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps({"board": rows})))

    assert main_mod.main(["--mode", "solve"]) == 0
    assert json.loads(capsys.readouterr().out) == {"row": 5, "col": 5}


def test_solve_rejects_malformed_request(tmp_path, capsys):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"board": _empty_rows(3)}), encoding="utf-8")

    assert main_mod.main(["--mode", "solve", "--request", str(path)]) == 2
    assert "Invalid request" in capsys.readouterr().err


def test_solve_missing_request_file(tmp_path):
    assert main_mod.main(["--mode", "solve", "--request", str(tmp_path / "missing.json")]) == 2


def test_solve_uses_difficulty_levels_from_settings(tmp_path, monkeypatch, capsys):
    settings = tmp_path / "settings.yaml"
    settings.write_text("difficulty_levels:\n  2: {depth: 1, candidate_limit: 4}\n", encoding="utf-8")
    request = tmp_path / "request.json"
    request.write_text(json.dumps({"board": _empty_rows(), "difficulty": 2}), encoding="utf-8")
    seen = []
    real_compute = main_mod.compute_ai_move

    def recording_compute(req, table=None):
        seen.append(table)
        return real_compute(req, table=table)

    monkeypatch.setattr(main_mod, "compute_ai_move", recording_compute)

    assert main_mod.main(["--mode", "solve", "--settings", str(settings), "--request", str(request)]) == 0
    assert json.loads(capsys.readouterr().out) == {"row": 10, "col": 10}
    assert seen[0][2] == DifficultySettings(depth=1, range=2, candidate_limit=4)
    assert seen[0][3] == difficulty.DEFAULT_TABLE[3]


def test_solve_accepts_infinite_difficulty(tmp_path, capsys):
    path = tmp_path / "request.json"
    path.write_text('{"board": %s, "difficulty": Infinity}' % json.dumps(_empty_rows()), encoding="utf-8")

    assert main_mod.main(["--mode", "solve", "--request", str(path)]) == 0
    assert json.loads(capsys.readouterr().out) == {"row": 10, "col": 10}


def test_load_settings_resolves_packaged_file():
    settings = main_mod.load_settings("config/settings.yaml")
    assert settings["board_size"] == 20
    assert settings["difficulty"] == 3


def test_load_settings_missing_file_is_empty(tmp_path):
    assert main_mod.load_settings(tmp_path / "none.yaml") == {}


def test_build_players_modes():
    players = main_mod.build_players("human-vs-ai", 3, None, 1000)
    assert isinstance(players[Mark.B], HumanPlayer)
    assert isinstance(players[Mark.A], EnginePlayer)
    assert players[Mark.A].context is None

    players = main_mod.build_players("ai-vs-ai", 1, None, 1000)
    assert players[Mark.B].mark is Mark.B
    assert players[Mark.A].max_entries == 1000


def test_ai_vs_ai_game_runs_to_completion(monkeypatch, capsys):
    monkeypatch.setattr(main_mod.TextView, "render", lambda self, *args: None)
    assert main_mod.main(["--mode", "ai-vs-ai", "--board-size", "7", "--difficulty", "1"]) == 0
    out = capsys.readouterr().out
    assert any(line in out for line in ("X wins", "O wins", "Draw"))


def test_render_text_marks_latest_stone():
    b = Board(size=5)
    b.place(0, 0, Mark.B)
    b.place(1, 1, Mark.A)
    lines = render_text(b).splitlines()
    assert len(lines) == 6
    assert " X " in lines[1]
    assert "[O]" in lines[2]

    seen = []
    TextView(out=seen.append).render(b, (1, 1), Mark.B, None)
    assert seen[-1] == "X to move"
