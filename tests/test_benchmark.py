import json

from wordlehelper import benchmark
from wordlehelper.classes.Session import Session


def test_run_game_solves_within_six(dictionary):
    session = Session(dictionary, workers=1)
    result = benchmark.run_game(session, "speed", 0, logging=False)

    assert result["success"]
    assert result["tries"] <= 6
    assert session.guesses[0].word == "slate"
    assert session.guesses[-1].word == "speed"


def test_main_writes_results(tmp_path, monkeypatch):
    monkeypatch.setattr(benchmark, "LOG_DIR", tmp_path)
    monkeypatch.setattr(benchmark, "HAS_WANDB", False)

    output = benchmark.main(num_runs=2, seed=7, logging=False)

    saved = json.loads((tmp_path / "self_play_results.json").read_text())
    assert saved["num_games"] == 2
    assert len(saved["games"]) == 2
    assert saved["win_rate"] == output["win_rate"]
