import csv
import json

import pytest

from blackhole.headless import run_headless
from blackhole.sim.core.config import OrbConfig
from conftest import make_config


def _read_csv(path):
    with path.open(newline="") as handle:
        return list(csv.reader(handle))


def test_headless_basic_log_header(tmp_path):
    log_path = tmp_path / "basic.csv"
    run_headless(
        steps=2,
        seed=1,
        log_path=log_path,
        deterministic_log=True,
        log_format="basic",
        config=make_config(bot_count=0, food_target=10),
    )
    rows = _read_csv(log_path)
    assert len(rows) == 3
    assert rows[0] == [
        "tick",
        "alive_orbs",
        "food_count",
        "player_radius",
        "player_score",
        "game_over",
        "step_ms",
    ]
    assert rows[1][0] == "1"
    assert rows[2][-1] == "0.000"


def test_headless_detailed_log_is_reproducible(tmp_path):
    paths = [tmp_path / "a.csv", tmp_path / "b.csv"]
    for path in paths:
        run_headless(
            steps=20,
            seed=2,
            log_path=path,
            deterministic_log=True,
            config=make_config(bot_count=6, food_target=100),
        )
    rows_a = _read_csv(paths[0])
    rows_b = _read_csv(paths[1])
    assert rows_a == rows_b
    header = rows_a[0]
    idx = {name: i for i, name in enumerate(header)}
    for row in rows_a[1:]:
        assert int(row[idx["food_count"]]) == 100
        assert float(row[idx["largest_radius"]]) >= float(row[idx["mean_radius"]])


def test_headless_stops_on_game_over(tmp_path):
    summary_path = tmp_path / "summary.json"
    config = make_config(orb=OrbConfig(player_radius=5.0), bot_count=40, food_target=0)
    world = run_headless(
        steps=5000,
        seed=3,
        log_path=None,
        deterministic_log=True,
        summary_path=summary_path,
        config=config,
    )
    payload = json.loads(summary_path.read_text())
    assert payload["steps"] == 5000
    assert payload["seed"] == 3
    assert payload["game_over"] == world.game_over
    if world.game_over:
        assert payload["ticks_run"] == payload["game_over_tick"]
    assert payload["ticks_run"] == world.tick
    assert "player_radius" in payload


def test_headless_rejects_unknown_log_format(tmp_path):
    with pytest.raises(ValueError):
        run_headless(steps=1, seed=1, log_path=None, log_format="verbose")
