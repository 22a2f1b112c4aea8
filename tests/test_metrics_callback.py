"""Tests for the training metrics callback."""

import csv

import pytest

pytest.importorskip("stable_baselines3")

from rl.metrics_callback import MetricsCallback  # noqa: E402


def test_records_finished_episodes(tmp_path):
    cb = MetricsCallback(log_dir=str(tmp_path), algo_name="ppo", verbose=0)
    cb._on_training_start()

    cb.locals = {
        "infos": [
            {"episode": {"r": 2.5, "l": 300}, "score": 30, "flowers_collected": 3, "best": 30},
            {"score": 10},
        ],
        "dones": [True, False],
    }
    assert cb._on_step() is True
    cb._on_training_end()

    assert cb.episode_scores == [30]
    assert cb.episode_flowers == [3]

    with open(tmp_path / "ppo_metrics.csv", newline="") as f:
        rows = list(csv.reader(f))
    assert rows[0] == ["timestep", "episode", "reward", "length", "score", "flowers", "best"]
    assert rows[1][1:] == ["1", "2.5", "300", "30", "3", "30"]

    summary = cb.get_summary()
    assert summary["total_episodes"] == 1
    assert summary["max_score"] == 30


def test_empty_summary(tmp_path):
    cb = MetricsCallback(log_dir=str(tmp_path), algo_name="ppo", verbose=0)
    assert cb.get_summary() == {}
