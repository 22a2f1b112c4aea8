"""Tests for the training result plots."""

import numpy as np
import pytest

pd = pytest.importorskip("pandas")
pytest.importorskip("matplotlib")

from rl.plot_results import load_metrics, plot_learning_curve, smooth  # noqa: E402


def test_smooth_short_series_unchanged():
    data = np.array([1.0, 2.0, 3.0])
    np.testing.assert_array_equal(smooth(data, window=10), data)


def test_smooth_rolling_mean():
    np.testing.assert_allclose(smooth(np.array([0.0, 2.0, 4.0, 6.0]), window=2), [1.0, 3.0, 5.0])


def test_load_and_plot(tmp_path):
    log_dir = tmp_path / "logs" / "ppo"
    log_dir.mkdir(parents=True)
    df = pd.DataFrame({
        "timestep": np.arange(1, 101) * 100,
        "episode": np.arange(1, 101),
        "reward": np.linspace(-5, 3, 100),
        "length": np.arange(100, 200),
        "score": np.arange(100) // 10 * 10,
        "flowers": np.arange(100) // 10,
        "best": np.arange(100) // 10 * 10,
    })
    df.to_csv(log_dir / "ppo_metrics.csv", index=False)

    loaded = load_metrics(str(tmp_path / "logs"), "ppo")
    assert loaded is not None and len(loaded) == 100

    out = plot_learning_curve(loaded, "ppo", str(tmp_path / "figures"), window=10)
    assert out.endswith("ppo_learning_curves.png")
    assert (tmp_path / "figures" / "ppo_learning_curves.png").exists()


def test_missing_metrics(tmp_path):
    assert load_metrics(str(tmp_path), "ppo") is None
