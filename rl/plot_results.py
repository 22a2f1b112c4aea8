"""
Plotting script for garden training results.
Generates learning curves from the MetricsCallback CSV.
"""

import os
import argparse
from typing import Optional

import pandas as pd
import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt


def load_metrics(log_dir: str, algo: str = "ppo") -> Optional[pd.DataFrame]:
    """Load metrics CSV for an algorithm."""
    for csv_path in (os.path.join(log_dir, algo, f"{algo}_metrics.csv"),
                     os.path.join(log_dir, f"{algo}_metrics.csv")):
        if os.path.exists(csv_path):
            return pd.read_csv(csv_path)
    return None


def smooth(data: np.ndarray, window: int = 10) -> np.ndarray:
    """Apply rolling average smoothing."""
    if len(data) < window:
        return data
    kernel = np.ones(window) / window
    return np.convolve(data, kernel, mode="valid")


def plot_learning_curve(
    df: pd.DataFrame,
    algo: str,
    output_dir: str,
    window: int = 50,
) -> str:
    """Plot reward, length and score curves; returns the saved figure path."""
    fig, axes = plt.subplots(2, 2, figsize=(14, 10))
    fig.suptitle(f"{algo.upper()} on Pixel Bee Garden", fontsize=16, fontweight="bold")
    timesteps = df["timestep"].values

    panels = [
        (axes[0, 0], "reward", "Episode Reward", None),
        (axes[0, 1], "length", "Episode Length", "orange"),
        (axes[1, 0], "score", "Final Score", "green"),
    ]
    for ax, column, label, color in panels:
        smoothed = smooth(df[column].values.astype(float), window)
        ax.plot(timesteps[:len(smoothed)], smoothed, linewidth=2, color=color)
        ax.set_xlabel("Timesteps")
        ax.set_ylabel(label)
        ax.set_title(f"{label} vs Timesteps")
        ax.grid(True, alpha=0.3)

    # Score distribution histogram
    ax = axes[1, 1]
    scores = df["score"].values
    ax.hist(scores, bins=30, alpha=0.7, edgecolor="black")
    ax.axvline(np.mean(scores), color="red", linestyle="--", label=f"Mean: {np.mean(scores):.1f}")
    ax.set_xlabel("Final Score")
    ax.set_ylabel("Frequency")
    ax.set_title("Score Distribution")
    ax.legend()
    ax.grid(True, alpha=0.3)

    plt.tight_layout()
    os.makedirs(output_dir, exist_ok=True)
    out_path = os.path.join(output_dir, f"{algo}_learning_curves.png")
    fig.savefig(out_path, dpi=150)
    plt.close(fig)
    return out_path


def main():
    parser = argparse.ArgumentParser(description="Plot garden training results")
    parser.add_argument("--log-dir", type=str, default="./logs", help="Training log directory")
    parser.add_argument("--algo", type=str, default="ppo", help="Algorithm name (default: ppo)")
    parser.add_argument("--output-dir", type=str, default="./figures", help="Where to save plots")
    parser.add_argument("--window", type=int, default=50, help="Smoothing window (default: 50)")

    args = parser.parse_args()

    df = load_metrics(args.log_dir, args.algo)
    if df is None:
        print(f"No metrics found for {args.algo} in {args.log_dir}")
        return

    out_path = plot_learning_curve(df, args.algo, args.output_dir, window=args.window)
    print(f"Saved {len(df)} episodes of {args.algo} metrics to {out_path}")


if __name__ == "__main__":
    main()
