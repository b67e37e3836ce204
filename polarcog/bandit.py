"""Upper confidence bound scoring for multi-armed bandit arms."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass


@dataclass
class Arm:
    """A bandit arm with its pull count and accumulated reward."""

    id: int
    pulls: int
    total_reward: float


def ucb(arm: Arm, total_pulls: int) -> float:
    """Return the UCB1 score of *arm*; unexplored arms score infinity."""
    if arm.pulls == 0:
        return math.inf
    exploitation = arm.total_reward / arm.pulls
    exploration = math.sqrt(2 * math.log(total_pulls) / arm.pulls)
    return exploitation + exploration


def main(argv: list[str] | None = None) -> int:
    """Print UCB scores for a small set of example arms."""
    arms = [Arm(1, 10, 7.0), Arm(2, 5, 4.0), Arm(3, 0, 0.0)]
    total_pulls = sum(arm.pulls for arm in arms)
    print(f"Total pulls across all arms: {total_pulls}")
    for arm in arms:
        score = ucb(arm, total_pulls)
        print(
            f"UCB for Arm {arm.id} (Pulls: {arm.pulls}, "
            f"Reward: {arm.total_reward:.2f}): {score:.4f}"
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())