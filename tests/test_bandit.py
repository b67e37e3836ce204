import math

import pytest

from polarcog.bandit import Arm, main, ucb


def test_unpulled_arm_is_infinite():
    assert ucb(Arm(3, 0, 0.0), 15) == math.inf


def test_single_total_pull_gives_mean_reward():
    assert ucb(Arm(1, 1, 0.25), 1) == pytest.approx(0.25)


def test_score_exceeds_mean_reward():
    arm = Arm(1, 10, 7.0)
    assert ucb(arm, 15) > arm.total_reward / arm.pulls


def test_score_grows_with_total_pulls():
    arm = Arm(2, 5, 4.0)
    assert ucb(arm, 100) > ucb(arm, 15)


def test_fewer_pulls_mean_more_exploration():
    rarely = Arm(1, 2, 1.0)
    often = Arm(2, 20, 10.0)
    assert ucb(rarely, 22) > ucb(often, 22)


def test_main_prints_example(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Total pulls across all arms: 15"
    assert lines[1].startswith("UCB for Arm 1 (Pulls: 10, Reward: 7.00): ")
    assert lines[3] == "UCB for Arm 3 (Pulls: 0, Reward: 0.00): inf"
    assert float(lines[1].rsplit(" ", 1)[1]) == pytest.approx(ucb(Arm(1, 10, 7.0), 15), abs=1e-4)