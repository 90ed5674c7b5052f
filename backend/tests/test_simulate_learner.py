"""Tests for the learner simulation script."""

import sys

from scripts.simulate_learner import main, simulate
from tests.helpers.seed import create_test_selector


class TestSimulate:
    """Tests for the simulation loop."""

    def test_every_round_picks_once(self):
        selector = create_test_selector("simulate")
        items = ["a", "i", "u"]

        picks = simulate(selector, items, {"a"}, 300, 0.6, 0.1, seed=5)

        assert sum(picks.values()) == 300
        assert set(picks) <= set(items)
        assert selector.snapshot()["tick"] == 300

    def test_weak_item_is_picked_most(self):
        """An item answered wrong most of the time dominates the picks."""
        selector = create_test_selector("simulate")

        picks = simulate(selector, ["a", "i", "u", "e", "o"], {"a"}, 2000, 0.9, 0.0, seed=7)

        assert picks.most_common(1)[0][0] == "a"


class TestMain:
    """Tests for the command-line entry point."""

    def test_prints_table(self, monkeypatch, capsys, restore_root_logger):
        monkeypatch.setattr(
            sys,
            "argv",
            ["simulate_learner", "--items", "a,i,u", "--weak", "a", "--rounds", "200", "--seed", "3"],
        )

        assert main() == 0

        lines = capsys.readouterr().out.splitlines()
        assert lines[0].split() == ["item", "picks", "share", "weight", "correct", "wrong"]
        assert len(lines) == 4
        assert sum(int(line.split()[1]) for line in lines[1:]) == 200

    def test_invalid_params_exit_code(self, monkeypatch, restore_root_logger):
        monkeypatch.setattr(
            sys,
            "argv",
            ["simulate_learner", "--items", "a", "--params", '{"correct_decay": 5}'],
        )

        assert main() == 1

    def test_params_not_json_exit_code(self, monkeypatch, restore_root_logger):
        monkeypatch.setattr(sys, "argv", ["simulate_learner", "--items", "a", "--params", "{"])

        assert main() == 1
