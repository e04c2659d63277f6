"""Tests for src/clawsseum/engine/battle.py."""
from __future__ import annotations

import random

import pytest

from clawsseum.engine.battle import resolve_outcome, roll_initiative, run_battle
from clawsseum.models.battle import MAX_ROUNDS, BattleState
from clawsseum.models.fighter import Fighter, Side


def _turn_lines(log: list[str]) -> list[str]:
    return [line for line in log if " dmg" in line]


class TestRollInitiative:
    def test_challenger_draws_first(self, scripted, champion):
        challenger = Fighter(name="Quick", attack=50, defense=50, speed=80)
        state = BattleState(challenger_hp=100, champion_hp=100)
        first = roll_initiative(state, challenger, champion, scripted([0.9, 0.1]))
        assert state.challenger_initiative == pytest.approx(89.0)
        assert state.champion_initiative == pytest.approx(81.0)
        assert first is Side.CHALLENGER

    def test_tie_favors_challenger(self, scripted, champion):
        challenger = Fighter(name="Even", attack=50, defense=50, speed=80)
        state = BattleState(challenger_hp=100, champion_hp=100)
        assert roll_initiative(state, challenger, champion, scripted([0.3, 0.3])) is Side.CHALLENGER

    def test_champion_first(self, scripted, champion):
        challenger = Fighter(name="Slow", attack=50, defense=50, speed=10)
        state = BattleState(challenger_hp=100, champion_hp=100)
        assert roll_initiative(state, challenger, champion, scripted([0.9, 0.0])) is Side.CHAMPION


class TestResolveOutcome:
    @pytest.fixture
    def fighters(self):
        return (
            Fighter(name="C", attack=50, defense=50, speed=50, hp=100),
            Fighter(name="K", attack=50, defense=50, speed=50, hp=100),
        )

    def test_challenger_ko(self, fighters):
        outcome = resolve_outcome(BattleState(challenger_hp=5, champion_hp=0), *fighters)
        assert outcome.challenger_won is True
        assert outcome.time_limit is False

    def test_champion_ko(self, fighters):
        outcome = resolve_outcome(BattleState(challenger_hp=0, champion_hp=99), *fighters)
        assert outcome.challenger_won is False

    def test_time_limit_higher_fraction_wins(self, fighters):
        outcome = resolve_outcome(BattleState(challenger_hp=40, champion_hp=30), *fighters)
        assert outcome.challenger_won is True
        assert outcome.time_limit is True
        assert outcome.challenger_fraction == pytest.approx(0.4)
        assert outcome.champion_fraction == pytest.approx(0.3)

    def test_time_limit_lower_fraction_loses(self, fighters):
        outcome = resolve_outcome(BattleState(challenger_hp=30, champion_hp=40), *fighters)
        assert outcome.challenger_won is False

    def test_exact_tie_goes_to_challenger(self):
        challenger = Fighter(name="C", attack=50, defense=50, speed=50, hp=200)
        champion = Fighter(name="K", attack=50, defense=50, speed=50, hp=120)
        outcome = resolve_outcome(BattleState(challenger_hp=50, champion_hp=30), challenger, champion)
        assert outcome.challenger_won is True

    def test_both_down_goes_to_challenger(self, fighters):
        outcome = resolve_outcome(BattleState(challenger_hp=0, champion_hp=0), *fighters)
        assert outcome.challenger_won is True


class TestRunBattle:
    def test_champion_knockout(self, flat_rng, champion):
        # Champion first (85 vs 55). Champion hits 55, challenger hits 22.
        challenger = Fighter(name="Crabby", attack=50, defense=50, speed=50)
        result = run_battle(challenger, champion, rng=flat_rng)
        assert result.winner_name == "Clawsseum Champion"
        assert result.challenger_won is False
        assert result.challenger_final_hp == 0
        assert result.champion_final_hp == 78
        assert result.rounds_fought == 2
        assert result.time_limit is False

    def test_defeated_side_skips_its_turn(self, flat_rng, champion):
        challenger = Fighter(name="Crabby", attack=50, defense=50, speed=50)
        result = run_battle(challenger, champion, rng=flat_rng)
        turns = _turn_lines(result.log)
        # Round 1: both act. Round 2: the champion's KO ends it.
        assert len(turns) == 3
        assert turns[-1].endswith("Crabby HP: 0")
        # 2 initiative draws + 3 damage draws
        assert flat_rng.draws == 5

    def test_specials_fire_once_each(self, flat_rng, champion):
        # Challenger first (105 vs 85) and hits 72; champion drops to 28 and
        # its special turns 35 into 77; challenger at 23 answers with 72*2.2.
        challenger = Fighter(
            name="Pinchy", attack=100, defense=100, speed=100, special_skill="Pincer Crush",
        )
        result = run_battle(challenger, champion, rng=flat_rng)
        assert result.challenger_won is True
        assert result.challenger_final_hp == 23
        assert result.champion_final_hp == 0
        assert result.rounds_fought == 2
        log = result.battle_log
        assert "for 77 dmg 💥 SPECIAL: Claw Storm!" in log
        assert "for 158 dmg 💥 SPECIAL: Pincer Crush!" in log

    def test_round_limit_tie_goes_to_challenger(self, flat_rng):
        wall_a = Fighter(name="Wall A", attack=10, defense=100, speed=50)
        wall_b = Fighter(name="Wall B", attack=10, defense=100, speed=50)
        result = run_battle(wall_a, wall_b, rng=flat_rng)
        assert result.rounds_fought == MAX_ROUNDS
        assert result.challenger_final_hp == 90
        assert result.champion_final_hp == 90
        assert result.time_limit is True
        assert result.winner_name == "Wall A"

    def test_log_narration(self, flat_rng, champion):
        challenger = Fighter(name="Crabby", attack=50, defense=50, speed=50, strategy="aggressive")
        result = run_battle(challenger, champion, rng=flat_rng)
        log = result.battle_log
        assert log.startswith("🏟️  CLAWSSEUM ARENA BATTLE")
        assert "🎲 Initiative roll: Crabby [55.0] vs Clawsseum Champion [85.0]" in log
        assert "⚡ Clawsseum Champion strikes first!" in log
        assert "   Strategy: AGGRESSIVE" in log
        assert "🔸 Round 1" in log
        assert "🔴 Clawsseum Champion attacks Crabby for 55 dmg → Crabby HP: 45" in log
        assert "The Champion defends the Clawsseum throne!" in log
        assert "📊 Final HP — Crabby: 0 | Clawsseum Champion: 78" in log
        assert "📜 Rounds fought: 2" in log

    def test_time_limit_narration(self, flat_rng):
        result = run_battle(
            Fighter(name="Wall A", attack=10, defense=100, speed=50, hp=100),
            Fighter(name="Wall B", attack=10, defense=100, speed=50, hp=200),
            rng=flat_rng,
        )
        assert result.challenger_won is False
        assert "TIME LIMIT! Wall B wins on remaining HP% (95% vs 90%)!" in result.battle_log

    def test_to_deliverable(self, flat_rng, champion):
        challenger = Fighter(name="Crabby", attack=50, defense=50, speed=50)
        deliverable = run_battle(challenger, champion, rng=flat_rng).to_deliverable()
        assert set(deliverable) == {"winner", "challenger_final_hp", "champion_final_hp", "rounds", "battle_log"}
        assert deliverable["rounds"] == 2


class TestBattleProperties:
    """Invariants over many seeded battles."""

    @pytest.mark.parametrize("seed", range(60))
    def test_invariants(self, seed, champion):
        rng = random.Random(seed)
        challenger = Fighter(
            name="Rando",
            attack=rng.randint(1, 100),
            defense=rng.randint(1, 100),
            speed=rng.randint(1, 100),
            hp=rng.randint(1, 500),
            special_skill="Molt" if rng.random() < 0.7 else None,
        )
        result = run_battle(challenger, champion, rng=rng)

        assert 1 <= result.rounds_fought <= MAX_ROUNDS
        assert result.challenger_final_hp >= 0
        assert result.champion_final_hp >= 0
        assert result.battle_log.count("SPECIAL: Molt!") <= 1
        assert result.battle_log.count("SPECIAL: Claw Storm!") <= 1

        turns = _turn_lines(result.log)
        if result.challenger_final_hp == 0 or result.champion_final_hp == 0:
            # The KO is the last thing that happens.
            assert turns[-1].endswith("HP: 0")
            assert sum(line.endswith("HP: 0") for line in turns) == 1
        else:
            assert result.rounds_fought == MAX_ROUNDS
            assert len(turns) == 2 * MAX_ROUNDS

        expected_winner = challenger.name if result.challenger_won else champion.name
        assert result.winner_name == expected_winner
