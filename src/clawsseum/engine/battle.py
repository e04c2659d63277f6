"""Combat engine — one duel from prepared fighters to a BattleResult."""
from __future__ import annotations

import logging

from clawsseum.mechanics.combat_math import (
    RandomSource,
    damage_roll,
    determine_first_mover,
    hp_fraction,
    initiative_roll,
    special_damage,
    special_ready,
)
from clawsseum.models.battle import MAX_ROUNDS, BattleResult, BattleState, Outcome
from clawsseum.models.fighter import Fighter, Side
from clawsseum.narration.narrators import Narrator

logger = logging.getLogger(__name__)


def roll_initiative(
    state: BattleState, challenger: Fighter, champion: Fighter, rng: RandomSource | None = None,
) -> Side:
    """Roll once for the whole battle. Challenger draws first."""
    state.challenger_initiative = initiative_roll(challenger.speed, rng)
    state.champion_initiative = initiative_roll(champion.speed, rng)
    state.first_mover = determine_first_mover(state.challenger_initiative, state.champion_initiative)
    return state.first_mover


def resolve_turn(
    state: BattleState, side: Side, attacker: Fighter, defender: Fighter,
    rng: RandomSource | None = None,
) -> tuple[int, bool]:
    """One attack. Returns (damage dealt, whether the special fired)."""
    damage = damage_roll(attacker.attack, defender.defense, rng)
    special_fired = special_ready(attacker, state.hp_of(side), state.special_used[side])
    if special_fired:
        damage = special_damage(damage)
        state.special_used[side] = True
    defender_side = side.opponent
    state.set_hp(defender_side, state.hp_of(defender_side) - damage)
    return damage, special_fired


def resolve_outcome(state: BattleState, challenger: Fighter, champion: Fighter) -> Outcome:
    """KO decides outright; otherwise the higher remaining HP fraction wins, ties to the challenger."""
    if state.challenger_hp > 0 and state.champion_hp <= 0:
        return Outcome(challenger_won=True)
    if state.champion_hp > 0 and state.challenger_hp <= 0:
        return Outcome(challenger_won=False)
    challenger_fraction = hp_fraction(state.challenger_hp, challenger.hp)
    champion_fraction = hp_fraction(state.champion_hp, champion.hp)
    return Outcome(
        challenger_won=challenger_fraction >= champion_fraction,
        time_limit=True,
        challenger_fraction=challenger_fraction,
        champion_fraction=champion_fraction,
    )


def run_battle(
    challenger: Fighter,
    champion: Fighter,
    rng: RandomSource | None = None,
    narrator: Narrator | None = None,
) -> BattleResult:
    """Fight to a KO or the round cap and report the result with its log."""
    narrator = narrator or Narrator()
    fighters = {Side.CHALLENGER: challenger, Side.CHAMPION: champion}
    state = BattleState(challenger_hp=challenger.hp, champion_hp=champion.hp)

    state.log.extend(narrator.intro(challenger, champion))
    roll_initiative(state, challenger, champion, rng)
    state.log.extend(narrator.initiative(state, challenger, champion))
    logger.debug(
        f"Battle start: {challenger.name} vs {champion.name}, "
        f"{state.first_mover.value} moves first"
    )

    while state.in_progress:
        state.log.extend(narrator.round_start(state.round))
        for side in state.turn_order:
            if not state.both_standing:
                break
            attacker, defender = fighters[side], fighters[side.opponent]
            damage, special_fired = resolve_turn(state, side, attacker, defender, rng)
            state.log.extend(narrator.turn(
                side, attacker, defender, damage, special_fired, state.hp_of(side.opponent),
            ))
        state.log.extend(narrator.round_end())
        state.round += 1

    rounds = min(state.round - 1, MAX_ROUNDS)
    outcome = resolve_outcome(state, challenger, champion)
    state.log.extend(narrator.outcome(challenger, champion, state, outcome, rounds))

    winner = challenger if outcome.challenger_won else champion
    logger.debug(
        f"Battle end after {rounds} rounds: {winner.name} wins "
        f"({state.challenger_hp} vs {state.champion_hp} HP)"
    )
    return BattleResult(
        winner_name=winner.name,
        challenger_won=outcome.challenger_won,
        challenger_final_hp=state.challenger_hp,
        champion_final_hp=state.champion_hp,
        rounds_fought=rounds,
        time_limit=outcome.time_limit,
        log=state.log,
    )
