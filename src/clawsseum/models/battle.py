from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, Field

from clawsseum.models.fighter import Side

MAX_ROUNDS = 10


@dataclass
class BattleState:
    """Mutable bookkeeping for one battle in progress."""

    challenger_hp: int
    champion_hp: int
    first_mover: Side = Side.CHALLENGER
    challenger_initiative: float = 0.0
    champion_initiative: float = 0.0
    round: int = 1
    special_used: dict[Side, bool] = field(
        default_factory=lambda: {Side.CHALLENGER: False, Side.CHAMPION: False}
    )
    log: list[str] = field(default_factory=list)

    def hp_of(self, side: Side) -> int:
        return self.challenger_hp if side is Side.CHALLENGER else self.champion_hp

    def set_hp(self, side: Side, value: int) -> None:
        value = max(0, value)
        if side is Side.CHALLENGER:
            self.challenger_hp = value
        else:
            self.champion_hp = value

    @property
    def both_standing(self) -> bool:
        return self.challenger_hp > 0 and self.champion_hp > 0

    @property
    def in_progress(self) -> bool:
        return self.both_standing and self.round <= MAX_ROUNDS

    @property
    def turn_order(self) -> tuple[Side, Side]:
        return (self.first_mover, self.first_mover.opponent)


class Outcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    challenger_won: bool
    time_limit: bool = False
    challenger_fraction: float = 0.0
    champion_fraction: float = 0.0


class BattleResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    winner_name: str
    challenger_won: bool
    challenger_final_hp: int = Field(ge=0)
    champion_final_hp: int = Field(ge=0)
    rounds_fought: int = Field(ge=0, le=MAX_ROUNDS)
    time_limit: bool = False
    log: list[str] = Field(default_factory=list)

    @property
    def battle_log(self) -> str:
        return "\n".join(self.log)

    def to_deliverable(self) -> dict:
        """Standard deliverable shape shared by every offering."""
        return {
            "winner": self.winner_name,
            "challenger_final_hp": self.challenger_final_hp,
            "champion_final_hp": self.champion_final_hp,
            "rounds": self.rounds_fought,
            "battle_log": self.battle_log,
        }
