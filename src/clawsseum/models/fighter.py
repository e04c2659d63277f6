from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

STAT_MIN = 1
STAT_MAX = 100
BASE_HP = 100


class Strategy(str, Enum):
    AGGRESSIVE = "aggressive"
    DEFENSIVE = "defensive"
    BALANCED = "balanced"


class Side(str, Enum):
    CHALLENGER = "challenger"
    CHAMPION = "champion"

    @property
    def opponent(self) -> Side:
        return Side.CHAMPION if self is Side.CHALLENGER else Side.CHALLENGER


class Fighter(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    attack: int = Field(ge=STAT_MIN, le=STAT_MAX)
    defense: int = Field(ge=STAT_MIN, le=STAT_MAX)
    speed: int = Field(ge=STAT_MIN, le=STAT_MAX)
    hp: int = Field(default=BASE_HP, gt=0)
    special_skill: Optional[str] = None
    # Free-form: unrecognized tags fight as balanced.
    strategy: str = Strategy.BALANCED.value

    @property
    def has_special(self) -> bool:
        return bool(self.special_skill)
