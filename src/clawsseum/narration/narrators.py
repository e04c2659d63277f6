"""Battle log builders — one narrator per offering.

The engine calls the narrator at fixed points (intro, initiative, each round
and turn, outcome) and appends whatever lines come back. Banner and lore
blocks live in Jinja templates next to this module; per-turn lines are
formatted here.
"""
from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from clawsseum.mechanics.economy import WIN_MULTIPLIER, calculate_payout, prize_pool
from clawsseum.models.battle import BattleState, Outcome
from clawsseum.models.fighter import Fighter, Side
from clawsseum.utils import format_amount, round_half_up, short_wallet

_TEMPLATES_DIR = Path(__file__).parent / "templates"
_jinja_env: Environment | None = None

SIDE_ICONS = {Side.CHALLENGER: "🔵", Side.CHAMPION: "🔴"}

VIP_TITLE_WIN = "👑 Grand Molter of the Clawsseum"
VIP_TITLE_LOSS = "🩸 Bloodied but Unbroken"

VIP_LORE_LINES = (
    "The arena trembles with each blow.",
    "Blood and data mix on the sands.",
    "The crowd chants: CLAWD! CLAWD! CLAWD!",
    "Neither fighter yields an inch.",
    "The air crackles with digital fury.",
    "This is what legends are forged from.",
)


def _get_jinja() -> Environment:
    global _jinja_env
    if _jinja_env is None:
        _jinja_env = Environment(
            loader=FileSystemLoader(str(_TEMPLATES_DIR)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        _jinja_env.filters["amount"] = format_amount
        _jinja_env.filters["short_wallet"] = short_wallet
        _jinja_env.filters["pct"] = lambda fraction: round_half_up(fraction * 100)
    return _jinja_env


def render_lines(template_name: str, **context) -> list[str]:
    text = _get_jinja().get_template(template_name).render(**context)
    return text.split("\n")


def vip_title(challenger_won: bool) -> str:
    return VIP_TITLE_WIN if challenger_won else VIP_TITLE_LOSS


class Narrator:
    """Plain arena narration. Subclasses swap templates and line formats."""

    template_prefix = "arena"
    separator = "─" * 40

    def intro(self, challenger: Fighter, champion: Fighter) -> list[str]:
        return render_lines(
            f"{self.template_prefix}_intro.j2",
            sep=self.separator, challenger=challenger, champion=champion,
            **self.context(),
        )

    def initiative(self, state: BattleState, challenger: Fighter, champion: Fighter) -> list[str]:
        first = challenger if state.first_mover is Side.CHALLENGER else champion
        return [
            f"🎲 Initiative roll: {challenger.name} [{state.challenger_initiative:.1f}]"
            f" vs {champion.name} [{state.champion_initiative:.1f}]",
            f"⚡ {first.name} strikes first!",
            "",
        ]

    def round_start(self, round_number: int) -> list[str]:
        return [f"🔸 Round {round_number}"]

    def turn(
        self, side: Side, attacker: Fighter, defender: Fighter,
        damage: int, special_fired: bool, defender_hp: int,
    ) -> list[str]:
        skill = f" 💥 SPECIAL: {attacker.special_skill}!" if special_fired else ""
        return [
            f"   {SIDE_ICONS[side]} {attacker.name} attacks {defender.name} for {damage} dmg{skill}"
            f" → {defender.name} HP: {defender_hp}"
        ]

    def round_end(self) -> list[str]:
        return [""]

    def outcome(
        self, challenger: Fighter, champion: Fighter,
        state: BattleState, outcome: Outcome, rounds: int,
    ) -> list[str]:
        winner = challenger if outcome.challenger_won else champion
        return render_lines(
            f"{self.template_prefix}_outcome.j2",
            sep=self.separator, challenger=challenger, champion=champion,
            state=state, outcome=outcome, rounds=rounds, winner=winner.name,
            **self.context(), **self.outcome_context(outcome),
        )

    def context(self) -> dict:
        """Extra template variables for this offering."""
        return {}

    def outcome_context(self, outcome: Outcome) -> dict:
        return {}


class _CompactTurnsMixin:
    def turn(
        self, side: Side, attacker: Fighter, defender: Fighter,
        damage: int, special_fired: bool, defender_hp: int,
    ) -> list[str]:
        extra = f" 💥 SPECIAL: {attacker.special_skill}!" if special_fired else ""
        return [f"   {SIDE_ICONS[side]} {attacker.name} → {damage} dmg{extra} | {defender.name} HP: {defender_hp}"]


class VipNarrator(_CompactTurnsMixin, Narrator):
    template_prefix = "vip"
    separator = "★" * 44

    def __init__(self, wallet: str, balance: float, bonus: float):
        self.wallet = wallet
        self.balance = balance
        self.bonus = bonus

    def initiative(self, state: BattleState, challenger: Fighter, champion: Fighter) -> list[str]:
        first = challenger if state.first_mover is Side.CHALLENGER else champion
        return ["", f"⚡ {first.name} seizes the first strike!", ""]

    def round_start(self, round_number: int) -> list[str]:
        lore = VIP_LORE_LINES[(round_number - 1) % len(VIP_LORE_LINES)]
        return [f"🔸 Round {round_number} — {lore}"]

    def context(self) -> dict:
        return {"wallet": self.wallet, "balance": self.balance, "bonus": self.bonus}

    def outcome_context(self, outcome: Outcome) -> dict:
        icon, name = vip_title(outcome.challenger_won).split(" ", 1)
        return {"title_icon": icon, "title_name": name}


class WagerNarrator(_CompactTurnsMixin, Narrator):
    template_prefix = "wager"
    separator = "═" * 44

    def __init__(self, wager_amount: float, multiplier: float = WIN_MULTIPLIER):
        self.wager_amount = wager_amount
        self.multiplier = multiplier

    def context(self) -> dict:
        return {
            "wager": self.wager_amount,
            "prize": prize_pool(self.wager_amount, self.multiplier),
        }

    def initiative(self, state: BattleState, challenger: Fighter, champion: Fighter) -> list[str]:
        first = challenger if state.first_mover is Side.CHALLENGER else champion
        return ["", f"⚡ {first.name} strikes first!", ""]

    def outcome_context(self, outcome: Outcome) -> dict:
        return {"payout": calculate_payout(self.wager_amount, outcome.challenger_won, self.multiplier)}
