"""Typer CLI application."""
from __future__ import annotations

import json
import logging
import random
from typing import Optional

import typer

app = typer.Typer(
    name="clawsseum",
    help="Duel the Clawsseum Champion from the terminal",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Clawsseum arena battles."""
    if verbose:
        from rich.logging import RichHandler

        logging.basicConfig(level=logging.DEBUG, format="%(message)s", handlers=[RichHandler()])


@app.command()
def battle(
    name: str = typer.Option(..., "--name", "-n", help="Fighter name"),
    attack: int = typer.Option(..., "--attack", "-a", help="Attack (1-100)"),
    defense: int = typer.Option(..., "--defense", "-d", help="Defense (1-100)"),
    speed: int = typer.Option(..., "--speed", "-s", help="Speed (1-100)"),
    variant: str = typer.Option("arena_battle", "--variant", help="arena_battle, vip_battle or wager_battle"),
    hp: Optional[int] = typer.Option(None, "--hp", help="Baseline HP (default 100)"),
    special: Optional[str] = typer.Option(None, "--special", help="Special skill name"),
    strategy: str = typer.Option("balanced", "--strategy", help="aggressive, defensive or balanced"),
    balance: Optional[float] = typer.Option(None, "--balance", help="Declared CLAWD balance (VIP)"),
    wallet: Optional[str] = typer.Option(None, "--wallet", help="Wallet address (VIP)"),
    wager: Optional[float] = typer.Option(None, "--wager", help="Wager amount (wager battle)"),
    buyer_wallet: Optional[str] = typer.Option(None, "--buyer-wallet", help="Payout wallet (wager battle)"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for a reproducible battle"),
    as_json: bool = typer.Option(False, "--json", help="Print the raw deliverable"),
) -> None:
    """Fight one battle against the champion."""
    from clawsseum.app import ArenaApp
    from clawsseum.cli.battle_display import BattleDisplay
    from clawsseum.errors import UnknownOfferingError

    request: dict = {
        "fighter_name": name,
        "attack": attack,
        "defense": defense,
        "speed": speed,
        "strategy": strategy,
    }
    optional = {
        "hp": hp, "special_skill": special, "clawd_balance": balance,
        "wallet_address": wallet, "wager_amount": wager, "buyer_wallet": buyer_wallet,
    }
    request.update({k: v for k, v in optional.items() if v is not None})

    arena = ArenaApp()
    display = BattleDisplay()
    rng = random.Random(seed) if seed is not None else None
    try:
        outcome = arena.runner.run(variant, request, rng=rng)
    except UnknownOfferingError as e:
        display.show_rejection(str(e))
        raise typer.Exit(code=1)

    if not outcome.accepted:
        display.show_rejection(outcome.reason)
        raise typer.Exit(code=1)

    if as_json:
        payload = json.loads(outcome.result.deliverable)
        if outcome.result.payable_detail is not None:
            payload["payableDetail"] = outcome.result.payable_detail.to_dict()
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    display.show_payment(outcome)
    display.show_battle(outcome)


@app.command()
def offerings() -> None:
    """List the available battle offerings."""
    from clawsseum.app import ArenaApp
    from clawsseum.cli.battle_display import BattleDisplay

    BattleDisplay().show_offerings(ArenaApp().registry.all_offerings())


if __name__ == "__main__":
    app()
