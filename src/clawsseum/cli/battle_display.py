"""Rich terminal rendering for battle results."""
from __future__ import annotations

import json

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from clawsseum.models.job import JobOutcome
from clawsseum.offerings.base import Offering

console = Console()


class BattleDisplay:
    def __init__(self, console_: Console | None = None) -> None:
        self.console = console_ or console

    def show_rejection(self, reason: str) -> None:
        self.console.print(Panel(f"[bold red]Request rejected[/bold red]\n\n{escape(reason)}", border_style="red", box=box.HEAVY))

    def show_payment(self, outcome: JobOutcome) -> None:
        if outcome.payment_message:
            self.console.print(f"[yellow]{escape(outcome.payment_message)}[/yellow]")
        if outcome.funds_request is not None:
            fr = outcome.funds_request
            self.console.print(f"[dim]{escape(fr.content)} → {fr.recipient}[/dim]")

    def show_battle(self, outcome: JobOutcome) -> None:
        deliverable = json.loads(outcome.result.deliverable)
        self.console.print(Panel(
            Text(deliverable["battle_log"]), border_style="cyan", box=box.ROUNDED, title=outcome.offering_id,
        ))
        self.console.print(self._summary_table(deliverable))
        detail = outcome.result.payable_detail
        if detail is not None:
            self.console.print(f"[green]Payout: {detail.amount} → {detail.recipient}[/green]")

    @staticmethod
    def _summary_table(deliverable: dict) -> Table:
        table = Table(title="Result", box=box.SIMPLE)
        table.add_column("Field", style="bold")
        table.add_column("Value")
        for key, value in deliverable.items():
            if key == "battle_log":
                continue
            table.add_row(key, escape(str(value)))
        return table

    def show_offerings(self, offerings: list[Offering]) -> None:
        table = Table(title="Offerings", box=box.ROUNDED)
        table.add_column("ID", style="cyan")
        table.add_column("Description")
        for offering in offerings:
            table.add_row(offering.offering_id, offering.description)
        self.console.print(table)
