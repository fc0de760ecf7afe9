from __future__ import annotations

"""thenette Command Line Interface."""

import json

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from thenette import __version__
from thenette.config import settings
from thenette.conformance import SCENARIOS, ScenarioReport, run_all
from thenette.utils.constants import STYLE, SYMBOLS
from thenette.utils.logging import configure

app = typer.Typer(
    name="thenette",
    help="CLI for thenette: synchronous Promises/A+-style futures.",
    add_completion=False,
)

console = Console()


def _select(only: str | None):
    if not only:
        return SCENARIOS
    chosen = [s for s in SCENARIOS if only.lower() in s.name.lower()]
    if not chosen:
        console.print(f"[bold red]Error: no scenario matches '{only}'[/]")
        raise typer.Exit(code=1)
    return chosen


def _render(reports: list[ScenarioReport]) -> None:
    table = Table(title="Future scenarios")
    table.add_column("Scenario", style="cyan", no_wrap=True)
    table.add_column("Expected", style=STYLE["dim"])
    table.add_column("Observed")
    table.add_column("Result", justify="center")

    for rep in reports:
        observed = f"[{STYLE[rep.observed]}]{rep.observed}[/] {escape(rep.observed_repr)}"
        table.add_row(
            rep.name,
            f"{rep.expect} {escape(rep.expected_repr)}",
            observed,
            SYMBOLS["success"] if rep.passed else SYMBOLS["error"],
        )
    console.print(table)


@app.callback()
def _main(
    log_level: str = typer.Option(None, "--log-level", help="debug, info, warning or error (default: $THENETTE_LOG_LEVEL)."),
):
    configure(log_level or settings.log_level)


@app.command()
def check(
    only: str = typer.Option(None, "--only", help="Run only scenarios whose name contains this text."),
    timeout: float = typer.Option(2.0, "--timeout", help="Seconds to wait for each scenario to settle."),
    as_json: bool = typer.Option(False, "--json", help="Emit one JSON report per line instead of a table."),
):
    """Run the built-in behavioural scenarios against Future."""
    reports = run_all(_select(only), timeout=timeout)

    if as_json:
        for rep in reports:
            print(json.dumps(rep.model_dump()))
    else:
        _render(reports)

    failed = [r for r in reports if not r.passed]
    if failed:
        if not as_json:
            console.print(f"[bold red]{len(failed)} of {len(reports)} scenario(s) failed.[/]")
        raise typer.Exit(code=1)
    if not as_json:
        console.print(f"[bold green]All {len(reports)} scenarios passed.[/]")


@app.command()
def trace(
    only: str = typer.Option(None, "--only", help="Run only scenarios whose name contains this text."),
    timeout: float = typer.Option(2.0, "--timeout", help="Seconds to wait for each scenario to settle."),
):
    """Run scenarios with the event bus on and print every lifecycle event."""
    from thenette.utils.events import FutureCreated, FutureSettled, subscribe, unsubscribe

    def _on_created(evt: FutureCreated):
        parent = f" from #{evt.parent_id}" if evt.parent_id is not None else ""
        console.print(f"  {SYMBOLS['created']}[dim]#{evt.future_id}[/] created{parent}")

    def _on_settled(evt: FutureSettled):
        style = STYLE["recovered"] if evt.recovered else STYLE[evt.state]
        note = " (recovered)" if evt.recovered else ""
        console.print(f"  {SYMBOLS['settled']}[dim]#{evt.future_id}[/] [{style}]{evt.state}[/]{note}")

    subscribe(FutureCreated)(_on_created)
    subscribe(FutureSettled)(_on_settled)
    previous = settings.emit_events
    settings.emit_events = True
    try:
        for scenario in _select(only):
            console.rule(f"[{STYLE['header']}]{scenario.name}[/]")
            rep = run_all([scenario], timeout=timeout)[0]
            mark = SYMBOLS["success"] if rep.passed else SYMBOLS["error"]
            console.print(f"{mark}{rep.observed} {escape(rep.observed_repr)}")
    finally:
        settings.emit_events = previous
        unsubscribe(FutureCreated, _on_created)
        unsubscribe(FutureSettled, _on_settled)


@app.command()
def version():
    """Print the installed thenette version."""
    console.print(f"thenette {__version__}")


if __name__ == "__main__":
    app()
