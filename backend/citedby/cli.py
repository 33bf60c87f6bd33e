"""
GetCitedBy CLI - Visibility Scoring & Calibration

Usage:
    citedby score response.txt --name "KPMG AG" --prompt-type direct_query
    citedby calibrate --responses recorded.json
    citedby calibrate --live --output calibration.csv
"""

import asyncio
import json
import sys
from collections import Counter
from datetime import datetime
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from citedby import __version__
from citedby.config import get_settings
from citedby.models import BusinessContext, PromptType
from citedby.services import (
    CALIBRATION_BUSINESSES,
    analyze_response,
    calculate_calibration_accuracy,
    collect_live_responses,
    interpret_score,
    run_calibration,
    tier_averages,
    write_results_csv,
)
from citedby.utils import configure_logging

console = Console()

RATING_STYLES = {
    "excellent": "green",
    "good": "green",
    "fair": "yellow",
    "poor": "dark_orange",
    "invisible": "red",
}


def is_recorded_responses(recorded) -> bool:
    """True for {business name: {prompt type: response text}}"""
    if not isinstance(recorded, dict):
        return False
    return all(
        isinstance(answers, dict) and all(isinstance(text, str) for text in answers.values())
        for answers in recorded.values()
    )


@click.group()
@click.version_option(version=__version__)
@click.option("--log-level", default=None, help="Override LOG_LEVEL")
def cli(log_level: Optional[str]):
    """GetCitedBy - AI visibility scoring for Swiss local businesses."""
    configure_logging(log_level or "WARNING")


# ============================================================================
# SCORE - one response
# ============================================================================

@cli.command()
@click.argument("response_file", type=click.File("r", encoding="utf-8"))
@click.option("--name", "-n", required=True, help="Business name")
@click.option("--city", "-c", default="", help="Business city")
@click.option("--service", "-s", "services", multiple=True, help="Offered service (repeatable)")
@click.option(
    "--prompt-type", "-t",
    type=click.Choice([p.value for p in PromptType]),
    default=PromptType.LOCAL_SEARCH.value,
    show_default=True,
)
def score(response_file, name: str, city: str, services, prompt_type: str):
    """Score a saved LLM response (use - for stdin)."""
    context = BusinessContext(name=name, city=city, services=list(services))
    result = analyze_response(response_file.read(), context, prompt_type)
    breakdown = result.breakdown
    style = RATING_STYLES.get(result.rating.rating, "white")

    console.print()
    console.print(Panel(
        f"[bold {style}]{breakdown.total}/100[/bold {style}]  {result.rating.rating.upper()}\n"
        f"[dim]{result.rating.description}[/dim]",
        title=f"[bold]{name}[/bold]",
        border_style=style,
    ))

    table = Table(show_header=True, header_style="bold")
    table.add_column("Component", style="cyan")
    table.add_column("Points", justify="right")
    table.add_row("Mention", f"{breakdown.mention_score}/40")
    table.add_row("Position", f"{breakdown.position_score}/25")
    table.add_row("Info quality", f"{breakdown.info_quality_score}/20")
    table.add_row("Sentiment", f"{breakdown.sentiment_score}/15")
    console.print(table)

    console.print(f"[bold]Explanation:[/bold] {breakdown.explanation}")
    console.print(
        f"[bold]Match:[/bold] {result.analysis.mention_type.value}"
        f"  [bold]Position:[/bold] {result.analysis.position or 'N/A'}"
        f"  [bold]Confidence:[/bold] {result.analysis.confidence}%"
    )
    if result.context.competitors:
        console.print(f"[bold]Competitors:[/bold] {', '.join(result.context.competitors)}")
    console.print()


# ============================================================================
# CALIBRATE - regression test against the ground-truth dataset
# ============================================================================

@cli.command()
@click.option(
    "--responses", "-r",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help='Recorded responses (json): {name: {"local_search": ..., "direct_query": ...}}',
)
@click.option("--live", is_flag=True, help="Collect fresh responses from OpenAI")
@click.option("--output", "-o", default=None, help="CSV output file")
@click.option("--min-accuracy", type=float, default=None, help="Override CALIBRATION_MIN_ACCURACY")
def calibrate(responses: Optional[Path], live: bool, output: Optional[str], min_accuracy: Optional[float]):
    """Score the calibration dataset and check every score lands in range."""
    settings = get_settings()
    min_accuracy = settings.CALIBRATION_MIN_ACCURACY if min_accuracy is None else min_accuracy

    if bool(responses) == live:
        raise click.UsageError("Pass exactly one of --responses or --live")

    console.print()
    console.print(Panel(
        f"[bold]Calibration Test[/bold]\n"
        f"[dim]{len(CALIBRATION_BUSINESSES)} businesses, "
        f"local weight {settings.CALIBRATION_LOCAL_WEIGHT}[/dim]",
        border_style="blue",
    ))

    if live:
        from citedby.adapters.llm import get_adapter

        try:
            adapter = get_adapter("openai")
        except ValueError as e:
            console.print(f"\n[red]Error:[/red] {e}")
            sys.exit(1)

        with console.status("Collecting responses from OpenAI..."):
            recorded = asyncio.run(collect_live_responses(
                CALIBRATION_BUSINESSES, adapter, settings.CALIBRATION_CONCURRENCY
            ))
    else:
        try:
            recorded = json.loads(responses.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            console.print(f"\n[red]Error:[/red] {responses} is not valid JSON: {e}")
            sys.exit(1)
        if not is_recorded_responses(recorded):
            console.print(
                f"\n[red]Error:[/red] {responses} must map business names to "
                '{"local_search": ..., "direct_query": ...}',
            )
            sys.exit(1)

    scores = run_calibration(recorded, local_weight=settings.CALIBRATION_LOCAL_WEIGHT)
    if not scores:
        console.print("\n[red]Error:[/red] No recorded responses match the calibration dataset")
        sys.exit(1)

    accuracy = calculate_calibration_accuracy([s.result for s in scores])

    # Per-business results
    table = Table(title="Calibration Results", show_header=True, header_style="bold")
    table.add_column("Business", style="cyan", width=34)
    table.add_column("Tier", width=7)
    table.add_column("Local", justify="right")
    table.add_column("Direct", justify="right")
    table.add_column("Overall", justify="right")
    table.add_column("Expected", justify="right")
    table.add_column("Status", width=6)

    for s in scores:
        style = RATING_STYLES.get(interpret_score(s.overall_score).rating, "white")
        table.add_row(
            s.business.name,
            s.business.expected_visibility.value,
            str(s.local_score),
            str(s.direct_score),
            f"[{style}]{s.overall_score}[/{style}]",
            f"{s.business.expected_score_min}-{s.business.expected_score_max}",
            "[green]PASS[/green]" if s.result.passed else "[red]FAIL[/red]",
        )
    console.print()
    console.print(table)

    # Score distribution
    distribution = Counter(interpret_score(s.overall_score).rating for s in scores)
    console.print()
    console.print("[bold]Score Distribution:[/bold]")
    for rating in RATING_STYLES:
        count = distribution.get(rating, 0)
        console.print(f"   {rating.capitalize():<10} {count:>3} ({count / len(scores) * 100:.1f}%)")

    console.print()
    console.print("[bold]Average by Expected Tier:[/bold]")
    for tier, average in tier_averages(scores).items():
        console.print(f"   {tier.value.upper():<7} {average:5.1f}")

    if accuracy.failed_tests:
        console.print()
        console.print("[bold]Failures:[/bold]")
        for failed in accuracy.failed_tests:
            console.print(f"   [red]{failed.business.name}[/red]: {failed.details}")

    output_path = Path(output or f"calibration-{datetime.now().strftime('%Y%m%d-%H%M%S')}.csv")
    write_results_csv(scores, output_path)

    passed = accuracy.accuracy >= min_accuracy
    color = "green" if passed else "red"
    console.print()
    console.print(Panel(
        f"[bold {color}]{accuracy.accuracy:.1f}% accuracy[/bold {color}] "
        f"({accuracy.passed}/{accuracy.total_tests} passed, "
        f"avg deviation {accuracy.avg_deviation:.1f})\n"
        f"[dim]Threshold: {min_accuracy:.1f}%[/dim]",
        border_style=color,
    ))
    console.print(f"\n[dim]Saved to:[/dim] [cyan]{output_path}[/cyan]")
    console.print()

    if not passed:
        sys.exit(1)


def main():
    cli()


if __name__ == "__main__":
    main()
