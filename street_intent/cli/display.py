"""Rich display helpers for CLI output."""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from street_intent.intent_types import ClassificationResult, IntentScore, IntentSuggestion


# Shared console instance
console = Console()


def display_error(message: str) -> None:
    """Display error message.

    Args:
        message: Error message.
    """
    console.print(f"[bold red]Error:[/bold red] {message}")


def display_success(message: str) -> None:
    console.print(f"[bold green]{message}[/bold green]")


def display_info(message: str) -> None:
    console.print(f"[dim]{message}[/dim]")


def _confidence_style(confidence: float) -> str:
    if confidence >= 0.7:
        return "green"
    if confidence >= 0.4:
        return "yellow"
    return "red"


def display_classification(result: ClassificationResult, explain: bool = False) -> None:
    """Display one classification result.

    Args:
        result: Result to display.
        explain: Also show the preprocessing changes and candidate intents.
    """
    style = _confidence_style(result.confidence)
    title = f"[bold]{result.friendly_name}[/bold] ([cyan]{result.intent}[/cyan])"
    lines = [
        f"Confidence: [{style}]{result.confidence:.2f}[/{style}]",
        f"Source: {result.source.value}" + (" [dim](cached)[/dim]" if result.from_cache else ""),
    ]
    if result.preprocessed and result.preprocessed.was_modified:
        lines.append(f"Understood as: [italic]{result.preprocessed.normalized}[/italic]")
    console.print(Panel("\n".join(lines), title=title, border_style=style))

    if not explain:
        return

    if result.preprocessed and result.preprocessed.changes:
        table = Table(title="Preprocessing")
        table.add_column("From", style="red")
        table.add_column("To", style="green")
        table.add_column("Type", style="cyan")
        for change in result.preprocessed.changes:
            kind = change.kind.value
            if change.distance is not None:
                kind += f" ({change.distance})"
            table.add_row(change.original, change.replacement, kind)
        console.print(table)

    display_matches(result.top_matches)


def display_matches(matches: list[IntentScore], title: str = "Top Matches") -> None:
    """Display ranked candidate intents.

    Args:
        matches: Candidates, best first.
        title: Table title.
    """
    if not matches:
        display_info("No candidate intents.")
        return

    table = Table(title=title)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Intent", style="cyan")
    table.add_column("Name", style="white")
    table.add_column("Score", justify="right")

    for rank, match in enumerate(matches, start=1):
        table.add_row(str(rank), match.intent, match.friendly_name, f"{match.score:.3f}")

    console.print(table)


def display_suggestions(suggestions: list[IntentSuggestion], question: str | None) -> None:
    if question:
        console.print(f"[bold]{question}[/bold]", soft_wrap=True)

    if not suggestions:
        display_info("No suggestions.")
        return

    table = Table(title="Suggestions")
    table.add_column("Intent", style="cyan")
    table.add_column("Confidence", justify="right")
    table.add_column("Hint", style="white")
    for suggestion in suggestions:
        table.add_row(suggestion.friendly_name, f"{suggestion.confidence:.2f}", suggestion.suggestion)
    console.print(table)


def display_analysis(analysis: dict) -> None:
    """Display every stage of an analysis, as returned by ClassifierEngine.analyze."""
    stages = analysis["input"]
    console.print(Panel(
        f"Original:   {stages['original']}\n"
        f"Normalized: {stages['normalized']}\n"
        f"Corrected:  {stages['corrected']}",
        title="Input",
        border_style="dim",
    ))

    if stages["changes"]:
        table = Table(title="Changes")
        table.add_column("Stage", style="dim")
        table.add_column("From", style="red")
        table.add_column("To", style="green")
        table.add_column("Type", style="cyan")
        for change in stages["changes"]:
            table.add_row(change["stage"], change["from"], change["to"], change["type"])
        console.print(table)

    pattern = analysis["pattern"]
    semantic = analysis["semantic"]
    table = Table(title="Classifiers")
    table.add_column("Classifier", style="bold")
    table.add_column("Intent", style="cyan")
    table.add_column("Confidence", justify="right")
    table.add_column("Detail")
    table.add_row(
        "pattern",
        pattern["intent"],
        f"{pattern['confidence']:.3f}",
        f"score {pattern['score']:.1f}",
    )
    table.add_row(
        "semantic",
        semantic["intent"],
        f"{semantic['confidence']:.3f}",
        f"similarity {semantic['similarity']:.3f}",
    )
    console.print(table)

    if pattern["entities"]:
        entities = ", ".join(f"{key}={value}" for key, value in pattern["entities"].items())
        console.print(f"[bold]Entities:[/bold] {entities}")
    if analysis["concepts"]:
        console.print(f"[bold]Concepts:[/bold] {', '.join(analysis['concepts'])}")

    final = analysis["final"]
    console.print(
        f"[bold]Final:[/bold] [cyan]{final['intent']}[/cyan] "
        f"({final['confidence']:.2f}, {final['source']})"
    )


def display_intents(summary: list[dict]) -> None:
    """Display the intent catalog.

    Args:
        summary: Rows from IntentCatalog.summary().
    """
    table = Table(title="Intents")
    table.add_column("Intent", style="cyan")
    table.add_column("Name", style="white")
    table.add_column("Exemplars", justify="right")
    table.add_column("Keywords", justify="right")

    for row in summary:
        table.add_row(row["intent"], row["friendly_name"], str(row["exemplars"]), str(row["keywords"]))

    console.print(table)


def display_stats(stats: dict) -> None:
    """Display nested engine statistics as one flat table."""
    table = Table(title="Engine Stats")
    table.add_column("Stat", style="cyan")
    table.add_column("Value", justify="right")

    def add_rows(prefix: str, values: dict) -> None:
        for key, value in values.items():
            name = f"{prefix}{key}"
            if isinstance(value, dict):
                add_rows(f"{name}.", value)
            elif isinstance(value, float):
                table.add_row(name, f"{value:.3f}")
            else:
                table.add_row(name, str(value))

    add_rows("", stats)
    console.print(table)
