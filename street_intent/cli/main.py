"""Main CLI application for the intent classifier."""

import json
import logging
from typing import Optional

import typer

from street_intent.classifier import ClassifierEngine
from street_intent.cli.display import (
    console,
    display_analysis,
    display_classification,
    display_error,
    display_info,
    display_intents,
    display_matches,
    display_stats,
    display_success,
    display_suggestions,
)
from street_intent.config import get_settings

# Create main app
app = typer.Typer(
    name="street-intent",
    help="Classify free-form player input into assistant intents",
    add_completion=False,
)


def _get_engine() -> ClassifierEngine:
    """Build the engine used by a command."""
    return ClassifierEngine()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log pipeline details"),
) -> None:
    """Street Intent - slang-tolerant intent classification.

    Use 'street-intent classify "need that paper rn"' to try it out.
    """
    settings = get_settings()
    level = "DEBUG" if verbose or settings.debug else settings.log_level
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )


@app.command()
def classify(
    texts: list[str] = typer.Argument(..., help="One or more utterances to classify"),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON"),
    explain: bool = typer.Option(False, "--explain", "-e", help="Show changes and candidates"),
) -> None:
    """Classify utterances and show the winning intent."""
    engine = _get_engine()
    results = [engine.classify(text) for text in texts]

    if as_json:
        payload = [result.to_dict() for result in results]
        typer.echo(json.dumps(payload[0] if len(payload) == 1 else payload, indent=2))
        return

    for text, result in zip(texts, results):
        console.print(f"\n[bold]>[/bold] {text}")
        display_classification(result, explain=explain)


@app.command()
def analyze(
    text: str = typer.Argument(..., help="Utterance to analyze"),
    as_json: bool = typer.Option(False, "--json", help="Print the analysis as JSON"),
) -> None:
    """Show every pipeline stage for one utterance."""
    analysis = _get_engine().analyze(text)
    if as_json:
        typer.echo(json.dumps(analysis, indent=2))
        return
    display_analysis(analysis)


@app.command()
def matches(
    text: str = typer.Argument(..., help="Utterance to rank intents for"),
    count: int = typer.Option(3, "--count", "-n", min=1, help="Number of candidates"),
) -> None:
    """Rank the closest intents by semantic similarity."""
    display_matches(_get_engine().get_top_matches(text, count))


@app.command()
def concepts(
    text: str = typer.Argument(..., help="Utterance to inspect"),
) -> None:
    """List the concept clusters an utterance touches."""
    found = _get_engine().get_concepts(text)
    if not found:
        display_info("No known concepts.")
        return
    console.print(", ".join(found))


@app.command()
def similar(
    text: str = typer.Argument(..., help="First utterance"),
    reference: str = typer.Argument(..., help="Second utterance"),
    threshold: Optional[float] = typer.Option(None, "--threshold", "-t", help="Similarity threshold"),
) -> None:
    """Check whether two utterances mean the same thing."""
    engine = _get_engine()
    score = engine.semantic.phrase_similarity(
        engine.preprocess(text).normalized, engine.preprocess(reference).normalized
    )
    if engine.is_similar_to(text, reference, threshold):
        display_success(f"Similar ({score:.3f})")
    else:
        display_info(f"Not similar ({score:.3f})")


@app.command()
def suggest(
    text: str = typer.Argument(..., help="Ambiguous utterance"),
) -> None:
    """Suggest intents the player may have meant."""
    engine = _get_engine()
    suggestions = engine.get_suggestions(text)
    display_suggestions(suggestions, engine.get_clarifying_question(text))


@app.command()
def correct(
    word: str = typer.Argument(..., help="Possibly misspelled word"),
) -> None:
    """Show the typo correction and close alternatives for a word."""
    corrector = _get_engine().corrector
    result = corrector.correct(word)
    if result.was_modified:
        change = result.corrections[0]
        display_success(f"{change.original} -> {change.replacement} (distance {change.distance})")
    elif corrector.store.has_word(word.lower()):
        display_info(f"'{word}' needs no correction")
    else:
        display_info(f"No correction found for '{word}'")

    suggestions = corrector.get_suggestions(word)
    if suggestions:
        console.print(f"[bold]Suggestions:[/bold] {', '.join(suggestions)}")


@app.command()
def intents() -> None:
    """List every intent in the catalog."""
    display_intents(_get_engine().catalog.summary())


@app.command()
def stats(
    texts: Optional[list[str]] = typer.Argument(None, help="Utterances to classify first"),
) -> None:
    """Classify the given utterances, then show engine statistics."""
    engine = _get_engine()
    for text in texts or []:
        engine.classify(text)
    display_stats(engine.stats())


@app.command()
def add_slang(
    term: str = typer.Argument(..., help="Slang term"),
    canonical: str = typer.Argument(..., help="Canonical meaning"),
    text: str = typer.Argument(..., help="Utterance to classify with the new term"),
) -> None:
    """Try a slang term without editing the built-in tables."""
    engine = _get_engine()
    try:
        engine.add_slang(term, canonical)
    except ValueError as e:
        display_error(str(e))
        raise typer.Exit(1)
    display_classification(engine.classify(text), explain=True)


if __name__ == "__main__":
    app()
