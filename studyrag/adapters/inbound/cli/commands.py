"""CLI interface for the study knowledge engine."""

import json
import logging
import os

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ....composition import container
from ....config import get_logger, settings, setup_logging
from ....core.domain import SearchResult
from ....core.domain.utils import display_name
from ...common.exception_handler import (
    EXIT_UNAVAILABLE,
    format_exception_json,
    get_error_code,
    get_exit_code,
    log_exception,
)

app = typer.Typer(
    name="studyrag",
    help="Search the TYT/AYT study knowledge base",
    add_completion=False,
)

console = Console(legacy_windows=False)
logger = get_logger("cli")

# Determine if we're in debug mode (shows full stack traces)
DEBUG_MODE = os.getenv("DEBUG", "false").lower() == "true"

PREVIEW_CHARS = 300


def handle_cli_error(exc: Exception) -> None:
    """Display an error and exit with the status mapped from its type.

    In debug mode, shows full JSON error details.
    In normal mode, shows a short message with the error code.
    """
    log_exception(exc, log=logger, level=logging.DEBUG)
    error_data = format_exception_json(exc, include_trace=DEBUG_MODE)

    if DEBUG_MODE:
        console.print(
            Panel(
                json.dumps(error_data, indent=2, ensure_ascii=False),
                title="[bold red]Error Details[/]",
                border_style="red",
            )
        )
    else:
        error_code = get_error_code(exc)
        console.print(f"[red]Error [{error_code}]:[/] {error_data['error']['message']}")
        console.print("[dim]Set DEBUG=true for full details[/]")

    raise typer.Exit(get_exit_code(exc))


def _highlighted(result: SearchResult) -> Text:
    text = Text(result.passage.content)
    for highlight in result.highlights:
        for start in highlight.positions:
            text.stylize("bold yellow", start, start + len(highlight.term))
    return text


def _preview(content: str) -> str:
    if len(content) <= PREVIEW_CHARS:
        return content
    return content[:PREVIEW_CHARS] + "..."


@app.callback()
def main() -> None:
    """Configure logging before any command runs."""
    setup_logging(settings.log_level, settings.log_file, settings.log_json)


@app.command()
def search(
    query: str = typer.Argument(..., help="Free-text search query"),
    category: str | None = typer.Option(None, "--category", "-c", help="Restrict to one category"),
    max_results: int | None = typer.Option(None, "--max-results", "-k", help="Maximum results"),
    min_score: float | None = typer.Option(None, "--min-score", help="Minimum similarity score"),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON"),
) -> None:
    """Rank passages by similarity to a query."""
    try:
        results = container.get_retrieval_service().search(
            query, category=category, max_results=max_results, min_score=min_score
        )
    except Exception as exc:
        handle_cli_error(exc)

    if as_json:
        payload = {
            "query": query.strip(),
            "category": category,
            "total_results": len(results),
            "has_results": bool(results),
            "results": [result.to_dict() for result in results],
        }
        typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))
        return

    if not results:
        console.print("[yellow]No matching passages.[/]")
        return

    for i, result in enumerate(results, 1):
        console.print(
            Panel(
                _highlighted(result),
                title=f"[{i}] {result.passage.title}",
                subtitle=f"{result.passage.category} | score={result.score:.2f}",
                border_style="cyan",
            )
        )


@app.command()
def ask(
    question: str = typer.Argument(..., help="Question to gather context for"),
    context: list[str] = typer.Option(
        [], "--context", help="Extra context line (repeatable)", show_default=False
    ),
) -> None:
    """Assemble answer context for a question."""
    try:
        answer = container.get_answer_service().answer(question, context)
    except Exception as exc:
        handle_cli_error(exc)

    if not answer.has_relevant_info:
        console.print("[yellow]No relevant passages found.[/]")
    if answer.context_text:
        console.print(Panel(answer.context_text, title="Context", border_style="green"))

    if answer.search_results:
        console.print("[dim]Sources:[/]")
        for result in answer.search_results:
            console.print(f"  [dim]{result.passage.title} ({result.score:.2f})[/]")


@app.command()
def categories() -> None:
    """List the categories present in the index."""
    try:
        names = container.get_retrieval_service().categories()
    except Exception as exc:
        handle_cli_error(exc)

    table = Table(title=f"Categories ({len(names)})")
    table.add_column("Name")
    table.add_column("Display name")
    for name in names:
        table.add_row(name, display_name(name))
    console.print(table)


@app.command()
def documents(
    category: str = typer.Argument(..., help="Category to list"),
    limit: int = typer.Option(20, "--limit", "-n", help="Maximum passages to show"),
) -> None:
    """List passages in a category."""
    try:
        passages = container.get_retrieval_service().passages_by_category(category)
    except Exception as exc:
        handle_cli_error(exc)

    console.print(f"[bold]{category}[/]: {len(passages)} passage(s)")
    for passage in passages[:limit]:
        tags = ", ".join(passage.tags)
        console.print(f"\n[bold]{passage.title}[/] [dim]#{passage.index} {tags}[/]")
        console.print(_preview(passage.content))


@app.command()
def stats() -> None:
    """Show corpus statistics."""
    try:
        index_stats = container.get_retrieval_service().stats()
    except Exception as exc:
        handle_cli_error(exc)

    console.print(f"Documents:  {index_stats.document_count}")
    console.print(f"Passages:   {index_stats.passage_count}")
    console.print(f"Categories: {index_stats.category_count}")
    console.print(f"Average passages per document: {index_stats.avg_passages_per_document:.2f}")


@app.command()
def status() -> None:
    """Show whether the knowledge base is loaded and what it holds."""
    console.print("[bold]studyrag status[/]\n")
    console.print(f"Corpus directory: {settings.corpus_dir}")

    try:
        knowledge_base = container.get_knowledge_base()
    except Exception as exc:
        handle_cli_error(exc)

    if not knowledge_base.initialized:
        console.print("❌ Knowledge base not initialized")
        raise typer.Exit(EXIT_UNAVAILABLE)

    index_stats = knowledge_base.index.stats()
    console.print(f"✅ Knowledge base ready (generation {knowledge_base.generation})")
    console.print(
        f"   {index_stats.document_count} documents, {index_stats.passage_count} passages"
    )
    for name in index_stats.categories:
        console.print(f"   - {name}")


@app.command("tyt-ayt")
def tyt_ayt(
    subject: str | None = typer.Option(None, "--subject", "-s", help="Subject, e.g. matematik"),
    level: str | None = typer.Option(None, "--level", "-l", help="Level, e.g. ayt"),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON"),
) -> None:
    """Look up TYT/AYT exam topics, labelled by subject and level."""
    try:
        topics = container.get_topic_service().tyt_ayt(subject, level)
    except Exception as exc:
        handle_cli_error(exc)

    if as_json:
        typer.echo(json.dumps(topics.to_dict(), ensure_ascii=False, indent=2))
        return

    if not topics.matches:
        console.print(f"[yellow]No exam topics found for '{topics.query}'.[/]")
        return

    table = Table(title=f"{topics.query} ({len(topics.matches)})")
    table.add_column("Title")
    table.add_column("Subject")
    table.add_column("Level")
    table.add_column("Score", justify="right")
    for match in topics.matches:
        table.add_row(
            match.result.passage.title, match.subject, match.level, f"{match.result.score:.2f}"
        )
    console.print(table)


@app.command("study-tips")
def study_tips(
    as_json: bool = typer.Option(False, "--json", help="Print tips as JSON"),
) -> None:
    """Show study technique and motivation tips."""
    try:
        results = container.get_topic_service().study_tips()
    except Exception as exc:
        handle_cli_error(exc)

    if as_json:
        payload = {
            "total_tips": len(results),
            "tips": [
                {"title": r.passage.title, "tip": r.passage.content, "score": r.score}
                for r in results
            ],
        }
        typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))
        return

    if not results:
        console.print("[yellow]No study tips found.[/]")
        return

    for result in results:
        console.print(
            Panel(result.passage.content, title=result.passage.title, border_style="green")
        )


if __name__ == "__main__":
    app()
