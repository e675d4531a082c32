"""
Command-line interface for resume ATS scoring.

Commands:
    score    - Score a resume file, optionally against a job description
    history  - Show recorded scores for an identity
    keywords - List the ranked keywords of a document

Examples:
    atscore score resume.pdf
    atscore score resume.docx --jd job.txt --identity alice --format json
    atscore history alice --limit 5
    atscore keywords job.txt --limit 15
"""

import random
import sqlite3
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from atscore.contexts.analysis.keywords import extract_keywords
from atscore.contexts.history.tracker import HistoryTracker
from atscore.contexts.intake.document import RawDocument
from atscore.contexts.scoring.logger import setup_scoring_logger
from atscore.contexts.scoring.pipeline import score_resume
from atscore.contexts.scoring.report import render_markdown_report, render_text_report
from atscore.exceptions import ConfigError, InvalidLimitError, ScoringError, user_message_for
from atscore.utils.config import AppConfig, load_config
from atscore.utils.report_formatter import Column, TableFormatter, format_score_change
from atscore.utils.timestamp import format_timestamp

OUTPUT_FORMATS = ("text", "json", "markdown")

app = typer.Typer(
    add_completion=False,
    help="Score resumes for ATS compatibility and track results over time",
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _fail(exc: BaseException) -> None:
    """Print the human-readable message for exc and exit 1."""
    typer.secho(f"Error: {user_message_for(exc)}", fg=typer.colors.RED, err=True)
    detail = getattr(exc, "detail", None) or (None if isinstance(exc, ScoringError) else str(exc))
    if detail:
        typer.echo(f"  {detail}", err=True)
    raise typer.Exit(code=1)


def _load(config_path: Optional[Path]) -> AppConfig:
    try:
        return load_config(config_path)
    except ConfigError as e:
        _fail(e)


def _tracker(config: AppConfig, db_path: Optional[Path]) -> HistoryTracker:
    # History must outlive the process, so the CLI always uses the sqlite store
    return HistoryTracker.from_config(config.history, db_path=db_path or Path(config.history.db_path))


@app.command("score")
def score_command(
    resume: Annotated[
        Path,
        typer.Argument(help="Resume file (.pdf, .docx, .txt or .md)"),
    ],
    jd: Annotated[
        Optional[Path],
        typer.Option("--jd", "-j", help="Job description file (.pdf, .docx, .txt or .md)"),
    ] = None,
    identity: Annotated[
        Optional[str],
        typer.Option("--identity", "-i", help="Record the score in this identity's history"),
    ] = None,
    sector: Annotated[
        Optional[str],
        typer.Option("--sector", "-s", help="Sector label for history (detected when omitted)"),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, json or markdown"),
    ] = "text",
    config_path: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="YAML file overriding the packaged scoring config"),
    ] = None,
    db_path: Annotated[
        Optional[Path],
        typer.Option("--db", help="History database (defaults to history.db_path in config)"),
    ] = None,
    seed: Annotated[
        Optional[int],
        typer.Option("--seed", help="Seed for score jitter"),
    ] = None,
    jitter: Annotated[
        Optional[int],
        typer.Option("--jitter", help="Jitter amplitude in points (0 disables)", min=0),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Echo scoring logs to the console"),
    ] = False,
):
    """
    Score a resume for ATS compatibility.

    Examples:\n

        $ atscore score resume.pdf                          # Structural score only

        $ atscore score resume.pdf --jd job.txt             # Match against a job description

        $ atscore score resume.pdf -i alice --format json   # Record history, JSON output
    """
    if output_format not in OUTPUT_FORMATS:
        typer.secho(
            f"Error: unknown format '{output_format}' (choose from {', '.join(OUTPUT_FORMATS)})",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=1)

    config = _load(config_path)
    overrides = {}
    if jitter is not None:
        overrides["jitter"] = jitter
    if seed is not None:
        overrides["jitter_seed"] = seed
    if overrides:
        config = config.with_scoring(**overrides)

    setup_scoring_logger(config_path=config_path, console_level="INFO" if verbose else "WARNING")

    try:
        document = RawDocument.from_path(resume, max_bytes=config.scoring.max_document_bytes)
        jd_text = None
        if jd:
            jd_text = RawDocument.from_path(jd, max_bytes=config.scoring.max_document_bytes).text
        tracker = _tracker(config, db_path) if identity else None

        result = score_resume(
            document,
            jd_text,
            config=config,
            tracker=tracker,
            identity=identity,
            sector=sector,
            rng=random.Random(seed) if seed is not None else None,
        )
    except FileNotFoundError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    except (ScoringError, ConfigError, sqlite3.Error, OSError) as e:
        _fail(e)

    if output_format == "json":
        typer.echo(result.to_json())
    elif output_format == "markdown":
        typer.echo(render_markdown_report(result, document.filename))
    else:
        typer.echo(render_text_report(result, document.filename))
        if identity:
            typer.secho(f"\nRecorded in history for '{identity}'", fg=typer.colors.GREEN)


@app.command("history")
def history_command(
    identity: Annotated[
        str,
        typer.Argument(help="Identity whose history to show"),
    ],
    limit: Annotated[
        Optional[int],
        typer.Option("--limit", "-n", help="Number of entries (default from config)"),
    ] = None,
    config_path: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="YAML file overriding the packaged config"),
    ] = None,
    db_path: Annotated[
        Optional[Path],
        typer.Option("--db", help="History database (defaults to history.db_path in config)"),
    ] = None,
    relative: Annotated[
        bool,
        typer.Option("--relative", "-r", help="Show times relative to now"),
    ] = False,
):
    """
    Show recorded scores for an identity, most recent first.

    Examples:\n

        $ atscore history alice

        $ atscore history alice --limit 3 --db outs/history.sqlite3 --relative
    """
    config = _load(config_path)
    try:
        tracker = _tracker(config, db_path)
        entries = tracker.get_history(identity, limit)
        trend = tracker.trend(identity, limit)
    except (InvalidLimitError, ConfigError, sqlite3.Error, OSError) as e:
        _fail(e)

    if not entries:
        typer.secho(f"No history recorded for '{identity}'", fg=typer.colors.YELLOW)
        raise typer.Exit()

    table = TableFormatter(
        [
            Column("#", 3, ">"),
            Column("Score", 6, ">"),
            Column("Sector", 12),
            Column("File", 30),
            Column("When", 20),
        ],
        total_width=75,
    )
    table.add_section_header(f"SCORE HISTORY: {identity}")
    table.add_table_header().add_separator()
    for i, entry in enumerate(entries, 1):
        table.add_row([i, entry.score, entry.sector, entry.filename, format_timestamp(entry.timestamp, relative)])
    table.add_separator()
    table.add_summary(
        f"Latest {trend.latest} | first {trend.first} | {format_score_change(trend.delta)} since first | "
        f"average {trend.average} | best {trend.best} ({trend.count} entries)"
    )
    typer.echo(table.render())


@app.command("keywords")
def keywords_command(
    document_path: Annotated[
        Path,
        typer.Argument(help="Document to extract keywords from (job description or resume)"),
    ],
    limit: Annotated[
        int,
        typer.Option("--limit", "-n", help="Maximum number of keywords"),
    ] = 40,
):
    """
    List a document's keywords ranked by frequency.

    Examples:\n

        $ atscore keywords job.txt

        $ atscore keywords job.txt --limit 10
    """
    try:
        if limit <= 0:
            raise InvalidLimitError(limit, name="limit")
        document = RawDocument.from_path(document_path)
    except FileNotFoundError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    except (ScoringError, OSError) as e:
        _fail(e)

    keywords = extract_keywords(document.text, limit=limit)
    if not keywords:
        typer.secho(f"No keywords found in {document.filename}", fg=typer.colors.YELLOW)
        raise typer.Exit()

    table = TableFormatter([Column("Rank", 5, ">"), Column("Keyword", 30), Column("Count", 6, ">")], total_width=43)
    table.add_table_header().add_separator()
    for rank, keyword in enumerate(keywords, 1):
        table.add_row([rank, keyword, keywords.frequency(keyword)])
    typer.echo(table.render())


if __name__ == "__main__":
    app()
