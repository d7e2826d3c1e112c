#!/usr/bin/env python3
"""
Command-line interface for ATS resume analysis.

Commands:
    analyze     - Score a resume file against a job description file
    last        - Show the most recently saved analysis
    clear-cache - Forget the saved analysis
    catalog     - List keyword catalog groups

Usage:
    atscope analyze data/resume.yaml data/jobs/frontend.txt --breakdown
    atscope last
"""

import os
import time
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

from atscope.contexts.intake.exceptions import InvalidCatalogError
from atscope.contexts.intake.keyword_catalog import KeywordCatalog, get_default_catalog
from atscope.contexts.profile.exceptions import InvalidResumeStructureError
from atscope.contexts.profile.resume_data_structure import ResumeRecord
from atscope.contexts.targeting.analyzer import analyze_resume
from atscope.contexts.targeting.logger import (
    _log_error,
    log_analysis_result,
    log_analysis_start,
    setup_targeting_logger,
)
from atscope.contexts.targeting.scorer import score_breakdown
from atscope.utils.analysis_cache import AnalysisCache, load_last_analysis, save_last_analysis
from atscope.utils.report_formatter import format_analysis_report
from atscope.utils.timestamp import format_timestamp

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(
    add_completion=False,
    help="Estimate how an applicant tracking system would score a resume against a job posting.",
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _load_catalog(catalog_path: Optional[Path]) -> KeywordCatalog:
    try:
        if catalog_path is None:
            return get_default_catalog()
        return KeywordCatalog.from_yaml(catalog_path)
    except (FileNotFoundError, InvalidCatalogError) as e:
        typer.secho(f"ERROR: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


@app.command("analyze")
def analyze_command(
    resume_file: Path = typer.Argument(..., help="Resume file (.json, .yaml, or .yml)"),
    job_file: Path = typer.Argument(..., help="Job description text file"),
    catalog_path: Optional[Path] = typer.Option(
        None, "--catalog", "-c", help="Keyword catalog YAML (default: packaged catalog)"
    ),
    breakdown: bool = typer.Option(False, "--breakdown", "-b", help="Itemize score components"),
    save: bool = typer.Option(True, "--save/--no-save", help="Save as the last analysis"),
    cache_path: Optional[Path] = typer.Option(None, "--cache", help="Analysis cache file"),
    log_dir: Optional[Path] = typer.Option(None, "--log-dir", help="Directory for the log file"),
):
    """
    Analyze a resume against a job description and print a report.

    Examples:\n

        $ atscope analyze resume.yaml job.txt

        $ atscope analyze resume.json job.txt --breakdown --no-save
    """
    if not job_file.exists():
        typer.secho(f"ERROR: Job description not found: {job_file}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    try:
        job_description = job_file.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        typer.secho(f"ERROR: Job description is not valid UTF-8: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    if not job_description.strip():
        typer.secho("ERROR: Job description is empty", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    catalog = _load_catalog(catalog_path)

    session_dir = log_dir or LOGS_PATH / f"analyze_{time.strftime('%Y%m%d_%H%M%S')}"
    log_file = setup_targeting_logger(session_dir, catalog_path=catalog.source_path, console=False)
    log_analysis_start(resume_file.stem, job_file.stem, log_file)

    start = time.time()
    try:
        resume = ResumeRecord.from_file(resume_file)
        result = analyze_resume(resume, job_description, catalog=catalog)
    except (FileNotFoundError, InvalidResumeStructureError, ValueError) as e:
        # Nothing is saved on failure
        _log_error(f"Analysis failed: {e}")
        typer.secho(f"ERROR: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    log_analysis_result(resume_file.stem, result, time.time() - start)

    items = None
    if breakdown:
        items = score_breakdown(
            resume, result.keywords, result.missing_keywords, result.formatting_issues
        )

    typer.echo(
        format_analysis_report(result, breakdown=items, title=f"{resume_file.name} vs {job_file.name}")
    )

    if save:
        try:
            save_last_analysis(result, job_description, cache=AnalysisCache(cache_path))
        except (OSError, ValueError) as e:
            _log_error(f"Could not save analysis: {e}")
            typer.secho(f"ERROR: {e}", fg=typer.colors.RED, err=True)
            raise typer.Exit(code=1)


@app.command("last")
def last_command(
    cache_path: Optional[Path] = typer.Option(None, "--cache", help="Analysis cache file"),
):
    """Show the most recently saved analysis."""
    try:
        cached = load_last_analysis(AnalysisCache(cache_path))
    except ValueError as e:
        typer.secho(f"ERROR: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if cached is None:
        typer.secho("No saved analysis", fg=typer.colors.YELLOW, err=True)
        raise typer.Exit(code=1)

    result, job_description, saved_at = cached
    title = "Last analysis"
    if saved_at:
        title += f" ({format_timestamp(saved_at)}, {format_timestamp(saved_at, relative=True)})"
    typer.echo(format_analysis_report(result, title=title))
    typer.echo(f"\nJob description: {len(job_description)} characters")


@app.command("clear-cache")
def clear_cache_command(
    cache_path: Optional[Path] = typer.Option(None, "--cache", help="Analysis cache file"),
):
    """Forget the saved analysis."""
    AnalysisCache(cache_path).clear()
    typer.secho("Cleared saved analysis", fg=typer.colors.GREEN)


@app.command("catalog")
def catalog_command(
    catalog_path: Optional[Path] = typer.Option(
        None, "--catalog", "-c", help="Keyword catalog YAML (default: packaged catalog)"
    ),
    show_keywords: bool = typer.Option(False, "--keywords", "-k", help="List every keyword"),
):
    """List keyword catalog groups and keyword counts."""
    catalog = _load_catalog(catalog_path)

    typer.secho(f"\n{len(catalog.groups)} group(s), {len(catalog)} keyword(s)", bold=True)
    for group in catalog.groups:
        keywords = catalog.keywords_for(group)
        typer.echo(f"  {group}: {len(keywords)}")
        if show_keywords:
            typer.echo(f"    {', '.join(keywords)}")


if __name__ == "__main__":
    app()
