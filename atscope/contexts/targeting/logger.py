"""
Targeting context logger.

Provides logging interface for targeting context with automatic [target] prefix.
All targeting modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from atscope.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[target]"


def setup_targeting_logger(log_dir: Path, catalog_path: Path = None, console: bool = True) -> Path:
    """
    Setup logger for targeting context.

    Args:
        log_dir: Directory for this analysis session
        catalog_path: Keyword catalog in use, recorded in the provenance header
        console: If False, log to file only

    Returns:
        Path to log file
    """
    extra = {"Keyword catalog": catalog_path} if catalog_path else None
    return _setup_logger(context_name="target", log_dir=log_dir, extra_provenance=extra, console=console)


# Wrapper functions with automatic [target] prefix


def _log_info(message: str) -> None:
    """Log info message with [target] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [target] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [target] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [target] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [target] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level targeting-specific logging helpers


def log_analysis_start(resume_name: str, job_name: str, log_file: Path) -> None:
    """Log start of an analysis run with context."""
    _log_info(f"Analyzing {resume_name} against {job_name}")
    _log_info(f"Log file: {log_file}")


def log_analysis_result(resume_name: str, result, elapsed_time: float) -> None:
    """
    Log analysis result summary.

    Args:
        resume_name: Resume identifier
        result: AnalysisResult from analyze_resume()
        elapsed_time: Time taken
    """
    _log_success(f"{resume_name}: score {result.score}/100 ({elapsed_time:.2f}s)")
    _log_info(
        f"  Keywords: {len(result.matched_keywords)} matched, {len(result.missing_keywords)} missing"
    )
    if result.formatting_issues:
        _log_warning(f"  Formatting issues: {len(result.formatting_issues)}")
    _log_debug(f"  Recommendations: {len(result.recommendations)}")
