"""
Loguru setup shared by the contexts.

Each analysis session gets its own log directory holding `<context>.log`.
Context wrappers (contexts/<context>/logger.py) call setup_logger() once and
then log through their prefixed helpers.
"""

import sys
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv
from loguru import logger

from atscope import __version__

load_dotenv()

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"

LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[Dict[str, object]] = None,
    level_colors: Optional[Dict[str, str]] = None,
    console: bool = True,
) -> Path:
    """
    Replace all loguru sinks with a DEBUG file sink and, optionally, an INFO
    stderr sink, then write the session header.

    Args:
        context_name: Log file stem (e.g., "target")
        log_dir: Session directory, created if missing
        extra_provenance: Additional header lines (e.g., the keyword catalog path)
        level_colors: Console color overrides per level
        console: Add the stderr sink; the CLI turns this off so stdout and
            stderr carry only the report and error lines

    Returns:
        Path to the log file
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    for level_name, color in {**LEVEL_COLORS, **(level_colors or {})}.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    if console:
        logger.add(sys.stderr, format=CONSOLE_FORMAT, level="INFO", colorize=True)

    log_provenance(extra_provenance)
    return log_file


def log_provenance(extra_context: Optional[Dict[str, object]] = None) -> None:
    """Write the session header: atscope version, command line, cwd, Python version."""
    lines = {
        "atscope": __version__,
        "Command": " ".join(sys.argv),
        "Working directory": Path.cwd(),
        "Python": sys.version.split()[0],
        **(extra_context or {}),
    }

    logger.info("=" * 80)
    for key, value in lines.items():
        logger.info(f"{key}: {value}")
    logger.info("=" * 80)
