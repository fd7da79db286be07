"""
Tier 1 (detailed) logging setup for resumeai sessions.

One loguru configuration per CLI session: a DEBUG log file inside a
timestamped session directory plus a colorized console stream. Each context
keeps its own prefixed wrappers in contexts/{context}/logger.py.
"""

import os
import sys
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

from resumeai import __version__
from resumeai.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))
CONSOLE_LOG_LEVEL = os.getenv("RESUMEAI_LOG_LEVEL", "INFO")

LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "<dim>{time:HH:mm:ss}</dim> | <level>{level: <7}</level> | <level>{message}</level>"


def session_log_dir(session_kind: str) -> Path:
    """Fresh session directory, e.g. outs/logs/export_20261019_101500."""
    return LOGS_PATH / f"{session_kind}_{now()}"


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: dict = None,
    level_colors: dict = None,
) -> Path:
    """
    Route loguru output to <log_dir>/<context_name>.log and the console.

    Replaces any handlers configured earlier in the process, then writes the
    provenance header.

    Args:
        context_name: Context identifier ("template", "edit", "render")
        log_dir: Session directory (created if missing)
        extra_provenance: Additional key-value pairs for the provenance header
        level_colors: Overrides of LEVEL_COLORS (e.g., {"INFO": "<cyan>"})

    Returns:
        Path to log file

    Example:
        log_file = setup_logger(
            context_name="render",
            log_dir=session_log_dir("export"),
            extra_provenance={"Layout": "Classic ATS"},
        )
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()

    for level_name, color in {**LEVEL_COLORS, **(level_colors or {})}.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=CONSOLE_LOG_LEVEL, colorize=True)

    log_provenance({"Context": context_name, **(extra_provenance or {})})
    return log_file


def log_provenance(extra_context: dict = None) -> None:
    """
    Write the provenance header: command line, working directory, versions,
    and any extra key-value pairs.
    """
    logger.info("=" * 80)
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")
    logger.info(f"Python: {sys.version.split()[0]} | resumeai: {__version__}")

    for key, value in (extra_context or {}).items():
        logger.info(f"{key}: {value}")

    logger.info("=" * 80)
