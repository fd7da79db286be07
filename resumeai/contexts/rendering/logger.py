"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

import os
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

from resumeai.utils.logger import setup_logger as _setup_logger

load_dotenv()

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path) -> Path:
    """
    Setup logger for rendering context.

    Configures loguru with provenance tracking and rendering-specific context.

    Args:
        log_dir: Directory for this export session

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        extra_provenance={"Results path": os.getenv("RESULTS_PATH", "outs/results")},
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_export_start(name: str, layout_name: str, backend_name: str) -> None:
    """Log start of an export with context."""
    _log_info(f"Exporting: {name}")
    _log_debug(f"  Layout: {layout_name}")
    _log_debug(f"  Backend: {backend_name}")


def log_export_result(name: str, result) -> None:
    """
    Log export outcome.

    Args:
        name: Resume display name
        result: ExportResult from export_resume()
    """
    if result.printed:
        _log_success(f"{name}: sent to print ({result.elapsed_time:.2f}s)")
    else:
        _log_error(f"{name}: saved but not printed ({result.elapsed_time:.2f}s)")
        if result.error:
            _log_error(f"  Reason: {result.error}")
    if result.output_path:
        _log_debug(f"  Document: {result.output_path}")
    _log_debug(f"  Record: {result.record['id']}")
