"""
Run logging: console log setup, run log schema, events, warnings.

Warning context required: level, code, source, message
"""

import logging
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from boilerplate.core.fileio import atomic_write_json
from boilerplate.core.ids import generate_run_id
from boilerplate.domain.schemas import RunLog, WarningLog

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def configure_logging(verbose: bool = False) -> None:
    """
    Console logging for the CLI.

    Args:
        verbose: DEBUG instead of INFO
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        force=True,
    )


# =============================================================================
# Run Log Management
# =============================================================================


def create_run_log(group: str, dry_run: bool = False) -> RunLog:
    """
    Create a new RunLog.

    Args:
        group: template group of this run ("" for the root)
        dry_run: nothing will be written

    Returns:
        RunLog in "pending" state
    """
    now = datetime.now(UTC).isoformat()

    return RunLog(
        run_id=generate_run_id(),
        group=group,
        started_at=now,
        result="pending",
        dry_run=dry_run,
    )


def emit_warning(
    run_log: RunLog,
    code: str,
    source: str,
    message: str,
) -> None:
    """
    Record a warning event.

    Args:
        run_log: RunLog instance
        code: warning code (ErrorCodes.RECORD_SKIPPED, ...)
        source: record file or output file the warning is about
        message: human-readable message
    """
    run_log.warnings.append(
        WarningLog(
            level="warning",
            code=code,
            source=source,
            message=message,
        )
    )


def record_output(run_log: RunLog, path: Path) -> None:
    """Record a written file."""
    run_log.outputs.append(str(path))


def complete_run_log(
    run_log: RunLog,
    success: bool,
    error_code: str | None = None,
    error_context: dict[str, Any] | None = None,
) -> None:
    """
    Finish a RunLog.

    Args:
        run_log: RunLog instance
        success: whether the run succeeded
        error_code: error code (on failure)
        error_context: error context (on failure)
    """
    run_log.finished_at = datetime.now(UTC).isoformat()
    run_log.result = "success" if success else "failed"

    if not success:
        run_log.error_code = error_code
        run_log.error_context = error_context


def save_run_log(run_log: RunLog, logs_dir: Path) -> Path:
    """
    Save a RunLog as JSON.

    Args:
        run_log: RunLog instance
        logs_dir: target directory (created if missing)

    Returns:
        path of the saved file
    """
    log_path = logs_dir / f"run_{run_log.run_id}.json"
    atomic_write_json(log_path, run_log.to_dict())
    return log_path

