"""
File emitter: GenerationTask → file on disk.

Rules:
- output directory starting with "." → joined with the application base dir
- directory tree created if missing
- existing files are overwritten, no backup
- OSError → EmitError (aborts the run; earlier files are kept)
"""

import logging
from pathlib import Path

from boilerplate.core.fileio import atomic_write_text
from boilerplate.core.settings import default_base_dir
from boilerplate.domain.errors import EmitError, ErrorCodes
from boilerplate.domain.schemas import GenerationTask
from boilerplate.templates.substitution import substitute

logger = logging.getLogger(__name__)


def emit_directory(task: GenerationTask, base_dir: Path | None = None) -> Path:
    """
    Final directory for a task.

    A leading "." is resolved against the application base directory rather
    than the working directory. pathlib drops a leading "./", so only names
    such as ".generated" or "../shared" take this branch.
    """
    output_dir = task.resolved_output_directory
    if str(output_dir).startswith("."):
        if base_dir is None:
            base_dir = default_base_dir()
        return base_dir / output_dir
    return output_dir


def emit(task: GenerationTask, base_dir: Path | None = None) -> Path:
    """
    Substitute variables and write the file.

    Args:
        task: resolved generation task
        base_dir: application base directory for "."-relative outputs

    Returns:
        path of the written file

    Raises:
        EmitError: EMIT_FAILED
    """
    content = substitute(task.template, task.variables)
    output_dir = emit_directory(task, base_dir)
    file_path = output_dir / task.output_filename

    try:
        if not output_dir.exists():
            logger.info(f"Creating output directory: {output_dir}")
        output_dir.mkdir(parents=True, exist_ok=True)
        atomic_write_text(file_path, content)
    except OSError as e:
        raise EmitError(
            ErrorCodes.EMIT_FAILED,
            f"Cannot write {file_path}: {e.strerror or e}",
            path=str(file_path),
        ) from e

    logger.info(f"File written: {file_path}")
    return file_path
