"""
Atomic file writes.

Behaviour:
- no partial files: write to a temp file in the same directory, then rename
- an existing file at the target path is replaced
- fsync failures are logged and ignored
- the temp file is removed if anything fails
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def _fsync_dir(dir_path: Path) -> None:
    """
    fsync a directory where the platform supports it.

    Needed for the rename entry itself to be durable. Mostly effective on
    Linux; unsupported elsewhere.
    """
    try:
        dir_fd = os.open(str(dir_path), os.O_RDONLY | os.O_DIRECTORY)
        try:
            os.fsync(dir_fd)
        finally:
            os.close(dir_fd)
    except (OSError, AttributeError) as e:
        logger.debug(f"Directory fsync failed for {dir_path}: {e}")


def atomic_write_text(path: Path, content: str) -> None:
    """
    Write text atomically (UTF-8).

    The parent directory must already exist.

    Args:
        path: target file
        content: text to write

    Raises:
        OSError: temp file creation, write or rename failed
    """
    dir_path = path.parent

    temp_path = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            dir=dir_path,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
            newline="",
        ) as f:
            temp_path = Path(f.name)
            f.write(content)
            f.flush()
            try:
                os.fsync(f.fileno())
            except OSError as e:
                logger.warning(
                    f"File fsync failed for {path}: {e}. "
                    f"Data may not be durable on power loss."
                )

        os.replace(temp_path, path)
        _fsync_dir(dir_path)

    except Exception:
        if temp_path and temp_path.exists():
            try:
                temp_path.unlink()
            except OSError:
                logger.warning(f"Failed to remove temp file {temp_path}")
        raise


def atomic_write_json(path: Path, data: dict[str, Any]) -> None:
    """
    Write JSON atomically, creating the parent directory if needed.

    Args:
        path: target file
        data: JSON-serializable mapping
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    atomic_write_text(path, json.dumps(data, indent=2, ensure_ascii=False))
