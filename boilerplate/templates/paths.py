"""
Output path resolution.

Priority:
1. user output base, absolute → as is
2. user output base, relative → cwd / base
3. template output dir, absolute → as is
4. template output dir, relative → cwd / dir
"""

import os
from pathlib import Path


def resolve_output_directory(
    user_output_base: str | None,
    template_output_dir: str,
    cwd: Path | None = None,
) -> Path:
    """
    Compute the absolute output directory for one file.

    Pure function: nothing is created or checked on disk.

    Args:
        user_output_base: -o/--output value, if any
        template_output_dir: outputDirectory of the template record
        cwd: working directory (default: Path.cwd())

    Returns:
        absolute directory path
    """
    if cwd is None:
        cwd = Path.cwd()

    if user_output_base:
        user_path = Path(user_output_base)
        if user_path.is_absolute():
            return user_path
        return cwd / user_path

    template_path = Path(template_output_dir)
    if template_path.is_absolute():
        return template_path
    return cwd / template_path


def last_path_segment(path: str) -> str:
    """
    Last segment of a path, ignoring trailing separators.

    "out/Users/" → "Users"
    """
    separators = os.sep + (os.altsep or "")
    return os.path.basename(path.rstrip(separators))
