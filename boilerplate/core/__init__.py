"""
Core layer: settings, run log, atomic IO.
"""

from .fileio import atomic_write_json, atomic_write_text
from .ids import generate_run_id
from .logging import (
    complete_run_log,
    configure_logging,
    create_run_log,
    emit_warning,
    record_output,
    save_run_log,
)
from .settings import (
    default_base_dir,
    load_application_settings,
    resolve_templates_root,
)

__all__ = [
    # fileio
    "atomic_write_text",
    "atomic_write_json",
    # ids
    "generate_run_id",
    # logging
    "configure_logging",
    "create_run_log",
    "emit_warning",
    "record_output",
    "complete_run_log",
    "save_run_log",
    # settings
    "default_base_dir",
    "load_application_settings",
    "resolve_templates_root",
]
