"""
Generation plan builder.

Merges three layers into GenerationTasks:
- ApplicationSettings → templates root
- TemplateDefinition  → base name, extension, default output dir, body
- UserInput           → group, prefix/suffix, output override, variables
"""

import logging
from pathlib import Path

from boilerplate.core.settings import resolve_templates_root
from boilerplate.domain.schemas import (
    ApplicationSettings,
    GenerationPlan,
    GenerationTask,
    TemplateDefinition,
    UserInput,
)
from boilerplate.templates.loader import load_template_definitions
from boilerplate.templates.paths import resolve_output_directory

logger = logging.getLogger(__name__)


def compose_file_name(base_name: str, prefix: str | None, suffix: str | None) -> str:
    """prefix + base + suffix; absent parts are empty."""
    return f"{prefix or ''}{base_name}{suffix or ''}"


def build_task(
    definition: TemplateDefinition,
    user_input: UserInput,
    cwd: Path | None = None,
) -> GenerationTask:
    """Merge one template definition with the user input."""
    return GenerationTask(
        file_name=compose_file_name(
            definition.file_name,
            user_input.file_name_prefix,
            user_input.file_name_suffix,
        ),
        file_extension=definition.file_extension,
        resolved_output_directory=resolve_output_directory(
            user_input.output_directory_base_path,
            definition.output_directory,
            cwd=cwd,
        ),
        template=definition.template,
        variables=user_input.variables,
    )


def build_generation_plan(
    app_settings: ApplicationSettings | None,
    user_input: UserInput,
    base_dir: Path | None = None,
    cwd: Path | None = None,
) -> GenerationPlan:
    """
    Build the list of files to generate.

    Args:
        app_settings: loaded settings, or None for defaults
        user_input: parsed command-line input
        base_dir: application base directory when app_settings is None
        cwd: working directory for relative output paths (default: Path.cwd())

    Returns:
        GenerationPlan (empty when the group holds no records)

    Raises:
        NotFoundError: templates directory missing
    """
    templates_root = resolve_templates_root(app_settings, base_dir=base_dir)
    loaded = load_template_definitions(templates_root, user_input.group)

    tasks = [build_task(d, user_input, cwd=cwd) for d in loaded.definitions]
    logger.info(f"Found {len(tasks)} template(s) to process.")

    return GenerationPlan(tasks=tasks, diagnostics=loaded.diagnostics)
