"""
Command-line interface for the template-based file generator.

Usage:
    boilerplate [-g GROUP] [-o OUTPUT] [-p PREFIX] [-s SUFFIX] [-vs K=V,K=V]

Examples:
    boilerplate -g cqrs-query -vs QueryName=GetUser
    boilerplate -g cqrs-query -o src/Users -vs QueryName=GetUser
    boilerplate -g cqrs-query -p Get -s V2 -vs QueryName=GetUser --dry-run
"""

import argparse
import logging
import sys
from pathlib import Path

from boilerplate import __version__
from boilerplate.core.logging import (
    complete_run_log,
    configure_logging,
    create_run_log,
    emit_warning,
    record_output,
    save_run_log,
)
from boilerplate.core.settings import default_base_dir, load_application_settings
from boilerplate.domain.errors import BoilerplateError, ErrorCodes, UserInputError
from boilerplate.domain.schemas import GenerationPlan, RunLog, UserInput
from boilerplate.templates.emitter import emit
from boilerplate.templates.paths import last_path_segment
from boilerplate.templates.planner import build_generation_plan
from boilerplate.templates.substitution import unresolved_placeholders

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="boilerplate",
        description="Template-based file generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  boilerplate -g cqrs-query -vs QueryName=GetUser\n"
            "  boilerplate -g cqrs-query -o src/Users -vs QueryName=GetUser\n"
        ),
    )

    parser.add_argument("--group", "-g", default="",
                        help="Template group (subfolder under templates)")
    parser.add_argument("--output", "-o",
                        help="Base output directory for generated files")
    parser.add_argument("--prefix", "-p", "-fn", dest="prefix",
                        help="Prefix for generated file names "
                             "(default: last folder of --output, if given)")
    parser.add_argument("--suffix", "-s",
                        help="Suffix for generated file names")
    parser.add_argument("--vars", "-vs", dest="vars",
                        help="Comma-separated key=value pairs for template variables")
    parser.add_argument("--dry-run", action="store_true",
                        help="Show the files that would be generated, write nothing")
    parser.add_argument("--run-log", type=Path, metavar="DIR",
                        help="Save a JSON run log into DIR")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Debug logging")
    parser.add_argument("--version", action="version",
                        version=f"%(prog)s {__version__}")

    return parser


# =============================================================================
# User Input
# =============================================================================


def parse_variables(raw: str | None) -> dict[str, str]:
    """
    Parse "k=v,k=v" into an ordered mapping.

    - empty entries are ignored
    - split on the first "=" only ("a=b=c" → {"a": "b=c"})
    - entries without "=" are ignored

    Raises:
        UserInputError: DUPLICATE_VARIABLE
    """
    variables: dict[str, str] = {}
    if not raw or not raw.strip():
        return variables

    for entry in raw.split(","):
        if not entry:
            continue
        parts = entry.split("=", 1)
        if len(parts) != 2:
            logger.debug(f"Ignoring variable without '=': {entry!r}")
            continue
        key, value = parts
        if key in variables:
            raise UserInputError(
                ErrorCodes.DUPLICATE_VARIABLE,
                f"Variable '{key}' is given more than once",
                key=key,
            )
        variables[key] = value

    return variables


def parse_user_input(
    group: str | None,
    output: str | None,
    prefix: str | None,
    suffix: str | None,
    vars_: str | None,
) -> UserInput:
    """
    Build UserInput from option values.

    Without an explicit prefix, the last folder of --output is used.
    """
    if prefix is None and output:
        prefix = last_path_segment(output)

    user_input = UserInput(
        group=group or "",
        file_name_prefix=prefix,
        file_name_suffix=suffix,
        output_directory_base_path=output,
        variables=parse_variables(vars_),
    )

    variables = ", ".join(f"{k}={v}" for k, v in user_input.variables.items())
    logger.debug(
        f"User input parsed: group={user_input.group!r} "
        f"output={user_input.output_directory_base_path!r} "
        f"prefix={user_input.file_name_prefix!r} "
        f"suffix={user_input.file_name_suffix!r} variables={variables}"
    )
    return user_input


# =============================================================================
# Run
# =============================================================================


def _record_diagnostics(plan: GenerationPlan, run_log: RunLog) -> None:
    for diagnostic in plan.diagnostics:
        emit_warning(
            run_log,
            code=ErrorCodes.RECORD_SKIPPED,
            source=str(diagnostic.source),
            message=diagnostic.message,
        )


def generate(
    user_input: UserInput,
    run_log: RunLog,
    base_dir: Path,
    dry_run: bool = False,
) -> GenerationPlan:
    """
    Load settings, build the plan and emit every task.

    Args:
        user_input: parsed input
        run_log: receives warnings and written paths
        base_dir: application base directory
        dry_run: print the plan instead of writing

    Returns:
        the executed plan

    Raises:
        BoilerplateError: any fatal error; files already written stay on disk
    """
    logger.info("Reading application settings...")
    app_settings = load_application_settings(base_dir)

    logger.info("Loading template settings...")
    plan = build_generation_plan(app_settings, user_input, base_dir=base_dir)
    _record_diagnostics(plan, run_log)

    for task in plan:
        for name in unresolved_placeholders(task.template, task.variables):
            logger.warning(f"{task.output_filename}: no value for placeholder {{@{name}}}")
            emit_warning(
                run_log,
                code=ErrorCodes.UNRESOLVED_PLACEHOLDER,
                source=task.output_filename,
                message=f"no value for placeholder {{@{name}}}",
            )

        if dry_run:
            print(task.resolved_output_directory / task.output_filename)
            continue

        logger.info(
            f"Generating file: {task.output_filename} in {task.resolved_output_directory}"
        )
        record_output(run_log, emit(task, base_dir=base_dir))

    return plan


def main(argv: list[str] | None = None) -> int:
    """Run the CLI. Returns the exit code."""
    parser = build_parser()
    opts = parser.parse_args(argv)

    configure_logging(opts.verbose)
    logger.info("Starting template-based file generator...")

    run_log = create_run_log(opts.group or "", dry_run=opts.dry_run)
    exit_code = 0
    try:
        user_input = parse_user_input(
            opts.group, opts.output, opts.prefix, opts.suffix, opts.vars
        )
        generate(user_input, run_log, default_base_dir(), dry_run=opts.dry_run)
    except BoilerplateError as e:
        print(f"Error: {e}", file=sys.stderr)
        complete_run_log(run_log, success=False, error_code=e.code, error_context=e.to_dict())
        exit_code = 1
    else:
        complete_run_log(run_log, success=True)
        logger.info("File generation complete.")

    if opts.run_log is not None:
        log_path = save_run_log(run_log, opts.run_log)
        logger.info(f"Run log saved: {log_path}")

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
