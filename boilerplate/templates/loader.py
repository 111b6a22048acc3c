"""
Template record loader: <templates_root>/<group>/*.json → TemplateDefinition.

Rules:
- missing templates directory → NotFoundError (fatal)
- unparseable record → RecordDiagnostic, record skipped (not fatal)
- non-recursive; records sorted by file name
"""

import json
import logging
from pathlib import Path

from boilerplate.domain.constants import TEMPLATE_RECORD_GLOB
from boilerplate.domain.errors import ErrorCodes, NotFoundError, RecordParseError
from boilerplate.domain.schemas import LoadResult, RecordDiagnostic, TemplateDefinition

logger = logging.getLogger(__name__)


def get_group_path(templates_root: Path, group: str | None) -> Path:
    """
    Directory holding the records of a group.

    An empty group is the root itself.
    """
    if not group:
        return templates_root
    return templates_root / group


def parse_template_record(record_path: Path) -> TemplateDefinition:
    """
    Deserialize a single template record.

    Args:
        record_path: *.json file

    Returns:
        TemplateDefinition

    Raises:
        RecordParseError: unreadable, invalid JSON, not an object, bad field types
    """
    try:
        data = json.loads(record_path.read_text(encoding="utf-8-sig"))
    except (OSError, UnicodeDecodeError) as e:
        raise RecordParseError(
            ErrorCodes.RECORD_PARSE_ERROR,
            f"cannot read record: {e}",
            path=str(record_path),
        ) from e
    except json.JSONDecodeError as e:
        raise RecordParseError(
            ErrorCodes.RECORD_PARSE_ERROR,
            f"invalid JSON: {e}",
            path=str(record_path),
        ) from e

    if not isinstance(data, dict):
        raise RecordParseError(
            ErrorCodes.RECORD_PARSE_ERROR,
            f"record must be a JSON object, got {type(data).__name__}",
            path=str(record_path),
        )

    try:
        return TemplateDefinition.from_dict(data, source=record_path)
    except TypeError as e:
        raise RecordParseError(
            ErrorCodes.RECORD_PARSE_ERROR,
            str(e),
            path=str(record_path),
        ) from e


def load_template_definitions(templates_root: Path, group: str | None = "") -> LoadResult:
    """
    Load every template record of a group.

    Args:
        templates_root: templates root directory
        group: subfolder name ("" → root)

    Returns:
        LoadResult (definitions + diagnostics for skipped records)

    Raises:
        NotFoundError: TEMPLATES_DIR_NOT_FOUND
    """
    templates_path = get_group_path(templates_root, group)
    logger.info(f"Looking for templates in: {templates_path}")

    if not templates_path.is_dir():
        raise NotFoundError(
            ErrorCodes.TEMPLATES_DIR_NOT_FOUND,
            f"Templates directory not found: {templates_path}",
            path=str(templates_path),
            group=group or "",
        )

    record_files = sorted(
        p for p in templates_path.glob(TEMPLATE_RECORD_GLOB) if p.is_file()
    )
    logger.info(f"Found {len(record_files)} template file(s).")

    result = LoadResult()
    for record_path in record_files:
        logger.debug(f"Reading template file: {record_path}")
        try:
            definition = parse_template_record(record_path)
        except RecordParseError as e:
            logger.warning(f"Skipping template record {record_path.name}: {e.message}")
            result.diagnostics.append(
                RecordDiagnostic(source=record_path, code=e.code, message=e.message)
            )
            continue
        result.definitions.append(definition)

    return result
