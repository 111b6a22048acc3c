"""
Data schemas for the generator.

Rules:
- entities are built once per invocation and never mutated afterwards
- GenerationTask.file_extension is never empty
- GenerationTask.variables is a read-only copy, one per task
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any

from boilerplate.domain.constants import DEFAULT_FILE_EXTENSION
from boilerplate.domain.errors import ConfigurationError, ErrorCodes

# =============================================================================
# Configuration Layers
# =============================================================================

@dataclass(frozen=True)
class ApplicationSettings:
    """
    Application-level settings (appsettings.json).

    Passed explicitly to the plan builder; there is no global instance.
    """
    base_dir: Path
    templates_folder_path: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any], base_dir: Path) -> "ApplicationSettings":
        """
        Raises:
            ConfigurationError: templatesFolderPath present but not a string
        """
        folder = data.get("templatesFolderPath")
        if folder is not None and not isinstance(folder, str):
            raise ConfigurationError(
                ErrorCodes.CONFIG_INVALID,
                "templatesFolderPath must be a string",
                found=type(folder).__name__,
            )
        return cls(
            base_dir=base_dir,
            templates_folder_path=folder or None,
        )


@dataclass(frozen=True)
class UserInput:
    """Options given on the command line, parsed once per invocation."""
    group: str = ""
    file_name_prefix: str | None = None
    file_name_suffix: str | None = None
    output_directory_base_path: str | None = None
    variables: Mapping[str, str] = field(default_factory=dict)


def normalize_extension(extension: str | None) -> str:
    """
    Normalize a file extension.

    - None / "" → "txt"
    - ".cs" → "cs" (one leading dot stripped)
    """
    if not extension:
        return DEFAULT_FILE_EXTENSION
    if extension.startswith("."):
        extension = extension[1:]
    return extension or DEFAULT_FILE_EXTENSION


@dataclass(frozen=True)
class TemplateDefinition:
    """One template record (*.json) found in the templates directory."""
    file_name: str
    file_extension: str = DEFAULT_FILE_EXTENSION
    output_directory: str = ""
    template: str = ""
    source: Path | None = None  # record file, for diagnostics

    def __post_init__(self) -> None:
        object.__setattr__(self, "file_extension", normalize_extension(self.file_extension))

    @classmethod
    def from_dict(cls, data: dict[str, Any], source: Path | None = None) -> "TemplateDefinition":
        """
        Build from a deserialized record.

        Keys are matched case-insensitively, so both ``fileName`` and
        ``FileName`` are accepted.

        Raises:
            TypeError: a field is present but not a string
        """
        lowered = {str(k).lower(): v for k, v in data.items()}

        def _text(key: str, default: str = "") -> str:
            value = lowered.get(key.lower())
            if value is None:
                return default
            if not isinstance(value, str):
                raise TypeError(f"field '{key}' must be a string, got {type(value).__name__}")
            return value

        return cls(
            file_name=_text("fileName"),
            file_extension=_text("fileExtension", DEFAULT_FILE_EXTENSION),
            output_directory=_text("outputDirectory"),
            template=_text("template"),
            source=source,
        )


# =============================================================================
# Loader Results
# =============================================================================

@dataclass(frozen=True)
class RecordDiagnostic:
    """A template record that was skipped."""
    source: Path
    code: str
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "source": str(self.source),
            "code": self.code,
            "message": self.message,
        }


@dataclass
class LoadResult:
    """Definitions that loaded, plus diagnostics for the ones that did not."""
    definitions: list[TemplateDefinition] = field(default_factory=list)
    diagnostics: list[RecordDiagnostic] = field(default_factory=list)


# =============================================================================
# Generation Plan
# =============================================================================

@dataclass(frozen=True)
class GenerationTask:
    """
    Fully resolved unit of work for one output file.

    UserInput + TemplateDefinition + ApplicationSettings merged.
    """
    file_name: str
    file_extension: str
    resolved_output_directory: Path
    template: str
    variables: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        object.__setattr__(self, "file_extension", normalize_extension(self.file_extension))
        # per-task copy, insertion order preserved
        object.__setattr__(self, "variables", MappingProxyType(dict(self.variables)))

    @property
    def output_filename(self) -> str:
        return f"{self.file_name}.{self.file_extension}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "file_name": self.file_name,
            "file_extension": self.file_extension,
            "resolved_output_directory": str(self.resolved_output_directory),
            "variables": dict(self.variables),
        }


@dataclass
class GenerationPlan:
    """Tasks to emit, in order, plus loader diagnostics."""
    tasks: list[GenerationTask] = field(default_factory=list)
    diagnostics: list[RecordDiagnostic] = field(default_factory=list)

    def __iter__(self) -> Iterator[GenerationTask]:
        return iter(self.tasks)

    def __len__(self) -> int:
        return len(self.tasks)


# =============================================================================
# Run Log Schemas
# =============================================================================

@dataclass
class WarningLog:
    """
    Warning event.

    Required context: level, code, source, message
    """
    level: str = "warning"
    code: str = ""
    source: str = ""
    message: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "level": self.level,
            "code": self.code,
            "source": self.source,
            "message": self.message,
        }


@dataclass
class RunLog:
    """
    Run log.

    One per invocation: what was generated, what was skipped, how it ended.
    """
    run_id: str
    group: str
    started_at: str  # ISO 8601
    finished_at: str | None = None
    result: str = "pending"  # pending, success, failed
    dry_run: bool = False

    # Events
    warnings: list[WarningLog] = field(default_factory=list)
    outputs: list[str] = field(default_factory=list)

    # Error (if failed)
    error_code: str | None = None
    error_context: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "run_id": self.run_id,
            "group": self.group,
            "started_at": self.started_at,
            "finished_at": self.finished_at,
            "result": self.result,
            "dry_run": self.dry_run,
            "warnings": [w.to_dict() for w in self.warnings],
            "outputs": list(self.outputs),
            "error_code": self.error_code,
            "error_context": self.error_context,
        }
