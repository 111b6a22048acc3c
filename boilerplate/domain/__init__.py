"""Domain layer: errors, schemas and constants."""

from .errors import (
    BoilerplateError,
    ConfigurationError,
    EmitError,
    ErrorCodes,
    NotFoundError,
    RecordParseError,
    UserInputError,
)
from .schemas import (
    ApplicationSettings,
    GenerationPlan,
    GenerationTask,
    LoadResult,
    RecordDiagnostic,
    RunLog,
    TemplateDefinition,
    UserInput,
)

__all__ = [
    # errors
    "BoilerplateError",
    "ConfigurationError",
    "NotFoundError",
    "RecordParseError",
    "UserInputError",
    "EmitError",
    "ErrorCodes",
    # schemas
    "ApplicationSettings",
    "UserInput",
    "TemplateDefinition",
    "RecordDiagnostic",
    "LoadResult",
    "GenerationTask",
    "GenerationPlan",
    "RunLog",
]
